"""
bags.fm public API client for BagSense.

Reference: https://docs.bags.fm

Both endpoints require an ``x-api-key`` header and wrap their payload in
``{"success": bool, "response": ..., "error": str}``.  Without an API key
the client returns ``None`` for every lookup instead of calling upstream.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..models import TokenCreator
from ._http import async_http_get

logger = logging.getLogger(__name__)


class BagsClient:
    """Async wrapper around the bags.fm token-launch endpoints."""

    def __init__(self, base_url: str, api_key: str = "", timeout: int = 15) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Accept": "application/json", "x-api-key": self._api_key},
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    async def get_token_creators(self, mint: str) -> Optional[list[TokenCreator]]:
        """Return the creator and fee-split recipients of *mint*.

        Malformed entries are skipped one by one; the rest of the list is kept.
        """
        payload = await self._get_response("/token-launch/creator/v3", mint)
        if payload is None:
            return None
        if not isinstance(payload, list):
            logger.warning("bags.fm creators payload for %s is not a list", mint)
            return None
        creators: list[TokenCreator] = []
        for item in payload:
            try:
                creators.append(TokenCreator.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping malformed bags.fm creator for %s: %s", mint, exc)
        return creators

    async def get_lifetime_fees(self, mint: str) -> Optional[str]:
        """Return lifetime fees of *mint* as a raw lamport string."""
        payload = await self._get_response("/token-launch/lifetime-fees", mint)
        if payload is None:
            return None
        return str(payload)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _get_response(self, path: str, mint: str) -> Optional[Any]:
        """GET *path* for *mint* and unwrap the ``response`` envelope."""
        if not self.enabled:
            logger.debug("BAGS_API_KEY not set – skipping %s for %s", path, mint)
            return None
        try:
            client = await self._get_client()
            data = await async_http_get(
                client,
                f"{self._base_url}{path}",
                params={"tokenMint": mint},
                label="bags.fm",
            )
        except Exception:
            logger.exception("bags.fm call %s failed for %s", path, mint)
            return None
        if not isinstance(data, dict):
            return None
        if not data.get("success"):
            logger.warning("bags.fm error for %s: %s", path, data.get("error"))
            return None
        return data.get("response")
