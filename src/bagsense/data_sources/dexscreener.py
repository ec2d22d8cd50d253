"""
DexScreener API client for BagSense.

Reference: https://docs.dexscreener.com/api/reference

All public endpoints – no API key required.  Every method degrades to
``None`` / ``[]`` instead of raising.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..models import TokenMetadata, TrendingToken
from ._http import async_http_get

logger = logging.getLogger(__name__)

_CHAIN = "solana"


class DexScreenerClient:
    """Async wrapper around the DexScreener REST API."""

    def __init__(self, base_url: str, timeout: int = 15) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    async def get_token_pairs(self, mint: str) -> list[dict[str, Any]]:
        """Return all Solana DEX pairs for a token mint."""
        data = await self._get(f"{self._base_url}/tokens/v1/{_CHAIN}/{mint}")
        if not isinstance(data, list):
            return []
        return [p for p in data if isinstance(p, dict)]

    async def get_token_metadata(self, mint: str) -> Optional[TokenMetadata]:
        """Return market data for *mint* from its deepest pair, or ``None``."""
        try:
            pairs = await self.get_token_pairs(mint)
            if not pairs:
                logger.info("No DexScreener pairs for %s", mint)
                return None
            return self.pairs_to_metadata(pairs)
        except Exception:
            logger.exception("DexScreener metadata lookup failed for %s", mint)
            return None

    async def get_latest_profiles(self) -> list[dict[str, Any]]:
        """Return the most recently created token profiles (all chains)."""
        data = await self._get(f"{self._base_url}/token-profiles/latest/v1")
        if not isinstance(data, list):
            return []
        return [p for p in data if isinstance(p, dict)]

    async def get_new_solana_tokens(self, limit: int = 10) -> list[TrendingToken]:
        """Collect up to *limit* freshly profiled Solana tokens with pair data.

        Profiles are walked in order; a profile whose pair lookup fails or
        comes back empty is skipped.
        """
        try:
            profiles = await self.get_latest_profiles()
        except Exception:
            logger.exception("DexScreener profile listing failed")
            return []

        tokens: list[TrendingToken] = []
        for profile in profiles:
            if len(tokens) >= limit:
                break
            address = profile.get("tokenAddress")
            if profile.get("chainId") != _CHAIN or not address:
                continue
            try:
                pairs = await self.get_token_pairs(address)
            except Exception:
                logger.exception("DexScreener pair lookup failed for %s", address)
                continue
            if pairs:
                tokens.append(self.pair_to_trending(address, pairs[0], profile))
        return tokens

    # ------------------------------------------------------------------
    # Conversion helpers (sync – pure data transforms)
    # ------------------------------------------------------------------

    @staticmethod
    def pairs_to_metadata(pairs: list[dict]) -> Optional[TokenMetadata]:
        """Build ``TokenMetadata`` from the pair with the highest USD liquidity."""
        if not pairs:
            return None
        best = max(
            pairs, key=lambda p: _safe_float((p.get("liquidity") or {}).get("usd")) or 0
        )
        base = best.get("baseToken") or {}
        info = best.get("info") or {}
        return TokenMetadata(
            name=base.get("name") or None,
            symbol=base.get("symbol") or None,
            logo_uri=info.get("imageUrl") or None,
            price=_safe_float(best.get("priceUsd")),
            decimals=9,
            market_cap=_nonzero(best.get("marketCap")) or _nonzero(best.get("fdv")),
            volume_24h=_nonzero((best.get("volume") or {}).get("h24")),
            liquidity=_nonzero((best.get("liquidity") or {}).get("usd")),
        )

    @staticmethod
    def pair_to_trending(
        address: str, pair: dict, profile: Optional[dict] = None
    ) -> TrendingToken:
        """Convert one DexScreener pair to a ``TrendingToken``."""
        base = pair.get("baseToken") or {}
        profile = profile or {}
        return TrendingToken(
            name=base.get("name") or profile.get("description") or "Unknown",
            symbol=base.get("symbol") or "???",
            address=address,
            price=_safe_float(pair.get("priceUsd")),
            price_change_24h=_nonzero((pair.get("priceChange") or {}).get("h24")),
            volume_24h=_nonzero((pair.get("volume") or {}).get("h24")),
            liquidity=_nonzero((pair.get("liquidity") or {}).get("usd")),
            market_cap=_nonzero(pair.get("marketCap")) or _nonzero(pair.get("fdv")),
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _get(self, url: str, params: dict | None = None) -> Optional[Any]:
        client = await self._get_client()
        return await async_http_get(client, url, params=params, label="DexScreener")


def _safe_float(val: Any) -> Optional[float]:
    """Try to cast *val* to float, returning ``None`` on failure."""
    if val is None or val == "":
        return None
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def _nonzero(val: Any) -> Optional[float]:
    """Like ``_safe_float`` but a zero reading is treated as unknown."""
    value = _safe_float(val)
    return value or None
