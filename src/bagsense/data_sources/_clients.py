"""
Singleton HTTP client management for BagSense.

Provides lazy-initialised clients for DexScreener and the bags.fm API.
This is the only place that reads ``config`` to construct them.

``init_clients`` / ``close_clients`` should be called at app startup/shutdown.
"""

from __future__ import annotations

import logging
from typing import Optional

from config import (
    BAGS_API_BASE_URL,
    BAGS_API_KEY,
    DEXSCREENER_BASE_URL,
    REQUEST_TIMEOUT,
)
from .bags import BagsClient
from .dexscreener import DexScreenerClient

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Module-level singletons (created once, reused)
# ---------------------------------------------------------------------------
_dex_client: Optional[DexScreenerClient] = None
_bags_client: Optional[BagsClient] = None


def get_dex_client() -> DexScreenerClient:
    global _dex_client
    if _dex_client is None:
        _dex_client = DexScreenerClient(
            base_url=DEXSCREENER_BASE_URL,
            timeout=REQUEST_TIMEOUT,
        )
    return _dex_client


def get_bags_client() -> BagsClient:
    global _bags_client
    if _bags_client is None:
        _bags_client = BagsClient(
            base_url=BAGS_API_BASE_URL,
            api_key=BAGS_API_KEY,
            timeout=REQUEST_TIMEOUT,
        )
        if not _bags_client.enabled:
            logger.warning("BAGS_API_KEY not set – creator and fee data disabled")
    return _bags_client


async def init_clients() -> None:
    """Eagerly create the singleton HTTP clients (called at startup)."""
    get_dex_client()
    get_bags_client()


async def close_clients() -> None:
    """Close singleton HTTP clients gracefully (called at shutdown)."""
    global _dex_client, _bags_client
    if _dex_client is not None:
        await _dex_client.close()
        _dex_client = None
    if _bags_client is not None:
        await _bags_client.close()
        _bags_client = None
