"""
Per-token data fan-out.

For one mint, the creator list, lifetime fees and DexScreener metadata are
requested concurrently.  Each call is isolated: an exception in one only
blanks that field of the resulting ``TokenSnapshot``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from .data_sources._clients import get_bags_client, get_dex_client
from .data_sources.bags import BagsClient
from .data_sources.dexscreener import DexScreenerClient
from .models import TokenSnapshot, TrendingToken

logger = logging.getLogger(__name__)


async def fetch_token_snapshot(
    mint: str,
    *,
    bags: Optional[BagsClient] = None,
    dex: Optional[DexScreenerClient] = None,
) -> TokenSnapshot:
    """Fetch creators, lifetime fees and metadata for *mint* in parallel."""
    bags = bags or get_bags_client()
    dex = dex or get_dex_client()

    creators, fees, metadata = await asyncio.gather(
        bags.get_token_creators(mint),
        bags.get_lifetime_fees(mint),
        dex.get_token_metadata(mint),
        return_exceptions=True,
    )
    snapshot = TokenSnapshot(
        mint=mint,
        creators=_unwrap(creators, "creators", mint),
        lifetime_fees=_unwrap(fees, "lifetime fees", mint),
        metadata=_unwrap(metadata, "metadata", mint),
    )
    logger.info(
        "Token %s: creators=%s fees=%s metadata=%s",
        mint,
        snapshot.creators is not None,
        snapshot.lifetime_fees is not None,
        snapshot.metadata is not None,
    )
    return snapshot


async def fetch_new_tokens(
    limit: int, *, dex: Optional[DexScreenerClient] = None
) -> list[TrendingToken]:
    """Return up to *limit* new Solana tokens, or ``[]`` on any failure."""
    dex = dex or get_dex_client()
    try:
        return await dex.get_new_solana_tokens(limit)
    except Exception:
        logger.exception("Fetching new Solana tokens failed")
        return []


def _unwrap(result: Any, what: str, mint: str) -> Any:
    if isinstance(result, BaseException):
        logger.warning("Fetching %s for %s raised %r", what, mint, result)
        return None
    return result
