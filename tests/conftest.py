"""Shared test fixtures for the BagSense test suite."""

from __future__ import annotations

import sys
import os

# Ensure src/ is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

MINT = "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"
OTHER_MINT = "7dmpjtmtkRNumctHAGbTrP4MQPHjX59M54aZAbvzpump"


@pytest.fixture
def anyio_backend():
    return "asyncio"


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_pairs():
    """Minimal DexScreener ``/tokens/v1/solana/<mint>`` response."""
    return [
        {
            "chainId": "solana",
            "dexId": "raydium",
            "baseToken": {"address": MINT, "name": "Bonk", "symbol": "BONK"},
            "info": {"imageUrl": "https://example.com/bonk.png"},
            "priceUsd": "0.00001234",
            "marketCap": 850000000,
            "fdv": 900000000,
            "volume": {"h24": 2500000},
            "priceChange": {"h24": -3.25},
            "liquidity": {"usd": 5000000},
        },
        {
            "chainId": "solana",
            "dexId": "orca",
            "baseToken": {"address": MINT, "name": "Bonk", "symbol": "BONK"},
            "info": {"imageUrl": "https://example.com/bonk-orca.png"},
            "priceUsd": "0.00001240",
            "marketCap": 851000000,
            "volume": {"h24": 7500000},
            "priceChange": {"h24": 1.5},
            "liquidity": {"usd": 15000000},
        },
    ]


@pytest.fixture
def creators_payload():
    """bags.fm ``creator/v3`` ``response`` list in its camelCase form."""
    return [
        {
            "username": "bonkdev",
            "pfp": "https://example.com/pfp.png",
            "royaltyBps": 100,
            "isCreator": True,
            "wallet": "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin",
            "provider": "twitter",
            "providerUsername": "bonk_inu",
        },
        {
            "username": "partner",
            "pfp": None,
            "royaltyBps": 25,
            "isCreator": False,
            "wallet": "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7D4xWLs4gDB4T",
            "provider": None,
            "providerUsername": None,
        },
    ]
