"""Tests for the concurrent per-token fetch and the new-token listing."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from bagsense.market_data import fetch_new_tokens, fetch_token_snapshot
from bagsense.models import TokenCreator, TokenMetadata, TrendingToken

from conftest import MINT


def _bags(creators=None, fees=None):
    bags = MagicMock()
    bags.get_token_creators = AsyncMock(return_value=creators)
    bags.get_lifetime_fees = AsyncMock(return_value=fees)
    return bags


def _dex(metadata=None):
    dex = MagicMock()
    dex.get_token_metadata = AsyncMock(return_value=metadata)
    return dex


class TestFetchTokenSnapshot:

    @pytest.mark.asyncio
    async def test_all_sources(self):
        creators = [TokenCreator(username="dev", is_creator=True, royalty_bps=100)]
        meta = TokenMetadata(name="Bonk")
        bags, dex = _bags(creators, "1000"), _dex(meta)

        snap = await fetch_token_snapshot(MINT, bags=bags, dex=dex)

        assert snap.mint == MINT
        assert snap.creators == creators
        assert snap.lifetime_fees == "1000"
        assert snap.metadata == meta
        assert snap.has_data is True
        bags.get_token_creators.assert_awaited_once_with(MINT)
        bags.get_lifetime_fees.assert_awaited_once_with(MINT)
        dex.get_token_metadata.assert_awaited_once_with(MINT)

    @pytest.mark.asyncio
    async def test_one_failure_blanks_only_that_field(self):
        bags = _bags(fees="1000")
        bags.get_token_creators = AsyncMock(side_effect=RuntimeError("boom"))
        dex = _dex(TokenMetadata(name="Bonk"))

        snap = await fetch_token_snapshot(MINT, bags=bags, dex=dex)

        assert snap.creators is None
        assert snap.lifetime_fees == "1000"
        assert snap.metadata.name == "Bonk"

    @pytest.mark.asyncio
    async def test_everything_fails(self):
        bags = _bags()
        bags.get_token_creators = AsyncMock(side_effect=RuntimeError("a"))
        bags.get_lifetime_fees = AsyncMock(side_effect=TimeoutError())
        dex = _dex()
        dex.get_token_metadata = AsyncMock(side_effect=ValueError("c"))

        snap = await fetch_token_snapshot(MINT, bags=bags, dex=dex)

        assert snap.has_data is False

    @pytest.mark.asyncio
    async def test_empty_creator_list_is_data(self):
        snap = await fetch_token_snapshot(MINT, bags=_bags(creators=[]), dex=_dex())
        assert snap.creators == []
        assert snap.has_data is True

    @pytest.mark.asyncio
    async def test_empty_fee_string_is_not_data(self):
        snap = await fetch_token_snapshot(MINT, bags=_bags(fees=""), dex=_dex())
        assert snap.has_data is False


class TestFetchNewTokens:

    @pytest.mark.asyncio
    async def test_passes_limit(self):
        tokens = [TrendingToken(name="A", symbol="A", address="addr")]
        dex = MagicMock()
        dex.get_new_solana_tokens = AsyncMock(return_value=tokens)
        assert await fetch_new_tokens(5, dex=dex) == tokens
        dex.get_new_solana_tokens.assert_awaited_once_with(5)

    @pytest.mark.asyncio
    async def test_failure_returns_empty(self):
        dex = MagicMock()
        dex.get_new_solana_tokens = AsyncMock(side_effect=RuntimeError("down"))
        assert await fetch_new_tokens(10, dex=dex) == []
