"""Tests for bagsense.formatter: token analysis and trending list rendering."""

from __future__ import annotations

import pytest

from bagsense.formatter import (
    format_price,
    format_token_analysis,
    format_trending_tokens,
    not_found_line,
)
from bagsense.models import TokenCreator, TokenMetadata, TrendingToken

from conftest import MINT

WALLET = "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"


def _creators(payload):
    return [TokenCreator.model_validate(c) for c in payload]


class TestFallback:

    def test_all_none_returns_single_line(self):
        out = format_token_analysis(MINT, None, None, None)
        assert out == (
            "Couldn't find data for token DezXAZ8z... - "
            "might be a new token or not on bags.fm yet."
        )
        assert out == not_found_line(MINT)

    def test_empty_fee_string_counts_as_missing(self):
        assert format_token_analysis(MINT, None, "", None) == not_found_line(MINT)

    def test_empty_creator_list_is_data(self):
        out = format_token_analysis(MINT, [], None, None)
        assert out.startswith("**Token Analysis: DezXAZ8z...B263**")
        assert "**Risk Score:** 7/10 (Risky)" in out


class TestHeader:

    def test_name_and_symbol(self):
        out = format_token_analysis(MINT, None, None, TokenMetadata(name="Bonk", symbol="BONK"))
        assert out.startswith("**Bonk** (BONK)\nMint: DezXAZ8z...B263\n\n")

    def test_symbol_only(self):
        out = format_token_analysis(MINT, None, None, TokenMetadata(symbol="BONK"))
        assert out.startswith("**Unknown Token** (BONK)")

    def test_name_only(self):
        out = format_token_analysis(MINT, None, None, TokenMetadata(name="Bonk"))
        assert out.startswith("**Bonk** (???)")

    def test_no_name_uses_truncated_mint(self):
        out = format_token_analysis(MINT, None, None, TokenMetadata(price=1.5))
        assert out.startswith("**Token Analysis: DezXAZ8z...B263**\n\n")


class TestPrice:

    @pytest.mark.parametrize(
        "price, expected",
        [
            (0.00000012345678, "$1.2346e-7"),
            (0.0000005, "$5.0000e-7"),
            (0.000001, "$0.000001"),
            (0.00123456, "$0.001235"),
            (0.01, "$0.0100"),
            (1.23456, "$1.2346"),
            (1.03125, "$1.0313"),
            (0.0, "$0.0000e+0"),
        ],
    )
    def test_format_price(self, price, expected):
        assert format_price(price) == expected

    def test_zero_price_is_still_shown(self):
        out = format_token_analysis(MINT, None, None, TokenMetadata(name="X", price=0.0))
        assert "**Price:**" in out


class TestMarketFigures:

    def test_suffixes(self):
        meta = TokenMetadata(
            name="Bonk",
            symbol="BONK",
            market_cap=850_000_000,
            liquidity=15_300,
            volume_24h=512,
        )
        out = format_token_analysis(MINT, None, None, meta)
        assert "**Market Cap:** $850.00M\n" in out
        assert "**Liquidity:** $15.3K\n" in out
        assert "**24h Volume:** $512\n" in out

    def test_exact_ties_round_up(self):
        meta = TokenMetadata(name="Bonk", liquidity=2_250, volume_24h=500.5)
        out = format_token_analysis(MINT, None, None, meta)
        assert "**Liquidity:** $2.3K\n" in out
        assert "**24h Volume:** $501\n" in out

    def test_missing_figures_are_omitted(self):
        out = format_token_analysis(MINT, None, None, TokenMetadata(name="Bonk"))
        assert "Market Cap" not in out
        assert "Liquidity" not in out
        assert "24h Volume" not in out


class TestCreatorBlock:

    def test_primary_creator_and_fee_split(self, creators_payload):
        out = format_token_analysis(MINT, _creators(creators_payload), None, None)
        assert "\n**Creator:** bonk_inu (@bonk_inu on twitter)\n" in out
        assert "**Wallet:** 9xQeWv...VFin\n" in out
        assert "**Royalty:** 1% (max - creator earns on every trade)\n" in out
        assert "\n**Fee Split:** Sharing 0.25% with 1 wallet(s)\n" in out
        assert "  - partner: 0.25%\n" in out

    def test_partial_royalty(self):
        creator = TokenCreator(username="dev", royalty_bps=50, is_creator=True, wallet=WALLET)
        out = format_token_analysis(MINT, [creator], None, None)
        assert "**Creator:** dev\n" in out
        assert "**Royalty:** 0.5% (creator earns on trades)\n" in out

    def test_zero_royalty(self):
        creator = TokenCreator(royalty_bps=0, is_creator=True, wallet=WALLET)
        out = format_token_analysis(MINT, [creator], None, None)
        assert "**Creator:** Unknown\n" in out
        assert "**Royalty:** 0% (creator gets nothing from trades)\n" in out

    def test_recipient_without_names_uses_wallet(self):
        creators = [
            TokenCreator(royalty_bps=100, is_creator=True, wallet=WALLET),
            TokenCreator(royalty_bps=100, is_creator=False, wallet="4Nd1mBQtrMJVYVfKf2PJy9NZ"),
        ]
        out = format_token_analysis(MINT, creators, None, None)
        assert "  - 4Nd1mB...: 1%\n" in out

    def test_no_primary_creator_skips_block(self):
        creators = [TokenCreator(royalty_bps=100, is_creator=False, wallet=WALLET)]
        out = format_token_analysis(MINT, creators, None, None)
        assert "**Creator:**" not in out
        assert "**Fee Split:**" not in out


class TestLifetimeFeesAndRisk:

    def test_lifetime_fees_in_sol(self):
        out = format_token_analysis(MINT, None, "1234567890", None)
        assert "\n**Lifetime Fees:** 1.2346 SOL\n" in out

    def test_zero_fees_string_is_rendered(self):
        out = format_token_analysis(MINT, None, "0", None)
        assert "**Lifetime Fees:** 0.0000 SOL" in out

    def test_unparseable_fees_are_skipped(self):
        out = format_token_analysis(MINT, None, "pending", None)
        assert "Lifetime Fees" not in out

    def test_ends_with_risk_block(self, creators_payload):
        out = format_token_analysis(
            MINT,
            _creators(creators_payload),
            "2000000000",
            TokenMetadata(name="Bonk", symbol="BONK", liquidity=60_000, volume_24h=20_000),
        )
        assert out.endswith(
            "\n**Risk Score:** 1/10 (Safe Play)\n"
            "Relatively lower risk based on available data\n"
        )


class TestTrendingTokens:

    def test_change_tie_rounds_up(self):
        token = TrendingToken(name="A", symbol="A", address="addr", price_change_24h=2.25)
        assert "   Price: N/A +2.3%\n" in format_trending_tokens([token])

    def test_empty(self):
        assert format_trending_tokens([]) == "No trending tokens found right now."

    def test_rendering(self):
        tokens = [
            TrendingToken(
                name="Bonk",
                symbol="BONK",
                address=MINT,
                price=0.0000123,
                price_change_24h=12.345,
                liquidity=15_000_000,
                market_cap=850_000_000,
            ),
            TrendingToken(
                name="Tiny",
                symbol="TINY",
                address="TinyMint1111111111111111111111111",
                price=0.0000000042,
                price_change_24h=-4.0,
                liquidity=750,
                market_cap=42_000,
            ),
            TrendingToken(name="Ghost", symbol="???", address="GhostMint"),
        ]
        out = format_trending_tokens(tokens)
        assert out.startswith("**Trending Solana Tokens:**\n\n")
        assert "1. **Bonk** (BONK)\n   Price: $0.000012 +12.3%\n" in out
        assert "   MC: $850.0M | Liq: $15000K\n" in out
        assert f"   `{MINT}`\n" in out
        assert "2. **Tiny** (TINY)\n   Price: $4.20e-9 -4.0%\n" in out
        assert "   MC: $42K | Liq: $750\n" in out
        assert "3. **Ghost** (???)\n   Price: N/A \n   MC: N/A | Liq: N/A\n" in out
        assert out.endswith("_Paste any address above for full analysis_")
