"""Unit tests for bagsense.message_parser: address extraction & trending intent."""

from __future__ import annotations

import pytest

from bagsense.message_parser import extract_token_addresses, wants_trending

from conftest import MINT, OTHER_MINT


class TestExtractTokenAddresses:

    def test_single_address(self):
        assert extract_token_addresses(f"what about {MINT}?") == [MINT]

    def test_deduplicates_in_first_seen_order(self):
        text = f"{OTHER_MINT} vs {MINT} and again {OTHER_MINT}"
        assert extract_token_addresses(text) == [OTHER_MINT, MINT]

    def test_no_address(self):
        assert extract_token_addresses("gm, anything pumping?") == []

    def test_empty_text(self):
        assert extract_token_addresses("") == []

    def test_too_short_is_ignored(self):
        assert extract_token_addresses("A" * 31) == []

    def test_length_bounds(self):
        assert extract_token_addresses("A" * 32) == ["A" * 32]
        assert extract_token_addresses("B" * 44) == ["B" * 44]

    @pytest.mark.parametrize("bad", ["0", "O", "I", "l"])
    def test_excluded_characters_break_a_match(self, bad):
        # 20 + 1 + 20: neither half reaches 32 characters
        text = "A" * 20 + bad + "A" * 20
        assert extract_token_addresses(text) == []

    def test_long_run_is_split_like_a_global_scan(self):
        run = "C" * 50
        # first 44 chars match, the remaining 6 are too short
        assert extract_token_addresses(run) == ["C" * 44]

    def test_bags_url(self):
        text = f"https://bags.fm/token/{MINT}"
        assert extract_token_addresses(text) == [MINT]


class TestWantsTrending:

    @pytest.mark.parametrize(
        "text",
        [
            "what's TRENDING today",
            "what to buy rn",
            "anything good to buy?",
            "show me new tokens",
            "Show me tokens please",
            "can you recommend something",
            "top token this week?",
            "best token on sol",
            "whats hot",
            "what's hot",
        ],
    )
    def test_phrases(self, text):
        assert wants_trending(text) is True

    def test_scan_requires_token(self):
        assert wants_trending("scan memes") is False
        assert wants_trending("scan this token now") is True

    def test_token_alone_is_not_enough(self):
        assert wants_trending("is this token legit") is False

    def test_bags_requires_token_or_buy(self):
        assert wants_trending("I love bags") is False
        assert wants_trending("bags token ideas") is True
        assert wants_trending("should I buy on bags") is True

    def test_plain_chat(self):
        assert wants_trending("gm ser") is False

    def test_empty(self):
        assert wants_trending("") is False
