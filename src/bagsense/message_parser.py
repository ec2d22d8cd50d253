"""
Heuristics applied to the raw user message before any data is fetched.

- ``extract_token_addresses`` pulls Solana-looking mint addresses out of text
- ``wants_trending`` decides whether the user is asking for new tokens
"""

from __future__ import annotations

import re

# Base58 alphabet (no 0, O, I, l), 32-44 chars.  Not a real validator:
# false positives fall through to "no data found" downstream.
_ADDRESS_RE = re.compile(r"[1-9A-HJ-NP-Za-km-z]{32,44}")

TRENDING_PHRASES: tuple[str, ...] = (
    "trending",
    "what to buy",
    "good to buy",
    "new tokens",
    "show me tokens",
    "find tokens",
    "suggest",
    "recommend",
    "good token",
    "show token",
    "list token",
    "what's hot",
    "whats hot",
    "top token",
    "best token",
)


def extract_token_addresses(text: str) -> list[str]:
    """Return distinct candidate mint addresses in first-seen order."""
    if not text:
        return []
    return list(dict.fromkeys(_ADDRESS_RE.findall(text)))


def wants_trending(text: str) -> bool:
    """Return ``True`` when the message asks for trending / new tokens.

    ``scan`` only counts together with ``token``, and ``bags`` only
    together with ``token`` or ``buy``.  Each pair is its own alternative,
    so "scan memes" is not a trending request.
    """
    lowered = (text or "").lower()
    if any(phrase in lowered for phrase in TRENDING_PHRASES):
        return True
    if "scan" in lowered and "token" in lowered:
        return True
    return "bags" in lowered and ("token" in lowered or "buy" in lowered)
