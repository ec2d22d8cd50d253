"""
Builds the data block appended to the user's message and the final list of
messages sent to the LLM.

Address lookups take priority: when the message contains any candidate
mint, no trending list is fetched.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from config import MAX_COMPARE_TOKENS, TRENDING_LIMIT
from .formatter import format_token_analysis, format_trending_tokens
from .market_data import fetch_new_tokens, fetch_token_snapshot
from .message_parser import extract_token_addresses, wants_trending
from .models import ChatMessage, HistoryMessage, TokenSnapshot
from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


async def build_token_context(message: str) -> str:
    """Return the context block for *message*, or ``""`` when none applies."""
    addresses = extract_token_addresses(message)

    if len(addresses) > 1:
        logger.info("Found %d tokens for comparison", len(addresses))
        return await _comparison_context(addresses[:MAX_COMPARE_TOKENS])

    if addresses:
        mint = addresses[0]
        logger.info("Found token mint %s, fetching data", mint)
        return _single_token_context(await fetch_token_snapshot(mint))

    if wants_trending(message):
        logger.info("Trending request, fetching new Solana tokens")
        return await _trending_context()

    return ""


def _single_token_context(snapshot: TokenSnapshot) -> str:
    if not snapshot.has_data:
        return (
            "\n\n[TOKEN LOOKUP RESULT]\n"
            f"Couldn't find data for token {snapshot.mint[:8]}... - it might be "
            "very new, not launched on bags.fm, or the address might be wrong.\n"
            "[END TOKEN DATA]"
        )
    analysis = format_token_analysis(
        snapshot.mint, snapshot.creators, snapshot.lifetime_fees, snapshot.metadata
    )
    return (
        f"\n\n[REAL-TIME TOKEN DATA]\n{analysis}\n[END TOKEN DATA]\n\n"
        "Use this data to give your analysis. Be specific about what you found - "
        "mention the token name, price if available, risk score, and your honest "
        "take on the creator/fee structure."
    )


async def _comparison_context(mints: Sequence[str]) -> str:
    sections: list[str] = []
    # One token at a time; each token's own lookups still run concurrently.
    for mint in mints:
        snapshot = await fetch_token_snapshot(mint)
        if snapshot.has_data:
            analysis = format_token_analysis(
                mint, snapshot.creators, snapshot.lifetime_fees, snapshot.metadata
            )
            sections.append(f"---\n{analysis}\n")
        else:
            sections.append(f"---\n**Token {mint[:8]}...** - No data found\n")
    return (
        "\n\n[TOKEN COMPARISON DATA]\n"
        + "".join(sections)
        + "[END COMPARISON DATA]\n\n"
        "Compare these tokens. Point out which has better metrics, lower risk, "
        "and give your honest assessment of each."
    )


async def _trending_context() -> str:
    tokens = await fetch_new_tokens(TRENDING_LIMIT)
    if not tokens:
        return (
            "\n\n[TRENDING REQUEST]\n"
            "Couldn't fetch trending tokens right now. Ask the user to paste a "
            "specific token address for analysis.\n"
            "[END TRENDING REQUEST]"
        )
    return (
        "\n\n[NEW SOLANA TOKENS FROM DEXSCREENER]\n"
        f"{format_trending_tokens(tokens)}\n\n"
        "Note: These are new Solana tokens from DexScreener. Not all are bags.fm "
        "tokens. If the user wants analysis on any, they can paste the address "
        "and you'll scan it.\n"
        "[END TOKENS]"
    )


def assemble_messages(
    message: str,
    history: Optional[Sequence[HistoryMessage]] = None,
    context: str = "",
) -> list[ChatMessage]:
    """Return ``[system, *history, user+context]``.

    History turns with blank content are dropped; the Messages API rejects
    empty text blocks.
    """
    messages = [ChatMessage(role="system", content=SYSTEM_PROMPT)]
    messages.extend(
        ChatMessage(role=turn.role, content=turn.content)
        for turn in history or ()
        if turn.content.strip()
    )
    messages.append(ChatMessage(role="user", content=f"{message}{context}"))
    return messages
