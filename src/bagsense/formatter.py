"""
Markdown renderers for the context block injected into the LLM prompt.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .models import TokenCreator, TokenMetadata, TrendingToken
from .risk_scorer import calculate_risk_score, fee_recipients, primary_creator
from .utils import (
    format_number,
    format_usd_compact,
    lamports_to_sol,
    shorten,
    to_exponential,
    to_fixed,
)


def not_found_line(mint: str) -> str:
    """The single line telling the LLM that every lookup came back empty."""
    return (
        f"Couldn't find data for token {mint[:8]}... - "
        "might be a new token or not on bags.fm yet."
    )


def format_price(price: float) -> str:
    if price < 0.000001:
        return f"${to_exponential(price, 4)}"
    if price < 0.01:
        return f"${to_fixed(price, 6)}"
    return f"${to_fixed(price, 4)}"


def format_token_analysis(
    mint: str,
    creators: Optional[Sequence[TokenCreator]],
    lifetime_fees: Optional[str],
    metadata: Optional[TokenMetadata],
) -> str:
    """Render everything known about *mint*, ending with its risk score."""
    if creators is None and not lifetime_fees and metadata is None:
        return not_found_line(mint)

    lines: list[str] = []

    if metadata and (metadata.name or metadata.symbol):
        lines.append(f"**{metadata.name or 'Unknown Token'}** ({metadata.symbol or '???'})")
        lines.append(f"Mint: {shorten(mint, 8, 4)}")
        lines.append("")
    else:
        lines.append(f"**Token Analysis: {shorten(mint, 8, 4)}**")
        lines.append("")

    if metadata:
        if metadata.price is not None:
            lines.append(f"**Price:** {format_price(metadata.price)}")
        if metadata.market_cap:
            lines.append(f"**Market Cap:** {format_usd_compact(metadata.market_cap)}")
        if metadata.liquidity:
            lines.append(f"**Liquidity:** {format_usd_compact(metadata.liquidity)}")
        if metadata.volume_24h:
            lines.append(f"**24h Volume:** {format_usd_compact(metadata.volume_24h)}")

    creator = primary_creator(creators)
    if creator is not None:
        lines.extend(_creator_block(creator))
        others = fee_recipients(creators)
        if others:
            lines.extend(_fee_split_block(others))

    if lifetime_fees:
        fees_sol = lamports_to_sol(lifetime_fees)
        if fees_sol is not None:
            lines.append("")
            lines.append(f"**Lifetime Fees:** {to_fixed(fees_sol, 4)} SOL")

    risk = calculate_risk_score(creators, lifetime_fees, metadata)
    lines.append("")
    lines.append(f"**Risk Score:** {risk.score}/10 ({risk.label})")
    lines.append(risk.summary)

    return "\n".join(lines) + "\n"


def _creator_block(creator: TokenCreator) -> list[str]:
    display_name = creator.provider_username or creator.username or "Unknown"
    header = f"**Creator:** {display_name}"
    if creator.provider:
        handle = creator.provider_username or display_name
        header += f" (@{handle} on {creator.provider})"

    # royalty_bps is in basis points: 100 bps = 1%
    royalty_pct = creator.royalty_bps / 100
    if royalty_pct == 1:
        royalty = f"**Royalty:** {format_number(royalty_pct)}% (max - creator earns on every trade)"
    elif royalty_pct > 0:
        royalty = f"**Royalty:** {format_number(royalty_pct)}% (creator earns on trades)"
    else:
        royalty = "**Royalty:** 0% (creator gets nothing from trades)"

    return [
        "",
        header,
        f"**Wallet:** {shorten(creator.wallet, 6, 4)}",
        royalty,
    ]


def _fee_split_block(others: list[TokenCreator]) -> list[str]:
    total_split = sum(c.royalty_bps for c in others) / 100
    lines = [
        "",
        f"**Fee Split:** Sharing {format_number(total_split)}% with {len(others)} wallet(s)",
    ]
    for participant in others:
        name = (
            participant.provider_username
            or participant.username
            or f"{participant.wallet[:6]}..."
        )
        lines.append(f"  - {name}: {format_number(participant.royalty_bps / 100)}%")
    return lines


# ---------------------------------------------------------------------------
# New-token list
# ---------------------------------------------------------------------------

def format_trending_tokens(tokens: Sequence[TrendingToken]) -> str:
    """Render a numbered list of new tokens for the prompt."""
    if not tokens:
        return "No trending tokens found right now."

    parts = ["**Trending Solana Tokens:**", ""]
    for i, token in enumerate(tokens, 1):
        if token.price:
            price = (
                f"${to_exponential(token.price, 2)}"
                if token.price < 0.000001
                else f"${to_fixed(token.price, 6)}"
            )
        else:
            price = "N/A"

        change = ""
        if token.price_change_24h is not None:
            sign = "+" if token.price_change_24h >= 0 else ""
            change = f"{sign}{to_fixed(token.price_change_24h, 1)}%"

        if token.market_cap:
            mc = (
                f"${to_fixed(token.market_cap / 1_000_000, 1)}M"
                if token.market_cap >= 1_000_000
                else f"${to_fixed(token.market_cap / 1_000, 0)}K"
            )
        else:
            mc = "N/A"

        if token.liquidity:
            liq = (
                f"${to_fixed(token.liquidity / 1_000, 0)}K"
                if token.liquidity >= 1_000
                else f"${to_fixed(token.liquidity, 0)}"
            )
        else:
            liq = "N/A"

        parts.append(f"{i}. **{token.name}** ({token.symbol})")
        parts.append(f"   Price: {price} {change}")
        parts.append(f"   MC: {mc} | Liq: {liq}")
        parts.append(f"   `{token.address}`")
        parts.append("")

    parts.append("_Paste any address above for full analysis_")
    return "\n".join(parts)
