"""
Command line interface for BagSense.

Usage::

    python src/main.py --mint <TOKEN_MINT> [--json]
    python src/main.py --trending
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import os

# Ensure ``src/`` is on the import path
sys.path.insert(0, os.path.dirname(__file__))

from config import TRENDING_LIMIT
from bagsense.data_sources._clients import close_clients
from bagsense.formatter import format_token_analysis, format_trending_tokens
from bagsense.market_data import fetch_new_tokens, fetch_token_snapshot
from bagsense.risk_scorer import calculate_risk_score

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.WARNING,
)


async def _run_mint(mint: str, as_json: bool) -> None:
    """Fetch and print everything known about one mint."""
    try:
        snapshot = await fetch_token_snapshot(mint)
    finally:
        await close_clients()

    if as_json:
        risk = calculate_risk_score(
            snapshot.creators, snapshot.lifetime_fees, snapshot.metadata
        )
        payload = {
            "snapshot": snapshot.model_dump(),
            "risk": risk.model_dump(),
        }
        print(json.dumps(payload, indent=2, default=str))
        return

    print("=" * 60)
    print("  BagSense – Token Analysis")
    print("=" * 60)
    print(
        format_token_analysis(
            mint, snapshot.creators, snapshot.lifetime_fees, snapshot.metadata
        )
    )
    print("=" * 60)


async def _run_trending(limit: int) -> None:
    try:
        tokens = await fetch_new_tokens(limit)
    finally:
        await close_clients()
    print(format_trending_tokens(tokens))


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Analyse a bags.fm / Solana token or list new tokens"
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--mint",
        help="Mint address of the token to analyse",
    )
    group.add_argument(
        "--trending",
        action="store_true",
        help="List new Solana tokens from DexScreener",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Output the token snapshot and risk score as raw JSON",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=TRENDING_LIMIT,
        help="Number of tokens to list with --trending",
    )
    args = parser.parse_args()
    if args.mint:
        asyncio.run(_run_mint(args.mint, args.as_json))
    else:
        asyncio.run(_run_trending(args.limit))


if __name__ == "__main__":
    main()
