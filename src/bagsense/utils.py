"""
Shared number and string helpers for BagSense.

The formatting helpers reproduce the rendering conventions the chat prompt
has always used (``1.2346e-7`` exponentials, bare integers for whole
percentages) so that the LLM sees the same text regardless of entry point.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

LAMPORTS_PER_SOL = 1_000_000_000

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_leading_int(raw: object) -> Optional[int]:
    """Parse the integer prefix of *raw* (``"123abc"`` → 123).

    Returns ``None`` when *raw* has no leading digits.
    """
    if raw is None:
        return None
    match = _LEADING_INT_RE.match(str(raw))
    if not match:
        return None
    return int(match.group(1))


def lamports_to_sol(raw: object) -> Optional[float]:
    """Convert a raw lamport string to SOL, or ``None`` if unparseable."""
    lamports = parse_leading_int(raw)
    if lamports is None:
        return None
    return lamports / LAMPORTS_PER_SOL


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` (``1.0`` → ``"1"``)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_fixed(value: float, digits: int) -> str:
    """Fixed-point text that rounds ties away from zero (``2.25`` → ``"2.3"``).

    Rounds the exact binary value of *value*, so ``1.005`` (stored just below
    the tie) still gives ``"1.00"``.
    """
    quantum = Decimal(1).scaleb(-digits)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"


def to_exponential(value: float, digits: int) -> str:
    """Exponential notation with a bare exponent (``1.2346e-7``)."""
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    exp = int(exponent)
    sign = "+" if exp >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"


def shorten(address: str, head: int, tail: int) -> str:
    """``abcdefgh...wxyz`` style truncation."""
    return f"{address[:head]}...{address[-tail:]}"


def format_usd_compact(value: float) -> str:
    """Dollar amount with ``M`` (2 dp) / ``K`` (1 dp) suffixes."""
    if value >= 1_000_000:
        return f"${to_fixed(value / 1_000_000, 2)}M"
    if value >= 1_000:
        return f"${to_fixed(value / 1_000, 1)}K"
    return f"${to_fixed(value, 0)}"
