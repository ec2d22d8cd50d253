"""
BagSense package initializer.

Exposes the pure building blocks of a chat turn (address extraction,
risk scoring, analysis formatting).  The HTTP app lives in
``bagsense.api`` and should be imported explicitly.
"""

from .formatter import format_token_analysis, format_trending_tokens  # noqa: F401
from .message_parser import extract_token_addresses, wants_trending  # noqa: F401
from .risk_scorer import calculate_risk_score  # noqa: F401

__all__ = [
    "calculate_risk_score",
    "extract_token_addresses",
    "format_token_analysis",
    "format_trending_tokens",
    "wants_trending",
]
