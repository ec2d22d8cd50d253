"""
Heuristic Risk Score.

Starts from a neutral 5 and applies independent point adjustments:

  Creator (primary creator present):
    - verified social (provider + handle)       → -1, otherwise +1
    - 0% royalty                               → +2
    - royalty in (0, 1%]                       → -1
  Creator list non-empty:
    - more than 2 fee-split recipients         → +1
  No creator info at all                       → +2
  Liquidity:
    - < $1K → +2,  < $10K → +1,  > $50K → -1
  24h volume:
    - < $100 → +1,  > $10K → -1
  Lifetime fees > 1 SOL                        → -1

The total is clamped to [1, 10] and mapped to a tier:

  1-3   → Safe Play
  4-5   → Moderate
  6-7   → Risky
  8-10  → Degen
"""

from __future__ import annotations

from typing import Optional, Sequence

from .models import RiskScoreResult, TokenCreator, TokenMetadata
from .utils import lamports_to_sol

_BASE_SCORE = 5
_MIN_SCORE = 1
_MAX_SCORE = 10

_TIERS: tuple[tuple[int, str, str], ...] = (
    (3, "Safe Play", "Relatively lower risk based on available data"),
    (5, "Moderate", "Standard risk - DYOR recommended"),
    (7, "Risky", "Higher risk signals detected - be careful"),
    (_MAX_SCORE, "Degen", "High risk - only for true degens. NFA."),
)


def primary_creator(creators: Optional[Sequence[TokenCreator]]) -> Optional[TokenCreator]:
    """Return the first participant flagged as the creator, if any."""
    for creator in creators or ():
        if creator.is_creator:
            return creator
    return None


def fee_recipients(creators: Optional[Sequence[TokenCreator]]) -> list[TokenCreator]:
    """Return the non-creator participants sharing trading fees."""
    return [c for c in creators or () if not c.is_creator]


def calculate_risk_score(
    creators: Optional[Sequence[TokenCreator]],
    lifetime_fees: Optional[str],
    metadata: Optional[TokenMetadata],
) -> RiskScoreResult:
    """Score the fetched data for one token.  Never raises for missing input."""
    score = _BASE_SCORE
    factors: list[str] = []

    if creators:
        creator = primary_creator(creators)
        if creator is not None:
            if creator.provider_username and creator.provider:
                score -= 1
                factors.append("Creator has verified social")
            else:
                score += 1
                factors.append("No verified social linked")

            if creator.royalty_bps == 0:
                score += 2
                factors.append("0% royalty - no creator incentive")
            elif 0 < creator.royalty_bps <= 100:
                score -= 1
                factors.append("Standard royalty structure")

        if len(fee_recipients(creators)) > 2:
            score += 1
            factors.append("Multiple fee recipients")
    else:
        score += 2
        factors.append("No creator info available")

    liquidity = metadata.liquidity if metadata else None
    if liquidity is not None:
        if liquidity < 1_000:
            score += 2
            factors.append("Very low liquidity (<$1K)")
        elif liquidity < 10_000:
            score += 1
            factors.append("Low liquidity (<$10K)")
        elif liquidity > 50_000:
            score -= 1
            factors.append("Healthy liquidity (>$50K)")

    volume = metadata.volume_24h if metadata else None
    if volume is not None:
        if volume < 100:
            score += 1
            factors.append("Very low trading volume")
        elif volume > 10_000:
            score -= 1
            factors.append("Active trading volume")

    if lifetime_fees:
        fees_sol = lamports_to_sol(lifetime_fees)
        if fees_sol is not None and fees_sol > 1:
            score -= 1
            factors.append("Significant fee generation")

    score = max(_MIN_SCORE, min(_MAX_SCORE, score))
    label, summary = _tier(score)
    return RiskScoreResult(score=score, label=label, summary=summary, factors=factors)


def _tier(score: int) -> tuple[str, str]:
    for ceiling, label, summary in _TIERS:
        if score <= ceiling:
            return label, summary
    return _TIERS[-1][1], _TIERS[-1][2]
