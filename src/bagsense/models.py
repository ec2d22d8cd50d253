"""
Pydantic models used throughout BagSense.

Every model is rebuilt per request; nothing here is persisted.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Token data
# ---------------------------------------------------------------------------
class TokenMetadata(BaseModel):
    """Market data for a token taken from its deepest DexScreener pair.

    ``None`` means "unknown", never zero.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, description="Human-readable token name")
    symbol: Optional[str] = Field(None, description="Ticker / symbol")
    logo_uri: Optional[str] = Field(None, description="URL to the token logo")
    price: Optional[float] = Field(None, description="Current price in USD")
    decimals: int = Field(9, description="Mint decimals")
    market_cap: Optional[float] = Field(None, description="Market cap (or FDV) in USD")
    volume_24h: Optional[float] = Field(None, description="24h trading volume in USD")
    liquidity: Optional[float] = Field(None, description="Pool liquidity in USD")


class TokenCreator(BaseModel):
    """A launch participant as reported by the bags.fm creator endpoint.

    The entry flagged ``is_creator`` is the primary creator; the others
    are fee-split recipients.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: Optional[str] = None
    pfp: Optional[str] = None
    royalty_bps: int = Field(0, ge=0, le=10_000, alias="royaltyBps")
    is_creator: bool = Field(False, alias="isCreator")
    wallet: str = ""
    provider: Optional[str] = None
    provider_username: Optional[str] = Field(None, alias="providerUsername")

    @field_validator("royalty_bps", "is_creator", "wallet", mode="before")
    @classmethod
    def _null_as_default(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class TrendingToken(BaseModel):
    """Snapshot of a freshly profiled Solana token."""

    model_config = ConfigDict(frozen=True)

    name: str
    symbol: str
    address: str
    price: Optional[float] = None
    price_change_24h: Optional[float] = None
    volume_24h: Optional[float] = None
    liquidity: Optional[float] = None
    market_cap: Optional[float] = None


class TokenSnapshot(BaseModel):
    """Everything fetched for one mint during a single request."""

    model_config = ConfigDict(frozen=True)

    mint: str
    creators: Optional[list[TokenCreator]] = None
    lifetime_fees: Optional[str] = None
    metadata: Optional[TokenMetadata] = None

    @property
    def has_data(self) -> bool:
        # An empty creator list is still an answer from the platform.
        return (
            self.creators is not None
            or bool(self.lifetime_fees)
            or self.metadata is not None
        )


# ---------------------------------------------------------------------------
# Risk score
# ---------------------------------------------------------------------------
RiskLabel = Literal["Safe Play", "Moderate", "Risky", "Degen"]


class RiskScoreResult(BaseModel):
    """Heuristic 1-10 risk rating derived from fetched token data."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=1, le=10)
    label: RiskLabel
    summary: str
    factors: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------
class ChatMessage(BaseModel):
    """One turn of the conversation as sent to the LLM."""

    role: Literal["user", "assistant", "system"]
    content: str


class HistoryMessage(BaseModel):
    """A prior turn supplied by the client."""

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Body of ``POST /api/chat``."""

    # Optional so a missing message surfaces as a 400, not a 422.
    message: Optional[str] = None
    history: list[HistoryMessage] = Field(default_factory=list)
    stream: bool = Field(False, description="Reply as a server-sent-event stream")


class ChatResponse(BaseModel):
    content: str
