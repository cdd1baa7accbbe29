"""Quote analysis result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from dlmm.models.quote import Quote


class ImpactLevel(str, Enum):
    """Severity tier of a quote's price impact."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"


@dataclass(frozen=True)
class PriceImpactWarning:
    level: ImpactLevel
    percentage: Decimal
    message: str
    should_warn: bool


@dataclass(frozen=True)
class SlippageConfig:
    """Recommended slippage settings, all in basis points."""

    tolerance: int
    auto_slippage: bool
    max_slippage: int


@dataclass(frozen=True)
class DetailedQuote:
    """Best quote plus impact analysis and the routes it beat."""

    quote: Quote
    price_impact_analysis: PriceImpactWarning
    slippage_recommendation: SlippageConfig
    alternative_routes: list[Quote] = field(default_factory=list)


@dataclass(frozen=True)
class SwapSimulation:
    """Pre-flight feasibility check of a swap.

    errors block execution; warnings do not.
    """

    can_execute: bool
    quote: Quote
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RealTimeQuote:
    """A quote stamped with the time it was fetched."""

    quote: Quote
    last_updated: datetime
    is_stale: bool
    refresh_interval: int  # milliseconds


__all__ = [
    "ImpactLevel",
    "PriceImpactWarning",
    "SlippageConfig",
    "DetailedQuote",
    "SwapSimulation",
    "RealTimeQuote",
]
