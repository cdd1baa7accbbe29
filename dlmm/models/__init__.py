"""Domain models for the DLMM SDK."""

from dlmm.models.analysis import (
    DetailedQuote,
    ImpactLevel,
    PriceImpactWarning,
    RealTimeQuote,
    SlippageConfig,
    SwapSimulation,
)
from dlmm.models.quote import (
    MultiRouteQuote,
    Quote,
    QuoteOptions,
    QuoteParams,
    RouteHop,
    RouteType,
    SwapRoute,
)

__all__ = [
    "DetailedQuote",
    "ImpactLevel",
    "MultiRouteQuote",
    "PriceImpactWarning",
    "Quote",
    "QuoteOptions",
    "QuoteParams",
    "RealTimeQuote",
    "RouteHop",
    "RouteType",
    "SlippageConfig",
    "SwapRoute",
    "SwapSimulation",
]
