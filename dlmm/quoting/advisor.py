"""Price impact classification and slippage recommendations.

Thresholds are percentages of price impact:

    impact < 0.1        low
    0.1 <= impact < 1   medium
    1 <= impact < 5     high
    impact >= 5         extreme

A DLMM swap that stays inside one bin has no slippage, so the recommended
tolerance only rises above the 0.5% base once impact passes 1%, i.e. when
the trade crosses several bins.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from dlmm.constants import DEFAULT_SLIPPAGE_BPS, ROUTE_BASE_GAS, ROUTE_GAS_PER_HOP
from dlmm.math.amounts import calculate_slippage_amount
from dlmm.models.analysis import ImpactLevel, PriceImpactWarning, SlippageConfig
from dlmm.models.quote import Quote, SwapRoute

MEDIUM_IMPACT_THRESHOLD = Decimal("0.1")
HIGH_IMPACT_THRESHOLD = Decimal(1)
EXTREME_IMPACT_THRESHOLD = Decimal(5)

# Impact above which slippage tolerance scales with impact
SLIPPAGE_SCALING_THRESHOLD = Decimal(1)
# Extra bps of tolerance per percent of impact
SLIPPAGE_BPS_PER_IMPACT_PERCENT = 10
MAX_RECOMMENDED_SLIPPAGE_BPS = 500
MAX_SLIPPAGE_BPS = 1000

IMPACT_MESSAGES = {
    ImpactLevel.LOW: "Minimal price impact",
    ImpactLevel.MEDIUM: "Moderate price impact",
    ImpactLevel.HIGH: "High price impact - consider smaller trade size",
    ImpactLevel.EXTREME: "Extreme price impact - trade may not be profitable",
}


def impact_level(price_impact: Decimal) -> ImpactLevel:
    if price_impact < MEDIUM_IMPACT_THRESHOLD:
        return ImpactLevel.LOW
    if price_impact < HIGH_IMPACT_THRESHOLD:
        return ImpactLevel.MEDIUM
    if price_impact < EXTREME_IMPACT_THRESHOLD:
        return ImpactLevel.HIGH
    return ImpactLevel.EXTREME


def classify_impact(quote: Quote) -> PriceImpactWarning:
    """Classify a quote's price impact into a severity tier."""
    level = impact_level(quote.price_impact)
    return PriceImpactWarning(
        level=level,
        percentage=quote.price_impact,
        message=IMPACT_MESSAGES[level],
        should_warn=level is not ImpactLevel.LOW,
    )


def recommend_slippage(quote: Quote) -> SlippageConfig:
    """Recommend a slippage tolerance for a quote.

    Base 50 bps; above 1% impact, 50 + 10 * impact bps capped at 500.
    """
    tolerance = Decimal(DEFAULT_SLIPPAGE_BPS)
    if quote.price_impact > SLIPPAGE_SCALING_THRESHOLD:
        tolerance = min(
            tolerance + quote.price_impact * SLIPPAGE_BPS_PER_IMPACT_PERCENT,
            Decimal(MAX_RECOMMENDED_SLIPPAGE_BPS),
        )

    return SlippageConfig(
        tolerance=int(tolerance.to_integral_value(rounding=ROUND_HALF_UP)),
        auto_slippage=True,
        max_slippage=MAX_SLIPPAGE_BPS,
    )


def minimum_output(quote: Quote, slippage_bps: int) -> int:
    """Minimum acceptable output of a quote under a slippage tolerance.

    floor(amount_out * (10000 - slippage_bps) / 10000)

    Raises:
        DomainError: If slippage_bps is outside [0, 10000]
    """
    return calculate_slippage_amount(quote.amount_out, slippage_bps, is_minimum=True)


def estimate_route_gas(route: SwapRoute) -> int:
    """Gas model for routes without a quoter estimate: base + per-hop cost."""
    return ROUTE_BASE_GAS + len(route.hops) * ROUTE_GAS_PER_HOP


__all__ = [
    "EXTREME_IMPACT_THRESHOLD",
    "HIGH_IMPACT_THRESHOLD",
    "IMPACT_MESSAGES",
    "MAX_RECOMMENDED_SLIPPAGE_BPS",
    "MAX_SLIPPAGE_BPS",
    "MEDIUM_IMPACT_THRESHOLD",
    "classify_impact",
    "estimate_route_gas",
    "impact_level",
    "minimum_output",
    "recommend_slippage",
]
