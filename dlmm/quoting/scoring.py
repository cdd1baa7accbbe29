"""Route scoring and best-route selection."""

from __future__ import annotations

import decimal
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from dlmm.models.quote import Quote

# 78 digits of precision, enough for any u64 amount times any weight
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the route score.

    score = amount_out - fee_weight * fee_amount - gas_weight * gas_estimate
            - price_impact_weight * price_impact_percent

    Gas is a secondary cost signal and weighs far less than fees. Price
    impact weighs heavily so routes with material market impact lose even
    with slightly higher output. These are policy values, tune per market.
    """

    fee_weight: Decimal = Decimal(1)
    gas_weight: Decimal = Decimal("0.001")
    price_impact_weight: Decimal = Decimal(1000)


DEFAULT_SCORING_WEIGHTS = ScoringWeights()


class RouteScorer:
    """Ranks candidate quotes by a single scalar score."""

    def __init__(self, weights: ScoringWeights | None = None) -> None:
        self.weights = weights if weights is not None else DEFAULT_SCORING_WEIGHTS

    def score(self, quote: Quote) -> Decimal:
        """Compute the score of a quote. Higher is better."""
        w = self.weights
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            return (
                Decimal(quote.amount_out)
                - w.fee_weight * quote.fee_amount
                - w.gas_weight * quote.gas_estimate
                - w.price_impact_weight * quote.price_impact
            )

    def select_best(self, quotes: Iterable[Quote]) -> Quote:
        """Pick the valid quote with the highest score.

        Ties go to the quote seen first. Returns the canonical invalid quote
        when no valid quote is given.
        """
        best: Quote | None = None
        best_score: Decimal | None = None

        for quote in quotes:
            if not quote.is_valid:
                continue
            current = self.score(quote)
            if best_score is None or current > best_score:
                best = quote
                best_score = current

        return best if best is not None else Quote.invalid()


__all__ = ["DEFAULT_SCORING_WEIGHTS", "RouteScorer", "ScoringWeights"]
