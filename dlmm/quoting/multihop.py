"""Two-hop routing through intermediate tokens."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

import structlog

from dlmm.constants import DEFAULT_INTERMEDIATE_TOKENS
from dlmm.errors import TransportError
from dlmm.models.quote import Quote, RouteType, SwapRoute
from dlmm.quoting.resolver import DirectQuoteResolver

logger = structlog.get_logger()


def combine_hops(amount_in: int, first_hop: Quote, second_hop: Quote) -> Quote:
    """Combine two chained direct quotes into one two-hop quote.

    Fees and gas add up. Price impact is the sum of both hops' impacts, an
    additive approximation of the compounded impact 1 - (1-i1)(1-i2) that
    slightly overstates it.
    """
    total_fee = first_hop.fee_amount + second_hop.fee_amount
    total_gas = first_hop.gas_estimate + second_hop.gas_estimate
    total_impact = first_hop.price_impact + second_hop.price_impact

    route = SwapRoute(
        hops=first_hop.route.hops + second_hop.route.hops,
        total_fee=total_fee,
        estimated_gas=total_gas,
        price_impact=total_impact,
        route_type=RouteType.MULTI_HOP,
    )

    return Quote(
        amount_in=amount_in,
        amount_out=second_hop.amount_out,
        fee_amount=total_fee,
        price_impact=total_impact,
        gas_estimate=total_gas,
        route=route,
        is_valid=True,
        slippage_tolerance=max(first_hop.slippage_tolerance, second_hop.slippage_tolerance),
        pool_id="",  # No single pool
    )


class MultiHopEnumerator:
    """Builds token_in -> X -> token_out quotes for each intermediate X.

    Intermediates are independent and evaluated concurrently. A failing
    intermediate (no pool, zero output or transport failure) is skipped and
    never aborts the others.
    """

    def __init__(
        self,
        resolver: DirectQuoteResolver,
        intermediate_tokens: Sequence[str] = DEFAULT_INTERMEDIATE_TOKENS,
        max_workers: int = 4,
    ) -> None:
        self.resolver = resolver
        self.intermediate_tokens = tuple(intermediate_tokens)
        self.max_workers = max_workers

    def candidate_intermediates(self, token_in: str, token_out: str) -> list[str]:
        """Intermediates usable for a pair, in priority order."""
        return [t for t in self.intermediate_tokens if t not in (token_in, token_out)]

    def quote_single_hop(self, token_in: str, token_out: str, amount_in: int) -> list[Quote]:
        """Quote every route through one intermediate token.

        Returns:
            Valid two-hop quotes sorted by amount_out descending. Equal
            outputs keep intermediate priority order.
        """
        candidates = self.candidate_intermediates(token_in, token_out)
        if not candidates:
            return []

        workers = min(self.max_workers, len(candidates))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="dlmm-hop") as executor:
            results = list(
                executor.map(
                    lambda intermediate: self._quote_through(
                        token_in, token_out, amount_in, intermediate
                    ),
                    candidates,
                )
            )

        routes = [quote for quote in results if quote is not None]
        logger.debug(
            "multihop_routes_found",
            token_in=token_in,
            token_out=token_out,
            amount_in=amount_in,
            candidates=len(candidates),
            routes=len(routes),
        )
        return sorted(routes, key=lambda quote: quote.amount_out, reverse=True)

    def _quote_through(
        self,
        token_in: str,
        token_out: str,
        amount_in: int,
        intermediate: str,
    ) -> Quote | None:
        """Quote token_in -> intermediate -> token_out, or None if unavailable."""
        try:
            first_hop = self.resolver.quote_direct(token_in, intermediate, amount_in)
            if not first_hop.is_valid or first_hop.amount_out == 0:
                return None

            second_hop = self.resolver.quote_direct(intermediate, token_out, first_hop.amount_out)
            if not second_hop.is_valid or second_hop.amount_out == 0:
                return None
        except TransportError as e:
            # Only this intermediate is lost; the others still get evaluated
            logger.warning(
                "multihop_intermediate_failed",
                token_in=token_in,
                token_out=token_out,
                intermediate=intermediate,
                error=str(e),
            )
            return None
        except Exception as e:
            logger.warning(
                "multihop_intermediate_failed",
                token_in=token_in,
                token_out=token_out,
                intermediate=intermediate,
                error=str(e),
                exc_info=True,
            )
            return None

        return combine_hops(amount_in, first_hop, second_hop)


__all__ = ["MultiHopEnumerator", "combine_hops"]
