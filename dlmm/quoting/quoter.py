"""Quoting facade.

The Quoter is the public entry point of the quoting engine. It composes the
direct resolver, the two-hop enumerator, the route scorer and the impact
advisor, and owns one QuoteCache for its lifetime.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from decimal import Decimal

import structlog

from dlmm.gateway.base import LedgerGateway
from dlmm.models.analysis import (
    DetailedQuote,
    PriceImpactWarning,
    RealTimeQuote,
    SlippageConfig,
    SwapSimulation,
)
from dlmm.models.quote import MultiRouteQuote, Quote, QuoteOptions, QuoteParams
from dlmm.quoting.advisor import (
    classify_impact,
    estimate_route_gas,
    minimum_output,
    recommend_slippage,
)
from dlmm.quoting.cache import QuoteCache
from dlmm.quoting.config import DEFAULT_QUOTER_CONFIG, QuoterConfig
from dlmm.quoting.multihop import MultiHopEnumerator
from dlmm.quoting.resolver import DirectQuoteResolver
from dlmm.quoting.scoring import RouteScorer

logger = structlog.get_logger()

# simulate_swap gates, in percent of price impact
MAX_EXECUTABLE_PRICE_IMPACT = Decimal(15)
HIGH_PRICE_IMPACT_WARNING = Decimal(5)

DEFAULT_REFRESH_INTERVAL_MS = 5000


class Quoter:
    """Finds, scores and caches swap quotes.

    Stateless across calls except for the cache. Safe to share between
    threads.

    Args:
        gateway: Ledger gateway used for every pricing call
        config: Quoter configuration. Defaults to testnet addresses.
        cache: Quote cache. If None, a cache with config.cache_ttl is created.
        scorer: Route scorer. If None, uses config.scoring weights.
    """

    def __init__(
        self,
        gateway: LedgerGateway,
        config: QuoterConfig | None = None,
        cache: QuoteCache | None = None,
        scorer: RouteScorer | None = None,
    ) -> None:
        self.config = config if config is not None else DEFAULT_QUOTER_CONFIG
        self.resolver = DirectQuoteResolver(gateway, self.config)
        self.enumerator = MultiHopEnumerator(
            self.resolver,
            intermediate_tokens=self.config.intermediate_tokens,
            max_workers=self.config.max_workers,
        )
        self.scorer = scorer if scorer is not None else RouteScorer(self.config.scoring)
        self.cache = cache if cache is not None else QuoteCache(ttl=self.config.cache_ttl)

    # ------------------------------------------------------------------
    # Core quoting
    # ------------------------------------------------------------------

    def get_best_quote(self, params: QuoteParams, options: QuoteOptions | None = None) -> Quote:
        """Get the best quote across the direct route and two-hop routes.

        Fresh cached quotes are returned as-is. Only valid quotes are cached.

        Raises:
            TransportError: If the direct quote could not reach the ledger
        """
        options = options if options is not None else QuoteOptions()

        cached = self.cache.get(params.token_in, params.token_out, params.amount_in)
        if cached is not None:
            logger.debug(
                "quote_cache_hit",
                token_in=params.token_in,
                token_out=params.token_out,
                amount_in=params.amount_in,
            )
            return cached

        multi_route = self.get_multi_route_quotes(params, options.max_hops)
        quote = self._enhance_quote(multi_route.best_route, options)

        if quote.is_valid:
            self.cache.put(params.token_in, params.token_out, params.amount_in, quote)
        return quote

    def get_multi_route_quotes(self, params: QuoteParams, max_hops: int = 3) -> MultiRouteQuote:
        """Quote every candidate route for a request.

        Args:
            params: Quote request
            max_hops: 1 for the direct route only, >= 2 to add routes through
                one intermediate token. Longer routes are not enumerated.

        Raises:
            TransportError: If the direct quote could not reach the ledger
        """
        result = MultiRouteQuote(best_route=Quote.invalid())

        direct = self.resolver.quote_direct(params.token_in, params.token_out, params.amount_in)
        if direct.is_valid:
            result.direct_route = direct

        if max_hops >= 2:
            result.single_hop_routes = self.enumerator.quote_single_hop(
                params.token_in, params.token_out, params.amount_in
            )

        candidates = result.all_routes
        result.best_route = self.scorer.select_best(candidates)
        result.alternative_routes = sorted(
            (quote for quote in candidates if quote is not result.best_route),
            key=lambda quote: quote.amount_out,
            reverse=True,
        )

        logger.debug(
            "multi_route_quotes",
            token_in=params.token_in,
            token_out=params.token_out,
            amount_in=params.amount_in,
            routes=len(candidates),
            best_amount_out=result.best_route.amount_out,
        )
        return result

    def get_detailed_quote(
        self, params: QuoteParams, options: QuoteOptions | None = None
    ) -> DetailedQuote:
        """Get the best quote with impact analysis and the alternative routes.

        Always re-enumerates routes, since alternatives are not cached. The
        best quote refreshes the cache.
        """
        options = options if options is not None else QuoteOptions()

        multi_route = self.get_multi_route_quotes(params, options.max_hops)
        quote = self._enhance_quote(multi_route.best_route, options)
        if quote.is_valid:
            self.cache.put(params.token_in, params.token_out, params.amount_in, quote)

        return DetailedQuote(
            quote=quote,
            price_impact_analysis=classify_impact(quote),
            slippage_recommendation=recommend_slippage(quote),
            alternative_routes=list(multi_route.alternative_routes),
        )

    def get_quote_comparison(
        self, token_in: str, token_out: str, amounts: Sequence[int]
    ) -> list[Quote]:
        """Best quote per input amount, sorted by amount_out descending.

        Useful to see how price impact grows with trade size.
        """
        if not amounts:
            return []

        workers = min(self.config.max_workers, len(amounts))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="dlmm-compare") as executor:
            quotes = list(
                executor.map(
                    lambda amount: self.get_best_quote(QuoteParams(token_in, token_out, amount)),
                    amounts,
                )
            )

        return sorted(quotes, key=lambda quote: quote.amount_out, reverse=True)

    def simulate_swap(
        self, params: QuoteParams, options: QuoteOptions | None = None
    ) -> SwapSimulation:
        """Pre-flight check of a swap.

        - No valid route or zero output: not executable
        - Price impact above 15%: not executable
        - Price impact above 5%: executable, with a warning
        """
        quote = self.get_best_quote(params, options)
        warnings: list[str] = []
        errors: list[str] = []

        if not quote.is_valid or quote.amount_out == 0:
            errors.append("No valid route found")
        elif quote.price_impact > MAX_EXECUTABLE_PRICE_IMPACT:
            errors.append(
                f"Price impact too high: {quote.price_impact}% "
                f"exceeds {MAX_EXECUTABLE_PRICE_IMPACT}% limit"
            )
        elif quote.price_impact > HIGH_PRICE_IMPACT_WARNING:
            warnings.append(f"High price impact: {quote.price_impact}%")
        else:
            impact = classify_impact(quote)
            if impact.should_warn:
                warnings.append(impact.message)

        if not errors and minimum_output(quote, quote.slippage_tolerance) == 0:
            warnings.append("Minimum output rounds to zero at the current slippage tolerance")

        can_execute = not errors
        logger.info(
            "swap_simulated",
            token_in=params.token_in,
            token_out=params.token_out,
            amount_in=params.amount_in,
            can_execute=can_execute,
            warnings=len(warnings),
            errors=len(errors),
        )
        return SwapSimulation(can_execute=can_execute, quote=quote, warnings=warnings, errors=errors)

    # ------------------------------------------------------------------
    # Real-time quotes
    # ------------------------------------------------------------------

    def get_real_time_quote(
        self, params: QuoteParams, refresh_interval: int = DEFAULT_REFRESH_INTERVAL_MS
    ) -> RealTimeQuote:
        """Get the best quote stamped with its fetch time."""
        quote = self.get_best_quote(params)
        return RealTimeQuote(
            quote=quote,
            last_updated=datetime.now(UTC),
            is_stale=False,
            refresh_interval=refresh_interval,
        )

    @staticmethod
    def is_quote_fresh(quote: RealTimeQuote, now: datetime | None = None) -> bool:
        """True while less than refresh_interval ms have passed since the fetch."""
        now = now if now is not None else datetime.now(UTC)
        elapsed_ms = (now - quote.last_updated).total_seconds() * 1000
        return elapsed_ms < quote.refresh_interval

    # ------------------------------------------------------------------
    # Analysis shortcuts
    # ------------------------------------------------------------------

    def analyze_price_impact(self, quote: Quote) -> PriceImpactWarning:
        return classify_impact(quote)

    def calculate_optimal_slippage(self, quote: Quote) -> SlippageConfig:
        return recommend_slippage(quote)

    def calculate_minimum_output(self, quote: Quote, slippage_bps: int) -> int:
        return minimum_output(quote, slippage_bps)

    def clear_cache(self) -> None:
        self.cache.clear()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _enhance_quote(quote: Quote, options: QuoteOptions) -> Quote:
        """Apply the slippage floor and fill a missing gas estimate."""
        if not quote.is_valid:
            return quote

        slippage = max(options.slippage_tolerance, recommend_slippage(quote).tolerance)
        gas_estimate = quote.gas_estimate
        if options.include_gas_estimate and gas_estimate == 0:
            gas_estimate = estimate_route_gas(quote.route)

        return dataclasses.replace(quote, slippage_tolerance=slippage, gas_estimate=gas_estimate)


__all__ = [
    "DEFAULT_REFRESH_INTERVAL_MS",
    "HIGH_PRICE_IMPACT_WARNING",
    "MAX_EXECUTABLE_PRICE_IMPACT",
    "Quoter",
]
