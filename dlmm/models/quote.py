"""Quote and route value objects.

Amounts are ints in the smallest token unit. Price impact is a Decimal
percentage (e.g. Decimal("2.5") means 2.5%).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from dlmm.constants import BPS_DENOMINATOR, DEFAULT_SLIPPAGE_BPS


class RouteType(str, Enum):
    """Shape of a swap route."""

    DIRECT = "direct"
    MULTI_HOP = "multi-hop"


@dataclass(frozen=True)
class RouteHop:
    """One token-to-token exchange through a single pool."""

    pool_id: str
    token_in: str
    token_out: str
    bin_step: int
    expected_amount_in: int
    expected_amount_out: int
    expected_fee: int
    price_impact: Decimal


@dataclass(frozen=True)
class SwapRoute:
    """Ordered hops from the caller's input token to its output token."""

    hops: tuple[RouteHop, ...] = ()
    total_fee: int = 0
    estimated_gas: int = 0
    price_impact: Decimal = Decimal(0)
    route_type: RouteType = RouteType.DIRECT

    @property
    def is_multihop(self) -> bool:
        return self.route_type is RouteType.MULTI_HOP

    @property
    def path(self) -> list[str]:
        """Token path, e.g. [A, X, B] for a two-hop route."""
        if not self.hops:
            return []
        return [self.hops[0].token_in] + [hop.token_out for hop in self.hops]


@dataclass(frozen=True)
class Quote:
    """A priced swap route.

    is_valid=False means no executable route was found. It is an expected
    outcome, not an error; check it instead of catching exceptions.
    """

    amount_in: int
    amount_out: int
    fee_amount: int
    price_impact: Decimal
    gas_estimate: int
    route: SwapRoute
    is_valid: bool
    slippage_tolerance: int = DEFAULT_SLIPPAGE_BPS
    pool_id: str = ""

    @classmethod
    def invalid(cls) -> Quote:
        """Canonical empty quote returned when no route exists."""
        return cls(
            amount_in=0,
            amount_out=0,
            fee_amount=0,
            price_impact=Decimal(0),
            gas_estimate=0,
            route=SwapRoute(),
            is_valid=False,
        )


@dataclass(frozen=True)
class QuoteParams:
    """Input of a quote request."""

    token_in: str
    token_out: str
    amount_in: int
    pool_id: str | None = None  # Reserved: routes are always discovered


@dataclass(frozen=True)
class QuoteOptions:
    """Per-request quoting options.

    Attributes:
        max_hops: 1 = direct only, >= 2 adds routes through intermediates
        slippage_tolerance: Floor for the quote's slippage tolerance (bps)
        include_gas_estimate: Fill in a route-based gas estimate when missing
    """

    max_hops: int = 3
    slippage_tolerance: int = DEFAULT_SLIPPAGE_BPS
    include_gas_estimate: bool = True

    def __post_init__(self) -> None:
        if self.max_hops < 1:
            raise ValueError(f"max_hops must be >= 1, got {self.max_hops}")
        if not 0 <= self.slippage_tolerance <= BPS_DENOMINATOR:
            raise ValueError(
                f"slippage_tolerance must be in [0, {BPS_DENOMINATOR}] bps, "
                f"got {self.slippage_tolerance}"
            )


@dataclass
class MultiRouteQuote:
    """All routes discovered for one request.

    single_hop_routes go through exactly one intermediate token.
    multi_hop_routes (two or more intermediates) are not enumerated yet and
    stay empty.
    """

    best_route: Quote
    direct_route: Quote | None = None
    single_hop_routes: list[Quote] = field(default_factory=list)
    multi_hop_routes: list[Quote] = field(default_factory=list)
    alternative_routes: list[Quote] = field(default_factory=list)

    @property
    def all_routes(self) -> list[Quote]:
        direct = [self.direct_route] if self.direct_route is not None else []
        return [*direct, *self.single_hop_routes, *self.multi_hop_routes]


__all__ = [
    "RouteType",
    "RouteHop",
    "SwapRoute",
    "Quote",
    "QuoteParams",
    "QuoteOptions",
    "MultiRouteQuote",
]
