"""Direct (single-pool) quote resolution.

This is the single conversion boundary between raw gateway results and
Quote values. Everything downstream only sees validated quotes.
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import structlog

from dlmm.constants import CLOCK_OBJECT_ID, DEFAULT_BIN_STEP, DEFAULT_QUOTE_GAS, DEFAULT_SLIPPAGE_BPS
from dlmm.errors import MalformedResponseError
from dlmm.gateway.base import LedgerGateway, RawCallResult
from dlmm.models.quote import Quote, RouteHop, RouteType, SwapRoute
from dlmm.quoting.config import DEFAULT_QUOTER_CONFIG, QuoterConfig

logger = structlog.get_logger()


@dataclass(frozen=True)
class DecodedQuote:
    """Fields decoded from one quoter::get_quote call."""

    amount_out: int
    price_impact: Decimal
    fee_amount: int
    gas_estimate: int
    pool_id: str
    bin_step: int


class QuoteResultDecoder:
    """Positional decoder for quoter::get_quote return values.

    Layout version 1:
        0: amount_out (u64)
        1: price_impact (percent)
        2: fee_amount (u64)
        3: gas_estimate (u64)
        4: pool_id (optional)
        5: bin_step (optional)

    A missing or unreadable field falls back to its default. Only a result
    with no return values at all is malformed.
    """

    VERSION = 1

    AMOUNT_OUT = 0
    PRICE_IMPACT = 1
    FEE_AMOUNT = 2
    GAS_ESTIMATE = 3
    POOL_ID = 4
    BIN_STEP = 5

    def __init__(
        self,
        default_gas: int = DEFAULT_QUOTE_GAS,
        default_bin_step: int = DEFAULT_BIN_STEP,
    ) -> None:
        self.default_gas = default_gas
        self.default_bin_step = default_bin_step

    def decode(self, result: RawCallResult) -> DecodedQuote:
        """Decode a raw call result.

        Raises:
            MalformedResponseError: If the result carries no return values
        """
        values = result.return_values
        if not isinstance(values, list | tuple) or not values:
            raise MalformedResponseError("quote result has no return values")

        pool_id = self._field(values, self.POOL_ID)
        return DecodedQuote(
            amount_out=self._uint(values, self.AMOUNT_OUT, 0),
            price_impact=self._percent(values, self.PRICE_IMPACT),
            fee_amount=self._uint(values, self.FEE_AMOUNT, 0),
            gas_estimate=self._uint(values, self.GAS_ESTIMATE, self.default_gas),
            pool_id=pool_id if isinstance(pool_id, str) else "",
            bin_step=self._uint(values, self.BIN_STEP, self.default_bin_step) or self.default_bin_step,
        )

    @staticmethod
    def _field(values: list[Any] | tuple[Any, ...], index: int) -> Any:
        if index >= len(values):
            return None
        value = values[index]
        # Dev-inspect returns [value, move_type] pairs
        if isinstance(value, list | tuple):
            return value[0] if value else None
        return value

    def _uint(self, values: list[Any] | tuple[Any, ...], index: int, default: int) -> int:
        raw = self._field(values, index)
        if raw is None or isinstance(raw, bool):
            return default
        try:
            parsed = int(raw)
        except (TypeError, ValueError, OverflowError):
            logger.debug("quote_field_unreadable", index=index, value=repr(raw))
            return default
        return parsed if parsed >= 0 else default

    def _percent(self, values: list[Any] | tuple[Any, ...], index: int) -> Decimal:
        raw = self._field(values, index)
        if raw is None or isinstance(raw, bool):
            return Decimal(0)
        try:
            parsed = Decimal(str(raw))
        except decimal.InvalidOperation:
            logger.debug("quote_field_unreadable", index=index, value=repr(raw))
            return Decimal(0)
        if not parsed.is_finite() or parsed < 0:
            return Decimal(0)
        return parsed


class DirectQuoteResolver:
    """Gets single-pool quotes from the on-chain quoter through the gateway.

    "No route" is an expected outcome and comes back as an invalid quote.
    TransportError from the gateway is not caught here.
    """

    def __init__(
        self,
        gateway: LedgerGateway,
        config: QuoterConfig = DEFAULT_QUOTER_CONFIG,
        decoder: QuoteResultDecoder | None = None,
    ) -> None:
        self.gateway = gateway
        self.config = config
        self.decoder = decoder if decoder is not None else QuoteResultDecoder()

    def quote_direct(self, token_in: str, token_out: str, amount_in: int) -> Quote:
        """Quote a direct swap of amount_in token_in for token_out.

        Returns:
            A valid single-hop quote, or Quote.invalid() if the pair has no
            executable pool or the response could not be decoded

        Raises:
            TransportError: If the gateway could not reach the ledger
        """
        result = self.gateway.simulate_call(
            self.config.quote_target,
            [token_in, token_out],
            [self.config.factory_id, amount_in, CLOCK_OBJECT_ID],
        )

        if result.is_error:
            logger.debug(
                "direct_quote_no_route",
                token_in=token_in,
                token_out=token_out,
                amount_in=amount_in,
                reason=result.error,
            )
            return Quote.invalid()

        try:
            decoded = self.decoder.decode(result)
        except MalformedResponseError as e:
            logger.debug(
                "direct_quote_malformed",
                token_in=token_in,
                token_out=token_out,
                amount_in=amount_in,
                error=str(e),
            )
            return Quote.invalid()

        if decoded.amount_out <= 0:
            logger.debug(
                "direct_quote_no_route",
                token_in=token_in,
                token_out=token_out,
                amount_in=amount_in,
                reason="zero output",
            )
            return Quote.invalid()

        return self._build_quote(token_in, token_out, amount_in, decoded)

    @staticmethod
    def _build_quote(token_in: str, token_out: str, amount_in: int, decoded: DecodedQuote) -> Quote:
        hop = RouteHop(
            pool_id=decoded.pool_id,
            token_in=token_in,
            token_out=token_out,
            bin_step=decoded.bin_step,
            expected_amount_in=amount_in,
            expected_amount_out=decoded.amount_out,
            expected_fee=decoded.fee_amount,
            price_impact=decoded.price_impact,
        )
        route = SwapRoute(
            hops=(hop,),
            total_fee=decoded.fee_amount,
            estimated_gas=decoded.gas_estimate,
            price_impact=decoded.price_impact,
            route_type=RouteType.DIRECT,
        )
        return Quote(
            amount_in=amount_in,
            amount_out=decoded.amount_out,
            fee_amount=decoded.fee_amount,
            price_impact=decoded.price_impact,
            gas_estimate=decoded.gas_estimate,
            route=route,
            is_valid=True,
            slippage_tolerance=DEFAULT_SLIPPAGE_BPS,
            pool_id=decoded.pool_id,
        )


__all__ = ["DecodedQuote", "DirectQuoteResolver", "QuoteResultDecoder"]
