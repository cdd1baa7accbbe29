"""In-memory ledger gateway for tests and offline use."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from dlmm.constants import DEFAULT_QUOTE_GAS
from dlmm.errors import TransportError
from dlmm.gateway.base import RawCallResult


@dataclass(frozen=True)
class QuoteKey:
    """Key for looking up quotes in MockLedgerGateway."""

    token_in: str
    token_out: str
    amount_in: int


class MockLedgerGateway:
    """Mock gateway answering quoter calls without RPC.

    Configure with expected quotes, and track calls for assertions. Quoter
    calls are expected in the layout used by DirectQuoteResolver:
    type_arguments = [token_in, token_out], arguments = [factory, amount_in, clock].
    """

    def __init__(
        self,
        quotes: dict[QuoteKey, list[Any]] | None = None,
        default_rate: tuple[int, int] | None = None,
        failing_pairs: set[tuple[str, str]] | None = None,
    ):
        """Initialize mock gateway.

        Args:
            quotes: Mapping of QuoteKey -> raw return values for specific quotes
            default_rate: If set, (numerator, denominator) ratio for any unconfigured
                quote: amount_out = amount_in * num // denom, no fee, no impact
            failing_pairs: (token_in, token_out) pairs whose calls raise TransportError
        """
        self.quotes = quotes or {}
        self.default_rate = default_rate
        self.failing_pairs = failing_pairs or set()
        self.calls: list[tuple[str, tuple[str, ...], tuple[Any, ...]]] = []
        self._lock = threading.Lock()

    def set_quote(
        self,
        token_in: str,
        token_out: str,
        amount_in: int,
        amount_out: int,
        fee_amount: int = 0,
        price_impact: str | Decimal = "0",
        gas_estimate: int = DEFAULT_QUOTE_GAS,
    ) -> None:
        """Configure the quoter's answer for one (pair, amount)."""
        self.quotes[QuoteKey(token_in, token_out, amount_in)] = [
            str(amount_out),
            str(price_impact),
            str(fee_amount),
            str(gas_estimate),
        ]

    def simulate_call(
        self,
        target: str,
        type_arguments: list[str],
        arguments: list[Any],
    ) -> RawCallResult:
        """Answer a simulated call from the configured quotes."""
        with self._lock:
            self.calls.append((target, tuple(type_arguments), tuple(arguments)))

        token_in, token_out = type_arguments
        amount_in = int(arguments[1])

        if (token_in, token_out) in self.failing_pairs:
            raise TransportError(f"Simulated transport failure for {token_in} -> {token_out}")

        key = QuoteKey(token_in, token_out, amount_in)
        if key in self.quotes:
            return RawCallResult(return_values=list(self.quotes[key]))

        if self.default_rate is not None:
            num, denom = self.default_rate
            amount_out = amount_in * num // denom
            return RawCallResult(return_values=[str(amount_out), "0", "0", str(DEFAULT_QUOTE_GAS)])

        # The quoter aborts when the pair has no pool
        return RawCallResult(error="no pool for pair")

    @property
    def call_count(self) -> int:
        with self._lock:
            return len(self.calls)


__all__ = ["MockLedgerGateway", "QuoteKey"]
