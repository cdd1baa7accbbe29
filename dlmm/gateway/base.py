"""Ledger gateway boundary.

The gateway is the only way the quoting engine reaches the ledger. It runs
read-only simulated contract calls and hands back their raw positional
return values; decoding them is the quote resolver's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class RawCallResult:
    """Raw outcome of a simulated contract call.

    Attributes:
        return_values: Positional return values, each either a scalar or a
            [value, move_type] pair as produced by dev-inspect
        error: Set when the call ran but aborted or was rejected by the node
    """

    return_values: list[Any] = field(default_factory=list)
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class LedgerGateway(Protocol):
    """Protocol for ledger gateway implementations.

    This allows swapping between a real RPC gateway and a mock gateway for testing.
    """

    def simulate_call(
        self,
        target: str,
        type_arguments: list[str],
        arguments: list[Any],
    ) -> RawCallResult:
        """Run a read-only simulated contract call.

        Args:
            target: Fully-qualified entry point, "package::module::function"
            type_arguments: Generic type arguments (coin types)
            arguments: Call arguments (object ids and pure values)

        Returns:
            Raw call result

        Raises:
            TransportError: If the ledger could not be reached
        """
        ...


__all__ = ["LedgerGateway", "RawCallResult"]
