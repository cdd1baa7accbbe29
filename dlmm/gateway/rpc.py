"""JSON-RPC ledger gateway.

Sends simulated contract calls to a JSON-RPC endpoint over HTTP. The call is
described as JSON (target, type arguments, arguments, sender); building and
BCS-encoding the transaction block is left to the node or relay behind the
endpoint.
"""

from __future__ import annotations

import itertools
from typing import Any

import httpx
import structlog

from dlmm.constants import ZERO_SENDER
from dlmm.errors import TransportError
from dlmm.gateway.base import RawCallResult

logger = structlog.get_logger()

DEFAULT_SIMULATE_METHOD = "dlmm_simulateCall"
DEFAULT_RPC_TIMEOUT = 10.0


def parse_rpc_body(body: Any) -> RawCallResult:
    """Extract positional return values from a JSON-RPC response body.

    Accepts either ``result.returnValues`` or the dev-inspect shape
    ``result.results[0].returnValues``. Anything else comes back as an
    error result, never an exception.
    """
    if not isinstance(body, dict):
        return RawCallResult(error="response body is not an object")

    if body.get("error") is not None:
        error = body["error"]
        message = error.get("message") if isinstance(error, dict) else str(error)
        return RawCallResult(error=f"rpc error: {message}")

    result = body.get("result")
    if not isinstance(result, dict):
        return RawCallResult(error="response has no result object")

    # Dev-inspect reports aborted execution in the effects, not as an RPC error
    if result.get("error"):
        return RawCallResult(error=f"execution failed: {result['error']}")

    values = result.get("returnValues")
    if values is None:
        results = result.get("results")
        if isinstance(results, list) and results and isinstance(results[0], dict):
            values = results[0].get("returnValues")

    if not isinstance(values, list):
        return RawCallResult(error="result carries no return values")

    return RawCallResult(return_values=values)


class JsonRpcLedgerGateway:
    """Real gateway that posts simulated calls to a JSON-RPC endpoint.

    Transport failures (connection errors, timeouts, non-2xx status) raise
    TransportError. Protocol-level failures come back as error results.
    """

    def __init__(
        self,
        rpc_url: str,
        *,
        method: str = DEFAULT_SIMULATE_METHOD,
        sender: str = ZERO_SENDER,
        timeout: float = DEFAULT_RPC_TIMEOUT,
        client: httpx.Client | None = None,
    ):
        """Initialize gateway.

        Args:
            rpc_url: HTTP RPC URL
            method: JSON-RPC method that runs a simulated call
            sender: Sender address for the read-only call
            timeout: Request timeout in seconds (ignored when client is given)
            client: Pre-configured httpx client (e.g. with a mock transport)
        """
        self.rpc_url = rpc_url
        self.method = method
        self.sender = sender
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._request_ids = itertools.count(1)

    def simulate_call(
        self,
        target: str,
        type_arguments: list[str],
        arguments: list[Any],
    ) -> RawCallResult:
        """Run a simulated call via RPC."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._request_ids),
            "method": self.method,
            "params": [
                {
                    "target": target,
                    "typeArguments": list(type_arguments),
                    # u64 values travel as strings to survive JSON number limits
                    "arguments": [str(arg) for arg in arguments],
                    "sender": self.sender,
                }
            ],
        }

        try:
            response = self._client.post(self.rpc_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(
                "ledger_rpc_transport_failed",
                target=target,
                type_arguments=type_arguments,
                error=str(e),
            )
            raise TransportError(f"RPC call to {target} failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            return RawCallResult(error="response body is not valid JSON")

        return parse_rpc_body(body)

    def close(self) -> None:
        """Close the underlying HTTP client if this gateway created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> JsonRpcLedgerGateway:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "DEFAULT_RPC_TIMEOUT",
    "DEFAULT_SIMULATE_METHOD",
    "JsonRpcLedgerGateway",
    "parse_rpc_body",
]
