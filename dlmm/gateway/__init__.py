"""Ledger gateway package.

- base.py: LedgerGateway protocol and RawCallResult
- mock.py: MockLedgerGateway for tests and offline use
- rpc.py: JsonRpcLedgerGateway over httpx
"""

from .base import LedgerGateway, RawCallResult
from .mock import MockLedgerGateway, QuoteKey
from .rpc import DEFAULT_SIMULATE_METHOD, JsonRpcLedgerGateway, parse_rpc_body

__all__ = [
    "DEFAULT_SIMULATE_METHOD",
    "JsonRpcLedgerGateway",
    "LedgerGateway",
    "MockLedgerGateway",
    "QuoteKey",
    "RawCallResult",
    "parse_rpc_body",
]
