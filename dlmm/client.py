"""Quoter construction from the environment."""

from __future__ import annotations

import os
from functools import lru_cache

import structlog

from dlmm.gateway import JsonRpcLedgerGateway, LedgerGateway, MockLedgerGateway
from dlmm.gateway.rpc import DEFAULT_RPC_TIMEOUT
from dlmm.quoting import Quoter, QuoterConfig

logger = structlog.get_logger()


def create_quoter(
    network: str = "testnet",
    rpc_url: str | None = None,
    rpc_timeout: float = DEFAULT_RPC_TIMEOUT,
) -> Quoter:
    """Create a quoter for a network.

    Without an rpc_url there is no way to reach the ledger: the quoter is
    backed by an empty mock gateway and every quote comes back invalid.

    Raises:
        ValueError: If the network is unknown
    """
    config = QuoterConfig.for_network(network)

    gateway: LedgerGateway
    if rpc_url:
        logger.info("ledger_gateway_enabled", network=network, rpc_url=rpc_url[:50])
        gateway = JsonRpcLedgerGateway(rpc_url, timeout=rpc_timeout)
    else:
        logger.info("ledger_gateway_disabled", network=network, reason="no RPC URL")
        gateway = MockLedgerGateway()

    return Quoter(gateway, config)


@lru_cache(maxsize=1)
def get_default_quoter() -> Quoter:
    """Process-wide quoter configured from environment variables.

    - DLMM_NETWORK: testnet, mainnet or devnet (default: testnet)
    - DLMM_RPC_URL: JSON-RPC endpoint of the ledger gateway
    - DLMM_RPC_TIMEOUT: request timeout in seconds (default: 10)
    """
    return create_quoter(
        network=os.environ.get("DLMM_NETWORK", "testnet"),
        rpc_url=os.environ.get("DLMM_RPC_URL"),
        rpc_timeout=float(os.environ.get("DLMM_RPC_TIMEOUT", str(DEFAULT_RPC_TIMEOUT))),
    )


__all__ = ["create_quoter", "get_default_quoter"]
