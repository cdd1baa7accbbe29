"""Quoter configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dlmm.constants import (
    DEFAULT_INTERMEDIATE_TOKENS,
    GET_QUOTE_FUNCTION,
    QUOTE_CACHE_TTL,
    QUOTER_MODULE,
    TESTNET_ADDRESSES,
    get_addresses,
)
from dlmm.quoting.scoring import ScoringWeights


@dataclass(frozen=True)
class QuoterConfig:
    """Centralized configuration for the quoting engine.

    Attributes:
        package_id: Deployed DLMM package id
        factory_id: Pool factory (registry) object id passed to the quoter
        intermediate_tokens: Tokens tried as the middle of two-hop routes,
            in priority order (earlier wins ties)
        cache_ttl: Seconds a cached best quote stays fresh (default: 10)
        max_workers: Thread pool size for concurrent route evaluation
        scoring: Route scoring weights
    """

    package_id: str = TESTNET_ADDRESSES.package_id
    factory_id: str = TESTNET_ADDRESSES.factory_id
    intermediate_tokens: tuple[str, ...] = DEFAULT_INTERMEDIATE_TOKENS
    cache_ttl: float = QUOTE_CACHE_TTL
    max_workers: int = 4
    scoring: ScoringWeights = field(default_factory=ScoringWeights)

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.cache_ttl < 0:
            raise ValueError(f"cache_ttl cannot be negative, got {self.cache_ttl}")

    @property
    def quote_target(self) -> str:
        """Fully-qualified quoter entry point."""
        return f"{self.package_id}::{QUOTER_MODULE}::{GET_QUOTE_FUNCTION}"

    @classmethod
    def for_network(cls, network: str, **overrides: Any) -> QuoterConfig:
        """Build a config from a network's deployed addresses.

        Raises:
            ValueError: If the network is unknown
        """
        addresses = get_addresses(network)
        return cls(package_id=addresses.package_id, factory_id=addresses.factory_id, **overrides)


# Default configuration instance
DEFAULT_QUOTER_CONFIG = QuoterConfig()
