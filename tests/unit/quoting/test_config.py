"""Tests for QuoterConfig and network addresses."""

import dataclasses

import pytest

from dlmm.constants import (
    DEFAULT_INTERMEDIATE_TOKENS,
    MAINNET_ADDRESSES,
    TESTNET_ADDRESSES,
    get_addresses,
)
from dlmm.quoting import DEFAULT_QUOTER_CONFIG, QuoterConfig


class TestQuoterConfig:
    """Tests for QuoterConfig defaults and validation."""

    def test_defaults(self):
        config = QuoterConfig()
        assert config.package_id == TESTNET_ADDRESSES.package_id
        assert config.factory_id == TESTNET_ADDRESSES.factory_id
        assert config.intermediate_tokens == DEFAULT_INTERMEDIATE_TOKENS
        assert config.cache_ttl == 10.0

    def test_quote_target(self):
        config = QuoterConfig(package_id="0xabc")
        assert config.quote_target == "0xabc::quoter::get_quote"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_QUOTER_CONFIG.cache_ttl = 1  # type: ignore[misc]

    def test_invalid_values(self):
        with pytest.raises(ValueError, match="max_workers"):
            QuoterConfig(max_workers=0)
        with pytest.raises(ValueError, match="cache_ttl"):
            QuoterConfig(cache_ttl=-1)

    def test_for_network(self):
        config = QuoterConfig.for_network("mainnet", cache_ttl=3.0)
        assert config.package_id == MAINNET_ADDRESSES.package_id
        assert config.factory_id == MAINNET_ADDRESSES.factory_id
        assert config.cache_ttl == 3.0

    def test_for_unknown_network(self):
        with pytest.raises(ValueError):
            QuoterConfig.for_network("moonnet")


class TestGetAddresses:
    def test_known_networks(self):
        assert get_addresses("testnet") is TESTNET_ADDRESSES
        assert get_addresses("mainnet") is MAINNET_ADDRESSES
        get_addresses("devnet")

    def test_unknown_network(self):
        with pytest.raises(ValueError, match="moonnet"):
            get_addresses("moonnet")
