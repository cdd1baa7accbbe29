"""Pytest configuration and fixtures."""

import pytest

from dlmm.gateway import MockLedgerGateway
from dlmm.quoting import QuoteCache, Quoter
from tests.helpers import FakeClock, make_quoter


@pytest.fixture
def gateway() -> MockLedgerGateway:
    """Empty mock gateway: every pair has no pool until configured."""
    return MockLedgerGateway()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> QuoteCache:
    """Quote cache with a 10 second TTL on a manual clock."""
    return QuoteCache(ttl=10.0, clock=clock)


@pytest.fixture
def quoter(gateway: MockLedgerGateway, cache: QuoteCache) -> Quoter:
    """Quoter over the mock gateway, routing through USDC, WETH and WBTC."""
    return make_quoter(gateway, cache=cache)
