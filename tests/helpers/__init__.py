"""Test helpers module for shared test utilities.

- constants: Token types and object ids
- factories: Quote, config and quoter factory functions
"""

from tests.helpers.constants import (
    DEEP,
    FACTORY_ID,
    INTERMEDIATES,
    PACKAGE_ID,
    POOL_ID,
    SUI,
    USDC,
    WBTC,
    WETH,
)
from tests.helpers.factories import FakeClock, make_config, make_quote, make_quoter

__all__ = [
    # Constants
    "SUI",
    "DEEP",
    "USDC",
    "WETH",
    "WBTC",
    "INTERMEDIATES",
    "PACKAGE_ID",
    "FACTORY_ID",
    "POOL_ID",
    # Factories
    "FakeClock",
    "make_config",
    "make_quote",
    "make_quoter",
]
