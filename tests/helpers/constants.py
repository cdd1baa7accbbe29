"""Shared token constants for tests.

Usage:
    from tests.helpers import SUI, USDC
    # or
    from tests.helpers.constants import SUI, USDC
"""

# =============================================================================
# Swap endpoints
# =============================================================================

SUI = "0x2::sui::SUI"
DEEP = "0xdee9::deep::DEEP"

# =============================================================================
# Intermediate tokens (routing hubs)
# =============================================================================

USDC = "0xa1::usdc::USDC"
WETH = "0xa2::weth::WETH"
WBTC = "0xa3::wbtc::WBTC"

INTERMEDIATES = (USDC, WETH, WBTC)

# =============================================================================
# Object ids
# =============================================================================

PACKAGE_ID = "0x" + "ab" * 32
FACTORY_ID = "0x" + "cd" * 32
POOL_ID = "0x" + "ef" * 32
