"""Mathematical utilities for the DLMM SDK.

This package provides:
- bin_price: bin index <-> Q64.64 price conversion
- amounts: basis-point, slippage and token amount helpers
"""

from dlmm.math.amounts import (
    bps_to_percentage,
    calculate_slippage_amount,
    format_token_amount,
    is_price_impact_acceptable,
    parse_token_amount,
    percentage_to_bps,
)
from dlmm.math.bin_price import bin_from_price, bin_step_base, price_from_bin

__all__ = [
    "bin_from_price",
    "bin_step_base",
    "bps_to_percentage",
    "calculate_slippage_amount",
    "format_token_amount",
    "is_price_impact_acceptable",
    "parse_token_amount",
    "percentage_to_bps",
    "price_from_bin",
]
