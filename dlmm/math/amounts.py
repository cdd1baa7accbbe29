"""Token amount and basis-point helpers.

All amounts are integers in the smallest token unit. Conversions to and from
human-readable units go through Decimal, never float.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

from dlmm.constants import BPS_DENOMINATOR
from dlmm.errors import DomainError

__all__ = [
    "bps_to_percentage",
    "percentage_to_bps",
    "format_token_amount",
    "parse_token_amount",
    "calculate_slippage_amount",
    "is_price_impact_acceptable",
]

DEFAULT_DECIMALS = 9  # SUI and most Move coins

_DISPLAY_QUANTUM = Decimal("0.000001")


def bps_to_percentage(bps: int | Decimal) -> Decimal:
    """Convert basis points to a percentage (100 bps -> 1%)."""
    return Decimal(bps) / 100


def percentage_to_bps(percentage: int | str | Decimal) -> Decimal:
    """Convert a percentage to basis points (1% -> 100 bps)."""
    return Decimal(percentage) * 100


def format_token_amount(amount: int | str, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format a raw amount as a human-readable string with 6 fractional digits.

    Example:
        format_token_amount(1_500_000_000) == "1.500000"
    """
    value = Decimal(int(amount)).scaleb(-decimals)
    return str(value.quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP))


def parse_token_amount(amount: str | int | Decimal, decimals: int = DEFAULT_DECIMALS) -> int:
    """Parse a human-readable amount into raw units, rounding down.

    Example:
        parse_token_amount("1.5") == 1_500_000_000
    """
    value = Decimal(amount).scaleb(decimals)
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


def calculate_slippage_amount(amount: int, slippage_bps: int, is_minimum: bool = True) -> int:
    """Apply a slippage tolerance to an amount.

    Args:
        amount: Raw token amount
        slippage_bps: Tolerance in basis points (0-10000)
        is_minimum: True for a minimum output bound, False for a maximum input bound

    Returns:
        floor(amount * (10000 -/+ slippage_bps) / 10000)

    Raises:
        DomainError: If slippage_bps is outside [0, 10000]
    """
    if slippage_bps < 0 or slippage_bps > BPS_DENOMINATOR:
        raise DomainError(f"Slippage must be in [0, {BPS_DENOMINATOR}] bps, got {slippage_bps}")

    if is_minimum:
        multiplier = BPS_DENOMINATOR - slippage_bps
    else:
        multiplier = BPS_DENOMINATOR + slippage_bps
    return amount * multiplier // BPS_DENOMINATOR


def is_price_impact_acceptable(price_impact: Decimal | str, max_impact_bps: int = 500) -> bool:
    """Check a price impact percentage against a ceiling given in basis points."""
    return Decimal(price_impact) <= bps_to_percentage(max_impact_bps)
