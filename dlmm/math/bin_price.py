"""Discrete-bin price math.

A DLMM pool quantizes price into bins. Bin ``b`` of a pool with bin step
``s`` basis points has price ``(1 + s/10000) ** b`` (token B per token A),
encoded on-chain as a Q64.64 fixed-point integer (scaled by 2^64).

Both directions are computed with ``decimal`` at a precision sized to the
operands instead of float pow/log. The integer price is truncated, so the
round trip ``bin_from_price(price_from_bin(b, s), s) == b`` is exact as long
as the scaled price keeps enough significant digits to resolve one bin step
(any scaled price >= 2^32 does, for every bin step). Below that, deeply
negative bins collapse toward zero and drift is possible.
"""

from __future__ import annotations

import decimal
import math
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, Decimal

from dlmm.constants import BPS_DENOMINATOR, PRICE_SCALE
from dlmm.errors import DomainError

__all__ = [
    "price_from_bin",
    "bin_from_price",
    "bin_step_base",
]

# Significant digits kept beyond the integer part of a scaled price
GUARD_DIGITS = 40

# Decimal digits of 2^64
_SCALE_DIGITS = math.ceil(64 * math.log10(2))

# ln() only needs relative precision, not the full integer width
_LOG_CONTEXT = decimal.Context(prec=60)


def _validate_bin_step(bin_step: int) -> None:
    if isinstance(bin_step, bool) or not isinstance(bin_step, int):
        raise DomainError(f"Bin step must be an integer, got {type(bin_step).__name__}")
    if bin_step <= 0 or bin_step > BPS_DENOMINATOR:
        raise DomainError(f"Bin step must be in [1, {BPS_DENOMINATOR}] bps, got {bin_step}")


def bin_step_base(bin_step: int) -> Decimal:
    """Price ratio between adjacent bins, ``1 + bin_step / 10000`` (exact)."""
    _validate_bin_step(bin_step)
    return Decimal(BPS_DENOMINATOR + bin_step).scaleb(-4)


def price_from_bin(bin_id: int, bin_step: int) -> str:
    """Get the Q64.64 price of a bin.

    Args:
        bin_id: Signed bin index
        bin_step: Pool bin step in basis points (1-10000)

    Returns:
        Scaled price as an integer decimal string, truncated toward zero

    Raises:
        DomainError: If bin_step is not a positive integer within range
    """
    base = bin_step_base(bin_step)
    if isinstance(bin_id, bool) or not isinstance(bin_id, int):
        raise DomainError(f"Bin id must be an integer, got {type(bin_id).__name__}")

    # Width of the integer part, so positive bins are exact to the last digit
    int_digits = max(bin_id, 0) * math.log10(float(base)) + _SCALE_DIGITS
    context = decimal.Context(prec=math.ceil(int_digits) + GUARD_DIGITS, rounding=ROUND_HALF_EVEN)

    with decimal.localcontext(context):
        scaled = (base**bin_id) * PRICE_SCALE
        # Formatting a Decimal avoids the int -> str digit limit for huge prices
        return format(scaled.to_integral_value(rounding=ROUND_DOWN), "f")


def bin_from_price(price: str | int | Decimal, bin_step: int) -> int:
    """Get the bin whose price is nearest (in log space) to a Q64.64 price.

    Args:
        price: Scaled price as an integer string, int, or Decimal
        bin_step: Pool bin step in basis points (1-10000)

    Returns:
        round(ln(price / 2^64) / ln(1 + bin_step / 10000))

    Raises:
        DomainError: If bin_step is invalid or price is not a positive number
    """
    base = bin_step_base(bin_step)

    try:
        value = Decimal(price)
    except (decimal.InvalidOperation, TypeError, ValueError) as e:
        raise DomainError(f"Price must be numeric, got {price!r}") from e

    if not value.is_finite() or value <= 0:
        raise DomainError(f"Price must be positive, got {price!r}")

    with decimal.localcontext(_LOG_CONTEXT):
        exponent = (value / PRICE_SCALE).ln() / base.ln()
        return int(exponent.to_integral_value(rounding=ROUND_HALF_EVEN))
