"""Shared type definitions for DLMM models.

These types are used by the API schemas and the SDK helpers.
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

# Maximum u64 value (Move token amounts are u64)
U64_MAX = 2**64 - 1

_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{64}$")
_COIN_TYPE_RE = re.compile(r"^0x[a-fA-F0-9]+::[a-zA-Z_][a-zA-Z0-9_]*::[a-zA-Z_][a-zA-Z0-9_]*$")


def validate_u64(value: Any) -> str:
    """Validate that a value is a valid u64 decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid u64 as decimal string

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    if isinstance(value, bool):
        raise ValueError("U64 must be string or int, got bool")

    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"U64 cannot be negative: {value}")
        if value > U64_MAX:
            raise ValueError(f"U64 overflow: {value} > 2^64-1")
        return str(value)

    if not isinstance(value, str):
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")

    try:
        int_value = int(value)
    except ValueError as err:
        raise ValueError(f"U64 must be a decimal integer string: '{value}'") from err

    if int_value < 0:
        raise ValueError(f"U64 cannot be negative: {value}")
    if int_value > U64_MAX:
        raise ValueError(f"U64 overflow: {value} > 2^64-1")

    return str(int_value)


# 64-bit unsigned token amount as decimal string (validated)
U64 = Annotated[
    str,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer as decimal string"),
]

# Coin type or token symbol used as a type argument for the quoter
TokenType = Annotated[str, Field(min_length=1, max_length=256)]


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Sui object/account address (0x + 64 hex chars)."""
    return bool(_ADDRESS_RE.match(address))


def is_valid_coin_type(coin_type: str) -> bool:
    """Check if a string looks like a Move coin type (package::module::Type)."""
    return bool(_COIN_TYPE_RE.match(coin_type))


def get_token_symbol(coin_type: str) -> str:
    """Get the token symbol (last path segment) of a coin type."""
    parts = coin_type.split("::")
    return parts[-1] or "UNKNOWN"


def generate_pool_key(token_a: str, token_b: str, bin_step: int) -> str:
    """Build the order-independent registry key of a pool."""
    first, second = sorted((token_a, token_b))
    return f"{first}::{second}::{bin_step}"


__all__ = [
    "U64_MAX",
    "U64",
    "TokenType",
    "validate_u64",
    "is_valid_address",
    "is_valid_coin_type",
    "get_token_symbol",
    "generate_pool_key",
]
