"""
Big unsigned integer core

Limb-представление BigUint и конвейер parse → multiply → format.
"""

# Limb storage
from src.core.bignum.limb_buffer import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    MAX_CAPACITY,
    MIN_CAPACITY,
    AllocationExhaustion,
    BigUint,
)

# Decimal parser
from src.core.bignum.decimal_parser import (
    InvalidDecimalInput,
    ParseError,
    ParseErrorKind,
    mul10_add,
    parse_decimal,
    parse_decimal_or_raise,
)

# Multiplier
from src.core.bignum.multiplier import ACCUMULATOR_MAX, multiply

# Hex formatter
from src.core.bignum.hex_formatter import HEX_DIGITS_PER_LIMB, format_hex

__all__ = [
    # Limb storage — Constants
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    "MAX_CAPACITY",
    "MIN_CAPACITY",
    # Limb storage — Exceptions
    "AllocationExhaustion",
    # Limb storage — Types
    "BigUint",
    # Decimal parser — Types
    "InvalidDecimalInput",
    "ParseError",
    "ParseErrorKind",
    # Decimal parser — Functions
    "mul10_add",
    "parse_decimal",
    "parse_decimal_or_raise",
    # Multiplier
    "ACCUMULATOR_MAX",
    "multiply",
    # Hex formatter
    "HEX_DIGITS_PER_LIMB",
    "format_hex",
]
