"""
HexFormatter — BigUint → hexadecimal text

Формат: "0x" + старший limb без ведущих нулей + остальные limbs
(от старшего к младшему) ровно по 8 строчных hex-цифр с нулями слева.
Каноничный ноль → "0x0".
"""

from typing import Final

from src.core.bignum.limb_buffer import LIMB_BITS, BigUint

HEX_PREFIX: Final[str] = "0x"

# Hex-цифр на один limb (32 бита / 4 бита на цифру)
HEX_DIGITS_PER_LIMB: Final[int] = LIMB_BITS // 4


def format_hex(value: BigUint) -> str:
    """
    Рендер value в lowercase hex с префиксом 0x (без перевода строки).

    Examples:
        >>> format_hex(BigUint.from_limbs([0, 1]))
        '0x100000000'
        >>> format_hex(BigUint.zero())
        '0x0'
    """
    if value.is_zero():
        return HEX_PREFIX + "0"

    top = value.length - 1
    parts = [HEX_PREFIX, format(value.limbs[top], "x")]
    for k in range(top - 1, -1, -1):
        parts.append(format(value.limbs[k], f"0{HEX_DIGITS_PER_LIMB}x"))
    return "".join(parts)
