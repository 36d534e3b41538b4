"""
Multiplier — Schoolbook Multiplication в base 2^32

Умножение двух BigUint столбиком по 32-битным limbs с явным переносом.

Для каждого limb a[i] (внешний цикл) и b[j] (внутренний цикл):
    acc = z[i+j] + a[i] * b[j] + carry
    z[i+j] = acc mod 2^32
    carry = acc >> 32

Максимум acc: (2^32-1) + (2^32-1)^2 + (2^32-1) = 2^64 - 1, то есть сумма
всегда помещается в 64-битный аккумулятор и никогда не переполняется.

После внутреннего прохода перенос дренируется в z[i+bn] и дальше до нуля;
при выходе цепочки за выделенную ширину буфер расширяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды не изменяются
2. Результат — новое значение, не разделяющее хранилище с операндами
3. Нормализованная длина результата <= an + bn
"""

from typing import Final

from src.core.bignum.limb_buffer import LIMB_BITS, LIMB_MASK, BigUint

# Максимум промежуточной суммы (ширина аккумулятора — 64 бита)
ACCUMULATOR_MAX: Final[int] = (1 << (2 * LIMB_BITS)) - 1


def multiply(a: BigUint, b: BigUint) -> BigUint:
    """
    Произведение a * b.

    Args:
        a: Первый множитель (read-only)
        b: Второй множитель (read-only)

    Returns:
        Новый нормализованный BigUint

    Examples:
        >>> multiply(BigUint.from_limbs([0xFFFFFFFF]), BigUint.from_limbs([0xFFFFFFFF])).significant_limbs()
        (1, 4294967294)
    """
    # Ноль: без общего алгоритма, но всегда новое значение
    if a.is_zero() or b.is_zero():
        return BigUint.zero()

    an, bn = a.length, b.length
    a_limbs, b_limbs = a.limbs, b.limbs

    result = BigUint()
    result.reserve(an + bn)
    z = result.limbs
    for k in range(an + bn):
        z[k] = 0
    result.length = an + bn

    for i in range(an):
        carry = 0
        ai = a_limbs[i]
        for j in range(bn):
            acc = z[i + j] + ai * b_limbs[j] + carry
            z[i + j] = acc & LIMB_MASK
            carry = acc >> LIMB_BITS

        k = i + bn
        while carry:
            if k == result.length:
                result.reserve(result.length + 1)
                z = result.limbs
                z[result.length] = 0
                result.length += 1
            acc = z[k] + carry
            z[k] = acc & LIMB_MASK
            carry = acc >> LIMB_BITS
            k += 1

    result.normalize()
    if result.length == 0:
        result.set_zero()
    return result
