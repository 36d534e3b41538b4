"""
LimbBuffer — Growable Limb Storage для BigUint

Модуль содержит единственную сущность ядра — BigUint, беззнаковое целое
произвольной точности, хранящееся как последовательность 32-битных limbs
(little-endian: limbs[0] — младшие 32 бита).

Управление ёмкостью:
- reserve: гарантирует capacity >= need, рост удвоением (минимум 4)
- normalize: отбрасывает нулевые старшие limbs
- set_zero: сброс в каноничный ноль (length 1, limbs[0] == 0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value == Σ limbs[i] * 2^(32*i) для i в [0, length)
2. После публичной операции limbs[length-1] != 0, кроме каноничного нуля
3. capacity >= length; рост только удвоением, capacity никогда не уменьшается
4. Невозможность роста → AllocationExhaustion (не восстанавливается)
"""

import logging
import sys
from typing import Final, Iterable

logger = logging.getLogger(__name__)

# =============================================================================
# LIMB-ПАРАМЕТРЫ
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 32

# Основание позиционной системы (2^32)
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска младших 32 бит
LIMB_MASK: Final[int] = LIMB_BASE - 1

# Размер limb в байтах (для расчёта адресуемой ёмкости)
LIMB_BYTES: Final[int] = LIMB_BITS // 8

# Стартовая ёмкость при первом reserve
MIN_CAPACITY: Final[int] = 4

# Максимальная ёмкость в limbs: адресуемый размер платформы / размер limb
MAX_CAPACITY: Final[int] = sys.maxsize // LIMB_BYTES


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AllocationExhaustion(MemoryError):
    """
    Невозможно увеличить ёмкость буфера.

    Возникает, если удвоение ёмкости переполняет адресуемый размер или
    интерпретатор не может выделить память. Состояние фатально для запуска:
    повторных попыток и частичных результатов нет, исключение поднимается
    до верхнего уровня без перехвата в ядре.
    """

    def __init__(self, need: int, capacity: int, max_capacity: int):
        self.need = need
        self.capacity = capacity
        self.max_capacity = max_capacity
        super().__init__(
            f"capacity overflow: need={need} limbs, "
            f"capacity={capacity}, max_capacity={max_capacity}"
        )


# =============================================================================
# BIGUINT
# =============================================================================


class BigUint:
    """
    Беззнаковое целое произвольной точности на 32-битных limbs.

    Attributes:
        limbs: Хранилище limbs длиной capacity (значимы первые length)
        length: Количество значимых limbs
        capacity: Выделенная ёмкость (деталь реализации, не влияет на значение)

    Значение создаётся пустым (length 0) и заполняется парсером или
    умножением. У каждого BigUint один владелец; хранилище не разделяется
    между значениями.
    """

    __slots__ = ("limbs", "length", "capacity")

    def __init__(self) -> None:
        self.limbs: list[int] = []
        self.length: int = 0
        self.capacity: int = 0

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigUint":
        """Новый каноничный ноль."""
        value = cls()
        value.set_zero()
        return value

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "BigUint":
        """
        Построение нормализованного значения из little-endian limbs.

        Args:
            limbs: Limbs от младшего к старшему, каждый в [0, 2^32)

        Returns:
            Нормализованный BigUint (пустой вход → каноничный ноль)

        Raises:
            ValueError: Если limb не помещается в 32 бита
        """
        items = list(limbs)
        for index, limb in enumerate(items):
            if not 0 <= limb <= LIMB_MASK:
                raise ValueError(f"limb[{index}] out of 32-bit range: {limb}")

        value = cls()
        if not items:
            value.set_zero()
            return value

        value.reserve(len(items))
        value.limbs[: len(items)] = items
        value.length = len(items)
        value.normalize()
        return value

    # -------------------------------------------------------------------------
    # Capacity management
    # -------------------------------------------------------------------------

    def reserve(self, need: int, max_capacity: int = MAX_CAPACITY) -> None:
        """
        Гарантирует capacity >= need.

        Ёмкость растёт удвоением начиная с MIN_CAPACITY. Хранилище
        перевыделяется: ссылки на self.limbs, полученные до вызова,
        становятся устаревшими.

        Args:
            need: Требуемое количество limbs
            max_capacity: Предел адресуемой ёмкости (default: MAX_CAPACITY)

        Raises:
            ValueError: Если need < 0
            AllocationExhaustion: Если удвоение переполняет max_capacity
                или память не может быть выделена
        """
        if need < 0:
            raise ValueError(f"need must be non-negative, got {need}")

        if self.capacity >= need:
            return

        new_capacity = self.capacity or MIN_CAPACITY
        while new_capacity < need:
            if new_capacity > (max_capacity >> 1):
                logger.critical(
                    "Limb buffer capacity overflow: need=%d capacity=%d",
                    need,
                    self.capacity,
                )
                raise AllocationExhaustion(need, self.capacity, max_capacity)
            new_capacity <<= 1

        try:
            storage = self.limbs[: self.length] + [0] * (new_capacity - self.length)
        except MemoryError as e:
            logger.critical("Limb buffer allocation failed: capacity=%d", new_capacity)
            raise AllocationExhaustion(need, self.capacity, max_capacity) from e

        logger.debug("Limb buffer grown: %d -> %d limbs", self.capacity, new_capacity)
        self.limbs = storage
        self.capacity = new_capacity

    def normalize(self) -> None:
        """Отбрасывает нулевые старшие limbs, оставляя минимум один."""
        while self.length > 1 and self.limbs[self.length - 1] == 0:
            self.length -= 1

    def set_zero(self) -> None:
        """Сброс в каноничный ноль."""
        self.reserve(1)
        self.limbs[0] = 0
        self.length = 1

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """True для пустого значения и каноничного нуля."""
        return self.length == 0 or (self.length == 1 and self.limbs[0] == 0)

    def significant_limbs(self) -> tuple[int, ...]:
        """Значимые limbs (младший первым)."""
        return tuple(self.limbs[: self.length])

    def to_int(self) -> int:
        """Значение как int: Σ limbs[i] * 2^(32*i)."""
        result = 0
        for limb in reversed(self.limbs[: self.length]):
            result = (result << LIMB_BITS) | limb
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigUint):
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return self.is_zero() and other.is_zero()
        return self.significant_limbs() == other.significant_limbs()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"BigUint(limbs={list(self.significant_limbs())}, "
            f"length={self.length}, capacity={self.capacity})"
        )
