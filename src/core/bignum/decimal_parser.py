"""
DecimalParser — Decimal Text → BigUint

Преобразование строки десятичных цифр (base 10) в BigUint (base 2^32)
последовательными шагами value = value * 10 + digit.

Грамматика входа:
    [whitespace*] ['+'] digit+ [whitespace*] <end>

- whitespace: пробел, \\t, \\n, \\v, \\f, \\r (класс C locale)
- digit: только ASCII '0'-'9'
- ведущие нули допустимы
- завершающий перевод строки допустим как trailing whitespace

Ошибки возвращаются как значение ParseError (не exception):
- NO_DIGITS: вход закончился до первой цифры
- INVALID_CHARACTER: любой другой недопустимый символ
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.bignum.limb_buffer import LIMB_BITS, LIMB_MASK, BigUint

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ГРАММАТИКИ
# =============================================================================

# Пробельные символы (C locale isspace)
WHITESPACE: Final[frozenset[str]] = frozenset(" \t\n\v\f\r")

# Допустимые цифры (только ASCII)
DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# Необязательный знак перед цифрами
PLUS_SIGN: Final[str] = "+"

DECIMAL_BASE: Final[int] = 10


# =============================================================================
# ERRORS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Причина отказа парсера"""

    NO_DIGITS = "NO_DIGITS"
    INVALID_CHARACTER = "INVALID_CHARACTER"


@dataclass(frozen=True)
class ParseError:
    """Результат неуспешного разбора."""

    kind: ParseErrorKind
    # Индекс в исходной строке, где разбор остановился
    position: int
    details: str


class InvalidDecimalInput(ValueError):
    """Операнд не соответствует десятичной грамматике."""

    def __init__(self, error: ParseError):
        self.error = error
        super().__init__(f"{error.kind.value} at position {error.position}: {error.details}")


# =============================================================================
# MUL10 + ADD
# =============================================================================


def mul10_add(value: BigUint, digit: int) -> None:
    """
    Один шаг парсера: value = value * 10 + digit (in place).

    Один проход по limbs: каждый limb умножается на 10, перенос уходит в
    следующий limb. Максимум промежуточной суммы (2^32-1)*10 + 9 помещается
    в 64-битный аккумулятор. Остаточный перенос дописывается новым limb.

    Args:
        value: Аккумулятор (пустое значение трактуется как ноль)
        digit: Десятичная цифра 0..9

    Raises:
        ValueError: Если digit вне 0..9
    """
    if not 0 <= digit < DECIMAL_BASE:
        raise ValueError(f"digit must be in 0..9, got {digit}")

    if value.length == 0:
        value.set_zero()

    carry = digit
    limbs = value.limbs
    for i in range(value.length):
        acc = limbs[i] * DECIMAL_BASE + carry
        limbs[i] = acc & LIMB_MASK
        carry = acc >> LIMB_BITS

    if carry:
        value.reserve(value.length + 1)
        value.limbs[value.length] = carry
        value.length += 1


# =============================================================================
# PARSE
# =============================================================================


def _fail(kind: ParseErrorKind, position: int, details: str) -> ParseError:
    logger.debug("Decimal parse failed: kind=%s position=%d", kind.value, position)
    return ParseError(kind=kind, position=position, details=details)


def parse_decimal(text: str) -> BigUint | ParseError:
    """
    Разбор десятичной строки в нормализованный BigUint.

    Args:
        text: Исходный текст (может содержать trailing newline)

    Returns:
        BigUint при успехе, ParseError при несоответствии грамматике

    Examples:
        >>> parse_decimal("  +00255\\n").to_int()
        255
        >>> parse_decimal("12a").kind
        <ParseErrorKind.INVALID_CHARACTER: 'INVALID_CHARACTER'>
    """
    end = len(text)
    pos = 0

    while pos < end and text[pos] in WHITESPACE:
        pos += 1

    if pos < end and text[pos] == PLUS_SIGN:
        pos += 1

    if pos == end:
        return _fail(ParseErrorKind.NO_DIGITS, pos, "no digits found")

    if text[pos] not in DIGITS:
        return _fail(
            ParseErrorKind.INVALID_CHARACTER,
            pos,
            f"expected digit, got {text[pos]!r}",
        )

    value = BigUint.zero()

    while pos < end:
        char = text[pos]
        if char in WHITESPACE:
            break
        if char not in DIGITS:
            return _fail(
                ParseErrorKind.INVALID_CHARACTER,
                pos,
                f"unexpected character {char!r}",
            )
        mul10_add(value, ord(char) - ord("0"))
        pos += 1

    # Хвост допускает только whitespace
    while pos < end and text[pos] in WHITESPACE:
        pos += 1

    if pos != end:
        return _fail(
            ParseErrorKind.INVALID_CHARACTER,
            pos,
            f"trailing garbage {text[pos]!r} after whitespace",
        )

    value.normalize()
    if value.length == 0:
        value.set_zero()
    return value


def parse_decimal_or_raise(text: str) -> BigUint:
    """
    Вариант parse_decimal с exception вместо значения ошибки.

    Raises:
        InvalidDecimalInput: Если text не соответствует грамматике
    """
    result = parse_decimal(text)
    if isinstance(result, ParseError):
        raise InvalidDecimalInput(result)
    return result
