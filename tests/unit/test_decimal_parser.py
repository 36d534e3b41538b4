"""
Тесты для DecimalParser

Проверяет:
1. Грамматику: whitespace, '+', цифры, trailing whitespace
2. Различие NO_DIGITS / INVALID_CHARACTER
3. Шаг mul10_add и перенос в новый limb
4. Нормализацию (ведущие нули) и каноничный ноль
5. Совпадение с эталонным int на значениях до 64 бит и больше
"""

import random

import pytest

from src.core.bignum import (
    BigUint,
    InvalidDecimalInput,
    ParseError,
    ParseErrorKind,
    format_hex,
    mul10_add,
    parse_decimal,
    parse_decimal_or_raise,
)


def _ok(text: str) -> BigUint:
    result = parse_decimal(text)
    assert isinstance(result, BigUint), f"{text!r} rejected: {result}"
    return result


def _err(text: str) -> ParseError:
    result = parse_decimal(text)
    assert isinstance(result, ParseError), f"{text!r} accepted: {result}"
    return result


# =============================================================================
# ТЕСТЫ: mul10_add
# =============================================================================


class TestMul10Add:
    """Тесты шага value = value * 10 + digit"""

    def test_empty_value_treated_as_zero(self) -> None:
        value = BigUint()
        mul10_add(value, 7)
        assert value.to_int() == 7

    def test_accumulates_digits(self) -> None:
        value = BigUint.zero()
        for digit in (1, 2, 3):
            mul10_add(value, digit)
        assert value.to_int() == 123

    def test_carry_appends_new_limb(self) -> None:
        """Перенос из старшего limb дописывается новым limb"""
        value = BigUint.from_limbs([0xFFFFFFFF])
        mul10_add(value, 9)
        assert value.length == 2
        assert value.to_int() == 0xFFFFFFFF * 10 + 9

    def test_carry_propagates_through_limbs(self) -> None:
        value = BigUint.from_limbs([0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF])
        mul10_add(value, 9)
        assert value.to_int() == (2**96 - 1) * 10 + 9
        assert value.length == 4

    @pytest.mark.parametrize("digit", [-1, 10, 42])
    def test_invalid_digit_raises(self, digit: int) -> None:
        with pytest.raises(ValueError, match="digit must be in 0..9"):
            mul10_add(BigUint.zero(), digit)


# =============================================================================
# ТЕСТЫ: Успешный разбор
# =============================================================================


class TestParseDecimalAccepts:
    """Допустимые входы"""

    def test_simple_number(self) -> None:
        assert _ok("42").to_int() == 42

    def test_zero(self) -> None:
        value = _ok("0")
        assert value.is_zero()
        assert value.length == 1

    def test_many_zeros_are_canonical_zero(self) -> None:
        value = _ok("0000000000000000000000000")
        assert value.length == 1
        assert value.significant_limbs() == (0,)

    def test_leading_zeros(self) -> None:
        """Ведущие нули не влияют на значение"""
        assert _ok("00042") == _ok("42")
        assert _ok("00042").length == 1

    def test_plus_sign(self) -> None:
        assert _ok("+17").to_int() == 17

    def test_leading_whitespace(self) -> None:
        assert _ok(" \t 99").to_int() == 99
        assert _ok("  +5").to_int() == 5

    def test_trailing_newline(self) -> None:
        """Перевод строки из readline допустим"""
        assert _ok("123\n").to_int() == 123
        assert _ok("123\r\n").to_int() == 123

    def test_trailing_whitespace(self) -> None:
        assert _ok("8 \t \v\f").to_int() == 8

    def test_limb_boundary_values(self) -> None:
        assert _ok("4294967295").significant_limbs() == (0xFFFFFFFF,)
        assert _ok("4294967296").significant_limbs() == (0, 1)

    def test_max_u64(self) -> None:
        value = _ok("18446744073709551615")
        assert value.significant_limbs() == (0xFFFFFFFF, 0xFFFFFFFF)

    def test_result_is_normalized(self) -> None:
        value = _ok("000000000000000000000000000000001")
        assert value.length == 1
        assert value.limbs[value.length - 1] != 0

    def test_random_u64_hex_rendering(self) -> None:
        """Разбор + рендер совпадают с hex() эталонного int"""
        rng = random.Random(20240601)
        samples = [0, 1, 255, 2**32 - 1, 2**32, 2**64 - 1]
        samples += [rng.getrandbits(64) for _ in range(200)]

        for v in samples:
            assert format_hex(_ok(str(v))) == hex(v)

    def test_known_hex_renderings(self) -> None:
        assert format_hex(_ok("255")) == "0xff"
        assert format_hex(_ok("4294967296")) == "0x100000000"

    def test_large_number(self) -> None:
        text = "9" * 120
        assert _ok(text).to_int() == int(text)


# =============================================================================
# ТЕСТЫ: Отказ разбора
# =============================================================================


class TestParseDecimalRejects:
    """Недопустимые входы и вид ошибки"""

    @pytest.mark.parametrize("text", ["", "+", "   ", "\n", " \t+"])
    def test_no_digits(self, text: str) -> None:
        error = _err(text)
        assert error.kind == ParseErrorKind.NO_DIGITS
        assert error.position == len(text)

    def test_whitespace_after_sign(self) -> None:
        """После знака пробел, а не цифра"""
        error = _err(" + 1")
        assert error.kind == ParseErrorKind.INVALID_CHARACTER
        assert error.position == 2

    @pytest.mark.parametrize(
        "text, position",
        [
            ("12a", 2),
            ("1 2", 2),
            ("-1", 0),
            ("++1", 1),
            ("+-1", 1),
            ("a12", 0),
            ("1.5", 1),
            ("12 \n x", 5),
            ("1_000", 1),
            ("0x10", 1),
        ],
    )
    def test_invalid_character(self, text: str, position: int) -> None:
        error = _err(text)
        assert error.kind == ParseErrorKind.INVALID_CHARACTER
        assert error.position == position

    def test_unicode_digits_rejected(self) -> None:
        """Только ASCII цифры"""
        assert _err("٤٢").kind == ParseErrorKind.INVALID_CHARACTER
        assert _err("1²").kind == ParseErrorKind.INVALID_CHARACTER

    def test_nul_rejected(self) -> None:
        assert _err("12\x003").kind == ParseErrorKind.INVALID_CHARACTER

    def test_error_details(self) -> None:
        error = _err("12a")
        assert "'a'" in error.details

    def test_parse_error_is_immutable(self) -> None:
        error = _err("")
        with pytest.raises(AttributeError):
            error.position = 5  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ: parse_decimal_or_raise
# =============================================================================


class TestParseDecimalOrRaise:
    def test_success(self) -> None:
        assert parse_decimal_or_raise("77\n").to_int() == 77

    def test_failure_raises_with_error(self) -> None:
        with pytest.raises(InvalidDecimalInput) as exc_info:
            parse_decimal_or_raise("7x")

        assert exc_info.value.error.kind == ParseErrorKind.INVALID_CHARACTER
        assert exc_info.value.error.position == 1
        assert isinstance(exc_info.value, ValueError)
