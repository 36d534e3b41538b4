"""Multiply pipeline: decimal text → BigUint → product → hex.

Порядок:
1. Разбор первого операнда (ошибка → стоп, без умножения)
2. Разбор второго операнда (ошибка → стоп, без умножения)
3. Умножение
4. Hex-рендер и ProductReport

AllocationExhaustion не перехватывается: решение о завершении принимает
верхний уровень оболочки.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.bignum import ParseError, format_hex, multiply, parse_decimal
from src.core.bignum.decimal_parser import WHITESPACE
from src.core.domain import ProductReport

logger = logging.getLogger(__name__)

_OPERAND_WHITESPACE = "".join(sorted(WHITESPACE))


@dataclass(frozen=True)
class PipelineResult:
    """Результат конвейера."""

    ok: bool
    product_hex: str

    # Диагностика отказа (наружу сообщение одно и то же)
    failed_operand: Optional[int]
    parse_error: Optional[ParseError]

    report: Optional[ProductReport]


class MultiplyPipeline:
    """Конвейер parse → multiply → format для двух операндов."""

    def __init__(self):
        """Конвейер не хранит состояния между запусками."""
        pass

    def run(self, first_text: str, second_text: str) -> PipelineResult:
        """Разбор, умножение и рендер.

        Args:
            first_text: Первая строка ввода (может содержать перевод строки)
            second_text: Вторая строка ввода

        Returns:
            PipelineResult; при ошибке разбора ok=False и product_hex пустой
        """
        operands = []
        for index, text in enumerate((first_text, second_text), start=1):
            parsed = parse_decimal(text)
            if isinstance(parsed, ParseError):
                logger.info(
                    "Operand %d rejected: %s at position %d",
                    index,
                    parsed.kind.value,
                    parsed.position,
                )
                return PipelineResult(
                    ok=False,
                    product_hex="",
                    failed_operand=index,
                    parse_error=parsed,
                    report=None,
                )
            operands.append(parsed)

        first, second = operands
        product = multiply(first, second)
        product_hex = format_hex(product)

        logger.debug(
            "Multiplied %d x %d limbs -> %d limbs",
            first.length,
            second.length,
            product.length,
        )

        report = ProductReport(
            first_operand=first_text.strip(_OPERAND_WHITESPACE),
            second_operand=second_text.strip(_OPERAND_WHITESPACE),
            first_limbs=first.length,
            second_limbs=second.length,
            product_limbs=product.length,
            product_hex=product_hex,
        )

        return PipelineResult(
            ok=True,
            product_hex=product_hex,
            failed_operand=None,
            parse_error=None,
            report=report,
        )
