"""
ProductReport — Снапшот завершённого умножения

Immutable Pydantic модель результата конвейера parse → multiply → format.
Полная совместимость с JSON Schema (contracts/schema/product_report.json).
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

# Каноничный hex: ноль или старшая цифра без ведущих нулей
PRODUCT_HEX_PATTERN: Final[str] = r"^0x(0|[1-9a-f][0-9a-f]*)$"


class ProductReport(BaseModel):
    """
    Результат умножения двух десятичных операндов.

    Операнды хранятся так, как были введены (без окружающих пробелов).
    """

    first_operand: str = Field(..., min_length=1, description="Первый операнд (decimal)")
    second_operand: str = Field(..., min_length=1, description="Второй операнд (decimal)")

    first_limbs: int = Field(..., ge=1, description="Длина первого операнда в limbs")
    second_limbs: int = Field(..., ge=1, description="Длина второго операнда в limbs")
    product_limbs: int = Field(..., ge=1, description="Длина произведения в limbs")

    product_hex: str = Field(
        ..., pattern=PRODUCT_HEX_PATTERN, description="Произведение (lowercase hex)"
    )

    model_config = {"frozen": True}

    @field_validator("product_limbs")
    @classmethod
    def validate_width_bound(cls, v: int, info) -> int:
        """Длина произведения не превышает сумму длин операндов"""
        if "first_limbs" in info.data and "second_limbs" in info.data:
            bound = info.data["first_limbs"] + info.data["second_limbs"]
            if v > bound:
                raise ValueError(f"product_limbs {v} exceeds operand width bound {bound}")
        return v
