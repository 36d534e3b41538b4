"""
Contract Validation Module

Модуль для валидации JSON контрактов (contracts/schema/).
"""

from .validators import (
    ContractValidator,
    ProductReportValidator,
    SchemaLoader,
    get_schema_loader,
    validate_product_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ProductReportValidator",
    # Functions
    "get_schema_loader",
    "validate_product_report",
]
