"""
Domain models and value objects.

Contains the ProductReport snapshot of a finished multiplication.
"""

from src.core.domain.product_report import PRODUCT_HEX_PATTERN, ProductReport

__all__ = [
    "PRODUCT_HEX_PATTERN",
    "ProductReport",
]
