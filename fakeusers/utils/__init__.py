"""Utility modules."""

from .csv_handler import CSVHandler
from .validators import (
    validate_error_rate,
    validate_page,
    validate_page_range,
    validate_page_size,
)

__all__ = [
    "CSVHandler",
    "validate_error_rate",
    "validate_page",
    "validate_page_range",
    "validate_page_size",
]
