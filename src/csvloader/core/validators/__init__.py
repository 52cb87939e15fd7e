"""
Field validators applied to nested records.
"""

from .base_validator import BaseValidator, ValidationError
from .integer_validator import IntegerValidator, parse_leading_int, raw_text
from .required_field_validator import RequiredFieldValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "IntegerValidator",
    "parse_leading_int",
    "raw_text",
]
