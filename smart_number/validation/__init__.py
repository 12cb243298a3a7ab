"""Validation package."""

from smart_number.validation.parser import parse_float, parse_formatted_number
from smart_number.validation.validator import (
    NumericValidator,
    validate_field_value,
    validate_input,
)

__all__ = [
    "NumericValidator",
    "parse_float",
    "parse_formatted_number",
    "validate_field_value",
    "validate_input",
]
