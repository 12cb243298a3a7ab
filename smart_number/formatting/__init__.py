"""
Formatting Package

Context-aware rendering of numbers for display.
"""

from smart_number.formatting.currencies import (
    PREDEFINED_CURRENCIES,
    Currency,
    common_currencies,
    find_currency,
)
from smart_number.formatting.formatter import (
    format_currency,
    format_for_card,
    format_for_detail,
    format_for_list,
    format_for_modal,
    format_number,
)
from smart_number.formatting.locale import (
    format_compact,
    format_decimal,
    get_number_symbols,
)
from smart_number.formatting.primitives import (
    is_finite_number,
    js_round,
    number_to_string,
    to_exponential,
    to_fixed,
)

__all__ = [
    "PREDEFINED_CURRENCIES",
    "Currency",
    "common_currencies",
    "find_currency",
    "format_currency",
    "format_for_card",
    "format_for_detail",
    "format_for_list",
    "format_for_modal",
    "format_number",
    "format_compact",
    "format_decimal",
    "get_number_symbols",
    "is_finite_number",
    "js_round",
    "number_to_string",
    "to_exponential",
    "to_fixed",
]
