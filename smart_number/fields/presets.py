"""
Input Presets

Currency, percentage and integer fields are the generic numeric field
with fixed parameters; preset parameters win over caller options.
"""

from typing import Any, Optional, Union
from uuid import UUID

from smart_number.audit import NumericAuditLogger
from smart_number.config import get_settings
from smart_number.fields.numeric_input import (
    NumericInput,
    ValidationCallback,
    ValueCallback,
)
from smart_number.formatting.currencies import find_currency
from smart_number.models.input import InputKind, NumericInputOptions
from smart_number.models.number import LimitsDomain


PERCENTAGE_MAX = 100

_PRESETS: dict[InputKind, dict[str, Any]] = {
    InputKind.NUMERIC: {},
    InputKind.CURRENCY: {
        "allow_decimals": True,
        "max_decimals": 2,
        "context": LimitsDomain.TRANSACTION.value,
    },
    InputKind.PERCENTAGE: {
        "max_value": PERCENTAGE_MAX,
        "min_value": 0,
        "allow_decimals": True,
        "max_decimals": 2,
        "allow_negative": False,
    },
    InputKind.INTEGER: {
        "allow_decimals": False,
    },
}

_PLACEHOLDERS: dict[InputKind, str] = {
    InputKind.NUMERIC: "0.00",
    InputKind.CURRENCY: "0.00",
    InputKind.PERCENTAGE: "0.00%",
    InputKind.INTEGER: "0",
}

KindLike = Union[InputKind, str]


def preset_options(
    kind: KindLike,
    options: Optional[NumericInputOptions] = None,
    **overrides: Any,
) -> NumericInputOptions:
    """Options of a preset field, built on top of the caller's options."""
    base = options.model_dump() if options is not None else {}
    return NumericInputOptions(**{**base, **overrides, **_PRESETS[InputKind(kind)]})


def create_numeric_input(
    kind: KindLike = InputKind.NUMERIC,
    options: Optional[NumericInputOptions] = None,
    *,
    on_value_change: Optional[ValueCallback] = None,
    on_validation_change: Optional[ValidationCallback] = None,
    audit_logger: Optional[NumericAuditLogger] = None,
    correlation_id: Optional[UUID] = None,
    **overrides: Any,
) -> NumericInput:
    """
    Create a field of the given kind.

    Example:
        field = create_numeric_input("currency", max_value=10_000_000, min_value=0.01)
    """
    return NumericInput(
        preset_options(kind, options, **overrides),
        on_value_change=on_value_change,
        on_validation_change=on_validation_change,
        audit_logger=audit_logger,
        correlation_id=correlation_id,
    )


def currency_input(**kwargs: Any) -> NumericInput:
    """Money amount: 2 decimals, transaction limits."""
    return create_numeric_input(InputKind.CURRENCY, **kwargs)


def percentage_input(**kwargs: Any) -> NumericInput:
    """Percentage between 0 and 100."""
    return create_numeric_input(InputKind.PERCENTAGE, **kwargs)


def integer_input(**kwargs: Any) -> NumericInput:
    return create_numeric_input(InputKind.INTEGER, **kwargs)


def auto_fix(field: NumericInput, kind: KindLike = InputKind.NUMERIC) -> bool:
    """
    Clamp an out-of-range value into the field bounds.

    Does nothing when the field has no value or its value is zero.

    Returns:
        True if the field was changed
    """
    value = field.numeric_value
    if not value:
        return False

    fixed = value
    options = field.options

    if InputKind(kind) == InputKind.PERCENTAGE and fixed > PERCENTAGE_MAX:
        fixed = PERCENTAGE_MAX
    if options.max_value is not None and fixed > options.max_value:
        fixed = options.max_value
    if options.min_value is not None and fixed < options.min_value:
        fixed = options.min_value

    if fixed == value:
        return False

    field.set_value(fixed, auto_fixed=True)
    return True


def placeholder_for(kind: KindLike, placeholder: Optional[str] = None) -> str:
    """Placeholder text; an explicit placeholder always wins."""
    if placeholder:
        return placeholder
    return _PLACEHOLDERS[InputKind(kind)]


def affixes_for(
    kind: KindLike,
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    currency: Optional[str] = None,
) -> tuple[str, str]:
    """
    Text shown before and after the field.

    Currency fields default to the symbol of `currency` (or the configured
    default currency), "$" when the code is unknown. Percentage fields
    default to a "%" suffix.
    """
    kind = InputKind(kind)

    prefix_text = prefix or ""
    if not prefix_text and kind == InputKind.CURRENCY:
        found = find_currency(currency or get_settings().formatting.default_currency)
        prefix_text = found.symbol if found else "$"

    suffix_text = suffix or ("%" if kind == InputKind.PERCENTAGE else "")

    return prefix_text, suffix_text
