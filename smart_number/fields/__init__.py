"""
Fields Package

Live numeric text fields: the pure state machine, the stateful field
wrapper and the currency/percentage/integer presets.
"""

from smart_number.fields.numeric_input import NumericInput
from smart_number.fields.presets import (
    affixes_for,
    auto_fix,
    create_numeric_input,
    currency_input,
    integer_input,
    percentage_input,
    placeholder_for,
    preset_options,
)
from smart_number.fields.state import (
    Blur,
    ChangeText,
    Clear,
    Configure,
    Focus,
    Reset,
    SetValue,
    evaluate_state,
    initial_display,
    reduce,
    sanitize_keystroke,
)

__all__ = [
    "NumericInput",
    "affixes_for",
    "auto_fix",
    "create_numeric_input",
    "currency_input",
    "integer_input",
    "percentage_input",
    "placeholder_for",
    "preset_options",
    "Blur",
    "ChangeText",
    "Clear",
    "Configure",
    "Focus",
    "Reset",
    "SetValue",
    "evaluate_state",
    "initial_display",
    "reduce",
    "sanitize_keystroke",
]
