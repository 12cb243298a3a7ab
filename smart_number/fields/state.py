"""
Live Input State Machine

Pure transitions of a numeric text field.

CRITICAL INVARIANTS:
1. reduce() never mutates; it returns a new NumericInputState
2. Validation is derived from (state, options) on demand, never stored
3. An untouched field showing its initial value is always valid

State flow:
    pristine --ChangeText/Blur/SetValue/Clear--> editing
    editing  --Reset--> pristine
    Focus only toggles is_focused; Configure keeps touched input intact.
"""

import math
import re
from typing import Union

from pydantic import BaseModel, ConfigDict

from smart_number.formatting.primitives import (
    is_finite_number,
    js_round,
    number_to_string,
    to_fixed,
)
from smart_number.models.input import NumericInputOptions, NumericInputState
from smart_number.models.number import ValidationResult
from smart_number.validation.validator import validate_field_value


_DISALLOWED_CHARS = re.compile(r'[^0-9.-]')


# =============================================================================
# ACTIONS
# =============================================================================

class ChangeText(BaseModel):
    """The user edited the text."""
    model_config = ConfigDict(frozen=True)

    text: str


class Focus(BaseModel):
    model_config = ConfigDict(frozen=True)


class Blur(BaseModel):
    model_config = ConfigDict(frozen=True)


class SetValue(BaseModel):
    """Programmatic value, e.g. an auto-fix."""
    model_config = ConfigDict(frozen=True)

    value: float


class Clear(BaseModel):
    model_config = ConfigDict(frozen=True)


class Reset(BaseModel):
    model_config = ConfigDict(frozen=True)


class Configure(BaseModel):
    """New options for the field; applied by the caller after reduce()."""
    model_config = ConfigDict(frozen=True)

    options: NumericInputOptions


Action = Union[ChangeText, Focus, Blur, SetValue, Clear, Reset, Configure]


# =============================================================================
# HELPERS
# =============================================================================

def sanitize_keystroke(text: str, options: NumericInputOptions) -> str:
    """
    Clean raw text as the user types.

    Examples (default options):
        "1.2.3"  -> "1.23"
        "1-2-3"  -> "123"
        "-1-2"   -> "-12"
        "1.239"  -> "1.23"   (truncated, not rounded)
        "$1,500" -> "1500"
    """
    cleaned = text or ""

    if not options.allow_decimals:
        cleaned = cleaned.replace(".", "")

    if not options.allow_negative:
        cleaned = cleaned.replace("-", "")

    cleaned = _DISALLOWED_CHARS.sub("", cleaned)

    # Only one decimal point; later dots are merged into the fraction
    parts = cleaned.split(".")
    if len(parts) > 2:
        cleaned = parts[0] + "." + "".join(parts[1:])

    # Only one minus sign, and only in front
    if "-" in cleaned:
        negative = cleaned.startswith("-")
        cleaned = cleaned.replace("-", "")
        if negative:
            cleaned = "-" + cleaned

    if options.allow_decimals and "." in cleaned:
        integer, _, fraction = cleaned.partition(".")
        if len(fraction) > options.max_decimals:
            cleaned = f"{integer}.{fraction[:options.max_decimals]}"

    return cleaned


def initial_display(options: NumericInputOptions) -> str:
    """Display string of the initial value ("0" for 0, "12.5" for 12.5)."""
    return number_to_string(options.initial_value)


def is_pristine(state: NumericInputState, options: NumericInputOptions) -> bool:
    return not state.has_been_touched and state.display_value == initial_display(options)


def fixed_display(value: float, options: NumericInputOptions) -> str:
    """Canonical display of a programmatic value."""
    if options.allow_decimals:
        return to_fixed(value, options.fixed_decimals)
    return str(js_round(value))


def evaluate_state(
    state: NumericInputState,
    options: NumericInputOptions,
) -> ValidationResult:
    """
    Derive the validation of a field.

    Pristine fields skip validation entirely and report the initial value.
    """
    if is_pristine(state, options):
        return ValidationResult(
            is_valid=True,
            numeric_value=options.initial_value,
            errors=(),
        )
    return validate_field_value(state.display_value, options)


# =============================================================================
# REDUCER
# =============================================================================

def reduce(
    state: NumericInputState,
    action: Action,
    options: NumericInputOptions,
) -> NumericInputState:
    """
    Apply one action to a field state.

    Args:
        state: Current state
        action: What happened
        options: Options in effect before the action

    Returns:
        The next state (the same object when nothing changes)
    """
    if isinstance(action, ChangeText):
        return state.model_copy(update={
            "display_value": sanitize_keystroke(action.text, options),
            "has_been_touched": True,
        })

    if isinstance(action, Focus):
        if state.is_focused:
            return state
        return state.model_copy(update={"is_focused": True})

    if isinstance(action, Blur):
        display_value = state.display_value
        value = evaluate_state(state, options).numeric_value
        if value is not None and math.isfinite(value):
            display_value = to_fixed(value, options.fixed_decimals)
        return state.model_copy(update={
            "display_value": display_value,
            "is_focused": False,
            "has_been_touched": True,
        })

    if isinstance(action, SetValue):
        # A value that cannot be shown leaves the field empty
        display_value = (
            fixed_display(action.value, options)
            if is_finite_number(action.value)
            else ""
        )
        return state.model_copy(update={
            "display_value": display_value,
            "has_been_touched": True,
        })

    if isinstance(action, Clear):
        return state.model_copy(update={
            "display_value": "",
            "has_been_touched": True,
        })

    if isinstance(action, Reset):
        return NumericInputState(display_value=initial_display(options))

    if isinstance(action, Configure):
        if is_pristine(state, options):
            return state.model_copy(update={
                "display_value": initial_display(action.options),
            })
        return state

    raise TypeError(f"Unknown action: {type(action).__name__}")
