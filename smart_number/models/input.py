"""
Live Input Models

State and configuration of one editable numeric field.

CRITICAL: A NumericInputState belongs to exactly one field.
It is immutable; every transition produces a new state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from smart_number.models.number import LimitsDomain


class InputKind(str, Enum):
    """Presets of the generic numeric field."""
    NUMERIC = "numeric"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    INTEGER = "integer"


class InputPhase(str, Enum):
    """Lifecycle phase of a field."""
    PRISTINE = "pristine"  # No interaction since creation or reset
    EDITING = "editing"    # Touched at least once


class FieldStatus(str, Enum):
    """Summary of a field for visual feedback."""
    PRISTINE = "pristine"
    VALID = "valid"
    INVALID = "invalid"


class KeyboardType(str, Enum):
    DECIMAL_PAD = "decimal-pad"
    NUMBER_PAD = "number-pad"


class NumericInputOptions(BaseModel):
    """
    Configuration of a live numeric field.

    `context` names the limits domain used by the base validation.
    """
    model_config = ConfigDict(frozen=True)

    initial_value: float = 0
    context: str = Field(
        default=LimitsDomain.DEFAULT.value,
        description="Limits domain (default, transaction, account)"
    )
    max_value: Optional[float] = None
    min_value: Optional[float] = None
    allow_negative: bool = True
    allow_decimals: bool = True
    max_decimals: int = Field(default=2, ge=0)

    @model_validator(mode='after')
    def validate_bounds(self) -> 'NumericInputOptions':
        if (
            self.max_value is not None
            and self.min_value is not None
            and self.max_value < self.min_value
        ):
            raise ValueError("max_value cannot be below min_value")
        return self

    @property
    def fixed_decimals(self) -> int:
        """Decimals written when a value is normalized."""
        return min(2, self.max_decimals) if self.allow_decimals else 0


class NumericInputState(BaseModel):
    """Stored part of a field; validation is always derived from it."""
    model_config = ConfigDict(frozen=True)

    display_value: str = ""
    is_focused: bool = False
    has_been_touched: bool = False

    @property
    def phase(self) -> InputPhase:
        return InputPhase.EDITING if self.has_been_touched else InputPhase.PRISTINE


@dataclass(frozen=True)
class TextInputProps:
    """Everything a platform text field needs to be wired to a NumericInput."""
    value: str
    on_change_text: Callable[[str], None]
    on_focus: Callable[[], None]
    on_blur: Callable[[], None]
    keyboard_type: KeyboardType
    placeholder: str
