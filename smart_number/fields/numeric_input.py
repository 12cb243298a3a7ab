"""
Live Numeric Input

Stateful wrapper that owns one field: it feeds actions through the
reducer, derives validation and notifies the host synchronously.

Notification order is fixed: on_validation_change(is_valid, errors)
then on_value_change(value or None). Both fire once at construction and
after every action except focus.
"""

from typing import Any, Callable, Optional
from uuid import UUID, uuid4

from smart_number.audit import NumericAuditLogger
from smart_number.config import get_settings
from smart_number.fields.state import (
    Action,
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
)
from smart_number.formatting.locale import format_decimal
from smart_number.models.input import (
    FieldStatus,
    KeyboardType,
    NumericInputOptions,
    NumericInputState,
    TextInputProps,
)
from smart_number.models.number import NumericIssue, ValidationResult


ValueCallback = Callable[[Optional[float]], None]
ValidationCallback = Callable[[bool, list[str]], None]


class NumericInput:
    """
    A live numeric text field.

    Usage:
        field = NumericInput(max_value=100, on_value_change=print)
        field.on_change_text("12.345")   # display "12.34", prints 12.34
        field.on_blur()                  # display "12.34"
    """

    def __init__(
        self,
        options: Optional[NumericInputOptions] = None,
        *,
        on_value_change: Optional[ValueCallback] = None,
        on_validation_change: Optional[ValidationCallback] = None,
        audit_logger: Optional[NumericAuditLogger] = None,
        correlation_id: Optional[UUID] = None,
        field_id: Optional[UUID] = None,
        **overrides: Any,
    ):
        """
        Initialize a field.

        Args:
            options: Field configuration; keyword overrides are applied on top
            on_value_change: Called with the parsed value (None when empty/invalid)
            on_validation_change: Called with (is_valid, errors)
            audit_logger: Receives corrections and validity changes
            correlation_id: Groups the events of the fields of one form
            field_id: Identifier used in audit events
        """
        self._options = _merge_options(options, overrides)
        self._on_value_change = on_value_change
        self._on_validation_change = on_validation_change
        self._audit = audit_logger or NumericAuditLogger()
        self._correlation_id = correlation_id
        self.field_id = field_id or uuid4()

        self._state = NumericInputState(display_value=initial_display(self._options))
        self._validation = evaluate_state(self._state, self._options)
        self._notify()

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def options(self) -> NumericInputOptions:
        return self._options

    @property
    def state(self) -> NumericInputState:
        return self._state

    @property
    def display_value(self) -> str:
        return self._state.display_value

    @property
    def numeric_value(self) -> Optional[float]:
        return self._validation.numeric_value

    @property
    def is_focused(self) -> bool:
        return self._state.is_focused

    @property
    def has_been_touched(self) -> bool:
        return self._state.has_been_touched

    @property
    def validation(self) -> ValidationResult:
        return self._validation

    @property
    def is_valid(self) -> bool:
        return self._validation.is_valid

    @property
    def errors(self) -> list[str]:
        return list(self._validation.errors)

    @property
    def issues(self) -> list[NumericIssue]:
        return list(self._validation.issues)

    @property
    def status(self) -> FieldStatus:
        if not self._state.has_been_touched:
            return FieldStatus.PRISTINE
        return FieldStatus.VALID if self._validation.is_valid else FieldStatus.INVALID

    @property
    def formatted_display(self) -> str:
        """
        Text to show when the field is not being edited.

        While focused, or when the value is missing or zero, the raw
        display string is returned. Otherwise the value is grouped with
        the configured display locale.
        """
        value = self._validation.numeric_value
        if self._state.is_focused or not value:
            return self._state.display_value

        if self._options.allow_decimals:
            min_digits, max_digits = 2, self._options.max_decimals
        else:
            min_digits, max_digits = 0, 0

        try:
            return format_decimal(
                value,
                get_settings().formatting.input_display_locale,
                min_fraction_digits=min_digits,
                max_fraction_digits=max_digits,
            )
        except ValueError:
            # max_decimals below 2
            return self._state.display_value

    @property
    def text_input_props(self) -> TextInputProps:
        allow_decimals = self._options.allow_decimals
        return TextInputProps(
            value=self._state.display_value,
            on_change_text=self.on_change_text,
            on_focus=self.on_focus,
            on_blur=self.on_blur,
            keyboard_type=(
                KeyboardType.DECIMAL_PAD if allow_decimals else KeyboardType.NUMBER_PAD
            ),
            placeholder="0.00" if allow_decimals else "0",
        )

    # =========================================================================
    # HANDLERS
    # =========================================================================

    def on_change_text(self, text: str) -> None:
        self._dispatch(ChangeText(text=text))

    def on_focus(self) -> None:
        self._dispatch(Focus())

    def on_blur(self) -> None:
        before = self._state.display_value
        self._dispatch(Blur())
        if self._state.display_value != before:
            self._audit.log_normalized_on_blur(
                field_id=self.field_id,
                before=before,
                after=self._state.display_value,
                correlation_id=self._correlation_id,
            )

    def set_value(self, value: float, auto_fixed: bool = False) -> None:
        """
        Set the field from a number.

        Writes a fixed-decimal string (or a rounded integer when decimals
        are not allowed) and marks the field as touched.
        """
        self._dispatch(SetValue(value=value))
        self._audit.log_value_set(
            field_id=self.field_id,
            value=value,
            display_value=self._state.display_value,
            auto_fixed=auto_fixed,
            correlation_id=self._correlation_id,
        )

    def clear(self) -> None:
        """Empty the field; it then reports the required error."""
        self._dispatch(Clear())
        self._audit.log_cleared(
            field_id=self.field_id,
            correlation_id=self._correlation_id,
        )

    def reset(self) -> None:
        """Return to the pristine initial state."""
        self._dispatch(Reset())
        self._audit.log_reset(
            field_id=self.field_id,
            display_value=self._state.display_value,
            correlation_id=self._correlation_id,
        )

    def configure(
        self,
        options: Optional[NumericInputOptions] = None,
        **overrides: Any,
    ) -> None:
        """
        Replace the options of a live field.

        Touched input is kept as typed and re-validated with the new
        options. An untouched field adopts the new initial value.
        """
        base = options if options is not None else self._options
        self._dispatch(Configure(options=_merge_options(base, overrides)))

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _dispatch(self, action: Action) -> None:
        was_valid = self._validation.is_valid

        self._state = reduce(self._state, action, self._options)
        if isinstance(action, Configure):
            self._options = action.options

        if isinstance(action, Focus):
            return

        self._validation = evaluate_state(self._state, self._options)

        if self._validation.is_valid != was_valid:
            self._audit.log_validation_changed(
                field_id=self.field_id,
                is_valid=self._validation.is_valid,
                errors=self._validation.errors,
                display_value=self._state.display_value,
                correlation_id=self._correlation_id,
            )

        self._notify()

    def _notify(self) -> None:
        if self._on_validation_change:
            self._on_validation_change(self._validation.is_valid, list(self._validation.errors))
        if self._on_value_change:
            self._on_value_change(self._validation.numeric_value)


def _merge_options(
    options: Optional[NumericInputOptions],
    overrides: dict[str, Any],
) -> NumericInputOptions:
    if options is None:
        return NumericInputOptions(**overrides)
    if overrides:
        return NumericInputOptions(**{**options.model_dump(), **overrides})
    return options
