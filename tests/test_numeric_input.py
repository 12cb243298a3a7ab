"""Tests for the live input state machine and NumericInput."""

import math

import pytest

from smart_number.audit import NumericAuditLogger
from smart_number.fields import (
    Blur,
    ChangeText,
    Focus,
    NumericInput,
    Reset,
    create_numeric_input,
    evaluate_state,
    initial_display,
    reduce,
    sanitize_keystroke,
)
from smart_number.models import NumericEventType, NumericInputOptions, NumericInputState
from smart_number.models.input import FieldStatus, KeyboardType


class Recorder:
    """Collects callback invocations in order."""

    def __init__(self):
        self.calls = []

    def on_value_change(self, value):
        self.calls.append(("value", value))

    def on_validation_change(self, is_valid, errors):
        self.calls.append(("validation", is_valid, errors))

    @property
    def values(self):
        return [call[1] for call in self.calls if call[0] == "value"]

    @property
    def validations(self):
        return [call[1:] for call in self.calls if call[0] == "validation"]


def make_field(recorder=None, events=None, **options):
    recorder = recorder or Recorder()
    audit = NumericAuditLogger(sink=events.append) if events is not None else None
    field = NumericInput(
        on_value_change=recorder.on_value_change,
        on_validation_change=recorder.on_validation_change,
        audit_logger=audit,
        **options,
    )
    return field, recorder


class TestSanitizeKeystroke:
    """Tests for keystroke cleanup."""

    @pytest.mark.parametrize("text,expected", [
        ("1.2.3", "1.23"),
        ("1-2-3", "123"),
        ("-1-2", "-12"),
        ("1.239", "1.23"),
        ("$1,500", "1500"),
        ("abc", ""),
        ("", ""),
    ])
    def test_default_options(self, text, expected):
        assert sanitize_keystroke(text, NumericInputOptions()) == expected

    def test_negatives_disallowed(self):
        assert sanitize_keystroke("-50", NumericInputOptions(allow_negative=False)) == "50"

    def test_decimals_disallowed(self):
        assert sanitize_keystroke("1.5", NumericInputOptions(allow_decimals=False)) == "15"

    def test_zero_max_decimals_keeps_the_point(self):
        assert sanitize_keystroke("1.5", NumericInputOptions(max_decimals=0)) == "1."


class TestReducer:
    """Tests for the pure reducer."""

    def test_initial_display(self):
        assert initial_display(NumericInputOptions()) == "0"
        assert initial_display(NumericInputOptions(initial_value=12.5)) == "12.5"
        assert initial_display(NumericInputOptions(initial_value=100)) == "100"

    def test_change_text_marks_touched(self):
        options = NumericInputOptions()
        state = reduce(NumericInputState(display_value="0"), ChangeText(text="5x"), options)
        assert state.display_value == "5"
        assert state.has_been_touched is True

    def test_reduce_does_not_mutate(self):
        options = NumericInputOptions()
        before = NumericInputState(display_value="0")
        reduce(before, ChangeText(text="5"), options)
        assert before.display_value == "0"
        assert before.has_been_touched is False

    def test_focus_is_idempotent(self):
        state = NumericInputState(display_value="0", is_focused=True)
        assert reduce(state, Focus(), NumericInputOptions()) is state

    def test_blur_normalizes(self):
        options = NumericInputOptions()
        state = NumericInputState(display_value="12.", is_focused=True, has_been_touched=True)
        state = reduce(state, Blur(), options)
        assert state.display_value == "12.00"
        assert state.is_focused is False

    def test_reset(self):
        options = NumericInputOptions(initial_value=3)
        state = NumericInputState(display_value="9", is_focused=True, has_been_touched=True)
        assert reduce(state, Reset(), options) == NumericInputState(display_value="3")

    def test_pristine_evaluation(self):
        options = NumericInputOptions(min_value=1)
        result = evaluate_state(NumericInputState(display_value="0"), options)
        assert result.is_valid is True
        assert result.numeric_value == 0

    def test_unknown_action(self):
        with pytest.raises(TypeError):
            reduce(NumericInputState(), object(), NumericInputOptions())


class TestPristineState:
    """Tests for a freshly created field."""

    def test_initial_state(self):
        field, recorder = make_field()
        assert field.display_value == "0"
        assert field.numeric_value == 0
        assert field.is_valid is True
        assert field.errors == []
        assert field.has_been_touched is False
        assert field.status == FieldStatus.PRISTINE

    def test_pristine_suppresses_min_value(self):
        field, recorder = make_field(min_value=1)
        assert field.is_valid is True
        assert field.errors == []
        assert recorder.validations == [(True, [])]

    def test_same_text_once_touched_is_validated(self):
        field, _ = make_field(min_value=1)
        field.on_change_text("0")
        assert field.is_valid is False
        assert field.errors == ["Valor mínimo permitido: $1.00"]

    def test_notifies_once_at_construction_in_order(self):
        _, recorder = make_field()
        assert recorder.calls == [("validation", True, []), ("value", 0)]


class TestTyping:
    """Tests for keystrokes and notifications."""

    def test_currency_scenario(self):
        """Test a transaction amount typed past its max, then corrected."""
        recorder = Recorder()
        field = create_numeric_input(
            "currency",
            max_value=10_000_000,
            min_value=0.01,
            on_value_change=recorder.on_value_change,
            on_validation_change=recorder.on_validation_change,
        )

        field.on_change_text("12345678")
        assert field.numeric_value == 12_345_678
        assert field.is_valid is False
        assert field.errors == ["Valor máximo permitido: $10,000,000.00"]
        assert recorder.validations[-1] == (False, ["Valor máximo permitido: $10,000,000.00"])

        field.on_change_text("1234567")
        assert field.is_valid is True
        assert field.errors == []
        assert recorder.values[-1] == 1_234_567

    def test_negative_disallowed_value(self):
        field, recorder = make_field(context="transaction", allow_negative=False)
        field.on_change_text("-50")
        # The minus sign never reaches the display
        assert field.display_value == "50"
        assert field.numeric_value == 50
        assert field.is_valid is True

    def test_every_keystroke_notifies(self):
        field, recorder = make_field()
        field.on_change_text("1")
        field.on_change_text("12")
        assert recorder.values == [0, 1, 12]

    def test_invalid_text_reports_none(self):
        field, recorder = make_field()
        field.on_change_text("-")
        assert field.numeric_value is None
        assert recorder.values[-1] is None
        assert recorder.validations[-1] == (False, ["Campo requerido"])
        assert field.status == FieldStatus.INVALID

    def test_fraction_truncated_while_typing(self):
        field, _ = make_field()
        field.on_change_text("1.239")
        assert field.display_value == "1.23"
        assert field.is_valid is True
        assert field.status == FieldStatus.VALID

    def test_callback_errors_propagate(self):
        def explode(value):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            NumericInput(on_value_change=explode)


class TestFocusAndBlur:
    """Tests for focus and blur handling."""

    def test_focus_does_not_notify(self):
        field, recorder = make_field()
        calls = len(recorder.calls)
        field.on_focus()
        assert field.is_focused is True
        assert len(recorder.calls) == calls

    @pytest.mark.parametrize("typed,expected", [("12.", "12.00"), ("012", "12.00"), ("7.5", "7.50")])
    def test_blur_normalizes_display(self, typed, expected):
        field, _ = make_field()
        field.on_focus()
        field.on_change_text(typed)
        field.on_blur()
        assert field.display_value == expected
        assert field.is_focused is False

    def test_blur_integer_field(self):
        field, _ = make_field(allow_decimals=False)
        field.on_change_text("7")
        field.on_blur()
        assert field.display_value == "7"

    def test_blur_keeps_unparseable_text(self):
        field, _ = make_field()
        field.on_change_text("")
        field.on_blur()
        assert field.display_value == ""
        assert field.errors == ["Campo requerido"]

    def test_blur_marks_touched(self):
        field, _ = make_field()
        field.on_blur()
        assert field.has_been_touched is True
        assert field.display_value == "0.00"

    def test_blur_normalization_is_audited(self):
        events = []
        field, _ = make_field(events=events)
        field.on_change_text("12.")
        field.on_blur()
        assert events[-1].event_type == NumericEventType.INPUT_NORMALIZED_ON_BLUR
        assert events[-1].details == {"before": "12.", "after": "12.00"}


class TestProgrammaticChanges:
    """Tests for set_value, clear, reset and configure."""

    def test_set_value(self):
        field, recorder = make_field()
        field.set_value(12.5)
        assert field.display_value == "12.50"
        assert field.has_been_touched is True
        assert recorder.values[-1] == 12.5

    def test_set_value_integer_field_rounds(self):
        field, _ = make_field(allow_decimals=False)
        field.set_value(2.5)
        assert field.display_value == "3"
        field.set_value(-2.5)
        assert field.display_value == "-2"

    def test_set_value_non_finite_empties_field(self):
        field, _ = make_field()
        field.set_value(math.nan)
        assert field.display_value == ""
        assert field.errors == ["Campo requerido"]

    def test_clear(self):
        events = []
        field, recorder = make_field(events=events)
        field.clear()
        assert field.display_value == ""
        assert field.has_been_touched is True
        assert field.errors == ["Campo requerido"]
        assert recorder.values[-1] is None
        event_types = [event.event_type for event in events]
        assert NumericEventType.INPUT_VALIDATION_FAILED in event_types
        assert event_types[-1] == NumericEventType.INPUT_CLEARED

    def test_reset(self):
        field, recorder = make_field(initial_value=5, min_value=10)
        field.on_focus()
        field.on_change_text("3")
        assert field.is_valid is False

        field.reset()
        assert field.display_value == "5"
        assert field.has_been_touched is False
        assert field.is_focused is False
        assert field.is_valid is True
        assert recorder.values[-1] == 5

    def test_configure_pristine_adopts_initial_value(self):
        field, recorder = make_field()
        field.configure(initial_value=5)
        assert field.display_value == "5"
        assert field.numeric_value == 5
        assert field.has_been_touched is False

    def test_configure_keeps_typed_input(self):
        field, recorder = make_field()
        field.on_change_text("12")
        field.configure(max_value=10)
        assert field.display_value == "12"
        assert field.errors == ["Valor máximo permitido: $10.00"]
        assert recorder.validations[-1] == (False, ["Valor máximo permitido: $10.00"])

    def test_configure_with_options_object(self):
        field, _ = make_field()
        field.configure(NumericInputOptions(allow_decimals=False))
        assert field.options.allow_decimals is False


class TestDerivedProps:
    """Tests for formatted_display and text_input_props."""

    def test_formatted_display_groups_when_blurred(self):
        field, _ = make_field()
        field.on_change_text("1234.5")
        assert field.formatted_display == "1,234.50"

    def test_formatted_display_raw_while_focused(self):
        field, _ = make_field()
        field.on_focus()
        field.on_change_text("1234.5")
        assert field.formatted_display == "1234.5"

    def test_formatted_display_raw_for_zero(self):
        field, _ = make_field()
        field.on_change_text("0")
        assert field.formatted_display == "0"

    def test_formatted_display_integer_field(self):
        field, _ = make_field(allow_decimals=False)
        field.on_change_text("1234")
        assert field.formatted_display == "1,234"

    def test_formatted_display_falls_back_when_digits_conflict(self):
        field, _ = make_field(max_decimals=1)
        field.on_change_text("1234.5")
        assert field.formatted_display == "1234.5"

    def test_text_input_props(self):
        field, _ = make_field()
        props = field.text_input_props
        assert props.value == "0"
        assert props.keyboard_type == KeyboardType.DECIMAL_PAD
        assert props.placeholder == "0.00"

        props.on_change_text("42")
        assert field.display_value == "42"
        assert field.text_input_props.value == "42"

    def test_text_input_props_integer(self):
        field, _ = make_field(allow_decimals=False)
        props = field.text_input_props
        assert props.keyboard_type == KeyboardType.NUMBER_PAD
        assert props.placeholder == "0"


class TestAuditSink:
    """Tests for audit events emitted by fields."""

    def test_validation_change_only_on_flip(self):
        events = []
        field, _ = make_field(events=events, max_value=10)
        field.on_change_text("5")
        field.on_change_text("6")
        assert events == []

        field.on_change_text("50")
        assert [event.event_type for event in events] == [NumericEventType.INPUT_VALIDATION_FAILED]
        assert events[0].entity_id == field.field_id

    def test_failing_sink_does_not_break_field(self):
        def broken_sink(event):
            raise RuntimeError("sink down")

        field = NumericInput(audit_logger=NumericAuditLogger(sink=broken_sink))
        field.clear()
        assert field.display_value == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
