"""Tests for the staged numeric validator."""

import pytest

from smart_number.models import IssueCode, IssueSeverity, NumericInputOptions
from smart_number.validation import (
    NumericValidator,
    validate_field_value,
    validate_input,
)

THRESHOLD = "Número muy grande - verifica que sea correcto"


class TestParsingStage:
    """Tests for stage 1."""

    @pytest.mark.parametrize("text", ["", "-", "abc", "   ", None])
    def test_required(self, text):
        result = validate_input(text)
        assert result.is_valid is False
        assert result.errors == ("Campo requerido",)
        assert result.numeric_value is None
        assert result.issues[0].code == IssueCode.REQUIRED

    @pytest.mark.parametrize("text", [".", "--5", ".-"])
    def test_invalid_number(self, text):
        result = validate_input(text)
        assert result.is_valid is False
        assert result.errors == ("Número inválido",)
        assert result.numeric_value is None

    @pytest.mark.parametrize("text,expected", [
        ("1500", 1500),
        ("$1,500.50", 1500.5),
        ("12-3", 12),
        ("1.2.3", 1.2),
        ("-42", -42),
    ])
    def test_parses_leading_number(self, text, expected):
        result = validate_input(text)
        assert result.is_valid is True
        assert result.errors == ()
        assert result.numeric_value == expected


class TestLimitsStage:
    """Tests for stage 2."""

    def test_above_default_max(self):
        result = validate_input("1000000000000000")
        assert result.is_valid is False
        assert result.errors == ("Número muy grande (máximo: $1000.0B)", THRESHOLD)
        assert result.numeric_value == 1e15

    def test_above_transaction_max(self):
        result = validate_input("200000000000", "transaction")
        assert result.errors == ("Número muy grande (máximo: $100.0MM)", THRESHOLD)

    def test_below_transaction_min(self):
        result = validate_input("-200000000000", "transaction")
        assert result.errors == ("Número muy pequeño (mínimo: -$100.0MM)", THRESHOLD)

    def test_threshold_is_soft(self):
        """Test the threshold invalidates but does not block submission."""
        result = validate_input("2000000000", "transaction")
        assert result.is_valid is False
        assert result.errors == (THRESHOLD,)
        assert result.issues[0].severity == IssueSeverity.WARNING
        assert result.can_submit is True
        assert result.numeric_value == 2e9

    def test_unknown_context_uses_default(self):
        assert validate_input("2000000000", "card").is_valid is True
        assert validate_input("2000000000", "whatever").is_valid is True


class TestFieldStage:
    """Tests for stage 3."""

    def test_negative_not_allowed_strips_sign(self):
        options = NumericInputOptions(context="transaction", allow_negative=False)
        result = validate_field_value("-50", options)
        assert result.is_valid is False
        assert result.numeric_value == 50
        assert result.errors == ("No se permiten números negativos",)

    def test_max_value_uses_detail_rendering(self):
        options = NumericInputOptions(max_value=10_000_000)
        result = validate_field_value("12345678", options)
        assert result.errors == ("Valor máximo permitido: $10,000,000.00",)
        assert result.numeric_value == 12_345_678

    def test_min_value(self):
        options = NumericInputOptions(min_value=0.01)
        result = validate_field_value("0", options)
        assert result.errors == ("Valor mínimo permitido: $0.01",)

    def test_integers_only(self):
        options = NumericInputOptions(allow_decimals=False)
        assert validate_field_value("1.5", options).errors == ("Solo se permiten números enteros",)
        assert validate_field_value("15", options).is_valid is True

    def test_too_many_decimals(self):
        options = NumericInputOptions(max_decimals=2)
        assert validate_field_value("1.234", options).errors == ("Máximo 2 decimales permitidos",)
        assert validate_field_value("1.23", options).is_valid is True

    def test_default_options(self):
        assert validate_field_value("42").is_valid is True
        assert validate_field_value("").errors == ("Campo requerido",)


class TestSummary:
    """Tests for get_user_friendly_summary."""

    def test_valid(self):
        validator = NumericValidator()
        assert validator.get_user_friendly_summary(validator.validate("10")) == "✅ Cantidad válida"

    def test_blocking_errors(self):
        validator = NumericValidator()
        summary = validator.get_user_friendly_summary(validator.validate(""))
        assert "❌" in summary
        assert "Campo requerido" in summary
        assert "💡 Ingresa una cantidad" in summary

    def test_warnings_only(self):
        validator = NumericValidator()
        summary = validator.get_user_friendly_summary(
            validator.validate("2000000000", "transaction")
        )
        assert summary.startswith("⚠️")
        assert THRESHOLD in summary
        assert "Puedes continuar" in summary


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
