"""
Staged Numeric Validation

DESIGN DECISION: Validation happens in distinct stages:

STAGE 1 - PARSING:
- Character cleanup
- Required value presence
- Finite number check
- If this fails there is no value to check further

STAGE 2 - DOMAIN LIMITS:
- Safe min/max of the limits domain
- Verification threshold (soft, severity warning)

STAGE 3 - FIELD CONSTRAINTS (live inputs only):
- Negatives, explicit min/max, integers, decimal places

IMPORTANT: Validation never raises for bad input.
Every condition is reported as a message plus a typed NumericIssue.
"""

import re
from typing import Any, Optional

from smart_number.formatting.formatter import INVALID_NUMBER_MESSAGE, format_number
from smart_number.formatting.primitives import decimal_places
from smart_number.models.input import NumericInputOptions
from smart_number.models.number import (
    FormatContext,
    IssueCode,
    IssueSeverity,
    NumericIssue,
    ValidationResult,
    resolve_limits,
)
from smart_number.validation.parser import parse_float


REQUIRED_MESSAGE = "Campo requerido"
WARNING_THRESHOLD_MESSAGE = "Número muy grande - verifica que sea correcto"
NEGATIVE_NOT_ALLOWED_MESSAGE = "No se permiten números negativos"
NOT_INTEGER_MESSAGE = "Solo se permiten números enteros"

_DISALLOWED_CHARS = re.compile(r'[^0-9.-]')


class NumericValidator:
    """
    Validates numeric text through a staged pipeline.

    Stage 1: Parsing (always)
    Stage 2: Domain limits (when a value was parsed)
    Stage 3: Field constraints (validate_field only)

    The validator holds no state; one instance can serve every field.
    """

    def _parse(self, text: Any) -> tuple[Optional[float], list[NumericIssue]]:
        """
        Stage 1: Parsing.

        Returns: (value_or_none, list_of_issues)
        """
        if text is None:
            text = ""
        elif not isinstance(text, str):
            text = str(text)

        cleaned = _DISALLOWED_CHARS.sub("", text)

        if cleaned in ("", "-"):
            return None, [NumericIssue(
                code=IssueCode.REQUIRED,
                message=REQUIRED_MESSAGE,
                severity=IssueSeverity.ERROR,
                suggested_fix="Ingresa una cantidad",
            )]

        value = parse_float(cleaned)
        if value is None:
            return None, [NumericIssue(
                code=IssueCode.INVALID_NUMBER,
                message=INVALID_NUMBER_MESSAGE,
                severity=IssueSeverity.ERROR,
                suggested_fix="Usa solo dígitos, un punto decimal y el signo menos",
            )]

        return value, []

    def _check_limits(self, value: float, context: Any) -> list[NumericIssue]:
        """
        Stage 2: Domain limits.

        The limit itself is rendered with the formatter defaults.
        """
        issues = []
        limits = resolve_limits(context)

        if value > limits.max:
            issues.append(NumericIssue(
                code=IssueCode.ABOVE_DOMAIN_MAX,
                message=f"Número muy grande (máximo: {format_number(limits.max).formatted})",
                severity=IssueSeverity.ERROR,
            ))

        if value < limits.min:
            issues.append(NumericIssue(
                code=IssueCode.BELOW_DOMAIN_MIN,
                message=f"Número muy pequeño (mínimo: {format_number(limits.min).formatted})",
                severity=IssueSeverity.ERROR,
            ))

        if abs(value) >= limits.warning_threshold:
            issues.append(NumericIssue(
                code=IssueCode.WARNING_THRESHOLD,
                message=WARNING_THRESHOLD_MESSAGE,
                severity=IssueSeverity.WARNING,
                suggested_fix="Confirma que la cantidad sea correcta",
            ))

        return issues

    def _check_field(
        self,
        value: float,
        options: NumericInputOptions,
    ) -> list[NumericIssue]:
        """
        Stage 3: Field constraints.

        `value` is already sign-normalized when negatives are not allowed.
        """
        issues = []

        if options.max_value is not None and value > options.max_value:
            shown = format_number(options.max_value, context=FormatContext.DETAIL).formatted
            issues.append(NumericIssue(
                code=IssueCode.ABOVE_MAX_VALUE,
                message=f"Valor máximo permitido: {shown}",
                severity=IssueSeverity.ERROR,
            ))

        if options.min_value is not None and value < options.min_value:
            shown = format_number(options.min_value, context=FormatContext.DETAIL).formatted
            issues.append(NumericIssue(
                code=IssueCode.BELOW_MIN_VALUE,
                message=f"Valor mínimo permitido: {shown}",
                severity=IssueSeverity.ERROR,
            ))

        if not options.allow_decimals and value % 1 != 0:
            issues.append(NumericIssue(
                code=IssueCode.NOT_INTEGER,
                message=NOT_INTEGER_MESSAGE,
                severity=IssueSeverity.ERROR,
            ))

        if decimal_places(value) > options.max_decimals:
            issues.append(NumericIssue(
                code=IssueCode.TOO_MANY_DECIMALS,
                message=f"Máximo {options.max_decimals} decimales permitidos",
                severity=IssueSeverity.ERROR,
            ))

        return issues

    def validate(self, text: Any, context: Any = "default") -> ValidationResult:
        """
        Validate text against a limits domain.

        Args:
            text: Raw text, typed or formatted
            context: Limits domain name; unknown names use the default domain

        Returns:
            ValidationResult; is_valid is False on any issue,
            including the soft verification warning
        """
        value, issues = self._parse(text)
        if value is None:
            return ValidationResult.from_issues(issues)

        issues.extend(self._check_limits(value, context))
        return ValidationResult.from_issues(issues, numeric_value=value)

    def validate_field(
        self,
        text: Any,
        options: Optional[NumericInputOptions] = None,
    ) -> ValidationResult:
        """
        Validate text for a live input field.

        When negatives are not allowed the reported value has its sign
        stripped and an explicit error is added.
        """
        options = options or NumericInputOptions()

        value, issues = self._parse(text)
        if value is None:
            return ValidationResult.from_issues(issues)

        if not options.allow_negative and value < 0:
            value = abs(value)
            issues.append(NumericIssue(
                code=IssueCode.NEGATIVE_NOT_ALLOWED,
                message=NEGATIVE_NOT_ALLOWED_MESSAGE,
                severity=IssueSeverity.ERROR,
                suggested_fix="Quita el signo menos",
            ))

        issues.extend(self._check_limits(value, options.context))
        issues.extend(self._check_field(value, options))
        return ValidationResult.from_issues(issues, numeric_value=value)

    def get_user_friendly_summary(
        self,
        result: ValidationResult,
    ) -> str:
        """
        Generate a user-friendly summary of validation results.

        This is what we show next to a form that cannot be submitted.
        """
        if result.is_valid:
            return "✅ Cantidad válida"

        lines = []

        blocking = [
            issue for issue in result.issues
            if issue.severity == IssueSeverity.ERROR
        ]
        if blocking:
            lines.append("❌ Revisa la cantidad:")
            for issue in blocking:
                lines.append(f"   • {issue.message}")
                if issue.suggested_fix:
                    lines.append(f"     💡 {issue.suggested_fix}")

        if result.warnings:
            lines.append("")
            lines.append("⚠️ Verifica lo siguiente:")
            for warning in result.warnings:
                lines.append(f"   • {warning}")

        if result.can_submit:
            lines.append("")
            lines.append("Puedes continuar, pero revisa la cantidad con cuidado.")

        return "\n".join(lines).lstrip("\n")


_default_validator = NumericValidator()


def validate_input(text: Any, context: Any = "default") -> ValidationResult:
    """Validate text against a limits domain (see NumericValidator.validate)."""
    return _default_validator.validate(text, context)


def validate_field_value(
    text: Any,
    options: Optional[NumericInputOptions] = None,
) -> ValidationResult:
    """Validate text for a live input field (see NumericValidator.validate_field)."""
    return _default_validator.validate_field(text, options)
