"""
Core Data Models for Smart Number

These models define the shapes that flow between the formatter,
the validator and the live input fields. They are designed to:
1. Be produced fresh per call (nothing is shared or mutated after return)
2. Carry both human-readable messages and typed issues
3. Be serializable for logging

DESIGN DECISION: Messages stay in Spanish because downstream screens
display them verbatim. Code that needs to branch on a condition must use
the typed `NumericIssue.code`, never substring matching.
"""

from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class FormatContext(str, Enum):
    """
    Display site that decides how aggressive the formatting is.

    Unknown context names behave like DEFAULT.
    """
    CARD = "card"
    MODAL = "modal"
    LIST = "list"
    DETAIL = "detail"
    INPUT = "input"
    DEFAULT = "default"

    @classmethod
    def coerce(cls, value: "FormatContext | str | None") -> "FormatContext":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.DEFAULT


class LimitsDomain(str, Enum):
    """Named bound sets, independent of the display context."""
    DEFAULT = "default"
    TRANSACTION = "transaction"
    ACCOUNT = "account"


class IssueSeverity(str, Enum):
    """How strongly an issue should be surfaced."""
    ERROR = "error"      # Hard failure, blocks submission
    WARNING = "warning"  # Valid but worth a second look
    INFO = "info"


class IssueCode(str, Enum):
    """Every condition the formatter or validator can report."""
    # Parsing
    REQUIRED = "required"
    INVALID_NUMBER = "invalid_number"

    # Domain limits
    ABOVE_DOMAIN_MAX = "above_domain_max"
    BELOW_DOMAIN_MIN = "below_domain_min"
    WARNING_THRESHOLD = "warning_threshold"

    # Formatter degradations
    LIMITS_EXCEEDED = "limits_exceeded"
    EXTREME_COMPACT = "extreme_compact"
    EXTREME_SCIENTIFIC = "extreme_scientific"
    NEGATIVE_CONVERTED = "negative_converted"

    # Field constraints
    NEGATIVE_NOT_ALLOWED = "negative_not_allowed"
    ABOVE_MAX_VALUE = "above_max_value"
    BELOW_MIN_VALUE = "below_min_value"
    NOT_INTEGER = "not_integer"
    TOO_MANY_DECIMALS = "too_many_decimals"


# =============================================================================
# LIMITS
# =============================================================================

class NumberLimits(BaseModel):
    """
    Bounds for one limits domain.

    min <= warning_threshold <= max is expected but not enforced.
    warning_threshold is compared against abs(value).
    """
    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    warning_threshold: float = Field(..., gt=0)


NUMBER_LIMITS: dict[LimitsDomain, NumberLimits] = {
    LimitsDomain.DEFAULT: NumberLimits(
        min=-999_999_999_999_999,
        max=999_999_999_999_999,
        warning_threshold=1_000_000_000_000,
    ),
    LimitsDomain.TRANSACTION: NumberLimits(
        min=-100_000_000_000,
        max=100_000_000_000,
        warning_threshold=1_000_000_000,
    ),
    LimitsDomain.ACCOUNT: NumberLimits(
        min=-999_999_999_999_999,
        max=999_999_999_999_999,
        warning_threshold=1_000_000_000_000,
    ),
}


def resolve_limits(name: "LimitsDomain | FormatContext | str | None") -> NumberLimits:
    """
    Look up a limits domain by name.

    Display contexts and unknown names fall back to the default domain.
    """
    if isinstance(name, Enum):
        name = name.value
    try:
        return NUMBER_LIMITS[LimitsDomain(name)]
    except ValueError:
        return NUMBER_LIMITS[LimitsDomain.DEFAULT]


# =============================================================================
# FORMATTING
# =============================================================================

CONTEXT_MAX_LENGTH: dict[FormatContext, int] = {
    FormatContext.CARD: 12,
    FormatContext.MODAL: 20,
    FormatContext.LIST: 15,
    FormatContext.DETAIL: 50,
    FormatContext.INPUT: 20,
}


def get_max_length_for_context(context: "FormatContext | str | None") -> int:
    """Display length budget of a context (15 when unlisted)."""
    return CONTEXT_MAX_LENGTH.get(FormatContext.coerce(context), 15)


class FormatOptions(BaseModel):
    """
    Formatter configuration.

    Every field is optional. currency/symbol/locale fall back to the
    configured defaults, max_length to the context budget.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    context: FormatContext = FormatContext.DEFAULT
    domain: Optional[LimitsDomain] = Field(
        default=None,
        description="Limits domain; the context name is tried when omitted"
    )
    currency: Optional[str] = Field(
        default=None,
        description="ISO 4217 code, informational only"
    )
    symbol: Optional[str] = Field(
        default=None,
        description="Prefix written before the magnitude"
    )
    locale: Optional[str] = Field(
        default=None,
        description="Locale tag such as 'es-MX' or 'en_US'"
    )
    max_length: Optional[int] = Field(
        default=None,
        ge=1,
        description="Length budget of the short form"
    )
    allow_negative: bool = True
    trim_zeros: bool = False
    force_full_numbers: bool = False

    @field_validator('context', mode='before')
    @classmethod
    def coerce_context(cls, v):
        return FormatContext.coerce(v)

    @property
    def effective_max_length(self) -> int:
        if self.max_length is not None:
            return self.max_length
        return get_max_length_for_context(self.context)

    @property
    def limits(self) -> NumberLimits:
        return resolve_limits(self.domain if self.domain is not None else self.context)


class NumericIssue(BaseModel):
    """A single condition found while formatting or validating."""
    model_config = ConfigDict(frozen=True)

    code: IssueCode = Field(
        ...,
        description="Machine-readable condition"
    )
    message: str = Field(
        ...,
        description="Human-readable description shown to the user"
    )
    severity: IssueSeverity = Field(
        default=IssueSeverity.ERROR,
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class FormatResult(BaseModel):
    """
    Rendering bundle returned by the formatter.

    `formatted` is the short form, `full_value` always keeps the exact
    precision so a detail view can show it next to a compact value.
    """
    model_config = ConfigDict(frozen=True)

    formatted: str
    full_value: str
    is_large: bool = False
    is_truncated: bool = False
    scientific: Optional[str] = None
    warnings: tuple[str, ...] = ()
    issues: tuple[NumericIssue, ...] = ()

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def warning_level(self) -> Optional[IssueSeverity]:
        """
        Strongest condition worth highlighting.

        ERROR when safe limits were exceeded, WARNING when the amount only
        crossed the verification threshold.
        """
        codes = {issue.code for issue in self.issues}
        if IssueCode.LIMITS_EXCEEDED in codes:
            return IssueSeverity.ERROR
        if IssueCode.WARNING_THRESHOLD in codes:
            return IssueSeverity.WARNING
        return None


# =============================================================================
# VALIDATION
# =============================================================================

class ValidationResult(BaseModel):
    """
    Result of validating a piece of text.

    is_valid is True iff errors is empty. Soft warnings (threshold crossed)
    are part of errors too; use `can_submit` to only block on hard errors.
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool = Field(
        ...,
        description="True iff no errors were appended"
    )
    numeric_value: Optional[float] = Field(
        default=None,
        description="Parsed value, absent when nothing could be parsed"
    )
    errors: tuple[str, ...] = Field(
        default=(),
        description="Messages of every issue, in the order they were found"
    )
    issues: tuple[NumericIssue, ...] = Field(
        default=(),
        description="Typed issues backing the messages"
    )

    @model_validator(mode='after')
    def validate_consistency(self) -> 'ValidationResult':
        if self.is_valid != (len(self.errors) == 0):
            raise ValueError("is_valid must be True exactly when there are no errors")
        return self

    @classmethod
    def from_issues(
        cls,
        issues: list[NumericIssue],
        numeric_value: Optional[float] = None,
    ) -> 'ValidationResult':
        return cls(
            is_valid=not issues,
            numeric_value=numeric_value,
            errors=tuple(issue.message for issue in issues),
            issues=tuple(issues),
        )

    @property
    def has_blocking_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == IssueSeverity.ERROR for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == IssueSeverity.ERROR)

    @property
    def warnings(self) -> tuple[str, ...]:
        """Messages of non-blocking issues."""
        return tuple(
            issue.message for issue in self.issues
            if issue.severity != IssueSeverity.ERROR
        )

    @property
    def can_submit(self) -> bool:
        """A value is present and only soft warnings were raised."""
        return self.numeric_value is not None and not self.has_blocking_errors
