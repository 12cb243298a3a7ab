"""
Data Models Package

This package contains all Pydantic models used in Smart Number.
All data flowing between formatter, validator and fields conforms to these schemas.
"""

from smart_number.models.number import (
    CONTEXT_MAX_LENGTH,
    NUMBER_LIMITS,
    FormatContext,
    FormatOptions,
    FormatResult,
    IssueCode,
    IssueSeverity,
    LimitsDomain,
    NumberLimits,
    NumericIssue,
    ValidationResult,
    get_max_length_for_context,
    resolve_limits,
)
from smart_number.models.input import (
    FieldStatus,
    InputKind,
    InputPhase,
    KeyboardType,
    NumericInputOptions,
    NumericInputState,
    TextInputProps,
)
from smart_number.models.audit import (
    EventSeverity,
    NumericEvent,
    NumericEventBuilder,
    NumericEventType,
)

__all__ = [
    # Number models
    "CONTEXT_MAX_LENGTH",
    "NUMBER_LIMITS",
    "FormatContext",
    "FormatOptions",
    "FormatResult",
    "IssueCode",
    "IssueSeverity",
    "LimitsDomain",
    "NumberLimits",
    "NumericIssue",
    "ValidationResult",
    "get_max_length_for_context",
    "resolve_limits",
    # Input models
    "FieldStatus",
    "InputKind",
    "InputPhase",
    "KeyboardType",
    "NumericInputOptions",
    "NumericInputState",
    "TextInputProps",
    # Audit models
    "EventSeverity",
    "NumericEvent",
    "NumericEventBuilder",
    "NumericEventType",
]
