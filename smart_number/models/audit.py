"""
Audit Models for Smart Number

Numeric events worth tracing: degraded renderings, rejected input,
normalizations the user did not type themselves.
This provides:
1. Debugging information when a screen shows an odd amount
2. Traceability of automatic corrections (blur, auto-fix)
3. Ability to reconstruct what happened inside one field

DESIGN DECISION: Events are append-only. We never modify them after creation.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Sequence
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class NumericEventType(str, Enum):
    """Types of events we audit."""
    # Formatting
    FORMAT_INVALID_NUMBER = "format_invalid_number"
    FORMAT_DEGRADED = "format_degraded"
    FORMAT_WARNING_THRESHOLD = "format_warning_threshold"
    NEGATIVE_NORMALIZED = "negative_normalized"

    # Live input
    INPUT_VALIDATION_FAILED = "input_validation_failed"
    INPUT_VALIDATION_PASSED = "input_validation_passed"
    INPUT_NORMALIZED_ON_BLUR = "input_normalized_on_blur"
    INPUT_VALUE_SET = "input_value_set"
    INPUT_AUTO_FIXED = "input_auto_fixed"
    INPUT_CLEARED = "input_cleared"
    INPUT_RESET = "input_reset"

    # Preferences
    PREFERENCE_LOADED = "preference_loaded"
    PREFERENCE_LOAD_FAILED = "preference_load_failed"


class EventSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NumericEvent(BaseModel):
    """A single audit event."""

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: NumericEventType = Field(
        ...,
        description="Type of event"
    )
    severity: EventSeverity = Field(
        default=EventSeverity.INFO,
        description="Event severity"
    )

    # Context - which field or display produced it?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'field', 'display')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the field this event relates to"
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., all events of one form)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class NumericEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = NumericEventBuilder.format_degraded(value, warnings)
        event = NumericEventBuilder.input_reset(field_id, "0")
    """

    @staticmethod
    def format_invalid_number(
        value: Any,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.FORMAT_INVALID_NUMBER,
            severity=EventSeverity.WARNING,
            entity_type="display",
            correlation_id=correlation_id,
            description="Non-finite value rendered as placeholder",
            details={"value": repr(value)},
        )

    @staticmethod
    def format_degraded(
        value: float,
        formatted: str,
        warnings: Sequence[str],
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.FORMAT_DEGRADED,
            severity=EventSeverity.WARNING,
            entity_type="display",
            correlation_id=correlation_id,
            description=f"Value beyond safe limits rendered as {formatted}",
            details={
                "value": repr(value),
                "warnings": list(warnings),
            },
        )

    @staticmethod
    def format_warning_threshold(
        value: float,
        formatted: str,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.FORMAT_WARNING_THRESHOLD,
            entity_type="display",
            correlation_id=correlation_id,
            description=f"Large value displayed: {formatted}",
            details={"value": repr(value)},
        )

    @staticmethod
    def negative_normalized(
        value: float,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.NEGATIVE_NORMALIZED,
            entity_type="display",
            correlation_id=correlation_id,
            description="Negative value displayed as positive",
            details={"value": repr(value)},
        )

    @staticmethod
    def input_validation_changed(
        field_id: UUID,
        is_valid: bool,
        errors: Sequence[str],
        display_value: str,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=(
                NumericEventType.INPUT_VALIDATION_PASSED
                if is_valid
                else NumericEventType.INPUT_VALIDATION_FAILED
            ),
            severity=EventSeverity.INFO if is_valid else EventSeverity.WARNING,
            entity_type="field",
            entity_id=field_id,
            correlation_id=correlation_id,
            description=(
                "Field became valid"
                if is_valid
                else f"Field became invalid with {len(errors)} errors"
            ),
            details={
                "display_value": display_value,
                "errors": list(errors),
            },
            is_user_action=True,
        )

    @staticmethod
    def input_normalized_on_blur(
        field_id: UUID,
        before: str,
        after: str,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.INPUT_NORMALIZED_ON_BLUR,
            entity_type="field",
            entity_id=field_id,
            correlation_id=correlation_id,
            description=f"Display normalized from {before!r} to {after!r}",
            details={"before": before, "after": after},
        )

    @staticmethod
    def input_value_set(
        field_id: UUID,
        value: float,
        display_value: str,
        auto_fixed: bool = False,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=(
                NumericEventType.INPUT_AUTO_FIXED
                if auto_fixed
                else NumericEventType.INPUT_VALUE_SET
            ),
            entity_type="field",
            entity_id=field_id,
            correlation_id=correlation_id,
            description=(
                f"Value auto-fixed to {display_value}"
                if auto_fixed
                else f"Value set to {display_value}"
            ),
            details={"value": value, "display_value": display_value},
        )

    @staticmethod
    def input_cleared(
        field_id: UUID,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.INPUT_CLEARED,
            entity_type="field",
            entity_id=field_id,
            correlation_id=correlation_id,
            description="Field cleared",
            is_user_action=True,
        )

    @staticmethod
    def input_reset(
        field_id: UUID,
        display_value: str,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.INPUT_RESET,
            entity_type="field",
            entity_id=field_id,
            correlation_id=correlation_id,
            description=f"Field reset to {display_value}",
            details={"display_value": display_value},
        )

    @staticmethod
    def preference_loaded(
        show_full_numbers: bool,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.PREFERENCE_LOADED,
            severity=EventSeverity.DEBUG,
            entity_type="preference",
            correlation_id=correlation_id,
            description=f"showFullNumbers={show_full_numbers}",
            details={"show_full_numbers": show_full_numbers},
        )

    @staticmethod
    def preference_load_failed(
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> NumericEvent:
        return NumericEvent(
            event_type=NumericEventType.PREFERENCE_LOAD_FAILED,
            severity=EventSeverity.ERROR,
            entity_type="preference",
            correlation_id=correlation_id,
            description="Could not load number preference",
            details={"error_message": error_message},
        )
