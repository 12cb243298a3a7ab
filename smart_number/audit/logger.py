"""
Audit Logger

DESIGN DECISION: Automatic corrections and degraded renderings are logged.
This provides:
1. Traceability of every value the user did not type themselves
2. Debugging capability for odd-looking amounts
3. A hook for the host app to forward events elsewhere

The audit logger:
- Is synchronous, like the rest of the numeric core
- Gracefully handles failures (a broken sink never breaks a field)
- Supports correlation IDs to trace related events
"""

import logging
from typing import Callable, Optional, Sequence
from uuid import UUID, uuid4

import structlog

from smart_number.config import AppSettings, get_settings
from smart_number.models.audit import NumericEvent, NumericEventBuilder


def configure_logging(app_settings: Optional[AppSettings] = None) -> None:
    """
    Configure structlog for local logging.

    Renders JSON unless `log_json` is disabled; the stdlib level of the
    package logger follows `log_level`.
    """
    app_settings = app_settings or get_settings().app
    renderer = (
        structlog.processors.JSONRenderer()
        if app_settings.log_json
        else structlog.dev.ConsoleRenderer()
    )
    logging.getLogger("smart_number").setLevel(app_settings.log_level)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


EventSink = Callable[[NumericEvent], None]


class NumericAuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An optional sink supplied by the host app
    """

    def __init__(
        self,
        sink: Optional[EventSink] = None,
    ):
        """
        Initialize audit logger.

        Args:
            sink: Callable receiving every event.
                  If None, only logs locally.
        """
        self._sink = sink
        self._logger = structlog.get_logger(__name__)

    def log(self, event: NumericEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Forwards to the sink if available.

        Returns True if the sink accepted the event (or no sink configured).
        """
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("numeric_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("numeric_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("numeric_event", **log_dict)
        else:
            self._logger.info("numeric_event", **log_dict)

        if self._sink:
            try:
                self._sink(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "numeric_event_sink_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_validation_changed(
        self,
        field_id: UUID,
        is_valid: bool,
        errors: Sequence[str],
        display_value: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a field switching between valid and invalid."""
        self.log(NumericEventBuilder.input_validation_changed(
            field_id=field_id,
            is_valid=is_valid,
            errors=errors,
            display_value=display_value,
            correlation_id=correlation_id,
        ))

    def log_normalized_on_blur(
        self,
        field_id: UUID,
        before: str,
        after: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log blur normalization."""
        self.log(NumericEventBuilder.input_normalized_on_blur(
            field_id=field_id,
            before=before,
            after=after,
            correlation_id=correlation_id,
        ))

    def log_value_set(
        self,
        field_id: UUID,
        value: float,
        display_value: str,
        auto_fixed: bool = False,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a programmatic value change."""
        self.log(NumericEventBuilder.input_value_set(
            field_id=field_id,
            value=value,
            display_value=display_value,
            auto_fixed=auto_fixed,
            correlation_id=correlation_id,
        ))

    def log_cleared(
        self,
        field_id: UUID,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log field clear."""
        self.log(NumericEventBuilder.input_cleared(
            field_id=field_id,
            correlation_id=correlation_id,
        ))

    def log_reset(
        self,
        field_id: UUID,
        display_value: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log field reset."""
        self.log(NumericEventBuilder.input_reset(
            field_id=field_id,
            display_value=display_value,
            correlation_id=correlation_id,
        ))

    def log_preference_loaded(
        self,
        show_full_numbers: bool,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log preference load."""
        self.log(NumericEventBuilder.preference_loaded(
            show_full_numbers=show_full_numbers,
            correlation_id=correlation_id,
        ))

    def log_preference_load_failed(
        self,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log preference load failure."""
        self.log(NumericEventBuilder.preference_load_failed(
            error_message=error_message,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this when a form with several fields is opened.
    Pass it to every field of that form.
    """
    return uuid4()
