"""
Number Display

Read-only consumer of the formatter for display sites. It applies the
user's "show full numbers" preference and derives what a screen needs
to decide on tooltips, indicators and warning colors.

DESIGN DECISION: The preference is read once at construction and again
only on an explicit refresh() signal. The display never polls.
"""

from typing import Any, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from smart_number.audit import NumericAuditLogger
from smart_number.formatting.formatter import format_number
from smart_number.models.audit import NumericEventBuilder
from smart_number.models.number import (
    FormatOptions,
    FormatResult,
    IssueCode,
    IssueSeverity,
)
from smart_number.services.preferences import (
    NumberPreferenceStore,
    PreferenceStoreError,
)


STATUS_LARGE = "Número grande"
STATUS_NORMAL = "Normal"
FORMAT_COMPACT = "Compacto"
FORMAT_FULL = "Completo"


class TooltipInfo(BaseModel):
    """Content of the "Información del Número" tooltip."""
    model_config = ConfigDict(frozen=True)

    shown_value: str
    full_value: str
    scientific: Optional[str] = None
    status_label: str
    format_label: str
    warnings: tuple[str, ...] = Field(
        default=(),
        description="Only filled when warnings were requested"
    )


class NumberDisplayModel(BaseModel):
    """Everything a screen needs to show one number."""
    model_config = ConfigDict(frozen=True)

    result: FormatResult
    show_tooltip: bool
    warning_level: Optional[IssueSeverity] = None
    show_truncated_indicator: bool = False
    show_warning_indicator: bool = False
    tooltip: TooltipInfo

    @property
    def formatted(self) -> str:
        return self.result.formatted


class NumberDisplay:
    """
    Renders numbers for display sites.

    Usage:
        display = NumberDisplay(preferences=store)
        model = display.render(2_500_000, {"context": "card"})
        model.formatted        # "$2.5M" or "$2,500,000.00" with full numbers
    """

    def __init__(
        self,
        preferences: Optional[NumberPreferenceStore] = None,
        audit_logger: Optional[NumericAuditLogger] = None,
        correlation_id: Optional[UUID] = None,
    ):
        """
        Initialize the display and read the preference once.

        Args:
            preferences: Store of the "show full numbers" switch.
                         If None, compact notation is always allowed.
            audit_logger: Receives preference and degraded-rendering events
            correlation_id: Groups the events of one screen
        """
        self._preferences = preferences
        self._audit = audit_logger or NumericAuditLogger()
        self._correlation_id = correlation_id
        self._show_full_numbers = False
        self.load_preference()

    @property
    def show_full_numbers(self) -> bool:
        return self._show_full_numbers

    def load_preference(self) -> bool:
        """
        Read the preference from the store.

        A failing store is logged and the last known value is kept.

        Returns:
            The preference now in effect
        """
        if self._preferences is None:
            return self._show_full_numbers

        try:
            value = self._preferences.get_show_full_numbers()
        except PreferenceStoreError as e:
            self._audit.log_preference_load_failed(
                error_message=str(e),
                correlation_id=self._correlation_id,
            )
            return self._show_full_numbers

        self._show_full_numbers = bool(value)
        self._audit.log_preference_loaded(
            show_full_numbers=self._show_full_numbers,
            correlation_id=self._correlation_id,
        )
        return self._show_full_numbers

    def refresh(self) -> bool:
        """Re-read the preference after the host signals a change."""
        return self.load_preference()

    def render(
        self,
        value: Any,
        options: Union[FormatOptions, dict, None] = None,
        allow_tooltip: bool = True,
        show_warnings: bool = False,
    ) -> NumberDisplayModel:
        """
        Format a value and derive its display model.

        Args:
            value: Number to show
            options: Formatter options; force_full_numbers comes from
                     the preference
            allow_tooltip: Whether the site can open a tooltip at all
            show_warnings: Include warnings in the tooltip

        Returns:
            NumberDisplayModel
        """
        result = format_number(value, options, force_full_numbers=self._show_full_numbers)
        self._log_result(value, result)

        has_warnings = result.has_warnings
        show_tooltip = allow_tooltip and (
            result.is_truncated or result.is_large or has_warnings
        )

        tooltip = TooltipInfo(
            shown_value=result.formatted,
            full_value=result.full_value,
            scientific=result.scientific,
            status_label=STATUS_LARGE if result.is_large else STATUS_NORMAL,
            format_label=FORMAT_COMPACT if result.is_truncated else FORMAT_FULL,
            warnings=result.warnings if show_warnings else (),
        )

        return NumberDisplayModel(
            result=result,
            show_tooltip=show_tooltip,
            warning_level=result.warning_level,
            show_truncated_indicator=show_tooltip and result.is_truncated,
            show_warning_indicator=show_tooltip and has_warnings,
            tooltip=tooltip,
        )

    def _log_result(self, value: Any, result: FormatResult) -> None:
        codes = {issue.code for issue in result.issues}

        if IssueCode.INVALID_NUMBER in codes:
            self._audit.log(NumericEventBuilder.format_invalid_number(
                value=value,
                correlation_id=self._correlation_id,
            ))
            return

        if IssueCode.LIMITS_EXCEEDED in codes:
            self._audit.log(NumericEventBuilder.format_degraded(
                value=value,
                formatted=result.formatted,
                warnings=result.warnings,
                correlation_id=self._correlation_id,
            ))
        elif IssueCode.WARNING_THRESHOLD in codes:
            self._audit.log(NumericEventBuilder.format_warning_threshold(
                value=value,
                formatted=result.formatted,
                correlation_id=self._correlation_id,
            ))

        if IssueCode.NEGATIVE_CONVERTED in codes:
            self._audit.log(NumericEventBuilder.negative_normalized(
                value=value,
                correlation_id=self._correlation_id,
            ))
