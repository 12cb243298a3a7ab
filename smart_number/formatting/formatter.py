"""
Smart Number Formatter

Renders a number for a display context (card, list, modal, detail, input)
while keeping the full precision available next to the short form.

DESIGN DECISION: The formatter is a module of pure functions.
There is no instance state, no I/O and no global locale; every call
builds a fresh FormatResult from its arguments and the configured defaults.

Rendering paths, in order:
1. Non-finite input -> "—" placeholder (never raises)
2. Beyond the domain max -> compact "Q" or exponential rendering
3. Warning threshold crossed -> normal rendering plus a warning
4. Negative not allowed -> rendered as positive plus a warning
5. Context dispatch (compact K/M/MM/B for cards, full for details, ...)
"""

import math
from decimal import Decimal
from typing import Any, Union

from smart_number.config import get_settings
from smart_number.formatting.locale import format_compact, format_decimal
from smart_number.formatting.primitives import (
    is_finite_number,
    to_exponential,
    to_fixed,
)
from smart_number.models.number import (
    FormatContext,
    FormatOptions,
    FormatResult,
    IssueCode,
    IssueSeverity,
    NumericIssue,
)


INVALID_PLACEHOLDER = "—"
INVALID_NUMBER_MESSAGE = "Número inválido"
LIMITS_EXCEEDED_MESSAGE = "Número excede límites seguros"
EXTREME_COMPACT_MESSAGE = "Número extremadamente grande - mostrado en notación compacta"
EXTREME_SCIENTIFIC_MESSAGE = "Número muy grande - mostrado en notación científica"
WARNING_THRESHOLD_MESSAGE = "Número muy grande - considera verificar"
NEGATIVE_CONVERTED_MESSAGE = "Número negativo convertido a positivo"

LARGE_NUMBER_THRESHOLD = 1e6
QUADRILLION = 1e15

# Largest unit first so a value sitting on a boundary takes the larger unit
_CARD_UNITS: tuple[tuple[float, str], ...] = (
    (1e12, "B"),
    (1e9, "MM"),
    (1e6, "M"),
    (1e3, "K"),
)
_LIST_UNITS: tuple[tuple[float, str, int], ...] = (
    (1e6, "M", 2),
    (1e3, "K", 1),
)
_MODAL_COMPACT_THRESHOLD = 1e9

OptionsLike = Union[FormatOptions, dict, None]


def _resolve_options(options: OptionsLike, overrides: dict[str, Any]) -> FormatOptions:
    if isinstance(options, dict):
        options = FormatOptions(**options)
    if options is None:
        return FormatOptions(**overrides)
    if overrides:
        return FormatOptions(**{**options.model_dump(exclude_unset=True), **overrides})
    return options


def _sign(amount: float) -> str:
    return "-" if amount < 0 else ""


def _issue(code: IssueCode, message: str, severity: IssueSeverity) -> NumericIssue:
    return NumericIssue(code=code, message=message, severity=severity)


def _invalid_result() -> FormatResult:
    return FormatResult(
        formatted=INVALID_PLACEHOLDER,
        full_value=INVALID_NUMBER_MESSAGE,
        is_large=False,
        is_truncated=False,
        warnings=(INVALID_NUMBER_MESSAGE,),
        issues=(_issue(IssueCode.INVALID_NUMBER, INVALID_NUMBER_MESSAGE, IssueSeverity.ERROR),),
    )


def _full(amount: float, symbol: str, locale: str, max_fraction_digits: int = 2) -> str:
    return f"{_sign(amount)}{symbol}{format_decimal(abs(amount), locale, 2, max_fraction_digits)}"


def _format_extreme(amount: float, symbol: str, issues: list[NumericIssue]) -> FormatResult:
    """Values beyond the safe limits: compact 'Q' or exponential notation."""
    abs_amount = abs(amount)
    sign = _sign(amount)

    if abs_amount >= QUADRILLION:
        issues.append(_issue(
            IssueCode.EXTREME_COMPACT, EXTREME_COMPACT_MESSAGE, IssueSeverity.WARNING
        ))
        formatted = f"{sign}{symbol}{to_fixed(abs_amount / QUADRILLION, 1)}Q"
        full_value = f"{sign}{symbol}{to_exponential(abs_amount, 2)}"
    else:
        issues.append(_issue(
            IssueCode.EXTREME_SCIENTIFIC, EXTREME_SCIENTIFIC_MESSAGE, IssueSeverity.WARNING
        ))
        formatted = f"{sign}{symbol}{to_exponential(abs_amount, 1)}"
        full_value = f"{sign}{symbol}{to_exponential(abs_amount, 6)}"

    return FormatResult(
        formatted=formatted,
        full_value=full_value,
        is_large=True,
        is_truncated=True,
        scientific=to_exponential(amount, 2),
        warnings=tuple(issue.message for issue in issues),
        issues=tuple(issues),
    )


def _format_for_card(
    amount: float,
    symbol: str,
    locale: str,
    max_length: int,
    force_full_numbers: bool,
) -> tuple[str, bool]:
    """Cards have little room: aggressive K/M/MM/B units."""
    abs_amount = abs(amount)
    sign = _sign(amount)

    if force_full_numbers:
        return _full(amount, symbol, locale), False

    for threshold, suffix in _CARD_UNITS:
        if abs_amount >= threshold:
            return f"{sign}{symbol}{to_fixed(abs_amount / threshold, 1)}{suffix}", True

    formatted = _full(amount, symbol, locale)
    if len(formatted) > max_length:
        return f"{sign}{symbol}{to_fixed(abs_amount, 0)}", True
    return formatted, False


def _format_for_modal(amount: float, symbol: str, locale: str) -> tuple[str, bool]:
    """Modals have room for everything below a billion."""
    abs_amount = abs(amount)
    if abs_amount >= _MODAL_COMPACT_THRESHOLD:
        return f"{_sign(amount)}{symbol}{format_compact(abs_amount, locale, 2)}", True
    return _full(amount, symbol, locale), False


def _format_for_list(
    amount: float,
    symbol: str,
    locale: str,
    max_length: int,
    force_full_numbers: bool,
) -> tuple[str, bool]:
    """Lists balance readability and width: M with 2 decimals, K with 1."""
    abs_amount = abs(amount)
    sign = _sign(amount)

    if not force_full_numbers:
        for threshold, suffix, digits in _LIST_UNITS:
            if abs_amount >= threshold:
                return f"{sign}{symbol}{to_fixed(abs_amount / threshold, digits)}{suffix}", True

    formatted = _full(amount, symbol, locale)
    return formatted, len(formatted) > max_length


def _format_for_detail(amount: float, symbol: str, locale: str) -> str:
    return _full(amount, symbol, locale, max_fraction_digits=8)


def _format_for_input(amount: float, trim_zeros: bool) -> str:
    """No symbol, no grouping, '.' as decimal separator."""
    if amount == 0:
        return "0"
    # With trimming, format_decimal already drops trailing fractional zeros
    return format_decimal(
        amount,
        "en-US",
        min_fraction_digits=0 if trim_zeros else 2,
        max_fraction_digits=8,
        use_grouping=False,
    )


def format_number(
    amount: Any,
    options: OptionsLike = None,
    **overrides: Any,
) -> FormatResult:
    """
    Format a number according to a display context.

    Args:
        amount: Value to render; anything that is not a finite real
                number yields the "—" placeholder result
        options: FormatOptions (or a dict of its fields)
        **overrides: Individual FormatOptions fields, applied on top

    Returns:
        A fresh FormatResult
    """
    options = _resolve_options(options, overrides)

    if not is_finite_number(amount):
        return _invalid_result()

    if isinstance(amount, Decimal):
        amount = float(amount)
        # Decimals beyond the float range
        if not math.isfinite(amount):
            return _invalid_result()

    defaults = get_settings().formatting
    symbol = options.symbol if options.symbol is not None else defaults.default_symbol
    locale = options.locale or defaults.default_locale

    issues: list[NumericIssue] = []
    limits = options.limits

    if abs(amount) > limits.max:
        issues.append(_issue(
            IssueCode.LIMITS_EXCEEDED, LIMITS_EXCEEDED_MESSAGE, IssueSeverity.ERROR
        ))
        return _format_extreme(amount, symbol, issues)

    if abs(amount) >= limits.warning_threshold:
        issues.append(_issue(
            IssueCode.WARNING_THRESHOLD, WARNING_THRESHOLD_MESSAGE, IssueSeverity.WARNING
        ))

    if not options.allow_negative and amount < 0:
        amount = abs(amount)
        issues.append(_issue(
            IssueCode.NEGATIVE_CONVERTED, NEGATIVE_CONVERTED_MESSAGE, IssueSeverity.INFO
        ))

    full_value = _full(amount, symbol, locale, max_fraction_digits=8)
    is_large = abs(amount) >= LARGE_NUMBER_THRESHOLD
    scientific = to_exponential(amount, 2) if is_large else None

    context = options.context
    max_length = options.effective_max_length
    is_truncated = False

    if context == FormatContext.MODAL:
        formatted, is_truncated = _format_for_modal(amount, symbol, locale)
    elif context == FormatContext.LIST:
        formatted, is_truncated = _format_for_list(
            amount, symbol, locale, max_length, options.force_full_numbers
        )
    elif context == FormatContext.DETAIL:
        formatted = _format_for_detail(amount, symbol, locale)
    elif context == FormatContext.INPUT:
        formatted = _format_for_input(amount, options.trim_zeros)
    else:
        # CARD and DEFAULT
        formatted, is_truncated = _format_for_card(
            amount, symbol, locale, max_length, options.force_full_numbers
        )

    return FormatResult(
        formatted=formatted,
        full_value=full_value,
        is_large=is_large,
        is_truncated=is_truncated,
        scientific=scientific,
        warnings=tuple(issue.message for issue in issues),
        issues=tuple(issues),
    )


# =============================================================================
# CONVENIENCE WRAPPERS
# =============================================================================

def format_currency(amount: Any, options: OptionsLike = None, **overrides: Any) -> FormatResult:
    """Alias of format_number kept for display call sites."""
    return format_number(amount, options, **overrides)


def format_for_card(amount: Any, symbol: str = "$") -> FormatResult:
    return format_number(amount, context=FormatContext.CARD, symbol=symbol)


def format_for_list(amount: Any, symbol: str = "$") -> FormatResult:
    return format_number(amount, context=FormatContext.LIST, symbol=symbol)


def format_for_modal(amount: Any, symbol: str = "$") -> FormatResult:
    return format_number(amount, context=FormatContext.MODAL, symbol=symbol)


def format_for_detail(amount: Any, symbol: str = "$") -> FormatResult:
    return format_number(amount, context=FormatContext.DETAIL, symbol=symbol)
