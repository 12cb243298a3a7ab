"""Locale-Aware Number Rendering.

This module provides the locale capability the formatter needs:
- Grouped decimal numbers with min/max fraction digits
- Short compact notation ("1.50B", "1.50 mil M")

Locale data is a small CLDR-derived table keyed by ``language_REGION``
with fallback to the language and then to English. Every call receives the
locale explicitly; nothing here reads or changes the process locale.

Usage:
    format_decimal(1234567.891, "es-MX", 2, 2)   # "1,234,567.89"
    format_decimal(1234567.891, "de", 2, 2)      # "1.234.567,89"
    format_decimal(1234567, "en-IN", 0, 0)       # "12,34,567"
    format_compact(1_500_000_000, "en-US", 2)    # "1.50B"
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

Number = Union[int, float, Decimal]

__all__ = [
    "NumberSymbols",
    "format_compact",
    "format_decimal",
    "get_compact_patterns",
    "get_number_symbols",
    "parse_locale",
]


# ==============================================================================
# Locale Data: Number Symbols
# ==============================================================================

@dataclass(frozen=True)
class NumberSymbols:
    """Locale-specific number symbols.

    Based on CLDR number symbols data.
    """
    decimal: str = "."
    group: str = ","
    grouping: str = "standard"  # "standard" (3,3,3) or "indian" (3,2,2)
    min_grouping_digits: int = 1


_NBSP = "\u00a0"
_NNBSP = "\u202f"

_NUMBER_SYMBOLS: dict[str, NumberSymbols] = {
    # Default (English)
    "en": NumberSymbols(),
    "en_IN": NumberSymbols(grouping="indian"),

    # Spanish: Spain does not group four-digit numbers, Latin America uses 1,234.56
    "es": NumberSymbols(decimal=",", group=".", min_grouping_digits=2),
    "es_MX": NumberSymbols(decimal=".", group=","),
    "es_US": NumberSymbols(decimal=".", group=","),
    "es_419": NumberSymbols(decimal=".", group=","),
    "es_AR": NumberSymbols(decimal=",", group="."),
    "es_CO": NumberSymbols(decimal=",", group="."),
    "es_CL": NumberSymbols(decimal=",", group="."),
    "es_PE": NumberSymbols(decimal=".", group=","),

    # Portuguese
    "pt": NumberSymbols(decimal=",", group="."),
    "pt_PT": NumberSymbols(decimal=",", group=_NBSP, min_grouping_digits=2),

    # French
    "fr": NumberSymbols(decimal=",", group=_NNBSP),
    "fr_CH": NumberSymbols(decimal=",", group=_NNBSP),

    # German
    "de": NumberSymbols(decimal=",", group="."),
    "de_CH": NumberSymbols(decimal=".", group="\u2019"),

    # Italian
    "it": NumberSymbols(decimal=",", group="."),

    # Others offered by the currency picker
    "pl": NumberSymbols(decimal=",", group=_NBSP, min_grouping_digits=2),
    "cs": NumberSymbols(decimal=",", group=_NBSP),
    "sv": NumberSymbols(decimal=",", group=_NBSP),
    "nb": NumberSymbols(decimal=",", group=_NBSP),
    "da": NumberSymbols(decimal=",", group="."),
    "ja": NumberSymbols(),
    "zh": NumberSymbols(),
    "hi": NumberSymbols(grouping="indian"),
}


# ==============================================================================
# Locale Data: Compact Patterns (short display)
# ==============================================================================

# (threshold, suffix) pairs, largest first
_COMPACT_PATTERNS: dict[str, list[tuple[int, str]]] = {
    "en": [(10**12, "T"), (10**9, "B"), (10**6, "M"), (10**3, "K")],
    "es": [(10**12, f"{_NBSP}B"), (10**9, f"{_NBSP}mil{_NBSP}M"), (10**6, f"{_NBSP}M"), (10**3, f"{_NBSP}mil")],
    "pt": [(10**12, f"{_NBSP}tri"), (10**9, f"{_NBSP}bi"), (10**6, f"{_NBSP}mi"), (10**3, f"{_NBSP}mil")],
    "fr": [(10**12, f"{_NBSP}Bn"), (10**9, f"{_NBSP}Md"), (10**6, f"{_NBSP}M"), (10**3, f"{_NBSP}k")],
    "de": [(10**12, f"{_NBSP}Bio."), (10**9, f"{_NBSP}Mrd."), (10**6, f"{_NBSP}Mio.")],
    "it": [(10**12, f"{_NBSP}Bln"), (10**9, f"{_NBSP}Mrd"), (10**6, f"{_NBSP}Mln")],
}


def parse_locale(tag: str | None) -> tuple[str, str | None]:
    """Split a locale tag into (language, region).

    Accepts ``es-MX``, ``es_MX`` and ``es``. Empty tags mean English.
    """
    if not tag:
        return "en", None
    parts = tag.replace("-", "_").split("_")
    language = parts[0].lower() or "en"
    region = parts[1].upper() if len(parts) > 1 and parts[1] else None
    return language, region


def get_number_symbols(locale: str | None) -> NumberSymbols:
    """Get number symbols for a locale.

    Args:
        locale: Locale tag

    Returns:
        NumberSymbols for the locale
    """
    language, region = parse_locale(locale)

    # Try full locale tag first
    if region and f"{language}_{region}" in _NUMBER_SYMBOLS:
        return _NUMBER_SYMBOLS[f"{language}_{region}"]

    # Fall back to language only
    if language in _NUMBER_SYMBOLS:
        return _NUMBER_SYMBOLS[language]

    # Default to English
    return _NUMBER_SYMBOLS["en"]


def get_compact_patterns(locale: str | None) -> list[tuple[int, str]]:
    """Compact (threshold, suffix) pairs for a locale, largest first."""
    language, _ = parse_locale(locale)
    return _COMPACT_PATTERNS.get(language, _COMPACT_PATTERNS["en"])


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # Shortest round-tripping representation, not the binary expansion
        return Decimal(repr(value))
    return Decimal(value)


def _group_standard(digits: str, separator: str, min_grouping_digits: int) -> str:
    if len(digits) < 3 + min_grouping_digits:
        return digits
    groups: list[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def _group_indian(digits: str, separator: str) -> str:
    if len(digits) <= 3:
        return digits
    # Last 3 digits stay together; preceding part grouped in 2s
    head, tail = digits[:-3], digits[-3:]
    head_groups: list[str] = []
    while len(head) > 2:
        head_groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        head_groups.insert(0, head)
    return separator.join(head_groups + [tail])


def format_decimal(
    value: Number,
    locale: str | None = "en",
    min_fraction_digits: int = 0,
    max_fraction_digits: int = 3,
    use_grouping: bool = True,
) -> str:
    """Format a number with locale separators.

    Rounds half away from zero at ``max_fraction_digits``, then drops
    trailing zeros down to ``min_fraction_digits``.

    Args:
        value: Number to format
        locale: Locale tag
        min_fraction_digits: Fraction digits always shown
        max_fraction_digits: Fraction digits at most shown
        use_grouping: Insert group separators in the integer part

    Returns:
        Localized string (a '-' sign is kept for negative values)
    """
    if min_fraction_digits > max_fraction_digits:
        raise ValueError(
            f"min_fraction_digits ({min_fraction_digits}) exceeds "
            f"max_fraction_digits ({max_fraction_digits})"
        )
    symbols = get_number_symbols(locale)

    with localcontext() as ctx:
        ctx.prec = 400
        quantized = _to_decimal(value).quantize(
            Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_UP
        )

    sign = "-" if quantized < 0 else ""
    text = format(abs(quantized), "f")
    integer, _, fraction = text.partition(".")

    fraction = fraction.rstrip("0")
    if len(fraction) < min_fraction_digits:
        fraction = fraction.ljust(min_fraction_digits, "0")

    if use_grouping:
        if symbols.grouping == "indian":
            integer = _group_indian(integer, symbols.group)
        else:
            integer = _group_standard(integer, symbols.group, symbols.min_grouping_digits)

    if fraction:
        return f"{sign}{integer}{symbols.decimal}{fraction}"
    return f"{sign}{integer}"


def format_compact(
    value: Number,
    locale: str | None = "en",
    fraction_digits: int = 2,
) -> str:
    """Format a number in short compact notation.

    Values below the smallest compact threshold of the locale are
    formatted as plain grouped decimals.
    """
    magnitude = abs(_to_decimal(value))
    sign = "-" if _to_decimal(value) < 0 else ""

    for threshold, suffix in get_compact_patterns(locale):
        if magnitude >= threshold:
            scaled = magnitude / Decimal(threshold)
            body = format_decimal(scaled, locale, fraction_digits, fraction_digits)
            return f"{sign}{body}{suffix}"

    body = format_decimal(magnitude, locale, fraction_digits, fraction_digits)
    return f"{sign}{body}"
