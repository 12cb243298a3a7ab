"""
Formatted number parsing
Handles: 1500, 1,500.00, $1.5K, 2.50M, 3.2MM, 4.1B, 1.0Q, 2.50e+6
"""

import math
import re
from decimal import Decimal
from typing import Any, Optional


# Leading numeric prefix, the way a lenient float reader sees it
_FLOAT_PREFIX = re.compile(r'^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')

# Currency symbols, whitespace and group separators
_NOISE = re.compile(r'[$€£¥₹₽\s,]')

# Longest suffix first so "MM" is never read as "M"
COMPACT_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ('MM', 1_000_000_000),
    ('K', 1_000),
    ('M', 1_000_000),
    ('B', 1_000_000_000_000),
    ('Q', 1_000_000_000_000_000),
)


def _float_prefix(text: str) -> Optional[str]:
    match = _FLOAT_PREFIX.match(text.lstrip())
    return match.group(0) if match else None


def parse_float(text: Any) -> Optional[float]:
    """
    Parse the leading number of a string, ignoring whatever follows.

    Returns None when the string does not start with a number or the
    number is not finite.

    Examples:
        parse_float("12.5abc") -> 12.5
        parse_float("1.2.3")   -> 1.2
        parse_float("-")       -> None
    """
    if not isinstance(text, str):
        return None
    prefix = _float_prefix(text)
    if prefix is None:
        return None
    value = float(prefix)
    return value if math.isfinite(value) else None


def parse_formatted_number(formatted: Any) -> Optional[float]:
    """
    Parse a formatted string back into a number.

    Inverts the compact units written for cards and lists
    (K, M, MM, B, Q). The result is as precise as the shown digits, so
    "$1.5K" gives 1500 while "$1000.0B" gives 1e15.

    Args:
        formatted: Formatted text

    Returns:
        The value, or None if nothing could be parsed
    """
    if not isinstance(formatted, str):
        return None

    cleaned = _NOISE.sub('', formatted)

    for suffix, multiplier in COMPACT_MULTIPLIERS:
        if cleaned.endswith(suffix):
            prefix = _float_prefix(cleaned[:-len(suffix)])
            if prefix is None:
                return None
            try:
                value = float(Decimal(prefix) * multiplier)
            except ArithmeticError:
                return None
            return value if math.isfinite(value) else None

    # Plain and scientific notation both go through the prefix reader
    return parse_float(cleaned)
