"""
Numeric Primitives

Small, deterministic conversions shared by the formatter and the fields.
They reproduce the number-to-string behavior the mobile client relies on
(`toFixed`, `toExponential`, `Number#toString`, `Math.round`), so strings
produced here match what users already see on their phones.

CRITICAL INVARIANTS:
1. Nothing here depends on the process locale
2. Rounding is explicit (half-up), never banker's rounding
"""

import math
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal, localcontext
from typing import Any


def is_finite_number(value: Any) -> bool:
    """
    Check that a value is a real, finite number.

    Booleans are rejected even though they subclass int.

    Examples:
        >>> is_finite_number(1.5)
        True
        >>> is_finite_number(float("nan"))
        False
        >>> is_finite_number("12")
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (int, float)):
        try:
            return math.isfinite(value)
        except OverflowError:
            # int too large for a float
            return False
    return False


def to_fixed(value: float, digits: int) -> str:
    """
    Fixed-point string with `digits` decimals, rounded half away from zero
    on the exact binary value.

    Examples:
        >>> to_fixed(12.0, 2)
        '12.00'
        >>> to_fixed(999.999999999999, 1)
        '1000.0'
        >>> to_fixed(-0.001, 2)
        '0.00'
    """
    exact = value if isinstance(value, Decimal) else Decimal(value)
    with localcontext() as ctx:
        ctx.prec = 400
        quantized = exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)
    return format(quantized, "f")


def to_exponential(value: float, digits: int) -> str:
    """
    Exponential notation with an unpadded, signed exponent.

    Examples:
        >>> to_exponential(2_500_000, 2)
        '2.50e+6'
        >>> to_exponential(1e16, 1)
        '1.0e+16'
        >>> to_exponential(0.00012, 1)
        '1.2e-4'
    """
    mantissa, exponent = f"{float(value):.{digits}e}".split("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def number_to_string(value: float) -> str:
    """
    Shortest string of a number, without a trailing '.0' for integral values.

    Examples:
        >>> number_to_string(0)
        '0'
        >>> number_to_string(100.0)
        '100'
        >>> number_to_string(1.5)
        '1.5'
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        exp = int(exponent)
        return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
    return text


def js_round(value: float) -> int:
    """
    Round half toward positive infinity.

    Examples:
        >>> js_round(2.5)
        3
        >>> js_round(-2.5)
        -2
        >>> js_round(0.49999999999999994)
        0
    """
    exact = value if isinstance(value, Decimal) else Decimal(value)
    # Ties go toward +inf: up for positives, toward zero for negatives
    rounding = ROUND_HALF_UP if exact >= 0 else ROUND_HALF_DOWN
    with localcontext() as ctx:
        ctx.prec = 400
        return int(exact.quantize(Decimal(1), rounding=rounding))


def decimal_places(value: float) -> int:
    """
    Count the fractional digits of the shortest representation.

    Examples:
        >>> decimal_places(1.5)
        1
        >>> decimal_places(100.0)
        0
        >>> decimal_places(0.125)
        3
    """
    normalized = Decimal(repr(float(value))).normalize()
    exponent = normalized.as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0
