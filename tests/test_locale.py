"""Tests for the locale layer."""

import pytest

from smart_number.formatting.locale import (
    format_compact,
    format_decimal,
    get_compact_patterns,
    get_number_symbols,
    parse_locale,
)

NBSP = "\u00a0"
NNBSP = "\u202f"


class TestLocaleLookup:
    """Tests for locale parsing and symbol lookup."""

    def test_parse_locale(self):
        assert parse_locale("es-MX") == ("es", "MX")
        assert parse_locale("es_mx") == ("es", "MX")
        assert parse_locale("de") == ("de", None)
        assert parse_locale(None) == ("en", None)
        assert parse_locale("") == ("en", None)

    def test_region_then_language_then_english(self):
        assert get_number_symbols("es-MX").decimal == "."
        assert get_number_symbols("es-ES").decimal == ","
        assert get_number_symbols("xx-YY") == get_number_symbols("en")

    def test_compact_patterns_fallback(self):
        assert get_compact_patterns("ja") == get_compact_patterns("en")
        assert get_compact_patterns("es-AR")[0][1] == f"{NBSP}B"


class TestFormatDecimal:
    """Tests for format_decimal."""

    def test_latin_american_spanish(self):
        assert format_decimal(1234567.891, "es-MX", 2, 2) == "1,234,567.89"

    def test_german(self):
        assert format_decimal(1234567.891, "de", 2, 2) == "1.234.567,89"

    def test_french_narrow_space(self):
        assert format_decimal(1234.5, "fr", 2, 2) == f"1{NNBSP}234,50"

    def test_indian_grouping(self):
        assert format_decimal(1234567, "en-IN", 0, 0) == "12,34,567"
        assert format_decimal(123, "en-IN", 0, 0) == "123"

    def test_spain_min_grouping_digits(self):
        assert format_decimal(1234, "es", 0, 0) == "1234"
        assert format_decimal(12345, "es", 0, 0) == "12.345"

    def test_fraction_digit_range(self):
        assert format_decimal(1.5, "en", 0, 8) == "1.5"
        assert format_decimal(100, "en", 0, 8) == "100"
        assert format_decimal(1.5, "en", 2, 8) == "1.50"
        assert format_decimal(0.123456789, "en", 2, 8) == "0.12345679"

    def test_rounds_half_up_on_shortest_repr(self):
        assert format_decimal(0.125, "en", 2, 2) == "0.13"
        assert format_decimal(2.675, "en", 2, 2) == "2.68"

    def test_negative_values(self):
        assert format_decimal(-1234.5, "en", 2, 2) == "-1,234.50"

    def test_without_grouping(self):
        assert format_decimal(1234567.5, "en", 2, 2, use_grouping=False) == "1234567.50"

    def test_min_above_max_rejected(self):
        with pytest.raises(ValueError):
            format_decimal(1.5, "en", 2, 1)


class TestFormatCompact:
    """Tests for format_compact."""

    def test_english(self):
        assert format_compact(1_500_000_000, "en-US", 2) == "1.50B"
        assert format_compact(2_500_000, "en", 1) == "2.5M"

    def test_spanish(self):
        assert format_compact(1_500_000_000, "es-MX", 2) == f"1.50{NBSP}mil{NBSP}M"
        assert format_compact(2_000_000_000_000, "es", 2) == f"2,00{NBSP}B"

    def test_below_smallest_unit(self):
        assert format_compact(500, "en", 2) == "500.00"
        assert format_compact(1500, "de", 2) == "1.500,00"

    def test_negative(self):
        assert format_compact(-1_500_000_000, "en", 2) == "-1.50B"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
