"""Tests for formatted number parsing."""

import pytest

from smart_number.validation import parse_float, parse_formatted_number


class TestParseFloat:
    """Tests for the lenient prefix reader."""

    @pytest.mark.parametrize("text,expected", [
        ("12.5abc", 12.5),
        (".5", 0.5),
        ("  7", 7.0),
        ("1.2.3", 1.2),
        ("1e5x", 1e5),
        ("1e", 1.0),
        ("-3.", -3.0),
        ("+4", 4.0),
    ])
    def test_reads_leading_number(self, text, expected):
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["", "-", ".", "abc", "Infinity", "1e999", None, 5])
    def test_returns_none(self, text):
        assert parse_float(text) is None


class TestParseFormattedNumber:
    """Tests for parse_formatted_number."""

    @pytest.mark.parametrize("text,expected", [
        ("$1.5K", 1500),
        ("$2.50M", 2_500_000),
        ("$3.2MM", 3_200_000_000),
        ("$4.1B", 4_100_000_000_000),
        ("$10.0Q", 1e16),
        ("-$1.5K", -1500),
        ("€2.5K", 2500),
    ])
    def test_compact_suffixes(self, text, expected):
        assert parse_formatted_number(text) == expected

    def test_double_m_is_not_read_as_m(self):
        assert parse_formatted_number("1MM") == 1_000_000_000
        assert parse_formatted_number("1M") == 1_000_000

    @pytest.mark.parametrize("text,expected", [
        ("$1,234.56", 1234.56),
        ("£ 1 234", 1234),
        ("₹12,34,567", 1234567),
        ("2.50e+6", 2_500_000),
        ("$1.00e+16", 1e16),
        ("-$1,500.00", -1500),
    ])
    def test_plain_and_scientific(self, text, expected):
        assert parse_formatted_number(text) == expected

    @pytest.mark.parametrize("text", ["", "—", "abc", "K", "$M", "1e999", "Número inválido"])
    def test_unparseable_returns_none(self, text):
        assert parse_formatted_number(text) is None

    @pytest.mark.parametrize("value", [None, 1500, 1.5, ["1"]])
    def test_non_strings_return_none(self, value):
        """Test the parser never raises."""
        assert parse_formatted_number(value) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
