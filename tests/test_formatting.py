"""Tests for percent and currency formatting."""

import math

import pytest

from auslastung.normalization.formatting import (
    format_currency,
    format_percent,
    parse_number,
)


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, 0.5),
            (3, 3.0),
            ("0.25", 0.25),
            ("  42", 42.0),
            ("100.5 EUR", 100.5),
            (".5", 0.5),
            ("-1.5e2", -150.0),
        ],
    )
    def test_parses_numbers(self, value: object, expected: float) -> None:
        """Test numbers and numeric strings are parsed."""
        assert parse_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", "abc", "x1", "Infinity", "NaN", True, [], {}, math.nan, math.inf],
    )
    def test_rejects_non_numbers(self, value: object) -> None:
        """Test anything without a finite leading number yields None."""
        assert parse_number(value) is None


class TestFormatPercent:
    """Tests for format_percent."""

    def test_rounds_to_whole_percent(self) -> None:
        """Test ratio is scaled and rounded."""
        assert format_percent(0.4567) == "46%"

    def test_half_rounds_up(self) -> None:
        """Test the .5 boundary rounds up."""
        assert format_percent(0.005) == "1%"
        assert format_percent(0.004) == "0%"
        assert format_percent(0.625) == "63%"

    def test_numeric_string(self) -> None:
        """Test numeric strings are accepted."""
        assert format_percent("0.8512") == "85%"

    @pytest.mark.parametrize("value", [0, 0.0, "0", None, "not a number", math.nan])
    def test_missing_or_zero(self, value: object) -> None:
        """Test zero, absent and unparseable values render as 0%."""
        assert format_percent(value) == "0%"

    def test_out_of_range_not_clamped(self) -> None:
        """Test ratios outside 0-1 are rendered literally."""
        assert format_percent(1.5) == "150%"
        assert format_percent(-0.25) == "-25%"

    def test_negative_half_rounds_toward_positive(self) -> None:
        """Test negative halves round up like positive ones."""
        assert format_percent(-0.125) == "-12%"

    def test_huge_value_does_not_raise(self) -> None:
        """Test values overflowing on scaling fall back to 0%."""
        assert format_percent(1e308) == "0%"


class TestFormatCurrency:
    """Tests for format_currency."""

    def test_two_decimals_with_suffix(self) -> None:
        """Test amounts get exactly two decimals and the suffix."""
        assert format_currency("88") == "88.00 EUR"
        assert format_currency(100.5) == "100.50 EUR"

    def test_half_rounds_away_from_zero(self) -> None:
        """Test exact binary halves round up."""
        assert format_currency(0.125) == "0.13 EUR"
        assert format_currency(-0.125) == "-0.13 EUR"

    def test_negative_zero(self) -> None:
        """Test negative zero renders without a sign."""
        assert format_currency(-0.0) == "0.00 EUR"

    def test_unparseable_uses_placeholder(self) -> None:
        """Test unparseable amounts yield the placeholder."""
        assert format_currency("x") == "–"
        assert format_currency(None) == "–"

    def test_custom_suffix_and_placeholder(self) -> None:
        """Test suffix and placeholder are configurable."""
        assert format_currency("12.3", suffix="CHF") == "12.30 CHF"
        assert format_currency("x", missing="n/a") == "n/a"

    def test_large_amount(self) -> None:
        """Test large amounts are rendered in plain notation."""
        assert format_currency(1e21) == "1000000000000000000000.00 EUR"
