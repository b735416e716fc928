"""Tests for conversion math, amount parsing and display formatting."""

from decimal import Decimal

import pytest

from tokenswap.conversion import convert, format_amount, parse_amount
from tokenswap.errors import ErrorKind, ValidationFailed


class TestConvert:
    """Tests for the pure conversion function."""

    @pytest.mark.parametrize(
        "amount,price_from,price_to",
        [
            ("100", "1.0", "0.9"),
            ("0.5", "1645.93", "0.004"),
            ("12345.6789", "0.3772", "7.19"),
            ("1", "26002.82", "26002.82"),
        ],
    )
    def test_matches_formula(self, amount, price_from, price_to):
        """Result is exactly amount * price_from / price_to."""
        a, pf, pt = Decimal(amount), Decimal(price_from), Decimal(price_to)
        assert convert(a, pf, pt) == a * pf / pt

    def test_round_trip(self):
        """Converting there and back returns the original amount."""
        amount = Decimal("100")
        there = convert(amount, Decimal("1645.93"), Decimal("0.004"))
        back = convert(there, Decimal("0.004"), Decimal("1645.93"))

        assert abs(back - amount) < Decimal("1e-20")

    def test_keeps_full_precision(self):
        """The engine does not round."""
        result = convert(Decimal("100"), Decimal("1.0"), Decimal("0.9"))
        assert result != Decimal("111.1111")
        assert str(result).startswith("111.11111111")

    def test_accepts_strings_and_ints(self):
        assert convert("2", 3, "1.5") == Decimal("4")


class TestFormatAmount:
    """Tests for fixed-precision display."""

    def test_four_decimals_by_default(self):
        assert format_amount(Decimal("90")) == "90.0000"
        assert format_amount(Decimal("111.11111111")) == "111.1111"

    def test_rounds_half_up(self):
        assert format_amount(Decimal("0.00005")) == "0.0001"
        assert format_amount(Decimal("2.71825")) == "2.7183"

    def test_custom_decimals(self):
        assert format_amount(Decimal("1.5"), decimals=2) == "1.50"
        assert format_amount(Decimal("1.5"), decimals=0) == "2"

    def test_large_values(self):
        """Values beyond the default context precision still format."""
        value = Decimal("123456789012345678901234567890.123456")
        assert format_amount(value) == "123456789012345678901234567890.1235"


class TestParseAmount:
    """Tests for amount text parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("100", Decimal("100")),
            ("  2.5 ", Decimal("2.5")),
            ("1e3", Decimal("1000")),
            ("0.0001", Decimal("0.0001")),
            ("1e30", Decimal("1e30")),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "abc", "-5", "0", "0.0", "NaN", "Infinity", "1,000", "1_000", "\uff11\uff10\uff10", "\u0663"],
    )
    def test_invalid(self, text):
        with pytest.raises(ValidationFailed) as exc_info:
            parse_amount(text)

        assert exc_info.value.kind is ErrorKind.INVALID_AMOUNT
        assert exc_info.value.message == "Please enter a valid amount."

    @pytest.mark.parametrize("text", ["1e31", "1e999999", "1e1000000", "9" * 40])
    def test_too_large(self, text):
        with pytest.raises(ValidationFailed) as exc_info:
            parse_amount(text)

        assert exc_info.value.kind is ErrorKind.INVALID_AMOUNT
