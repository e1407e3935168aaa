"""Unit tests for exact arithmetic operations."""

import pytest

from decicalc import add, format_number, multiply, parse, percent, subtract


def calc(op, a, b):
    return format_number(op(parse(a), parse(b)))


class TestParseAndFormat:
    """Tests for the module-level parse and format_number."""

    def test_round_trip(self, sample_numbers):
        for text in sample_numbers:
            assert format_number(parse(text)) == text

    def test_format_canonicalises(self):
        assert format_number(parse("007.2500")) == "7.25"
        assert format_number(parse("-0.0")) == "0"


class TestAdd:
    """Tests for the add function."""

    def test_add_positive_numbers(self):
        assert calc(add, "2", "3") == "5"

    def test_add_negative_numbers(self):
        assert calc(add, "-2", "-3") == "-5"

    def test_add_mixed_signs(self):
        assert calc(add, "-2", "3") == "1"
        assert calc(add, "2", "-3") == "-1"

    def test_add_with_zero(self):
        assert calc(add, "5", "0") == "5"
        assert calc(add, "0", "5") == "5"
        assert calc(add, "-5", "0") == "-5"

    def test_add_decimals_is_exact(self):
        assert calc(add, "0.1", "0.2") == "0.3"

    def test_add_carries_into_new_digit(self):
        assert calc(add, "999", "1") == "1000"
        assert calc(add, "9.99", "0.01") == "10"

    def test_add_aligns_scales(self):
        result = add(parse("1.5"), parse("2.25"))
        assert format_number(result) == "3.75"
        assert result.scale == 2

    def test_add_large_numbers(self):
        a = "123456789012345678901234567890"
        assert calc(add, a, a) == "246913578024691357802469135780"


class TestSubtract:
    """Tests for the subtract function."""

    def test_subtract_positive_numbers(self):
        assert calc(subtract, "5", "3") == "2"

    def test_subtract_resulting_negative(self):
        assert calc(subtract, "3", "5") == "-2"

    def test_subtract_from_zero(self):
        assert calc(subtract, "0", "5") == "-5"

    def test_subtract_zero(self):
        assert calc(subtract, "5", "0") == "5"
        assert calc(subtract, "-5", "0") == "-5"

    def test_subtract_same_number(self):
        result = subtract(parse("-7.25"), parse("-7.25"))
        assert format_number(result) == "0"
        assert not result.is_negative

    def test_subtract_with_borrow(self):
        assert calc(subtract, "1000", "1") == "999"
        assert calc(subtract, "10", "0.01") == "9.99"

    def test_subtract_mixed_signs(self):
        assert calc(subtract, "-2", "3") == "-5"
        assert calc(subtract, "2", "-3") == "5"

    def test_subtract_both_negative(self):
        assert calc(subtract, "-2", "-3") == "1"
        assert calc(subtract, "-3", "-2") == "-1"

    def test_subtract_equal_length_smaller_first(self):
        assert calc(subtract, "45", "54") == "-9"

    def test_subtract_decimals_is_exact(self):
        assert calc(subtract, "0.3", "0.1") == "0.2"


class TestMultiply:
    """Tests for the multiply function."""

    def test_multiply_positive_numbers(self):
        assert calc(multiply, "3", "4") == "12"

    def test_multiply_with_negative(self):
        assert calc(multiply, "-3", "4") == "-12"
        assert calc(multiply, "3", "-4") == "-12"

    def test_multiply_two_negatives(self):
        assert calc(multiply, "-3", "-4") == "12"

    def test_multiply_by_zero(self):
        assert calc(multiply, "1000", "0") == "0"
        assert calc(multiply, "-1000", "0") == "0"
        assert not multiply(parse("-5"), parse("0")).is_negative

    def test_multiply_by_one(self):
        assert calc(multiply, "42", "1") == "42"

    def test_multiply_decimals(self):
        result = multiply(parse("1.23"), parse("4.5"))
        assert result.scale == 3
        assert result.digits == (5, 3, 5, 5)
        assert format_number(result) == "5.535"

    def test_multiply_scales_add(self):
        result = multiply(parse("0.5"), parse("0.02"))
        assert result.scale == 3
        assert format_number(result) == "0.01"

    def test_multiply_large_numbers(self):
        assert calc(multiply, "99999999999999999999", "99999999999999999999") == (
            "9999999999999999999800000000000000000001"
        )


class TestPercent:
    """Tests for the percent function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("50", "0.5"), ("5", "0.05"), ("-12.5", "-0.125"), ("0", "0"), ("200", "2")],
    )
    def test_percent(self, value, expected):
        assert format_number(percent(parse(value))) == expected
