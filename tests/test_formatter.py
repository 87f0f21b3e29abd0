"""
Tests for result formatting.
"""

import math

import pytest
from core import EvalResult, format_result, format_number, evaluate_expression


class TestPlainFormatting:
    """Test values rendered with up to 14 significant digits."""

    @pytest.mark.parametrize("value,expected", [
        (7, "7"),
        (7.0, "7"),
        (0, "0"),
        (-3, "-3"),
        (-2.5, "-2.5"),
        (0.1, "0.1"),
        (123.456, "123.456"),
        (100000000000.0, "100000000000"),
        (999999999999.5, "999999999999.5"),
        (0.000001, "0.000001"),
    ])
    def test_values(self, value, expected):
        assert format_result(value) == expected

    def test_floating_point_noise_is_absorbed(self):
        assert format_result(0.1 + 0.2) == "0.3"

    def test_repeating_fractions_round_to_14_digits(self):
        assert format_result(1 / 3) == "0.33333333333333"
        assert format_result(2 / 3) == "0.66666666666667"

    def test_negative_zero(self):
        assert format_result(-0.0) == "0"

    def test_no_trailing_point(self):
        assert not format_result(42.0).endswith(".")

    def test_small_values_below_a_millionth(self):
        assert format_result(1e-7) == "1e-7"
        assert format_result(-2.5e-8) == "-2.5e-8"


class TestExponentialFormatting:
    """Test very large and very small magnitudes."""

    @pytest.mark.parametrize("value,expected", [
        (1e12, "1e12"),
        (1e13, "1e13"),
        (1.5e15, "1.5e15"),
        (-1.5e15, "-1.5e15"),
        (1e-12, "1e-12"),
        (123456789012345, "1.2345678901e14"),
    ])
    def test_values(self, value, expected):
        assert format_result(value) == expected

    def test_no_plus_sign_in_exponent(self):
        assert "+" not in format_result(2.5e20)


class TestErrorFormatting:
    """Test failure rendering."""

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, None])
    def test_non_finite(self, value):
        assert format_result(value) == "Error"

    def test_failed_result(self):
        assert format_result(EvalResult.failure("lexical")) == "Error"

    def test_successful_result(self):
        assert format_result(EvalResult.success(84)) == "84"

    def test_division_and_modulo_by_zero(self):
        assert format_result(evaluate_expression("5/0")) == "Error"
        assert format_result(evaluate_expression("5%0")) == "Error"


class TestFormattingStability:
    """Test idempotence and round-trips."""

    @pytest.mark.parametrize("value", [7, 0.1 + 0.2, 1 / 3, -2.5, 1e13, 1e-12])
    def test_formatting_twice_is_stable(self, value):
        assert format_result(value) == format_result(value)

    @pytest.mark.parametrize("text", ["1/3", "2/3", "0.1+0.2", "-5+2", "12*(3+4)", "10/4", "-7%3"])
    def test_formatted_output_evaluates_back(self, text):
        first = evaluate_expression(text)
        rendered = format_result(first)
        again = evaluate_expression(rendered)
        assert again.ok
        assert again.value == pytest.approx(first.value, rel=1e-13)
        assert format_number(again.value) == rendered
