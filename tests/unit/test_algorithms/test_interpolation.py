"""Tests for decimal conversion, interpolation and trapezoid helpers."""

from decimal import Decimal

import numpy as np
import pytest

from pyphystools.algorithms.interpolation import format_decimal, linear_interpolate, to_decimal, trapezoid_area
from pyphystools.core.exceptions import FunctionArgumentError


class TestToDecimal:
    """Test conversion of inputs to decimals."""

    @pytest.mark.parametrize("value, expected", [
        (Decimal("1.25"), Decimal("1.25")),
        (3, Decimal(3)),
        (0.1, Decimal("0.1")),
        (" 2.5e-3 ", Decimal("0.0025")),
        (np.float64(0.5), Decimal("0.5")),
    ])
    def test_conversions(self, value, expected):
        assert to_decimal(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", float("nan"), float("-inf"), "Infinity", True, None])
    def test_invalid_values(self, value):
        with pytest.raises(FunctionArgumentError):
            to_decimal(value)


class TestFormatDecimal:
    """Test canonical decimal form."""

    def test_strips_trailing_zeros(self):
        assert str(format_decimal(Decimal("1.500"))) == "1.5"

    def test_negative_zero_becomes_zero(self):
        result = format_decimal(Decimal("-0.00"))
        assert result == 0
        assert not result.is_signed()

    def test_equal_numbers_share_one_form(self):
        assert str(format_decimal(Decimal("100"))) == str(format_decimal(Decimal("1E+2")))


class TestLinearInterpolate:
    """Test interpolation on a single segment."""

    def test_midpoint(self):
        assert linear_interpolate(Decimal(1), Decimal(0), Decimal(2), Decimal(2), Decimal(6)) == Decimal(4)

    def test_endpoints(self):
        assert linear_interpolate(Decimal(2), Decimal(0), Decimal(2), Decimal(2), Decimal(6)) == Decimal(6)
        assert linear_interpolate(Decimal(0), Decimal(0), Decimal(2), Decimal(2), Decimal(6)) == Decimal(2)

    def test_negative_slope(self):
        assert linear_interpolate(Decimal("1.5"), Decimal(1), Decimal(4), Decimal(2), Decimal(2)) == Decimal(3)


class TestTrapezoidArea:
    """Test the rectangle plus triangle decomposition."""

    def test_rectangle(self):
        assert trapezoid_area(Decimal(0), Decimal(2), Decimal(3), Decimal(3)) == Decimal(6)

    def test_increasing_segment(self):
        assert trapezoid_area(Decimal(0), Decimal(1), Decimal(0), Decimal(1)) == Decimal("0.5")

    def test_decreasing_segment(self):
        assert trapezoid_area(Decimal(0), Decimal(1), Decimal(1), Decimal(0)) == Decimal("0.5")

    def test_zero_width(self):
        assert trapezoid_area(Decimal(1), Decimal(1), Decimal(5), Decimal(7)) == Decimal(0)
