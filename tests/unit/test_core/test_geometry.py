"""Tests for the 2D point and vector helpers."""

import math
from decimal import Decimal

import pytest

from pyphystools.core.exceptions import FunctionArithmeticError
from pyphystools.core.geometry import Point2D, Vector2D
from pyphystools.data.constants import UnitsPrefix


class TestVector2D:
    """Test vector operations."""

    def test_add(self):
        assert Vector2D(1, 2).add(Vector2D("0.5", -3)) == Vector2D("1.5", -1)

    def test_dot_product(self):
        assert Vector2D(1, 2).dot_product(Vector2D(3, 4)) == Decimal(11)

    def test_norm(self):
        assert Vector2D(3, 4).norm() == Decimal(5)

    def test_zero_norm_is_exact(self):
        assert Vector2D().norm() == Decimal(0)

    def test_scale(self):
        assert Vector2D(1, -2).scale("2.5") == Vector2D("2.5", -5)

    def test_codirectional(self):
        assert Vector2D(2, 4).is_codirectional(Vector2D(1, 2))
        assert not Vector2D(2, 3).is_codirectional(Vector2D(1, 2))

    def test_codirectional_with_zero_component_raises(self):
        with pytest.raises(FunctionArithmeticError):
            Vector2D(1, 0).is_codirectional(Vector2D(1, 0))

    def test_rotate_quarter_turn(self):
        rotated = Vector2D(1, 0).rotate(math.pi / 2)
        assert abs(rotated.x) < Decimal("1e-15")
        assert abs(rotated.y - 1) < Decimal("1e-15")

    def test_string_representation(self):
        assert str(Vector2D("1.5", -2)) == "(1.5; -2)"


class TestPoint2D:
    """Test point operations."""

    def test_distance(self):
        assert Point2D(0, 0).distance_to(Point2D(3, 4)) == Decimal(5)

    def test_distance_to_itself(self):
        assert Point2D(1, 1).distance_to(Point2D(1, 1)) == Decimal(0)

    def test_translate(self):
        assert Point2D(1, 1).translate(Vector2D(2, -1)) == Point2D(3, 0)

    def test_scaled_string(self):
        point = Point2D("1e-9", "2.5e-9")
        assert point.to_scaled_string(UnitsPrefix.NANO) == "(1; 2.5)"

    def test_points_are_hashable(self):
        assert len({Point2D(1, 2), Point2D("1.0", "2.0")}) == 1

    def test_string_representation(self):
        assert str(Point2D(1, 2)) == "(1; 2)"
