import logging
import math
from decimal import Decimal
from typing import Union

from pyphystools.algorithms.interpolation import format_decimal, to_decimal
from pyphystools.core.exceptions import FunctionArithmeticError
from pyphystools.data.constants import DECIMAL_CONTEXT, UnitsPrefix

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]


def _square_root(value: Decimal) -> Decimal:
    if value.is_zero():
        return Decimal(0)
    return DECIMAL_CONTEXT.sqrt(value)


class Vector2D:
    """Two-dimensional vector with decimal coordinates."""

    def __init__(self, x: Number = 0, y: Number = 0) -> None:
        self._x = to_decimal(x)
        self._y = to_decimal(y)

    @property
    def x(self) -> Decimal:
        return self._x

    @property
    def y(self) -> Decimal:
        return self._y

    def add(self, vector: "Vector2D") -> "Vector2D":
        return Vector2D(DECIMAL_CONTEXT.add(self._x, vector.x), DECIMAL_CONTEXT.add(self._y, vector.y))

    def dot_product(self, vector: "Vector2D") -> Decimal:
        return DECIMAL_CONTEXT.add(DECIMAL_CONTEXT.multiply(self._x, vector.x),
                                   DECIMAL_CONTEXT.multiply(self._y, vector.y))

    def norm(self) -> Decimal:
        return _square_root(self.dot_product(self))

    def is_codirectional(self, vector: "Vector2D") -> bool:
        """
        Tell whether both coordinates of this vector have the same ratio to the other vector's.
        Raises:
            FunctionArithmeticError: If a coordinate of the other vector is zero
        """
        if vector.x.is_zero() or vector.y.is_zero():
            raise FunctionArithmeticError(f"Cannot compare directions with a zero coordinate in {vector}")
        return DECIMAL_CONTEXT.divide(self._x, vector.x) == DECIMAL_CONTEXT.divide(self._y, vector.y)

    def rotate(self, angle: float) -> "Vector2D":
        """Rotate counterclockwise by an angle in radians."""
        cos = Decimal(math.cos(angle))
        sin = Decimal(math.sin(angle))
        rotated_x = DECIMAL_CONTEXT.subtract(DECIMAL_CONTEXT.multiply(self._x, cos), DECIMAL_CONTEXT.multiply(self._y, sin))
        rotated_y = DECIMAL_CONTEXT.add(DECIMAL_CONTEXT.multiply(self._x, sin), DECIMAL_CONTEXT.multiply(self._y, cos))
        return Vector2D(rotated_x, rotated_y)

    def scale(self, multiplier: Number) -> "Vector2D":
        multiplier = to_decimal(multiplier)
        return Vector2D(DECIMAL_CONTEXT.multiply(self._x, multiplier), DECIMAL_CONTEXT.multiply(self._y, multiplier))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self._x == other.x and self._y == other.y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __str__(self) -> str:
        return f"({self._x}; {self._y})"

    def __repr__(self) -> str:
        return f"Vector2D(x={self._x}, y={self._y})"


class Point2D:
    """Two-dimensional point with decimal coordinates."""

    def __init__(self, x: Number = 0, y: Number = 0) -> None:
        self._x = to_decimal(x)
        self._y = to_decimal(y)

    @property
    def x(self) -> Decimal:
        return self._x

    @property
    def y(self) -> Decimal:
        return self._y

    def distance_to(self, point: "Point2D") -> Decimal:
        x_distance = DECIMAL_CONTEXT.subtract(self._x, point.x)
        y_distance = DECIMAL_CONTEXT.subtract(self._y, point.y)
        return _square_root(DECIMAL_CONTEXT.add(DECIMAL_CONTEXT.multiply(x_distance, x_distance),
                                                DECIMAL_CONTEXT.multiply(y_distance, y_distance)))

    def translate(self, vector: Vector2D) -> "Point2D":
        return Point2D(DECIMAL_CONTEXT.add(self._x, vector.x), DECIMAL_CONTEXT.add(self._y, vector.y))

    def to_scaled_string(self, unit: UnitsPrefix) -> str:
        """Coordinates expressed in the given unit, e.g. '(1; 2)' for a point at (1e-9, 2e-9) in nanometres."""
        scaled_x = format_decimal(DECIMAL_CONTEXT.divide(self._x, unit.multiplier))
        scaled_y = format_decimal(DECIMAL_CONTEXT.divide(self._y, unit.multiplier))
        return f"({scaled_x}; {scaled_y})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self._x == other.x and self._y == other.y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __str__(self) -> str:
        return f"({self._x}; {self._y})"

    def __repr__(self) -> str:
        return f"Point2D(x={self._x}, y={self._y})"
