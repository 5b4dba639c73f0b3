import logging
import math
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

from pyphystools.core.exceptions import FunctionArgumentError
from pyphystools.data.constants import DECIMAL_CONTEXT

logger = logging.getLogger(__name__)


def to_decimal(value: Any) -> Decimal:
    """
    Convert a number to a Decimal without going through its binary expansion.
    Args:
        value: Decimal, int, float, numeric string, or any object whose str() is a number
    Returns:
        The finite Decimal equal to the value
    Raises:
        FunctionArgumentError: If the value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise FunctionArgumentError(f"Booleans are not numbers: {value!r}")
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise FunctionArgumentError(f"Value must be finite, got {value}")
        result = Decimal(repr(float(value)))
    else:
        # numpy/sympy scalars and strings all print as decimal literals
        text = value.strip() if isinstance(value, str) else str(value)
        try:
            result = Decimal(text)
        except (InvalidOperation, ValueError) as e:
            raise FunctionArgumentError(f"Cannot convert {value!r} to a decimal number") from e
    if not result.is_finite():
        raise FunctionArgumentError(f"Value must be finite, got {value!r}")
    return result


def format_decimal(value: Decimal) -> Decimal:
    """
    Canonical form of a stored decimal: trailing zeros stripped, no negative zero.

    Two decimals representing the same number have the same canonical form,
    e.g. Decimal('1.50') and Decimal('1.5').
    """
    result = value.normalize(DECIMAL_CONTEXT)
    return result.copy_abs() if result.is_zero() else result


def linear_interpolate(position: Decimal, previous: Decimal, previous_value: Decimal,
                       following: Decimal, following_value: Decimal) -> Decimal:
    """Value at position of the straight line through (previous, previous_value) and (following, following_value)."""
    with localcontext(DECIMAL_CONTEXT):
        slope = (following_value - previous_value) / (following - previous)
        offset = previous_value - slope * previous
        return slope * position + offset


def trapezoid_area(lower: Decimal, upper: Decimal, lower_value: Decimal, upper_value: Decimal) -> Decimal:
    """
    Area under the segment joining (lower, lower_value) and (upper, upper_value).

    The trapezoid is split into a rectangle as high as the smaller endpoint value
    and a triangle as high as the difference between both values:

           /|
          / |
         /_T|
         |  |
         |R |
         |__|

    This holds while the segment keeps one sign; a segment crossing zero is not corrected.
    """
    with localcontext(DECIMAL_CONTEXT):
        width = upper - lower
        rectangle_height = min(lower_value, upper_value)
        rectangle_area = width * rectangle_height
        triangle_area = width * (max(lower_value, upper_value) - rectangle_height) / 2
        return rectangle_area + triangle_area
