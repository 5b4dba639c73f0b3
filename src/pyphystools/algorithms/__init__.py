"""
Numerical algorithms on piecewise-linear functions.

This module provides the decimal conversion and interpolation helpers, the
zero-avoidance transform, and the symbolic and array export of functions.
"""

from .interpolation import to_decimal, format_decimal, linear_interpolate, trapezoid_area
from .zero_avoidance import avoid_zeros
from .piecewise_builder import PiecewiseBuilder

__all__ = [
    "to_decimal",
    "format_decimal",
    "linear_interpolate",
    "trapezoid_area",
    "avoid_zeros",
    "PiecewiseBuilder"
]
