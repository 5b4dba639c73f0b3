"""
Core data structures.

This module contains the piecewise-linear function, the 2D geometry helpers,
the material definitions and the exception hierarchy of pyphystools.
"""

from .exceptions import (FunctionError, FunctionRangeError, FunctionArgumentError, FunctionArithmeticError,
                         FunctionStateError, DataFormatError, ColumnIndexError, MaterialError,
                         MaterialConfigurationError, OffsetNotDefinedError)
from .piecewise_function import PiecewiseFunction, FunctionPoint, PointwiseValue
from .geometry import Point2D, Vector2D
from .materials import Material, Metamaterial

__all__ = [
    "PiecewiseFunction",
    "FunctionPoint",
    "PointwiseValue",
    "Point2D",
    "Vector2D",
    "Material",
    "Metamaterial",
    "FunctionError",
    "FunctionRangeError",
    "FunctionArgumentError",
    "FunctionArithmeticError",
    "FunctionStateError",
    "DataFormatError",
    "ColumnIndexError",
    "MaterialError",
    "MaterialConfigurationError",
    "OffsetNotDefinedError"
]
