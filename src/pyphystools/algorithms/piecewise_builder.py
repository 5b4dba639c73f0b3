import logging
from decimal import Decimal
from typing import TYPE_CHECKING, List, Tuple

import numpy as np
import sympy as sp

from pyphystools.core.exceptions import FunctionStateError
from pyphystools.data.constants import ErrorMessages

if TYPE_CHECKING:
    from pyphystools.core.piecewise_function import PiecewiseFunction

logger = logging.getLogger(__name__)


def _rational(value: Decimal) -> sp.Rational:
    """Exact rational form of a decimal."""
    return sp.Rational(*value.as_integer_ratio())


class PiecewiseBuilder:
    """Conversion of piecewise-linear functions to symbolic and array forms."""

    @staticmethod
    def build_from_function(function: "PiecewiseFunction", x: sp.Symbol = sp.Symbol('x')) -> sp.Piecewise:
        """
        Symbolic form of a piecewise-linear function.

        Each segment [x_i, x_i+1) holds the straight line through its two samples, the last
        segment being closed on the last sample. Outside [start, end] the expression is nan.
        Args:
            function: Function to convert
            x: Symbol of the abscissa
        Returns:
            sp.Piecewise: Exact symbolic function, built from rational coefficients
        Raises:
            FunctionStateError: If the function has no points
        """
        points = function.items()
        if not points:
            raise FunctionStateError(ErrorMessages.EMPTY_FUNCTION)
        logger.debug("Building symbolic piecewise function from %d points", len(points))
        abscissa = [_rational(point.abscissa) for point in points]
        values = [_rational(point.value) for point in points]
        if len(points) == 1:
            return sp.Piecewise((values[0], sp.Eq(x, abscissa[0])), (sp.nan, True))
        conditions: List[Tuple[sp.Expr, sp.Basic]] = []
        last_segment = len(points) - 2
        for i in range(len(points) - 1):
            slope = (values[i + 1] - values[i]) / (abscissa[i + 1] - abscissa[i])
            expr = values[i] + slope * (x - abscissa[i])
            if i == last_segment:
                condition = sp.And(x >= abscissa[i], x <= abscissa[i + 1])
            else:
                condition = sp.And(x >= abscissa[i], x < abscissa[i + 1])
            conditions.append((expr, condition))
        conditions.append((sp.nan, True))
        logger.debug("Created %d interpolation segments", len(conditions) - 1)
        return sp.Piecewise(*conditions)

    @staticmethod
    def to_arrays(function: "PiecewiseFunction", abscissa_scale=1,
                  value_scale=1) -> Tuple[np.ndarray, np.ndarray]:
        """
        Abscissas and values as float arrays in ascending order.
        Args:
            function: Function to convert
            abscissa_scale: Divisor applied to the abscissas, e.g. a unit multiplier
            value_scale: Divisor applied to the values
        """
        points = function.items()
        abscissa = np.array([float(point.abscissa) for point in points], dtype=np.float64)
        values = np.array([float(point.value) for point in points], dtype=np.float64)
        return abscissa / float(abscissa_scale), values / float(value_scale)
