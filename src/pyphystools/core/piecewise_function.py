import logging
import threading
from bisect import bisect_right
from decimal import Decimal, localcontext
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from pyphystools.algorithms.interpolation import format_decimal, linear_interpolate, to_decimal, trapezoid_area
from pyphystools.algorithms.zero_avoidance import avoid_zeros
from pyphystools.core.exceptions import (FunctionArgumentError, FunctionArithmeticError, FunctionRangeError,
                                         FunctionStateError)
from pyphystools.data.constants import DECIMAL_CONTEXT, ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]


class FunctionPoint(NamedTuple):
    abscissa: Decimal
    value: Decimal


class PointwiseValue(NamedTuple):
    """Result of combining two functions at one abscissa of the left operand."""
    value: Decimal
    combined: bool  # False when the right operand had no value there and the left value was kept


class PiecewiseFunction:
    """
    Piecewise-linear function sampled at a finite set of abscissas.

    Values between two samples are the linear interpolation of the two closest samples.
    Abscissas and values are exact decimals, normalized on insertion so that numerically
    equal decimals collapse onto the same key. Instances are immutable: every transformation
    returns a new function, and concurrent readers need no external locking.
    """

    # --- Constructors ---
    def __init__(self, values: Optional[Union[Mapping[Any, Any], "PiecewiseFunction"]] = None) -> None:
        """
        Args:
            values: Abscissa to value mapping, or another function to copy. None builds an empty function.
        """
        source = values.as_dict() if isinstance(values, PiecewiseFunction) else (values or {})
        points = {}
        for abscissa, value in source.items():
            points[format_decimal(to_decimal(abscissa))] = format_decimal(to_decimal(value))
        self._abscissa: Tuple[Decimal, ...] = tuple(sorted(points))
        self._points: Dict[Decimal, Decimal] = {position: points[position] for position in self._abscissa}
        self._lock = threading.Lock()
        logger.debug("Created piecewise function with %d points", len(self._abscissa))

    @classmethod
    def from_file(cls, file_path: Union[str, Path],
                  abscissa_multiplier: Number = 1,
                  value_multiplier: Number = 1,
                  expected_extension: str = ProcessingConstants.DEFAULT_EXTENSION,
                  separator: str = ProcessingConstants.DEFAULT_SEPARATOR,
                  column_count: int = ProcessingConstants.DEFAULT_COLUMN_COUNT,
                  columns: Sequence[int] = ProcessingConstants.DEFAULT_COLUMNS) -> "PiecewiseFunction":
        """
        Create a function from a delimited text file, one sample per line.
        Args:
            file_path: Data file to read
            abscissa_multiplier: Multiplier converting the abscissa column to SI
            value_multiplier: Multiplier converting the value column to SI
            expected_extension: Extension the file must carry, without the dot
            separator: Regular expression separating the columns
            column_count: Number of columns a valid line has
            columns: Indices of the abscissa and value columns
        Returns:
            The function holding the first occurrence of every abscissa in the file
        Raises:
            DataFormatError: If the file extension is not the expected one
            ColumnIndexError: If a column index is outside the declared column count
            FileNotFoundError: If the file does not exist
        """
        from pyphystools.parsing.io.data_handler import read_function_points
        return cls(read_function_points(file_path, abscissa_multiplier, value_multiplier,
                                        expected_extension, separator, column_count, columns))

    def copy(self) -> "PiecewiseFunction":
        return PiecewiseFunction(self)

    def __copy__(self) -> "PiecewiseFunction":
        return self.copy()

    def __deepcopy__(self, memo) -> "PiecewiseFunction":
        return self.copy()

    # --- Accessors ---
    @property
    def abscissa(self) -> Tuple[Decimal, ...]:
        """Abscissas in ascending order."""
        return self._abscissa

    def as_dict(self) -> Dict[Decimal, Decimal]:
        """Copy of the abscissa to value mapping, in ascending abscissa order."""
        return dict(self._points)

    def items(self) -> List[FunctionPoint]:
        return [FunctionPoint(position, self._points[position]) for position in self._abscissa]

    def start(self) -> Decimal:
        if not self._abscissa:
            raise FunctionStateError(ErrorMessages.EMPTY_FUNCTION)
        return self._abscissa[0]

    def end(self) -> Decimal:
        if not self._abscissa:
            raise FunctionStateError(ErrorMessages.EMPTY_FUNCTION)
        return self._abscissa[-1]

    def is_in_range(self, position: Number) -> bool:
        """Tell whether the position lies between the smallest and the largest abscissa, bounds included."""
        if not self._abscissa:
            return False
        position = to_decimal(position)
        return self._abscissa[0] <= position <= self._abscissa[-1]

    def value_at(self, position: Number) -> Decimal:
        """
        Value of the function at the given position.

        A sampled position returns its stored value; any other position in range returns the
        linear interpolation between the two closest samples.
        Raises:
            FunctionRangeError: If the position is outside [start, end]
        """
        position = format_decimal(to_decimal(position))
        with self._lock:
            if not self.is_in_range(position):
                start, end = (self._abscissa[0], self._abscissa[-1]) if self._abscissa else (None, None)
                raise FunctionRangeError(ErrorMessages.OUT_OF_RANGE.format(position=position, start=start, end=end))
            value = self._points.get(position)
            if value is not None:
                return value
            index = bisect_right(self._abscissa, position)
            previous, following = self._abscissa[index - 1], self._abscissa[index]
            return format_decimal(linear_interpolate(position, previous, self._points[previous],
                                                     following, self._points[following]))

    def __call__(self, position: Number) -> Decimal:
        return self.value_at(position)

    def maximum(self) -> FunctionPoint:
        """
        Sampled point holding the greatest value; the first one wins on ties.
        Raises:
            FunctionStateError: If the function has no points
        """
        if not self._abscissa:
            raise FunctionStateError(ErrorMessages.EMPTY_FUNCTION)
        best = self._abscissa[0]
        for position in self._abscissa[1:]:
            if self._points[position] > self._points[best]:
                best = position
        return FunctionPoint(best, self._points[best])

    def mean_interval_size(self) -> Decimal:
        """Span of the function divided by its number of points."""
        with localcontext(DECIMAL_CONTEXT):
            span = abs(self.end() - self.start())
            return format_decimal(span / len(self._abscissa))

    # --- Integration ---
    def integrate(self, lower: Optional[Number] = None, upper: Optional[Number] = None) -> Decimal:
        """
        Integrate the function between two bounds, by default over its whole range.

        Every segment between consecutive abscissas, including the partial segments at both
        bounds, contributes the area of its trapezoid.
        Raises:
            FunctionRangeError: If a bound lies outside [start, end] or the bounds exclude the whole range
            FunctionArgumentError: If the lower bound is higher than the upper bound
        """
        first, last = self.start(), self.end()
        lower = first if lower is None else format_decimal(to_decimal(lower))
        upper = last if upper is None else format_decimal(to_decimal(upper))
        if lower >= last or upper <= first or lower < first or upper > last:
            raise FunctionRangeError(ErrorMessages.BOUNDS_OUT_OF_RANGE.format(start=first, end=last,
                                                                              lower=lower, upper=upper))
        if lower > upper:
            raise FunctionArgumentError(ErrorMessages.LOWER_ABOVE_UPPER.format(lower=lower, upper=upper))
        logger.debug("Integrating between %s and %s", lower, upper)
        integration = Decimal(0)
        previous = lower
        index = bisect_right(self._abscissa, lower)
        while index < len(self._abscissa) and self._abscissa[index] <= upper:
            integration = DECIMAL_CONTEXT.add(integration, self._integrate_segment(previous, self._abscissa[index]))
            previous = self._abscissa[index]
            index += 1
        if previous != upper:
            integration = DECIMAL_CONTEXT.add(integration, self._integrate_segment(previous, upper))
        return format_decimal(integration)

    def _integrate_segment(self, lower: Decimal, upper: Decimal) -> Decimal:
        if lower > upper:
            raise FunctionArgumentError(ErrorMessages.LOWER_ABOVE_UPPER.format(lower=lower, upper=upper))
        return trapezoid_area(lower, upper, self.value_at(lower), self.value_at(upper))

    # --- Pointwise algebra ---
    def _pointwise_value(self, position: Decimal, other: "PiecewiseFunction",
                         operation: Callable[[Decimal, Decimal], Decimal]) -> PointwiseValue:
        own_value = self._points[position]
        if not other.is_in_range(position):
            return PointwiseValue(own_value, False)
        return PointwiseValue(operation(own_value, other.value_at(position)), True)

    def _combine(self, other: "PiecewiseFunction", operation: Callable[[Decimal, Decimal], Decimal],
                 name: str) -> "PiecewiseFunction":
        """Apply the operation at every abscissa of this function; the result keeps this function's domain."""
        if not isinstance(other, PiecewiseFunction):
            raise FunctionArgumentError(f"Cannot {name} a {type(other).__name__} to a piecewise function")
        results = {position: self._pointwise_value(position, other, operation) for position in self._abscissa}
        unchanged = sum(1 for result in results.values() if not result.combined)
        if unchanged:
            logger.debug("%s: kept %d of %d values unchanged outside the operand range",
                         name, unchanged, len(results))
        return PiecewiseFunction({position: result.value for position, result in results.items()})

    def _map_values(self, operation: Callable[[Decimal], Decimal]) -> "PiecewiseFunction":
        return PiecewiseFunction({position: operation(value) for position, value in self._points.items()})

    def add(self, other: "PiecewiseFunction") -> "PiecewiseFunction":
        """Pointwise sum over this function's abscissas."""
        return self._combine(other, DECIMAL_CONTEXT.add, "add")

    def subtract(self, other: "PiecewiseFunction") -> "PiecewiseFunction":
        if not isinstance(other, PiecewiseFunction):
            raise FunctionArgumentError(f"Cannot subtract a {type(other).__name__} from a piecewise function")
        return self.add(other.negate())

    def multiply(self, other: Union["PiecewiseFunction", Number]) -> "PiecewiseFunction":
        """Pointwise product with another function, or product of every value with a scalar."""
        if isinstance(other, PiecewiseFunction):
            return self._combine(other, DECIMAL_CONTEXT.multiply, "multiply")
        multiplier = to_decimal(other)
        return self._map_values(lambda value: DECIMAL_CONTEXT.multiply(value, multiplier))

    def divide(self, other: Union["PiecewiseFunction", Number]) -> "PiecewiseFunction":
        """
        Pointwise quotient by another function, or quotient of every value by a scalar.
        Raises:
            FunctionArithmeticError: If the divisor is zero, or the divisor function has a zero value
        """
        if isinstance(other, PiecewiseFunction):
            return self.multiply(other.invert())
        divisor = to_decimal(other)
        if divisor.is_zero():
            raise FunctionArithmeticError(ErrorMessages.ZERO_DIVISOR)
        return self.multiply(DECIMAL_CONTEXT.divide(Decimal(1), divisor))

    def negate(self) -> "PiecewiseFunction":
        return self._map_values(DECIMAL_CONTEXT.minus)

    def invert(self) -> "PiecewiseFunction":
        """
        Function whose values are the inverse of this function's values.
        Raises:
            FunctionArithmeticError: If a value is exactly zero
        """
        for position, value in self._points.items():
            if value.is_zero():
                raise FunctionArithmeticError(ErrorMessages.ZERO_INVERSION.format(abscissa=position))
        return self._map_values(lambda value: DECIMAL_CONTEXT.divide(Decimal(1), value))

    def avoid_zeros(self) -> "PiecewiseFunction":
        """Function where every exact zero is replaced by the smallest magnitude, signed after its neighbours."""
        return PiecewiseFunction(avoid_zeros(self._abscissa, self._points))

    def __add__(self, other):
        if not isinstance(other, PiecewiseFunction):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, PiecewiseFunction):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, (PiecewiseFunction, Decimal, int, float)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, (Decimal, int, float)):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, (PiecewiseFunction, Decimal, int, float)):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "PiecewiseFunction":
        return self.negate()

    # --- Comparison and representation ---
    def __eq__(self, other) -> bool:
        if not isinstance(other, PiecewiseFunction):
            return NotImplemented
        if type(self) is not type(other) or len(self) != len(other):
            return False
        if self._abscissa != other._abscissa:
            return False
        return all(self._points[position] == other._points[position] for position in self._abscissa)

    def __hash__(self) -> int:
        return hash(tuple(self._points.items()))

    def __len__(self) -> int:
        return len(self._abscissa)

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self._abscissa)

    def __contains__(self, position) -> bool:
        return format_decimal(to_decimal(position)) in self._points

    def __str__(self) -> str:
        return "".join(f"{position}\t=> {self._points[position]}\n" for position in self._abscissa)

    def __repr__(self) -> str:
        if not self._abscissa:
            return "PiecewiseFunction(empty)"
        return f"PiecewiseFunction({len(self._abscissa)} points on [{self._abscissa[0]}, {self._abscissa[-1]}])"
