import sys
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_EVEN
from typing import Final

# IEEE 754 decimal128 profile: 34 significant digits
DECIMAL_CONTEXT: Final[Context] = Context(prec=34, rounding=ROUND_HALF_EVEN, Emin=-6143, Emax=6144)


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants shared by the function core and the loaders."""
    # Decimal arithmetic
    DECIMAL_PRECISION: Final[int] = 34
    # Smallest positive subnormal double, used in place of exact zeros
    ZERO_REPLACEMENT_MAGNITUDE: Final[Decimal] = Decimal(
        sys.float_info.min * sys.float_info.epsilon).normalize(DECIMAL_CONTEXT)
    # Accepted abscissa literal in data files
    NUMBER_REGEX: Final[str] = r'-?\d+(\.\d+)?([eE][+-]?\d+)?'
    # Default layout of a two-column data file
    DEFAULT_SEPARATOR: Final[str] = '\t'
    DEFAULT_COLUMN_COUNT: Final[int] = 2
    DEFAULT_COLUMNS: Final[tuple] = (0, 1)
    DEFAULT_EXTENSION: Final[str] = 'txt'
    # Constant time functions are defined on [0, 1]
    CONSTANT_FUNCTION_ABSCISSA: Final[tuple] = (Decimal(0), Decimal(1))


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    OUT_OF_RANGE: Final[str] = "No function value for position {position}: function defined on [{start}, {end}]"
    BOUNDS_OUT_OF_RANGE: Final[str] = ("Bounds outside the function range: function definition ({start}, {end}), "
                                       "bounds given: ({lower}, {upper})")
    LOWER_ABOVE_UPPER: Final[str] = "Lower bound higher than upper bound: ({lower}, {upper})"
    EMPTY_FUNCTION: Final[str] = "Function was not initialized."
    ZERO_INVERSION: Final[str] = "Cannot invert the zero value at abscissa {abscissa}; call avoid_zeros() first"
    ZERO_DIVISOR: Final[str] = "Cannot divide a function by zero"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    CONFIG_EXTENSIONS: Final[tuple] = ('.yaml', '.yml')
    DEFAULT_RESOURCE_DIRECTORY: Final[str] = 'ressources'
