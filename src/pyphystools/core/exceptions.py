"""Custom exceptions for pyphystools core functionality."""
import logging

logger = logging.getLogger(__name__)


class FunctionError(Exception):
    """Base exception for all piecewise-function errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("%s raised: %s", type(self).__name__, message)


class FunctionRangeError(FunctionError, IndexError):
    """Exception raised when a position or an integration bound lies outside [start, end]."""


class FunctionArgumentError(FunctionError, ValueError):
    """Exception raised for inconsistent arguments, such as a lower bound above the upper bound."""


class FunctionArithmeticError(FunctionError, ArithmeticError):
    """Exception raised when dividing or inverting by an exact zero."""


class FunctionStateError(FunctionError, RuntimeError):
    """Exception raised when an operation needs points and the function has none."""


class DataFormatError(FunctionError, ValueError):
    """Exception raised when a data file does not have the expected extension."""


class ColumnIndexError(FunctionError, IndexError):
    """Exception raised when a requested column lies outside the declared column count."""


class MaterialError(Exception):
    """Base exception for all material-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("%s raised: %s", type(self).__name__, message)


class MaterialConfigurationError(MaterialError, ValueError):
    """Exception raised when a material or metamaterial record is missing or malformed."""


class OffsetNotDefinedError(MaterialError, KeyError):
    """Exception raised when no band offset is defined between two materials."""

    def __str__(self):
        return str(self.args[0])
