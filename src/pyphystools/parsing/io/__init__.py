"""Reading of piecewise function data files."""

from .data_handler import read_function_points, FunctionFileLoader, DelimitedFileLoader

__all__ = [
    "read_function_points",
    "FunctionFileLoader",
    "DelimitedFileLoader"
]
