"""
Constants and unit definitions.

This package provides the physical constants, the decimal processing context
and the unit prefixes used throughout pyphystools.
"""

from .constants import (DECIMAL_CONTEXT, PhysicalConstants, ProcessingConstants, ErrorMessages,
                        FileConstants, UnitsPrefix)

__all__ = [
    "DECIMAL_CONTEXT",
    "PhysicalConstants",
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants",
    "UnitsPrefix"
]
