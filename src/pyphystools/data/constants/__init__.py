"""Physical, processing and unit constants for pyphystools."""

from .physical_constants import PhysicalConstants
from .processing_constants import DECIMAL_CONTEXT, ProcessingConstants, ErrorMessages, FileConstants
from .units import UnitsPrefix

__all__ = [
    "DECIMAL_CONTEXT",
    "PhysicalConstants",
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants",
    "UnitsPrefix"
]
