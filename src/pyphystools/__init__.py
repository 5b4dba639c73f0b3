"""
pyphystools - Exact-decimal piecewise-linear functions for semiconductor physics.

This library provides a piecewise-linear function sampled on decimal abscissas, with
interpolation, integration and pointwise algebra, and the material records built on it.

Key Features:
- Exact decimal arithmetic in a fixed 34-digit context
- Linear interpolation, trapezoid integration and pointwise algebra
- Zero-avoidance before inversion
- Function loading from delimited data files with unit prefixes
- Materials and metamaterials configured from YAML files
- Symbolic export with SymPy and plotting with Matplotlib

Main Components:
- Core: Piecewise functions, geometry helpers and materials
- Parsing: Data files and YAML configurations
- Algorithms: Interpolation, zero-avoidance and symbolic export
- Visualization: Function plotting
- Data: Physical constants, processing constants and unit prefixes
"""

try:
    from importlib.metadata import version, PackageNotFoundError
    __version__ = version("pyphystools")
except (ImportError, PackageNotFoundError):
    __version__ = "0.1.0+unknown"  # Fallback version

# Core definitions
from .core.piecewise_function import PiecewiseFunction, FunctionPoint
from .core.geometry import Point2D, Vector2D
from .core.materials import Material, Metamaterial

# Constants
from .data.constants import DECIMAL_CONTEXT, PhysicalConstants, UnitsPrefix

# Main API functions
from .parsing.api import create_material, create_metamaterial, load_config, load_function
from .parsing.io.data_handler import DelimitedFileLoader, FunctionFileLoader

# Algorithms
from .algorithms.piecewise_builder import PiecewiseBuilder

# Visualization
from .visualization.plotters import FunctionVisualizer

__all__ = [
    # Version
    '__version__',

    # Core classes
    'PiecewiseFunction',
    'FunctionPoint',
    'Point2D',
    'Vector2D',
    'Material',
    'Metamaterial',

    # Constants
    'DECIMAL_CONTEXT',
    'PhysicalConstants',
    'UnitsPrefix',

    # Main API
    'create_material',
    'create_metamaterial',
    'load_config',
    'load_function',
    'DelimitedFileLoader',
    'FunctionFileLoader',

    # Algorithms
    'PiecewiseBuilder',

    # Visualization
    'FunctionVisualizer'
]

# Package metadata
__author__ = "audreyazura"
__description__ = "Exact-decimal piecewise-linear functions for semiconductor physics"
