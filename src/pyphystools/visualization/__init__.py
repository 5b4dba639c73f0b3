"""Plotting of piecewise-linear functions."""

from .plotters import FunctionVisualizer

__all__ = ["FunctionVisualizer"]
