import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib
from matplotlib.figure import Figure

from pyphystools.algorithms.piecewise_builder import PiecewiseBuilder
from pyphystools.core.exceptions import FunctionStateError
from pyphystools.core.piecewise_function import PiecewiseFunction
from pyphystools.data.constants import ErrorMessages, UnitsPrefix

logger = logging.getLogger(__name__)

PLOT_STYLE = {
    'font.size': 10,
    'font.family': 'sans-serif',
    'axes.titlesize': 12,
    'axes.labelsize': 10,
    'legend.fontsize': 9,
    'axes.grid': True,
    'grid.alpha': 0.3,
    'grid.linestyle': '--',
    'axes.axisbelow': True,
    'figure.facecolor': 'white',
    'axes.facecolor': 'white',
    'savefig.facecolor': 'white',
}


class FunctionVisualizer:
    """Plots piecewise-linear functions, with axes expressed in unit-prefixed quantities."""

    # --- Constructor ---
    def __init__(self, abscissa_unit: UnitsPrefix = UnitsPrefix.UNITY, value_unit: UnitsPrefix = UnitsPrefix.UNITY,
                 title: str = "", abscissa_label: str = "x", value_label: str = "f(x)",
                 abscissa_si_unit: str = "", value_si_unit: str = "") -> None:
        self.abscissa_unit = abscissa_unit
        self.value_unit = value_unit
        self.title = title
        self.abscissa_label = abscissa_label
        self.value_label = value_label
        self.abscissa_si_unit = abscissa_si_unit
        self.value_si_unit = value_si_unit
        self.fig: Optional[Figure] = None
        self.ax = None
        self.plotted_functions = 0
        logger.debug("FunctionVisualizer initialized (abscissa unit: %s, value unit: %s)",
                     abscissa_unit.name, value_unit.name)

    def initialize_plot(self, figsize=(8, 5)) -> None:
        """Start a new figure, dropping any previous one."""
        with matplotlib.rc_context(PLOT_STYLE):
            self.fig = Figure(figsize=figsize)
            self.ax = self.fig.add_subplot(1, 1, 1)
        self.ax.set_xlabel(f"{self.abscissa_label} [{self.abscissa_unit.prefix}{self.abscissa_si_unit}]")
        self.ax.set_ylabel(f"{self.value_label} [{self.value_unit.prefix}{self.value_si_unit}]")
        if self.title:
            self.ax.set_title(self.title, fontweight='bold')
        self.plotted_functions = 0
        logger.debug("Initialized figure for '%s'", self.title)

    def plot_function(self, function: PiecewiseFunction, label: Optional[str] = None,
                      show_samples: bool = True) -> None:
        """
        Draw a function as its samples joined by straight segments.
        Args:
            function: Function to draw
            label: Legend entry of the function
            show_samples: Whether to mark the samples
        Raises:
            FunctionStateError: If the function has no points
        """
        if len(function) == 0:
            raise FunctionStateError(ErrorMessages.EMPTY_FUNCTION)
        if self.fig is None:
            self.initialize_plot()
        x_data, y_data = PiecewiseBuilder.to_arrays(function, self.abscissa_unit.multiplier,
                                                    self.value_unit.multiplier)
        with matplotlib.rc_context(PLOT_STYLE):
            self.ax.plot(x_data, y_data, linestyle='-', linewidth=1.5, marker='o' if show_samples else None,
                         markersize=3, label=label)
            if label:
                self.ax.legend(loc='best', framealpha=0.8)
        self.plotted_functions += 1
        logger.debug("Plotted function '%s' with %d points", label, len(function))

    def save_plot(self, file_path: Union[str, Path], dpi: int = 300) -> Path:
        """Save the current figure, creating the parent directory if needed."""
        if self.fig is None or self.plotted_functions == 0:
            raise FunctionStateError("No function has been plotted yet")
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with matplotlib.rc_context(PLOT_STYLE):
            self.fig.savefig(str(file_path), dpi=dpi, bbox_inches='tight')
        logger.info("Saved plot of %d functions to %s", self.plotted_functions, file_path)
        return file_path
