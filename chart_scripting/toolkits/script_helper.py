"""
Standard charts for analysis scripts.

Each builder returns a new matplotlib figure that the caller owns; render it
with `fig.savefig(...)` or `plt.show()`.
"""

import logging
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .plotting_helper.generic_plotter import getStyles, getStylishFigureAxes, applyTraceInfo
from .plotting_helper.heatmap_plotter import HeatmapPlotter
from .plotting_helper.plot_plotter import PlotPlotter
from .plotting_helper.scatter_plotter import ScatterPlotter

logger = logging.getLogger(__name__)


def _drawOnNewFigure(plotter_class, *data, **inputs):
    """Draws `plotter_class` on a new standard figure, closing the figure if drawing fails."""
    fig, ax = getStylishFigureAxes(1, 1)
    try:
        plotter_class(fig, ax, *data, **inputs).draw()
    except (ValueError, TypeError):
        plt.close(fig)
        raise
    return fig


def scatterChart(xValues, yValues, xLabel: str = "", yLabel: str = "", title: str = "") -> Figure:
    """Creates a standard scatter chart of `yValues` against `xValues`.

    Args:
        xValues: The values for the x axis.
        yValues: The values for the y axis, same length as `xValues`.
        xLabel (str, optional): The label for the x axis.
        yLabel (str, optional): The label for the y axis.
        title (str, optional): The name of the trace, shown in the legend if not blank.

    Returns:
        Figure: The styled scatter chart.

    Raises:
        ValueError: If the series differ in length or hold non-numeric values.
    """
    fig = _drawOnNewFigure(ScatterPlotter, xValues, yValues)
    logger.debug("Scatter chart with %d points", len(xValues))
    return withStandardStyling(fig, xLabel, yLabel, title)


def lineChart(xValues, yValues, xLabel: str = "", yLabel: str = "", title: str = "") -> Figure:
    """Creates a standard line chart of `yValues` against `xValues`.

    Same arguments as `scatterChart`.
    """
    fig = _drawOnNewFigure(PlotPlotter, xValues, yValues)
    logger.debug("Line chart with %d points", len(xValues))
    return withStandardStyling(fig, xLabel, yLabel, title)


def withStandardStyling(chart, xLabel: str = "", yLabel: str = "", title: str = ""):
    """Applies the standard styling to a chart and returns it.

    The traces are named `title` and the legend is shown, anchored at
    LEGEND_ANCHOR, only if `title` is not blank. The axis titles are set to
    `xLabel` and `yLabel`. Calling it again replaces the previous styling.

    Args:
        chart (Figure | Axes): The chart to style. For a figure, its first axes is styled.
    """
    ax = chart if isinstance(chart, Axes) else chart.axes[0]
    with plt.style.context(getStyles()):
        applyTraceInfo(ax, title)
        ax.set_xlabel(xLabel)
        ax.set_ylabel(yLabel)
    return chart


def heatmap(values, x, y, xLabel: str = "", yLabel: str = "", title: str = "") -> Figure:
    """Creates a heatmap of `values` with the `hot` colormap.

    The rows of `values` are drawn transposed, the y axis is reversed, the
    axis bounds are `(x[0], x[-1])` and `(y[0], y[-1])`, and a colorbar
    labelled `title` is added.

    Args:
        values: Sequence of equal-length numeric rows.
        x: The x-axis values, must not be empty.
        y: The y-axis values, must not be empty.
        xLabel (str, optional): The label for the x axis.
        yLabel (str, optional): The label for the y axis.
        title (str, optional): The name of the trace and colorbar label.

    Raises:
        ValueError: If `x` or `y` is empty, or `values` is not a 2-D grid.
    """
    fig = _drawOnNewFigure(HeatmapPlotter, values, x, y,
                           xlabel=xLabel,
                           ylabel=yLabel,
                           legend=title,
                           colorbar_label=title)
    logger.debug("Heatmap chart %r with %d x %d values", title, np.size(x), np.size(y))
    return fig
