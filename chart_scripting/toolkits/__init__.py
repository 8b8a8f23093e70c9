"""
Toolkit utilities for the chart_scripting package.
"""

from .plotting_helper.plot_plotter import PlotPlotter
from .plotting_helper.scatter_plotter import ScatterPlotter
from .plotting_helper.heatmap_plotter import HeatmapPlotter, HEATMAP_COLORMAP
from .plotting_helper.generic_plotter import getStylishFigureAxes, getStyles, LEGEND_ANCHOR
from .ranges import DoubleRange, getMidpoints
from .script_helper import scatterChart, lineChart, withStandardStyling, heatmap

__all__ = [
    "PlotPlotter",
    "ScatterPlotter",
    "HeatmapPlotter",
    "HEATMAP_COLORMAP",
    "getStylishFigureAxes",
    "getStyles",
    "LEGEND_ANCHOR",
    "DoubleRange",
    "getMidpoints",
    "scatterChart",
    "lineChart",
    "withStandardStyling",
    "heatmap"
]
