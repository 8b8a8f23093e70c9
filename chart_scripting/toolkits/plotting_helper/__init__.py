"""
Plotting helper utilities for chart_scripting.
"""

from .generic_plotter import (getStylishFigureAxes, getStyles, getTraces, placeLegend,
                              applyTraceInfo, checkSeries, LEGEND_ANCHOR)
from .plot_plotter import PlotPlotter
from .scatter_plotter import ScatterPlotter, SCATTER_STYLE
from .heatmap_plotter import HeatmapPlotter, HEATMAP_COLORMAP

__all__ = [
    "getStylishFigureAxes",
    "getStyles",
    "getTraces",
    "placeLegend",
    "applyTraceInfo",
    "checkSeries",
    "LEGEND_ANCHOR",
    "PlotPlotter",
    "ScatterPlotter",
    "SCATTER_STYLE",
    "HeatmapPlotter",
    "HEATMAP_COLORMAP"
]
