import logging
import os
import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import QuadMesh
from matplotlib.image import AxesImage
from matplotlib.patches import Patch
from matplotlib.transforms import Affine2D
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# Get the absolute path to the style file
current_dir = os.path.dirname(os.path.abspath(__file__))
style_path = os.path.join(current_dir, "styles", "default.mplstyle")
styles = [style_path]

# Upper-left corner of the legend, in points from the lower-left corner of the figure
LEGEND_ANCHOR = (0, 150)

# Panel geometry in cm: (width, height, left margin, bottom margin)
PANEL_CM = (12.0, 8.0, 1.6, 1.2)


def getStyles():
    return styles


def getStylishFigureAxes(nrows, ncols, axes_list = False, panel_cm = PANEL_CM, **style):
    """Creates a figure with `nrows` x `ncols` axes under the package style sheet.

    Every panel is `panel_cm[0]` x `panel_cm[1]` cm, with the left and bottom
    margins from `panel_cm` reserved for the axis labels.
    """
    width, height, left, bottom = panel_cm
    with plt.style.context(styles):
        fig, axes = plt.subplots(nrows, ncols, **style)

    fig.set_size_inches((width / 2.54 * ncols, height / 2.54 * nrows))
    plt.subplots_adjust(
        left=left/width,
        right=(width-0.1)/width,
        bottom=bottom/height,
        top=(height-0.1)/height,
        wspace=0.5,
        hspace=1
    )

    if isinstance(axes, np.ndarray):
        return fig, axes.ravel()
    else:
        return fig, np.array([axes]) if axes_list else axes


def getTraces(ax: Axes):
    """Data artists of `ax`: lines, collections (scatter markers) and images (heatmaps)."""
    return [*ax.lines, *ax.collections, *ax.images]


def _legendHandle(artist):
    # heatmaps have no legend handler, a patch in the mid colour stands in for them
    if isinstance(artist, (AxesImage, QuadMesh)):
        return Patch(facecolor=artist.cmap(0.5), label=artist.get_label())
    return artist


def placeLegend(ax: Axes, handles = None):
    """Draws the legend of `ax` with its upper-left corner on LEGEND_ANCHOR."""
    if handles is None:
        handles = [_legendHandle(a) for a in getTraces(ax)
                   if a.get_label() and not a.get_label().startswith("_")]
    anchor_transform = Affine2D().scale(1 / 72) + ax.figure.dpi_scale_trans
    return ax.legend(handles=handles,
                     loc="upper left",
                     bbox_to_anchor=LEGEND_ANCHOR,
                     bbox_transform=anchor_transform)


def applyTraceInfo(ax: Axes, name: str):
    """Names every trace of `ax` and shows the legend only for a non-blank name.

    An existing legend is removed when `name` is blank, so the last call wins.
    """
    name = "" if name is None else name
    for artist in getTraces(ax):
        artist.set_label(name)

    if name.strip():
        return placeLegend(ax, [_legendHandle(a) for a in getTraces(ax)])

    legend = ax.get_legend()
    if legend is not None:
        legend.remove()
    return None


class GenericPlotter:

    def __init__(self,
                 fig: matplotlib.figure.Figure,
                 ax: Axes,
                 xlim: Optional[Tuple[float, float]] = None,
                 ylim: Optional[Tuple[float, float]] = None,
                 grid = False,
                 style = None,
                 xticks = None,
                 yticks = None,
                 xlabel = None,
                 ylabel = None,
                 title = None,
                 legend = None,
                 xlabel_font = None,
                 ylabel_font = None,
                 title_font = None):
        self.fig = fig
        self.ax = ax
        self.xlim = xlim
        self.ylim = ylim
        self.grid = grid
        self.style = style
        self.xticks = xticks
        self.yticks = yticks
        self.xlabel = xlabel
        self.ylabel = ylabel
        self.title = title
        self.legend = legend
        self.xlabel_font = xlabel_font
        self.ylabel_font = ylabel_font

        self.title_font = {} if title_font is None else title_font
        self.title_font["size"] = self.title_font.get("size", 7)

    def draw(self):
        with plt.style.context(styles):
            result = self._draw()
            if self.legend is not None:
                applyTraceInfo(self.ax, self.legend)

        logger.debug("%s drew %d trace(s)", type(self).__name__, len(getTraces(self.ax)))

        if self.grid:
            self.ax.grid()

        if self.xlabel is not None:
            if self.xlabel_font is None:
                self.ax.set_xlabel(self.xlabel)
            else:
                self.ax.set_xlabel(self.xlabel, font=self.xlabel_font)
        if self.ylabel is not None:
            if self.ylabel_font is None:
                self.ax.set_ylabel(self.ylabel)
            else:
                self.ax.set_ylabel(self.ylabel, font=self.ylabel_font)

        if self.title is not None:
            self.ax.set_title(self.title, font=self.title_font)

        self.setTicks()

        if self.xlim is not None:
            self.ax.set_xlim(self.xlim)
        if self.ylim is not None:
            self.ax.set_ylim(self.ylim)

        return result, self.fig, self.ax

    def setTicks(self):
        if self.xticks is not None:
            self.ax.set_xticks(self.xticks)
        if self.yticks is not None:
            self.ax.set_yticks(self.yticks)

    def _draw(self):
        raise NotImplementedError("Not implemented for the generic class")


def checkSeries(xdata, ydata):
    """Returns `xdata` and `ydata` as 1-D float arrays of the same length.

    Raises:
        ValueError: If the lengths differ or a value is not numeric.
    """
    xdata = np.asarray(xdata, dtype=float).ravel()
    ydata = np.asarray(ydata, dtype=float).ravel()
    if xdata.size != ydata.size:
        raise ValueError(f"x and y values must have the same length, got {xdata.size} and {ydata.size}")
    return xdata, ydata
