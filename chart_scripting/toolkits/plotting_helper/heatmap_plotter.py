from .generic_plotter import GenericPlotter
import logging
import numpy as np

logger = logging.getLogger(__name__)

HEATMAP_COLORMAP = "hot"


class HeatmapPlotter(GenericPlotter):
    """Heatmap of `zdata` on the grid spanned by `xdata` and `ydata`.

    The geometry is fixed:

    - `zdata` is given as rows and drawn transposed, one row per x value,
    - `xdata` and `ydata` are the cell centres; a grid that does not match
      them is spread evenly between their first and last values,
    - the axis bounds are the first and last values of `xdata` and `ydata`,
    - the y axis is linear and reversed, so the cells at `ydata[0]` are drawn at the top,
    - the colormap is HEATMAP_COLORMAP and a colorbar labelled
      `colorbar_label` is attached to the axes.

    Args:
        zdata: Sequence of equal-length numeric rows.
        xdata: Non-empty x-axis values.
        ydata: Non-empty y-axis values.
        colorbar_label (str, optional): Label of the colorbar. Defaults to no label ("").

    Raises:
        ValueError: If `xdata` or `ydata` is empty, or `zdata` is not a 2-D grid.
    """

    def __init__(self, fig, ax, zdata, xdata, ydata, colorbar_label = "", **inputs):
        xdata = np.asarray(xdata, dtype=float)
        ydata = np.asarray(ydata, dtype=float)
        if xdata.size == 0:
            raise ValueError("Heatmap x values must not be empty")
        if ydata.size == 0:
            raise ValueError("Heatmap y values must not be empty")

        try:
            zdata = np.asarray(zdata, dtype=float)
        except ValueError as e:
            raise ValueError(f"Heatmap values must be rows of equal length: {e}") from e
        if zdata.ndim != 2:
            raise ValueError(f"Heatmap values must be a 2-D grid, got {zdata.ndim} dimension(s)")

        inputs["xlim"] = (xdata[0], xdata[-1])
        inputs["ylim"] = (ydata[-1], ydata[0])
        super().__init__(fig, ax, **inputs)
        self.zdata = zdata
        self.xdata = xdata
        self.ydata = ydata
        self.colorbar_label = colorbar_label
        self.colorbar = None

    def _draw(self):
        grid = self.zdata.T
        if grid.shape == (self.ydata.size, self.xdata.size):
            # x and y are the cell centres
            mesh = self.ax.pcolormesh(self.xdata, self.ydata, grid,
                                      cmap=HEATMAP_COLORMAP,
                                      shading="nearest")
        else:
            logger.warning("Heatmap grid of shape %s does not match %d x %d axis values, "
                           "cells are spread evenly between the first and last values",
                           grid.shape, self.ydata.size, self.xdata.size)
            mesh = self.ax.imshow(grid,
                                  cmap=HEATMAP_COLORMAP,
                                  origin="lower",
                                  aspect="auto",
                                  interpolation="nearest",
                                  extent=self._paddedExtent(grid.shape))
        self.ax.set_yscale("linear")
        self.colorbar = self.fig.colorbar(mesh, ax=self.ax, label=self.colorbar_label)
        logger.debug("Heatmap of shape %s on x=[%g, %g], y=[%g, %g]", grid.shape,
                     self.xdata[0], self.xdata[-1], self.ydata[0], self.ydata[-1])
        return mesh

    def _paddedExtent(self, shape):
        """Extent that centres the first and last cells on the first and last axis values."""
        nrows, ncols = shape
        x0, x1 = self.xdata[0], self.xdata[-1]
        y0, y1 = self.ydata[0], self.ydata[-1]
        dx = (x1 - x0) / (ncols - 1) if ncols > 1 and x1 != x0 else 1.0
        dy = (y1 - y0) / (nrows - 1) if nrows > 1 and y1 != y0 else 1.0
        return (x0 - dx / 2, x1 + dx / 2, y0 - dy / 2, y1 + dy / 2)
