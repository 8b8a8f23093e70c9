from .generic_plotter import GenericPlotter, checkSeries
import matplotlib

# filled round markers without edges, sized in points^2
SCATTER_STYLE = {"marker": "o", "s": 9, "linewidths": 0}


class ScatterPlotter(GenericPlotter):
    """Point-marker trace of `ydata` against `xdata`.

    `style` entries override SCATTER_STYLE. Raises `ValueError` for series of
    different lengths or non-numeric values.
    """

    def __init__(self,
                 fig: matplotlib.figure.Figure,
                 ax: matplotlib.axes.Axes,
                 xdata,
                 ydata,
                 **inputs):
        super().__init__(fig, ax, **inputs)
        self.xdata, self.ydata = checkSeries(xdata, ydata)

    def _draw(self):
        style = dict(SCATTER_STYLE)
        if self.style is not None:
            style.update(self.style)
        return self.ax.scatter(self.xdata, self.ydata, **style)
