from .generic_plotter import GenericPlotter, checkSeries


class PlotPlotter(GenericPlotter):

    def __init__(self, fig, ax, xdata, ydata, **inputs):
        super().__init__(fig, ax, **inputs)
        self.xdata, self.ydata = checkSeries(xdata, ydata)

    def _draw(self):
        # connected line, no markers unless the style asks for them
        if self.style is None:
            return self.ax.plot(self.xdata, self.ydata, linestyle="-")
        else:
            return self.ax.plot(self.xdata, self.ydata, **{"linestyle": "-", **self.style})
