"""
Standard-styled scatter, line and heatmap charts for analysis scripts.
"""

__version__ = "0.1.0"

# Import submodules to enable clean imports
from . import toolkits
from .toolkits import DoubleRange, getMidpoints, scatterChart, lineChart, withStandardStyling, heatmap
