import logging
import numpy as np

logger = logging.getLogger(__name__)


class DoubleRange:
    """`count` evenly spaced values from `start` to `stop`, both included.

    A range of detector bins, for example, is given by its bin endpoints;
    `getMidpoints` returns the bin centres to plot against.
    """

    def __init__(self, start: float, stop: float, count: int):
        if int(count) != count or count < 1:
            raise ValueError(f"DoubleRange count must be a positive integer, got {count}")
        self.start = float(start)
        self.stop = float(stop)
        self.count = int(count)

    def toArray(self):
        return np.linspace(self.start, self.stop, self.count)

    def getMidpoints(self):
        return getMidpoints(self.toArray())

    @property
    def delta(self):
        # spacing between neighbouring values, 0 for a single-value range
        return 0.0 if self.count == 1 else (self.stop - self.start) / (self.count - 1)

    def __len__(self):
        return self.count

    def __iter__(self):
        return iter(self.toArray())

    def __eq__(self, other):
        if not isinstance(other, DoubleRange):
            return NotImplemented
        return (self.start, self.stop, self.count) == (other.start, other.stop, other.count)

    def __repr__(self):
        return f"DoubleRange(start={self.start}, stop={self.stop}, count={self.count})"


def getMidpoints(endpoints):
    """Returns the values halfway between consecutive endpoints.

    Args:
        endpoints: A `DoubleRange` or a monotonic sequence of N + 1 boundary values.

    Returns:
        np.ndarray: The N midpoints.

    Raises:
        ValueError: If fewer than two endpoints are given.
    """
    if isinstance(endpoints, DoubleRange):
        endpoints = endpoints.toArray()
    endpoints = np.asarray(endpoints, dtype=float)

    if endpoints.ndim != 1:
        raise ValueError(f"Endpoints must be a 1-D sequence, got {endpoints.ndim} dimension(s)")
    if endpoints.size < 2:
        raise ValueError(f"At least two endpoints are needed for midpoints, got {endpoints.size}")

    steps = np.diff(endpoints)
    if not (np.all(steps >= 0) or np.all(steps <= 0)):
        logger.warning("Endpoints are not monotonic, midpoints will not be ordered")

    return (endpoints[:-1] + endpoints[1:]) / 2
