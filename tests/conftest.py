"""Shared test fixtures."""

from typing import Iterator, List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures() -> Iterator[None]:
    """Close every figure a test leaves open."""
    yield
    plt.close("all")


@pytest.fixture
def series() -> tuple:
    """Return an equal-length x/y series."""
    return [1.0, 2.0, 3.0], [4.0, 5.0, 6.0]


@pytest.fixture
def grid() -> List[List[float]]:
    """Return a 2 x 3 grid of heatmap values."""
    return [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
