"""Unit tests for ranges and midpoints."""

import logging

import numpy as np
import pytest

from chart_scripting.toolkits.ranges import DoubleRange, getMidpoints


def test_midpoints_of_sequence() -> None:
    """Midpoints are the means of neighbouring endpoints."""
    np.testing.assert_allclose(getMidpoints([0, 2, 4, 6]), [1, 3, 5])


@pytest.mark.parametrize("endpoints", [[0.0, 1.0], np.linspace(-1, 1, 11), (10, 5, 0)])
def test_midpoints_length_and_values(endpoints) -> None:
    """N + 1 endpoints give N midpoints, each between its neighbours."""
    endpoints = np.asarray(endpoints, dtype=float)
    midpoints = getMidpoints(endpoints)

    assert len(midpoints) == len(endpoints) - 1
    for i, midpoint in enumerate(midpoints):
        assert midpoint == pytest.approx((endpoints[i] + endpoints[i + 1]) / 2)


@pytest.mark.parametrize("endpoints", [[], [3.0]])
def test_midpoints_need_two_endpoints(endpoints) -> None:
    """Fewer than two endpoints is a precondition violation."""
    with pytest.raises(ValueError, match="two endpoints"):
        getMidpoints(endpoints)


def test_non_monotonic_endpoints_warn(caplog) -> None:
    """Unordered endpoints still give midpoints but log a warning."""
    with caplog.at_level(logging.WARNING, logger="chart_scripting.toolkits.ranges"):
        midpoints = getMidpoints([0, 4, 2])

    np.testing.assert_allclose(midpoints, [2, 3])
    assert "not monotonic" in caplog.text


def test_double_range_values() -> None:
    """A range holds `count` evenly spaced values including both ends."""
    rho = DoubleRange(0, 6, 4)

    np.testing.assert_allclose(rho.toArray(), [0, 2, 4, 6])
    assert len(rho) == 4
    assert rho.delta == pytest.approx(2.0)
    assert list(rho) == pytest.approx([0, 2, 4, 6])


def test_double_range_midpoints() -> None:
    """Range midpoints match midpoints of its array."""
    rho = DoubleRange(0, 6, 4)

    np.testing.assert_allclose(rho.getMidpoints(), [1, 3, 5])
    np.testing.assert_allclose(getMidpoints(rho), [1, 3, 5])


def test_single_value_range_has_no_midpoints() -> None:
    """A one-value range is valid but cannot be split into bins."""
    rho = DoubleRange(2, 2, 1)

    assert rho.delta == 0.0
    with pytest.raises(ValueError):
        rho.getMidpoints()


@pytest.mark.parametrize("count", [0, -3, 2.5])
def test_double_range_rejects_bad_count(count) -> None:
    """Count must be a positive integer."""
    with pytest.raises(ValueError, match="positive integer"):
        DoubleRange(0, 1, count)


def test_double_range_equality() -> None:
    """Ranges compare by their start, stop and count."""
    assert DoubleRange(0, 1, 5) == DoubleRange(0.0, 1.0, 5)
    assert DoubleRange(0, 1, 5) != DoubleRange(0, 1, 6)
    assert "count=5" in repr(DoubleRange(0, 1, 5))


def test_midpoints_need_flat_sequence() -> None:
    """A grid of endpoints is rejected with the reason."""
    with pytest.raises(ValueError, match="1-D"):
        getMidpoints([[0.0, 1.0], [2.0, 3.0]])
