import math

import numpy as np
import pytest

from slopeband.geometry import (
    baseline_segment,
    confidence_band_polygon,
    rotated_segment,
    segment_midpoint,
    segment_slope,
    to_xy_arrays,
)


def test_baseline_concrete_values():
    assert baseline_segment(1.0) == ((2.0, 2.0), (4.0, 4.0))
    assert baseline_segment(2.0) == ((1.0, 1.0), (5.0, 5.0))


@pytest.mark.parametrize("vx", [0.01, 0.5, 1.0, 2.0, 3.3, 5.99])
def test_baseline_slope_one_centred(vx):
    seg = baseline_segment(math.sqrt(vx))
    assert segment_slope(seg) == 1.0
    assert segment_midpoint(seg) == pytest.approx((3.0, 3.0))


def test_rotated_segment_endpoints():
    seg = rotated_segment((3.0, 3.0), 2.5, 1.0)
    assert seg == ((2.0, 0.5), (4.0, 5.5))
    assert segment_slope(seg) == 2.5
    assert segment_midpoint(seg) == pytest.approx((3.0, 3.0))


def test_rotated_segment_negative_slope():
    (x0, y0), (x1, y1) = rotated_segment((3.0, 3.0), -3.0, 1.5)
    assert (x0, x1) == (1.5, 4.5)
    assert y0 > y1


def test_band_polygon_order():
    poly = confidence_band_polygon((3.0, 3.0), 5.0, -3.0, 1.5)
    assert len(poly) == 5
    upper_left, upper_right, lower_right, lower_left, closing = poly
    assert closing == upper_left
    assert upper_left == (1.5, -4.5)
    assert upper_right == (4.5, 10.5)
    assert lower_right == (4.5, -1.5)
    assert lower_left == (1.5, 7.5)
    assert upper_left[0] == lower_left[0]
    assert upper_right[0] == lower_right[0]


@pytest.mark.parametrize("se", [0.0, 0.05, 0.5, 2.0, 7.0])
def test_band_side_edges_are_vertical(se):
    poly = confidence_band_polygon((3.0, 3.0), 1 + 2 * se, 1 - 2 * se, 1.5)
    upper_left, upper_right, lower_right, lower_left, _ = poly
    assert upper_right[0] == lower_right[0] == 4.5
    assert lower_left[0] == upper_left[0] == 1.5
    # both bound lines share the midpoint
    assert segment_midpoint((upper_left, upper_right)) == pytest.approx((3.0, 3.0))
    assert segment_midpoint((lower_left, lower_right)) == pytest.approx((3.0, 3.0))


def test_to_xy_arrays():
    x, y = to_xy_arrays([(1.0, 2.0), (3.0, 4.0)])
    np.testing.assert_array_equal(x, [1.0, 3.0])
    np.testing.assert_array_equal(y, [2.0, 4.0])

    x_empty, y_empty = to_xy_arrays([])
    assert x_empty.size == 0 and y_empty.size == 0
