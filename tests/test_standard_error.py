import math

import pytest

from slopeband.config import SessionParameters
from slopeband.stats import (
    compute,
    displayed_se,
    format_readout,
    slope_bounds,
)


def test_default_scenario():
    stats = compute(SessionParameters(100, 1.0, 400.0))
    assert stats.v == 1.0
    assert stats.se == 2.0

    bounds = slope_bounds(stats.se)
    assert bounds.upper == 5.0
    assert bounds.lower == -3.0
    assert bounds.original == 1.0


def test_small_sample_scenario():
    stats = compute(SessionParameters(4, 4.0, 16.0))
    assert stats.v == 2.0
    assert stats.se == 1.0

    bounds = slope_bounds(stats.se)
    assert bounds.upper == 3.0
    assert bounds.lower == -1.0


@pytest.mark.parametrize(
    "n, vx, ve",
    [(3, 0.5, 1.0), (25, 2.5, 10.0), (1000, 5.99, 0.01), (7, 0.001, 123.4)],
)
def test_closed_form_matches(n, vx, ve):
    stats = compute(SessionParameters(n, vx, ve))
    assert stats.v == math.sqrt(vx)
    assert stats.se == math.sqrt(ve / (n * vx))
    assert stats.v >= 0
    assert stats.se >= 0


def test_bounds_order_and_width():
    bounds = slope_bounds(0.37)
    assert bounds.upper > bounds.original > bounds.lower
    assert math.isclose(bounds.width, 4 * 0.37)


def test_zero_se_collapses_bounds():
    bounds = slope_bounds(0.0)
    assert bounds.upper == bounds.original == bounds.lower


def test_lower_bound_is_not_clamped():
    assert slope_bounds(10.0).lower == -19.0


def test_readout_formatting():
    assert format_readout(1) == "1.00"
    assert format_readout(2.0) == "2.00"
    assert format_readout(0.126) == "0.13"
    assert displayed_se(0.1249) == 0.12
