"""Verify the Matplotlib renderer reflects pushed series and readouts."""

import matplotlib.pyplot as plt
import pytest

from slopeband.config import AnimationConfig
from slopeband.plotting.style import setup_regression_axes
from slopeband.render import MatplotlibRenderer, RecordingRenderer
from slopeband.schema import READOUTS, SERIES
from slopeband.session import RegressionSession


@pytest.fixture
def mpl_session():
    fig, ax = plt.subplots()
    setup_regression_axes(ax)
    renderer = MatplotlibRenderer(ax)
    session = RegressionSession(
        renderer=renderer, config=AnimationConfig(steps_per_phase=4)
    )
    yield session, renderer
    plt.close(fig)


def test_baseline_drawn_and_band_hidden(mpl_session):
    _, renderer = mpl_session
    assert renderer.line_points(SERIES.regression) == [(2.0, 2.0), (4.0, 4.0)]
    assert renderer.line_points(SERIES.ci_band) == []
    assert renderer._readouts[READOUTS.se].get_text() == "SE: 2.00"
    assert renderer._readouts[READOUTS.slope].get_text() == "Current slope: 1.00"


def test_band_polygon_after_run(mpl_session):
    session, renderer = mpl_session
    session.start_animation()
    session.run_to_completion()

    band = renderer.line_points(SERIES.ci_band)
    assert [tuple(map(float, p)) for p in band] == [
        (1.5, -4.5),
        (4.5, 10.5),
        (4.5, -1.5),
        (1.5, 7.5),
        (1.5, -4.5),
    ]
    assert renderer.line_points(SERIES.regression) == [(2.0, 2.0), (4.0, 4.0)]


def test_live_frame_and_readout(mpl_session):
    session, renderer = mpl_session
    session.start_animation()
    session.tick()
    (x0, y0), (x1, y1) = renderer.line_points(SERIES.regression)
    assert (x0, x1) == (2.0, 4.0)
    assert (y0, y1) == (1.0, 5.0)
    assert renderer._readouts[READOUTS.slope].get_text() == "Current slope: 2.00"


def test_reset_hides_band(mpl_session):
    session, renderer = mpl_session
    session.start_animation()
    session.run_to_completion()
    session.reset()
    assert renderer.line_points(SERIES.ci_band) == []
    assert renderer.line_points(SERIES.upper_bound) == []


def test_unknown_series_raises(mpl_session):
    _, renderer = mpl_session
    with pytest.raises(KeyError):
        renderer.set_series("residuals", [(0.0, 0.0)])
    with pytest.raises(KeyError):
        RecordingRenderer().set_readout("r2", "0.5")
