"""Pytest configuration for repository-relative imports."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from slopeband.config import AnimationConfig, SessionParameters  # noqa: E402
from slopeband.render import RecordingRenderer  # noqa: E402
from slopeband.session import RegressionSession  # noqa: E402


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def session(renderer):
    """Session at the defaults n=100, Var(X)=1, Var(e)=400."""
    return RegressionSession(renderer=renderer)


@pytest.fixture
def small_session(renderer):
    """Session at n=4, Var(X)=4, Var(e)=16 with a short sweep."""
    return RegressionSession(
        renderer=renderer,
        config=AnimationConfig(steps_per_phase=8),
        params=SessionParameters(4, 4.0, 16.0),
    )
