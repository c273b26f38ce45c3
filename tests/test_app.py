import matplotlib.pyplot as plt
import pytest

from slopeband.app import SlopeBandApp
from slopeband.config import AnimationConfig, DEFAULT_PARAMETERS
from slopeband.validation import FIELD_OBSERVATIONS, FIELD_VARIANCE_X


@pytest.fixture
def app():
    instance = SlopeBandApp(config=AnimationConfig(steps_per_phase=3))
    yield instance
    plt.close(instance.fig)


def test_rotate_runs_and_reenables_button(app):
    app._on_rotate()
    assert app.session.is_animating
    assert not app.rotate_button.get_active()

    for _ in range(9):
        app._on_timer()
    assert not app.session.is_animating
    assert app.rotate_button.get_active()


def test_invalid_text_shows_message(app):
    app.boxes[FIELD_VARIANCE_X].set_val("7")
    assert app.messages[FIELD_VARIANCE_X].get_text() == (
        "Must be greater than 0 and less than 6"
    )
    assert app.session.params == DEFAULT_PARAMETERS


def test_valid_text_updates_session(app):
    app.boxes[FIELD_OBSERVATIONS].set_val("4")
    assert app.session.params.num_observations == 4
    assert app.messages[FIELD_OBSERVATIONS].get_text() == ""


def test_clear_restores_defaults(app):
    app.boxes[FIELD_OBSERVATIONS].set_val("4")
    app._on_rotate()
    app._on_timer()
    app._on_clear()
    assert app.session.params == DEFAULT_PARAMETERS
    assert not app.session.is_animating
    assert app.boxes[FIELD_OBSERVATIONS].text == "100"


def test_second_rotate_during_run_is_ignored(app, monkeypatch):
    starts = []
    monkeypatch.setattr(app.timer, "start", lambda *args: starts.append(args))
    app._on_rotate()
    app._on_timer()
    before = app.session.animation_state

    app._on_rotate()
    assert len(starts) == 1
    assert app.session.animation_state == before
    assert not app.rotate_button.get_active()


def test_sub_millisecond_interval_keeps_timer_positive():
    instance = SlopeBandApp(config=AnimationConfig(tick_interval_ms=0.5))
    try:
        assert instance.timer.interval == 1
    finally:
        plt.close(instance.fig)
