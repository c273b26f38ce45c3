"""
Interactive Matplotlib window for the slope visualization.

Three text boxes feed the session, "Rotate" starts a sweep and "Clear" resets
to the defaults. A canvas timer drives the sweep at the configured tick
period; it runs only while a sweep is in progress.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, TextBox

from .config import DEFAULT_ANIMATION, DEFAULT_PARAMETERS, AnimationConfig, SessionParameters
from .plotting.style import FONT_SIZES, STYLE, set_global_style, setup_regression_axes
from .render import MatplotlibRenderer
from .session import RegressionSession
from .validation import (
    FIELD_LABELS,
    FIELD_OBSERVATIONS,
    FIELD_VARIANCE_ERROR,
    FIELD_VARIANCE_X,
)

logger = logging.getLogger(__name__)

_FIELDS = (FIELD_OBSERVATIONS, FIELD_VARIANCE_X, FIELD_VARIANCE_ERROR)


def _field_text(params: SessionParameters) -> Dict[str, str]:
    return {
        FIELD_OBSERVATIONS: str(params.num_observations),
        FIELD_VARIANCE_X: f"{params.variance_x:g}",
        FIELD_VARIANCE_ERROR: f"{params.variance_error:g}",
    }


class SlopeBandApp:
    """Wire widgets, a renderer and a timer around one ``RegressionSession``."""

    def __init__(
        self,
        config: AnimationConfig = DEFAULT_ANIMATION,
        params: SessionParameters = DEFAULT_PARAMETERS,
    ):
        set_global_style()
        self.fig = plt.figure(figsize=STYLE.FIGSIZE_APP)
        self.ax = self.fig.add_axes([0.08, 0.30, 0.55, 0.65])
        setup_regression_axes(self.ax)

        self.renderer = MatplotlibRenderer(self.ax)
        self.session = RegressionSession(
            renderer=self.renderer, config=config, params=params
        )

        self.boxes: Dict[str, TextBox] = {}
        self.messages = {}
        initial = _field_text(params)
        for i, field in enumerate(_FIELDS):
            box_ax = self.fig.add_axes([0.80, 0.85 - i * 0.14, 0.15, 0.05])
            box = TextBox(box_ax, f"{FIELD_LABELS[field]} ", initial=initial[field])
            box.on_submit(self._on_input)
            self.boxes[field] = box
            self.messages[field] = self.fig.text(
                0.66,
                0.82 - i * 0.14,
                "",
                color="#d9534f",
                fontsize=FONT_SIZES["annotation"] * 0.8,
            )

        self.rotate_button = Button(
            self.fig.add_axes([0.68, 0.35, 0.13, 0.07]), "Rotate"
        )
        self.rotate_button.on_clicked(self._on_rotate)
        self.clear_button = Button(self.fig.add_axes([0.83, 0.35, 0.13, 0.07]), "Clear")
        self.clear_button.on_clicked(self._on_clear)

        self.timer = self.fig.canvas.new_timer(
            interval=max(1, round(config.tick_interval_ms))
        )
        self.timer.add_callback(self._on_timer)
        self._timer_running = False

    def _on_input(self, _text: Optional[str] = None) -> None:
        values = {field: box.text for field, box in self.boxes.items()}
        self.session.update_parameters(
            values[FIELD_OBSERVATIONS],
            values[FIELD_VARIANCE_X],
            values[FIELD_VARIANCE_ERROR],
        )
        self._show_messages()

    def _show_messages(self) -> None:
        for field, text in self.messages.items():
            text.set_text(self.session.validation_errors.get(field, ""))
        self.fig.canvas.draw_idle()

    def _on_rotate(self, _event=None) -> None:
        if self.session.start_animation():
            self.rotate_button.set_active(False)
            self._timer_running = True
            self.timer.start()

    def _on_timer(self) -> None:
        self.session.tick()
        if not self.session.is_animating:
            self._stop_timer()

    def _stop_timer(self) -> None:
        if self._timer_running:
            self.timer.stop()
            self._timer_running = False
        self.rotate_button.set_active(True)

    def _on_clear(self, _event=None) -> None:
        self._stop_timer()
        self.session.reset()
        for field, text in _field_text(self.session.params).items():
            box = self.boxes[field]
            # set_val fires on_submit; the session is already reset
            box.eventson = False
            box.set_val(text)
            box.eventson = True
        self._show_messages()

    def show(self) -> None:
        logger.info("Opening interactive window")
        plt.show()
