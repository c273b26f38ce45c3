"""
One visualization session: parameters, derived statistics, display state.

The session owns the chart-facing state for one viewport. It validates
input, recomputes statistics and the baseline, and forwards trigger
actions to its ``AnimationController``.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .animation import AnimationController, AnimationState
from .config import DEFAULT_ANIMATION, DEFAULT_PARAMETERS, AnimationConfig, SessionParameters
from .geometry import Segment, baseline_segment
from .render import RecordingRenderer, RenderAdapter
from .schema import READOUTS, SERIES
from .stats import DerivedStatistics, compute, format_readout
from .validation import InvalidParameterError, RawValue, validate_parameters

logger = logging.getLogger(__name__)


class RegressionSession:
    """Single-viewport session driving a renderer.

    Args:
        renderer: Render boundary; defaults to an in-memory
            ``RecordingRenderer``.
        config: Animation presentation constants.
        params: Initial parameters; defaults to ``n=100, vx=1, ve=400``.
    """

    def __init__(
        self,
        renderer: Optional[RenderAdapter] = None,
        config: AnimationConfig = DEFAULT_ANIMATION,
        params: SessionParameters = DEFAULT_PARAMETERS,
    ):
        self.renderer = renderer if renderer is not None else RecordingRenderer()
        self.config = config
        self.controller = AnimationController(self.renderer, config)
        self.validation_errors: Dict[str, str] = {}
        self._params = params
        self._stats = compute(params)
        self._baseline = baseline_segment(self._stats.v)
        self._refresh()

    @property
    def params(self) -> SessionParameters:
        return self._params

    @property
    def stats(self) -> DerivedStatistics:
        return self._stats

    @property
    def baseline(self) -> Segment:
        return self._baseline

    @property
    def animation_state(self) -> AnimationState:
        return self.controller.state

    @property
    def is_animating(self) -> bool:
        return self.controller.is_running

    @property
    def se_readout(self) -> str:
        return format_readout(self._stats.se)

    def set_parameters(self, params: SessionParameters) -> None:
        """Apply already-validated parameters and recompute the display."""
        self._params = params
        self._stats = compute(params)
        self._baseline = baseline_segment(self._stats.v)
        self.validation_errors = {}
        self.controller.set_baseline(self._baseline)
        self._refresh()

    def update_parameters(
        self,
        num_observations: RawValue,
        variance_x: RawValue,
        variance_error: RawValue,
    ) -> bool:
        """Validate raw field values and recompute when all are valid.

        Returns:
            bool: ``True`` if the parameters were applied. On ``False`` the
            messages are in ``validation_errors`` and the previous parameters
            and display are kept.
        """
        try:
            params = validate_parameters(num_observations, variance_x, variance_error)
        except InvalidParameterError as exc:
            self.validation_errors = exc.errors
            logger.warning("Input rejected: %s", exc)
            return False
        self.set_parameters(params)
        return True

    def start_animation(self) -> bool:
        """Start a slope sweep from the displayed statistics.

        Returns:
            bool: ``False`` if a sweep is already running (no effect).
        """
        return self.controller.start(self._stats, self._baseline)

    def tick(self) -> AnimationState:
        return self.controller.tick()

    def advance(self, dt_ms: float) -> int:
        return self.controller.advance(dt_ms)

    def run_to_completion(self) -> int:
        """Tick until the running sweep ends; return the number of ticks."""
        ticks = 0
        while self.controller.is_running:
            self.controller.tick()
            ticks += 1
        return ticks

    def reset(self) -> None:
        """Restore default parameters, stop any sweep and clear the band."""
        self.controller.cancel()
        self.controller.clear_band()
        self.set_parameters(DEFAULT_PARAMETERS)
        logger.info("Session reset to defaults")

    def _refresh(self) -> None:
        self.renderer.set_readout(READOUTS.se, self.se_readout)
        if not self.controller.is_running:
            self.renderer.set_series(SERIES.regression, list(self._baseline))
            self.renderer.set_readout(
                READOUTS.slope, format_readout(self.config.original_slope)
            )
        self.renderer.redraw()
        logger.info(
            "Variance of X: %s, v: %s, se: %s",
            self._params.variance_x,
            self._stats.v,
            self._stats.se,
        )
        (x1, y1), (x2, y2) = self._baseline
        logger.debug("Line points: (%s, %s) to (%s, %s)", x1, y1, x2, y2)
