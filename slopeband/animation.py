"""
Phase-based slope animation.

The sweep runs ``original -> upper -> lower -> original`` in three phases of
``steps_per_phase`` ticks each, then returns to idle with the baseline line
restored. The state machine itself is a value: ``step`` advances it by one
tick and ``advance`` converts elapsed time into ticks, so whatever owns the
clock drives it. ``AnimationController`` owns one state and pushes each frame
to a renderer.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .config import DEFAULT_ANIMATION, AnimationConfig
from .geometry import (
    Segment,
    confidence_band_polygon,
    rotated_segment,
)
from .render import RenderAdapter
from .schema import READOUTS, SERIES
from .stats import (
    DerivedStatistics,
    SlopeBounds,
    displayed_se,
    format_readout,
    slope_bounds,
)

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    RISING_TO_UPPER = "rising_to_upper"
    FALLING_TO_LOWER = "falling_to_lower"
    RETURNING_TO_ORIGINAL = "returning_to_original"


@dataclass(frozen=True)
class AnimationState:
    """Snapshot of the slope sweep.

    Attributes:
        phase: Current phase; ``IDLE`` when no sweep is running.
        step_in_phase: Ticks taken in the current phase, reset to 0 at every
            transition.
        current_slope: Slope of the displayed line.
        bounds: Interval captured at start; ``None`` before the first run.
        pending_ms: Elapsed time not yet converted into a whole tick.
    """

    phase: Phase = Phase.IDLE
    step_in_phase: int = 0
    current_slope: float = 1.0
    bounds: Optional[SlopeBounds] = None
    pending_ms: float = 0.0

    @property
    def is_idle(self) -> bool:
        return self.phase is Phase.IDLE


def begin(bounds: SlopeBounds) -> AnimationState:
    """Return the state entered on a start request."""
    return AnimationState(
        phase=Phase.RISING_TO_UPPER,
        step_in_phase=0,
        current_slope=bounds.original,
        bounds=bounds,
    )


def step(state: AnimationState, steps_per_phase: int) -> AnimationState:
    """Advance the sweep by exactly one tick.

    Args:
        state (AnimationState): Current state. Idle states are returned
            unchanged.
        steps_per_phase (int): Tick budget of each phase.

    Returns:
        AnimationState: The next state. Phase boundaries pin the slope to the
        exact bound so no floating-point residue carries into the next phase.
    """
    if state.is_idle or state.bounds is None:
        return state

    b = state.bounds
    n = state.step_in_phase + 1
    progress = min(1.0, n / steps_per_phase)

    if state.phase is Phase.RISING_TO_UPPER:
        slope = b.original + progress * (b.upper - b.original)
        if progress >= 1:
            return replace(
                state,
                phase=Phase.FALLING_TO_LOWER,
                step_in_phase=0,
                current_slope=b.upper,
            )
    elif state.phase is Phase.FALLING_TO_LOWER:
        slope = b.upper - progress * (b.upper - b.lower)
        if progress >= 1:
            return replace(
                state,
                phase=Phase.RETURNING_TO_ORIGINAL,
                step_in_phase=0,
                current_slope=b.lower,
            )
    else:
        slope = b.lower + progress * (b.original - b.lower)
        if progress >= 1:
            return replace(
                state,
                phase=Phase.IDLE,
                step_in_phase=0,
                current_slope=b.original,
                pending_ms=0.0,
            )

    return replace(state, step_in_phase=n, current_slope=slope)


def _due_ticks(pending_ms: float, dt_ms: float, interval_ms: float) -> Tuple[int, float]:
    total = pending_ms + max(0.0, float(dt_ms))
    ticks = int(math.floor(total / interval_ms))
    return ticks, total - ticks * interval_ms


def advance(
    state: AnimationState, dt_ms: float, config: AnimationConfig = DEFAULT_ANIMATION
) -> AnimationState:
    """Advance the sweep by the ticks due after ``dt_ms`` milliseconds.

    Leftover time below one tick period is kept in ``pending_ms``. Ticks past
    the end of the sweep are discarded.
    """
    if state.is_idle:
        return state
    ticks, remainder = _due_ticks(state.pending_ms, dt_ms, config.tick_interval_ms)
    for _ in range(ticks):
        state = step(state, config.steps_per_phase)
        if state.is_idle:
            return state
    return replace(state, pending_ms=remainder)


class AnimationController:
    """Own one sweep and push its frames to a renderer.

    The controller reads statistics and the baseline only when a sweep
    starts; later parameter changes reach it through ``set_baseline`` and only
    affect the line restored when the sweep ends.
    """

    def __init__(
        self, renderer: RenderAdapter, config: AnimationConfig = DEFAULT_ANIMATION
    ):
        self.renderer = renderer
        self.config = config
        self._state = AnimationState(current_slope=config.original_slope)
        self._baseline: Optional[Segment] = None
        self._midpoint = config.center
        self._band_visible = False

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def is_running(self) -> bool:
        return not self._state.is_idle

    @property
    def band_visible(self) -> bool:
        return self._band_visible

    def set_baseline(self, baseline: Segment) -> None:
        """Record the line to restore when the current sweep ends."""
        self._baseline = baseline

    def start(self, stats: DerivedStatistics, baseline: Segment) -> bool:
        """Start a sweep; return ``False`` without effect if one is running."""
        if self.is_running:
            logger.debug("Start request ignored: animation already in progress")
            return False

        cfg = self.config
        se = displayed_se(stats.se) if cfg.round_se_for_bounds else stats.se
        bounds = slope_bounds(
            se, original_slope=cfg.original_slope, multiplier=cfg.interval_multiplier
        )
        self._baseline = baseline
        self._state = begin(bounds)

        if cfg.show_band:
            self.show_band(bounds)

        logger.info(
            "Animation bounds: Lower=%.4f, Original=%s, Upper=%.4f",
            bounds.lower,
            bounds.original,
            bounds.upper,
        )
        return True

    def show_band(self, bounds: SlopeBounds) -> None:
        h = self.config.band_half_width
        self.renderer.set_series(
            SERIES.ci_band,
            confidence_band_polygon(self._midpoint, bounds.upper, bounds.lower, h),
        )
        self.renderer.set_series(
            SERIES.upper_bound, list(rotated_segment(self._midpoint, bounds.upper, h))
        )
        self.renderer.set_series(
            SERIES.lower_bound, list(rotated_segment(self._midpoint, bounds.lower, h))
        )
        self.renderer.redraw()
        self._band_visible = True

    def clear_band(self) -> None:
        for series_id in (SERIES.ci_band, SERIES.upper_bound, SERIES.lower_bound):
            self.renderer.set_series(series_id, [])
        self._band_visible = False

    def tick(self) -> AnimationState:
        """Run exactly one tick and render its frame."""
        if not self.is_running:
            return self._state

        previous = self._state
        self._state = step(previous, self.config.steps_per_phase)

        if self._state.is_idle:
            self._finish()
            return self._state

        if self._state.phase is not previous.phase:
            self._log_transition(previous)
        elif (
            self._state.phase is Phase.FALLING_TO_LOWER
            and self._state.step_in_phase % 10 == 0
        ):
            logger.debug(
                "Phase 2 progress: %.2f, Current slope: %.4f",
                self._state.step_in_phase / self.config.steps_per_phase,
                self._state.current_slope,
            )

        self._render_frame(self._state.current_slope)
        return self._state

    def advance(self, dt_ms: float) -> int:
        """Run every tick due after ``dt_ms`` milliseconds; return the count."""
        if not self.is_running:
            return 0
        ticks, remainder = _due_ticks(
            self._state.pending_ms, dt_ms, self.config.tick_interval_ms
        )
        ran = 0
        for _ in range(ticks):
            self.tick()
            ran += 1
            if not self.is_running:
                return ran
        self._state = replace(self._state, pending_ms=remainder)
        return ran

    def cancel(self) -> None:
        """Drop any running sweep and return to idle without rendering."""
        if self.is_running:
            logger.info("Animation cancelled in %s", self._state.phase.value)
        self._state = AnimationState(
            current_slope=self.config.original_slope, bounds=self._state.bounds
        )

    def _render_frame(self, slope: float) -> None:
        segment = rotated_segment(self._midpoint, slope, self.config.live_half_width)
        self.renderer.set_series(SERIES.regression, list(segment))
        self.renderer.set_readout(READOUTS.slope, format_readout(slope))
        self.renderer.redraw()

    def _log_transition(self, previous: AnimationState) -> None:
        done = {
            Phase.RISING_TO_UPPER: 1,
            Phase.FALLING_TO_LOWER: 2,
        }[previous.phase]
        logger.info(
            "Phase %d complete. Reached slope: %.4f",
            done,
            self._state.current_slope,
        )

    def _finish(self) -> None:
        b = self._state.bounds
        if self._baseline is not None:
            self.renderer.set_series(SERIES.regression, list(self._baseline))
        self.renderer.set_readout(READOUTS.slope, format_readout(b.original))
        self.renderer.redraw()
        logger.info("Animation complete. Returned to original slope: %.4f", b.original)
        logger.info(
            "Final animation summary: Lower=%.4f, Original=%s, Upper=%.4f",
            b.lower,
            b.original,
            b.upper,
        )
