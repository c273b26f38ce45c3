"""Centralized defaults for session parameters and slope animation timing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_NUM_OBSERVATIONS = 100
DEFAULT_VARIANCE_X = 1.0
DEFAULT_VARIANCE_ERROR = 400.0

MIN_OBSERVATIONS = 3
MAX_VARIANCE_X = 6.0

CENTER: Tuple[float, float] = (3.0, 3.0)


@dataclass(frozen=True)
class SessionParameters:
    """User-chosen inputs for one visualization session.

    Attributes:
        num_observations: Sample size ``n``; at least ``MIN_OBSERVATIONS``.
        variance_x: Predictor variance; strictly between 0 and
            ``MAX_VARIANCE_X`` so the baseline segment stays on the axes.
        variance_error: Error-term variance; strictly positive.
    """

    num_observations: int = DEFAULT_NUM_OBSERVATIONS
    variance_x: float = DEFAULT_VARIANCE_X
    variance_error: float = DEFAULT_VARIANCE_ERROR


DEFAULT_PARAMETERS = SessionParameters()


@dataclass(frozen=True)
class AnimationConfig:
    """Presentation constants for the slope sweep.

    Attributes:
        steps_per_phase: Ticks spent in each of the three phases.
        tick_interval_ms: Timer period between ticks.
        live_half_width: Horizontal half-width of the rotating segment.
        band_half_width: Half-width of the static bound lines and band; wider
            than the live segment so the band frames it.
        center: Rotation pivot, the midpoint of the baseline segment.
        original_slope: Reference slope the sweep starts and ends at.
        interval_multiplier: Number of standard errors on each side.
        show_band: Build and show the band when an animation starts.
        round_se_for_bounds: Derive bounds from the 2-decimal SE readout
            instead of the full-precision value.
    """

    steps_per_phase: int = 60
    tick_interval_ms: float = 30.0
    live_half_width: float = 1.0
    band_half_width: float = 1.5
    center: Tuple[float, float] = CENTER
    original_slope: float = 1.0
    interval_multiplier: float = 2.0
    show_band: bool = True
    round_se_for_bounds: bool = False


DEFAULT_ANIMATION = AnimationConfig()
