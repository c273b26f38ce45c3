"""
A Python package for visualizing sampling variability of an OLS slope.

Draws a reference regression line of slope 1 and animates alternative slopes
within a two-standard-error interval, optionally shading the interval band.

Modules:
    - stats: Standard error and slope bounds from sample size and variances.
    - geometry: Baseline, rotated segments and the confidence band polygon.
    - animation: Phase-based slope sweep and its controller.
    - session: Session object wiring validation, statistics and rendering.
    - render: Render boundary with in-memory and Matplotlib implementations.
    - output: Animation traces and figure/CSV export.
"""

__version__ = "1.0.0"

from .animation import AnimationController, AnimationState, Phase, advance, step
from .config import (
    DEFAULT_ANIMATION,
    DEFAULT_PARAMETERS,
    AnimationConfig,
    SessionParameters,
)
from .geometry import baseline_segment, confidence_band_polygon, rotated_segment
from .render import MatplotlibRenderer, RecordingRenderer, RenderAdapter
from .session import RegressionSession
from .stats import DerivedStatistics, SlopeBounds, compute, slope_bounds
from .validation import InvalidParameterError, check_parameters, validate_parameters

__all__ = [
    # Config
    "AnimationConfig",
    "SessionParameters",
    "DEFAULT_ANIMATION",
    "DEFAULT_PARAMETERS",
    # Statistics
    "DerivedStatistics",
    "SlopeBounds",
    "compute",
    "slope_bounds",
    # Geometry
    "baseline_segment",
    "rotated_segment",
    "confidence_band_polygon",
    # Animation
    "Phase",
    "AnimationState",
    "AnimationController",
    "step",
    "advance",
    # Rendering and session
    "RenderAdapter",
    "RecordingRenderer",
    "MatplotlibRenderer",
    "RegressionSession",
    # Validation
    "InvalidParameterError",
    "check_parameters",
    "validate_parameters",
]
