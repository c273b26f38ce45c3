"""
Statistical utilities for the slope visualization.

This subpackage provides the closed-form standard error of an OLS slope and
the two-sided interval the animation sweeps. All functions operate on
primitive types; no geometry or rendering logic is included.

Modules:
    standard_error:
        ``v`` and ``se`` from sample size, predictor variance and error
        variance, plus interval bounds and readout formatting.

Design Principle:
    This subpackage has no dependencies on geometry, animation or plotting
    modules. It provides pure numerical utilities that can be independently
    tested.
"""

from .standard_error import (
    DerivedStatistics,
    SlopeBounds,
    compute,
    displayed_se,
    format_readout,
    slope_bounds,
)

__all__ = [
    "DerivedStatistics",
    "SlopeBounds",
    "compute",
    "displayed_se",
    "format_readout",
    "slope_bounds",
]
