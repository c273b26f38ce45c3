"""
Plotting utilities for the slope visualization.

All plotting functions accept precomputed point-sets and do not perform
statistical calculations.

Modules:
    style:
        Colors per series, axis setup, annotation placement and multi-format
        figure export.

Design Principles:
    1. No statistics in plotting code. Artists receive finished point lists.

    2. Fixed square axes so rotation about (3, 3) reads as a true angle.
"""

from .style import (
    add_info_box,
    save_figure_bundle,
    set_global_style,
    setup_regression_axes,
)

__all__ = [
    "add_info_box",
    "save_figure_bundle",
    "set_global_style",
    "setup_regression_axes",
]
