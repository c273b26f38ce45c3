"""Record animation traces and write reproducible CSV and figure artifacts.

This module is the export boundary between an in-memory session and files on
disk. It never changes session parameters.
"""

from __future__ import annotations

import os
from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd

from .animation import Phase
from .config import DEFAULT_ANIMATION, AnimationConfig, SessionParameters
from .plotting.style import (
    STYLE,
    save_figure_bundle,
    set_global_style,
    setup_regression_axes,
)
from .render import MatplotlibRenderer, RecordingRenderer
from .schema import SERIES
from .session import RegressionSession

TRACE_COLUMNS = ["tick", "phase", "step_in_phase", "slope", "x0", "y0", "x1", "y1"]


def animation_trace(
    params: SessionParameters, config: Optional[AnimationConfig] = None
) -> pd.DataFrame:
    """Run one full sweep headlessly and tabulate every tick.

    Args:
        params (SessionParameters): Validated session parameters.
        config (AnimationConfig, optional): Presentation constants. Defaults to
            the session default.

    Returns:
        pandas.DataFrame: One row per tick with columns ``tick``, ``phase``,
        ``step_in_phase``, ``slope`` and the displayed line endpoints
        ``x0, y0, x1, y1``. The final row is the terminal tick, where the
        displayed line is the restored baseline.
    """
    renderer = RecordingRenderer()
    session = RegressionSession(
        renderer=renderer, config=config or DEFAULT_ANIMATION, params=params
    )
    session.start_animation()

    rows = []
    tick = 0
    while session.is_animating:
        state = session.tick()
        tick += 1
        (x0, y0), (x1, y1) = renderer.points(SERIES.regression)
        rows.append(
            {
                "tick": tick,
                "phase": state.phase.value,
                "step_in_phase": state.step_in_phase,
                "slope": state.current_slope,
                "x0": x0,
                "y0": y0,
                "x1": x1,
                "y1": y1,
            }
        )
    return pd.DataFrame(rows, columns=TRACE_COLUMNS)


def phase_summary(trace: pd.DataFrame) -> pd.DataFrame:
    """Summarize tick counts and slope range per phase of a trace."""
    active = trace[trace["phase"] != Phase.IDLE.value]
    return (
        active.groupby("phase", sort=False)["slope"]
        .agg(ticks="count", slope_min="min", slope_max="max")
        .reset_index()
    )


def save_trace_to_csv(trace: pd.DataFrame, output_dir: str = "output") -> str:
    """Save an animation trace to ``animation_trace.csv``.

    Returns:
        str: Path to the CSV file.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "animation_trace.csv")
    trace.to_csv(path, index=False)
    print(f"Saved animation trace to {path}")
    return path


def plot_session_snapshot(
    params: SessionParameters,
    output_dir: str = "output",
    config: Optional[AnimationConfig] = None,
) -> str:
    """Render the end state of one sweep as a PNG/PDF/SVG bundle.

    Args:
        params (SessionParameters): Validated session parameters.
        output_dir (str, optional): Directory for the figure bundle.
        config (AnimationConfig, optional): Presentation constants. When its
            ``show_band`` is set, a sweep runs first so the band and bound
            lines are drawn.

    Returns:
        str: PNG output path.
    """
    set_global_style()
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    setup_regression_axes(ax)
    renderer = MatplotlibRenderer(ax)
    config = config or DEFAULT_ANIMATION
    session = RegressionSession(renderer=renderer, config=config, params=params)
    if config.show_band:
        session.start_animation()
        session.run_to_completion()

    ax.set_title(
        f"n = {params.num_observations}, Var(X) = {params.variance_x:g}, "
        f"Var(e) = {params.variance_error:g}"
    )
    os.makedirs(output_dir, exist_ok=True)
    png_path = save_figure_bundle(fig, os.path.join(output_dir, "slope_band.png"))
    plt.close(fig)
    return png_path
