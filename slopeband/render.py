"""Render boundary: write-only point-series and readout sinks.

The core pushes finished point lists per named series and text readouts, then
requests a redraw. It never reads rendering state back.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Sequence

import numpy as np
from matplotlib.axes import Axes
from matplotlib.patches import Polygon

from .geometry import Point, to_xy_arrays
from .plotting.style import (
    ALPHAS,
    LINE_WIDTHS,
    SERIES_COLORS,
    READOUT_LABELS,
    add_info_box,
)
from .schema import ALL_READOUTS, ALL_SERIES, SERIES


class RenderAdapter(Protocol):
    def set_series(self, series_id: str, points: Sequence[Point]) -> None: ...

    def set_readout(self, readout_id: str, text: str) -> None: ...

    def redraw(self) -> None: ...


class RecordingRenderer:
    """In-memory renderer that keeps the latest state of every series.

    Used for headless runs and tests. ``frames`` optionally records the
    regression line at every redraw.
    """

    def __init__(self, record_frames: bool = False):
        self.series: Dict[str, List[Point]] = {}
        self.readouts: Dict[str, str] = {}
        self.redraw_count = 0
        self.record_frames = record_frames
        self.frames: List[List[Point]] = []

    def set_series(self, series_id: str, points: Sequence[Point]) -> None:
        if series_id not in ALL_SERIES:
            raise KeyError(f"Unknown series '{series_id}'. Expected one of {ALL_SERIES}")
        self.series[series_id] = [(float(x), float(y)) for x, y in points]

    def set_readout(self, readout_id: str, text: str) -> None:
        if readout_id not in ALL_READOUTS:
            raise KeyError(
                f"Unknown readout '{readout_id}'. Expected one of {ALL_READOUTS}"
            )
        self.readouts[readout_id] = str(text)

    def redraw(self) -> None:
        self.redraw_count += 1
        if self.record_frames:
            self.frames.append(list(self.series.get(SERIES.regression, [])))

    def points(self, series_id: str) -> List[Point]:
        return self.series.get(series_id, [])


class MatplotlibRenderer:
    """Draw the named series on one Matplotlib axes.

    Line series map to ``Line2D`` artists and the band to a ``Polygon`` patch
    filled between the bound lines. An empty point list hides the artist.
    """

    def __init__(self, ax: Axes, readout_ax: Optional[Axes] = None):
        self.ax = ax
        self.readout_ax = readout_ax if readout_ax is not None else ax

        (self._regression,) = ax.plot(
            [],
            [],
            color=SERIES_COLORS[SERIES.regression],
            linewidth=LINE_WIDTHS["regression"],
            zorder=3,
        )
        (self._upper,) = ax.plot(
            [],
            [],
            color=SERIES_COLORS[SERIES.upper_bound],
            linewidth=LINE_WIDTHS["bound"],
            linestyle="--",
            zorder=2,
        )
        (self._lower,) = ax.plot(
            [],
            [],
            color=SERIES_COLORS[SERIES.lower_bound],
            linewidth=LINE_WIDTHS["bound"],
            linestyle="--",
            zorder=2,
        )
        self._band = Polygon(
            np.zeros((1, 2)),
            closed=True,
            facecolor=SERIES_COLORS[SERIES.ci_band],
            edgecolor="none",
            alpha=ALPHAS["ci_band"],
            visible=False,
            zorder=1,
        )
        ax.add_patch(self._band)

        self._lines = {
            SERIES.regression: self._regression,
            SERIES.upper_bound: self._upper,
            SERIES.lower_bound: self._lower,
        }
        self._readouts = {}
        for i, readout_id in enumerate(ALL_READOUTS):
            add_info_box(
                self.readout_ax,
                READOUT_LABELS[readout_id],
                loc="upper left",
                row=i,
            )
            self._readouts[readout_id] = self.readout_ax.texts[-1]

    def set_series(self, series_id: str, points: Sequence[Point]) -> None:
        if series_id == SERIES.ci_band:
            if len(points) == 0:
                self._band.set_visible(False)
            else:
                self._band.set_xy(np.asarray(points, dtype=float))
                self._band.set_visible(True)
            return
        if series_id not in self._lines:
            raise KeyError(f"Unknown series '{series_id}'. Expected one of {ALL_SERIES}")
        x, y = to_xy_arrays(points)
        self._lines[series_id].set_data(x, y)

    def set_readout(self, readout_id: str, text: str) -> None:
        if readout_id not in self._readouts:
            raise KeyError(
                f"Unknown readout '{readout_id}'. Expected one of {ALL_READOUTS}"
            )
        self._readouts[readout_id].set_text(f"{READOUT_LABELS[readout_id]}{text}")

    def redraw(self) -> None:
        self.ax.figure.canvas.draw_idle()

    def line_points(self, series_id: str) -> List[Point]:
        if series_id == SERIES.ci_band:
            if not self._band.get_visible():
                return []
            return [tuple(p) for p in self._band.get_xy()]
        x, y = self._lines[series_id].get_data()
        return list(zip(np.asarray(x, dtype=float), np.asarray(y, dtype=float)))
