"""Centralized plotting style, colors, axis setup, and save helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import FormatStrFormatter, MaxNLocator

from ..schema import READOUTS, SERIES

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    ANNOTATION_FONTSIZE: float = 11.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    ALPHA_BAND: float = 0.18
    GRID_ALPHA: float = 0.60
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 6.0)
    FIGSIZE_APP: tuple[float, float] = (9.0, 7.0)
    AXIS_LIMITS: tuple[float, float] = (0.0, 6.0)


STYLE = StyleConfig()

FONT_SIZES = {
    "base": STYLE.BASE_FONTSIZE,
    "title": STYLE.TITLE_FONTSIZE,
    "axis_label": STYLE.LABEL_FONTSIZE,
    "tick": STYLE.TICK_FONTSIZE,
    "annotation": STYLE.ANNOTATION_FONTSIZE,
}

LINE_WIDTHS = {
    "regression": STYLE.LINEWIDTH,
    "bound": STYLE.LINEWIDTH_THIN,
}

ALPHAS = {
    "ci_band": STYLE.ALPHA_BAND,
}

SERIES_COLORS = {
    SERIES.regression: "#0056b3",
    SERIES.upper_bound: "#d9534f",
    SERIES.lower_bound: "#d9534f",
    SERIES.ci_band: "#f0ad4e",
}

READOUT_LABELS = {
    READOUTS.slope: "Current slope: ",
    READOUTS.se: "SE: ",
}

INFO_ROW_STEP = 0.06


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib style, scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.color": "#e0e0e0",
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linewidth": 0.7,
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def setup_regression_axes(ax: Axes, *, limits: tuple[float, float] | None = None) -> None:
    """Apply fixed square limits, labels, ticks and grid to the chart axes."""
    lo, hi = limits if limits is not None else STYLE.AXIS_LIMITS
    ax.set_xlim(lo, hi)
    ax.set_ylim(lo, hi)
    ax.set_xlabel("X", fontsize=FONT_SIZES["axis_label"], labelpad=6)
    ax.set_ylabel("Y", fontsize=FONT_SIZES["axis_label"], labelpad=6)
    ax.tick_params(axis="both", which="major", labelsize=FONT_SIZES["tick"], width=1.0)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=6, min_n_ticks=4))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=6, min_n_ticks=4))
    ax.xaxis.set_major_formatter(FormatStrFormatter("%.0f"))
    ax.yaxis.set_major_formatter(FormatStrFormatter("%.0f"))
    ax.grid(True, axis="both")
    ax.set_aspect("equal", adjustable="box")


def add_info_box(
    ax: Axes,
    text: str,
    loc: str = "upper left",
    fontsize: float = FONT_SIZES["annotation"],
    *,
    row: int = 0,
) -> None:
    """Add a consistently styled annotation anchored to one corner.

    ``row`` stacks several annotations downwards (or upwards for the lower
    corners) from the same anchor.
    """
    anchor_map = {
        "upper left": (0.02, 0.97, "left", "top", -1),
        "upper right": (0.98, 0.97, "right", "top", -1),
        "lower left": (0.02, 0.03, "left", "bottom", 1),
        "lower right": (0.98, 0.03, "right", "bottom", 1),
    }
    x, y, ha, va, direction = anchor_map.get(loc, anchor_map["upper left"])
    ax.text(
        x,
        y + direction * row * INFO_ROW_STEP,
        text,
        transform=ax.transAxes,
        ha=ha,
        va=va,
        fontsize=fontsize,
        color="0.25",
    )


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
    *,
    bbox_inches: str = "tight",
    pad_inches: float = 0.12,
) -> Path:
    """Save a figure to multiple formats using one extensionless base path."""
    base = Path(savepath_base)
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        target = base.with_suffix(f".{ext}")
        fig.savefig(
            str(target),
            dpi=dpi if ext == "png" else None,
            bbox_inches=bbox_inches,
            pad_inches=pad_inches,
        )
    return base.with_suffix(".png")


def save_figure_bundle(fig: Figure, png_path: str) -> str:
    """Save synchronized PNG, PDF, and SVG files for a figure."""
    base = Path(os.path.splitext(png_path)[0])
    save_figure(fig, base)
    return str(base.with_suffix(".png"))

