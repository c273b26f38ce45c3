"""
Line-segment and band geometry for the slope visualization.

All segments are expressed as endpoint pairs around a fixed midpoint, so a
change of slope is a rotation about that midpoint with a constant horizontal
half-width.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .config import CENTER

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


def baseline_segment(v: float) -> Segment:
    """Return the slope-1 reference segment centred at (3, 3).

    Args:
        v (float): Half the horizontal extent, ``sqrt(variance_x)``.

    Returns:
        tuple: ``((3 - v, 3 - v), (3 + v, 3 + v))``.
    """
    cx, _ = CENTER
    x1 = cx - v
    x2 = cx + v
    # slope 1 through (3, 3) means y == x at both ends
    return (x1, x1), (x2, x2)


def rotated_segment(midpoint: Point, slope: float, half_width: float) -> Segment:
    """Return the segment of a given slope through ``midpoint``.

    Args:
        midpoint (tuple[float, float]): Pivot ``(mx, my)``.
        slope (float): Slope of the segment.
        half_width (float): Horizontal distance from the pivot to each end.

    Returns:
        tuple: ``((mx - h, my - slope h), (mx + h, my + slope h))``.
    """
    mx, my = midpoint
    h = float(half_width)
    return (mx - h, my - slope * h), (mx + h, my + slope * h)


def confidence_band_polygon(
    midpoint: Point, upper: float, lower: float, half_width: float
) -> List[Point]:
    """Build the closed quadrilateral between the upper and lower bound lines.

    Args:
        midpoint (tuple[float, float]): Shared pivot of both bound lines.
        upper (float): Upper slope bound.
        lower (float): Lower slope bound.
        half_width (float): Horizontal half-width of both bound lines.

    Returns:
        list[tuple[float, float]]: Five points ordered upper-left,
        upper-right, lower-right, lower-left, upper-left.

    Note:
        Fill renderers read the sequence as a simple polygon boundary. Any
        other ordering yields a self-intersecting bow-tie.
    """
    upper_left, upper_right = rotated_segment(midpoint, upper, half_width)
    lower_left, lower_right = rotated_segment(midpoint, lower, half_width)
    return [upper_left, upper_right, lower_right, lower_left, upper_left]


def segment_midpoint(segment: Segment) -> Point:
    (x1, y1), (x2, y2) = segment
    return (x1 + x2) / 2.0, (y1 + y2) / 2.0


def segment_slope(segment: Segment) -> float:
    (x1, y1), (x2, y2) = segment
    return (y2 - y1) / (x2 - x1)


def to_xy_arrays(points: Sequence[Point]) -> Tuple[np.ndarray, np.ndarray]:
    """Split a point list into x and y arrays for Matplotlib artists."""
    if len(points) == 0:
        return np.empty(0, dtype=float), np.empty(0, dtype=float)
    arr = np.asarray(points, dtype=float)
    return arr[:, 0], arr[:, 1]
