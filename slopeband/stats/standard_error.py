"""Provide the slope standard error and its two-sided interval.

This module supports:
- the derived quantities ``v`` and ``se`` used to size the baseline segment
  and the slope interval, and
- the interval bounds swept by the slope animation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..config import SessionParameters


@dataclass(frozen=True)
class DerivedStatistics:
    """Quantities derived from one set of session parameters.

    Attributes:
        v: Square root of the predictor variance; half the horizontal extent
            of the baseline segment.
        se: Standard error of the OLS slope.
    """

    v: float
    se: float


@dataclass(frozen=True)
class SlopeBounds:
    """Two-sided slope interval around the reference slope."""

    original: float
    upper: float
    lower: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


def compute(params: SessionParameters) -> DerivedStatistics:
    """Compute ``v`` and the slope standard error from session parameters.

    Args:
        params (SessionParameters): Validated inputs. Callers guarantee
            ``num_observations >= 3``, ``0 < variance_x < 6`` and
            ``variance_error > 0``.

    Returns:
        DerivedStatistics: ``v = sqrt(variance_x)`` and
        ``se = sqrt(variance_error / (num_observations * variance_x))``.

    Note:
        No validation is performed here; out-of-domain inputs are a caller
        contract violation.

    References:
        Sampling variance of the OLS slope, ``Var(b) = sigma^2 / (n Var(x))``.
    """
    variance_x = float(params.variance_x)
    v = math.sqrt(variance_x)
    se = math.sqrt(
        float(params.variance_error) / (int(params.num_observations) * variance_x)
    )
    return DerivedStatistics(v=v, se=se)


def slope_bounds(
    se: float, original_slope: float = 1.0, multiplier: float = 2.0
) -> SlopeBounds:
    """Build the interval ``original_slope +/- multiplier * se``.

    Args:
        se (float): Standard error of the slope (non-negative).
        original_slope (float, optional): Centre of the interval. Defaults to
            ``1.0``.
        multiplier (float, optional): Number of standard errors on each side.
            Defaults to ``2.0``.

    Returns:
        SlopeBounds: Interval with ``upper >= original >= lower``. The lower
        bound is not clamped and may be negative.
    """
    half_width = multiplier * float(se)
    return SlopeBounds(
        original=float(original_slope),
        upper=original_slope + half_width,
        lower=original_slope - half_width,
    )


def format_readout(value: float) -> str:
    """Format a readout value to two decimal places."""
    return f"{float(value):.2f}"


def displayed_se(se: float) -> float:
    """Return the standard error as shown on screen, rounded to 2 decimals."""
    return float(format_readout(se))
