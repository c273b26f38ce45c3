"""Define standardized series and readout identifiers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesIds:
    """Container for the named point-series pushed to a renderer.

    Attributes:
        regression: The displayed regression line. Holds the baseline segment
            while idle and the rotated segment on every animation frame.

        upper_bound: Static line at slope ``1 + 2 SE`` drawn with the band.

        lower_bound: Static line at slope ``1 - 2 SE`` drawn with the band.

        ci_band: Closed five-point polygon between the bound lines. An empty
            point list means the band is hidden.
    """

    regression: str = "regression"
    upper_bound: str = "upper_bound"
    lower_bound: str = "lower_bound"
    ci_band: str = "ci_band"


@dataclass(frozen=True)
class ReadoutIds:
    """Container for text readouts.

    Attributes:
        slope: Current slope, two decimal places.
        se: Standard error of the slope, two decimal places.
    """

    slope: str = "slope"
    se: str = "se"


SERIES = SeriesIds()
READOUTS = ReadoutIds()

ALL_SERIES = (SERIES.regression, SERIES.upper_bound, SERIES.lower_bound, SERIES.ci_band)
ALL_READOUTS = (READOUTS.slope, READOUTS.se)
