"""
Validate raw input fields before any recomputation.

Each field is checked independently so every offending field gets its own
message; statistics are only recomputed when all three pass.
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Union

from .config import MAX_VARIANCE_X, MIN_OBSERVATIONS, SessionParameters

FIELD_OBSERVATIONS = "num_observations"
FIELD_VARIANCE_X = "variance_x"
FIELD_VARIANCE_ERROR = "variance_error"

FIELD_LABELS = {
    FIELD_OBSERVATIONS: "Number of observations",
    FIELD_VARIANCE_X: "Variance of X",
    FIELD_VARIANCE_ERROR: "Variance of error term",
}

MESSAGES = {
    FIELD_OBSERVATIONS: f"Must be an integer greater than {MIN_OBSERVATIONS - 1}",
    FIELD_VARIANCE_X: f"Must be greater than 0 and less than {MAX_VARIANCE_X:g}",
    FIELD_VARIANCE_ERROR: "Must be greater than 0",
}

RawValue = Union[str, int, float, None]


class InvalidParameterError(ValueError):
    """Raised when one or more input fields fall outside the valid domain.

    Attributes:
        errors: Mapping of field name to user-facing message.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        detail = "; ".join(
            f"{FIELD_LABELS.get(k, k)}: {v}" for k, v in self.errors.items()
        )
        super().__init__(f"Invalid parameters ({detail})")


def _parse_float(raw: RawValue) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(str(raw).strip()) if isinstance(raw, str) else float(raw)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_int(raw: RawValue) -> Optional[int]:
    value = _parse_float(raw)
    if value is None or not float(value).is_integer():
        return None
    return int(value)


def check_parameters(
    num_observations: RawValue, variance_x: RawValue, variance_error: RawValue
) -> Dict[str, str]:
    """Return a message per invalid field; an empty mapping means valid.

    Args:
        num_observations: Raw observation count (text or number).
        variance_x: Raw predictor variance.
        variance_error: Raw error-term variance.

    Returns:
        dict[str, str]: Field name to message for every failing field.
    """
    errors: Dict[str, str] = {}

    n = _parse_int(num_observations)
    if n is None or n < MIN_OBSERVATIONS:
        errors[FIELD_OBSERVATIONS] = MESSAGES[FIELD_OBSERVATIONS]

    vx = _parse_float(variance_x)
    if vx is None or vx <= 0 or vx >= MAX_VARIANCE_X:
        errors[FIELD_VARIANCE_X] = MESSAGES[FIELD_VARIANCE_X]

    ve = _parse_float(variance_error)
    if ve is None or ve <= 0:
        errors[FIELD_VARIANCE_ERROR] = MESSAGES[FIELD_VARIANCE_ERROR]

    return errors


def validate_parameters(
    num_observations: RawValue, variance_x: RawValue, variance_error: RawValue
) -> SessionParameters:
    """Parse and validate raw inputs into ``SessionParameters``.

    Raises:
        InvalidParameterError: If any field is outside its domain.
    """
    errors = check_parameters(num_observations, variance_x, variance_error)
    if errors:
        raise InvalidParameterError(errors)
    return SessionParameters(
        num_observations=_parse_int(num_observations),
        variance_x=_parse_float(variance_x),
        variance_error=_parse_float(variance_error),
    )
