"""Community Determined Intensity (CDI) helpers"""
import logging
from typing import Any, List, Optional, Tuple

logger = logging.getLogger(__name__)

NOT_FELT = "Not felt"

# (exclusive upper bound, label), checked lowest first
STRENGTH_THRESHOLDS: List[Tuple[float, str]] = [
    (2.0, NOT_FELT),
    (3.0, "Weak"),
    (4.0, "Light"),
    (5.0, "Moderate"),
    (6.0, "Strong"),
    (7.0, "Very strong"),
    (8.0, "Severe"),
    (9.0, "Violent"),
    (float('inf'), "Extreme"),
]


def perceived_strength(cdi: Any) -> str:
    """
    Map a CDI value to a perceived strength label.

    Args:
        cdi: Raw "cdi" property from a USGS feature (number, numeric string or None)

    Returns:
        Label from STRENGTH_THRESHOLDS; "Not felt" when the value is absent or not numeric
    """
    value = _as_float(cdi)
    # NaN is not comparable
    if value is None or value != value:
        return NOT_FELT

    for upper, label in STRENGTH_THRESHOLDS:
        if value < upper:
            return label

    return STRENGTH_THRESHOLDS[-1][1]


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric cdi value: {value!r}")
        return None
