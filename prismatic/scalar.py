"""Scalar helpers shared by the geometry types."""

from __future__ import annotations

import math
from typing import Any

STABILITY_ROUNDING = 14
"""Number of decimal places used to stabilise computed coordinates."""


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_dp(value: Any, point: int) -> Any:
    """Round ``value`` to ``point`` decimal places, halves away from zero."""
    own = getattr(value, "round_dp", None)
    if callable(own):
        return own(point)
    scale = 10.0**point
    return _round_half_away(value * scale) / scale