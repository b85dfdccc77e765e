"""Evenly spaced parameter intervals over [0, 1]."""

from __future__ import annotations

from typing import Iterator, Tuple


def parametric_pairs(segments: int, start: int = 0) -> Iterator[Tuple[float, float]]:
    """Yield ``(i / segments, (i + 1) / segments)`` for i from ``start``."""
    if segments < 0 or start < 0:
        raise ValueError("segments and start must be non-negative")
    current = start
    while current + 1 <= segments:
        yield current / segments, (current + 1) / segments
        current += 1