"""Paths made of consecutive curves, and a builder for them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List

from prismatic.curve import Curve
from prismatic.vector import Vector3

_MAX_DELTA = 1 / 1_000_000

logger = logging.getLogger(__name__)


@dataclass
class Path:
    """A sequence of curves parameterised together over [0, 1] by length."""

    items: List[Curve] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = list(self.items)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def build(cls) -> "PathBuilder":
        return PathBuilder()

    def push_back(self, item: Curve) -> "Path":
        """Append ``item`` unless it has zero length; returns the path."""
        if item.get_length() == 0:
            logger.warning("ignoring a path element of zero length")
        else:
            self.items.append(item)
        return self

    def get_length(self) -> Any:
        return sum((item.get_length() for item in self.items), 0)

    def get_t(self, t: Any) -> Any:
        """Point at parameter ``t``; values within 1e-6 outside [0, 1] are clamped."""
        if t < 0:
            if abs(t) < _MAX_DELTA:
                t = 0.0
            else:
                raise ValueError(f"path parameter {t} is too far below 0")
        if t > 1:
            if abs(1 - t) < _MAX_DELTA:
                t = 1.0
            else:
                raise ValueError(f"path parameter {t} is too far above 1")

        total = self.get_length()
        for item in self.items:
            param_len = item.get_length() / total
            delta = abs(t - param_len)
            if delta < _MAX_DELTA:
                param_len += delta
            if param_len < t:
                t -= param_len
            else:
                return item.get_t(t / param_len)
        raise ValueError(f"path parameter lies beyond the end of the path: {t} left")

    def connect_ends(self) -> None:
        """Join each curve's end to the next one's start at their midpoint."""
        if not self.items:
            raise ValueError("cannot connect the ends of an empty path")
        for current, following in zip(self.items, self.items[1:]):
            _join(current, following)

    def connect_ends_circular(self) -> None:
        """Like :meth:`connect_ends`, also joining the last curve to the first."""
        for current, following in zip(self.items, self.items[1:] + self.items[:1]):
            _join(current, following)


def _join(current: Curve, following: Curve) -> None:
    end = current.get_t(1.0)
    start = following.get_t(0.0)
    middle = (start - end) / 2 + end
    current.update_end(middle)
    following.update_start(middle)


class PathBuilder:
    """Builds a path segment by segment, starting at the origin by default."""

    def __init__(self) -> None:
        self._last: Any = Vector3.zero()
        self._items: List[Curve] = []

    def start(self, point: Any) -> "PathBuilder":
        self._last = point
        return self

    def line_to(self, point: Any) -> "PathBuilder":
        self._items.append(Curve([self._last, point]))
        self._last = point
        return self

    def quad_3_to(self, weight: Any, last: Any) -> "PathBuilder":
        self._items.append(Curve([self._last, weight, last]))
        self._last = last
        return self

    def quad_4_to(self, weight: Any, weight2: Any, last: Any) -> "PathBuilder":
        self._items.append(Curve([self._last, weight, weight2, last]))
        self._last = last
        return self

    def build(self) -> Path:
        """Return the path built so far and clear the builder's segments."""
        path = Path(self._items)
        self._items = []
        return path