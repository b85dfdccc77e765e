"""Bezier curves over vector-like points."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Iterator, List

from prismatic.parametric import parametric_pairs
from prismatic.vector import Vector3

_LENGTH_SEGMENTS = 10
_SHIFT_DELTA = 1 / 65535


def _ipow(base: Any, exponent: int) -> Any:
    return 1 if exponent == 0 else base**exponent


def bernstein(item: int, of: int, t: Any) -> Any:
    """Weight of control point ``item`` of ``of`` points at parameter ``t``."""
    if not 0 <= item < of:
        raise ValueError(f"control point {item} is out of range for {of} points")
    degree = of - 1
    factor = math.comb(degree, item)
    return _ipow(t, item) * _ipow(1 - t, degree - item) * factor


def _position(point: Any) -> Vector3:
    if isinstance(point, Vector3):
        return point
    return point.position


def _with_position(point: Any, position: Vector3) -> Any:
    if isinstance(point, Vector3):
        return position
    return point.with_position(position)


@dataclass
class Curve:
    """A Bezier curve through its control points.

    Points must support ``+``, ``-``, multiplication by a scalar and
    ``magnitude()``. For :meth:`shift_in_plane`, points that are not
    :class:`Vector3` must expose ``position`` and ``with_position(position)``.
    """

    points: List[Any]

    def __post_init__(self) -> None:
        self.points = list(self.points)
        if len(self.points) < 2:
            raise ValueError("a curve needs at least two points")

    def __iter__(self) -> Iterator[Any]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def get_t(self, t: Any) -> Any:
        """Point on the curve at parameter ``t`` in [0, 1]."""
        if not 0 <= t <= 1:
            raise ValueError(f"curve parameter {t} is outside [0, 1]")
        count = len(self.points)
        weighted = (
            point * bernstein(index, count, t) for index, point in enumerate(self.points)
        )
        return reduce(operator.add, weighted)

    def get_length(self) -> Any:
        """Chord length for a line, a ten-segment approximation otherwise."""
        if len(self.points) == 2:
            return (self.points[0] - self.points[1]).magnitude()
        return sum(
            (
                (self.get_t(t0) - self.get_t(t1)).magnitude()
                for t0, t1 in parametric_pairs(_LENGTH_SEGMENTS)
            ),
            0,
        )

    def update_start(self, start: Any) -> None:
        self.points[0] = start

    def update_end(self, end: Any) -> None:
        self.points[-1] = end

    def for_each_point(self, fn: Callable[[Any], Any]) -> "Curve":
        """Return a curve whose control points are mapped through ``fn``."""
        return Curve([fn(point) for point in self.points])

    def shift_in_plane(self, normal: Vector3, amount: Any) -> "Curve":
        """Return the curve moved sideways by ``amount`` in the plane of ``normal``."""
        b = _position(self.get_t(0.0))
        bb = _position(self.get_t(_SHIFT_DELTA))
        e = _position(self.get_t(1.0 - _SHIFT_DELTA))
        ee = _position(self.get_t(1.0))
        ext_b = (bb - b).normalize().cross(normal)
        ext_e = (ee - e).normalize().cross(normal)

        center = len(self.points) // 2
        odd = len(self.points) % 2 == 1
        shifted = []
        for index, point in enumerate(self.points):
            if index < center:
                ext = ext_b
            elif odd and index == center:
                ext = ext_b.lerp(ext_e, 0.5)
            else:
                ext = ext_e
            shifted.append(_with_position(point, _position(point) + ext * amount))
        return Curve(shifted)