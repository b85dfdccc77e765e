"""Two- and three-dimensional vectors over any numeric scalar."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator


def _sqrt(value: Any) -> Any:
    own = getattr(value, "sqrt", None)
    if callable(own):
        return own()
    return math.sqrt(value)


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: Any
    y: Any

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector2":
        return cls(1.0, 1.0)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def dot(self, rhs: "Vector2") -> Any:
        return self.x * rhs.x + self.y * rhs.y

    def magnitude_squared(self) -> Any:
        return self.dot(self)

    def magnitude(self) -> Any:
        return _sqrt(self.magnitude_squared())

    def lerp(self, to: "Vector2", t: Any) -> "Vector2":
        return self * (1 - t) + to * t

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Any) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    def __rmul__(self, other: Any) -> "Vector2":
        if isinstance(other, Vector2):
            return NotImplemented
        return Vector2(other * self.x, other * self.y)

    def __truediv__(self, other: Any) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        return Vector2(self.x / other, self.y / other)

    def __neg__(self) -> "Vector2":
        return self * -1


@dataclass(frozen=True, order=True)
class Vector3:
    """A 3D vector; ordering is lexicographic over (x, y, z)."""

    x: Any
    y: Any
    z: Any

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def unit_x(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> "Vector3":
        return cls(0.0, 0.0, 1.0)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def dot(self, rhs: "Vector3") -> Any:
        return self.x * rhs.x + self.y * rhs.y + self.z * rhs.z

    def cross(self, rhs: "Vector3") -> "Vector3":
        return Vector3(
            self.y * rhs.z - self.z * rhs.y,
            self.z * rhs.x - self.x * rhs.z,
            self.x * rhs.y - self.y * rhs.x,
        )

    def magnitude_squared(self) -> Any:
        return self.dot(self)

    def magnitude(self) -> Any:
        return _sqrt(self.magnitude_squared())

    def normalize(self) -> "Vector3":
        """Return the unit vector; a zero vector raises ZeroDivisionError."""
        return self * (1 / self.magnitude())

    def lerp(self, to: "Vector3", t: Any) -> "Vector3":
        return self * (1 - t) + to * t

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}, {self.z}]"

    def __add__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Any) -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: Any) -> "Vector3":
        if isinstance(other, Vector3):
            return NotImplemented
        return Vector3(other * self.x, other * self.y, other * self.z)

    def __truediv__(self, other: Any) -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vector3(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> "Vector3":
        return self * -1