"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from prismatic.vector import Vector3


def _sin(value: Any) -> Any:
    own = getattr(value, "sin", None)
    return own() if callable(own) else math.sin(value)


def _cos(value: Any) -> Any:
    own = getattr(value, "cos", None)
    return own() if callable(own) else math.cos(value)


@dataclass(frozen=True, order=True)
class Quaternion:
    """A quaternion ``x*i + y*j + z*k + w``; the default is the identity."""

    x: Any = 0.0
    y: Any = 0.0
    z: Any = 0.0
    w: Any = 1.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_scaled_axis(cls, axis: Vector3) -> "Quaternion":
        """Rotation about ``axis`` by an angle equal to its length."""
        angle = axis.magnitude()
        if angle == 0:
            return cls.identity()
        unit = axis.normalize()
        half_angle = angle / 2
        s = _sin(half_angle)
        return cls(unit.x * s, unit.y * s, unit.z * s, _cos(half_angle))

    def rotate(self, vector: Vector3) -> Vector3:
        """Rotate ``vector``; the quaternion is assumed to be of unit length."""
        vx, vy, vz = vector.x, vector.y, vector.z
        qx, qy, qz, qw = self.x, self.y, self.z, self.w

        cx = qy * vz - qz * vy
        cy = qz * vx - qx * vz
        cz = qx * vy - qy * vx
        tx, ty, tz = cx + cx, cy + cy, cz + cz

        return Vector3(
            vx + qw * tx + qy * tz - qz * ty,
            vy + qw * ty + qz * tx - qx * tz,
            vz + qw * tz + qx * ty - qy * tx,
        )

    def __mul__(self, other: object) -> Any:
        if isinstance(other, Vector3):
            return self.rotate(other)
        if not isinstance(other, Quaternion):
            return NotImplemented
        ax, ay, az, aw = self.x, self.y, self.z, self.w
        bx, by, bz, bw = other.x, other.y, other.z, other.w
        return Quaternion(
            ax * bw + aw * bx + ay * bz - az * by,
            ay * bw + aw * by + az * bx - ax * bz,
            az * bw + aw * bz + ax * by - ay * bx,
            aw * bw - ax * bx - ay * by - az * bz,
        )