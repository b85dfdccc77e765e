"""A positioned, rotated frame of reference in 3D space."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from prismatic.quaternion import Quaternion
from prismatic.vector import Vector3


@dataclass
class BaseOrigin:
    """A frame with a ``center`` and a ``rotation`` of the unit axes."""

    center: Vector3 = field(default_factory=Vector3.zero)
    rotation: Quaternion = field(default_factory=Quaternion.identity)

    def project(self, v: Vector3) -> Vector3:
        """Project the point ``v`` onto the frame's XY plane."""
        local = v - self.center
        x, y = self.x(), self.y()
        return self.center + x * local.dot(x) + y * local.dot(y)

    def project_unit(self, v: Vector3) -> Vector3:
        """Project the direction ``v`` onto the XY plane and normalise it."""
        x, y = self.x(), self.y()
        return (x * v.dot(x) + y * v.dot(y)).normalize()

    def offset_x(self, amount: Any) -> "BaseOrigin":
        return replace(self, center=self.x() * amount + self.center)

    def offset_y(self, amount: Any) -> "BaseOrigin":
        return replace(self, center=self.y() * amount + self.center)

    def offset_z(self, amount: Any) -> "BaseOrigin":
        return replace(self, center=self.z() * amount + self.center)

    def offset(self, axis: Vector3) -> "BaseOrigin":
        return replace(self, center=axis + self.center)

    def rotate(self, quat: Quaternion) -> "BaseOrigin":
        return replace(self, rotation=self.rotation * quat)

    def rotate_axisangle(self, axisangle: Vector3) -> "BaseOrigin":
        return self.rotate(Quaternion.from_scaled_axis(axisangle))

    def left(self) -> Vector3:
        return -self.x()

    def right(self) -> Vector3:
        return self.x()

    def top(self) -> Vector3:
        return self.y()

    def x(self) -> Vector3:
        return self.rotation.rotate(Vector3.unit_x())

    def y(self) -> Vector3:
        return self.rotation.rotate(Vector3.unit_y())

    def z(self) -> Vector3:
        return self.rotation.rotate(Vector3.unit_z())

    def apply(self, origin: "BaseOrigin") -> None:
        """Express this frame inside ``origin``, in place."""
        self.center = origin.rotation.rotate(self.center) + origin.center
        self.rotation = origin.rotation * self.rotation