"""A 2x2 matrix acting on Vector2."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from prismatic.vector import Vector2


class SingularMatrixError(ValueError):
    """Raised when a matrix with zero determinant is inverted."""


@dataclass(frozen=True)
class Matrix2:
    """Row-major 2x2 matrix ``[[m11, m12], [m21, m22]]``."""

    m11: Any
    m12: Any
    m21: Any
    m22: Any

    def determinant(self) -> Any:
        return self.m11 * self.m22 - self.m21 * self.m12

    def inverse(self) -> "Matrix2":
        """Return the inverse; raises SingularMatrixError if there is none."""
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError("matrix has zero determinant")
        return Matrix2(
            self.m22 / det,
            -self.m12 / det,
            -self.m21 / det,
            self.m11 / det,
        )

    def __matmul__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        row1 = Vector2(self.m11, self.m12)
        row2 = Vector2(self.m21, self.m22)
        return Vector2(other.dot(row1), other.dot(row2))