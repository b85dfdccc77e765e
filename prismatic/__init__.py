"""Geometry primitives: vectors, quaternions, 2x2 matrices, frames, decimal scalars and Bezier paths."""

__version__ = "0.1.0"

__all__ = [
    "curve",
    "dec",
    "matrix2",
    "origin",
    "parametric",
    "path",
    "quaternion",
    "scalar",
    "vector",
]