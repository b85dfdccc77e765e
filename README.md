# prismatic

Small geometry building blocks for 3D work: vectors, rotations, a decimal
scalar, and Bézier curves chained into paths. There are no third-party
dependencies.

## Modules

- `prismatic.vector`
  - `Vector2` and `Vector3` are frozen dataclasses. They support `+`, `-`, unary `-`, multiplication and division by a scalar or component-wise by a vector, and iteration over their components.
  - Both have `dot`, `magnitude`, `magnitude_squared`, `lerp`, `zero()`, `one()` and `is_zero()`.
  - `Vector3` also has `cross`, `normalize` and the unit vectors `unit_x()`, `unit_y()` and `unit_z()`. `normalize` raises `ZeroDivisionError` for a zero vector. `Vector3` values order lexicographically by `(x, y, z)`, and `str()` prints them as `[x, y, z]`.
- `prismatic.quaternion`
  - `Quaternion(x, y, z, w)` defaults to the identity. `Quaternion.identity()` also returns the identity.
  - `Quaternion.from_scaled_axis(axis)` builds a rotation about `axis` by an angle equal to its length.
  - `rotate(vector)` rotates a `Vector3`. `q * v` does the same when `v` is a `Vector3`. `q1 * q2` is the Hamilton product of two quaternions.
- `prismatic.matrix2`
  - `Matrix2(m11, m12, m21, m22)` is a row-major 2×2 matrix with `determinant()` and `inverse()`.
  - `inverse()` raises `SingularMatrixError`, a `ValueError`, when the determinant is zero.
  - `m @ v` multiplies the matrix by a `Vector2`.
- `prismatic.origin`
  - `BaseOrigin(center, rotation)` is a frame of reference. It defaults to the world origin with no rotation.
  - Its local axes are `x()`, `y()` and `z()`, with the aliases `left()`, `right()` and `top()`.
  - `offset_x`, `offset_y`, `offset_z`, `offset`, `rotate` and `rotate_axisangle` return new frames.
  - `project(v)` projects a point onto the frame's XY plane. `project_unit(v)` projects a direction onto that plane and normalises it.
  - `apply(origin)` re-expresses the frame inside another one, in place.
- `prismatic.dec`
  - `Dec` is a decimal number with 28 significant digits and half-to-even rounding. It is built from an `int`, a `float`, a `str` or a `decimal.Decimal`.
  - It supports arithmetic, comparisons, `**` with integer exponents, `abs`, `float` and `int`.
  - Its methods are `sqrt`, `sin`, `cos`, `atan2`, `ceil`, `round`, `round_dp`, `powi`, `signum`, `is_positive`, `is_negative` and `is_zero`, plus the constructors `pi()` and `two_pi()`.
  - Multiplying by a `float` rounds the result to 8 decimal places.
  - Division and remainder by zero raise `ZeroDivisionError`. `sqrt` of a negative number raises `ValueError`.
  - The class constants are `Dec.EPSILON`, `Dec.MIN` and `Dec.MAX`.
- `prismatic.scalar`
  - `round_dp(value, point)` rounds to `point` decimal places. It uses the value's own `round_dp` when it has one. Otherwise it rounds halves away from zero.
  - `STABILITY_ROUNDING` is 14.
- `prismatic.parametric`
  - `parametric_pairs(segments, start=0)` yields `(i / segments, (i + 1) / segments)` pairs that split `[0, 1]` into equal steps.
- `prismatic.curve`
  - `bernstein(item, of, t)` gives the Bernstein weight of control point `item` out of `of` points at `t`.
  - `Curve(points)` is a Bézier curve with two or more control points.
    - `get_t(t)` evaluates the curve for `t` in `[0, 1]`.
    - `get_length()` returns the exact chord length for two points and a ten-segment approximation otherwise.
    - `update_start` and `update_end` replace the first and last control points.
    - `for_each_point(fn)` returns a curve whose control points are mapped through `fn`.
    - `shift_in_plane(normal, amount)` returns a copy of the curve moved sideways within the plane of `normal`.
- `prismatic.path`
  - `Path` chains curves together and parameterises them over `[0, 1]` by length.
    - `push_back(item)` appends a curve. A curve of zero length is logged and skipped.
    - `get_length()` returns the total length.
    - `get_t(t)` evaluates the path. Values of `t` up to 1e-6 outside `[0, 1]` are clamped; values further out raise `ValueError`.
    - `connect_ends()` and `connect_ends_circular()` join neighbouring curves at the midpoint of their ends.
  - `Path.build()` returns a `PathBuilder`. It has `start`, `line_to`, `quad_3_to`, `quad_4_to` and `build`, and begins at the origin by default.

## Installation

```
pip install .
```

## Example

```python
from prismatic.vector import Vector3
from prismatic.path import Path

path = (
    Path.build()
    .start(Vector3(0.0, 0.0, 0.0))
    .line_to(Vector3(1.0, 0.0, 0.0))
    .quad_3_to(Vector3(2.0, 0.0, 0.0), Vector3(2.0, 1.0, 0.0))
    .build()
)

print(path.get_length())
print(path.get_t(0.5))  # point halfway along the path
```

Rotate a vector a quarter turn about the Z axis:

```python
import math
from prismatic.quaternion import Quaternion
from prismatic.vector import Vector3

q = Quaternion.from_scaled_axis(Vector3.unit_z() * (math.pi / 2))
print(q.rotate(Vector3.unit_x()))  # approximately [0, 1, 0]
```

## What it does not do

The package holds only the geometric primitives listed above. It does not:

- hold or index meshes, or compute their intersections or boolean operations;
- turn shapes into polygons;
- read or write mesh files such as STL or OpenSCAD;
- provide a command-line tool.

## Running the tests

```
pip install .[test]
pytest
```