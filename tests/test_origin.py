import math

import pytest

from prismatic.origin import BaseOrigin
from prismatic.quaternion import Quaternion
from prismatic.vector import Vector3

TOL = 1e-9


def test_default_is_identity_frame():
    origin = BaseOrigin()
    assert origin.center == Vector3.zero()
    assert (origin.x() - Vector3.unit_x()).magnitude() == pytest.approx(0.0, abs=TOL)
    assert (origin.y() - Vector3.unit_y()).magnitude() == pytest.approx(0.0, abs=TOL)
    assert (origin.z() - Vector3.unit_z()).magnitude() == pytest.approx(0.0, abs=TOL)


def test_offsets_move_along_axes_and_keep_original():
    origin = BaseOrigin()
    moved = origin.offset_x(2.0).offset_y(3.0).offset_z(-1.5)
    assert (moved.center - Vector3(2.0, 3.0, -1.5)).magnitude() == pytest.approx(0.0, abs=TOL)
    assert origin.center == Vector3.zero()


def test_offset_by_vector():
    moved = BaseOrigin().offset(Vector3(1.0, 2.0, 3.0)).offset(Vector3(1.0, 1.0, 1.0))
    assert (moved.center.x, moved.center.y, moved.center.z) == pytest.approx((2.0, 3.0, 4.0))


def test_rotation_about_z_turns_x_into_y():
    origin = BaseOrigin().rotate_axisangle(Vector3.unit_z() * (math.pi / 2))
    x, y, z = origin.x(), origin.y(), origin.z()
    assert (x.x, x.y, x.z) == pytest.approx((0.0, 1.0, 0.0), abs=TOL)
    assert (y.x, y.y, y.z) == pytest.approx((-1.0, 0.0, 0.0), abs=TOL)
    assert (z.x, z.y, z.z) == pytest.approx((0.0, 0.0, 1.0), abs=TOL)


def test_offset_follows_rotation():
    origin = BaseOrigin().rotate_axisangle(Vector3.unit_z() * (math.pi / 2)).offset_x(2.0)
    c = origin.center
    assert (c.x, c.y, c.z) == pytest.approx((0.0, 2.0, 0.0), abs=TOL)


def test_rotate_with_quaternion_matches_axisangle():
    axis = Vector3(0.3, -0.2, 0.9)
    by_quat = BaseOrigin().rotate(Quaternion.from_scaled_axis(axis))
    by_axis = BaseOrigin().rotate_axisangle(axis)
    qx, ax = by_quat.x(), by_axis.x()
    qz, az = by_quat.z(), by_axis.z()
    assert (qx.x, qx.y, qx.z) == pytest.approx((ax.x, ax.y, ax.z), abs=TOL)
    assert (qz.x, qz.y, qz.z) == pytest.approx((az.x, az.y, az.z), abs=TOL)


def test_axes_stay_orthonormal():
    origin = BaseOrigin().rotate_axisangle(Vector3(0.4, 1.1, -0.7))
    x, y, z = origin.x(), origin.y(), origin.z()
    assert x.dot(y) == pytest.approx(0.0, abs=1e-12)
    assert x.magnitude() == pytest.approx(1.0)
    assert (x.cross(y) - z).magnitude() == pytest.approx(0.0, abs=TOL)


def test_left_right_top():
    origin = BaseOrigin().rotate_axisangle(Vector3(0.0, 0.5, 0.0))
    left, right, top = origin.left(), origin.right(), origin.top()
    x, y = origin.x(), origin.y()
    assert (left.x, left.y, left.z) == pytest.approx((-right.x, -right.y, -right.z), abs=TOL)
    assert (right.x, right.y, right.z) == pytest.approx((x.x, x.y, x.z), abs=TOL)
    assert (top.x, top.y, top.z) == pytest.approx((y.x, y.y, y.z), abs=TOL)
    assert right.x == pytest.approx(math.cos(0.5))


def test_project_drops_normal_component():
    origin = BaseOrigin().offset_z(1.0)
    p = origin.project(Vector3(2.0, -3.0, 7.0))
    assert (p.x, p.y, p.z) == pytest.approx((2.0, -3.0, 1.0), abs=TOL)


def test_project_is_idempotent():
    origin = BaseOrigin().rotate_axisangle(Vector3(0.2, 0.3, 0.1)).offset_x(1.0)
    once = origin.project(Vector3(0.5, 4.0, -2.0))
    assert (origin.project(once) - once).magnitude() == pytest.approx(0.0, abs=TOL)
    assert (once - origin.center).dot(origin.z()) == pytest.approx(0.0, abs=1e-12)


def test_project_unit_is_normalised_and_in_plane():
    origin = BaseOrigin().rotate_axisangle(Vector3(0.0, 0.0, 0.3))
    unit = origin.project_unit(Vector3(1.0, 1.0, 5.0))
    assert unit.magnitude() == pytest.approx(1.0)
    assert unit.dot(origin.z()) == pytest.approx(0.0, abs=1e-12)


def test_project_unit_of_normal_fails():
    with pytest.raises(ZeroDivisionError):
        BaseOrigin().project_unit(Vector3.unit_z())


def test_apply_composes_frames():
    parent = BaseOrigin().rotate_axisangle(Vector3.unit_z() * (math.pi / 2)).offset_x(1.0)
    child = BaseOrigin().offset_x(2.0)
    child.apply(parent)
    c = child.center
    cx = child.x()
    assert (c.x, c.y, c.z) == pytest.approx((0.0, 3.0, 0.0), abs=TOL)
    assert (cx.x, cx.y, cx.z) == pytest.approx((0.0, 1.0, 0.0), abs=TOL)