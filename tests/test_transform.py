import math

import pytest

from cncsim.primitives import Vec3
from cncsim.transform import Quaternion, Transform


def _assert_close(a: Vec3, b: Vec3) -> None:
    assert (a.x, a.y, a.z) == pytest.approx((b.x, b.y, b.z), abs=1e-9)


def test_identity_rotation_leaves_vector():
    v = Vec3(1.0, -2.0, 3.0)
    _assert_close(Quaternion.identity().rotate(v), v)


def test_quarter_turn_about_z():
    q = Quaternion.from_axis_angle(Vec3(0.0, 0.0, 1.0), math.pi / 2)
    _assert_close(q.rotate(Vec3(1.0, 0.0, 0.0)), Vec3(0.0, 1.0, 0.0))


def test_conjugate_undoes_rotation():
    q = Quaternion.from_axis_angle(Vec3(1.0, 1.0, 0.0).normalized(), 0.7)
    v = Vec3(0.3, -1.2, 2.0)
    _assert_close(q.conjugate().rotate(q.rotate(v)), v)


def test_rotation_preserves_length():
    q = Quaternion.from_axis_angle(Vec3(0.0, 1.0, 0.0), 1.1)
    v = Vec3(2.0, 3.0, -1.0)
    assert q.rotate(v).length() == pytest.approx(v.length())


def test_normalized_has_unit_magnitude():
    assert Quaternion(2.0, 1.0, -3.0, 0.5).normalized().magnitude() == pytest.approx(1.0)


def test_zero_quaternion_normalizes_to_identity():
    assert Quaternion(0.0, 0.0, 0.0, 0.0).normalized() == Quaternion.identity()


def test_quaternion_product_composes_rotations():
    a = Quaternion.from_axis_angle(Vec3(0.0, 0.0, 1.0), 0.4)
    b = Quaternion.from_axis_angle(Vec3(1.0, 0.0, 0.0), 1.3)
    v = Vec3(1.0, 2.0, 3.0)
    _assert_close((a * b).rotate(v), a.rotate(b.rotate(v)))


def test_transform_normalizes_rotation():
    t = Transform(Vec3(1.0, 2.0, 3.0), Quaternion(2.0, 0.0, 0.0, 0.0))
    assert t.rotation == Quaternion.identity()


def test_translation_moves_points_not_directions():
    offset = Vec3(5.0, -1.0, 2.0)
    t = Transform.from_translation(offset)
    _assert_close(t.transform_point(Vec3()), offset)
    d = Vec3(0.0, 0.0, 1.0)
    _assert_close(t.transform_direction(d), d)


def test_inverse_round_trip():
    t = Transform.from_position_and_axis_angle(
        Vec3(10.0, -4.0, 1.0), Vec3(1.0, 2.0, 3.0), 0.9
    )
    p = Vec3(0.5, 0.25, -7.0)
    _assert_close(t.inverse().transform_point(t.transform_point(p)), p)


def test_transform_times_inverse_is_identity():
    t = Transform.from_position_and_axis_angle(
        Vec3(1.0, 2.0, 3.0), Vec3(0.0, 1.0, 0.0), 2.0
    )
    combined = t * t.inverse()
    _assert_close(combined.position, Vec3())
    p = Vec3(3.0, -2.0, 1.0)
    _assert_close(combined.transform_point(p), p)


def test_composition_applies_right_operand_first():
    a = Transform.from_position_and_axis_angle(
        Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0), 0.5
    )
    b = Transform.from_position_and_axis_angle(
        Vec3(0.0, 2.0, 0.0), Vec3(1.0, 0.0, 0.0), 1.0
    )
    p = Vec3(0.3, 0.4, 0.5)
    _assert_close((a * b).transform_point(p), a.transform_point(b.transform_point(p)))


def test_axis_angle_normalizes_axis():
    long_axis = Transform.from_position_and_axis_angle(Vec3(), Vec3(0.0, 0.0, 5.0), 1.0)
    unit_axis = Transform.from_rotation(
        Quaternion.from_axis_angle(Vec3(0.0, 0.0, 1.0), 1.0)
    )
    p = Vec3(1.0, 1.0, 0.0)
    _assert_close(long_axis.transform_point(p), unit_axis.transform_point(p))


def test_identity_transform_equals_default():
    assert Transform.identity() == Transform()
    assert Transform.identity().position == Vec3()