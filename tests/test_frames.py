import math

import pytest

from cncsim.frames import CoordinateFrame
from cncsim.primitives import Vec3
from cncsim.transform import Transform


def _assert_close(a: Vec3, b: Vec3) -> None:
    assert (a.x, a.y, a.z) == pytest.approx((b.x, b.y, b.z), abs=1e-9)


def _dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def test_default_frame_axes_are_unit_basis():
    frame = CoordinateFrame("machine")
    _assert_close(frame.x_axis(), Vec3(1.0, 0.0, 0.0))
    _assert_close(frame.y_axis(), Vec3(0.0, 1.0, 0.0))
    _assert_close(frame.z_axis(), Vec3(0.0, 0.0, 1.0))


def test_to_and_from_parent_round_trip():
    frame = CoordinateFrame(
        "G54",
        transform=Transform.from_position_and_axis_angle(
            Vec3(100.0, 50.0, -20.0), Vec3(0.0, 0.0, 1.0), 0.3
        ),
    )
    p = Vec3(1.0, 2.0, 3.0)
    _assert_close(frame.from_parent(frame.to_parent(p)), p)


def test_work_offset_translation_adds_offset():
    offset = Vec3(100.0, 50.0, -20.0)
    frame = CoordinateFrame("G54", transform=Transform.from_translation(offset))
    _assert_close(frame.to_parent(Vec3()), offset)


def test_rotated_frame_axes_stay_orthonormal():
    frame = CoordinateFrame(
        "tilted",
        transform=Transform.from_position_and_axis_angle(
            Vec3(), Vec3(1.0, 1.0, 1.0), 1.2
        ),
    )
    x, y, z = frame.x_axis(), frame.y_axis(), frame.z_axis()
    assert x.length() == pytest.approx(1.0)
    assert _dot(x, y) == pytest.approx(0.0, abs=1e-9)
    assert _dot(y, z) == pytest.approx(0.0, abs=1e-9)
    assert _dot(x, z) == pytest.approx(0.0, abs=1e-9)


def test_rotation_about_z_keeps_z_axis():
    frame = CoordinateFrame(
        "spun",
        transform=Transform.from_position_and_axis_angle(
            Vec3(), Vec3(0.0, 0.0, 1.0), 2.0
        ),
    )
    _assert_close(frame.z_axis(), Vec3(0.0, 0.0, 1.0))


def test_origin_and_transform_can_be_replaced():
    frame = CoordinateFrame("work")
    frame.origin = Vec3(1.0, 2.0, 3.0)
    frame.transform = Transform.from_translation(Vec3(0.0, 0.0, 5.0))
    assert frame.origin == Vec3(1.0, 2.0, 3.0)
    _assert_close(frame.to_parent(Vec3()), Vec3(0.0, 0.0, 5.0))


def test_validity():
    assert CoordinateFrame("ok").is_valid()
    assert not CoordinateFrame("").is_valid()
    assert not CoordinateFrame("bad", origin=Vec3(math.nan, 0.0, 0.0)).is_valid()
    assert not CoordinateFrame("bad", origin=Vec3(0.0, 0.0, math.inf)).is_valid()