import pytest

from cncsim.primitives import (
    AABB,
    Axis,
    AxisConfig,
    ControllerLimits,
    MaterialProperties,
    Vec3,
)


def test_add_then_subtract_round_trips():
    a = Vec3(1.5, -2.0, 7.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_scalar_multiply_matches_repeated_add():
    a = Vec3(1.0, 2.0, 3.0)
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0


def test_length_of_classic_triangle():
    assert Vec3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_length_squared_is_square_of_length():
    v = Vec3(1.0, -2.0, 2.5)
    assert v.length_squared() == pytest.approx(v.length() ** 2)


def test_normalized_has_unit_length():
    v = Vec3(10.0, -3.0, 4.0).normalized()
    assert v.length() == pytest.approx(1.0)


def test_normalized_zero_vector_is_zero():
    assert Vec3().normalized() == Vec3(0.0, 0.0, 0.0)


def test_aabb_center_inside_and_size():
    box = AABB(Vec3(-1.0, 0.0, 2.0), Vec3(3.0, 4.0, 6.0))
    assert box.is_valid()
    assert box.contains(box.center())
    assert box.min + box.size() == box.max


def test_aabb_contains_boundaries_but_not_outside():
    box = AABB(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))
    assert box.contains(box.min)
    assert box.contains(box.max)
    assert not box.contains(Vec3(1.5, 0.5, 0.5))
    assert not box.contains(Vec3(0.5, 0.5, -0.1))


def test_aabb_inverted_is_invalid():
    assert not AABB(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 1.0)).is_valid()


def test_default_aabb_is_degenerate_but_valid():
    box = AABB()
    assert box.is_valid()
    assert box.size() == Vec3()


def test_axis_config_default_is_three_axis():
    config = AxisConfig()
    assert config.axis_count() == 3
    assert config.has_axis(Axis.Z)
    assert not config.has_axis(Axis.A)


def test_axis_config_counts_enabled_rotaries():
    config = AxisConfig(has_a=True, has_c=True)
    assert config.axis_count() == 5
    assert config.has_axis(Axis.C)
    assert not config.has_axis(Axis.B)


def test_controller_limits_per_axis_lists_are_independent():
    first = ControllerLimits()
    second = ControllerLimits()
    first.max_feed_rate_per_axis[Axis.Z] = 500.0
    assert second.max_feed_rate_per_axis[Axis.Z] == 0.0
    assert len(first.max_accel_per_axis) == len(Axis)


def test_material_properties_keeps_fields():
    material = MaterialProperties(name="Aluminum 6061", density=2.7, category="Metal")
    assert material.name == "Aluminum 6061"
    assert material.category == "Metal"
    assert material.hardness == 0.0