import pytest

from cncsim.axes import AxisDefinition, AxisType
from cncsim.machine import Machine
from cncsim.primitives import AABB, Vec3
from cncsim.spindle import Spindle
from cncsim.tool_changer import ToolChanger, ToolChangerType
from cncsim.validation import (
    MachineValidationError,
    is_machine_valid,
    validate_axes,
    validate_basic,
    validate_machine,
    validate_spindle,
    validate_tool_changer,
    validate_work_envelope,
)


def _axes(**overrides):
    axes = {
        AxisType.X: AxisDefinition(AxisType.X, -500.0, 500.0, 100.0, 500.0),
        AxisType.Y: AxisDefinition(AxisType.Y, -400.0, 400.0, 100.0, 500.0),
        AxisType.Z: AxisDefinition(AxisType.Z, -200.0, 100.0, 50.0, 300.0),
    }
    axes.update(overrides)
    return axes


def _machine(machine_id="vmc", name="Vertical Mill", axes=None, spindle=None,
             changer=None, envelope=None):
    return Machine(
        machine_id,
        name,
        _axes() if axes is None else axes,
        spindle or Spindle(12000.0, 100.0),
        changer or ToolChanger(ToolChangerType.CAROUSEL, 16),
        envelope or AABB(Vec3(-400.0, -300.0, -150.0), Vec3(400.0, 300.0, 50.0)),
    )


def test_valid_machine_passes():
    machine = _machine()
    validate_machine(machine)
    assert is_machine_valid(machine)


def test_empty_id():
    with pytest.raises(MachineValidationError, match="Machine has empty ID"):
        validate_basic(_machine(machine_id=""))


def test_empty_name():
    with pytest.raises(MachineValidationError, match="'vmc' has empty name"):
        validate_basic(_machine(name=""))


def test_no_axes():
    with pytest.raises(MachineValidationError, match="has no axes"):
        validate_machine(_machine(axes={}))


def test_invalid_axis():
    bad = AxisDefinition(AxisType.Y, -400.0, 400.0, 0.0, 500.0)
    with pytest.raises(MachineValidationError, match="has invalid axis: 1"):
        validate_axes(_machine(axes=_axes(**{AxisType.Y.name: bad})
                               if False else {**_axes(), AxisType.Y: bad}))


def test_five_axis_machine_passes_axis_check():
    axes = {
        **_axes(),
        AxisType.A: AxisDefinition(AxisType.A, -120.0, 120.0, 30.0, 100.0),
        AxisType.C: AxisDefinition(AxisType.C, -360.0, 360.0, 30.0, 100.0),
    }
    machine = _machine(axes=axes)
    validate_axes(machine)
    assert machine.machine_type() == "5-Axis"


def test_invalid_spindle():
    with pytest.raises(MachineValidationError, match="has invalid spindle"):
        validate_spindle(_machine(spindle=Spindle(0.0)))


def test_invalid_tool_changer():
    changer = ToolChanger(ToolChangerType.FIXED, 0)
    with pytest.raises(MachineValidationError, match="has invalid tool changer"):
        validate_tool_changer(_machine(changer=changer))


def test_invalid_envelope():
    box = AABB(Vec3(10.0, 0.0, 0.0), Vec3(0.0, 10.0, 10.0))
    with pytest.raises(MachineValidationError, match="has invalid work envelope"):
        validate_work_envelope(_machine(envelope=box))


@pytest.mark.parametrize(
    "box, label",
    [
        (AABB(Vec3(-600.0, 0.0, 0.0), Vec3(0.0, 10.0, 10.0)), "X"),
        (AABB(Vec3(0.0, 0.0, 0.0), Vec3(10.0, 450.0, 10.0)), "Y"),
        (AABB(Vec3(0.0, 0.0, -250.0), Vec3(10.0, 10.0, 10.0)), "Z"),
    ],
)
def test_envelope_exceeding_axis_limits(box, label):
    with pytest.raises(
        MachineValidationError,
        match=f"work envelope {label} bounds exceed axis limits",
    ):
        validate_work_envelope(_machine(envelope=box))


def test_envelope_limits_skipped_without_all_linear_axes():
    axes = {AxisType.X: AxisDefinition(AxisType.X, -10.0, 10.0, 1.0, 1.0)}
    box = AABB(Vec3(-100.0, -100.0, -100.0), Vec3(100.0, 100.0, 100.0))
    machine = _machine(axes=axes, envelope=box)
    validate_work_envelope(machine)
    assert is_machine_valid(machine)


def test_is_machine_valid_false_on_failure():
    assert not is_machine_valid(_machine(spindle=Spindle(0.0)))
    assert not is_machine_valid(_machine(machine_id=""))


def test_error_is_value_error():
    with pytest.raises(ValueError):
        validate_machine(_machine(name=""))