"""Consistency checks for machine definitions."""

from __future__ import annotations

from .axes import AxisType, is_linear_axis, is_rotary_axis
from .machine import Machine


class MachineValidationError(ValueError):
    """A machine definition is inconsistent or unsafe."""


def _num(value: float) -> str:
    return f"{value:f}"


def validate_machine(machine: Machine) -> None:
    """Run every check; raise MachineValidationError on the first failure."""
    validate_basic(machine)
    validate_axes(machine)
    validate_spindle(machine)
    validate_tool_changer(machine)
    validate_work_envelope(machine)


def validate_basic(machine: Machine) -> None:
    if not machine.id:
        raise MachineValidationError("Machine has empty ID")
    if not machine.name:
        raise MachineValidationError(f"Machine '{machine.id}' has empty name")
    if machine.axis_count() == 0:
        raise MachineValidationError(f"Machine '{machine.id}' has no axes")


def _has_xyz(machine: Machine) -> bool:
    return all(machine.has_axis(t) for t in (AxisType.X, AxisType.Y, AxisType.Z))


def validate_axes(machine: Machine) -> None:
    for axis in machine.axes.values():
        if not axis.is_valid():
            raise MachineValidationError(
                f"Machine '{machine.id}' has invalid axis: {axis.axis_type.value}"
            )

    linear = sum(1 for t in machine.axes if is_linear_axis(t))
    rotary = sum(1 for t in machine.axes if is_rotary_axis(t))

    if linear == 3 and rotary == 0 and not _has_xyz(machine):
        raise MachineValidationError(
            f"Machine '{machine.id}' is 3-axis but missing X, Y, or Z axis"
        )
    if linear == 3 and rotary >= 2 and not _has_xyz(machine):
        raise MachineValidationError(
            f"Machine '{machine.id}' is 5-axis but missing X, Y, or Z axis"
        )


def validate_spindle(machine: Machine) -> None:
    spindle = machine.spindle
    if not spindle.is_valid():
        raise MachineValidationError(f"Machine '{machine.id}' has invalid spindle")
    if spindle.max_rpm <= 0.0:
        raise MachineValidationError(
            f"Machine '{machine.id}' spindle has invalid max RPM: "
            f"{_num(spindle.max_rpm)}"
        )
    if spindle.min_rpm > spindle.max_rpm:
        raise MachineValidationError(
            f"Machine '{machine.id}' spindle min RPM ({_num(spindle.min_rpm)}) "
            f"exceeds max RPM ({_num(spindle.max_rpm)})"
        )


def validate_tool_changer(machine: Machine) -> None:
    changer = machine.tool_changer
    if not changer.is_valid():
        raise MachineValidationError(
            f"Machine '{machine.id}' has invalid tool changer"
        )
    if changer.is_present() and changer.max_tool_slots <= 0:
        raise MachineValidationError(
            f"Machine '{machine.id}' tool changer has invalid capacity: "
            f"{changer.max_tool_slots}"
        )


def validate_work_envelope(machine: Machine) -> None:
    envelope = machine.work_envelope
    if not envelope.is_valid():
        raise MachineValidationError(
            f"Machine '{machine.id}' has invalid work envelope"
        )

    x_axis = machine.axis(AxisType.X)
    y_axis = machine.axis(AxisType.Y)
    z_axis = machine.axis(AxisType.Z)
    if x_axis is None or y_axis is None or z_axis is None:
        return

    checks = (
        ("X", envelope.min.x, envelope.max.x, x_axis),
        ("Y", envelope.min.y, envelope.max.y, y_axis),
        ("Z", envelope.min.z, envelope.max.z, z_axis),
    )
    for label, low, high, axis in checks:
        if low < axis.min_position or high > axis.max_position:
            raise MachineValidationError(
                f"Machine '{machine.id}' work envelope {label} bounds exceed "
                f"axis limits"
            )


def is_machine_valid(machine: Machine) -> bool:
    """Non-raising form of validate_machine."""
    try:
        validate_machine(machine)
    except MachineValidationError:
        return False
    return True