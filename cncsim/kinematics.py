"""Machine kinematics: mapping between axis positions and tool poses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from .primitives import AABB, Axis, AxisConfig, Vec3
from .transform import Quaternion, Transform

_AXIS_COUNT = 6


def _zero_positions() -> tuple[float, ...]:
    return (0.0,) * _AXIS_COUNT


def _as_positions(axis_positions: Sequence[float]) -> tuple[float, ...]:
    positions = tuple(float(p) for p in axis_positions)
    if len(positions) != _AXIS_COUNT:
        raise ValueError(
            f"expected {_AXIS_COUNT} axis positions [X, Y, Z, A, B, C], "
            f"got {len(positions)}"
        )
    return positions


@dataclass(frozen=True)
class ForwardKinematicsResult:
    """Tool pose obtained from a set of axis positions."""

    tool_pose: Transform = field(default_factory=Transform.identity)
    axis_positions: tuple[float, ...] = field(default_factory=_zero_positions)
    valid: bool = False


@dataclass(frozen=True)
class InverseKinematicsResult:
    """Axis positions that reach a tool pose, with the pose they produce."""

    axis_positions: tuple[float, ...] = field(default_factory=_zero_positions)
    tool_pose: Transform = field(default_factory=Transform.identity)
    valid: bool = False


class MachineKinematics(ABC):
    """Stateless forward and inverse kinematics of a machine.

    Axis positions are always passed explicitly as six values ordered
    [X, Y, Z, A, B, C]; unused axes are 0.0.
    """

    @abstractmethod
    def axis_config(self) -> AxisConfig:
        """Which axes the machine provides."""

    @abstractmethod
    def axis_limits(self) -> list[tuple[float, float]]:
        """Travel limits (min, max) for each of the six axes."""

    @abstractmethod
    def forward_kinematics(
        self, axis_positions: Sequence[float]
    ) -> ForwardKinematicsResult:
        """Tool pose for the given axis positions."""

    @abstractmethod
    def inverse_kinematics(
        self, target_pose: Transform
    ) -> list[InverseKinematicsResult]:
        """All solutions reaching ``target_pose``; empty if unreachable."""

    def is_pose_reachable(self, target_pose: Transform) -> bool:
        solutions = self.inverse_kinematics(target_pose)
        return bool(solutions) and solutions[0].valid

    @abstractmethod
    def work_envelope(self) -> AABB:
        """Bounding box of all reachable tool positions."""

    @abstractmethod
    def clone(self) -> MachineKinematics:
        """An independent copy of this kinematics object."""

    @abstractmethod
    def kinematics_type(self) -> str:
        """Identifier of the kinematics model."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the configuration is usable."""


def _limits(pair: Sequence[float]) -> tuple[float, float]:
    low, high = pair
    return (float(low), float(high))


def _within(value: float, limits: tuple[float, float]) -> bool:
    return limits[0] <= value <= limits[1]


@dataclass(frozen=True)
class Cartesian3Axis(MachineKinematics):
    """Standard three-axis machine with a fixed, vertical tool.

    Axis positions map one to one onto the tool position; the rotary axes
    are unused.
    """

    x_limits: tuple[float, float] = (-1000.0, 1000.0)
    y_limits: tuple[float, float] = (-1000.0, 1000.0)
    z_limits: tuple[float, float] = (-100.0, 100.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "x_limits", _limits(self.x_limits))
        object.__setattr__(self, "y_limits", _limits(self.y_limits))
        object.__setattr__(self, "z_limits", _limits(self.z_limits))

    def _in_limits(self, x: float, y: float, z: float) -> bool:
        return (
            _within(x, self.x_limits)
            and _within(y, self.y_limits)
            and _within(z, self.z_limits)
        )

    def axis_config(self) -> AxisConfig:
        return AxisConfig(
            has_x=True, has_y=True, has_z=True, has_a=False, has_b=False, has_c=False
        )

    def axis_limits(self) -> list[tuple[float, float]]:
        unused = (0.0, 0.0)
        return [self.x_limits, self.y_limits, self.z_limits, unused, unused, unused]

    def forward_kinematics(
        self, axis_positions: Sequence[float]
    ) -> ForwardKinematicsResult:
        positions = _as_positions(axis_positions)
        x, y, z = positions[Axis.X], positions[Axis.Y], positions[Axis.Z]
        if not self._in_limits(x, y, z):
            return ForwardKinematicsResult(valid=False)
        return ForwardKinematicsResult(
            tool_pose=Transform(Vec3(x, y, z), Quaternion.identity()),
            axis_positions=positions,
            valid=True,
        )

    def inverse_kinematics(
        self, target_pose: Transform
    ) -> list[InverseKinematicsResult]:
        target = target_pose.position
        if not self._in_limits(target.x, target.y, target.z):
            return []
        positions = (target.x, target.y, target.z, 0.0, 0.0, 0.0)
        fk = self.forward_kinematics(positions)
        return [
            InverseKinematicsResult(
                axis_positions=positions, tool_pose=fk.tool_pose, valid=fk.valid
            )
        ]

    def work_envelope(self) -> AABB:
        return AABB(
            Vec3(self.x_limits[0], self.y_limits[0], self.z_limits[0]),
            Vec3(self.x_limits[1], self.y_limits[1], self.z_limits[1]),
        )

    def clone(self) -> Cartesian3Axis:
        return Cartesian3Axis(self.x_limits, self.y_limits, self.z_limits)

    def kinematics_type(self) -> str:
        return "Cartesian3Axis"

    def is_valid(self) -> bool:
        return all(
            low < high for low, high in (self.x_limits, self.y_limits, self.z_limits)
        )