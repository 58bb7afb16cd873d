"""Axis types and per-axis machine definitions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class AxisType(Enum):
    """Fundamental axis types of a CNC machine."""

    X = 0
    Y = 1
    Z = 2
    A = 3
    B = 4
    C = 5
    CUSTOM = 6


_LINEAR = frozenset({AxisType.X, AxisType.Y, AxisType.Z})
_ROTARY = frozenset({AxisType.A, AxisType.B, AxisType.C})


def is_linear_axis(axis_type: AxisType) -> bool:
    return axis_type in _LINEAR


def is_rotary_axis(axis_type: AxisType) -> bool:
    return axis_type in _ROTARY


@dataclass(frozen=True)
class AxisDefinition:
    """Travel limits and dynamics of one machine axis.

    Limits given in the wrong order are swapped; non-positive velocity and
    acceleration become 0, a non-positive resolution becomes 0.001.
    """

    axis_type: AxisType
    min_position: float
    max_position: float
    max_velocity: float
    max_acceleration: float
    resolution: float = 0.001

    def __post_init__(self) -> None:
        if self.min_position > self.max_position:
            low, high = self.max_position, self.min_position
            object.__setattr__(self, "min_position", low)
            object.__setattr__(self, "max_position", high)
        if not self.max_velocity > 0.0:
            object.__setattr__(self, "max_velocity", 0.0)
        if not self.max_acceleration > 0.0:
            object.__setattr__(self, "max_acceleration", 0.0)
        if not self.resolution > 0.0:
            object.__setattr__(self, "resolution", 0.001)

    def travel_range(self) -> float:
        return self.max_position - self.min_position

    def is_position_valid(self, position: float) -> bool:
        return self.min_position <= position <= self.max_position

    def clamp_position(self, position: float) -> float:
        return max(self.min_position, min(self.max_position, position))

    def is_linear(self) -> bool:
        return is_linear_axis(self.axis_type)

    def is_rotary(self) -> bool:
        return is_rotary_axis(self.axis_type)

    def is_valid(self) -> bool:
        values = (
            self.min_position,
            self.max_position,
            self.max_velocity,
            self.max_acceleration,
            self.resolution,
        )
        return (
            self.min_position < self.max_position
            and self.max_velocity > 0.0
            and self.max_acceleration > 0.0
            and self.resolution > 0.0
            and all(math.isfinite(v) for v in values)
        )