"""Basic value types shared across the simulation core."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum


class Unit(Enum):
    """Measurement units for the CNC system."""

    MILLIMETER = "mm"
    INCH = "in"


class Axis(IntEnum):
    """CNC axis identifiers; the value is the index in a six-axis array."""

    X = 0
    Y = 1
    Z = 2
    A = 3
    B = 4
    C = 5


class ToolType(Enum):
    """Tool type classification."""

    END_MILL = "end_mill"
    BALL_END_MILL = "ball_end_mill"
    DRILL = "drill"
    TAP = "tap"
    REAMER = "reamer"
    BORING = "boring"
    FACE_MILL = "face_mill"
    SLOT_MILL = "slot_mill"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Vec3:
    """Three-component vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length > 0.0:
            return Vec3(self.x / length, self.y / length, self.z / length)
        return Vec3()


@dataclass(frozen=True)
class AABB:
    """Axis-aligned bounding box."""

    min: Vec3 = field(default_factory=Vec3)
    max: Vec3 = field(default_factory=Vec3)

    def is_valid(self) -> bool:
        return (
            self.min.x <= self.max.x
            and self.min.y <= self.max.y
            and self.min.z <= self.max.z
        )

    def center(self) -> Vec3:
        return Vec3(
            (self.min.x + self.max.x) * 0.5,
            (self.min.y + self.max.y) * 0.5,
            (self.min.z + self.max.z) * 0.5,
        )

    def size(self) -> Vec3:
        return self.max - self.min

    def contains(self, point: Vec3) -> bool:
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
            and self.min.z <= point.z <= self.max.z
        )


@dataclass
class AxisConfig:
    """Which axes a machine provides."""

    has_x: bool = True
    has_y: bool = True
    has_z: bool = True
    has_a: bool = False
    has_b: bool = False
    has_c: bool = False

    def _flags(self) -> dict[Axis, bool]:
        return {
            Axis.X: self.has_x,
            Axis.Y: self.has_y,
            Axis.Z: self.has_z,
            Axis.A: self.has_a,
            Axis.B: self.has_b,
            Axis.C: self.has_c,
        }

    def axis_count(self) -> int:
        return sum(self._flags().values())

    def has_axis(self, axis: Axis) -> bool:
        return self._flags().get(Axis(axis), False)


def _six_zeros() -> list[float]:
    return [0.0] * 6


@dataclass
class ControllerLimits:
    """Controller limits for feed rates and accelerations.

    Per-axis entries of 0.0 mean the global limit applies.
    """

    max_feed_rate: float = 1000.0
    max_rapid_rate: float = 10000.0
    max_acceleration: float = 1000.0
    max_jerk: float = 100.0
    max_feed_rate_per_axis: list[float] = field(default_factory=_six_zeros)
    max_accel_per_axis: list[float] = field(default_factory=_six_zeros)


@dataclass
class MaterialProperties:
    """Physical description of a stock material."""

    name: str = ""
    density: float = 0.0
    hardness: float = 0.0
    category: str = ""