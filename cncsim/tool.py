"""Cutting tool categories, geometry and logical tool definitions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .primitives import AABB, ToolType, Vec3


class ToolCategory(Enum):
    """Fundamental categories of cutting tools."""

    END_MILL = "end_mill"
    BALL_END_MILL = "ball_end_mill"
    DRILL = "drill"
    TAP = "tap"
    REAMER = "reamer"
    BORING = "boring"
    FACE_MILL = "face_mill"
    SLOT_MILL = "slot_mill"
    CUSTOM = "custom"


class ToolTipType(Enum):
    """Shape of the tool tip."""

    FLAT = "flat"
    BALL = "ball"
    POINT = "point"
    CHAMFER = "chamfer"
    CUSTOM = "custom"


def _positive_or(value: float, fallback: float) -> float:
    return value if value > 0.0 else fallback


@dataclass(frozen=True)
class ToolGeometry:
    """Physical shape of a cutter, with the origin at the tip and Z up.

    Non-positive dimensions become 0; the overall length is raised to at
    least the flute length and the shank diameter to at least the diameter.
    """

    diameter: float
    flute_length: float
    overall_length: float
    shank_diameter: float
    tip_type: ToolTipType = ToolTipType.FLAT

    def __post_init__(self) -> None:
        diameter = _positive_or(self.diameter, 0.0)
        flute = _positive_or(self.flute_length, 0.0)
        overall = max(_positive_or(self.overall_length, 0.0), flute)
        shank = max(_positive_or(self.shank_diameter, 0.0), diameter)
        object.__setattr__(self, "diameter", diameter)
        object.__setattr__(self, "flute_length", flute)
        object.__setattr__(self, "overall_length", overall)
        object.__setattr__(self, "shank_diameter", shank)

    def shank_length(self) -> float:
        return self.overall_length - self.flute_length

    def radius(self) -> float:
        return self.diameter * 0.5

    def bounding_box(self) -> AABB:
        """Box from (-r, -r, -overall_length) to (r, r, 0)."""
        r = self.radius()
        return AABB(Vec3(-r, -r, -self.overall_length), Vec3(r, r, 0.0))

    def is_valid(self) -> bool:
        dims = (self.diameter, self.flute_length, self.overall_length, self.shank_diameter)
        return (
            all(d > 0.0 for d in dims)
            and self.overall_length >= self.flute_length
            and all(math.isfinite(d) for d in dims)
        )

    def is_ball_tip(self) -> bool:
        return self.tip_type is ToolTipType.BALL

    def is_flat_tip(self) -> bool:
        return self.tip_type is ToolTipType.FLAT

    def is_pointed_tip(self) -> bool:
        return self.tip_type is ToolTipType.POINT

    def tip_radius(self) -> float:
        """Tool radius for ball tips, otherwise 0."""
        return self.radius() if self.is_ball_tip() else 0.0


@dataclass(frozen=True)
class Tool:
    """Immutable tool specification: identity, geometry and safety limits.

    Non-positive limits fall back to 24000 RPM and 10000 units/min.
    """

    id: str
    name: str
    tool_type: ToolType
    geometry: ToolGeometry
    max_rpm: float = 24000.0
    max_feedrate: float = 10000.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "max_rpm", _positive_or(self.max_rpm, 24000.0))
        object.__setattr__(
            self, "max_feedrate", _positive_or(self.max_feedrate, 10000.0)
        )

    def diameter(self) -> float:
        return self.geometry.diameter

    def length(self) -> float:
        """Cutting (flute) length."""
        return self.geometry.flute_length

    def total_length(self) -> float:
        return self.geometry.overall_length

    def shank_diameter(self) -> float:
        return self.geometry.shank_diameter

    def bounding_box(self) -> AABB:
        return self.geometry.bounding_box()

    def is_valid(self) -> bool:
        return (
            bool(self.id)
            and bool(self.name)
            and self.geometry.is_valid()
            and self.max_rpm > 0.0
            and self.max_feedrate > 0.0
        )

    def is_ball_end_mill(self) -> bool:
        return self.tool_type is ToolType.BALL_END_MILL or self.geometry.is_ball_tip()

    def is_end_mill(self) -> bool:
        return self.tool_type in (ToolType.END_MILL, ToolType.BALL_END_MILL)

    def is_drill(self) -> bool:
        return self.tool_type is ToolType.DRILL