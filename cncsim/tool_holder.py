"""How a tool is mounted between the spindle and its tip."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .primitives import AABB, Vec3
from .tool import Tool
from .transform import Transform


@dataclass(frozen=True)
class ToolHolder:
    """Rigid mounting of a tool, giving the offset from spindle to tool tip.

    A non-positive holder length is stored as 0, which makes the holder
    invalid.
    """

    tool: Tool
    holder_length: float
    holder_offset: Vec3 = field(default_factory=Vec3)

    def __post_init__(self) -> None:
        length = self.holder_length if self.holder_length > 0.0 else 0.0
        object.__setattr__(self, "holder_length", length)

    def total_length(self) -> float:
        """Holder length plus the overall tool length."""
        return self.holder_length + self.tool.total_length()

    def compute_tool_tip_pose(self, spindle_pose: Transform) -> Transform:
        """Tool tip pose for the given spindle pose.

        The holder offset is applied in the spindle frame, then the pose is
        moved along the spindle's local -Z by the total length.
        """
        rotation = spindle_pose.rotation
        offset_pose = Transform(spindle_pose.transform_point(self.holder_offset), rotation)
        down = offset_pose.transform_direction(Vec3(0.0, 0.0, -1.0))
        tip = offset_pose.position + down * self.total_length()
        return Transform(tip, rotation)

    def tool_bounding_box(self, spindle_pose: Transform) -> AABB:
        """Tool bounds in world coordinates for the given spindle pose."""
        bounds = self.tool.bounding_box()
        tip_pose = self.compute_tool_tip_pose(spindle_pose)
        a = tip_pose.transform_point(bounds.min)
        b = tip_pose.transform_point(bounds.max)
        return AABB(
            Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z)),
            Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z)),
        )

    def is_valid(self) -> bool:
        return (
            self.tool is not None
            and self.tool.is_valid()
            and self.holder_length > 0.0
            and math.isfinite(self.holder_length)
        )