"""Tool mounting on a machine and the combined machine-with-tool view."""

from __future__ import annotations

from collections.abc import Sequence

from .kinematics import InverseKinematicsResult, MachineKinematics
from .primitives import AABB, AxisConfig, Vec3
from .tool import Tool
from .tool_holder import ToolHolder
from .transform import Transform


class ToolMount:
    """Holds at most one tool holder; a machine may run without a tool."""

    def __init__(self) -> None:
        self._holder: ToolHolder | None = None

    @property
    def holder(self) -> ToolHolder | None:
        """The mounted holder, or None."""
        return self._holder

    def attach_tool(self, holder: ToolHolder | None) -> None:
        """Mount ``holder``, replacing any current one; invalid holders are ignored."""
        if holder is not None and holder.is_valid():
            self._holder = holder

    def detach_tool(self) -> None:
        self._holder = None

    def has_tool(self) -> bool:
        return self._holder is not None

    def tool(self) -> Tool | None:
        return self._holder.tool if self._holder is not None else None

    def compute_tool_tip_pose(self, spindle_pose: Transform) -> Transform:
        """Tool tip pose, or the spindle pose itself when nothing is mounted."""
        if self._holder is not None:
            return self._holder.compute_tool_tip_pose(spindle_pose)
        return spindle_pose

    def tool_bounding_box(self, spindle_pose: Transform) -> AABB:
        """Tool bounds in world coordinates; a zero box when nothing is mounted."""
        if self._holder is not None:
            return self._holder.tool_bounding_box(spindle_pose)
        return AABB(Vec3(), Vec3())

    def is_valid(self) -> bool:
        return self._holder is None or self._holder.is_valid()


class MachineWithTool:
    """Machine kinematics combined with a tool mount.

    Forward kinematics gives the spindle pose; the mount turns it into the
    tool tip pose.
    """

    def __init__(self, kinematics: MachineKinematics | None) -> None:
        self._kinematics = kinematics
        self._tool_mount = ToolMount()

    @property
    def kinematics(self) -> MachineKinematics | None:
        return self._kinematics

    @property
    def tool_mount(self) -> ToolMount:
        return self._tool_mount

    def has_tool(self) -> bool:
        return self._tool_mount.has_tool()

    def tool(self) -> Tool | None:
        return self._tool_mount.tool()

    def compute_tool_tip_pose(self, axis_positions: Sequence[float]) -> Transform:
        """Tool tip pose for the axis positions; identity if unreachable."""
        if self._kinematics is None:
            return Transform.identity()
        fk = self._kinematics.forward_kinematics(axis_positions)
        if not fk.valid:
            return Transform.identity()
        return self._tool_mount.compute_tool_tip_pose(fk.tool_pose)

    def compute_inverse_kinematics(
        self, target_tool_tip_pose: Transform
    ) -> list[InverseKinematicsResult]:
        """Axis solutions for a tool tip pose, allowing for the mounted holder."""
        if self._kinematics is None:
            return []

        target_spindle_pose = target_tool_tip_pose
        holder = self._tool_mount.holder
        if holder is not None:
            up = target_tool_tip_pose.transform_direction(Vec3(0.0, 0.0, 1.0))
            spindle_pos = target_tool_tip_pose.position - up * holder.total_length()
            offset_pos = spindle_pos - holder.holder_offset
            target_spindle_pose = Transform(offset_pos, target_tool_tip_pose.rotation)

        return self._kinematics.inverse_kinematics(target_spindle_pose)

    def is_tool_tip_pose_reachable(self, target_tool_tip_pose: Transform) -> bool:
        solutions = self.compute_inverse_kinematics(target_tool_tip_pose)
        return bool(solutions) and solutions[0].valid

    def work_envelope(self) -> AABB:
        if self._kinematics is not None:
            return self._kinematics.work_envelope()
        return AABB()

    def axis_config(self) -> AxisConfig:
        if self._kinematics is not None:
            return self._kinematics.axis_config()
        return AxisConfig()

    def is_valid(self) -> bool:
        return (
            self._kinematics is not None
            and self._kinematics.is_valid()
            and self._tool_mount.is_valid()
        )