"""Swept volume of a tool moving between two poses."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .primitives import AABB, Vec3
from .tool import Tool
from .transform import Quaternion, Transform


def slerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    """Spherical linear interpolation along the shorter arc."""
    dot = q1.w * q2.w + q1.x * q2.x + q1.y * q2.y + q1.z * q2.z
    if dot < 0.0:
        q2 = Quaternion(-q2.w, -q2.x, -q2.y, -q2.z)
        dot = -dot

    if dot > 0.9995:
        return Quaternion(
            q1.w + (q2.w - q1.w) * t,
            q1.x + (q2.x - q1.x) * t,
            q1.y + (q2.y - q1.y) * t,
            q1.z + (q2.z - q1.z) * t,
        ).normalized()

    theta = math.acos(dot)
    sin_theta = math.sin(theta)
    w1 = math.sin((1.0 - t) * theta) / sin_theta
    w2 = math.sin(t * theta) / sin_theta
    return Quaternion(
        q1.w * w1 + q2.w * w2,
        q1.x * w1 + q2.x * w2,
        q1.y * w1 + q2.y * w2,
        q1.z * w1 + q2.z * w2,
    ).normalized()


@dataclass(frozen=True)
class ToolSweep:
    """A tool moving from ``start_transform`` to ``end_transform``.

    A ``resolution_hint`` of 0.0 means a default based on the tool size.
    """

    tool: Tool
    start_transform: Transform
    end_transform: Transform
    resolution_hint: float = 0.0

    def bounding_box(self) -> AABB:
        """Conservative box around the tool bounds at both ends of the move."""
        bounds = self.tool.bounding_box()
        corners = [
            pose.transform_point(p)
            for pose in (self.start_transform, self.end_transform)
            for p in (bounds.min, bounds.max)
        ]
        return AABB(
            Vec3(
                min(c.x for c in corners),
                min(c.y for c in corners),
                min(c.z for c in corners),
            ),
            Vec3(
                max(c.x for c in corners),
                max(c.y for c in corners),
                max(c.z for c in corners),
            ),
        )

    def is_translation_only(self) -> bool:
        a = self.start_transform.rotation
        b = self.end_transform.rotation
        dot = a.w * b.w + a.x * b.x + a.y * b.y + a.z * b.z
        return abs(dot - 1.0) < 1e-6

    def distance(self) -> float:
        """Straight-line distance between the start and end positions."""
        return (self.end_transform.position - self.start_transform.position).length()

    def transform_at(self, t: float) -> Transform:
        """Pose at parameter ``t``, clamped to [0, 1]."""
        t = max(0.0, min(1.0, t))
        start = self.start_transform.position
        end = self.end_transform.position
        position = start + (end - start) * t
        rotation = slerp(self.start_transform.rotation, self.end_transform.rotation, t)
        return Transform(position, rotation)