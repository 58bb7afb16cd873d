"""Named coordinate frames relative to a parent frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .primitives import Vec3
from .transform import Transform


@dataclass
class CoordinateFrame:
    """A coordinate system with an origin and a transform to its parent.

    Machine, workpiece and tool frames are all described this way; a work
    offset such as G54 is the transform from the workpiece frame to the
    machine frame.
    """

    name: str
    origin: Vec3 = field(default_factory=Vec3)
    transform: Transform = field(default_factory=Transform.identity)

    def to_parent(self, point: Vec3) -> Vec3:
        return self.transform.transform_point(point)

    def from_parent(self, point: Vec3) -> Vec3:
        return self.transform.inverse().transform_point(point)

    def x_axis(self) -> Vec3:
        return self.transform.transform_direction(Vec3(1.0, 0.0, 0.0))

    def y_axis(self) -> Vec3:
        return self.transform.transform_direction(Vec3(0.0, 1.0, 0.0))

    def z_axis(self) -> Vec3:
        return self.transform.transform_direction(Vec3(0.0, 0.0, 1.0))

    def is_valid(self) -> bool:
        return bool(self.name) and all(math.isfinite(c) for c in self.origin)