"""Quaternions and rigid transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .primitives import Vec3


@dataclass(frozen=True)
class Quaternion:
    """Rotation as (w, x, y, z), w being the scalar part."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def identity() -> Quaternion:
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about a normalized ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        return Quaternion(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    def magnitude(self) -> float:
        return math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Quaternion:
        """Unit quaternion, or identity if the magnitude is zero."""
        mag = self.magnitude()
        if mag > 0.0:
            return Quaternion(self.w / mag, self.x / mag, self.y / mag, self.z / mag)
        return Quaternion.identity()

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def __mul__(self, other: Quaternion) -> Quaternion:
        w, x, y, z = self.w, self.x, self.y, self.z
        return Quaternion(
            w * other.w - x * other.x - y * other.y - z * other.z,
            w * other.x + x * other.w + y * other.z - z * other.y,
            w * other.y - x * other.z + y * other.w + z * other.x,
            w * other.z + x * other.y - y * other.x + z * other.w,
        )

    def rotate(self, v: Vec3) -> Vec3:
        result = self * Quaternion(0.0, v.x, v.y, v.z) * self.conjugate()
        return Vec3(result.x, result.y, result.z)


@dataclass(frozen=True)
class Transform:
    """Rigid transform: rotation followed by translation.

    ``a * b`` applies ``b`` first, then ``a``. The rotation is always stored
    normalized.
    """

    position: Vec3 = field(default_factory=Vec3)
    rotation: Quaternion = field(default_factory=Quaternion)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rotation", self.rotation.normalized())

    def transform_point(self, point: Vec3) -> Vec3:
        return self.position + self.rotation.rotate(point)

    def transform_direction(self, direction: Vec3) -> Vec3:
        return self.rotation.rotate(direction)

    def inverse(self) -> Transform:
        inv_rot = self.rotation.conjugate()
        p = self.position
        inv_pos = inv_rot.rotate(Vec3(-p.x, -p.y, -p.z))
        return Transform(inv_pos, inv_rot)

    def __mul__(self, other: Transform) -> Transform:
        return Transform(
            self.transform_point(other.position), self.rotation * other.rotation
        )

    @staticmethod
    def identity() -> Transform:
        return Transform()

    @staticmethod
    def from_translation(translation: Vec3) -> Transform:
        return Transform(translation)

    @staticmethod
    def from_rotation(rotation: Quaternion) -> Transform:
        return Transform(Vec3(), rotation)

    @staticmethod
    def from_position_and_axis_angle(
        position: Vec3, axis: Vec3, angle: float
    ) -> Transform:
        return Transform(position, Quaternion.from_axis_angle(axis.normalized(), angle))