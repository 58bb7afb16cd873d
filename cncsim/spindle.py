"""Spindle capabilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class SpindleDirection(Enum):
    """Spindle rotation direction."""

    CLOCKWISE = "cw"
    COUNTER_CLOCKWISE = "ccw"


@dataclass(frozen=True)
class Spindle:
    """Speed range, power and default direction of a spindle.

    Invalid values are clamped to 0 and a reversed speed range is swapped.
    """

    max_rpm: float
    min_rpm: float = 0.0
    power: float = 5.0
    direction: SpindleDirection = SpindleDirection.CLOCKWISE

    def __post_init__(self) -> None:
        max_rpm = self.max_rpm if self.max_rpm > 0.0 else 0.0
        min_rpm = self.min_rpm if self.min_rpm >= 0.0 else 0.0
        power = self.power if self.power >= 0.0 else 0.0
        if min_rpm > max_rpm:
            min_rpm, max_rpm = max_rpm, min_rpm
        object.__setattr__(self, "max_rpm", max_rpm)
        object.__setattr__(self, "min_rpm", min_rpm)
        object.__setattr__(self, "power", power)

    def rpm_range(self) -> float:
        return self.max_rpm - self.min_rpm

    def is_rpm_valid(self, rpm: float) -> bool:
        return self.min_rpm <= rpm <= self.max_rpm

    def clamp_rpm(self, rpm: float) -> float:
        return max(self.min_rpm, min(self.max_rpm, rpm))

    def estimated_torque(self, rpm: float) -> float:
        """Torque in Nm from constant power (kW); 0 outside the speed range."""
        if rpm <= 0.0 or not self.is_rpm_valid(rpm):
            return 0.0
        angular_velocity = rpm * 2.0 * math.pi / 60.0
        if angular_velocity > 0.0:
            return self.power * 1000.0 / angular_velocity
        return 0.0

    def is_valid(self) -> bool:
        return (
            self.max_rpm > 0.0
            and self.min_rpm >= 0.0
            and self.min_rpm <= self.max_rpm
            and self.power >= 0.0
            and math.isfinite(self.max_rpm)
            and math.isfinite(self.min_rpm)
            and math.isfinite(self.power)
        )