"""Unit metadata for toolpath operations."""

from __future__ import annotations

from dataclasses import dataclass

from .primitives import Unit


@dataclass(frozen=True)
class ToolpathUnits:
    """Explicit unit information; performs no conversion."""

    linear_unit: Unit = Unit.MILLIMETER

    def feedrate_unit(self) -> str:
        return "mm/min" if self.is_metric() else "in/min"

    def spindle_speed_unit(self) -> str:
        return "RPM"

    def is_metric(self) -> bool:
        return self.linear_unit is Unit.MILLIMETER

    def is_imperial(self) -> bool:
        return self.linear_unit is Unit.INCH

    def unit_name(self) -> str:
        return "mm" if self.is_metric() else "in"