"""Tool changer capabilities."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum


class ToolChangerType(Enum):
    """Kind of tool magazine."""

    FIXED = "Fixed"
    CAROUSEL = "Carousel"
    CHAIN = "Chain"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class ToolChanger:
    """Capacity, change time and accepted holder types of a tool changer.

    A non-positive slot count becomes 0, meaning no changer is present; a
    negative change time falls back to 5 seconds. An empty list of
    supported holders means every holder type is accepted.
    """

    changer_type: ToolChangerType
    max_tool_slots: int
    tool_change_time: float = 5.0
    supported_holders: tuple[Hashable, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        slots = self.max_tool_slots if self.max_tool_slots > 0 else 0
        change_time = self.tool_change_time if self.tool_change_time >= 0.0 else 5.0
        object.__setattr__(self, "max_tool_slots", slots)
        object.__setattr__(self, "tool_change_time", change_time)
        holders: Iterable[Hashable] = self.supported_holders
        object.__setattr__(self, "supported_holders", tuple(holders))

    def type_name(self) -> str:
        return self.changer_type.value

    def supports_holder(self, holder_type: Hashable) -> bool:
        if not self.supported_holders:
            return True
        return holder_type in self.supported_holders

    def has_capacity(self, current_tool_count: int) -> bool:
        """Whether another tool fits beside ``current_tool_count`` loaded ones."""
        return current_tool_count < self.max_tool_slots

    def is_valid(self) -> bool:
        return (
            self.max_tool_slots > 0
            and self.tool_change_time >= 0.0
            and math.isfinite(self.tool_change_time)
        )

    def is_present(self) -> bool:
        """False when the machine has no tool changer (zero slots)."""
        return self.max_tool_slots > 0