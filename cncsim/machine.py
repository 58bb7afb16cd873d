"""Complete CNC machine definitions."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .axes import AxisDefinition, AxisType, is_linear_axis, is_rotary_axis
from .primitives import AABB
from .spindle import Spindle
from .tool_changer import ToolChanger


@dataclass(frozen=True, eq=False)
class Machine:
    """Immutable machine definition: axes, spindle, tool changer, envelope.

    Machines compare, sort and hash by their identifier. An empty list of
    supported tool types means every tool type is accepted.
    """

    id: str
    name: str
    axes: Mapping[AxisType, AxisDefinition]
    spindle: Spindle
    tool_changer: ToolChanger
    work_envelope: AABB
    supported_tool_types: tuple[Hashable, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "axes", MappingProxyType(dict(self.axes)))
        types: Iterable[Hashable] = self.supported_tool_types
        object.__setattr__(self, "supported_tool_types", tuple(types))

    def axis(self, axis_type: AxisType) -> AxisDefinition | None:
        """Definition of the given axis, or None if the machine lacks it."""
        return self.axes.get(axis_type)

    def has_axis(self, axis_type: AxisType) -> bool:
        return axis_type in self.axes

    def axis_count(self) -> int:
        return len(self.axes)

    def supports_tool_type(self, tool_type: Hashable) -> bool:
        if not self.supported_tool_types:
            return True
        return tool_type in self.supported_tool_types

    def _axis_counts(self) -> tuple[int, int]:
        linear = sum(1 for t in self.axes if is_linear_axis(t))
        rotary = sum(1 for t in self.axes if is_rotary_axis(t))
        return linear, rotary

    def machine_type(self) -> str:
        """Description based on the number of linear and rotary axes."""
        kinds = {
            (3, 0): "3-Axis",
            (3, 1): "4-Axis",
            (3, 2): "5-Axis",
            (2, 0): "2-Axis",
        }
        return kinds.get(self._axis_counts(), "Custom")

    def is_valid(self) -> bool:
        return (
            bool(self.id)
            and bool(self.name)
            and bool(self.axes)
            and self.spindle.is_valid()
            and self.tool_changer.is_valid()
            and self.work_envelope.is_valid()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Machine):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: Machine) -> bool:
        if not isinstance(other, Machine):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)