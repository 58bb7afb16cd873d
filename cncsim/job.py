"""Manufacturing job definitions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from .machine import Machine
from .parts import Stock, TargetModel
from .tool import Tool


class JobStatus(Enum):
    """Progress of a job through planning and output generation."""

    DRAFT = "draft"
    PLANNED = "planned"
    TOOLPATHS_READY = "toolpaths_ready"
    GCODE_READY = "gcode_ready"
    SIMULATED = "simulated"
    READY = "ready"
    ERROR = "error"


@dataclass
class JobMetadata:
    """Descriptive information about a job."""

    author: str = ""
    description: str = ""
    version: str = ""
    tags: list[str] = field(default_factory=list)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Job:
    """A job turning stock into a finished part on a machine.

    Inputs are fixed at construction; outputs (process plan, toolpaths,
    G-code) are attached later and update the modification time.
    """

    def __init__(
        self,
        id: str,
        name: str,
        machine: Machine | None,
        tools: Iterable[Tool],
        stock: Stock | None,
        target_model: TargetModel | None,
    ) -> None:
        self._id = id
        self._name = name
        self._machine = machine
        self._tools = tuple(tools)
        self._stock = stock
        self._target_model = target_model
        self.status = JobStatus.DRAFT
        self.metadata = JobMetadata()
        self._process_plan: Any = None
        self._toolpaths: tuple[Any, ...] = ()
        self._gcode: Any = None
        self._created_at = _now()
        self._modified_at = self._created_at

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def machine(self) -> Machine | None:
        return self._machine

    @property
    def tools(self) -> tuple[Tool, ...]:
        return self._tools

    @property
    def stock(self) -> Stock | None:
        return self._stock

    @property
    def target_model(self) -> TargetModel | None:
        return self._target_model

    @property
    def process_plan(self) -> Any:
        """The process plan, or None if not generated yet."""
        return self._process_plan

    @property
    def toolpaths(self) -> tuple[Any, ...]:
        """Generated toolpaths; empty if not generated yet."""
        return self._toolpaths

    @property
    def gcode(self) -> Any:
        """The G-code program, or None if not generated yet."""
        return self._gcode

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def modified_at(self) -> datetime:
        return self._modified_at

    def set_process_plan(self, plan: Any) -> None:
        self._process_plan = plan
        self.touch()

    def set_toolpaths(self, toolpaths: Iterable[Any]) -> None:
        self._toolpaths = tuple(toolpaths)
        self.touch()

    def set_gcode(self, gcode: Any) -> None:
        self._gcode = gcode
        self.touch()

    def validate(self) -> bool:
        return not self.validation_errors()

    def validation_errors(self) -> list[str]:
        """Messages describing missing inputs; empty when the job is complete."""
        errors = []
        if self._machine is None:
            errors.append("Machine is not set")
        if not self._tools:
            errors.append("No tools specified")
        if self._stock is None:
            errors.append("Stock is not set")
        if self._target_model is None:
            errors.append("Target model is not set")
        return errors

    def touch(self) -> None:
        """Record a modification now."""
        self._modified_at = _now()