"""Structured error values for simulation and machine operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ErrorSeverity(Enum):
    """How serious an error is."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class ErrorCode(IntEnum):
    """Numeric error codes, grouped by subsystem in ranges of a thousand."""

    SUCCESS = 0

    SIMULATION_INVALID_STATE = 1000
    SIMULATION_OUT_OF_BOUNDS = 1001
    SIMULATION_TOOL_COLLISION = 1002
    SIMULATION_MATERIAL_ERROR = 1003
    SIMULATION_STEP_FAILED = 1004
    SIMULATION_INVALID_TOOL = 1005
    SIMULATION_INVALID_MACHINE = 1006

    GEOMETRY_INVALID_TRANSFORM = 2000
    GEOMETRY_INVALID_BOUNDS = 2001
    GEOMETRY_INVALID_OPERATION = 2002

    MATERIAL_GRID_INVALID = 3000
    MATERIAL_GRID_OUT_OF_BOUNDS = 3001
    MATERIAL_GRID_RESOLUTION_ERROR = 3002

    MACHINE_INVALID_POSITION = 4000
    MACHINE_KINEMATICS_ERROR = 4001
    MACHINE_LIMIT_EXCEEDED = 4002

    TOOL_INVALID_GEOMETRY = 5000
    TOOL_INVALID_PARAMETERS = 5001

    INVALID_ARGUMENT = 9000
    INVALID_STATE = 9001
    NOT_IMPLEMENTED = 9002
    UNKNOWN_ERROR = 9999


@dataclass(frozen=True)
class SimError:
    """An error outcome with code, severity, message and recoverability.

    The default instance represents success.
    """

    code: ErrorCode = ErrorCode.SUCCESS
    severity: ErrorSeverity = ErrorSeverity.INFO
    message: str = ""
    recoverable: bool = True

    def is_success(self) -> bool:
        return self.code is ErrorCode.SUCCESS

    def is_error(self) -> bool:
        return self.code is not ErrorCode.SUCCESS

    def is_fatal(self) -> bool:
        return self.severity is ErrorSeverity.FATAL

    @staticmethod
    def success() -> SimError:
        return SimError()

    @staticmethod
    def make(code: ErrorCode, message: str, recoverable: bool = False) -> SimError:
        """Build an error whose severity follows from its code.

        Exceeding a machine limit is a warning; everything else is an error.
        """
        code = ErrorCode(code)
        if code is ErrorCode.MACHINE_LIMIT_EXCEEDED:
            severity = ErrorSeverity.WARNING
        else:
            severity = ErrorSeverity.ERROR
        return SimError(code, severity, message, recoverable)