"""Deterministic simulation clocks that never read the wall clock."""

from __future__ import annotations

import math

_DEFAULT_STEP = 0.001


class SimulationTime:
    """Clock that advances by a fixed step."""

    def __init__(self, fixed_time_step: float = _DEFAULT_STEP) -> None:
        self._fixed_time_step = fixed_time_step if fixed_time_step > 0.0 else _DEFAULT_STEP
        self._accumulated_time = 0.0
        self._step_count = 0

    @property
    def fixed_time_step(self) -> float:
        return self._fixed_time_step

    @fixed_time_step.setter
    def fixed_time_step(self, time_step: float) -> None:
        """Non-positive values are ignored."""
        if time_step > 0.0:
            self._fixed_time_step = time_step

    @property
    def accumulated_time(self) -> float:
        return self._accumulated_time

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def time_delta(self) -> float:
        return self._fixed_time_step

    def step(self) -> None:
        self._accumulated_time += self._fixed_time_step
        self._step_count += 1

    def step_n(self, steps: int) -> None:
        self._accumulated_time += self._fixed_time_step * float(steps)
        self._step_count += steps

    def reset(self) -> None:
        self._accumulated_time = 0.0
        self._step_count = 0

    def is_valid(self) -> bool:
        return (
            self._fixed_time_step > 0.0
            and math.isfinite(self._accumulated_time)
            and math.isfinite(self._fixed_time_step)
        )

    def steps_for_duration(self, duration: float) -> int:
        """Number of steps covering ``duration``, rounded up; never negative."""
        if self._fixed_time_step <= 0.0:
            return 0
        return max(0, math.ceil(duration / self._fixed_time_step))

    def duration_for_steps(self, steps: int) -> float:
        return self._fixed_time_step * float(steps)


class VariableTimeStep:
    """Clock whose step can change between advances."""

    def __init__(self, initial_time_step: float = _DEFAULT_STEP) -> None:
        self._current_time_step = (
            initial_time_step if initial_time_step > 0.0 else _DEFAULT_STEP
        )
        self._accumulated_time = 0.0
        self._step_count = 0

    @property
    def current_time_step(self) -> float:
        return self._current_time_step

    @current_time_step.setter
    def current_time_step(self, time_step: float) -> None:
        """Non-positive values are ignored."""
        if time_step > 0.0:
            self._current_time_step = time_step

    @property
    def accumulated_time(self) -> float:
        return self._accumulated_time

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def time_delta(self) -> float:
        return self._current_time_step

    def step(self) -> None:
        self._accumulated_time += self._current_time_step
        self._step_count += 1

    def step_by(self, delta_time: float) -> None:
        """Advance by ``delta_time``; non-positive deltas are ignored."""
        if delta_time > 0.0:
            self._accumulated_time += delta_time
            self._step_count += 1

    def reset(self) -> None:
        self._accumulated_time = 0.0
        self._step_count = 0

    def is_valid(self) -> bool:
        return (
            self._current_time_step > 0.0
            and math.isfinite(self._accumulated_time)
            and math.isfinite(self._current_time_step)
        )