"""Reproducible randomness and state hashing for simulations."""

from __future__ import annotations

import struct
from collections.abc import Iterable

from .primitives import Vec3

_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211
_LCG_MULTIPLIER = 1664525
_LCG_INCREMENT = 1013904223


class DeterministicRNG:
    """64-bit linear congruential generator; seed 0 is treated as 1."""

    def __init__(self, seed: int = 0) -> None:
        self.state = seed

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, seed: int) -> None:
        seed &= _MASK64
        self._state = seed if seed else 1

    def next(self) -> int:
        """Advance and return the next value in [0, 2**64 - 1]."""
        self._state = (self._state * _LCG_MULTIPLIER + _LCG_INCREMENT) & _MASK64
        return self._state

    def next_double(self, low: float = 0.0, high: float = 1.0) -> float:
        """Next value scaled into [low, high]."""
        fraction = self.next() / float(_MASK64)
        return low + (high - low) * fraction

    def reset(self, seed: int) -> None:
        self.state = seed


def hash_u64(value: int) -> int:
    """FNV-1a step over a single 64-bit value."""
    return ((_FNV_OFFSET ^ (value & _MASK64)) * _FNV_PRIME) & _MASK64


def hash_float(value: float) -> int:
    """Hash a float by its IEEE-754 bit pattern."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", value))
    return hash_u64(bits)


def combine_hashes(h1: int, h2: int) -> int:
    return h1 ^ ((h2 + 0x9E3779B9 + ((h1 << 6) & _MASK64) + (h1 >> 2)) & _MASK64)


def hash_vec3(v: Vec3) -> int:
    h = hash_float(v.x)
    h = combine_hashes(h, hash_float(v.y))
    return combine_hashes(h, hash_float(v.z))


def hash_value(value: int | float | Vec3) -> int:
    """Hash an integer, float or Vec3 with the matching function."""
    if isinstance(value, Vec3):
        return hash_vec3(value)
    if isinstance(value, float):
        return hash_float(value)
    if isinstance(value, int):
        return hash_u64(value)
    raise TypeError(f"cannot hash value of type {type(value).__name__}")


def hash_range(values: Iterable[int | float | Vec3]) -> int:
    """Combined hash of a sequence of values."""
    h = _FNV_OFFSET
    for value in values:
        h = combine_hashes(h, hash_value(value))
    return h


class ReproducibilityGuard:
    """Tracks a seed that advances deterministically with each step."""

    def __init__(self, seed: int = 0) -> None:
        self._initial_seed = seed & _MASK64
        self._current_seed = self._initial_seed
        self._step_count = 0

    @property
    def initial_seed(self) -> int:
        return self._initial_seed

    @property
    def current_seed(self) -> int:
        return self._current_seed

    @property
    def step_count(self) -> int:
        return self._step_count

    def step(self) -> None:
        self._step_count += 1
        self._current_seed = (self._initial_seed + self._step_count) & _MASK64

    def reset(self, seed: int | None = None) -> None:
        """Return to step zero, optionally with a new initial seed."""
        if seed is not None:
            self._initial_seed = seed & _MASK64
        self._current_seed = self._initial_seed
        self._step_count = 0

    def rng(self) -> DeterministicRNG:
        return DeterministicRNG(self._current_seed)

    def verify(self, expected_seed: int, expected_step_count: int) -> bool:
        return (
            self._current_seed == expected_seed
            and self._step_count == expected_step_count
        )