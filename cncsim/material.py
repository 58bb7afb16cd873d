"""Representations of the material that remains during machining."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from itertools import product

from .primitives import AABB, Vec3


class MaterialGrid(ABC):
    """Material occupancy in 3D space, supporting boolean removal."""

    @abstractmethod
    def is_occupied(self, point: Vec3) -> bool:
        """Whether material is present at ``point``."""

    def is_empty(self, point: Vec3) -> bool:
        return not self.is_occupied(point)

    @abstractmethod
    def remove_region(self, region: AABB) -> bool:
        """Remove material inside ``region``; True if anything was removed."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """Extent of the grid."""

    @abstractmethod
    def resolution(self) -> float:
        """Smallest representable unit size."""

    @abstractmethod
    def remaining_volume(self) -> float:
        """Total volume of material still present."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the grid is usable."""

    @abstractmethod
    def clone(self) -> MaterialGrid:
        """An independent deep copy."""

    @abstractmethod
    def grid_type(self) -> str:
        """Identifier of the representation."""


class VoxelGrid(MaterialGrid):
    """Material stored as a regular grid of cubic voxels, initially full.

    Voxels on the far faces are clipped to the bounds. A voxel is removed
    when the centre of its (clipped) cell lies inside the removal region.
    """

    def __init__(self, bounds: AABB, resolution: float) -> None:
        self._bounds = bounds
        self._resolution = float(resolution)
        self._removed: set[tuple[int, int, int]] = set()
        self._dims: tuple[int, int, int] = (0, 0, 0)
        extents = tuple(bounds.size())
        if self.is_valid() and all(math.isfinite(v) for v in (*extents, *bounds.min)):
            nx, ny, nz = (max(1, math.ceil(s / self._resolution)) for s in extents)
            self._dims = (nx, ny, nz)

    def _has_voxels(self) -> bool:
        return all(self._dims)

    def _cell(self, axis: int, index: int) -> tuple[float, float]:
        origin = tuple(self._bounds.min)[axis]
        size = tuple(self._bounds.size())[axis]
        start = index * self._resolution
        end = min((index + 1) * self._resolution, size)
        return origin + start, origin + end

    def _index(self, axis: int, value: float) -> int:
        origin = tuple(self._bounds.min)[axis]
        index = int((value - origin) / self._resolution)
        return max(0, min(self._dims[axis] - 1, index))

    def _axis_hits(self, axis: int, low: float, high: float) -> list[int]:
        bmin = tuple(self._bounds.min)[axis]
        bmax = tuple(self._bounds.max)[axis]
        low, high = max(low, bmin), min(high, bmax)
        if low > high:
            return []
        first = max(0, math.floor((low - bmin) / self._resolution) - 1)
        last = min(self._dims[axis] - 1, math.floor((high - bmin) / self._resolution) + 1)
        hits = []
        for index in range(first, last + 1):
            start, end = self._cell(axis, index)
            if low <= (start + end) * 0.5 <= high:
                hits.append(index)
        return hits

    def is_occupied(self, point: Vec3) -> bool:
        if not self._has_voxels() or not self._bounds.contains(point):
            return False
        key = (self._index(0, point.x), self._index(1, point.y), self._index(2, point.z))
        return key not in self._removed

    def remove_region(self, region: AABB) -> bool:
        if not self._has_voxels() or not region.is_valid():
            return False
        ranges = [
            self._axis_hits(axis, low, high)
            for axis, (low, high) in enumerate(zip(region.min, region.max))
        ]
        removed_any = False
        for key in product(*ranges):
            if key not in self._removed:
                self._removed.add(key)
                removed_any = True
        return removed_any

    def bounding_box(self) -> AABB:
        return self._bounds

    def resolution(self) -> float:
        return self._resolution

    def _cell_volume(self, key: tuple[int, int, int]) -> float:
        volume = 1.0
        for axis, index in enumerate(key):
            start, end = self._cell(axis, index)
            volume *= end - start
        return volume

    def remaining_volume(self) -> float:
        if not self._has_voxels():
            return 0.0
        size = self._bounds.size()
        total = size.x * size.y * size.z
        removed = sum(self._cell_volume(key) for key in self._removed)
        return max(0.0, total - removed)

    def is_valid(self) -> bool:
        return self._bounds.is_valid() and self._resolution > 0.0

    def clone(self) -> VoxelGrid:
        copy = VoxelGrid(self._bounds, self._resolution)
        copy._removed = set(self._removed)
        return copy

    def grid_type(self) -> str:
        return "VoxelGrid"