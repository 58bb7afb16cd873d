"""Raw stock and target part definitions."""

from __future__ import annotations

import copy
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from itertools import product

from .primitives import AABB, MaterialProperties, Unit, Vec3


class StockOrigin(Enum):
    """Where the stock coordinate origin sits on the stock."""

    BOTTOM_CENTER = "bottom_center"
    BOTTOM_CORNER = "bottom_corner"
    CENTER = "center"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Stock:
    """Raw material before machining.

    ``size`` is ordered X (width), Y (length), Z (height). For a custom
    origin, ``custom_origin`` is the origin's position measured from the
    bottom front-left corner. An empty ``initial_geometry_path`` means
    rectangular stock.
    """

    id: str
    name: str
    size: Vec3
    origin: StockOrigin = StockOrigin.BOTTOM_CORNER
    custom_origin: Vec3 = field(default_factory=Vec3)
    material: MaterialProperties = field(default_factory=MaterialProperties)
    units: Unit = Unit.MILLIMETER
    recommended_voxel_size: float = 1.0
    initial_geometry_path: str = ""

    @property
    def density(self) -> float:
        return self.material.density

    def dimensions(self) -> Vec3:
        return self.size

    def _origin_offset(self) -> Vec3:
        w, l, h = self.size.x, self.size.y, self.size.z
        offsets = {
            StockOrigin.BOTTOM_CORNER: Vec3(),
            StockOrigin.BOTTOM_CENTER: Vec3(w * 0.5, l * 0.5, 0.0),
            StockOrigin.CENTER: Vec3(w * 0.5, l * 0.5, h * 0.5),
            StockOrigin.CUSTOM: self.custom_origin,
        }
        return offsets[self.origin]

    def bounding_box(self) -> AABB:
        """Stock extent in the stock coordinate system."""
        offset = self._origin_offset()
        return AABB(Vec3() - offset, self.size - offset)

    def has_custom_geometry(self) -> bool:
        return bool(self.initial_geometry_path)

    def clone(self) -> Stock:
        return copy.deepcopy(self)


class Alignment(Enum):
    """How the target model is placed in the stock coordinate system."""

    STOCK_ORIGIN = "stock_origin"
    STOCK_CENTER = "stock_center"
    MODEL_ORIGIN = "model_origin"
    CUSTOM = "custom"


@dataclass
class ModelMetadata:
    """Descriptive information about a model."""

    author: str = ""
    description: str = ""
    version: str = ""
    tags: list[str] = field(default_factory=list)


_IDENTITY_4X4 = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _box_of(points: Sequence[Vec3]) -> AABB:
    return AABB(
        Vec3(min(p.x for p in points), min(p.y for p in points), min(p.z for p in points)),
        Vec3(max(p.x for p in points), max(p.y for p in points), max(p.z for p in points)),
    )


@dataclass(frozen=True)
class TargetModel:
    """The desired finished part.

    ``bounds`` is the model's box in its own coordinates. The model is scaled
    about its origin by ``scale`` before alignment:

    - STOCK_ORIGIN puts the model's minimum corner on the stock origin;
    - STOCK_CENTER puts the model's centre on the stock origin;
    - MODEL_ORIGIN keeps the model's own origin;
    - CUSTOM applies ``custom_transform``, a row-major 4x4 affine matrix.
    """

    id: str
    name: str
    source_path: str
    format: str
    bounds: AABB
    alignment: Alignment = Alignment.MODEL_ORIGIN
    custom_transform: tuple[float, ...] = _IDENTITY_4X4
    units: Unit = Unit.MILLIMETER
    scale: float = 1.0
    metadata: ModelMetadata = field(default_factory=ModelMetadata)

    def __post_init__(self) -> None:
        matrix = tuple(float(v) for v in self.custom_transform)
        if len(matrix) != 16:
            raise ValueError(
                f"custom transform needs 16 values (4x4 row-major), got {len(matrix)}"
            )
        object.__setattr__(self, "custom_transform", matrix)

    def bounding_box(self) -> AABB:
        return self.bounds

    def _scaled_bounds(self) -> AABB:
        return _box_of([self.bounds.min * self.scale, self.bounds.max * self.scale])

    def _apply_custom(self, point: Vec3) -> Vec3:
        m = self.custom_transform
        x, y, z = point.x, point.y, point.z
        return Vec3(
            m[0] * x + m[1] * y + m[2] * z + m[3],
            m[4] * x + m[5] * y + m[6] * z + m[7],
            m[8] * x + m[9] * y + m[10] * z + m[11],
        )

    def bounding_box_in_stock_coords(self) -> AABB:
        """Model box after scaling and alignment, in stock coordinates."""
        box = self._scaled_bounds()
        if self.alignment is Alignment.STOCK_ORIGIN:
            return AABB(box.min - box.min, box.max - box.min)
        if self.alignment is Alignment.STOCK_CENTER:
            centre = box.center()
            return AABB(box.min - centre, box.max - centre)
        if self.alignment is Alignment.CUSTOM:
            corners = [
                self._apply_custom(Vec3(x, y, z))
                for x, y, z in product(
                    (box.min.x, box.max.x), (box.min.y, box.max.y), (box.min.z, box.max.z)
                )
            ]
            return _box_of(corners)
        return box

    def is_valid(self) -> bool:
        return (
            bool(self.id)
            and bool(self.name)
            and bool(self.source_path)
            and self.bounds.is_valid()
            and self.scale > 0.0
            and math.isfinite(self.scale)
            and all(math.isfinite(v) for v in self.custom_transform)
        )

    def clone(self) -> TargetModel:
        return copy.deepcopy(self)