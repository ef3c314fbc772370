"""Renderer-facing output models."""

from __future__ import annotations
from collections import Counter
from enum import Enum
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field

from .geometry import Point3D, Size3D, Rotation, UV, IDENTITY


class PrimitiveRole(str, Enum):
    SLAB = "slab"
    COLUMN = "column"
    RAFTER = "rafter"
    KNEE_BRACE = "knee_brace"
    EAVE_BEAM = "eave_beam"
    RIDGE_BEAM = "ridge_beam"
    PURLIN = "purlin"
    GIRT = "girt"
    WALL_PANEL = "wall_panel"
    END_WALL = "end_wall"
    ROOF_PANEL = "roof_panel"
    RIDGE_CAP = "ridge_cap"
    RIDGE_VENT = "ridge_vent"
    CUPOLA = "cupola"
    TRIM = "trim"
    WAINSCOT = "wainscot"
    OPENING = "opening"
    OPENING_HIT_REGION = "opening_hit_region"
    OPENING_GLASS = "opening_glass"
    OPENING_SECTION = "opening_section"
    SELECTION_OUTLINE = "selection_outline"
    DRAG_INDICATOR = "drag_indicator"


class Layer(str, Enum):
    """Visibility layer a primitive belongs to."""
    FOUNDATION = "foundation"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    WALLS = "walls"
    ROOF = "roof"


class Material(str, Enum):
    """Material slot; the renderer resolves colour and finish."""
    STEEL = "steel"
    CONCRETE = "concrete"
    ROOF = "roof"
    WALL = "wall"
    TRIM = "trim"
    WAINSCOT = "wainscot"
    VENT = "vent"
    DOOR = "door"
    OVERHEAD_DOOR = "overhead_door"
    GLASS = "glass"
    DOOR_SECTION = "door_section"
    HIGHLIGHT = "highlight"


class _PrimitiveBase(BaseModel):
    role: PrimitiveRole
    layer: Layer
    material: Material
    group: str = "main"   # "main", "lean-to:<side>", "opening:<id>"
    position: Point3D
    rotation: Rotation = IDENTITY
    tags: dict[str, str] = {}


class BoxPrimitive(_PrimitiveBase):
    """Axis-aligned box of `size`, rotated about its centre `position`."""
    kind: Literal["box"] = "box"
    size: Size3D


class MeshPrimitive(_PrimitiveBase):
    """Non-indexed triangle list; every three vertices form one triangle."""
    kind: Literal["mesh"] = "mesh"
    vertices: list[Point3D]
    uvs: list[UV]

    @property
    def triangle_count(self) -> int:
        return len(self.vertices) // 3


class ConePrimitive(_PrimitiveBase):
    kind: Literal["cone"] = "cone"
    radius: float
    height: float
    radial_segments: int = 4


Primitive = Annotated[
    Union[BoxPrimitive, MeshPrimitive, ConePrimitive],
    Field(discriminator="kind"),
]


class VisibilityFlags(BaseModel):
    show_walls: bool = True
    show_roof: bool = True
    show_secondary_members: bool = True

    def allows(self, layer: Layer) -> bool:
        if layer == Layer.WALLS:
            return self.show_walls
        if layer == Layer.ROOF:
            return self.show_roof
        if layer == Layer.SECONDARY:
            return self.show_secondary_members
        return True


class GeometryStats(BaseModel):
    """Summary statistics for generated geometry."""
    total_primitives: int = 0
    by_role: dict[str, int] = {}
    by_group: dict[str, int] = {}

    @classmethod
    def from_primitives(cls, primitives: list[Primitive]) -> GeometryStats:
        roles = Counter(p.role.value for p in primitives)
        groups = Counter(p.group for p in primitives)
        return cls(
            total_primitives=len(primitives),
            by_role=dict(sorted(roles.items())),
            by_group=dict(sorted(groups.items())),
        )


class BuildingGeometry(BaseModel):
    """The fully resolved scene handed to the renderer."""
    primitives: list[Primitive]
    visibility: VisibilityFlags = VisibilityFlags()
    colors: dict[str, str] = {}
    stats: GeometryStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = GeometryStats.from_primitives(self.primitives)

    def by_role(self, role: PrimitiveRole) -> list[Primitive]:
        return [p for p in self.primitives if p.role == role]

    def by_group(self, group: str) -> list[Primitive]:
        return [p for p in self.primitives if p.group == group]
