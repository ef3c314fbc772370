"""End-wall geometry — one unified polygon per north/south wall.

The wall and its gable (or slope) cap are a single triangle list so there is
no seam between the rectangle and the cap. UVs are scaled so the eave line
sits at eave/total height and texture tiling continues across it.
"""

from __future__ import annotations
from functools import lru_cache

from steelbuilder.rules.base import GeometryRule
from steelbuilder.models import (
    BuildingContext, Primitive, PrimitiveRole, Layer, Material, RoofStyle,
    WallSide, MeshPrimitive, Point3D, UV, point,
)

Polygon = tuple[tuple[Point3D, ...], tuple[UV, ...]]


def _uv(u: float, v: float) -> UV:
    return UV(u=u, v=v)


@lru_cache(maxsize=128)
def pentagon_end_wall(width: float, eave: float, rise: float, apex_x: float,
                      peak_extra: float = 0.2) -> Polygon:
    """Rectangle (two triangles) plus an apex triangle at `apex_x`."""
    hw = width / 2
    apex_y = eave + rise + peak_extra
    v_eave = eave / apex_y
    apex_u = (apex_x + hw) / (2 * hw)

    vertices = (
        point(-hw, 0, 0), point(hw, 0, 0), point(hw, eave, 0),
        point(-hw, 0, 0), point(hw, eave, 0), point(-hw, eave, 0),
        point(-hw, eave, 0), point(hw, eave, 0), point(apex_x, apex_y, 0),
    )
    uvs = (
        _uv(0, 0), _uv(1, 0), _uv(1, v_eave),
        _uv(0, 0), _uv(1, v_eave), _uv(0, v_eave),
        _uv(0, v_eave), _uv(1, v_eave), _uv(apex_u, 1),
    )
    return vertices, uvs


@lru_cache(maxsize=128)
def single_slope_end_wall(width: float, eave: float, rise: float,
                          top_offset: float = -0.1) -> Polygon:
    """Quadrilateral rising from the west eave to the east high side."""
    hw = width / 2
    high = eave + rise + top_offset
    low = eave + top_offset
    vertices = (
        point(-hw, 0, 0), point(hw, 0, 0), point(hw, high, 0),
        point(-hw, 0, 0), point(hw, high, 0), point(-hw, low, 0),
    )
    uvs = (
        _uv(0, 0), _uv(1, 0), _uv(1, 1),
        _uv(0, 0), _uv(1, 1), _uv(0, eave / high),
    )
    return vertices, uvs


def end_wall_polygon(style: RoofStyle, width: float, eave: float, rise: float,
                     peak_offset: float, peak_extra: float = 0.2,
                     top_offset: float = -0.1) -> Polygon:
    if style == RoofStyle.SINGLE_SLOPE:
        return single_slope_end_wall(width, eave, rise, top_offset)
    apex_x = peak_offset if style == RoofStyle.ASYMMETRICAL else 0.0
    return pentagon_end_wall(width, eave, rise, apex_x, peak_extra)


class EndWallRule(GeometryRule):
    """Unified end-wall meshes on enclosed north/south walls."""

    priority = 40
    reads = (
        "dimensions", "roof.style", "roof.pitch", "roof.asymmetric_offset",
        "walls.enclosed.north", "walls.enclosed.south",
    )

    def get_id(self) -> str:
        return "envelope.end_walls"

    def get_name(self) -> str:
        return "End Walls"

    def applies(self, context: BuildingContext) -> bool:
        enclosed = context.config.walls.enclosed
        return enclosed.north or enclosed.south

    def generate(self, context: BuildingContext) -> list[Primitive]:
        params = context.frame_params
        dims = context.config.dimensions
        roof = context.solved_roof
        vertices, uvs = end_wall_polygon(
            roof.style, dims.width, dims.eave_height, roof.rise, roof.peak_offset,
            params.peak_extra, params.single_slope_top_offset,
        )

        offset = dims.length / 2 + params.end_wall_standoff
        primitives: list[Primitive] = []
        for side, z in ((WallSide.SOUTH, offset), (WallSide.NORTH, -offset)):
            if not context.config.walls.enclosed.get(side):
                continue
            primitives.append(MeshPrimitive(
                role=PrimitiveRole.END_WALL, layer=Layer.WALLS, material=Material.WALL,
                position=point(0.0, 0.0, z),
                vertices=list(vertices), uvs=list(uvs),
                tags={"side": side.value, "style": roof.style.value},
            ))
        return primitives
