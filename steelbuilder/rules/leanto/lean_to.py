"""Lean-to extensions — one rule instance per building side.

Every lean-to is built in the same local frame (u along the wall, y up,
d outward from the wall face) and mapped onto its side by a SideBasis, so
the four sides share one implementation. The wall type selects which
panels and trims appear; see WALL_COVERAGE.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import lru_cache

from steelbuilder.rules.base import GeometryRule
from steelbuilder.rules.members import box, h_column, i_beam
from steelbuilder.core.basis import SideBasis, main_dimension
from steelbuilder.core.layout import (
    distribution_ratios, girt_heights, lean_to_purlin_count,
)
from steelbuilder.core.roof import solve_lean_to
from steelbuilder.models import (
    BuildingContext, Primitive, PrimitiveRole, Layer, Material, WallSide,
    LeanToWallType, MeshPrimitive, Placement, Point3D, Rotation, UV, point,
)
from steelbuilder.models.roof import LeanToProfile

logger = logging.getLogger(__name__)

Polygon = tuple[tuple[Point3D, ...], tuple[UV, ...]]


@dataclass(frozen=True)
class WallCoverage:
    """Which wall pieces and trims a lean-to wall type produces."""
    front_wall: bool = False
    end_walls: bool = False
    gable_infill: bool = False
    apron: bool = False
    trim: frozenset[str] = frozenset()


WALL_COVERAGE: dict[LeanToWallType, WallCoverage] = {
    LeanToWallType.FULL_LENGTH: WallCoverage(
        front_wall=True, trim=frozenset({"eave", "outer_corner"}),
    ),
    LeanToWallType.FULLY_ENCLOSED: WallCoverage(
        front_wall=True, end_walls=True,
        trim=frozenset({"eave", "outer_corner", "building_corner", "sloped"}),
    ),
    LeanToWallType.OPEN: WallCoverage(),
    LeanToWallType.GABLE_DRESS: WallCoverage(
        gable_infill=True, trim=frozenset({"sloped"}),
    ),
    LeanToWallType.GABLE_WALLS_ONLY: WallCoverage(
        end_walls=True, trim=frozenset({"outer_corner", "building_corner", "sloped"}),
    ),
    LeanToWallType.APRON_2FT: WallCoverage(
        apron=True, trim=frozenset({"apron"}),
    ),
}


@lru_cache(maxsize=128)
def trapezoid_wall(depth: float, low: float, high: float) -> Polygon:
    """
    Two triangles in the (d, y) plane from the ground up to a line running
    from `high` at the building (d = 0) to `low` at the outer edge.
    """
    vertices = (
        point(0, 0, 0), point(0, 0, depth), point(0, low, depth),
        point(0, 0, 0), point(0, low, depth), point(0, high, 0),
    )
    r = low / max(high, 1.0)
    uvs = (
        UV(u=0, v=0), UV(u=1, v=0), UV(u=1, v=r),
        UV(u=0, v=0), UV(u=1, v=r), UV(u=0, v=1),
    )
    return vertices, uvs


class LeanToRule(GeometryRule):
    """Frames, secondary members, roof, walls, wainscot and trim of one lean-to."""

    priority = 60
    dependencies = ["frame.primary"]

    def __init__(self, side: WallSide) -> None:
        self.side = side
        self.group = f"lean-to:{side.value}"
        self.reads = (
            "dimensions",
            f"lean_to_configs.{side.value}",
            "walls.wainscot_enabled",
            "walls.wainscot_height",
        )

    def get_id(self) -> str:
        return f"leanto.{self.side.value}"

    def get_name(self) -> str:
        return f"Lean-To ({self.side.value.title()})"

    def applies(self, context: BuildingContext) -> bool:
        return context.config.lean_to_configs.get(self.side).enabled

    def profile(self, context: BuildingContext) -> LeanToProfile:
        dims = context.config.dimensions
        cfg = context.config.lean_to_configs.get(self.side)
        return solve_lean_to(
            main_dimension(self.side, dims), dims.eave_height, cfg.drop,
            cfg.depth, cfg.roof_pitch, cfg.cut_l, cfg.cut_r,
            context.lean_to_params.min_outer_height,
        )

    def generate(self, context: BuildingContext) -> list[Primitive]:
        cfg = context.config.lean_to_configs.get(self.side)
        profile = self.profile(context)
        coverage = WALL_COVERAGE[cfg.walls]
        if profile.span <= 0:
            logger.debug("Lean-to %s has non-positive span %.3f", self.side.value, profile.span)

        local: list[Primitive] = []
        local.extend(self._frames(context, profile))
        local.extend(self._secondary(context, profile, coverage))
        local.append(self._roof(context, profile))
        local.extend(self._walls(context, profile, coverage))
        if context.config.walls.wainscot_enabled:
            local.extend(self._wainscot(context, profile, coverage))
        local.extend(self._trim(profile, coverage, context.lean_to_params.apron_height))

        basis = SideBasis.for_side(self.side, context.config.dimensions)
        return [basis.primitive_to_world(p) for p in local]

    # Everything below works in local (u, y, d) coordinates.

    def _part(self, role, layer, material, center, dims, rotation=None, tags=None):
        return box(
            role, layer, material, center, dims,
            rotation=rotation or Rotation(), group=self.group, tags=tags,
        )

    def _frames(self, context: BuildingContext, p: LeanToProfile) -> list[Primitive]:
        frame = context.frame_params
        lt = context.lean_to_params
        col_inset = lt.column_inset(frame)
        frameable = p.span - lt.end_wall_inset * 2
        spacing = frameable / (lt.frame_count - 1)
        tilt = Rotation(x=p.slope_angle)

        members: list[Primitive] = []
        for i in range(lt.frame_count):
            u = p.lateral_offset - p.span / 2 + lt.end_wall_inset + i * spacing
            tags = {"frame": str(i)}
            members.extend(h_column(
                u, p.depth - col_inset, p.outer_height, frame,
                group=self.group, tags=tags,
            ))
            placement = Placement(
                position=point(u, (p.attach_height + p.outer_height) / 2 - lt.rafter_drop, p.depth / 2),
                rotation=tilt,
            )
            members.extend(i_beam(
                PrimitiveRole.RAFTER, placement, length=p.slope_length, along="z",
                web_depth=frame.web_height, flange_width=frame.flange_width,
                params=frame, group=self.group, tags=tags,
            ))
        return members

    def _secondary(
        self, context: BuildingContext, p: LeanToProfile, coverage: WallCoverage,
    ) -> list[Primitive]:
        frame = context.frame_params
        lt = context.lean_to_params
        col_inset = lt.column_inset(frame)
        ox = p.lateral_offset
        frameable = p.span - lt.end_wall_inset * 2
        b = lt.beam_size
        beam_y_drop = lt.rafter_drop + 0.5

        members: list[Primitive] = [
            self._part(PrimitiveRole.EAVE_BEAM, Layer.SECONDARY, Material.STEEL,
                       point(ox, p.attach_height - beam_y_drop, col_inset + 0.5),
                       (frameable, b, b), tags={"edge": "building"}),
            self._part(PrimitiveRole.EAVE_BEAM, Layer.SECONDARY, Material.STEEL,
                       point(ox, p.outer_height - beam_y_drop, p.depth - col_inset),
                       (frameable, b, b), tags={"edge": "outer"}),
        ]

        s = frame.purlin_size
        n = lean_to_purlin_count(p.depth, lt.purlin_spacing, lt.min_purlins)
        for ratio in distribution_ratios(n):
            members.append(self._part(
                PrimitiveRole.PURLIN, Layer.SECONDARY, Material.STEEL,
                point(ox, p.attach_height - p.rise * ratio - 0.1, p.depth * ratio),
                (frameable, s, s),
            ))

        # Girts carry the front wall, so they hide with the walls.
        if coverage.front_wall:
            g = frame.girt_size
            girt = (p.span - col_inset * 2, g, g)
            d = p.depth - col_inset
            for y in girt_heights(p.outer_height, frame.girt_target_spacing):
                members.append(self._part(
                    PrimitiveRole.GIRT, Layer.WALLS, Material.STEEL, point(ox, y, d), girt,
                ))
            members.append(self._part(
                PrimitiveRole.GIRT, Layer.WALLS, Material.STEEL, point(ox, g / 2, d), girt,
                tags={"base": "true"},
            ))
        return members

    def _roof(self, context: BuildingContext, p: LeanToProfile) -> Primitive:
        return self._part(
            PrimitiveRole.ROOF_PANEL, Layer.ROOF, Material.ROOF,
            point(p.lateral_offset, (p.attach_height + p.outer_height) / 2, p.depth / 2 + 0.3),
            (p.span + 1, context.frame_params.roof_thickness, p.slope_length + 0.5),
            rotation=Rotation(x=p.slope_angle),
        )

    def _end_meshes(self, p: LeanToProfile, polygon: Polygon, y: float, part: str) -> list[Primitive]:
        vertices, uvs = polygon
        return [
            MeshPrimitive(
                role=PrimitiveRole.WALL_PANEL, layer=Layer.WALLS, material=Material.WALL,
                group=self.group, position=point(p.lateral_offset + sign * p.span / 2, y, 0.0),
                vertices=list(vertices), uvs=list(uvs),
                tags={"part": part, "end": end},
            )
            for sign, end in ((-1, "left"), (1, "right"))
        ]

    def _walls(
        self, context: BuildingContext, p: LeanToProfile, coverage: WallCoverage,
    ) -> list[Primitive]:
        t = context.frame_params.wall_thickness
        ox = p.lateral_offset
        walls: list[Primitive] = []
        if coverage.front_wall:
            walls.append(self._part(
                PrimitiveRole.WALL_PANEL, Layer.WALLS, Material.WALL,
                point(ox, p.outer_height / 2, p.depth + 0.2), (p.span, p.outer_height, t),
                tags={"part": "front"},
            ))
        if coverage.end_walls:
            polygon = trapezoid_wall(p.depth, p.outer_height, p.attach_height)
            walls.extend(self._end_meshes(p, polygon, 0.0, "end"))
        if coverage.gable_infill:
            polygon = trapezoid_wall(p.depth, 0.0, p.attach_height - p.outer_height)
            walls.extend(self._end_meshes(p, polygon, p.outer_height, "gable-dress"))
        if coverage.apron:
            h = context.lean_to_params.apron_height
            walls.append(self._part(
                PrimitiveRole.WALL_PANEL, Layer.WALLS, Material.WALL,
                point(ox, p.outer_height - h / 2, p.depth + 0.2), (p.span, h, t),
                tags={"part": "apron"},
            ))
        return walls

    def _wainscot(
        self, context: BuildingContext, p: LeanToProfile, coverage: WallCoverage,
    ) -> list[Primitive]:
        h = min(context.config.walls.wainscot_height, p.outer_height)
        ox = p.lateral_offset
        bands: list[Primitive] = []
        if coverage.front_wall:
            bands.append(self._part(
                PrimitiveRole.WAINSCOT, Layer.WALLS, Material.WAINSCOT,
                point(ox, h / 2, p.depth + 0.35), (p.span + 0.4, h, 0.2),
                tags={"part": "front"},
            ))
        if coverage.end_walls:
            for sign, end in ((-1, "left"), (1, "right")):
                bands.append(self._part(
                    PrimitiveRole.WAINSCOT, Layer.WALLS, Material.WAINSCOT,
                    point(ox + sign * (p.span / 2 + 0.35), h / 2, p.depth / 2), (0.2, h, p.depth),
                    tags={"part": "end", "end": end},
                ))
        return bands

    def _trim(self, p: LeanToProfile, coverage: WallCoverage, apron_height: float) -> list[Primitive]:
        ox = p.lateral_offset
        edge = p.span / 2 + 0.1

        def trim(center, dims, piece, rotation=None):
            return self._part(
                PrimitiveRole.TRIM, Layer.WALLS, Material.TRIM, center, dims,
                rotation=rotation, tags={"piece": piece},
            )

        pieces: list[Primitive] = []
        if "eave" in coverage.trim:
            pieces.append(trim(point(ox, p.outer_height - 0.3, p.depth + 0.3),
                               (p.span + 0.4, 0.6, 0.15), "eave"))
        for sign in (-1, 1):
            u = ox + sign * edge
            if "outer_corner" in coverage.trim:
                pieces.append(trim(point(u, p.outer_height / 2, p.depth + 0.1),
                                   (0.2, p.outer_height, 0.2), "outer_corner"))
            if "building_corner" in coverage.trim:
                pieces.append(trim(point(u, p.attach_height / 2, 0.1),
                                   (0.2, p.attach_height, 0.2), "building_corner"))
            if "sloped" in coverage.trim:
                pieces.append(trim(point(u, (p.attach_height + p.outer_height) / 2, p.depth / 2),
                                   (0.2, 0.15, p.slope_length), "sloped",
                                   rotation=Rotation(x=p.slope_angle)))
        if "apron" in coverage.trim:
            pieces.append(trim(point(ox, p.outer_height - apron_height - 0.1, p.depth + 0.3),
                               (p.span + 0.4, 0.2, 0.15), "apron_bottom"))
            pieces.append(trim(point(ox, p.outer_height - 0.1, p.depth + 0.3),
                               (p.span + 0.4, 0.2, 0.15), "apron_top"))
        return pieces


def create_lean_to_rules() -> list[LeanToRule]:
    return [LeanToRule(side) for side in (WallSide.SOUTH, WallSide.NORTH, WallSide.WEST, WallSide.EAST)]
