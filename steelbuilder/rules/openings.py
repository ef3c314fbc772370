"""Doors and windows on the four main walls.

Each opening is a small group placed just outside its wall and turned to
face outward. Geometry always uses clamped positions, so a stored opening
that no longer fits (e.g. after the building shrank) is drawn at the wall
edge instead of floating off it.
"""

from __future__ import annotations
import math

from steelbuilder.rules.base import GeometryRule
from steelbuilder.rules.members import box
from steelbuilder.core.placement import clamp_opening
from steelbuilder.models import (
    BuildingContext, Primitive, PrimitiveRole, Layer, Material, WallSide,
    Opening, Dimensions, Placement, Rotation, point,
)

WALL_YAW = {
    WallSide.SOUTH: 0.0,
    WallSide.NORTH: math.pi,
    WallSide.EAST: -math.pi / 2,
    WallSide.WEST: math.pi / 2,
}

OVERHEAD_SECTIONS = 4


def opening_placement(opening: Opening, dims: Dimensions, standoff: float = 0.5) -> Placement:
    """World placement of an opening's centre."""
    hw, hl = dims.width / 2, dims.length / 2
    along = opening.position + opening.width / 2
    y = opening.bottom_offset + opening.height / 2
    if opening.wall == WallSide.SOUTH:
        center = point(-hw + along, y, hl + standoff)
    elif opening.wall == WallSide.NORTH:
        center = point(-hw + along, y, -hl - standoff)
    elif opening.wall == WallSide.EAST:
        center = point(hw + standoff, y, -hl + along)
    else:
        center = point(-hw - standoff, y, -hl + along)
    return Placement(position=center, rotation=Rotation(y=WALL_YAW[opening.wall]))


def frame_material(opening: Opening) -> Material:
    if opening.type.is_window:
        return Material.GLASS
    if opening.type.is_overhead:
        return Material.OVERHEAD_DOOR
    return Material.DOOR


class OpeningRule(GeometryRule):
    """Frame, hit region, glazing, door sections and selection feedback."""

    priority = 70
    reads = ("dimensions", "openings", "ui.selected_opening_id", "ui.is_dragging")

    def get_id(self) -> str:
        return "openings"

    def get_name(self) -> str:
        return "Doors & Windows"

    def applies(self, context: BuildingContext) -> bool:
        return len(context.config.openings) > 0

    def generate(self, context: BuildingContext) -> list[Primitive]:
        config = context.config
        primitives: list[Primitive] = []
        for opening in config.openings:
            clamped = clamp_opening(opening, config.dimensions, context.placement_params)
            selected = config.ui.selected_opening_id == opening.id
            primitives.extend(self._opening(
                clamped, config.dimensions, context, selected,
                dragging=selected and config.ui.is_dragging,
            ))
        return primitives

    def _opening(
        self, opening: Opening, dims: Dimensions, context: BuildingContext,
        selected: bool, dragging: bool,
    ) -> list[Primitive]:
        placement = opening_placement(opening, dims, context.placement_params.wall_standoff)
        group = f"opening:{opening.id}"
        w, h = opening.width, opening.height
        tags = {"opening_id": opening.id, "type": opening.type.value}

        def part(role, material, offset, dims3, name):
            return box(
                role, Layer.WALLS, material, placement.apply(point(*offset)), dims3,
                rotation=placement.rotation, group=group, tags={**tags, "part": name},
            )

        parts = [
            part(PrimitiveRole.OPENING, frame_material(opening), (0, 0, 0), (w, h, 0.3), "frame"),
            part(PrimitiveRole.OPENING_HIT_REGION, Material.HIGHLIGHT,
                 (0, 0, 0.3), (w + 0.3, h + 0.3, 0.2), "hit"),
        ]

        if opening.type.is_glazed:
            window = opening.type.is_window
            parts.append(part(
                PrimitiveRole.OPENING_GLASS, Material.GLASS,
                (0, 0 if window else h * 0.2, 0.1),
                (w * 0.85, h * 0.85 if window else h * 0.5, 0.05), "glass",
            ))

        if opening.type.is_overhead:
            pitch = h / OVERHEAD_SECTIONS
            for i in range(OVERHEAD_SECTIONS):
                parts.append(part(
                    PrimitiveRole.OPENING_SECTION, Material.DOOR_SECTION,
                    (0, -h / 2 + pitch / 2 + i * pitch, 0.1), (w * 0.95, h * 0.23, 0.02),
                    f"section-{i}",
                ))

        if selected:
            parts.append(part(
                PrimitiveRole.SELECTION_OUTLINE, Material.HIGHLIGHT,
                (0, 0, -0.05), (w + 0.4, h + 0.3, 0.1), "outline",
            ))
        if dragging:
            parts.append(part(
                PrimitiveRole.DRAG_INDICATOR, Material.HIGHLIGHT,
                (0, h / 2 + 0.5, 0.2), (1, 0.3, 0.1), "drag",
            ))
        return parts
