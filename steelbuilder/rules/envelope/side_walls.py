"""Side walls, wainscot bands and main-building trim."""

from __future__ import annotations

from steelbuilder.rules.base import GeometryRule
from steelbuilder.rules.members import box
from steelbuilder.models import (
    BuildingContext, Primitive, PrimitiveRole, Layer, Material, RoofStyle,
    WallSide, point,
)


class SideWallRule(GeometryRule):
    """West and east wall panels; the east wall is taller on single-slope roofs."""

    priority = 40
    reads = ("dimensions", "roof.style", "roof.pitch", "walls.enclosed.east", "walls.enclosed.west")

    def get_id(self) -> str:
        return "envelope.side_walls"

    def get_name(self) -> str:
        return "Side Walls"

    def applies(self, context: BuildingContext) -> bool:
        enclosed = context.config.walls.enclosed
        return enclosed.east or enclosed.west

    def generate(self, context: BuildingContext) -> list[Primitive]:
        params = context.frame_params
        dims = context.config.dimensions
        roof = context.solved_roof
        enclosed = context.config.walls.enclosed
        t = params.wall_thickness

        primitives: list[Primitive] = []
        if enclosed.west:
            h = dims.eave_height
            primitives.append(box(
                PrimitiveRole.WALL_PANEL, Layer.WALLS, Material.WALL,
                point(-dims.width / 2, h / 2, 0.0), (t, h, dims.length),
                tags={"side": "west"},
            ))
        if enclosed.east:
            h = dims.eave_height
            if roof.style == RoofStyle.SINGLE_SLOPE:
                h = dims.eave_height + roof.rise - params.east_wall_clearance
            primitives.append(box(
                PrimitiveRole.WALL_PANEL, Layer.WALLS, Material.WALL,
                point(dims.width / 2, h / 2, 0.0), (t, h, dims.length),
                tags={"side": "east"},
            ))
        return primitives


class WainscotRule(GeometryRule):
    """
    Wainscot bands on enclosed walls. A side with an enabled lean-to gets no
    band, since it would cut through the lean-to structure.
    """

    priority = 45
    reads = (
        "dimensions", "walls",
        "lean_to_configs.south.enabled", "lean_to_configs.north.enabled",
        "lean_to_configs.east.enabled", "lean_to_configs.west.enabled",
    )

    def get_id(self) -> str:
        return "envelope.wainscot"

    def get_name(self) -> str:
        return "Wainscot"

    def applies(self, context: BuildingContext) -> bool:
        return context.config.walls.wainscot_enabled

    def generate(self, context: BuildingContext) -> list[Primitive]:
        dims = context.config.dimensions
        walls = context.config.walls
        lean_tos = context.config.lean_to_configs
        h = walls.wainscot_height
        hw, hl = dims.width / 2, dims.length / 2

        bands = {
            WallSide.SOUTH: (point(0.0, h / 2, hl + 0.3), (dims.width + 0.4, h, 0.2)),
            WallSide.NORTH: (point(0.0, h / 2, -hl - 0.3), (dims.width + 0.4, h, 0.2)),
            WallSide.WEST: (point(-hw - 0.3, h / 2, 0.0), (0.2, h, dims.length + 0.4)),
            WallSide.EAST: (point(hw + 0.3, h / 2, 0.0), (0.2, h, dims.length + 0.4)),
        }

        primitives: list[Primitive] = []
        for side, (center, dims3) in bands.items():
            if not walls.enclosed.get(side) or lean_tos.get(side).enabled:
                continue
            primitives.append(box(
                PrimitiveRole.WAINSCOT, Layer.WALLS, Material.WAINSCOT,
                center, dims3, tags={"side": side.value},
            ))
        return primitives


class MainTrimRule(GeometryRule):
    """Eave trim on the side walls and four corner trims."""

    priority = 45
    reads = ("dimensions", "roof.style", "roof.pitch")

    def get_id(self) -> str:
        return "envelope.trim"

    def get_name(self) -> str:
        return "Building Trim"

    def applies(self, context: BuildingContext) -> bool:
        return True

    def generate(self, context: BuildingContext) -> list[Primitive]:
        params = context.frame_params
        dims = context.config.dimensions
        roof = context.solved_roof
        hw, hl = dims.width / 2, dims.length / 2
        trim_h = params.eave_trim_height

        left = dims.eave_height
        right = dims.eave_height
        right_offset = 0.0
        if roof.style == RoofStyle.SINGLE_SLOPE:
            right = dims.eave_height + roof.rise
            right_offset = 0.3  # Corner trim stops under the high roof edge

        def trim(center, dims3, tags):
            return box(PrimitiveRole.TRIM, Layer.WALLS, Material.TRIM, center, dims3, tags=tags)

        corner_h = right - right_offset
        return [
            trim(point(-hw - 0.15, left - trim_h / 2, 0.0), (0.15, trim_h, dims.length),
                 {"side": "west", "piece": "eave"}),
            trim(point(hw + 0.15, right - trim_h / 2, 0.0), (0.15, trim_h, dims.length),
                 {"side": "east", "piece": "eave"}),
            trim(point(-hw - 0.1, left / 2, hl + 0.1), (0.2, left, 0.2),
                 {"side": "southwest", "piece": "corner"}),
            trim(point(-hw - 0.1, left / 2, -hl - 0.1), (0.2, left, 0.2),
                 {"side": "northwest", "piece": "corner"}),
            trim(point(hw + 0.1, corner_h / 2, hl + 0.1), (0.2, corner_h, 0.2),
                 {"side": "southeast", "piece": "corner"}),
            trim(point(hw + 0.1, corner_h / 2, -hl - 0.1), (0.2, corner_h, 0.2),
                 {"side": "northeast", "piece": "corner"}),
        ]
