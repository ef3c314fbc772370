"""Secondary framing — roof purlins and wall girts.

Hidden in frame-only mode. Girts are only generated for enclosed walls.
"""

from __future__ import annotations

from steelbuilder.rules.base import GeometryRule
from steelbuilder.rules.members import box
from steelbuilder.core.layout import (
    distribution_ratios, girt_heights, asymmetric_purlin_counts,
)
from steelbuilder.models import (
    BuildingContext, Primitive, PrimitiveRole, Layer, Material, RoofStyle,
    WallSide, point,
)

GABLE_PURLINS_PER_SIDE = 5
SINGLE_SLOPE_PURLINS = 6


class PurlinRule(GeometryRule):
    """Purlins evenly distributed along each rafter's rise."""

    priority = 30
    dependencies = ["frame.primary"]
    reads = ("dimensions", "roof.style", "roof.pitch", "roof.asymmetric_offset")

    def get_id(self) -> str:
        return "frame.purlins"

    def get_name(self) -> str:
        return "Roof Purlins"

    def applies(self, context: BuildingContext) -> bool:
        return True

    def generate(self, context: BuildingContext) -> list[Primitive]:
        params = context.frame_params
        roof = context.solved_roof
        dims = context.config.dimensions
        eave = dims.eave_height
        inset = params.column_inset
        drop = params.purlin_drop
        s = params.purlin_size

        # (x, y, size multiplier, tag)
        stations: list[tuple[float, float, float, str]] = []

        if roof.style == RoofStyle.GABLE:
            run = dims.width / 2 - inset
            stations.append((0.0, eave + roof.rise - drop, 1.5, "ridge"))
            for ratio in distribution_ratios(GABLE_PURLINS_PER_SIDE):
                y = eave + roof.rise * ratio - drop
                stations.append((-run * (1 - ratio), y, 1.0, "west"))
            for ratio in distribution_ratios(GABLE_PURLINS_PER_SIDE):
                y = eave + roof.rise * ratio - drop
                stations.append((run * (1 - ratio), y, 1.0, "east"))

        elif roof.style == RoofStyle.SINGLE_SLOPE:
            run = dims.width - inset * 2
            for ratio in distribution_ratios(SINGLE_SLOPE_PURLINS):
                x = -dims.width / 2 + inset + run * ratio
                stations.append((x, eave + roof.rise * ratio - drop, 1.0, "slope"))

        else:
            peak = roof.peak_offset
            left_run = peak + dims.width / 2 - inset
            right_run = dims.width / 2 - inset - peak
            n_left, n_right = asymmetric_purlin_counts(left_run, right_run)
            stations.append((peak, eave + roof.rise - drop, 1.5, "ridge"))
            for ratio in distribution_ratios(n_left):
                x = -dims.width / 2 + inset + left_run * ratio
                stations.append((x, eave + roof.rise * ratio - drop, 1.0, "west"))
            for ratio in distribution_ratios(n_right):
                x = peak + right_run * ratio
                stations.append((x, eave + roof.rise * (1 - ratio) - drop, 1.0, "east"))

        return [
            box(
                PrimitiveRole.PURLIN, Layer.SECONDARY, Material.STEEL,
                point(x, y, 0.0), (s * scale, s * scale, dims.length),
                tags={"side": tag},
            )
            for x, y, scale, tag in stations
        ]


class GirtRule(GeometryRule):
    """Horizontal girts on every enclosed wall, plus a base girt."""

    priority = 30
    dependencies = ["frame.primary"]
    reads = ("dimensions", "roof.style", "roof.pitch", "walls.enclosed")

    def get_id(self) -> str:
        return "frame.girts"

    def get_name(self) -> str:
        return "Wall Girts"

    def applies(self, context: BuildingContext) -> bool:
        enclosed = context.config.walls.enclosed
        return any(enclosed.get(side) for side in WallSide)

    def generate(self, context: BuildingContext) -> list[Primitive]:
        params = context.frame_params
        dims = context.config.dimensions
        roof = context.solved_roof
        enclosed = context.config.walls.enclosed
        inset = params.column_inset
        g = params.girt_size
        hw, hl = dims.width / 2, dims.length / 2

        west_height = dims.eave_height
        east_height = dims.eave_height
        if roof.style == RoofStyle.SINGLE_SLOPE:
            east_height = dims.eave_height + roof.rise

        # End walls reuse the west wall's girt layout.
        layouts = {
            WallSide.WEST: (west_height, (-hw + inset, 0.0), (g, g, dims.length - inset * 2)),
            WallSide.EAST: (east_height, (hw - inset, 0.0), (g, g, dims.length - inset * 2)),
            WallSide.SOUTH: (west_height, (0.0, hl - inset), (dims.width - inset * 2, g, g)),
            WallSide.NORTH: (west_height, (0.0, -hl + inset), (dims.width - inset * 2, g, g)),
        }

        primitives: list[Primitive] = []
        for side in (WallSide.WEST, WallSide.EAST, WallSide.SOUTH, WallSide.NORTH):
            if not enclosed.get(side):
                continue
            height, (x, z), dims3 = layouts[side]
            for y in girt_heights(height, params.girt_target_spacing):
                primitives.append(box(
                    PrimitiveRole.GIRT, Layer.SECONDARY, Material.STEEL,
                    point(x, y, z), dims3, tags={"side": side.value},
                ))
            primitives.append(box(
                PrimitiveRole.GIRT, Layer.SECONDARY, Material.STEEL,
                point(x, g / 2, z), dims3, tags={"side": side.value, "base": "true"},
            ))
        return primitives
