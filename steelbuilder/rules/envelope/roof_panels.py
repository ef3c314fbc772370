"""Roof panels, ridge cap, ridge vents and cupolas.

Side overhangs lengthen the panels outward from the eave; north/south
overhangs lengthen the roof along the building and shift its centre.
"""

from __future__ import annotations
import math

from steelbuilder.rules.base import GeometryRule
from steelbuilder.rules.members import box
from steelbuilder.models import (
    BuildingContext, Primitive, PrimitiveRole, Layer, Material, RoofStyle,
    ConePrimitive, Rotation, point,
)

# (base, body, body y, cone radius, cone height, cone y) per cupola size
CUPOLA_SHAPES = {
    "2ft": ((2.0, 0.3, 2.0), (1.8, 1.5, 1.8), 1.0, 1.5, 1.0, 2.0),
    "3ft": ((3.0, 0.4, 3.0), (2.7, 2.0, 2.7), 1.25, 2.2, 1.5, 2.75),
}


def ridge_stations(length: float, count: int) -> list[float]:
    """Z positions of `count` fixtures evenly spaced along the ridge."""
    spacing = length / (count + 1)
    return [-length / 2 + spacing * (i + 1) for i in range(count)]


class RoofPanelRule(GeometryRule):
    """Sloped roof sheets for the roof style, plus a ridge cap."""

    priority = 50
    reads = ("dimensions", "roof.style", "roof.pitch", "roof.asymmetric_offset", "roof.overhangs")

    def get_id(self) -> str:
        return "envelope.roof"

    def get_name(self) -> str:
        return "Roof Panels"

    def applies(self, context: BuildingContext) -> bool:
        return True

    def generate(self, context: BuildingContext) -> list[Primitive]:
        params = context.frame_params
        dims = context.config.dimensions
        roof = context.solved_roof
        oh = context.config.roof.overhangs
        eave = dims.eave_height
        thick = params.roof_thickness

        total_length = dims.length + oh.north + oh.south + params.roof_extension * 2
        zc = (oh.south - oh.north) / 2
        panel_y = eave + roof.rise / 2 + params.roof_lift

        def panel(x, y, length, angle, side):
            return box(
                PrimitiveRole.ROOF_PANEL, Layer.ROOF, Material.ROOF,
                point(x, y, zc), (length, thick, total_length),
                rotation=Rotation(z=angle), tags={"side": side},
            )

        primitives: list[Primitive] = []
        if roof.style == RoofStyle.GABLE:
            a = roof.angle
            left_len = roof.panel_length + params.roof_eave_extra + oh.west
            right_len = roof.panel_length + params.roof_eave_extra + oh.east
            primitives.append(panel(
                -dims.width / 4 - oh.west / 2 * math.cos(a),
                panel_y - oh.west / 2 * math.sin(a), left_len, a, "west",
            ))
            primitives.append(panel(
                dims.width / 4 + oh.east / 2 * math.cos(a),
                panel_y - oh.east / 2 * math.sin(a), right_len, -a, "east",
            ))
        elif roof.style == RoofStyle.SINGLE_SLOPE:
            total_width = dims.width + oh.east + oh.west
            slope_len = math.sqrt(total_width ** 2 + roof.rise ** 2)
            slope_angle = math.atan2(roof.rise, total_width)
            primitives.append(panel(
                (oh.east - oh.west) / 2, eave + roof.rise / 2,
                slope_len + params.roof_eave_extra, slope_angle, "slope",
            ))
        else:
            peak = roof.peak_offset
            extra = params.asym_roof_eave_extra
            primitives.append(panel(
                (-dims.width / 2 + peak) / 2 - oh.west / 2, panel_y,
                roof.left.length + extra + oh.west, roof.left.angle, "west",
            ))
            primitives.append(panel(
                (dims.width / 2 + peak) / 2 + oh.east / 2, panel_y,
                roof.right.length + extra + oh.east, -roof.right.angle, "east",
            ))

        if roof.style != RoofStyle.SINGLE_SLOPE:
            primitives.append(box(
                PrimitiveRole.RIDGE_CAP, Layer.ROOF, Material.TRIM,
                point(roof.ridge_x, eave + roof.rise + 0.15, zc), (0.5, 0.1, total_length),
            ))
        return primitives


class RidgeAccessoryRule(GeometryRule):
    """Ridge vents and 2 ft / 3 ft cupolas. Gable roofs only."""

    priority = 55
    dependencies = ["envelope.roof"]
    reads = (
        "dimensions", "roof.style", "roof.pitch",
        "roof.ridge_vents", "roof.cupola_2ft", "roof.cupola_3ft",
    )

    def get_id(self) -> str:
        return "envelope.ridge_accessories"

    def get_name(self) -> str:
        return "Ridge Vents & Cupolas"

    def applies(self, context: BuildingContext) -> bool:
        roof = context.config.roof
        return roof.style == RoofStyle.GABLE and (
            roof.ridge_vents > 0 or roof.cupola_2ft > 0 or roof.cupola_3ft > 0
        )

    def generate(self, context: BuildingContext) -> list[Primitive]:
        dims = context.config.dimensions
        roof_cfg = context.config.roof
        ridge_y = dims.eave_height + context.solved_roof.rise

        primitives: list[Primitive] = []
        for i, z in enumerate(ridge_stations(dims.length, roof_cfg.ridge_vents)):
            tags = {"index": str(i)}
            primitives.append(box(
                PrimitiveRole.RIDGE_VENT, Layer.ROOF, Material.TRIM,
                point(0.0, ridge_y + 0.3, z), (1.5, 0.5, 2.0), tags={**tags, "part": "base"},
            ))
            primitives.append(box(
                PrimitiveRole.RIDGE_VENT, Layer.ROOF, Material.VENT,
                point(0.0, ridge_y + 0.4, z), (1.3, 0.3, 1.8), tags={**tags, "part": "louver"},
            ))

        for size_name, count in (("2ft", roof_cfg.cupola_2ft), ("3ft", roof_cfg.cupola_3ft)):
            base, body, body_y, radius, cone_h, cone_y = CUPOLA_SHAPES[size_name]
            for i, z in enumerate(ridge_stations(dims.length, count)):
                y = ridge_y + 0.2
                tags = {"size": size_name, "index": str(i)}
                primitives.append(box(
                    PrimitiveRole.CUPOLA, Layer.ROOF, Material.TRIM,
                    point(0.0, y, z), base, tags={**tags, "part": "base"},
                ))
                primitives.append(box(
                    PrimitiveRole.CUPOLA, Layer.ROOF, Material.WALL,
                    point(0.0, y + body_y, z), body, tags={**tags, "part": "body"},
                ))
                primitives.append(ConePrimitive(
                    role=PrimitiveRole.CUPOLA, layer=Layer.ROOF, material=Material.ROOF,
                    position=point(0.0, y + cone_y, z), radius=radius, height=cone_h,
                    radial_segments=4, tags={**tags, "part": "roof"},
                ))
        return primitives
