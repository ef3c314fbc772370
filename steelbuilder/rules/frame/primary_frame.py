"""Primary framing — rigid frames, overhang end frames, ridge and eave beams.

Each frame is two wide-flange columns, an eave beam, two knee braces and the
rafters for the roof style. Primary members are never hidden by the
visibility mode.
"""

from __future__ import annotations
import math

from steelbuilder.rules.base import GeometryRule
from steelbuilder.rules.members import box, h_column, i_beam
from steelbuilder.models import (
    BuildingContext, Primitive, PrimitiveRole, Layer, Material, RoofStyle,
    Placement, Rotation, point,
)
from steelbuilder.models.roof import RoofGeometry


class PrimaryFrameRule(GeometryRule):
    """Main frames at the laid-out positions plus north/south overhang frames."""

    priority = 20
    reads = (
        "dimensions", "roof.style", "roof.pitch",
        "roof.asymmetric_offset", "roof.overhangs",
    )

    def get_id(self) -> str:
        return "frame.primary"

    def get_name(self) -> str:
        return "Primary Frames"

    def applies(self, context: BuildingContext) -> bool:
        return True

    def generate(self, context: BuildingContext) -> list[Primitive]:
        primitives: list[Primitive] = []
        dims = context.config.dimensions
        overhangs = context.config.roof.overhangs

        for i, z in enumerate(context.frame_layout.positions):
            primitives.extend(self._frame(z, context, {"frame": str(i)}))

        if overhangs.north > 0:
            z = -dims.length / 2 - overhangs.north
            primitives.extend(self._frame(z, context, {"frame": "overhang-north"}))
        if overhangs.south > 0:
            z = dims.length / 2 + overhangs.south
            primitives.extend(self._frame(z, context, {"frame": "overhang-south"}))

        primitives.extend(self._ridge_beam(context))
        primitives.extend(self._perimeter_eave_beams(context))
        return primitives

    def _frame(self, z: float, context: BuildingContext, tags: dict[str, str]) -> list[Primitive]:
        members: list[Primitive] = []
        params = context.frame_params
        roof = context.solved_roof
        width = context.config.dimensions.width
        eave = context.config.dimensions.eave_height
        inset = params.column_inset

        left_height = eave
        right_height = eave
        if roof.style == RoofStyle.SINGLE_SLOPE:
            right_height = eave + roof.rise - params.high_column_clearance

        members.extend(h_column(-width / 2 + inset, z, left_height, params,
                                tags={**tags, "side": "west"}))
        members.extend(h_column(width / 2 - inset, z, right_height, params,
                                tags={**tags, "side": "east"}))

        beam = params.beam_size * 0.8
        members.append(box(
            PrimitiveRole.EAVE_BEAM, Layer.PRIMARY, Material.STEEL,
            point(0.0, eave, z), (width - inset * 2 - 0.4, beam, beam), tags=tags,
        ))

        brace = min(eave * params.knee_brace_ratio, params.knee_brace_max)
        brace_x = width / 2 - inset - params.flange_width / 2 - brace * 0.5
        brace_size = (brace * 1.4, params.beam_size * 0.5, params.beam_size * 0.5)
        for sign, side in ((-1, "west"), (1, "east")):
            members.append(box(
                PrimitiveRole.KNEE_BRACE, Layer.PRIMARY, Material.STEEL,
                point(sign * brace_x, eave - brace * 0.5, z), brace_size,
                rotation=Rotation(z=-sign * math.pi / 4),
                tags={**tags, "side": side},
            ))

        members.extend(self._rafters(z, roof, context, tags))
        return members

    def _rafters(
        self, z: float, roof: RoofGeometry, context: BuildingContext, tags: dict[str, str],
    ) -> list[Primitive]:
        params = context.frame_params
        width = context.config.dimensions.width
        eave = context.config.dimensions.eave_height
        inset = params.column_inset
        rise = roof.rise
        center_y = eave + rise / 2 - params.rafter_offset

        # (centre x, horizontal run, rotation about Z, side)
        spans: list[tuple[float, float, float, str]] = []
        if roof.style == RoofStyle.GABLE:
            run = width / 2 - inset
            spans.append((-run / 2, run, roof.angle, "west"))
            spans.append((run / 2, run, -roof.angle, "east"))
        elif roof.style == RoofStyle.SINGLE_SLOPE:
            run = width - inset * 2
            spans.append((0.0, run, math.atan2(rise, run), "full"))
        else:
            peak = roof.peak_offset
            left_run = peak + width / 2 - inset
            right_run = width / 2 - inset - peak
            spans.append(((-width / 2 + inset + peak) / 2, left_run, roof.left.angle, "west"))
            spans.append(((width / 2 - inset + peak) / 2, right_run, -roof.right.angle, "east"))

        members: list[Primitive] = []
        for cx, run, angle, side in spans:
            placement = Placement(position=point(cx, center_y, z), rotation=Rotation(z=angle))
            members.extend(i_beam(
                PrimitiveRole.RAFTER, placement,
                length=math.sqrt(run ** 2 + rise ** 2), along="x",
                web_depth=params.web_height * 0.8,
                flange_width=params.flange_width * 0.8,
                params=params, tags={**tags, "side": side},
            ))
        return members

    def _ridge_beam(self, context: BuildingContext) -> list[Primitive]:
        roof = context.solved_roof
        if roof.style == RoofStyle.SINGLE_SLOPE:
            return []
        params = context.frame_params
        dims = context.config.dimensions
        overhangs = context.config.roof.overhangs
        total = dims.length + overhangs.north + overhangs.south
        s = params.ridge_beam_size
        return [box(
            PrimitiveRole.RIDGE_BEAM, Layer.PRIMARY, Material.STEEL,
            point(roof.ridge_x, dims.eave_height + roof.rise - params.ridge_beam_drop,
                  (overhangs.south - overhangs.north) / 2),
            (s, s, total),
        )]

    def _perimeter_eave_beams(self, context: BuildingContext) -> list[Primitive]:
        params = context.frame_params
        dims = context.config.dimensions
        inset = params.column_inset
        y = dims.eave_height - params.perimeter_beam_drop
        b = params.beam_size * 0.8
        across = (dims.width - inset * 2, b, b)
        along = (b, b, dims.length - inset * 2)
        hw, hl = dims.width / 2, dims.length / 2
        return [
            box(PrimitiveRole.EAVE_BEAM, Layer.PRIMARY, Material.STEEL,
                point(0.0, y, -hl + inset), across, tags={"side": "north"}),
            box(PrimitiveRole.EAVE_BEAM, Layer.PRIMARY, Material.STEEL,
                point(0.0, y, hl - inset), across, tags={"side": "south"}),
            box(PrimitiveRole.EAVE_BEAM, Layer.PRIMARY, Material.STEEL,
                point(-hw + inset, y, 0.0), along, tags={"side": "west"}),
            box(PrimitiveRole.EAVE_BEAM, Layer.PRIMARY, Material.STEEL,
                point(hw - inset, y, 0.0), along, tags={"side": "east"}),
        ]
