"""Concrete floor slab under the main building."""

from __future__ import annotations

from steelbuilder.rules.base import GeometryRule
from steelbuilder.rules.members import box
from steelbuilder.models import (
    BuildingContext, Primitive, PrimitiveRole, Layer, Material, point,
)

SLAB_MARGIN = 1.0
SLAB_THICKNESS = 0.1


class SlabRule(GeometryRule):
    priority = 10
    reads = ("dimensions.width", "dimensions.length")

    def get_id(self) -> str:
        return "foundation.slab"

    def get_name(self) -> str:
        return "Floor Slab"

    def applies(self, context: BuildingContext) -> bool:
        return True

    def generate(self, context: BuildingContext) -> list[Primitive]:
        dims = context.config.dimensions
        return [box(
            PrimitiveRole.SLAB, Layer.FOUNDATION, Material.CONCRETE,
            point(0.0, SLAB_THICKNESS / 2, 0.0),
            (dims.width + SLAB_MARGIN, SLAB_THICKNESS, dims.length + SLAB_MARGIN),
        )]
