"""Side basis — maps a lean-to's canonical local frame onto world axes.

Lean-to geometry is built once in a local frame attached to the wall face:

    u  lateral, along the wall
    y  up
    d  depth, outward from the wall face (d = 0 is the wall)

Each side is the south frame turned about +Y, so a basis is an origin on the
wall face plus integer unit vectors for the lateral and depth axes. Integer
axes keep world coordinates free of trigonometric round-off.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from steelbuilder.models.building import WallSide, Dimensions
from steelbuilder.models.geometry import Point3D, Size3D, Rotation, IDENTITY
from steelbuilder.models.primitives import BoxPrimitive, MeshPrimitive, Primitive


# side: (yaw, lateral axis, depth axis)
_AXES: dict[WallSide, tuple[float, tuple[int, int], tuple[int, int]]] = {
    # axes given as (x, z) components
    WallSide.SOUTH: (0.0, (1, 0), (0, 1)),
    WallSide.EAST: (math.pi / 2, (0, -1), (1, 0)),
    WallSide.NORTH: (math.pi, (-1, 0), (0, -1)),
    WallSide.WEST: (-math.pi / 2, (0, 1), (-1, 0)),
}


def main_dimension(side: WallSide, dims: Dimensions) -> float:
    """Length of the building wall on `side`."""
    if side in (WallSide.SOUTH, WallSide.NORTH):
        return dims.width
    return dims.length


@dataclass(frozen=True)
class SideBasis:
    side: WallSide
    origin: Point3D
    yaw: float
    lateral: tuple[int, int]
    depth: tuple[int, int]

    @classmethod
    def for_side(cls, side: WallSide, dims: Dimensions) -> SideBasis:
        yaw, lateral, depth = _AXES[side]
        hw, hl = dims.width / 2, dims.length / 2
        origin = Point3D(x=depth[0] * hw, y=0.0, z=depth[1] * hl)
        return cls(side=side, origin=origin, yaw=yaw, lateral=lateral, depth=depth)

    @property
    def depth_on_x(self) -> bool:
        return self.depth[0] != 0

    def to_world(self, local: Point3D) -> Point3D:
        """Local (u, y, d) stored as (x, y, z) -> world point."""
        u, d = local.x, local.z
        return Point3D(
            x=self.origin.x + self.lateral[0] * u + self.depth[0] * d,
            y=self.origin.y + local.y,
            z=self.origin.z + self.lateral[1] * u + self.depth[1] * d,
        )

    def size_to_world(self, local: Size3D) -> Size3D:
        if self.depth_on_x:
            return Size3D(x=local.z, y=local.y, z=local.x)
        return local

    def tilt_to_world(self, local: Rotation) -> Rotation:
        """
        A local rotation about the lateral axis (the roof-slope tilt) becomes
        a rotation about whichever world axis the lateral axis lies on.
        """
        if local.y != 0.0 or local.z != 0.0:
            raise ValueError("lean-to primitives may only tilt about the lateral axis")
        if local.x == 0.0:
            return IDENTITY
        lx, lz = self.lateral
        if lx != 0:
            return Rotation(x=lx * local.x)
        return Rotation(z=lz * local.x)

    def primitive_to_world(self, primitive: Primitive) -> Primitive:
        updates: dict = {
            "position": self.to_world(primitive.position),
            "rotation": self.tilt_to_world(primitive.rotation),
        }
        if isinstance(primitive, BoxPrimitive):
            updates["size"] = self.size_to_world(primitive.size)
        elif isinstance(primitive, MeshPrimitive):
            # Mesh vertices are positioned relative to the local origin.
            updates["vertices"] = [
                self.to_world(v) - self.origin for v in primitive.vertices
            ]
        return primitive.model_copy(update=updates)
