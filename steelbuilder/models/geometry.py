"""Geometric primitives used throughout the engine.

World axes follow the Three.js convention: +Y up, X across the building
width (west to east), Z along the building length (north to south).
"""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point3D(BaseModel):
    """Point (or offset) in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def lerp(self, other: Point3D, t: float) -> Point3D:
        return Point3D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __mul__(self, scalar: float) -> Point3D:
        return Point3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


class Size3D(BaseModel):
    """Axis extents of a box before rotation."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float


class Rotation(BaseModel):
    """Euler rotation in radians, applied in XYZ order (Three.js default)."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def is_identity(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0


class UV(BaseModel):
    """Texture coordinate."""
    model_config = ConfigDict(frozen=True)

    u: float
    v: float


IDENTITY = Rotation()


def point(x: float, y: float, z: float) -> Point3D:
    return Point3D(x=x, y=y, z=z)


def size(x: float, y: float, z: float) -> Size3D:
    return Size3D(x=x, y=y, z=z)


def rotate(p: Point3D, rotation: Rotation) -> Point3D:
    """Rotate a point about the origin by an XYZ Euler rotation.

    The matrix is Rx * Ry * Rz, so Z is applied first, matching how
    Three.js composes `Object3D.rotation` with order 'XYZ'.
    """
    if rotation.is_identity:
        return p
    x, y, z = p.x, p.y, p.z

    cz, sz = math.cos(rotation.z), math.sin(rotation.z)
    x, y = x * cz - y * sz, x * sz + y * cz

    cy, sy = math.cos(rotation.y), math.sin(rotation.y)
    x, z = x * cy + z * sy, -x * sy + z * cy

    cx, sx = math.cos(rotation.x), math.sin(rotation.x)
    y, z = y * cx - z * sx, y * sx + z * cx

    return Point3D(x=x, y=y, z=z)


class Placement(BaseModel):
    """A rigid placement: rotate a local point, then translate it."""
    model_config = ConfigDict(frozen=True)

    position: Point3D
    rotation: Rotation = IDENTITY

    def apply(self, local: Point3D) -> Point3D:
        return self.position + rotate(local, self.rotation)
