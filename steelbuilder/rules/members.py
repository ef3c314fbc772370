"""Shared builders for steel sections and simple boxes."""

from __future__ import annotations

from steelbuilder.models.geometry import (
    Point3D, Rotation, Placement, IDENTITY, point, size,
)
from steelbuilder.models.parameters import FrameParams
from steelbuilder.models.primitives import (
    BoxPrimitive, PrimitiveRole, Layer, Material,
)


def box(
    role: PrimitiveRole,
    layer: Layer,
    material: Material,
    center: Point3D,
    dims: tuple[float, float, float],
    rotation: Rotation = IDENTITY,
    group: str = "main",
    tags: dict[str, str] | None = None,
) -> BoxPrimitive:
    return BoxPrimitive(
        role=role, layer=layer, material=material, group=group,
        position=center, rotation=rotation, size=size(*dims),
        tags=tags or {},
    )


def h_column(
    x: float,
    z: float,
    height: float,
    params: FrameParams,
    group: str = "main",
    tags: dict[str, str] | None = None,
) -> list[BoxPrimitive]:
    """Wide-flange column: a web plus two flanges facing +/-Z."""
    y = height / 2
    half_web = params.web_height / 2

    def part(name: str, dz: float, dims: tuple[float, float, float]) -> BoxPrimitive:
        return box(
            PrimitiveRole.COLUMN, Layer.PRIMARY, Material.STEEL,
            point(x, y, z + dz), dims, group=group,
            tags={**(tags or {}), "part": name},
        )

    return [
        part("web", 0.0, (params.web_thickness, height, params.web_height)),
        part("flange", half_web, (params.flange_width, height, params.flange_thickness)),
        part("flange", -half_web, (params.flange_width, height, params.flange_thickness)),
    ]


def i_beam(
    role: PrimitiveRole,
    placement: Placement,
    length: float,
    along: str,
    web_depth: float,
    flange_width: float,
    params: FrameParams,
    group: str = "main",
    tags: dict[str, str] | None = None,
) -> list[BoxPrimitive]:
    """
    I-section member of `length` running along local `along` ("x" or "z"),
    with flanges on its top and bottom. `placement` puts the section's centre
    in the world; flange offsets rotate with it.
    """
    t = params.web_thickness
    ft = params.flange_thickness
    if along == "x":
        web = (length, web_depth, t)
        flange = (length, ft, flange_width)
    elif along == "z":
        web = (t, web_depth, length)
        flange = (flange_width, ft, length)
    else:
        raise ValueError(f"unsupported member axis: {along!r}")

    def part(name: str, dy: float, dims: tuple[float, float, float]) -> BoxPrimitive:
        return box(
            role, Layer.PRIMARY, Material.STEEL,
            placement.apply(point(0.0, dy, 0.0)), dims,
            rotation=placement.rotation, group=group,
            tags={**(tags or {}), "part": name},
        )

    return [
        part("web", 0.0, web),
        part("flange", web_depth / 2, flange),
        part("flange", -web_depth / 2, flange),
    ]
