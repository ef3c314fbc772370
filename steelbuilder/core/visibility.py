"""Visibility policy — display mode to per-layer flags."""

from __future__ import annotations

from steelbuilder.models.building import VisibilityMode
from steelbuilder.models.primitives import Layer, VisibilityFlags, Primitive


def visibility_flags(mode: VisibilityMode) -> VisibilityFlags:
    return VisibilityFlags(
        show_walls=mode == VisibilityMode.FULL,
        show_roof=mode in (VisibilityMode.FULL, VisibilityMode.HIDE_WALLS),
        show_secondary_members=mode != VisibilityMode.FRAME_ONLY,
    )


def filter_visible(primitives: list[Primitive], flags: VisibilityFlags) -> list[Primitive]:
    """Drop primitives whose layer is hidden. Primary frames always pass."""
    return [p for p in primitives if flags.allows(p.layer)]


def layer_visible(layer: Layer, mode: VisibilityMode) -> bool:
    return visibility_flags(mode).allows(layer)
