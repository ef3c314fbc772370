"""Frame layout — frame count/spacing and secondary member counts."""

from __future__ import annotations
import math

from steelbuilder.models.parameters import FrameParams
from steelbuilder.models.roof import FrameLayout


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def frame_count(length: float, max_spacing: float = 25.0) -> int:
    return max(2, math.ceil(length / max_spacing) + 1)


def compute_frame_layout(length: float, params: FrameParams | None = None) -> FrameLayout:
    """
    Evenly space primary frames along the length.

    Interior frames keep the even spacing; the first and last frames are
    pulled `end_wall_inset` inside the end walls instead of sitting on them.
    """
    if params is None:
        params = FrameParams()

    n = frame_count(length, params.max_frame_spacing)
    spacing = length / (n - 1)

    positions = []
    for i in range(n):
        z = -length / 2 + i * spacing
        if i == 0:
            z = -length / 2 + params.end_wall_inset
        elif i == n - 1:
            z = length / 2 - params.end_wall_inset
        positions.append(z)

    return FrameLayout(num_frames=n, frame_spacing=spacing, positions=tuple(positions))


def girt_count(wall_height: float, target_spacing: float = 4.0) -> int:
    return max(2, math.floor(wall_height / target_spacing))


def girt_heights(wall_height: float, target_spacing: float = 4.0) -> list[float]:
    """Girt elevations, evenly dividing the wall height (base girt excluded)."""
    n = girt_count(wall_height, target_spacing)
    spacing = wall_height / (n + 1)
    return [spacing * (i + 1) for i in range(n)]


def distribution_ratios(count: int) -> list[float]:
    """Ratios (i+1)/(n+1): `count` points strictly inside (0, 1)."""
    return [(i + 1) / (count + 1) for i in range(count)]


def asymmetric_purlin_counts(left_run: float, right_run: float) -> tuple[int, int]:
    return (
        max(3, round_half_up(left_run / 4)),
        max(2, round_half_up(right_run / 4)),
    )


def lean_to_purlin_count(depth: float, spacing: float = 3.0, minimum: int = 3) -> int:
    return max(minimum, math.ceil(depth / spacing))
