"""Opening placement — catalogue, default positions and bounds.

Positions are measured from the wall's left edge as seen from outside; the
valid range is [0, wall_length - width]. Windows additionally keep their
bottom offset under a fixed nominal wall height.
"""

from __future__ import annotations
import logging
from typing import NamedTuple

from steelbuilder.models.building import (
    Dimensions, Opening, OpeningType, WallSide,
)
from steelbuilder.models.parameters import PlacementParams

logger = logging.getLogger(__name__)


class OpeningSize(NamedTuple):
    width: float
    height: float


OPENING_CATALOG: dict[OpeningType, OpeningSize] = {
    OpeningType.WALK_SINGLE: OpeningSize(3, 6.67),
    OpeningType.WALK_DOUBLE: OpeningSize(6, 6.67),
    OpeningType.WALK_HALF_GLASS: OpeningSize(3, 6.67),
    OpeningType.SLIDING_GLASS: OpeningSize(6, 6.67),
    OpeningType.DUTCH_EQUINE: OpeningSize(4, 7),
    OpeningType.OVERHEAD: OpeningSize(10, 10),
    OpeningType.OVERHEAD_MODERN: OpeningSize(10, 10),
    OpeningType.OVERHEAD_GLASS: OpeningSize(10, 10),
    OpeningType.SLIDING: OpeningSize(12, 10),
    OpeningType.SLIDING_LEFT: OpeningSize(12, 10),
    OpeningType.SLIDING_RIGHT: OpeningSize(12, 10),
    OpeningType.ROLL_UP: OpeningSize(10, 10),
    OpeningType.BI_FOLD: OpeningSize(12, 12),
    OpeningType.HYDRAULIC: OpeningSize(14, 14),
    OpeningType.WINDOW_SLIDER: OpeningSize(3, 2),
    OpeningType.WINDOW_HOPPER: OpeningSize(3, 2),
}


def wall_length(wall: WallSide, dims: Dimensions) -> float:
    """Width for the north/south walls, length for east/west."""
    if wall in (WallSide.NORTH, WallSide.SOUTH):
        return dims.width
    return dims.length


def max_position(wall: WallSide, width: float, dims: Dimensions) -> float:
    return max(0.0, wall_length(wall, dims) - width)


def clamp_position(position: float, wall: WallSide, width: float, dims: Dimensions) -> float:
    return min(max(position, 0.0), max_position(wall, width, dims))


def clamp_bottom_offset(
    bottom_offset: float, height: float, params: PlacementParams | None = None,
) -> float:
    """Keep a window below the nominal wall height."""
    if params is None:
        params = PlacementParams()
    ceiling = max(0.0, params.nominal_wall_height - height)
    return min(max(bottom_offset, 0.0), ceiling)


def default_position(wall: WallSide, width: float, dims: Dimensions) -> float:
    """Centre of the wall, clamped."""
    return clamp_position(wall_length(wall, dims) / 2 - width / 2, wall, width, dims)


def default_bottom_offset(opening_type: OpeningType, params: PlacementParams | None = None) -> float:
    if params is None:
        params = PlacementParams()
    if opening_type.is_window:
        return params.window_bottom_offset
    return params.door_bottom_offset


def quick_add(
    opening_id: str,
    opening_type: OpeningType,
    wall: WallSide,
    dims: Dimensions,
    params: PlacementParams | None = None,
) -> Opening:
    """Build an opening of catalogue size centred on `wall`."""
    width, height = OPENING_CATALOG[opening_type]
    return Opening(
        id=opening_id,
        type=opening_type,
        wall=wall,
        position=default_position(wall, width, dims),
        width=width,
        height=height,
        bottom_offset=default_bottom_offset(opening_type, params),
    )


def clamp_opening(
    opening: Opening, dims: Dimensions, params: PlacementParams | None = None,
) -> Opening:
    """
    Return `opening` with its position (and, for windows, bottom offset)
    inside the wall. Doors keep their bottom offset unchanged.
    """
    position = clamp_position(opening.position, opening.wall, opening.width, dims)
    bottom = opening.bottom_offset
    if opening.type.is_window:
        bottom = clamp_bottom_offset(bottom, opening.height, params)
    if position == opening.position and bottom == opening.bottom_offset:
        return opening
    logger.debug(
        "Clamped opening %s: position %.3f -> %.3f, bottom %.3f -> %.3f",
        opening.id, opening.position, position, opening.bottom_offset, bottom,
    )
    return opening.model_copy(update={"position": position, "bottom_offset": bottom})
