import math

import pytest

from steelbuilder.core.basis import SideBasis, main_dimension
from steelbuilder.models import Dimensions, Rotation, WallSide, point, size, rotate

DIMS = Dimensions(width=30, length=40, eave_height=10)


@pytest.mark.parametrize("side, origin, outward", [
    (WallSide.SOUTH, (0, 0, 20), (0, 0, 1)),
    (WallSide.NORTH, (0, 0, -20), (0, 0, -1)),
    (WallSide.EAST, (15, 0, 0), (1, 0, 0)),
    (WallSide.WEST, (-15, 0, 0), (-1, 0, 0)),
])
def test_depth_axis_points_away_from_building(side, origin, outward):
    basis = SideBasis.for_side(side, DIMS)
    assert (basis.origin.x, basis.origin.y, basis.origin.z) == origin
    p = basis.to_world(point(0, 2, 5))
    assert (p.x, p.y, p.z) == (
        origin[0] + 5 * outward[0], 2, origin[2] + 5 * outward[2],
    )


def test_lateral_axes():
    assert SideBasis.for_side(WallSide.SOUTH, DIMS).to_world(point(1, 0, 0)).x == 1
    assert SideBasis.for_side(WallSide.NORTH, DIMS).to_world(point(1, 0, 0)).x == -1
    assert SideBasis.for_side(WallSide.EAST, DIMS).to_world(point(1, 0, 0)).z == -1
    assert SideBasis.for_side(WallSide.WEST, DIMS).to_world(point(1, 0, 0)).z == 1


def test_main_dimension():
    assert main_dimension(WallSide.SOUTH, DIMS) == 30
    assert main_dimension(WallSide.NORTH, DIMS) == 30
    assert main_dimension(WallSide.EAST, DIMS) == 40
    assert main_dimension(WallSide.WEST, DIMS) == 40


def test_sizes_swap_on_east_and_west():
    local = size(12, 1, 3)
    assert SideBasis.for_side(WallSide.SOUTH, DIMS).size_to_world(local) == local
    assert SideBasis.for_side(WallSide.NORTH, DIMS).size_to_world(local) == local
    assert SideBasis.for_side(WallSide.EAST, DIMS).size_to_world(local) == size(3, 1, 12)
    assert SideBasis.for_side(WallSide.WEST, DIMS).size_to_world(local) == size(3, 1, 12)


@pytest.mark.parametrize("side, expected", [
    (WallSide.SOUTH, Rotation(x=0.3)),
    (WallSide.NORTH, Rotation(x=-0.3)),
    (WallSide.EAST, Rotation(z=-0.3)),
    (WallSide.WEST, Rotation(z=0.3)),
])
def test_tilt_maps_to_world_axis(side, expected):
    assert SideBasis.for_side(side, DIMS).tilt_to_world(Rotation(x=0.3)) == expected


@pytest.mark.parametrize("side", list(WallSide))
def test_tilted_roof_falls_away_from_building(side):
    alpha = math.atan2(3, 12)
    basis = SideBasis.for_side(side, DIMS)
    outward = basis.to_world(point(0, 0, 1)) - basis.origin
    tilted = rotate(outward, basis.tilt_to_world(Rotation(x=alpha)))
    assert tilted.y == pytest.approx(-math.sin(alpha))
    horizontal = tilted.x * outward.x + tilted.z * outward.z
    assert horizontal == pytest.approx(math.cos(alpha))


def test_tilt_rejects_other_rotations():
    basis = SideBasis.for_side(WallSide.SOUTH, DIMS)
    with pytest.raises(ValueError):
        basis.tilt_to_world(Rotation(y=0.5))
