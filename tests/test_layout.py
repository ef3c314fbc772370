import pytest

from steelbuilder.core.layout import (
    frame_count, compute_frame_layout, round_half_up, asymmetric_purlin_counts,
    girt_count, girt_heights, distribution_ratios, lean_to_purlin_count,
)


def test_reference_building_has_three_frames():
    layout = compute_frame_layout(40)
    assert layout.num_frames == 3
    assert layout.frame_spacing == pytest.approx(20.0)
    assert layout.positions == pytest.approx((-19.0, 0.0, 19.0))


@pytest.mark.parametrize("length, expected", [
    (10, 2), (25, 2), (26, 3), (50, 3), (51, 4), (100, 5),
])
def test_frame_count(length, expected):
    assert frame_count(length) == expected


def test_interior_frames_keep_even_spacing():
    layout = compute_frame_layout(100)
    assert layout.positions[1] == pytest.approx(-25.0)
    assert layout.positions[2] == pytest.approx(0.0)
    assert layout.positions[3] == pytest.approx(25.0)
    assert layout.positions[0] == pytest.approx(-49.0)
    assert layout.positions[-1] == pytest.approx(49.0)


def test_round_half_up_differs_from_bankers_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4) == 2
    assert round(2.5) == 2


def test_asymmetric_purlin_counts():
    assert asymmetric_purlin_counts(10, 10) == (3, 3)
    assert asymmetric_purlin_counts(2, 2) == (3, 2)
    assert asymmetric_purlin_counts(30, 22) == (8, 6)


def test_girts_evenly_divide_wall():
    assert girt_count(10) == 2
    assert girt_count(20) == 5
    heights = girt_heights(10)
    assert heights == pytest.approx([10 / 3, 20 / 3])


def test_distribution_ratios_are_interior():
    ratios = distribution_ratios(5)
    assert ratios == pytest.approx([1 / 6, 2 / 6, 3 / 6, 4 / 6, 5 / 6])
    assert distribution_ratios(0) == []


def test_lean_to_purlin_count():
    assert lean_to_purlin_count(12) == 4
    assert lean_to_purlin_count(4) == 3
    assert lean_to_purlin_count(20) == 7
