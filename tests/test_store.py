import logging

import pytest
from pydantic import ValidationError

from steelbuilder.models import (
    BuildingConfig, OpeningType, RoofStyle, ViewMode, VisibilityMode, WallSide,
)
from steelbuilder.services.store import BuildingStore


def test_defaults(store):
    config = store.config
    assert (config.dimensions.width, config.dimensions.length, config.dimensions.eave_height) == (30, 40, 10)
    assert config.roof.style == RoofStyle.GABLE
    assert config.roof.pitch == 4
    assert config.roof.overhangs.east == 1 and config.roof.overhangs.north == 0
    assert all(config.walls.enclosed.get(side) for side in WallSide)
    assert not any(config.lean_to_configs.get(side).enabled for side in WallSide)
    assert config.openings == ()
    assert config.ui.expanded_panel == "dimensions"


def test_mutations_produce_new_snapshots(store):
    before = store.config
    after = store.set_dimensions(width=50)
    assert after is store.config
    assert before.dimensions.width == 30
    assert after.dimensions.width == 50
    assert after.dimensions.length == 40


@pytest.mark.parametrize("call", [
    lambda s: s.set_dimensions(width=0),
    lambda s: s.set_roof(pitch=7),
    lambda s: s.set_roof(asymmetric_offset=0.5),
    lambda s: s.set_roof(ridge_vents=11),
    lambda s: s.set_roof_overhang("south", -1),
    lambda s: s.set_lean_to_config("south", depth=3),
    lambda s: s.set_lean_to_config("east", cut_l=21),
    lambda s: s.set_color("roof", "brown"),
])
def test_out_of_range_values_are_rejected(store, call):
    before = store.config
    with pytest.raises(ValidationError):
        call(store)
    assert store.config is before


def test_unknown_fields_are_rejected(store):
    with pytest.raises(ValueError, match="unknown Dimensions fields"):
        store.set_dimensions(height=12)


def test_overhang_merges_into_existing_values(store):
    store.set_roof_overhang(WallSide.SOUTH, 2.5)
    overhangs = store.config.roof.overhangs
    assert overhangs.south == 2.5
    assert overhangs.east == 1.0
    assert overhangs.west == 1.0


def test_lean_to_config_merges_per_side(store):
    store.set_lean_to_config("west", enabled=True, depth=15)
    store.set_lean_to_config("west", drop=2)
    west = store.config.lean_to_configs.west
    assert (west.enabled, west.depth, west.drop) == (True, 15, 2)
    assert not store.config.lean_to_configs.east.enabled


def test_wall_enclosed_and_color(store):
    store.set_wall_enclosed("north", False)
    store.set_color("trim", "#112233")
    assert not store.config.walls.enclosed.north
    assert store.config.walls.enclosed.south
    assert store.config.colors.trim == "#112233"


def test_opening_ids_are_never_reused(store):
    ids = [store.quick_add_opening(OpeningType.WALK_SINGLE, WallSide.SOUTH).id for _ in range(3)]
    assert ids == ["opening-1", "opening-2", "opening-3"]
    assert store.remove_opening("opening-2")
    assert store.quick_add_opening(OpeningType.ROLL_UP, WallSide.EAST).id == "opening-4"


def test_store_continues_numbering_from_loaded_config():
    seeded = BuildingStore()
    seeded.quick_add_opening(OpeningType.WALK_SINGLE, WallSide.SOUTH)
    store = BuildingStore(seeded.config)
    assert store.quick_add_opening(OpeningType.WALK_SINGLE, WallSide.NORTH).id == "opening-2"


def test_add_opening_with_explicit_values(store):
    opening = store.add_opening(OpeningType.SLIDING, WallSide.WEST, 5, 12, 10)
    assert opening.bottom_offset == 0
    assert store.config.get_opening(opening.id) == opening
    with pytest.raises(ValidationError):
        store.add_opening(OpeningType.SLIDING, WallSide.WEST, 5, 0, 10)


def test_update_opening(store):
    opening = store.quick_add_opening(OpeningType.WINDOW_SLIDER, WallSide.SOUTH)
    updated = store.update_opening(opening.id, position=2, wall="north")
    assert updated.position == 2
    assert updated.wall == WallSide.NORTH
    assert updated.bottom_offset == 4
    assert store.config.get_opening(opening.id) == updated


@pytest.mark.parametrize("position, expected", [(100, 27), (-40, 0), (12, 12)])
def test_added_openings_are_clamped_onto_the_wall(store, position, expected):
    opening = store.add_opening(OpeningType.WALK_SINGLE, WallSide.SOUTH, position, 3, 6.67)
    assert opening.position == expected
    assert store.config.get_opening(opening.id).position == expected


def test_updated_openings_are_clamped_onto_the_wall(store):
    door = store.quick_add_opening(OpeningType.WALK_SINGLE, WallSide.SOUTH)
    assert store.update_opening(door.id, position=-50).position == 0
    assert store.update_opening(door.id, position=50).position == 27
    assert store.update_opening(door.id, width=10).position == 20

    window = store.quick_add_opening(OpeningType.WINDOW_SLIDER, WallSide.EAST)
    assert store.update_opening(window.id, bottom_offset=40).bottom_offset == 12
    assert store.update_opening(window.id, bottom_offset=-3).bottom_offset == 0
    assert store.config.get_opening(window.id).bottom_offset == 0


def test_window_bottom_offset_is_clamped_on_add(store):
    window = store.add_opening(OpeningType.WINDOW_HOPPER, WallSide.WEST, 5, 3, 2, bottom_offset=30)
    assert window.bottom_offset == 12


def test_changing_wall_recentres_opening(store):
    door = store.add_opening(OpeningType.WALK_SINGLE, WallSide.EAST, 36, 3, 6.67)
    assert door.position == 36
    moved = store.update_opening(door.id, wall=WallSide.SOUTH)
    assert moved.wall == WallSide.SOUTH
    assert moved.position == pytest.approx(13.5)

    moved = store.update_opening(door.id, wall=WallSide.WEST, position=2)
    assert moved.position == 2


def test_unknown_ids_warn_and_do_nothing(store, caplog):
    before = store.config
    with caplog.at_level(logging.WARNING, logger="steelbuilder.services.store"):
        assert store.update_opening("opening-9", position=1) is None
        assert not store.remove_opening("opening-9")
        assert store.update_lean_to("leanto-9", height=3) is None
        assert not store.remove_lean_to("leanto-9")
    assert store.config is before
    assert sum("opening-9" in r.getMessage() for r in caplog.records) == 2
    assert sum("leanto-9" in r.getMessage() for r in caplog.records) == 2


def test_removing_selected_opening_clears_selection(store):
    opening = store.quick_add_opening(OpeningType.OVERHEAD, WallSide.SOUTH)
    store.set_selected_opening_id(opening.id)
    store.set_dragging(True)
    store.remove_opening(opening.id)
    assert store.config.ui.selected_opening_id is None
    assert not store.config.ui.is_dragging


def test_placement_mode_and_selection_are_exclusive(store):
    opening = store.quick_add_opening(OpeningType.OVERHEAD, WallSide.SOUTH)
    store.set_selected_opening_id(opening.id)
    store.set_placement_mode(OpeningType.WINDOW_HOPPER)
    assert store.config.ui.placement_mode == OpeningType.WINDOW_HOPPER
    assert store.config.ui.selected_opening_id is None

    store.set_selected_opening_id(opening.id)
    assert store.config.ui.placement_mode is None
    assert store.config.ui.selected_opening_id == opening.id


def test_reset_view(store):
    store.set_view_mode(ViewMode.INTERIOR)
    store.set_visibility_mode(VisibilityMode.FRAME_ONLY)
    store.set_expanded_panel("roof")
    store.reset_view()
    ui = store.config.ui
    assert ui.view_mode == ViewMode.EXTERIOR
    assert ui.visibility_mode == VisibilityMode.FULL
    assert ui.expanded_panel == "roof"


def test_environment(store):
    store.set_environment(sky="night", show_grid=False)
    env = store.config.environment
    assert env.sky.value == "night"
    assert not env.show_grid
    assert env.ground.value == "grass"


def test_legacy_lean_tos(store):
    lean_to = store.add_lean_to("east", 10, 20, 8)
    assert lean_to.id == "leanto-1"
    assert lean_to.wall == WallSide.EAST
    updated = store.update_lean_to(lean_to.id, height=9)
    assert updated.height == 9
    assert store.config.lean_tos == (updated,)
    assert store.remove_lean_to(lean_to.id)
    assert store.config.lean_tos == ()


def test_replace_swaps_whole_snapshot(store):
    config = BuildingConfig().model_copy(
        update={"dimensions": BuildingConfig().dimensions.model_copy(update={"width": 60})}
    )
    store.replace(config)
    assert store.config is config
