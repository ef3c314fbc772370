import pytest

from steelbuilder.core.cache import GeometryCache
from steelbuilder.core.generator import BuildingGenerator
from steelbuilder.core.registry import create_default_registry
from steelbuilder.models import (
    BuildingGeometry, GenerationConfig, OpeningType, PrimitiveRole, RoofStyle,
    WallSide,
)
from helpers import count_role, in_group, tagged

DEFAULT_COUNTS = {
    PrimitiveRole.SLAB: 1,
    PrimitiveRole.COLUMN: 18,
    PrimitiveRole.KNEE_BRACE: 6,
    PrimitiveRole.RAFTER: 18,
    PrimitiveRole.EAVE_BEAM: 7,
    PrimitiveRole.RIDGE_BEAM: 1,
    PrimitiveRole.PURLIN: 11,
    PrimitiveRole.GIRT: 12,
    PrimitiveRole.END_WALL: 2,
    PrimitiveRole.WALL_PANEL: 2,
    PrimitiveRole.TRIM: 6,
    PrimitiveRole.ROOF_PANEL: 2,
    PrimitiveRole.RIDGE_CAP: 1,
}


@pytest.mark.parametrize("role, expected", list(DEFAULT_COUNTS.items()))
def test_default_building(generator, default_config, role, expected):
    geometry = generator.generate(default_config)
    assert count_role(geometry, role) == expected


def test_default_building_has_nothing_else(generator, default_config):
    geometry = generator.generate(default_config)
    assert geometry.stats.total_primitives == sum(DEFAULT_COUNTS.values())
    assert geometry.stats.by_group == {"main": sum(DEFAULT_COUNTS.values())}


def test_generation_is_deterministic(default_config):
    first = BuildingGenerator(create_default_registry()).generate(default_config)
    second = BuildingGenerator(create_default_registry()).generate(default_config)
    assert first == second


def test_mutation_and_inverse_restore_geometry(generator, store):
    before = generator.generate(store.config)
    store.set_dimensions(width=48, eave_height=14)
    store.set_roof(style=RoofStyle.ASYMMETRICAL)
    assert generator.generate(store.config) != before
    store.set_roof(style=RoofStyle.GABLE)
    store.set_dimensions(width=30, eave_height=10)
    assert generator.generate(store.config) == before


def test_geometry_survives_json(generator, store):
    store.set_roof(cupola_3ft=1)
    store.set_lean_to_config("east", enabled=True, walls="fully-enclosed")
    store.quick_add_opening(OpeningType.OVERHEAD_GLASS, WallSide.NORTH)
    geometry = generator.generate(store.config)
    assert BuildingGeometry.model_validate_json(geometry.model_dump_json()) == geometry


def test_colour_change_reuses_every_rule(generator, store):
    generator.generate(store.config)
    misses = generator.cache.misses
    store.set_color("roof", "#ff0000")
    geometry = generator.generate(store.config)
    assert generator.cache.misses == misses
    assert geometry.colors["roof"] == "#ff0000"


def test_lean_to_change_rebuilds_only_its_rule(generator, store):
    store.set_lean_to_config("south", enabled=True)
    generator.generate(store.config)
    misses = generator.cache.misses
    store.set_lean_to_config("south", depth=14)
    generator.generate(store.config)
    assert generator.cache.misses == misses + 1


def test_small_cache_still_generates(store):
    generator = BuildingGenerator(create_default_registry(), GeometryCache(max_size=2))
    first = generator.generate(store.config)
    assert len(generator.cache) == 2
    assert generator.generate(store.config) == first


def test_disabled_rules(generator, default_config):
    geometry = generator.generate(
        default_config, GenerationConfig(disabled_rules=["envelope.roof", "frame.girts"]),
    )
    assert count_role(geometry, PrimitiveRole.ROOF_PANEL) == 0
    assert count_role(geometry, PrimitiveRole.GIRT) == 0
    assert count_role(geometry, PrimitiveRole.PURLIN) == 11


def test_enabled_rules(generator, default_config):
    geometry = generator.generate(default_config, GenerationConfig(enabled_rules=["foundation.slab"]))
    assert [p.role for p in geometry.primitives] == [PrimitiveRole.SLAB]


def test_overhang_frames(generator, store):
    store.set_roof_overhang("north", 2)
    store.set_roof_overhang("south", 3)
    geometry = generator.generate(store.config)
    assert count_role(geometry, PrimitiveRole.COLUMN) == 30
    overhang = {p.tags["frame"] for p in geometry.by_role(PrimitiveRole.KNEE_BRACE)}
    assert {"overhang-north", "overhang-south"} <= overhang
    roof = geometry.by_role(PrimitiveRole.ROOF_PANEL)[0]
    assert roof.size.z == pytest.approx(40 + 2 + 3 + 3)
    assert roof.position.z == pytest.approx(0.5)
    ridge = geometry.by_role(PrimitiveRole.RIDGE_BEAM)[0]
    assert ridge.size.z == pytest.approx(45)


def test_single_slope_drops_ridge_members(generator, store):
    store.set_roof(style=RoofStyle.SINGLE_SLOPE, ridge_vents=2)
    geometry = generator.generate(store.config)
    assert count_role(geometry, PrimitiveRole.RIDGE_BEAM) == 0
    assert count_role(geometry, PrimitiveRole.RIDGE_CAP) == 0
    assert count_role(geometry, PrimitiveRole.RIDGE_VENT) == 0
    assert count_role(geometry, PrimitiveRole.ROOF_PANEL) == 1


def test_single_slope_high_column(generator, store):
    store.set_roof(style=RoofStyle.SINGLE_SLOPE)
    geometry = generator.generate(store.config)
    east = tagged(geometry, PrimitiveRole.COLUMN, side="east", part="web")
    west = tagged(geometry, PrimitiveRole.COLUMN, side="west", part="web")
    assert len(east) == 3
    assert all(c.size.y == pytest.approx(10 + 5 - 0.5) for c in east)
    assert all(c.size.y == pytest.approx(10) for c in west)


@pytest.mark.parametrize("eave, brace", [(10, 3.0), (20, 4.0)])
def test_knee_brace_length_is_capped(generator, store, eave, brace):
    store.set_dimensions(eave_height=eave)
    geometry = generator.generate(store.config)
    braces = geometry.by_role(PrimitiveRole.KNEE_BRACE)
    assert len(braces) == 6
    assert all(b.size.x == pytest.approx(brace * 1.4) for b in braces)
    assert all(b.position.y == pytest.approx(eave - brace / 2) for b in braces)


def test_vents_and_cupolas(generator, store):
    store.set_roof(ridge_vents=3, cupola_2ft=1, cupola_3ft=2)
    geometry = generator.generate(store.config)
    vents = geometry.by_role(PrimitiveRole.RIDGE_VENT)
    assert len(vents) == 6
    assert sorted({v.position.z for v in vents}) == pytest.approx([-10.0, 0.0, 10.0])
    cupolas = geometry.by_role(PrimitiveRole.CUPOLA)
    assert len(cupolas) == 9
    assert sum(p.kind == "cone" for p in cupolas) == 3


def test_overhead_door_geometry(generator, store):
    door = store.quick_add_opening(OpeningType.OVERHEAD, WallSide.SOUTH)
    geometry = generator.generate(store.config)
    parts = in_group(geometry, f"opening:{door.id}")
    assert len(parts) == 6
    assert count_role(geometry, PrimitiveRole.OPENING_SECTION) == 4
    assert count_role(geometry, PrimitiveRole.OPENING_GLASS) == 0

    store.set_selected_opening_id(door.id)
    store.set_dragging(True)
    geometry = generator.generate(store.config)
    assert count_role(geometry, PrimitiveRole.SELECTION_OUTLINE) == 1
    assert count_role(geometry, PrimitiveRole.DRAG_INDICATOR) == 1


def test_opening_drawn_at_clamped_position(generator, store):
    store.add_opening(OpeningType.WALK_SINGLE, WallSide.SOUTH, position=27, width=3, height=6.67)
    store.set_dimensions(width=20)
    geometry = generator.generate(store.config)
    frame = [p for p in geometry.by_role(PrimitiveRole.OPENING) if p.tags["part"] == "frame"][0]
    assert frame.position.x == pytest.approx(-10 + 17 + 1.5)
    assert frame.position.z == pytest.approx(20.5)
    assert frame.position.y == pytest.approx(6.67 / 2)
    assert store.config.openings[0].position == 27

    store.set_dimensions(width=30)
    geometry = generator.generate(store.config)
    frame = [p for p in geometry.by_role(PrimitiveRole.OPENING) if p.tags["part"] == "frame"][0]
    assert frame.position.x == pytest.approx(13.5)


def test_window_is_glazed(generator, store):
    store.quick_add_opening(OpeningType.WINDOW_SLIDER, WallSide.WEST)
    geometry = generator.generate(store.config)
    glass = geometry.by_role(PrimitiveRole.OPENING_GLASS)
    assert len(glass) == 1
    assert glass[0].position.y == pytest.approx(5.0)
    frame = geometry.by_role(PrimitiveRole.OPENING)[0]
    assert frame.position.x == pytest.approx(-15.5)
    assert frame.position.z == pytest.approx(-20 + 18.5 + 1.5)
