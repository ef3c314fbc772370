import pytest
from fastapi.testclient import TestClient

from steelbuilder.api.main import create_app
from steelbuilder.api.routes import get_service
from steelbuilder.config import Settings
from steelbuilder.services.building_service import BuildingService


@pytest.fixture
def service():
    return BuildingService(settings=Settings())


@pytest.fixture
def client(service):
    app = create_app()
    app.dependency_overrides[get_service] = lambda: service
    return TestClient(app)


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_rules_in_priority_order(client):
    rules = client.get("/api/rules").json()
    ids = [r["id"] for r in rules]
    assert ids[0] == "foundation.slab"
    assert ids[-1] == "openings"
    assert {"leanto.north", "leanto.south", "leanto.east", "leanto.west"} <= set(ids)
    assert len(ids) == 15


def test_stateless_generate(client, service):
    response = client.post("/api/generate", json={})
    assert response.status_code == 200
    body = response.json()
    assert body["rule_count"] == 15
    assert body["geometry"]["stats"]["total_primitives"] == len(body["geometry"]["primitives"])
    assert body["geometry"]["colors"]["roof"] == "#5c4033"
    assert service.store.config.openings == ()


def test_generate_with_disabled_rules(client):
    response = client.post("/api/generate", json={
        "config": {"roof": {"style": "single-slope"}},
        "generation": {"enabled_rules": ["envelope.roof"]},
    })
    primitives = response.json()["geometry"]["primitives"]
    assert [p["role"] for p in primitives] == ["roof_panel"]


def test_dimension_update(client, service):
    response = client.patch("/api/dimensions", json={"width": 50})
    assert response.status_code == 200
    assert response.json()["dimensions"] == {"width": 50, "length": 40, "eave_height": 10}
    assert service.store.config.dimensions.width == 50


def test_out_of_range_value_is_422(client, service):
    response = client.patch("/api/roof", json={"pitch": 9})
    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["pitch"]
    assert service.store.config.roof.pitch == 4


def test_overhang_colour_and_walls(client):
    client.put("/api/roof/overhangs/south", json={"value": 2})
    client.put("/api/colors/wall", json={"value": "#101010"})
    state = client.put("/api/walls/north/enclosed", json={"enclosed": False}).json()
    assert state["roof"]["overhangs"]["south"] == 2
    assert state["colors"]["wall"] == "#101010"
    assert state["walls"]["enclosed"]["north"] is False


def test_unknown_side_is_rejected(client):
    assert client.put("/api/roof/overhangs/up", json={"value": 2}).status_code == 422


def test_lean_to_update_shows_in_geometry(client):
    client.patch("/api/lean-tos/east", json={"enabled": True, "walls": "open"})
    geometry = client.get("/api/geometry").json()
    assert geometry["stats"]["by_group"]["lean-to:east"] > 0


def test_opening_lifecycle(client):
    response = client.post("/api/openings", json={"type": "overhead", "wall": "south"})
    assert response.status_code == 201
    opening = response.json()
    assert opening["id"] == "opening-1"
    assert opening["position"] == 10

    response = client.patch("/api/openings/opening-1", json={"position": 3})
    assert response.json()["position"] == 3

    explicit = client.post("/api/openings", json={
        "type": "window-slider", "wall": "east", "position": 4,
        "width": 4, "height": 3, "bottom_offset": 5,
    }).json()
    assert (explicit["id"], explicit["width"], explicit["bottom_offset"]) == ("opening-2", 4, 5)

    assert client.delete("/api/openings/opening-1").status_code == 204
    assert client.delete("/api/openings/opening-1").status_code == 404
    assert client.patch("/api/openings/opening-1", json={"position": 1}).status_code == 404
    assert [o["id"] for o in client.get("/api/state").json()["openings"]] == ["opening-2"]


def test_openings_are_stored_in_bounds(client):
    opening = client.post("/api/openings", json={
        "type": "walk-single", "wall": "south", "position": -40, "width": 3, "height": 6.67,
    }).json()
    assert opening["position"] == 0
    opening = client.patch(f"/api/openings/{opening['id']}", json={"position": 90}).json()
    assert opening["position"] == 27
    assert client.get("/api/state").json()["openings"][0]["position"] == 27


def test_visibility_mode_and_reset(client):
    client.put("/api/ui/visibility", json={"mode": "frame-only"})
    geometry = client.get("/api/geometry").json()
    assert {p["layer"] for p in geometry["primitives"]} == {"foundation", "primary"}
    state = client.post("/api/ui/reset-view").json()
    assert state["ui"]["visibility_mode"] == "full"
