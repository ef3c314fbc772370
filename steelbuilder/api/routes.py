"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from steelbuilder.models import (
    BuildingConfig, BuildingGeometry, ColorSlot, Opening, WallSide,
)
from steelbuilder.services.building_service import BuildingService
from steelbuilder.api.schemas import (
    GenerateRequest, GenerateResponse, RuleInfo, DimensionsUpdate, RoofUpdate,
    WallsUpdate, LeanToUpdate, ValueUpdate, ColorUpdate, EnclosedUpdate,
    VisibilityUpdate, OpeningCreate, OpeningUpdate,
)

router = APIRouter()

# Shared service instance
_service = BuildingService()


def get_service() -> BuildingService:
    return _service


@router.post("/generate", response_model=GenerateResponse)
async def generate_building(
    request: GenerateRequest, service: BuildingService = Depends(get_service),
) -> GenerateResponse:
    """Generate geometry for a configuration without touching the session."""
    geometry = service.generate(request.config, request.generation)
    return GenerateResponse(geometry=geometry, rule_count=len(service.list_rules()))


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules(service: BuildingService = Depends(get_service)) -> list[RuleInfo]:
    """List all available geometry rules."""
    return [RuleInfo(**r) for r in service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


# Session store

@router.get("/state", response_model=BuildingConfig)
async def get_state(service: BuildingService = Depends(get_service)) -> BuildingConfig:
    return service.store.config


@router.get("/geometry", response_model=BuildingGeometry)
async def get_geometry(service: BuildingService = Depends(get_service)) -> BuildingGeometry:
    return service.geometry()


@router.patch("/dimensions", response_model=BuildingConfig)
async def update_dimensions(
    body: DimensionsUpdate, service: BuildingService = Depends(get_service),
) -> BuildingConfig:
    return service.store.set_dimensions(**body.changes())


@router.patch("/roof", response_model=BuildingConfig)
async def update_roof(
    body: RoofUpdate, service: BuildingService = Depends(get_service),
) -> BuildingConfig:
    return service.store.set_roof(**body.changes())


@router.put("/roof/overhangs/{side}", response_model=BuildingConfig)
async def set_overhang(
    side: WallSide, body: ValueUpdate, service: BuildingService = Depends(get_service),
) -> BuildingConfig:
    return service.store.set_roof_overhang(side, body.value)


@router.put("/colors/{slot}", response_model=BuildingConfig)
async def set_color(
    slot: ColorSlot, body: ColorUpdate, service: BuildingService = Depends(get_service),
) -> BuildingConfig:
    return service.store.set_color(slot, body.value)


@router.patch("/walls", response_model=BuildingConfig)
async def update_walls(
    body: WallsUpdate, service: BuildingService = Depends(get_service),
) -> BuildingConfig:
    return service.store.set_walls(**body.changes())


@router.put("/walls/{side}/enclosed", response_model=BuildingConfig)
async def set_wall_enclosed(
    side: WallSide, body: EnclosedUpdate, service: BuildingService = Depends(get_service),
) -> BuildingConfig:
    return service.store.set_wall_enclosed(side, body.enclosed)


@router.patch("/lean-tos/{side}", response_model=BuildingConfig)
async def update_lean_to(
    side: WallSide, body: LeanToUpdate, service: BuildingService = Depends(get_service),
) -> BuildingConfig:
    return service.store.set_lean_to_config(side, **body.changes())


@router.post("/openings", response_model=Opening, status_code=201)
async def add_opening(
    body: OpeningCreate, service: BuildingService = Depends(get_service),
) -> Opening:
    if body.is_quick_add:
        return service.store.quick_add_opening(body.type, body.wall)
    return service.store.add_opening(
        body.type, body.wall, body.position, body.width, body.height, body.bottom_offset,
    )


@router.patch("/openings/{opening_id}", response_model=Opening)
async def update_opening(
    opening_id: str, body: OpeningUpdate, service: BuildingService = Depends(get_service),
) -> Opening:
    opening = service.store.update_opening(opening_id, **body.changes())
    if opening is None:
        raise HTTPException(status_code=404, detail=f"Opening {opening_id} not found")
    return opening


@router.delete("/openings/{opening_id}", status_code=204)
async def remove_opening(
    opening_id: str, service: BuildingService = Depends(get_service),
) -> None:
    if not service.store.remove_opening(opening_id):
        raise HTTPException(status_code=404, detail=f"Opening {opening_id} not found")


@router.put("/ui/visibility", response_model=BuildingConfig)
async def set_visibility(
    body: VisibilityUpdate, service: BuildingService = Depends(get_service),
) -> BuildingConfig:
    return service.store.set_visibility_mode(body.mode)


@router.post("/ui/reset-view", response_model=BuildingConfig)
async def reset_view(service: BuildingService = Depends(get_service)) -> BuildingConfig:
    return service.store.reset_view()
