"""API request/response schemas.

Update bodies are partial: only the fields a client sends are applied.
Range checks happen in the store, so limits live in one place.
"""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel

from steelbuilder.models import (
    BuildingConfig, BuildingGeometry, GenerationConfig, LeanToWallType,
    OpeningType, RoofStyle, VisibilityMode, WallSide,
)


class GenerateRequest(BaseModel):
    """Request body for the stateless /generate endpoint."""
    config: BuildingConfig = BuildingConfig()
    generation: GenerationConfig = GenerationConfig()


class GenerateResponse(BaseModel):
    geometry: BuildingGeometry
    rule_count: int


class RuleInfo(BaseModel):
    id: str
    name: str


class _Partial(BaseModel):
    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class DimensionsUpdate(_Partial):
    width: Optional[float] = None
    length: Optional[float] = None
    eave_height: Optional[float] = None


class RoofUpdate(_Partial):
    style: Optional[RoofStyle] = None
    pitch: Optional[float] = None
    asymmetric_offset: Optional[float] = None
    ridge_vents: Optional[int] = None
    cupola_2ft: Optional[int] = None
    cupola_3ft: Optional[int] = None


class WallsUpdate(_Partial):
    wainscot_enabled: Optional[bool] = None
    wainscot_height: Optional[float] = None


class LeanToUpdate(_Partial):
    enabled: Optional[bool] = None
    drop: Optional[float] = None
    cut_l: Optional[float] = None
    cut_r: Optional[float] = None
    depth: Optional[float] = None
    roof_pitch: Optional[float] = None
    walls: Optional[LeanToWallType] = None


class ValueUpdate(BaseModel):
    value: float


class ColorUpdate(BaseModel):
    value: str


class EnclosedUpdate(BaseModel):
    enclosed: bool


class VisibilityUpdate(BaseModel):
    mode: VisibilityMode


class OpeningCreate(BaseModel):
    """Without a size, the opening is quick-added from the catalogue."""
    type: OpeningType
    wall: WallSide
    position: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    bottom_offset: float = 0.0

    @property
    def is_quick_add(self) -> bool:
        return self.position is None or self.width is None or self.height is None


class OpeningUpdate(_Partial):
    type: Optional[OpeningType] = None
    wall: Optional[WallSide] = None
    position: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    bottom_offset: Optional[float] = None
