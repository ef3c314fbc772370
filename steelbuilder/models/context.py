"""Building context — accumulates state during a generation pass."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

from .building import BuildingConfig
from .primitives import Primitive, VisibilityFlags
from .parameters import FrameParams, LeanToParams, PlacementParams, GenerationConfig
from .roof import RoofGeometry, FrameLayout


class BuildingContext(BaseModel):
    """
    Holds all state during a single generation pass.

    The analyzer adds derived quantities (roof solution, frame layout,
    visibility flags). Rules add primitives. The generator orchestrates.
    """
    # Input
    config: BuildingConfig
    frame_params: FrameParams = Field(default_factory=FrameParams)
    lean_to_params: LeanToParams = Field(default_factory=LeanToParams)
    placement_params: PlacementParams = Field(default_factory=PlacementParams)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    roof: Optional[RoofGeometry] = None
    frames: Optional[FrameLayout] = None
    visibility: VisibilityFlags = Field(default_factory=VisibilityFlags)

    # Output (populated by rules)
    primitives: list[Primitive] = []

    def add_primitives(self, primitives: list[Primitive]) -> None:
        self.primitives.extend(primitives)

    @property
    def solved_roof(self) -> RoofGeometry:
        if self.roof is None:
            raise RuntimeError("roof has not been solved; run the analyzer first")
        return self.roof

    @property
    def frame_layout(self) -> FrameLayout:
        if self.frames is None:
            raise RuntimeError("frame layout has not been computed; run the analyzer first")
        return self.frames
