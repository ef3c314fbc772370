"""Building configuration models — dimensions, roof, walls, lean-tos, openings.

A `BuildingConfig` is an immutable snapshot. Field constraints reject values
outside the accepted ranges at the mutation boundary; everything inside the
ranges is accepted and any geometric degeneracy is handled downstream by
clamping.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class WallSide(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class RoofStyle(str, Enum):
    GABLE = "gable"
    SINGLE_SLOPE = "single-slope"
    ASYMMETRICAL = "asymmetrical"


class LeanToWallType(str, Enum):
    FULL_LENGTH = "full-length"
    FULLY_ENCLOSED = "fully-enclosed"
    OPEN = "open"
    GABLE_DRESS = "gable-dress"
    GABLE_WALLS_ONLY = "gable-walls-only"
    APRON_2FT = "2ft-apron"


class OpeningType(str, Enum):
    WALK_SINGLE = "walk-single"
    WALK_DOUBLE = "walk-double"
    WALK_HALF_GLASS = "walk-half-glass"
    SLIDING_GLASS = "sliding-glass"
    DUTCH_EQUINE = "dutch-equine"
    OVERHEAD = "overhead"
    OVERHEAD_MODERN = "overhead-modern"
    OVERHEAD_GLASS = "overhead-glass"
    SLIDING = "sliding"
    SLIDING_LEFT = "sliding-left"
    SLIDING_RIGHT = "sliding-right"
    ROLL_UP = "roll-up"
    BI_FOLD = "bi-fold"
    HYDRAULIC = "hydraulic"
    WINDOW_SLIDER = "window-slider"
    WINDOW_HOPPER = "window-hopper"

    @property
    def is_window(self) -> bool:
        return self.value.startswith("window")

    @property
    def is_overhead(self) -> bool:
        return self.value.startswith("overhead") or self in (
            OpeningType.ROLL_UP, OpeningType.BI_FOLD, OpeningType.HYDRAULIC,
        )

    @property
    def is_glazed(self) -> bool:
        return self.is_window or self in (
            OpeningType.SLIDING_GLASS,
            OpeningType.OVERHEAD_GLASS,
            OpeningType.WALK_HALF_GLASS,
        )


class ColorSlot(str, Enum):
    ROOF = "roof"
    WALL = "wall"
    TRIM = "trim"
    WAINSCOT = "wainscot"


class SkyType(str, Enum):
    DAY = "day"
    SUNSET = "sunset"
    NIGHT = "night"


class GroundType(str, Enum):
    GRASS = "grass"
    CONCRETE = "concrete"
    GRAVEL = "gravel"


class ViewMode(str, Enum):
    EXTERIOR = "exterior"
    INTERIOR = "interior"


class VisibilityMode(str, Enum):
    FULL = "full"
    HIDE_WALLS = "hide-walls"
    HIDE_ROOF = "hide-roof"
    FRAME_ONLY = "frame-only"


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)


class Dimensions(_Snapshot):
    """Main building footprint and wall height (feet)."""
    width: float = Field(default=30.0, gt=0)
    length: float = Field(default=40.0, gt=0)
    eave_height: float = Field(default=10.0, gt=0)


class Overhangs(_Snapshot):
    """Roof overhang distance per side."""
    north: float = Field(default=0.0, ge=0)
    south: float = Field(default=0.0, ge=0)
    east: float = Field(default=1.0, ge=0)
    west: float = Field(default=1.0, ge=0)

    def get(self, side: WallSide) -> float:
        return getattr(self, side.value)


class RoofConfig(_Snapshot):
    style: RoofStyle = RoofStyle.GABLE
    pitch: float = Field(default=4.0, ge=1, le=6)              # Rise per 12 of run
    asymmetric_offset: float = Field(default=4.0, ge=1, le=9)  # 5 = centred ridge
    overhangs: Overhangs = Field(default_factory=Overhangs)
    ridge_vents: int = Field(default=0, ge=0, le=10)
    cupola_2ft: int = Field(default=0, ge=0, le=5)
    cupola_3ft: int = Field(default=0, ge=0, le=5)


class Colors(_Snapshot):
    """Colour assignments. Purely visual."""
    roof: str = Field(default="#5c4033", pattern=r"^#[0-9a-fA-F]{6}$")
    wall: str = Field(default="#e8e4d9", pattern=r"^#[0-9a-fA-F]{6}$")
    trim: str = Field(default="#5c4033", pattern=r"^#[0-9a-fA-F]{6}$")
    wainscot: str = Field(default="#5c4033", pattern=r"^#[0-9a-fA-F]{6}$")


class EnclosedWalls(_Snapshot):
    north: bool = True
    south: bool = True
    east: bool = True
    west: bool = True

    def get(self, side: WallSide) -> bool:
        return getattr(self, side.value)


class WallsConfig(_Snapshot):
    enclosed: EnclosedWalls = Field(default_factory=EnclosedWalls)
    wainscot_enabled: bool = False
    wainscot_height: float = Field(default=3.0, ge=0)


class LeanToConfig(_Snapshot):
    """Shed-roofed extension along one full side of the building."""
    enabled: bool = False
    drop: float = Field(default=1.0, ge=0, le=5)        # Below main eave at the wall
    cut_l: float = Field(default=0.0, ge=0, le=20)      # Trimmed from the left end
    cut_r: float = Field(default=0.0, ge=0, le=20)      # Trimmed from the right end
    depth: float = Field(default=12.0, ge=4, le=20)     # Outward from the wall
    roof_pitch: float = Field(default=3.0, ge=1, le=6)
    walls: LeanToWallType = LeanToWallType.FULL_LENGTH


class LeanToConfigs(_Snapshot):
    south: LeanToConfig = Field(default_factory=LeanToConfig)
    north: LeanToConfig = Field(default_factory=LeanToConfig)
    west: LeanToConfig = Field(default_factory=LeanToConfig)
    east: LeanToConfig = Field(default_factory=LeanToConfig)

    def get(self, side: WallSide) -> LeanToConfig:
        return getattr(self, side.value)


class LegacyLeanTo(_Snapshot):
    """Free-standing lean-to record kept for older saved designs."""
    id: str
    wall: WallSide
    width: float
    length: float
    height: float


class Opening(_Snapshot):
    """A door or window positioned along one of the four main walls."""
    id: str
    type: OpeningType
    wall: WallSide
    position: float       # Distance from the wall's left edge
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    bottom_offset: float = 0.0  # Distance from the ground


class Environment(_Snapshot):
    sky: SkyType = SkyType.DAY
    ground: GroundType = GroundType.GRASS
    show_grid: bool = True


class InteractionState(_Snapshot):
    expanded_panel: Optional[str] = "dimensions"
    view_mode: ViewMode = ViewMode.EXTERIOR
    visibility_mode: VisibilityMode = VisibilityMode.FULL
    placement_mode: Optional[OpeningType] = None
    selected_opening_id: Optional[str] = None
    is_dragging: bool = False


class BuildingConfig(_Snapshot):
    """Complete configuration snapshot consumed by the generator."""
    dimensions: Dimensions = Field(default_factory=Dimensions)
    roof: RoofConfig = Field(default_factory=RoofConfig)
    colors: Colors = Field(default_factory=Colors)
    walls: WallsConfig = Field(default_factory=WallsConfig)
    lean_to_configs: LeanToConfigs = Field(default_factory=LeanToConfigs)
    lean_tos: tuple[LegacyLeanTo, ...] = ()
    openings: tuple[Opening, ...] = ()
    environment: Environment = Field(default_factory=Environment)
    ui: InteractionState = Field(default_factory=InteractionState)

    def get_opening(self, opening_id: str) -> Opening | None:
        for o in self.openings:
            if o.id == opening_id:
                return o
        return None
