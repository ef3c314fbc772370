"""Engine constants and generation configuration."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict


class FrameParams(BaseModel):
    """Main-building structural dimensions (feet)."""
    model_config = ConfigDict(frozen=True)

    max_frame_spacing: float = 25.0
    end_wall_inset: float = 1.0       # End frames sit this far inside the end walls
    flange_width: float = 1.2
    web_height: float = 1.0           # Depth of the H/I section
    flange_thickness: float = 0.15
    web_thickness: float = 0.1
    beam_size: float = 0.4
    rafter_offset: float = 0.8        # Rafters sit below the roof surface
    knee_brace_ratio: float = 0.3     # Of eave height
    knee_brace_max: float = 4.0
    purlin_size: float = 0.15
    purlin_drop: float = 0.3
    girt_size: float = 0.2
    girt_target_spacing: float = 4.0
    ridge_beam_size: float = 0.3
    ridge_beam_drop: float = 0.6
    perimeter_beam_drop: float = 0.2
    high_column_clearance: float = 0.5  # Single-slope high column stops short of the roof

    # Envelope
    wall_thickness: float = 0.4
    end_wall_standoff: float = 0.05
    peak_extra: float = 0.2           # Apex overlaps the ridge slightly
    single_slope_top_offset: float = -0.1
    east_wall_clearance: float = 0.15
    roof_thickness: float = 0.15
    roof_lift: float = 0.1
    roof_extension: float = 1.5       # Past the overhang frames, each end
    roof_eave_extra: float = 0.5
    asym_roof_eave_extra: float = 0.3
    eave_trim_height: float = 0.6

    @property
    def column_inset(self) -> float:
        return self.flange_width / 2 + 0.3


class LeanToParams(BaseModel):
    """Lean-to structural dimensions (feet)."""
    model_config = ConfigDict(frozen=True)

    frame_count: int = 3
    end_wall_inset: float = 1.5
    column_extra_inset: float = 1.5
    rafter_drop: float = 1.0
    min_outer_height: float = 1.0
    purlin_spacing: float = 3.0
    min_purlins: int = 3
    beam_size: float = 0.3
    apron_height: float = 2.0

    def column_inset(self, frame: FrameParams) -> float:
        return frame.flange_width / 2 + self.column_extra_inset


class PlacementParams(BaseModel):
    """Opening placement and drag constants."""
    model_config = ConfigDict(frozen=True)

    nominal_wall_height: float = 14.0     # Window vertical clamp ceiling
    window_bottom_offset: float = 4.0
    door_bottom_offset: float = 0.0
    drag_gain: float = 2.0
    vertical_drag_span: float = 20.0      # World units mapped to the viewport height
    wall_standoff: float = 0.5            # Openings sit proud of the wainscot


class GenerationConfig(BaseModel):
    """Controls which rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
