"""Derived roof and frame-layout quantities."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .building import RoofStyle


class RoofFace(BaseModel):
    """One sloped roof plane, described by its horizontal run."""
    model_config = ConfigDict(frozen=True)

    run: float
    angle: float    # Radians above horizontal
    length: float   # Along the slope


class RoofGeometry(BaseModel):
    """Solved roof for a style. `angle`/`panel_length` use the half-span
    (full span for single-slope); `faces` holds the per-face values."""
    model_config = ConfigDict(frozen=True)

    style: RoofStyle
    width: float
    pitch: float
    rise: float
    angle: float
    panel_length: float
    peak_offset: float
    faces: tuple[RoofFace, ...]

    @property
    def left(self) -> RoofFace:
        return self.faces[0]

    @property
    def right(self) -> RoofFace:
        return self.faces[-1]

    @property
    def ridge_x(self) -> float:
        return self.peak_offset


class FrameLayout(BaseModel):
    """Primary-frame count and positions along the building length."""
    model_config = ConfigDict(frozen=True)

    num_frames: int
    frame_spacing: float
    positions: tuple[float, ...]


class LeanToProfile(BaseModel):
    """Solved shed roof of one lean-to, in its local frame."""
    model_config = ConfigDict(frozen=True)

    span: float            # Along the wall, after cuts
    lateral_offset: float  # Centre shift along the wall caused by uneven cuts
    depth: float
    attach_height: float   # High side, at the building
    rise: float
    outer_height: float    # Low side, clamped to the minimum
    slope_length: float
    slope_angle: float
