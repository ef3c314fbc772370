"""Roof geometry solver — rise, angles and panel lengths per roof style."""

from __future__ import annotations
import math
from functools import lru_cache

from steelbuilder.models.building import RoofStyle
from steelbuilder.models.roof import RoofFace, RoofGeometry, LeanToProfile


CENTRED_OFFSET = 5.0
PEAK_TRAVEL = 0.8  # Fraction of the half-width the ridge may move


def roof_rise(width: float, pitch: float) -> float:
    """Vertical rise from eave to ridge: half the width at `pitch` in 12."""
    return (width / 2) * (pitch / 12)


def peak_offset(width: float, asymmetric_offset: float) -> float:
    """Ridge displacement from the centreline; 0 at the centred offset."""
    return ((asymmetric_offset - CENTRED_OFFSET) / CENTRED_OFFSET) * (width / 2) * PEAK_TRAVEL


def _face(run: float, rise: float) -> RoofFace:
    return RoofFace(
        run=run,
        angle=math.atan2(rise, run),
        length=math.sqrt(run ** 2 + rise ** 2),
    )


@lru_cache(maxsize=512)
def solve_roof(
    width: float,
    pitch: float,
    style: RoofStyle,
    asymmetric_offset: float = CENTRED_OFFSET,
) -> RoofGeometry:
    """
    Solve the roof for one style.

    The rise is always computed from the half-width, so the ridge height is
    the same for every style. On an asymmetrical roof each face keeps that
    rise over its own run, which gives the two faces different effective
    pitches.
    """
    rise = roof_rise(width, pitch)
    half = width / 2

    if style == RoofStyle.SINGLE_SLOPE:
        face = _face(width, rise)
        return RoofGeometry(
            style=style, width=width, pitch=pitch, rise=rise,
            angle=face.angle, panel_length=face.length,
            peak_offset=0.0, faces=(face,),
        )

    nominal = _face(half, rise)
    if style == RoofStyle.ASYMMETRICAL:
        offset = peak_offset(width, asymmetric_offset)
        faces = (_face(half + offset, rise), _face(half - offset, rise))
    else:
        offset = 0.0
        faces = (nominal, nominal)

    return RoofGeometry(
        style=style, width=width, pitch=pitch, rise=rise,
        angle=nominal.angle, panel_length=nominal.length,
        peak_offset=offset, faces=faces,
    )


@lru_cache(maxsize=512)
def solve_lean_to(
    main_dimension: float,
    eave_height: float,
    drop: float,
    depth: float,
    pitch: float,
    cut_l: float = 0.0,
    cut_r: float = 0.0,
    min_outer_height: float = 1.0,
) -> LeanToProfile:
    """
    Solve a lean-to's shed roof.

    The roof falls from `eave_height - drop` at the building to the outer
    edge. The outer height is clamped to `min_outer_height`; the span is
    not, so heavy cuts can leave a zero or negative span.
    """
    attach = eave_height - drop
    rise = depth * (pitch / 12)
    return LeanToProfile(
        span=main_dimension - cut_l - cut_r,
        lateral_offset=(cut_r - cut_l) / 2,
        depth=depth,
        attach_height=attach,
        rise=rise,
        outer_height=max(min_outer_height, attach - rise),
        slope_length=math.sqrt(depth ** 2 + rise ** 2),
        slope_angle=math.atan2(rise, depth),
    )
