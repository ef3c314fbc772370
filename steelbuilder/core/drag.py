"""Opening drag controller — pointer events to opening position updates.

Two states: idle and dragging. A drag starts on pointer-down over an
opening, follows one pointer, and ends on pointer-up or pointer-leave for
that pointer. Events that don't fit the current state are ignored.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Protocol

from steelbuilder.core.placement import (
    wall_length, clamp_position, clamp_bottom_offset,
)
from steelbuilder.models.building import BuildingConfig, Opening, WallSide
from steelbuilder.models.parameters import PlacementParams

logger = logging.getLogger(__name__)

# Walls whose left edge is on the screen's right when viewed from outside.
REVERSED_WALLS = frozenset({WallSide.NORTH, WallSide.WEST})


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class Viewport(NamedTuple):
    width: float
    height: float


class CameraControl(Protocol):
    def suspend(self) -> None: ...
    def resume(self) -> None: ...


class PointerCapture(Protocol):
    def capture(self, pointer_id: int) -> None: ...
    def release(self, pointer_id: int) -> None: ...


class OpeningStore(Protocol):
    @property
    def config(self) -> BuildingConfig: ...
    def update_opening(self, opening_id: str, **changes: object) -> Optional[Opening]: ...
    def set_selected_opening_id(self, opening_id: Optional[str]) -> None: ...
    def set_dragging(self, dragging: bool) -> None: ...


@dataclass(frozen=True)
class DragSession:
    """What was recorded at pointer-down."""
    opening_id: str
    pointer_id: int
    wall: WallSide
    width: float
    height: float
    is_window: bool
    start_position: float
    start_bottom_offset: float
    start_x: float
    start_y: float


class OpeningDragController:
    def __init__(
        self,
        store: OpeningStore,
        camera: CameraControl | None = None,
        pointer: PointerCapture | None = None,
        params: PlacementParams | None = None,
    ) -> None:
        self.store = store
        self.camera = camera
        self.pointer = pointer
        self.params = params or PlacementParams()
        self._session: DragSession | None = None

    @property
    def state(self) -> DragState:
        return DragState.IDLE if self._session is None else DragState.DRAGGING

    @property
    def session(self) -> DragSession | None:
        return self._session

    def pointer_down(self, opening_id: str, pointer_id: int, x: float, y: float) -> bool:
        """Start dragging `opening_id`. Returns False if the event was ignored."""
        if self._session is not None:
            logger.debug("pointer_down on %s ignored: already dragging", opening_id)
            return False
        opening = self.store.config.get_opening(opening_id)
        if opening is None:
            logger.debug("pointer_down ignored: no opening %s", opening_id)
            return False

        if self.pointer is not None:
            self.pointer.capture(pointer_id)
        self._session = DragSession(
            opening_id=opening.id,
            pointer_id=pointer_id,
            wall=opening.wall,
            width=opening.width,
            height=opening.height,
            is_window=opening.type.is_window,
            start_position=opening.position,
            start_bottom_offset=opening.bottom_offset,
            start_x=x,
            start_y=y,
        )
        self.store.set_selected_opening_id(opening.id)
        self.store.set_dragging(True)
        if self.camera is not None:
            self.camera.suspend()
        return True

    def pointer_move(
        self, pointer_id: int, x: float, y: float, viewport: Viewport,
    ) -> Opening | None:
        """Move the dragged opening. Returns the updated opening, or None if ignored."""
        session = self._session
        if session is None or session.pointer_id != pointer_id:
            logger.debug("pointer_move from pointer %s ignored", pointer_id)
            return None
        if viewport.width <= 0 or viewport.height <= 0:
            logger.debug("pointer_move ignored: empty viewport %s", viewport)
            return None

        dims = self.store.config.dimensions
        gain = self.params.drag_gain
        sign = -1.0 if session.wall in REVERSED_WALLS else 1.0
        scale = wall_length(session.wall, dims) / viewport.width
        position = session.start_position + sign * (x - session.start_x) * scale * gain
        changes: dict[str, float] = {
            "position": clamp_position(position, session.wall, session.width, dims),
        }

        if session.is_window:
            v_scale = self.params.vertical_drag_span / viewport.height
            bottom = session.start_bottom_offset - (y - session.start_y) * v_scale * gain
            changes["bottom_offset"] = clamp_bottom_offset(bottom, session.height, self.params)

        return self.store.update_opening(session.opening_id, **changes)

    def pointer_up(self, pointer_id: int) -> bool:
        return self._finish(pointer_id, "pointer_up")

    def pointer_leave(self, pointer_id: int) -> bool:
        return self._finish(pointer_id, "pointer_leave")

    def _finish(self, pointer_id: int, event: str) -> bool:
        session = self._session
        if session is None or session.pointer_id != pointer_id:
            logger.debug("%s from pointer %s ignored", event, pointer_id)
            return False
        self._session = None
        if self.pointer is not None:
            self.pointer.release(pointer_id)
        self.store.set_dragging(False)
        if self.camera is not None:
            self.camera.resume()
        return True
