"""Building store — owns the current configuration snapshot.

Every mutation validates the merged sub-object and swaps in a new
snapshot; nothing is edited in place. Out-of-range values raise
pydantic.ValidationError. Opening positions and window bottom offsets are
clamped onto their wall as they are stored. Operations on unknown ids log
a warning and do nothing.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

from pydantic import BaseModel

from steelbuilder.core.placement import quick_add, clamp_opening, default_position
from steelbuilder.models import (
    BuildingConfig, ColorSlot, LegacyLeanTo, Opening, OpeningType,
    ViewMode, VisibilityMode, WallSide, PlacementParams,
)

logger = logging.getLogger(__name__)


def _merged(model: BaseModel, changes: dict[str, Any]) -> BaseModel:
    """Validate `changes` applied over `model`. Nested dicts merge into nested models."""
    fields = type(model).model_fields
    unknown = set(changes) - set(fields)
    if unknown:
        raise ValueError(f"unknown {type(model).__name__} fields: {sorted(unknown)}")

    data = dict(model)
    for name, value in changes.items():
        current = data[name]
        if isinstance(current, BaseModel) and isinstance(value, dict):
            value = _merged(current, value)
        data[name] = value
    return type(model).model_validate(
        {k: v.model_dump() if isinstance(v, BaseModel) else v for k, v in data.items()}
    )


class BuildingStore:
    def __init__(
        self,
        config: BuildingConfig | None = None,
        placement_params: PlacementParams | None = None,
    ) -> None:
        self._config = config or BuildingConfig()
        self.placement_params = placement_params or PlacementParams()
        self._next_opening = len(self._config.openings) + 1
        self._next_lean_to = len(self._config.lean_tos) + 1

    @property
    def config(self) -> BuildingConfig:
        return self._config

    def replace(self, config: BuildingConfig) -> None:
        """Swap in a whole snapshot."""
        self._config = config

    def _update(self, **sections: Any) -> BuildingConfig:
        self._config = self._config.model_copy(update=sections)
        return self._config

    # Building shape

    def set_dimensions(self, **changes: Any) -> BuildingConfig:
        return self._update(dimensions=_merged(self._config.dimensions, changes))

    def set_roof(self, **changes: Any) -> BuildingConfig:
        return self._update(roof=_merged(self._config.roof, changes))

    def set_roof_overhang(self, side: WallSide, value: float) -> BuildingConfig:
        side = WallSide(side)
        return self.set_roof(overhangs={side.value: value})

    def set_color(self, slot: ColorSlot, value: str) -> BuildingConfig:
        slot = ColorSlot(slot)
        return self._update(colors=_merged(self._config.colors, {slot.value: value}))

    def set_walls(self, **changes: Any) -> BuildingConfig:
        return self._update(walls=_merged(self._config.walls, changes))

    def set_wall_enclosed(self, side: WallSide, enclosed: bool) -> BuildingConfig:
        side = WallSide(side)
        return self.set_walls(enclosed={side.value: enclosed})

    def set_lean_to_config(self, side: WallSide, **changes: Any) -> BuildingConfig:
        side = WallSide(side)
        return self._update(
            lean_to_configs=_merged(self._config.lean_to_configs, {side.value: changes})
        )

    # Legacy lean-to records

    def add_lean_to(self, wall: WallSide, width: float, length: float, height: float) -> LegacyLeanTo:
        lean_to = LegacyLeanTo(
            id=self._new_id("leanto", {lt.id for lt in self._config.lean_tos}),
            wall=wall, width=width, length=length, height=height,
        )
        self._update(lean_tos=self._config.lean_tos + (lean_to,))
        return lean_to

    def update_lean_to(self, lean_to_id: str, **changes: Any) -> Optional[LegacyLeanTo]:
        for i, lean_to in enumerate(self._config.lean_tos):
            if lean_to.id == lean_to_id:
                updated = _merged(lean_to, changes)
                items = list(self._config.lean_tos)
                items[i] = updated
                self._update(lean_tos=tuple(items))
                return updated
        logger.warning("update_lean_to: no lean-to %s", lean_to_id)
        return None

    def remove_lean_to(self, lean_to_id: str) -> bool:
        remaining = tuple(lt for lt in self._config.lean_tos if lt.id != lean_to_id)
        if len(remaining) == len(self._config.lean_tos):
            logger.warning("remove_lean_to: no lean-to %s", lean_to_id)
            return False
        self._update(lean_tos=remaining)
        return True

    # Openings

    def add_opening(
        self,
        type: OpeningType,
        wall: WallSide,
        position: float,
        width: float,
        height: float,
        bottom_offset: float = 0.0,
    ) -> Opening:
        opening = Opening(
            id=self._new_id("opening", {o.id for o in self._config.openings}),
            type=type, wall=wall, position=position,
            width=width, height=height, bottom_offset=bottom_offset,
        )
        opening = clamp_opening(opening, self._config.dimensions, self.placement_params)
        self._update(openings=self._config.openings + (opening,))
        return opening

    def quick_add_opening(self, type: OpeningType, wall: WallSide) -> Opening:
        """Add a catalogue-sized opening centred on `wall`."""
        opening = quick_add(
            self._new_id("opening", {o.id for o in self._config.openings}),
            OpeningType(type), WallSide(wall), self._config.dimensions, self.placement_params,
        )
        self._update(openings=self._config.openings + (opening,))
        return opening

    def update_opening(self, opening_id: str, **changes: Any) -> Optional[Opening]:
        """Apply `changes` and clamp the result onto its wall.

        Moving an opening to another wall without a new position centres it
        on the new wall.
        """
        dims = self._config.dimensions
        for i, opening in enumerate(self._config.openings):
            if opening.id == opening_id:
                updated = _merged(opening, changes)
                if "wall" in changes and "position" not in changes:
                    updated = updated.model_copy(update={
                        "position": default_position(updated.wall, updated.width, dims),
                    })
                updated = clamp_opening(updated, dims, self.placement_params)
                items = list(self._config.openings)
                items[i] = updated
                self._update(openings=tuple(items))
                return updated
        logger.warning("update_opening: no opening %s", opening_id)
        return None

    def remove_opening(self, opening_id: str) -> bool:
        remaining = tuple(o for o in self._config.openings if o.id != opening_id)
        if len(remaining) == len(self._config.openings):
            logger.warning("remove_opening: no opening %s", opening_id)
            return False
        ui = self._config.ui
        if ui.selected_opening_id == opening_id:
            ui = ui.model_copy(update={"selected_opening_id": None, "is_dragging": False})
        self._update(openings=remaining, ui=ui)
        return True

    # Interaction state

    def _set_ui(self, **changes: Any) -> BuildingConfig:
        return self._update(ui=_merged(self._config.ui, changes))

    def set_placement_mode(self, mode: Optional[OpeningType]) -> BuildingConfig:
        return self._set_ui(placement_mode=mode, selected_opening_id=None)

    def set_selected_opening_id(self, opening_id: Optional[str]) -> BuildingConfig:
        return self._set_ui(selected_opening_id=opening_id, placement_mode=None)

    def set_dragging(self, dragging: bool) -> BuildingConfig:
        return self._set_ui(is_dragging=dragging)

    def set_expanded_panel(self, panel: Optional[str]) -> BuildingConfig:
        return self._set_ui(expanded_panel=panel)

    def set_view_mode(self, mode: ViewMode) -> BuildingConfig:
        return self._set_ui(view_mode=mode)

    def set_visibility_mode(self, mode: VisibilityMode) -> BuildingConfig:
        return self._set_ui(visibility_mode=mode)

    def reset_view(self) -> BuildingConfig:
        return self._set_ui(view_mode=ViewMode.EXTERIOR, visibility_mode=VisibilityMode.FULL)

    def set_environment(self, **changes: Any) -> BuildingConfig:
        return self._update(environment=_merged(self._config.environment, changes))

    def _new_id(self, prefix: str, taken: set[str]) -> str:
        attr = "_next_opening" if prefix == "opening" else "_next_lean_to"
        n = getattr(self, attr)
        while f"{prefix}-{n}" in taken:
            n += 1
        setattr(self, attr, n + 1)
        return f"{prefix}-{n}"
