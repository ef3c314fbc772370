"""Abstract base class for all geometry rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each generates the primitives of one building concern
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
- Memoizable: each rule names the configuration fields it reads
"""

from __future__ import annotations
import json
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from steelbuilder.models.context import BuildingContext
from steelbuilder.models.primitives import Primitive


def _resolve(obj: Any, path: str) -> Any:
    for part in path.split("."):
        obj = getattr(obj, part)
    return obj


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, tuple):
        return [_jsonable(v) for v in value]
    if hasattr(value, "value"):  # Enum
        return value.value
    return value


class GeometryRule(ABC):
    """
    Base class for all geometry rules.

    Subclasses implement `applies()` and `generate()` and list the dotted
    configuration paths they read in `reads`. The generator caches a rule's
    output under those values, so anything a rule reads must be listed.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    # Dotted BuildingConfig paths this rule's output depends on.
    reads: tuple[str, ...] = ("dimensions", "roof")

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'frame.primary')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Primary Frames')."""
        ...

    @abstractmethod
    def applies(self, context: BuildingContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: BuildingContext) -> list[Primitive]:
        """
        Generate primitives for the given context.

        The context provides the configuration plus the analysis results
        (roof solution, frame layout) from the analyzer.
        """
        ...

    def cache_key(self, context: BuildingContext) -> str:
        """Stable key over the configuration fields listed in `reads`."""
        values = {path: _jsonable(_resolve(context.config, path)) for path in self.reads}
        return self.get_id() + ":" + json.dumps(values, sort_keys=True)
