"""High-level building service — facade for the API layer."""

from __future__ import annotations

from steelbuilder.config import Settings, get_settings
from steelbuilder.models import (
    BuildingConfig, BuildingGeometry, GenerationConfig,
)
from steelbuilder.core.cache import GeometryCache
from steelbuilder.core.generator import BuildingGenerator
from steelbuilder.core.registry import RuleRegistry, create_default_registry
from steelbuilder.services.store import BuildingStore


class BuildingService:
    """Holds the session store and delegates geometry to the generator."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        settings: Settings | None = None,
        store: BuildingStore | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.registry = registry or create_default_registry()
        self.generator = BuildingGenerator(self.registry, GeometryCache(settings.cache_size))
        self.store = store or BuildingStore(placement_params=self.generator.placement_params)

    def generate(
        self,
        config: BuildingConfig,
        generation: GenerationConfig | None = None,
    ) -> BuildingGeometry:
        return self.generator.generate(config, generation)

    def geometry(self) -> BuildingGeometry:
        """Geometry for the store's current snapshot."""
        return self.generator.generate(self.store.config)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
