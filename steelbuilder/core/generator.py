"""Main geometry generator — orchestrates analysis and rule execution."""

from __future__ import annotations
import logging

from steelbuilder.models import (
    BuildingConfig, BuildingContext, BuildingGeometry, FrameParams,
    LeanToParams, PlacementParams, GenerationConfig,
)
from steelbuilder.core.registry import RuleRegistry
from steelbuilder.core.analyzer import BuildingAnalyzer
from steelbuilder.core.cache import GeometryCache
from steelbuilder.core.visibility import filter_visible

logger = logging.getLogger(__name__)


class BuildingGenerator:
    """
    Deterministic building generator.

    Takes a configuration snapshot, runs analysis, executes the applicable
    rules and returns the visible geometry. Each rule's output is cached
    under the configuration fields it reads, so a change only rebuilds the
    rules that depend on it.
    """

    def __init__(
        self,
        registry: RuleRegistry,
        cache: GeometryCache | None = None,
        frame_params: FrameParams | None = None,
        lean_to_params: LeanToParams | None = None,
        placement_params: PlacementParams | None = None,
    ) -> None:
        self.registry = registry
        self.cache = cache if cache is not None else GeometryCache()
        self.analyzer = BuildingAnalyzer()
        self.frame_params = frame_params or FrameParams()
        self.lean_to_params = lean_to_params or LeanToParams()
        self.placement_params = placement_params or PlacementParams()

    def generate(
        self,
        config: BuildingConfig,
        generation: GenerationConfig | None = None,
    ) -> BuildingGeometry:
        if generation is None:
            generation = GenerationConfig()

        context = BuildingContext(
            config=config,
            frame_params=self.frame_params,
            lean_to_params=self.lean_to_params,
            placement_params=self.placement_params,
            generation=generation,
        )

        # Analysis phase
        self.analyzer.analyze(context)

        # Generation phase: applicable rules, reusing cached output
        rules = self.registry.get_applicable_rules(context)
        hits = 0
        for rule in rules:
            key = rule.cache_key(context)
            primitives = self.cache.get(key)
            if primitives is None:
                primitives = rule.generate(context)
                self.cache.put(key, primitives)
                logger.debug("Rule %s generated %d primitives", rule.get_id(), len(primitives))
            else:
                hits += 1
            context.add_primitives(primitives)

        visible = filter_visible(context.primitives, context.visibility)
        logger.info(
            "Generated %d primitives (%d visible) from %d rules, %d cached",
            len(context.primitives), len(visible), len(rules), hits,
        )
        return BuildingGeometry(
            primitives=visible,
            visibility=context.visibility,
            colors=config.colors.model_dump(),
        )
