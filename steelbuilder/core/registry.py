"""Rule registry — stores geometry rules and resolves their run order."""

from __future__ import annotations
import logging

from steelbuilder.models.context import BuildingContext
from steelbuilder.rules.base import GeometryRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for all geometry rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, GeometryRule] = {}

    def register(self, rule: GeometryRule) -> None:
        """Register a geometry rule, replacing any rule with the same id."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> GeometryRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[GeometryRule]:
        """Return all registered rules in priority order."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def get_applicable_rules(self, context: BuildingContext) -> list[GeometryRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects GenerationConfig.enabled_rules and disabled_rules.
        """
        generation = context.generation
        candidates = list(self._rules.values())

        if generation.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in generation.enabled_rules]

        if generation.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in generation.disabled_rules]

        applicable = [r for r in candidates if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[GeometryRule]) -> list[GeometryRule]:
        """
        Order `rules` so each runs after its dependencies. A dependency that
        is not among `rules` (filtered out, not applicable or unregistered)
        is skipped and the dependent rule still runs.
        """
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[GeometryRule] = []

        def visit(rule: GeometryRule) -> None:
            rule_id = rule.get_id()
            if rule_id in visited:
                return
            visited.add(rule_id)
            for dep_id in rule.dependencies:
                dep = rule_map.get(dep_id)
                if dep is None:
                    reason = "not registered" if dep_id not in self._rules else "not selected"
                    logger.debug("Rule %s runs without dependency %s (%s)", rule_id, dep_id, reason)
                    continue
                visit(dep)
            ordered.append(rule)

        for rule in rules:
            visit(rule)
        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard geometry rules."""
    from steelbuilder.rules.frame.foundation import SlabRule
    from steelbuilder.rules.frame.primary_frame import PrimaryFrameRule
    from steelbuilder.rules.frame.secondary import PurlinRule, GirtRule
    from steelbuilder.rules.envelope.end_walls import EndWallRule
    from steelbuilder.rules.envelope.side_walls import SideWallRule, WainscotRule, MainTrimRule
    from steelbuilder.rules.envelope.roof_panels import RoofPanelRule, RidgeAccessoryRule
    from steelbuilder.rules.leanto.lean_to import create_lean_to_rules
    from steelbuilder.rules.openings import OpeningRule

    registry = RuleRegistry()
    for rule in (
        SlabRule(),
        PrimaryFrameRule(),
        PurlinRule(),
        GirtRule(),
        EndWallRule(),
        SideWallRule(),
        WainscotRule(),
        MainTrimRule(),
        RoofPanelRule(),
        RidgeAccessoryRule(),
        *create_lean_to_rules(),
        OpeningRule(),
    ):
        registry.register(rule)
    return registry
