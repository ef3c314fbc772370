import logging

from steelbuilder.core.registry import RuleRegistry, create_default_registry
from steelbuilder.models import BuildingConfig, BuildingContext, GenerationConfig, PrimitiveRole
from steelbuilder.rules.base import GeometryRule
from helpers import count_role

REGISTRY_LOGGER = "steelbuilder.core.registry"


class StubRule(GeometryRule):
    def __init__(self, rule_id, priority=100, dependencies=(), applies=True):
        self.rule_id = rule_id
        self.priority = priority
        self.dependencies = list(dependencies)
        self._applies = applies

    def get_id(self):
        return self.rule_id

    def get_name(self):
        return self.rule_id.title()

    def applies(self, context):
        return self._applies

    def generate(self, context):
        return []


def applicable_ids(registry, **generation):
    context = BuildingContext(config=BuildingConfig(), generation=GenerationConfig(**generation))
    return [r.get_id() for r in registry.get_applicable_rules(context)]


def test_priority_order():
    registry = RuleRegistry()
    for rule in (StubRule("c", 30), StubRule("a", 10), StubRule("b", 20)):
        registry.register(rule)
    assert applicable_ids(registry) == ["a", "b", "c"]
    assert [r.get_id() for r in registry.list_rules()] == ["a", "b", "c"]


def test_dependencies_run_first():
    registry = RuleRegistry()
    registry.register(StubRule("early", 5, dependencies=["late"]))
    registry.register(StubRule("late", 50))
    registry.register(StubRule("middle", 20))
    assert applicable_ids(registry) == ["late", "early", "middle"]


def test_missing_dependency_is_logged(caplog):
    registry = RuleRegistry()
    registry.register(StubRule("roof", 10, dependencies=["frame", "ghost"]))
    registry.register(StubRule("frame", 5, applies=False))
    with caplog.at_level(logging.DEBUG, logger=REGISTRY_LOGGER):
        assert applicable_ids(registry) == ["roof"]
    messages = [r.getMessage() for r in caplog.records if r.name == REGISTRY_LOGGER]
    assert "Rule roof runs without dependency frame (not selected)" in messages
    assert "Rule roof runs without dependency ghost (not registered)" in messages


def test_lean_to_without_primary_frames(generator, store, caplog):
    store.set_lean_to_config("south", enabled=True)
    with caplog.at_level(logging.DEBUG, logger=REGISTRY_LOGGER):
        geometry = generator.generate(
            store.config, GenerationConfig(disabled_rules=["frame.primary"]),
        )
    assert count_role(geometry, PrimitiveRole.ROOF_PANEL) == 3
    assert any(
        "leanto.south runs without dependency frame.primary" in r.getMessage()
        for r in caplog.records
    )


def test_unregister():
    registry = create_default_registry()
    registry.unregister("openings")
    registry.unregister("missing")
    assert registry.get_rule("openings") is None
    assert len(registry.list_rules()) == 14
