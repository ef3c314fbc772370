import pytest

from steelbuilder.core.generator import BuildingGenerator
from steelbuilder.core.registry import create_default_registry
from steelbuilder.models import BuildingConfig
from steelbuilder.services.store import BuildingStore


@pytest.fixture
def generator():
    return BuildingGenerator(create_default_registry())


@pytest.fixture
def store():
    return BuildingStore()


@pytest.fixture
def default_config():
    return BuildingConfig()
