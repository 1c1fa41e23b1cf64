"""
Pytest fixtures and configuration for the test suite.

Fixtures build real registries, engines and services - no mocks.
Each test gets its own instances so registry state never leaks between tests.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path so tests can import groupgrid package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from groupgrid.components.players import (  # noqa: E402
    CoordinateGenerator,
    GroupingConfig,
    GroupingEngine,
    PlayerRegistry,
    RegistryConfig,
    SurfaceConfig,
)
from groupgrid.services.domain.players_svc import PlayersService  # noqa: E402
from groupgrid.services.info_svc import InfoConfig, InfoService  # noqa: E402


@pytest.fixture(autouse=True)
def clean_groupgrid_env(monkeypatch) -> None:
    """Drop GROUPGRID_* variables from the host environment."""
    for key in list(os.environ):
        if key.startswith("GROUPGRID_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def registry() -> PlayerRegistry:
    """Registry with the default capacity of 100."""
    return PlayerRegistry(RegistryConfig(capacity=100))


@pytest.fixture
def small_registry() -> PlayerRegistry:
    """Registry with room for three players."""
    return PlayerRegistry(RegistryConfig(capacity=3))


@pytest.fixture
def engine(registry: PlayerRegistry) -> GroupingEngine:
    """Grouping engine with threshold 0.5 bound to the registry fixture."""
    return GroupingEngine(registry, GroupingConfig(threshold=0.5))


@pytest.fixture
def surface() -> SurfaceConfig:
    """10x10 surface with a fixed seed."""
    return SurfaceConfig(width=10.0, height=10.0, seed=1234)


@pytest.fixture
def players_service(registry: PlayerRegistry, engine: GroupingEngine, surface: SurfaceConfig) -> PlayersService:
    """PlayersService wired to the registry and engine fixtures."""
    return PlayersService(registry=registry, grouping=engine, coordinates=CoordinateGenerator(surface))


@pytest.fixture
def info_service(registry: PlayerRegistry, engine: GroupingEngine, surface: SurfaceConfig) -> InfoService:
    """InfoService wired to the registry and engine fixtures."""
    return InfoService(cfg=InfoConfig(version="test", surface=surface), registry=registry, grouping=engine)


@pytest.fixture
def test_client(players_service: PlayersService, info_service: InfoService) -> Generator[TestClient, None, None]:
    """TestClient with services injected through dependency overrides."""
    from groupgrid.interfaces.api.api_app import api_app
    from groupgrid.interfaces.api.dependencies import get_info_service, get_players_service

    api_app.dependency_overrides[get_players_service] = lambda: players_service
    api_app.dependency_overrides[get_info_service] = lambda: info_service
    try:
        yield TestClient(api_app)
    finally:
        api_app.dependency_overrides.clear()


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (no HTTP stack)")
    config.addinivalue_line("markers", "integration: mark test as integration test (full HTTP stack)")
