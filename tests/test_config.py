"""Tests for settings and the dependency container."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from landmark_router.adapters.cache import InMemoryCache, NullCache
from landmark_router.config import (
    AppConfig,
    GraphConfig,
    RoutingConfig,
    get_config,
    reset_config,
)
from landmark_router.container import Container, get_container, reset_container
from landmark_router.ports.cache import CachePort
from landmark_router.ports.graph import GraphRepositoryPort
from landmark_router.services import RoutingService

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def fresh_state():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


def test_defaults():
    config = AppConfig()

    assert config.graph.matrix_path.name == "landmarks_adjacency.csv"
    assert config.routing.distance_unit_meters == 100.0
    assert config.routing.walking_speed_m_per_min == 70.0
    assert config.routing.max_enumeration_nodes == 40
    assert config.observability.level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("LMR_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LMR_ROUTING_WALKING_SPEED_M_PER_MIN", "80")
    monkeypatch.setenv("LMR_ROUTING_CACHE_RESULTS", "false")
    monkeypatch.setenv("LMR_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.graph.matrix_path == tmp_path / "landmarks_adjacency.csv"
    assert config.routing.walking_speed_m_per_min == 80.0
    assert config.routing.cache_results is False
    assert config.observability.level == "DEBUG"


def test_get_config_is_cached_until_reset():
    first = get_config()

    assert get_config() is first
    reset_config()
    assert get_config() is not first


@pytest.mark.parametrize(
    "overrides",
    [
        {"distance_unit_meters": 0},
        {"walking_speed_m_per_min": -70},
        {"query_workers": 0},
    ],
)
def test_invalid_routing_values(overrides):
    with pytest.raises(ValidationError):
        RoutingConfig(**overrides)


def make_config(**routing) -> AppConfig:
    return AppConfig(
        graph=GraphConfig(data_dir=DATA_DIR), routing=RoutingConfig(**routing)
    )


def test_default_container_answers_queries():
    container = Container.create_default(make_config())

    service = container.resolve(RoutingService)
    result = service.find_routes("Main Gate", "Library")

    assert container.resolve(RoutingService) is service
    assert result.optimal.names == ("Main Gate", "Library")
    assert isinstance(container.resolve(CachePort), InMemoryCache)


def test_cache_can_be_disabled():
    container = Container.create_default(make_config(cache_results=False))

    assert isinstance(container.resolve(CachePort), NullCache)


def test_register_overrides_binding():
    container = Container.create_default(make_config())
    sentinel = object()

    container.register(GraphRepositoryPort, lambda: sentinel, singleton=False)

    assert container.resolve(GraphRepositoryPort) is sentinel
    with pytest.raises(KeyError):
        Container(config=make_config()).resolve(RoutingService)


def test_get_container_is_shared(monkeypatch):
    monkeypatch.setenv("LMR_GRAPH_DATA_DIR", str(DATA_DIR))

    assert get_container() is get_container()
