"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file location, unit conversion, routing limits and logging.

Configuration can be overridden via environment variables:
- LMR_GRAPH_DATA_DIR=/path/to/data
- LMR_ROUTING_WALKING_SPEED_M_PER_MIN=80
- LMR_ROUTING_MAX_ENUMERATION_NODES=25
- LMR_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with LMR_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="LMR_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    matrix_file: str = "landmarks_adjacency.csv"

    @property
    def matrix_path(self) -> Path:
        """Full path to the adjacency matrix CSV file."""
        return self.data_dir / self.matrix_file


class RoutingConfig(BaseSettings):
    """Routing and unit conversion configuration.

    Environment variables prefixed with LMR_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="LMR_ROUTING_")

    # One graph distance unit expressed in meters.
    distance_unit_meters: float = 100.0
    walking_speed_m_per_min: float = 70.0
    # Exhaustive enumeration is exponential; refuse graphs above this size.
    max_enumeration_nodes: Optional[int] = 40
    alternatives_limit: Optional[int] = 10
    strict_path_distance: bool = False
    cache_results: bool = True
    query_workers: int = 2

    @field_validator("distance_unit_meters", "walking_speed_m_per_min")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be strictly positive")
        return value

    @field_validator("query_workers")
    @classmethod
    def _at_least_one_worker(cls, value: int) -> int:
        if value < 1:
            raise ValueError("at least one worker is required")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with LMR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="LMR_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.matrix_path)
        print(config.routing.walking_speed_m_per_min)

    Environment variables prefixed with LMR_.
    """

    model_config = SettingsConfigDict(env_prefix="LMR_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
