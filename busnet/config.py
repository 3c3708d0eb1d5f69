"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- BUSNET_GRAPH_SOLVER=scan
- BUSNET_GRAPH_AUTO_CREATE_STOPS=false
- BUSNET_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Stop graph configuration.

    Environment variables prefixed with BUSNET_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="BUSNET_GRAPH_")

    solver: Literal["heap", "scan"] = "heap"
    # When False, add_route raises StopNotFoundError for unknown endpoints.
    auto_create_stops: bool = True


class CLIConfig(BaseSettings):
    """Interactive menu configuration.

    Environment variables prefixed with BUSNET_CLI_.
    """

    model_config = SettingsConfigDict(env_prefix="BUSNET_CLI_")

    prompt: str = " Enter your choice: "
    distance_unit: str = "KM"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with BUSNET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="BUSNET_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.solver)

    Environment variables prefixed with BUSNET_.
    """

    model_config = SettingsConfigDict(env_prefix="BUSNET_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    cli: CLIConfig = Field(default_factory=CLIConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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
