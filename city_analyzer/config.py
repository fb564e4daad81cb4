"""Centralized configuration using Pydantic Settings.

All tunables of the analyzer live here: where the network and district
data files are, whether road construction is strict, and how logging is
emitted.

Configuration can be overridden via environment variables:
- CITY_NETWORK_DATA_DIR=/path/to/data
- CITY_NETWORK_STRICT_ROADS=true
- CITY_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Network and district data configuration.

    Environment variables prefixed with CITY_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    cities_file: str = "cities.csv"
    roads_file: str = "roads.csv"
    districts_file: str = "districts.csv"
    strict_roads: bool = False
    default_start: str = "Metropolis"

    @property
    def cities_path(self) -> Path:
        """Full path to cities CSV file."""
        return self.data_dir / self.cities_file

    @property
    def roads_path(self) -> Path:
        """Full path to roads CSV file."""
        return self.data_dir / self.roads_file

    @property
    def districts_path(self) -> Path:
        """Full path to districts CSV file."""
        return self.data_dir / self.districts_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITY_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.roads_path)

    Environment variables prefixed with CITY_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
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
