"""Configuration management for boilersync."""

from .source import (
    BoilerSyncConfig,
    SourceConfig,
    discover_config_path,
    get_config,
    load_bundled_config,
    load_config,
)

__all__ = [
    "BoilerSyncConfig",
    "SourceConfig",
    "discover_config_path",
    "get_config",
    "load_bundled_config",
    "load_config",
]
