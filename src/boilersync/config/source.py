"""Boilerplate source configuration.

Config discovery:
- ``BOILERSYNC_CONFIG`` names an explicit file when set.
- Otherwise walk up from the working directory looking for ``.boilersync.yml``.
- If not found, fall back to the default bundled with the package.
- Expose a memoized getter so callers can treat it like a constant.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict

import yaml

from ..errors import ConfigError

CONFIG_FILENAME = ".boilersync.yml"
CONFIG_ENV_VAR = "BOILERSYNC_CONFIG"


class SourceConfig(TypedDict):
    """Where boilerplates live on GitHub."""

    owner: str  # Metroxe
    repo: str  # cig-loop
    path: str  # boilerplates
    ref: Optional[str]  # branch or tag, None for the default branch


class BoilerSyncConfig(TypedDict):
    source: SourceConfig
    overwrite_by_default: List[str]  # filename suffixes pre-selected for overwrite
    workers: Optional[int]


def _parse_config_dict(data: Dict[str, Any]) -> BoilerSyncConfig:
    source = data.get("source")
    if not isinstance(source, dict):
        raise ConfigError("config must contain a 'source' mapping")

    owner = source.get("owner")
    repo = source.get("repo")
    if not isinstance(owner, str) or not owner:
        raise ConfigError("source.owner must be a non-empty string")
    if not isinstance(repo, str) or not repo:
        raise ConfigError("source.repo must be a non-empty string")
    path = source.get("path", "boilerplates")
    if not isinstance(path, str):
        raise ConfigError("source.path must be a string")
    ref = source.get("ref")
    if ref is not None and not isinstance(ref, str):
        raise ConfigError("source.ref must be a string")

    suffixes = data.get("overwrite_by_default", ["PROMPT.md"])
    if not isinstance(suffixes, list) or not all(isinstance(s, str) for s in suffixes):
        raise ConfigError("overwrite_by_default must be a list of strings")

    workers = data.get("workers")
    if workers is not None and (
        not isinstance(workers, int) or isinstance(workers, bool) or workers < 1
    ):
        raise ConfigError("workers must be a positive integer")

    return BoilerSyncConfig(
        source=SourceConfig(
            owner=owner,
            repo=repo,
            path=path.strip("/"),
            ref=ref,
        ),
        overwrite_by_default=list(suffixes),
        workers=workers,
    )


def load_config(path: Path) -> BoilerSyncConfig:
    """Load boilersync configuration from a YAML file path."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    return _parse_config_dict(data)


def load_bundled_config() -> BoilerSyncConfig:
    """Load the default configuration shipped with the package."""
    content = files("boilersync.config").joinpath("boilersync.yml").read_text(
        encoding="utf-8"
    )
    data = yaml.safe_load(content) or {}
    assert isinstance(data, dict)
    return _parse_config_dict(data)


def discover_config_path(start: Optional[Path] = None) -> Optional[Path]:
    """Find the config file named by the environment or in a parent directory."""
    explicit = os.getenv(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit)
    here = (start or Path.cwd()).resolve()
    for parent in (here, *here.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


@lru_cache(maxsize=1)
def get_config() -> BoilerSyncConfig:
    """Return the discovered or bundled configuration (memoized)."""
    path = discover_config_path()
    if path is not None:
        return load_config(path)
    return load_bundled_config()
