"""TOML configuration loader.

Settings are layered as ``config/default.toml`` followed by the optional
``config/<environment>.toml``, where the environment comes from
``ACTIONITEMS_ENV``. Nested tables merge key by key.
"""

import os
import re
import tomllib
from pathlib import Path
from typing import Any

from actionitems.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENVIRONMENT = "development"
DEFAULT_FILE = "default.toml"

ENVIRONMENT_NAME = re.compile(r"^[a-z0-9][a-z0-9_-]*$")

# Levels searched above the working directory for a config/ folder
SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Resolve the directory holding the TOML files.

    ``ACTIONITEMS_CONFIG_DIR`` wins when set and must exist; otherwise the
    nearest ``config/`` at or above the working directory is used.
    """
    override = os.environ.get("ACTIONITEMS_CONFIG_DIR")
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    current = Path.cwd()
    for candidate in [current, *current.parents][:SEARCH_DEPTH]:
        if (candidate / "config").is_dir():
            return candidate / "config"

    return Path("config")


def get_environment() -> str:
    """Return the normalized ``ACTIONITEMS_ENV`` value.

    Raises:
        ValueError: If the name could not be a file in the config directory
    """
    env = os.environ.get("ACTIONITEMS_ENV", DEFAULT_ENVIRONMENT).strip().lower()
    if not ENVIRONMENT_NAME.match(env):
        raise ValueError(f"Invalid ACTIONITEMS_ENV: {env!r}")
    return env


def available_environments(config_dir: Path) -> list[str]:
    """Environment names that ship an override file, sorted."""
    return sorted(
        path.stem for path in config_dir.glob("*.toml") if path.name != DEFAULT_FILE
    )


def load_toml(file_path: Path) -> dict[str, Any]:
    """Read one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` onto a copy of ``base``; nested tables merge recursively."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict[str, Any]:
    """Load ``default.toml`` and layer the environment file over it.

    An environment without its own file runs on the defaults alone; that
    case is logged together with the environments that do exist.
    """
    config_dir = get_config_dir()
    env = get_environment()

    default_path = config_dir / DEFAULT_FILE
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            "Create config/default.toml or set ACTIONITEMS_CONFIG_DIR."
        )

    config = load_toml(default_path)

    env_path = config_dir / f"{env}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))
    else:
        logger.warning(
            "config_environment_file_missing",
            environment=env,
            available=available_environments(config_dir),
        )

    return config
