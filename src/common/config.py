"""Shared YAML configuration utilities."""

import os
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

import yaml

T = TypeVar("T")


def resolve_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "default",
    env_var: str | None = None,
) -> Path:
    """Resolve a config name or path to an existing YAML file.

    Args:
        config_name: Config name (without .yaml), a path to a YAML file, or
            None to fall back to env_var and then default_name
        config_dir: Directory holding named config files
        default_name: Config name used when nothing else is given
        env_var: Environment variable holding a config name or path

    Returns:
        Path to the config file

    Raises:
        FileNotFoundError: If the config file doesn't exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    if "/" in config_name or config_name.endswith((".yaml", ".yml")):
        config_path = Path(config_name)
    else:
        config_path = config_dir / f"{config_name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping; an empty file yields an empty dict."""
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Return a nested config section, treating a missing or null section as empty."""
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a mapping")
    return value


class ConfigSingleton(Generic[T]):
    """Lazily loaded process-wide config with get/set/reset accessors."""

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        self._config = config

    def reset(self) -> None:
        self._config = None
