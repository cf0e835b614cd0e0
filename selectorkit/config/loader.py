"""
Configuration loading for selectorkit.

Sources are merged in this order, later ones winning:
profile < config file < environment < programmatic overrides.
"""

import copy
import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import SelectorKitConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConfigurationError(Exception):
    """Configuration loading or parsing error."""

    pass


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def _read_toml(path: Path) -> Any:
    return tomllib.loads(path.read_text(encoding="utf-8"))


_READERS = {
    ".json": _read_json,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".toml": _read_toml,
}


def load_file(path: PathLike) -> dict[str, Any]:
    """Load a configuration mapping from a JSON, YAML or TOML file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not a
            mapping, or its format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")

    try:
        data = reader(path)
    except (
        OSError,
        UnicodeDecodeError,
        json.JSONDecodeError,
        yaml.YAMLError,
        tomllib.TOMLDecodeError,
    ) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")

    logger.debug(f"Loaded configuration from {path}")
    return data


def find_config_file(search_paths: Optional[list[str]] = None) -> Optional[Path]:
    """Return the first ``selectorkit.config.*`` file found, if any."""
    for search_path in search_paths or DEFAULT_CONFIG_SEARCH_PATHS:
        directory = Path(search_path).expanduser()
        for ext in DEFAULT_CONFIG_EXTENSIONS:
            candidate = directory / f"{DEFAULT_CONFIG_FILENAME}{ext}"
            if candidate.is_file():
                return candidate
    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Deep merge configuration mappings; later ones take precedence.

    The inputs are left untouched.
    """
    result: dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = merge_configs(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
    return result


def _file_config(
    config_file: Optional[PathLike], search_paths: Optional[list[str]]
) -> dict[str, Any]:
    if config_file is not None:
        # An explicitly requested file must load.
        return load_file(config_file)

    found = find_config_file(search_paths)
    if found is None:
        return {}
    try:
        return load_file(found)
    except ConfigurationError as e:
        logger.warning(f"Ignoring unreadable config file: {e}")
        return {}


def load_config(
    config_file: Optional[PathLike] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    search_paths: Optional[list[str]] = None,
) -> SelectorKitConfig:
    """Load configuration from file, environment and overrides.

    Args:
        config_file: Explicit configuration file; searched for when omitted
        overrides: Programmatic overrides
        load_env: Whether to read ``SELECTORKIT_*`` variables
        search_paths: Directories searched when no file is given

    Returns:
        Loaded configuration
    """
    return _load(None, config_file, overrides, load_env, search_paths)


def _load(
    profile: Optional[str],
    config_file: Optional[PathLike],
    overrides: Optional[dict[str, Any]],
    load_env: bool,
    search_paths: Optional[list[str]],
) -> SelectorKitConfig:
    sources = []
    if profile is not None:
        sources.append({**load_profile(profile), "profile": profile})
    sources.append(_file_config(config_file, search_paths))
    if load_env:
        sources.append(load_env_config())
    sources.append(overrides or {})

    return SelectorKitConfig.from_dict(merge_configs(*sources))


def save_config(
    config: SelectorKitConfig,
    path: PathLike,
    format: str = "json",
) -> None:
    """Save configuration as JSON or YAML.

    Raises:
        ConfigurationError: If format is not supported
    """
    data = config.to_dict()

    if format == "json":
        text = json.dumps(data, indent=2)
    elif format in ("yaml", "yml"):
        text = yaml.safe_dump(data, default_flow_style=False)
    else:
        raise ConfigurationError(f"Unsupported output format: {format}")

    Path(path).write_text(text, encoding="utf-8")
    logger.debug(f"Saved configuration to {path}")


# Built-in configuration profiles
PROFILES = {
    "strict": {
        "builder": {
            "strict_combinators": True,
        },
    },
    "debug": {
        "log_level": "DEBUG",
    },
    "xml": {
        "builder": {
            "xpath_translator": "xml",
            "xpath_prefix": "",
        },
    },
}


def load_profile(name: str) -> dict[str, Any]:
    """Return a copy of a built-in profile (strict, debug, xml).

    Raises:
        ConfigurationError: If profile not found
    """
    if name not in PROFILES:
        raise ConfigurationError(
            f"Unknown profile: {name}. "
            f"Available profiles: {', '.join(PROFILES.keys())}"
        )

    return copy.deepcopy(PROFILES[name])


def load_config_with_profile(
    profile: str,
    config_file: Optional[PathLike] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    search_paths: Optional[list[str]] = None,
) -> SelectorKitConfig:
    """Load configuration with a built-in profile as base."""
    return _load(profile, config_file, overrides, load_env, search_paths)
