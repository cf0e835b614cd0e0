"""
Environment variable support for selectorkit configuration.

Every option of every config section has a variable named after its
dotted key, e.g. ``builder.strict_combinators`` is read from
``SELECTORKIT_BUILDER_STRICT_COMBINATORS``. Values are passed on as
strings; pydantic converts them when the config is built.
"""

import os
from typing import Any

from .defaults import ENV_PREFIX
from .options import SelectorKitConfig


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a configuration key to environment variable name.

    Args:
        key: Configuration key (e.g., "builder.strict_combinators")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "SELECTORKIT_BUILDER_STRICT_COMBINATORS")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def _config_keys() -> list[str]:
    keys = []
    for name, field in SelectorKitConfig.model_fields.items():
        if name == "profile":
            continue
        section = field.annotation
        if isinstance(section, type) and hasattr(section, "model_fields"):
            keys.extend(f"{name}.{option}" for option in section.model_fields)
        else:
            keys.append(name)
    return keys


# Configuration key -> environment variable name
ENV_MAPPINGS = {key: get_env_key(key) for key in _config_keys()}


def load_env_config() -> dict[str, Any]:
    """Load configuration from the mapped environment variables.

    Returns:
        Nested dictionary holding only the variables that are set
    """
    result: dict[str, Any] = {}

    for key, env_var in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        if "." in key:
            section, option = key.split(".", 1)
            result.setdefault(section, {})[option] = value
        else:
            result[key] = value

    return result
