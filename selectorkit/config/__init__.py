"""
Configuration module for selectorkit.

This module provides:
- Strongly-typed option classes (BuilderOptions, SerializationOptions)
- Configuration file loading (JSON, YAML, TOML)
- Environment variable support
- Built-in profiles (strict, debug, xml)

Example usage:
    from selectorkit.config import SelectorKitConfig, BuilderOptions, load_config

    # Load from file with environment overrides
    config = load_config("selectorkit.config.yaml")

    # Create programmatically
    config = SelectorKitConfig(
        builder=BuilderOptions(strict_combinators=True),
    )

    # Use built-in profile
    from selectorkit.config import load_config_with_profile
    config = load_config_with_profile("strict")

Environment variables:
    SELECTORKIT_BUILDER_STRICT_COMBINATORS=true
    SELECTORKIT_BUILDER_XPATH_TRANSLATOR=xml
    SELECTORKIT_SERIALIZATION_COMPACT=false
    SELECTORKIT_LOG_LEVEL=DEBUG
"""

from .defaults import ENV_PREFIX
from .env import ENV_MAPPINGS, get_env_key, load_env_config
from .loader import (
    PROFILES,
    ConfigurationError,
    find_config_file,
    load_config,
    load_config_with_profile,
    load_file,
    load_profile,
    merge_configs,
    save_config,
)
from .options import (
    BuilderOptions,
    SelectorKitConfig,
    SerializationOptions,
    XPathTranslator,
)

__all__ = [
    # Main configuration class
    "SelectorKitConfig",
    # Option classes
    "BuilderOptions",
    "SerializationOptions",
    "XPathTranslator",
    # Loader functions
    "load_config",
    "load_config_with_profile",
    "load_file",
    "load_profile",
    "save_config",
    "find_config_file",
    "merge_configs",
    "ConfigurationError",
    "PROFILES",
    # Environment
    "get_env_key",
    "load_env_config",
    "ENV_MAPPINGS",
    "ENV_PREFIX",
]
