"""
Default configuration values for selectorkit.
"""

# Builder defaults
DEFAULT_STRICT_COMBINATORS = False
DEFAULT_XPATH_TRANSLATOR = "html"
DEFAULT_XPATH_PREFIX = "descendant-or-self::"

# Serialization defaults
DEFAULT_COMPACT_JSON = True
DEFAULT_SORT_KEYS = False

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"

# File config defaults
DEFAULT_CONFIG_FILENAME = "selectorkit.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/selectorkit",
]

# Environment variable prefix
ENV_PREFIX = "SELECTORKIT_"
