"""
Configuration options classes for selectorkit.

This module provides strongly-typed option classes for the selector builder
and the JSON helpers, with validation via Pydantic.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_COMPACT_JSON,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SORT_KEYS,
    DEFAULT_STRICT_COMBINATORS,
    DEFAULT_XPATH_PREFIX,
    DEFAULT_XPATH_TRANSLATOR,
)


class XPathTranslator(str, Enum):
    """cssselect translator flavours."""

    HTML = "html"
    XML = "xml"


class BuilderOptions(BaseModel):
    """Selector builder options."""

    strict_combinators: bool = Field(
        DEFAULT_STRICT_COMBINATORS,
        description="Reject combinator tokens other than ' ', '>', '+', '~'",
    )
    xpath_translator: XPathTranslator = Field(
        XPathTranslator(DEFAULT_XPATH_TRANSLATOR),
        description="Translator used by to_xpath()",
    )
    xpath_prefix: str = Field(
        DEFAULT_XPATH_PREFIX, description="XPath axis prepended by to_xpath()"
    )

    def merge(self, other: "BuilderOptions") -> "BuilderOptions":
        """Merge with another BuilderOptions, explicitly set fields of other win."""
        data = self.model_dump()
        data.update(other.model_dump(exclude_unset=True))
        return BuilderOptions(**data)


class SerializationOptions(BaseModel):
    """JSON helper options."""

    compact: bool = Field(
        DEFAULT_COMPACT_JSON, description="Omit whitespace after separators"
    )
    sort_keys: bool = Field(DEFAULT_SORT_KEYS, description="Sort object keys")

    def json_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for json.dumps()."""
        kwargs: dict[str, Any] = {"sort_keys": self.sort_keys}
        if self.compact:
            kwargs["separators"] = (",", ":")
        return kwargs

    def merge(self, other: "SerializationOptions") -> "SerializationOptions":
        """Merge with another SerializationOptions, explicitly set fields of other win."""
        data = self.model_dump()
        data.update(other.model_dump(exclude_unset=True))
        return SerializationOptions(**data)


class SelectorKitConfig(BaseModel):
    """Main configuration class combining all options."""

    builder: BuilderOptions = Field(
        default_factory=BuilderOptions, description="Builder options"
    )
    serialization: SerializationOptions = Field(
        default_factory=SerializationOptions, description="JSON helper options"
    )
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="selectorkit log level")
    profile: Optional[str] = Field(None, description="Configuration profile name")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        levels = logging.getLevelNamesMapping()
        if isinstance(v, int):
            if v not in levels.values():
                raise ValueError(f"Unknown log level: {v}")
            return logging.getLevelName(v)
        level = str(v).upper()
        if level not in levels:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SelectorKitConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def merge(self, other: "SelectorKitConfig") -> "SelectorKitConfig":
        """Merge with another SelectorKitConfig, other takes precedence."""
        return SelectorKitConfig(
            builder=self.builder.merge(other.builder),
            serialization=self.serialization.merge(other.serialization),
            log_level=(
                other.log_level
                if "log_level" in other.model_fields_set
                else self.log_level
            ),
            profile=other.profile or self.profile,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(mode="json", exclude_none=True)

    def apply_logging(self) -> None:
        """Set the level of the ``selectorkit`` logger."""
        logging.getLogger("selectorkit").setLevel(self.log_level)
