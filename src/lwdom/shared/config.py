"""Configuration classes for lwdom document writing.

This module provides the immutable configuration object that controls how a
document tree is rendered: the indent unit, the starting depth, and the
correlation ID attached to log records.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError, ValueError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class WriterConfig:
    """Configuration for rendering and writing documents.

    Thread-safe due to frozen dataclass implementation.

    Attributes:
        indent_unit: String repeated once per depth level at the start of every
            line. ``None`` disables indentation and line breaks entirely.
        indent_depth: Depth of the root element (number of indent repeats).
        correlation_id: Optional correlation ID for request tracking
    """

    indent_unit: Optional[str] = " "
    indent_depth: int = 0
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate writer configuration."""
        if self.indent_unit is not None and not isinstance(self.indent_unit, str):
            raise ConfigValidationError(
                "indent_unit must be a string or None",
                field_name="indent_unit",
                suggestions=["Use ' ' or '\\t'", "Use None for flat output"],
            )
        if isinstance(self.indent_depth, bool) or not isinstance(self.indent_depth, int):
            raise ConfigValidationError(
                "indent_depth must be an integer", field_name="indent_depth"
            )
        if self.indent_depth < 0:
            raise ConfigValidationError(
                "indent_depth must be >= 0", field_name="indent_depth"
            )

    @property
    def is_compact(self) -> bool:
        """True when output carries no indentation or line breaks."""
        return self.indent_unit is None

    def override(self, **kwargs: Any) -> "WriterConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New WriterConfig instance with overrides applied

        Example:
            >>> config = WriterConfig()
            >>> config.override(indent_unit="\\t").indent_unit
            '\\t'
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WriterConfig":
        """Create configuration from dictionary.

        Keys that are not configuration fields are ignored.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_json(cls, json_str: str) -> "WriterConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods
    @classmethod
    def pretty(cls) -> "WriterConfig":
        """One space per level, one node per line (the default layout)."""
        return cls()

    @classmethod
    def tabbed(cls) -> "WriterConfig":
        """One tab per level, one node per line."""
        return cls(indent_unit="\t")

    @classmethod
    def compact(cls) -> "WriterConfig":
        """No indentation and no line breaks."""
        return cls(indent_unit=None)
