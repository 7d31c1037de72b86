"""Shared utilities for lwdom.

This module provides the configuration object, the exception hierarchy, and
the logging helpers used across the DOM and writer layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    WriterConfig,
)
from .exceptions import (
    ChildIndexError,
    DocumentWriteError,
    EmptyChildrenError,
    InvalidIdentifierError,
    LWDomError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "WriterConfig",
    "ChildIndexError",
    "DocumentWriteError",
    "EmptyChildrenError",
    "InvalidIdentifierError",
    "LWDomError",
    "CorrelationLogger",
    "get_logger",
]
