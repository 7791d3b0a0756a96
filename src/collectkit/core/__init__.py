"""collectkit.core -- errors, guards, logging, protocols, random source, settings."""

from collectkit.core.errors import (
    CollectKitError,
    ErrorCategory,
    ErrorContext,
    InvalidArgumentError,
    MissingArgumentError,
    ReadOnlyCollectionError,
    UnsupportedOperationError,
    categorize_error,
)
from collectkit.core.logging import LogContext, bind_context, clear_context, configure_logging, get_logger
from collectkit.core.protocols import MutableCollection, RandomSource
from collectkit.core.random_source import default_random, use_random

__all__ = [
    "CollectKitError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidArgumentError",
    "MissingArgumentError",
    "ReadOnlyCollectionError",
    "UnsupportedOperationError",
    "categorize_error",
    "LogContext",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "MutableCollection",
    "RandomSource",
    "default_random",
    "use_random",
]
