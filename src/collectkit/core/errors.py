"""
Structured error types for collectkit.

Provides a small hierarchy of typed errors with metadata for categorization,
reporting, and root cause analysis through error chaining.

Every collection operation in collectkit reports failures synchronously and
locally. A caller must always be able to tell "the call succeeded but did
nothing" (a return value of 0 / False / empty) from "the call could not be
attempted" (one of the errors below). CollectKitError and its subclasses carry:
- **Category:** What kind of failure (validation, unsupported, config)
- **Context:** Which operation, which argument, which collection type
- **Cause:** Chained underlying exception for root cause analysis

Manifesto:
    - **Typed Error Hierarchy:** Precondition failures and unsupported
      operations are different things and get different types
    - **Fail Before Mutating:** Precondition checks run before any write
    - **Rich Context:** Errors name the argument and the operation
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     CollectKitError                          │
        │            (category, context, cause, to_dict)               │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  ValidationError          UnsupportedOperationError          │
        │  (VALIDATION)             (UNSUPPORTED)                      │
        │       │                         │                            │
        │  PreconditionError        ReadOnlyCollectionError            │
        │       │                                                      │
        │  MissingArgumentError     ConfigError (CONFIG)               │
        │  InvalidArgumentError          │                             │
        │                           InvalidConfigError                 │
        └─────────────────────────────────────────────────────────────┘

Examples:
    Reporting a missing argument:

    >>> err = MissingArgumentError("collection", operation="add_unique")
    >>> err.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> err.context.argument
    'collection'

    Reporting an unsupported mutation:

    >>> err = ReadOnlyCollectionError((1, 2), operation="remove_where")
    >>> err.context.collection_type
    'tuple'

Guardrails:
    ❌ DON'T: Return 0 or False to signal a broken precondition
    ✅ DO: Raise MissingArgumentError / InvalidArgumentError

    ❌ DON'T: Swallow the collection's own exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, collectkit

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification.

    Categories:
    - **VALIDATION:** A required argument is missing or has an invalid value
    - **UNSUPPORTED:** The collection cannot perform the requested mutation
    - **CONFIG:** Settings could not be loaded or are invalid
    - **INTERNAL:** A defect inside collectkit
    - **UNKNOWN:** Anything not raised by collectkit itself
    """

    VALIDATION = "VALIDATION"
    UNSUPPORTED = "UNSUPPORTED"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Instead of passing ad-hoc dictionaries, ErrorContext has typed fields for
    the metadata every collection failure shares: the operation that failed,
    the offending argument, and the concrete type of the collection involved.
    Anything else goes into ``metadata``.

    Examples:
        >>> ctx = ErrorContext(operation="chunk", argument="size")
        >>> ctx.to_dict()
        {'operation': 'chunk', 'argument': 'size'}

    Attributes:
        operation: Name of the public function that failed
        argument: Name of the argument at fault
        collection_type: ``type(collection).__name__`` of the target
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    argument: str | None = None
    collection_type: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "argument", "collection_type"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class CollectKitError(Exception):
    """
    Base exception for all collectkit errors.

    Subclasses set ``default_category``; callers may override it per
    instance. The optional ``cause`` is chained as ``__cause__`` so
    tracebacks show the original failure.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> CollectKitError:
        """
        Add context to this error (fluent API).

        Usage:
            raise CollectKitError("Failed").with_context(
                operation="add_unique_range",
                batch_size=120,
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(CollectKitError):
    """
    An argument failed validation.

    Raised before any mutation takes place, so the collection is untouched.
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        operation: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if argument is not None:
            self.context.argument = argument
        if operation is not None:
            self.context.operation = operation

    @property
    def argument(self) -> str | None:
        return self.context.argument


class PreconditionError(ValidationError):
    """A call precondition does not hold."""

    pass


class MissingArgumentError(PreconditionError):
    """A required argument was ``None``."""

    def __init__(self, argument: str, message: str | None = None, **kwargs: Any):
        super().__init__(
            message or f"The value of '{argument}' cannot be None.",
            argument=argument,
            **kwargs,
        )


class InvalidArgumentError(ValidationError):
    """An argument has a value outside its accepted range."""

    def __init__(
        self,
        argument: str,
        value: Any,
        reason: str,
        message: str | None = None,
        **kwargs: Any,
    ):
        self.value = value
        self.reason = reason
        super().__init__(
            message or f"Invalid value {value!r} for '{argument}': {reason}.",
            argument=argument,
            **kwargs,
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["value"] = repr(self.value)
        result["reason"] = self.reason
        return result


# =============================================================================
# UNSUPPORTED OPERATIONS
# =============================================================================


class UnsupportedOperationError(CollectKitError):
    """
    The collection does not support the requested operation.

    Range operations are not transactional: when the failure comes from the
    collection partway through, elements inserted before it stay inserted.
    """

    default_category = ErrorCategory.UNSUPPORTED

    def __init__(
        self,
        message: str,
        *,
        collection: Any = None,
        operation: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if collection is not None:
            self.context.collection_type = type(collection).__name__
        if operation is not None:
            self.context.operation = operation


class ReadOnlyCollectionError(UnsupportedOperationError):
    """The collection is read-only and cannot be mutated."""

    def __init__(self, collection: Any, message: str | None = None, **kwargs: Any):
        super().__init__(
            message or f"The collection of type '{type(collection).__name__}' is read-only.",
            collection=collection,
            **kwargs,
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(CollectKitError):
    """Configuration error."""

    default_category = ErrorCategory.CONFIG


class InvalidConfigError(ConfigError):
    """Configuration could not be validated."""

    def __init__(self, key: str, value: Any = None, message: str | None = None, **kwargs: Any):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}", **kwargs)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, CollectKitError):
        return error.category
    if isinstance(error, (TypeError, ValueError)):
        return ErrorCategory.VALIDATION
    if isinstance(error, (NotImplementedError, AttributeError)):
        return ErrorCategory.UNSUPPORTED
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "CollectKitError",
    # Validation
    "ValidationError",
    "PreconditionError",
    "MissingArgumentError",
    "InvalidArgumentError",
    # Unsupported
    "UnsupportedOperationError",
    "ReadOnlyCollectionError",
    # Config
    "ConfigError",
    "InvalidConfigError",
    # Utilities
    "categorize_error",
]
