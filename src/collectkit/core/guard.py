"""
Precondition guards.

Small helpers that raise the typed validation errors from
:mod:`collectkit.core.errors`. Each guard returns its value so it can be used
inline::

    collection = not_none(collection, "collection", operation="add_unique")
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Any, TypeVar

from collectkit.core.errors import InvalidArgumentError, MissingArgumentError

T = TypeVar("T")


def not_none(value: T | None, argument: str, *, operation: str | None = None, message: str | None = None) -> T:
    """Raise MissingArgumentError if ``value`` is None."""
    if value is None:
        raise MissingArgumentError(argument, message, operation=operation)
    return value


def not_none_or_empty(
    value: Iterable[Any] | None,
    argument: str,
    *,
    operation: str | None = None,
    message: str | None = None,
) -> Iterable[Any]:
    """Raise if ``value`` is None or has no elements.

    Only sized values are checked for emptiness; a bare iterator would have
    to be consumed to tell, so it is returned as-is.
    """
    value = not_none(value, argument, operation=operation, message=message)
    if isinstance(value, Sized) and len(value) == 0:
        raise InvalidArgumentError(argument, value, "cannot be empty", message, operation=operation)
    return value


def positive(value: int, argument: str, *, operation: str | None = None) -> int:
    if value <= 0:
        raise InvalidArgumentError(argument, value, "must be greater than 0", operation=operation)
    return value


def non_negative(value: int, argument: str, *, operation: str | None = None) -> int:
    if value < 0:
        raise InvalidArgumentError(argument, value, "must not be negative", operation=operation)
    return value


__all__ = [
    "not_none",
    "not_none_or_empty",
    "positive",
    "non_negative",
]
