"""Emptiness checks and chunking for arbitrary iterables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sized
from itertools import islice
from typing import Any, TypeVar

from collectkit.core.guard import not_none, positive

T = TypeVar("T")


def is_empty(iterable: Iterable[Any]) -> bool:
    """Return True if ``iterable`` has no elements.

    Sized values are answered with ``len()``. Anything else is checked by
    pulling one item, which consumes it from a one-shot iterator.
    """
    not_none(iterable, "iterable", operation="is_empty")
    if isinstance(iterable, Sized):
        return len(iterable) == 0
    for _ in iterable:
        return False
    return True


def is_not_empty(iterable: Iterable[Any]) -> bool:
    return not is_empty(iterable)


def is_none_or_empty(iterable: Iterable[Any] | None) -> bool:
    return iterable is None or is_empty(iterable)


def is_not_none_or_empty(iterable: Iterable[Any] | None) -> bool:
    return not is_none_or_empty(iterable)


def chunk(iterable: Iterable[T], size: int) -> Iterator[list[T]]:
    """Split ``iterable`` into consecutive lists of ``size`` items.

    The last chunk may be shorter. Arguments are validated when ``chunk`` is
    called, not when the result is first iterated.

    Raises:
        MissingArgumentError: If ``iterable`` is None.
        InvalidArgumentError: If ``size`` is not greater than 0.

    Example:
        >>> list(chunk(range(5), 2))
        [[0, 1], [2, 3], [4]]
    """
    not_none(iterable, "iterable", operation="chunk")
    positive(size, "size", operation="chunk")
    return _chunks(iter(iterable), size)


def _chunks(iterator: Iterator[T], size: int) -> Iterator[list[T]]:
    while batch := list(islice(iterator, size)):
        yield batch


__all__ = [
    "is_empty",
    "is_not_empty",
    "is_none_or_empty",
    "is_not_none_or_empty",
    "chunk",
]
