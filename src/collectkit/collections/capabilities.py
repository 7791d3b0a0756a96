"""
Capability detection for caller-owned collections.

The collection engines accept any collection and pick their algorithm from
what the collection can do, not from what concrete type it is. Detection
happens once per call through :func:`resolve`, which returns a
:class:`CollectionView`: the detected shape, whether the collection is
read-only, and uniform ``add`` / ``remove`` primitives over it.

Manifesto:
    - **Capabilities, not type names:** ``collections.abc`` ABCs and the
      ``MutableCollection`` protocol decide the shape, so any class that
      registers with ``MutableSet`` / ``MutableSequence`` or implements
      ``add`` / ``remove`` takes the right path
    - **Strongest first:** set, then sequence, then the weak collection
    - **Read-only is an error, not a no-op:** mutating engines refuse
      immutable collections up front

Architecture:
    ::

        resolve(collection)
            │
            ├── MutableSet          → SET         (native add-if-absent)
            ├── MutableSequence     → SEQUENCE    (index access, append)
            ├── MutableCollection   → COLLECTION  (len / in / add / remove)
            ├── Set / Sequence /
            │   Collection          → read-only view of the matching shape
            └── anything else       → UnsupportedOperationError

        An ``is_read_only`` attribute on the collection overrides the
        read-only flag either way.

Features:
    - **CollectionShape:** SET / SEQUENCE / COLLECTION
    - **CollectionView:** shape + read_only + as_set() / as_sequence() + add / remove
    - **MembershipIndex:** temporary membership structure that accepts
      unhashable values

Examples:
    >>> view = resolve([3, 1, 2])
    >>> view.shape
    <CollectionShape.SEQUENCE: 'sequence'>
    >>> view.add(4)
    >>> view.collection
    [3, 1, 2, 4]

    >>> resolve(frozenset({1})).read_only
    True

Tags:
    capability-detection, collections-abc, protocol, collectkit

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import (
    Collection,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    MutableSequence,
    MutableSet,
    Sequence,
    Set,
)
from dataclasses import dataclass
from enum import Enum
from typing import Any

from collectkit.core.errors import ReadOnlyCollectionError, UnsupportedOperationError
from collectkit.core.guard import not_none
from collectkit.core.protocols import MutableCollection


class CollectionShape(str, Enum):
    """Strongest structural contract a collection satisfies."""

    SET = "set"
    SEQUENCE = "sequence"
    COLLECTION = "collection"


def _declared_read_only(collection: Any) -> bool | None:
    flag = getattr(collection, "is_read_only", None)
    if flag is None or callable(flag):
        return None
    return bool(flag)


@dataclass(frozen=True)
class CollectionView:
    """
    Uniform view over a caller-owned collection.

    The view never copies; every operation goes straight to ``collection``.

    Attributes:
        collection: The caller's collection
        shape: Strongest detected shape
        read_only: True if the collection must not be mutated
        writable: True if the collection exposes mutation primitives
    """

    collection: Any
    shape: CollectionShape
    read_only: bool
    writable: bool

    def as_set(self) -> MutableSet[Any] | None:
        """Return the collection as a mutable set, or None."""
        if self.shape is CollectionShape.SET and self.writable:
            return self.collection
        return None

    def as_sequence(self) -> MutableSequence[Any] | None:
        """Return the collection as a mutable sequence, or None."""
        if self.shape is CollectionShape.SEQUENCE and self.writable:
            return self.collection
        return None

    def ensure_writable(self, operation: str) -> None:
        """Raise if the collection cannot be mutated by ``operation``."""
        if self.read_only:
            raise ReadOnlyCollectionError(self.collection, operation=operation)
        if not self.writable:
            raise UnsupportedOperationError(
                f"The collection of type '{type(self.collection).__name__}' does not support {operation}.",
                collection=self.collection,
                operation=operation,
            )

    def add(self, value: Any) -> None:
        if self.shape is CollectionShape.SEQUENCE:
            self.collection.append(value)
        else:
            self.collection.add(value)

    def remove(self, value: Any) -> None:
        self.collection.remove(value)

    def __len__(self) -> int:
        return len(self.collection)

    def __contains__(self, value: object) -> bool:
        return value in self.collection

    def __iter__(self) -> Iterator[Any]:
        return iter(self.collection)


def resolve(collection: Any, *, operation: str | None = None, argument: str = "collection") -> CollectionView:
    """Detect the capabilities of ``collection``.

    Args:
        collection: Any collection object
        operation: Name of the calling operation, used in error context
        argument: Parameter name reported when ``collection`` is None

    Raises:
        MissingArgumentError: If ``collection`` is None.
        UnsupportedOperationError: If it is not a collection at all.
    """
    not_none(collection, argument, operation=operation)
    declared = _declared_read_only(collection)

    if isinstance(collection, MutableSet):
        shape, read_only, writable = CollectionShape.SET, False, True
    elif isinstance(collection, MutableSequence):
        shape, read_only, writable = CollectionShape.SEQUENCE, False, True
    elif isinstance(collection, Mapping):
        # add/remove on a mapping would mean something else entirely
        shape, writable = CollectionShape.COLLECTION, False
        read_only = not isinstance(collection, MutableMapping)
    elif isinstance(collection, MutableCollection):
        shape, read_only, writable = CollectionShape.COLLECTION, False, True
    elif isinstance(collection, Set):
        shape, read_only, writable = CollectionShape.SET, True, False
    elif isinstance(collection, Sequence):
        shape, read_only, writable = CollectionShape.SEQUENCE, True, False
    elif isinstance(collection, Collection):
        shape, read_only, writable = CollectionShape.COLLECTION, True, False
    else:
        raise UnsupportedOperationError(
            f"Object of type '{type(collection).__name__}' is not a collection.",
            collection=collection,
            operation=operation,
        )

    if declared is not None:
        read_only = declared

    return CollectionView(collection=collection, shape=shape, read_only=read_only, writable=writable)


def shape_of(collection: Any) -> CollectionShape:
    """Return the strongest shape ``collection`` satisfies."""
    return resolve(collection).shape


def is_read_only(collection: Any) -> bool:
    """Return True if ``collection`` must not be mutated."""
    return resolve(collection).read_only


class MembershipIndex:
    """
    Temporary membership structure for batch operations.

    Hashable values live in a ``set`` (O(1) lookups); unhashable values, such
    as lists or dicts, fall back to a list scanned with ``==``. Every lookup
    also scans the unhashable group, so an unhashable member that compares
    equal to a hashable query is still found.
    """

    __slots__ = ("_hashed", "_unhashable")

    def __init__(self, values: Iterable[Any] = ()):
        self._hashed: set[Any] = set()
        self._unhashable: list[Any] = []
        for value in values:
            self.add(value)

    def add(self, value: Any) -> bool:
        """Insert ``value``; return True if it was not present."""
        if value in self:
            return False
        try:
            self._hashed.add(value)
        except TypeError:
            self._unhashable.append(value)
        return True

    def __contains__(self, value: object) -> bool:
        try:
            hashed_hit = value in self._hashed
        except TypeError:
            hashed_hit = False
        return hashed_hit or (bool(self._unhashable) and value in self._unhashable)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashable)


__all__ = [
    "CollectionShape",
    "CollectionView",
    "MembershipIndex",
    "resolve",
    "shape_of",
    "is_read_only",
]
