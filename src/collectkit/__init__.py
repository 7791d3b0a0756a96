"""collectkit -- Capability-aware algorithms over mutable collections.

Manifesto:
    Code that receives "some collection" should not need to know whether it
    holds a list, a deque, a set or a custom container to shuffle it, keep it
    free of duplicates, prune it, or ask whether it overlaps with other
    values. ``collectkit`` detects what the collection can do once per call
    and takes the cheapest correct path.

Architecture::

    core/
        errors.py          Typed error hierarchy (CollectKitError, ...)
        guard.py           Precondition guards
        logging.py         structlog configuration
        protocols.py       MutableCollection + RandomSource protocols
        random_source.py   Shared, swappable default random source
        settings.py        pydantic-settings configuration

    collections/
        capabilities.py    Shape detection + MembershipIndex
        shuffle.py         Fisher-Yates shuffle, random_element
        unique.py          add_unique, add_unique_range, add_if
        removal.py         remove_where
        intersection.py    contains_any
        enumerables.py     is_empty family, chunk

Examples:
    >>> from collectkit import add_unique_range, remove_where
    >>> items = [1, 2]
    >>> add_unique_range(items, [2, 3, 4])
    2
    >>> remove_where(items, lambda x: x % 2 == 0)
    2
    >>> items
    [1, 3]
"""

__version__ = "0.1.0"

from collectkit.collections import (
    CollectionShape,
    CollectionView,
    MembershipIndex,
    add_if,
    add_unique,
    add_unique_range,
    chunk,
    contains_any,
    is_empty,
    is_none_or_empty,
    is_not_empty,
    is_not_none_or_empty,
    random_element,
    remove_where,
    resolve,
    shape_of,
    shuffle,
)
from collectkit.core.errors import (
    CollectKitError,
    ConfigError,
    ErrorCategory,
    InvalidArgumentError,
    InvalidConfigError,
    MissingArgumentError,
    PreconditionError,
    ReadOnlyCollectionError,
    UnsupportedOperationError,
    ValidationError,
)

__all__ = [
    # engines
    "shuffle",
    "random_element",
    "add_unique",
    "add_unique_range",
    "add_if",
    "remove_where",
    "contains_any",
    # enumerables
    "is_empty",
    "is_not_empty",
    "is_none_or_empty",
    "is_not_none_or_empty",
    "chunk",
    # capabilities
    "CollectionShape",
    "CollectionView",
    "MembershipIndex",
    "resolve",
    "shape_of",
    # errors
    "CollectKitError",
    "ErrorCategory",
    "ValidationError",
    "PreconditionError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "ReadOnlyCollectionError",
    "ConfigError",
    "InvalidConfigError",
]
