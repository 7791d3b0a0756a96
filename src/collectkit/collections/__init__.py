"""Collection engines: permutation, unique insertion, removal, intersection."""

from collectkit.collections.capabilities import (
    CollectionShape,
    CollectionView,
    MembershipIndex,
    is_read_only,
    resolve,
    shape_of,
)
from collectkit.collections.enumerables import (
    chunk,
    is_empty,
    is_none_or_empty,
    is_not_empty,
    is_not_none_or_empty,
)
from collectkit.collections.intersection import contains_any
from collectkit.collections.removal import remove_where
from collectkit.collections.shuffle import random_element, shuffle
from collectkit.collections.unique import add_if, add_unique, add_unique_range

__all__ = [
    "CollectionShape",
    "CollectionView",
    "MembershipIndex",
    "is_read_only",
    "resolve",
    "shape_of",
    "chunk",
    "is_empty",
    "is_none_or_empty",
    "is_not_empty",
    "is_not_none_or_empty",
    "contains_any",
    "remove_where",
    "random_element",
    "shuffle",
    "add_if",
    "add_unique",
    "add_unique_range",
]
