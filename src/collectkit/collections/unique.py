"""
Unique-insertion engine.

Inserts values into a caller-owned collection while keeping a "no
duplicates" rule, using the cheapest membership test the collection offers.

Architecture:
    ::

        add_unique(collection, value)
            SET         → native membership + add      O(1) amortized
            otherwise   → `value in collection` scan   O(n)

        add_unique_range(collection, values)
            SET         → native membership + add per value
            otherwise   → MembershipIndex seeded with the current elements;
                          each miss goes into both the collection and the
                          index, so duplicates inside ``values`` are
                          rejected as well                O(n + m)

Guardrails:
    ❌ DON'T: Call ``add_unique`` in a loop over a large list destination
    ✅ DO: Use ``add_unique_range``, which builds its index once

    Range insertion is not transactional. If the collection's own ``add``
    fails partway, values inserted before the failure stay inserted.

Examples:
    >>> target = [1, 2]
    >>> add_unique_range(target, [2, 3, 4, 3])
    2
    >>> target
    [1, 2, 3, 4]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from collectkit.collections.capabilities import MembershipIndex, resolve
from collectkit.core.guard import not_none
from collectkit.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def add_unique(collection: Any, value: T) -> bool:
    """Add ``value`` unless an equal element is already present.

    Returns:
        True if ``value`` was inserted.

    Raises:
        MissingArgumentError: If ``collection`` is None.
        ReadOnlyCollectionError: If ``collection`` is read-only.
    """
    view = resolve(collection, operation="add_unique")
    view.ensure_writable("add_unique")

    target_set = view.as_set()
    if target_set is not None:
        if value in target_set:
            return False
        target_set.add(value)
        return True

    if value in view:
        return False
    view.add(value)
    return True


def add_unique_range(collection: Any, values: Iterable[T] | None) -> int:
    """Add every value of ``values`` not already present in ``collection``.

    ``values`` may itself contain duplicates; each distinct value is added at
    most once, in the order it first appears.

    Returns:
        The number of values actually inserted. ``None`` values count as an
        empty batch and return 0.

    Raises:
        MissingArgumentError: If ``collection`` is None.
        ReadOnlyCollectionError: If ``collection`` is read-only.
    """
    view = resolve(collection, operation="add_unique_range")
    if values is None:
        return 0
    view.ensure_writable("add_unique_range")

    added = 0
    target_set = view.as_set()
    if target_set is not None:
        strategy = "set"
        for value in values:
            if value not in target_set:
                target_set.add(value)
                added += 1
    else:
        strategy = "index"
        seen = MembershipIndex(view)
        for value in values:
            if seen.add(value):
                view.add(value)
                added += 1

    logger.debug("add_unique_range.completed", strategy=strategy, added=added, size=len(view))
    return added


def add_if(collection: Any, value: T, predicate: Callable[[T], bool]) -> bool:
    """Add ``value`` only if ``predicate(value)`` is true.

    No uniqueness check is made; a list destination may end up with
    duplicates.

    Raises:
        MissingArgumentError: If ``collection`` or ``predicate`` is None.
        ReadOnlyCollectionError: If ``collection`` is read-only.
    """
    view = resolve(collection, operation="add_if")
    not_none(predicate, "predicate", operation="add_if")
    view.ensure_writable("add_if")

    if not predicate(value):
        return False
    view.add(value)
    return True


__all__ = [
    "add_unique",
    "add_unique_range",
    "add_if",
]
