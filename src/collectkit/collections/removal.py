"""
Predicate removal engine.

``remove_where`` removes every element matching a predicate and returns how
many were removed. The predicate runs exactly once per element present at the
start of the call, and survivors of an ordered collection keep their relative
order.

Strategies, chosen per call:

- ``compact``: lists are rebuilt in a single forward pass and written back
  with slice assignment, so nothing is mutated if the predicate raises.
- ``reverse_scan``: other mutable sequences are scanned from the last index
  to the first, deleting matches by index.
- ``two_phase``: sets and weak collections collect matches first, then
  remove each by value.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

from collectkit.collections.capabilities import CollectionView, resolve
from collectkit.core.guard import not_none
from collectkit.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def remove_where(collection: Any, predicate: Callable[[T], bool]) -> int:
    """Remove every element for which ``predicate`` returns true.

    Returns:
        The number of elements removed; 0 for an empty collection, in which
        case the predicate is never called.

    Raises:
        MissingArgumentError: If ``collection`` or ``predicate`` is None.
        ReadOnlyCollectionError: If ``collection`` is read-only.
    """
    view = resolve(collection, operation="remove_where")
    not_none(predicate, "predicate", operation="remove_where")
    view.ensure_writable("remove_where")

    if len(view) == 0:
        return 0

    sequence = view.as_sequence()
    if isinstance(sequence, list):
        strategy = "compact"
        removed = _compact(sequence, predicate)
    elif sequence is not None:
        strategy = "reverse_scan"
        removed = _reverse_scan(sequence, predicate)
    else:
        strategy = "two_phase"
        removed = _two_phase(view, predicate)

    logger.debug("remove_where.completed", strategy=strategy, removed=removed, remaining=len(view))
    return removed


def _compact(items: list[Any], predicate: Callable[[Any], bool]) -> int:
    kept = [item for item in items if not predicate(item)]
    removed = len(items) - len(kept)
    if removed:
        items[:] = kept
    return removed


def _reverse_scan(sequence: MutableSequence[Any], predicate: Callable[[Any], bool]) -> int:
    removed = 0
    for index in range(len(sequence) - 1, -1, -1):
        if predicate(sequence[index]):
            del sequence[index]
            removed += 1
    return removed


def _two_phase(view: CollectionView, predicate: Callable[[Any], bool]) -> int:
    # Removal is by value, which is exact because the predicate only sees values.
    matches = [item for item in view if predicate(item)]
    for item in matches:
        view.remove(item)
    return len(matches)


__all__ = [
    "remove_where",
]
