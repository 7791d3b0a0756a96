"""
Intersection-test engine.

``contains_any`` answers "does ``collection`` share at least one element with
``candidates``?" and picks the cheapest strategy for the sizes involved:

============  ==============================================  ===========
Strategy      When                                            Cost
============  ==============================================  ===========
``set``       collection is a set                             O(m)
``scan``      ``len(collection) <= scan_threshold`` or more   O(n * m)
              candidates than elements
``index``     otherwise                                       O(n + m)
``stream``    collection is a plain iterable                  O(n + m)
============  ==============================================  ===========

All strategies return the same answer; the threshold only moves the cost
crossover. It defaults to ``Settings.contains_any_scan_threshold``.

An iterable that is not a sized collection, such as a generator, is read
once against an index of the candidates (strategy ``stream``).
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Any

from collectkit.collections.capabilities import CollectionShape, MembershipIndex, resolve
from collectkit.core.guard import non_negative, not_none
from collectkit.core.logging import get_logger
from collectkit.core.settings import get_settings

logger = get_logger(__name__)


def contains_any(
    collection: Any,
    candidates: Iterable[Any] | None,
    *,
    scan_threshold: int | None = None,
) -> bool:
    """Return True if any of ``candidates`` is in ``collection``.

    Args:
        collection: Collection or plain iterable to search. A one-shot
            iterator is consumed.
        candidates: Values to look for. None or empty returns False.
        scan_threshold: Collection size at or below which candidates are
            checked one by one with ``in``. Defaults to the configured
            value (10 unless overridden).

    Raises:
        MissingArgumentError: If ``collection`` is None.
        InvalidArgumentError: If ``scan_threshold`` is negative.
    """
    not_none(collection, "collection", operation="contains_any")
    streamed = isinstance(collection, Iterable) and not isinstance(collection, Collection)
    view = None if streamed else resolve(collection, operation="contains_any")
    if scan_threshold is None:
        scan_threshold = get_settings().contains_any_scan_threshold
    non_negative(scan_threshold, "scan_threshold", operation="contains_any")

    if candidates is None:
        return False
    values = candidates if isinstance(candidates, (list, tuple)) else list(candidates)
    if not values:
        return False

    if view is None:
        strategy = "stream"
        index = MembershipIndex(values)
        found = any(item in index for item in collection)
    elif view.shape is CollectionShape.SET:
        strategy = "set"
        found = any(_set_contains(collection, value) for value in values)
    elif len(view) <= scan_threshold or len(values) > len(view):
        strategy = "scan"
        found = any(value in collection for value in values)
    else:
        strategy = "index"
        index = MembershipIndex(values)
        found = any(item in index for item in view)

    logger.debug("contains_any.completed", strategy=strategy, found=found, candidates=len(values))
    return found


def _set_contains(collection: Any, value: Any) -> bool:
    try:
        return value in collection
    except TypeError:
        # unhashable value against a hash-based set
        return any(item == value for item in collection)


__all__ = [
    "contains_any",
]
