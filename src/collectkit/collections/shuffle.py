"""
Permutation engine.

Fisher-Yates shuffle over any mutable sequence, in place or into a copy,
with an injectable random source. A preserved copy keeps the type of a mutable
source (a ``deque`` stays a ``deque``).

For ``i`` from ``n - 1`` down to ``1`` a position ``j`` is drawn uniformly
from ``[0, i]`` and positions ``i`` and ``j`` are swapped. The draw range
includes ``i`` itself; leaving it out would bias the result. Every one of the
``n!`` orderings is equally likely, in O(n) time and O(1) extra space
(O(n) when the original is preserved).

Examples:
    >>> import random
    >>> items = [1, 2, 3, 4, 5]
    >>> shuffled = shuffle(items, preserve_original=True, rng=random.Random(42))
    >>> sorted(shuffled) == items
    True
    >>> items
    [1, 2, 3, 4, 5]
"""

from __future__ import annotations

import copy
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

from collectkit.collections.capabilities import CollectionShape, resolve
from collectkit.core.errors import UnsupportedOperationError
from collectkit.core.guard import not_none_or_empty
from collectkit.core.logging import get_logger
from collectkit.core.protocols import RandomSource
from collectkit.core.random_source import resolve_random

logger = get_logger(__name__)

T = TypeVar("T")


def shuffle(
    sequence: MutableSequence[T] | Sequence[T],
    *,
    preserve_original: bool = False,
    rng: RandomSource | None = None,
) -> MutableSequence[T]:
    """Shuffle ``sequence`` with the Fisher-Yates algorithm.

    Args:
        sequence: The sequence to shuffle.
        preserve_original: If True, shuffle a shallow copy and leave
            ``sequence`` untouched. Mutable sequences are copied with
            ``copy.copy`` and keep their type; read-only sequences such as
            tuples are copied into a new ``list``.
        rng: Random source; defaults to the shared instance from
            :func:`collectkit.core.random_source.default_random`.

    Returns:
        ``sequence`` itself when shuffled in place, otherwise the copy.

    Raises:
        MissingArgumentError: If ``sequence`` is None.
        ReadOnlyCollectionError: If shuffling a read-only sequence in place.
        UnsupportedOperationError: If ``sequence`` is not indexable (e.g. a set).
    """
    view = resolve(sequence, operation="shuffle", argument="sequence")
    if view.shape is not CollectionShape.SEQUENCE:
        raise UnsupportedOperationError(
            f"Cannot shuffle a collection of type '{type(sequence).__name__}'; an indexable sequence is required.",
            collection=sequence,
            operation="shuffle",
        )

    target: MutableSequence[T]
    if preserve_original and view.as_sequence() is not None and not view.read_only:
        target = copy.copy(sequence)  # type: ignore[arg-type]
    elif preserve_original:
        target = list(sequence)
    else:
        view.ensure_writable("shuffle")
        target = sequence  # type: ignore[assignment]

    size = len(target)
    if size <= 1:
        return target

    source = resolve_random(rng)
    for i in range(size - 1, 0, -1):
        j = source.randrange(i + 1)
        target[i], target[j] = target[j], target[i]

    logger.debug("shuffle.completed", size=size, preserve_original=preserve_original)
    return target


def random_element(sequence: Sequence[T], *, rng: RandomSource | None = None) -> T:
    """Return one element of ``sequence`` chosen uniformly at random.

    Raises:
        MissingArgumentError: If ``sequence`` is None.
        InvalidArgumentError: If ``sequence`` is empty.
        UnsupportedOperationError: If ``sequence`` is not indexable.
    """
    not_none_or_empty(sequence, "sequence", operation="random_element")
    if not isinstance(sequence, Sequence):
        raise UnsupportedOperationError(
            f"Cannot pick by index from a collection of type '{type(sequence).__name__}'.",
            collection=sequence,
            operation="random_element",
        )
    return sequence[resolve_random(rng).randrange(len(sequence))]


__all__ = [
    "shuffle",
    "random_element",
]
