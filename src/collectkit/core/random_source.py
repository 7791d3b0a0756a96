"""
Injectable random source for the permutation engine.

collectkit never calls the module-level ``random`` functions. Every function
that draws random numbers accepts an ``rng`` argument and falls back to the
shared default returned by :func:`default_random`.

The shared default is a single ``random.Random`` seeded from OS entropy.
Individual draws are thread-safe under CPython, but threads sharing it
interleave their sequences, so callers that need reproducible or
thread-isolated results inject their own generator.

Examples:
    Two generators with the same seed give the same permutation:

    >>> import random
    >>> from collectkit import shuffle
    >>> shuffle([1, 2, 3, 4], rng=random.Random(7)) == shuffle([1, 2, 3, 4], rng=random.Random(7))
    True

    Swapping the default for a block of code:

    >>> with use_random(random.Random(7)) as rng:
    ...     default_random() is rng
    True
"""

from __future__ import annotations

import random
from collections.abc import Iterator
from contextlib import contextmanager

from collectkit.core.protocols import RandomSource

_default_random: RandomSource = random.Random()


def default_random() -> RandomSource:
    """Return the shared default random source."""
    return _default_random


def resolve_random(rng: RandomSource | None) -> RandomSource:
    """Return ``rng`` if given, else the shared default."""
    return rng if rng is not None else _default_random


@contextmanager
def use_random(rng: RandomSource) -> Iterator[RandomSource]:
    """Temporarily replace the shared default random source."""
    global _default_random
    previous = _default_random
    _default_random = rng
    try:
        yield rng
    finally:
        _default_random = previous


__all__ = [
    "default_random",
    "resolve_random",
    "use_random",
]
