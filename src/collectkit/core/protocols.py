"""
Canonical protocol definitions for collectkit.

Protocols define the weakest contracts the collection engines rely on. They
are structural: any object with the right methods satisfies them without
inheriting from anything.

Architecture:
    ::

        protocols.py
        ├── MutableCollection  : len / in / iter / add / remove
        └── RandomSource       : randrange(stop) for uniform draws in [0, stop)

    Consumers:
        collections/capabilities.py, collections/shuffle.py,
        core/random_source.py

Guardrails:
    ❌ DON'T: Branch on concrete type names (``type(c) is set``)
    ✅ DO: Check protocols and collections.abc ABCs

Performance:
    - isinstance() checks: Enabled via @runtime_checkable, O(n) on methods

Tags:
    protocol, collection, random, collectkit, contracts
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MutableCollection(Protocol):
    """
    Minimal mutable collection interface.

    The weakest capability used by the unique-insertion, removal and
    intersection engines. Stronger shapes (``MutableSet``,
    ``MutableSequence``) are detected separately and preferred when present.

    ::

        __len__()        → number of elements
        __contains__(v)  → membership under ==
        __iter__()       → iteration over elements
        add(v)           → insert one element
        remove(v)        → remove one occurrence equal to v
    """

    def __len__(self) -> int: ...

    def __contains__(self, value: object) -> bool: ...

    def __iter__(self) -> Iterator[Any]: ...

    def add(self, value: Any) -> Any: ...

    def remove(self, value: Any) -> Any: ...


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniformly distributed integers.

    ``randrange(stop)`` must return an integer in ``[0, stop)``.
    ``random.Random`` and ``random.SystemRandom`` satisfy this protocol.
    """

    def randrange(self, stop: int) -> int: ...


__all__ = [
    "MutableCollection",
    "RandomSource",
]
