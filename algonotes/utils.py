"""Random helpers: in-place shuffling and random permutations."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any, Protocol


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


def shuffle(items: MutableSequence[Any], rng: _RandRange | None = None) -> None:
    """Shuffle ``items`` in place with the Fisher-Yates algorithm.

    ``rng`` is any object with a ``randrange(stop)`` method, such as a
    :class:`random.Random` instance; the global generator is used when omitted.
    """
    source = rng if rng is not None else random
    for i in reversed(range(1, len(items))):
        j = source.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def generate_random_list(n: int, rng: _RandRange | None = None) -> list[int]:
    """Return the integers ``0 .. n-1`` in random order."""
    if n < 0:
        raise ValueError(f"list length must be non-negative, got {n}")
    values = list(range(n))
    shuffle(values, rng)
    return values