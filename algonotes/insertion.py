"""Insertion sort, in a recursive-style and a textbook variant."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import MutableSequence
from typing import Any


def insert(items: MutableSequence[Any], size: int, value: Any) -> None:
    """Insert ``value`` into the sorted prefix ``items[:size]``.

    The prefix grows by one: ``items[size]`` is overwritten, or appended when
    ``size == len(items)``. Equal elements keep ``value`` after them.
    """
    if not 0 <= size <= len(items):
        raise ValueError(f"size {size} out of range for a sequence of length {len(items)}")
    if size == len(items):
        items.append(value)
    position = bisect_right(items, value, 0, size)
    items[position + 1 : size + 1] = items[position:size]
    items[position] = value


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by growing a sorted prefix one element at a time."""
    if len(items) < 2:
        return
    if items[0] > items[1]:
        items[0], items[1] = items[1], items[0]
    for size in range(2, len(items)):
        insert(items, size, items[size])


def insertion_sort_book(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with the classic shifting insertion sort."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key