"""Merge sort, in a copying variant and a textbook index-range variant."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into a new sorted list.

    On ties the element from ``left`` comes first, so merging is stable.
    """
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    sentinel = object()
    a = next(left_iter, sentinel)
    b = next(right_iter, sentinel)
    while a is not sentinel and b is not sentinel:
        if a <= b:
            merged.append(a)
            a = next(left_iter, sentinel)
        else:
            merged.append(b)
            b = next(right_iter, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(left_iter)
    if b is not sentinel:
        merged.append(b)
        merged.extend(right_iter)
    return merged


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, sorting copies of each half and merging them back."""
    size = len(items)
    if size < 2:
        return
    if size == 2:
        if items[0] > items[1]:
            items[0], items[1] = items[1], items[0]
        return
    half = size // 2
    first = list(items[:half])
    second = list(items[half:])
    merge_sort(first)
    merge_sort(second)
    items[:] = merge(first, second)


def _check_range(items: Sequence[Any], *bounds: int) -> None:
    if list(bounds) != sorted(bounds) or bounds[0] < 0 or bounds[-1] > len(items):
        raise ValueError(
            f"invalid range {bounds} for a sequence of length {len(items)}"
        )


def merge_book(items: MutableSequence[Any], begin: int, middle: int, end: int) -> None:
    """Merge the sorted runs ``items[begin:middle]`` and ``items[middle:end]`` in place."""
    _check_range(items, begin, middle, end)
    items[begin:end] = merge(items[begin:middle], items[middle:end])


def merge_sort_book(
    items: MutableSequence[Any], begin: int = 0, end: int | None = None
) -> None:
    """Sort ``items[begin:end]`` in place by recursive halving."""
    if end is None:
        end = len(items)
    _check_range(items, begin, end)
    if end - begin <= 1:
        return
    middle = (begin + end) // 2
    merge_sort_book(items, begin, middle)
    merge_sort_book(items, middle, end)
    merge_book(items, begin, middle, end)