"""Max binary heap with 1-based indexing, and heap sort built on it."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from typing import Any


class BinaryHeap:
    """A max-heap laid out over a mutable sequence, addressed from index 1.

    The heap works directly on ``values``: building the heap and every later
    operation rearrange that sequence in place. ``capacity`` is the largest
    number of elements the heap may hold and defaults to ``len(values)``.
    ``heap_size`` is the number of leading elements that form the heap. It
    may be lowered to shrink the heap without touching the storage.
    """

    def __init__(
        self, values: MutableSequence[Any] | None = None, capacity: int | None = None
    ) -> None:
        self._values: MutableSequence[Any] = values if values is not None else []
        if capacity is None:
            capacity = len(self._values)
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        if len(self._values) > capacity:
            raise ValueError(
                f"{len(self._values)} values do not fit in a heap of capacity {capacity}"
            )
        self.capacity = capacity
        self.heap_size = len(self._values)
        self.build_heap()

    def parent(self, index: int) -> Any:
        """Return the value stored at the parent of ``index``."""
        return self[self.parent_index(index)]

    def left_child(self, index: int) -> Any:
        """Return the value stored at the left child of ``index``."""
        return self[self.left_child_index(index)]

    def right_child(self, index: int) -> Any:
        """Return the value stored at the right child of ``index``."""
        return self[self.right_child_index(index)]

    def parent_index(self, index: int) -> int:
        """Return the position of the parent of ``index``."""
        return index // 2

    def left_child_index(self, index: int) -> int:
        """Return the position of the left child of ``index``."""
        return 2 * index

    def right_child_index(self, index: int) -> int:
        """Return the position of the right child of ``index``."""
        return 2 * index + 1

    def heapify(self, index: int) -> None:
        """Sift the value at ``index`` down until its subtree is a max-heap."""
        while True:
            left = self.left_child_index(index)
            right = self.right_child_index(index)
            largest = index
            if left <= self.heap_size and self[left] > self[largest]:
                largest = left
            if right <= self.heap_size and self[right] > self[largest]:
                largest = right
            if largest == index:
                return
            self[index], self[largest] = self[largest], self[index]
            index = largest

    def build_heap(self) -> None:
        """Arrange the first ``heap_size`` values into a max-heap."""
        for index in range(self.heap_size // 2, 0, -1):
            self.heapify(index)

    def __iter__(self) -> Iterator[Any]:
        for index in range(1, self.heap_size + 1):
            yield self[index]

    def __len__(self) -> int:
        return self.heap_size

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._values):
            raise IndexError(
                f"heap index {index} out of range 1..{len(self._values)}"
            )
        return index - 1

    def __getitem__(self, index: int) -> Any:
        return self._values[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._values[self._position(index)] = value


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place in ascending order."""
    heap = BinaryHeap(items)
    for last in range(heap.heap_size, 0, -1):
        heap[1], heap[last] = heap[last], heap[1]
        heap.heap_size -= 1
        heap.heapify(1)