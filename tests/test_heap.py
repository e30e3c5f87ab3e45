import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.heap import BinaryHeap, heap_sort


def _is_max_heap(heap):
    return all(
        heap[i] <= heap.parent(i) for i in range(2, len(heap) + 1)
    )


def test_heap_sort_source_example():
    values = [42, 7, 19, 3, 25, 14, 88, 1, 56, 30]
    heap_sort(values)
    assert values == [1, 3, 7, 14, 19, 25, 30, 42, 56, 88]


@given(st.lists(st.integers()))
def test_heap_sort_matches_sorted(values):
    expected = sorted(values)
    heap_sort(values)
    assert values == expected


@given(st.lists(st.integers(), min_size=1))
def test_build_heap_gives_max_at_root(values):
    heap = BinaryHeap(list(values))
    assert heap[1] == max(values)
    assert _is_max_heap(heap)


@given(st.lists(st.integers()))
def test_heap_keeps_same_elements(values):
    heap = BinaryHeap(list(values))
    assert sorted(heap) == sorted(values)
    assert len(heap) == len(values)


def test_heap_works_in_place():
    values = [1, 4, 6, 2, 4]
    heap = BinaryHeap(values)
    assert values[0] == heap[1] == 6


@given(st.integers(min_value=1, max_value=10_000))
def test_index_relations(index):
    heap = BinaryHeap([])
    assert heap.parent_index(heap.left_child_index(index)) == index
    assert heap.parent_index(heap.right_child_index(index)) == index
    assert heap.right_child_index(index) == heap.left_child_index(index) + 1


def test_child_and_parent_values():
    heap = BinaryHeap([9, 5, 8, 1, 2, 3])
    assert heap.left_child(1) == heap[2]
    assert heap.right_child(1) == heap[3]
    assert heap.parent(4) == heap[2]


def test_shrinking_heap_size_limits_iteration():
    heap = BinaryHeap([3, 2, 1])
    heap.heap_size = 1
    assert list(heap) == [3]
    assert heap[3] == 1


def test_capacity_too_small_raises():
    with pytest.raises(ValueError):
        BinaryHeap([1, 2, 3], capacity=2)


def test_capacity_larger_than_values_is_accepted():
    heap = BinaryHeap([1, 2], capacity=10)
    assert heap.capacity == 10
    assert list(heap) == [2, 1]


@pytest.mark.parametrize("index", [0, -1, 4])
def test_out_of_range_index_raises(index):
    heap = BinaryHeap([1, 2, 3])
    assert list(heap) == [3, 2, 1]
    with pytest.raises(IndexError):
        heap[index]
    assert list(heap) == [3, 2, 1]
    assert len(heap) == 3


def test_setitem_and_heapify_restore_heap():
    heap = BinaryHeap([10, 8, 9, 4, 5])
    heap[1] = 0
    heap.heapify(1)
    assert _is_max_heap(heap)
    assert heap[1] == 9