from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from heapkit.maxheap import (
    BoundedMaxHeap,
    HeapOverflowError,
    HeapUnderflowError,
    build_heap_by_insertion,
    build_max_heap,
    decrease_key,
    delete_max,
    heap_sort,
    increase_key,
    insert,
    sift_down,
    sift_up,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


def _is_max_heap(items, size=None):
    size = len(items) if size is None else size
    return all(items[(i - 1) // 2] >= items[i] for i in range(1, size))


def test_sift_down_worked_example():
    items = [1, 14, 10, 8, 7, 9, 3, 2, 4, 6]
    sift_down(items, 0)
    assert items == [14, 8, 10, 4, 7, 9, 3, 2, 1, 6]
    assert _is_max_heap(items)


def test_sift_down_respects_size_limit():
    items = [1, 5, 3, 100]
    sift_down(items, 0, 3)
    assert items[3] == 100
    assert items[0] == 5


def test_sift_up_moves_large_leaf_to_root():
    items = [20, 9, 8, 7, 6, 5, 4, 3, 50]
    sift_up(items, 8)
    assert items[0] == 50
    assert _is_max_heap(items)


def test_build_max_heap_source_example():
    items = [3, 6, 5, 0, 8, 2, 1, 9]
    build_max_heap(items)
    assert items[0] == 9
    assert _is_max_heap(items)
    assert Counter(items) == Counter([3, 6, 5, 0, 8, 2, 1, 9])


@given(int_lists)
def test_build_max_heap_property(values):
    items = list(values)
    build_max_heap(items)
    assert _is_max_heap(items)
    assert Counter(items) == Counter(values)


@given(int_lists)
def test_build_heap_by_insertion_property(values):
    items = list(values)
    build_heap_by_insertion(items)
    assert _is_max_heap(items)
    assert Counter(items) == Counter(values)


def test_delete_max_source_example():
    items = [9, 8, 7, 5, 4, 3, 2]
    assert delete_max(items) == 9
    assert len(items) == 6
    assert items[0] == 8
    assert _is_max_heap(items)


@pytest.mark.parametrize("items", [[], [5]])
def test_delete_max_underflow(items):
    before = list(items)
    with pytest.raises(HeapUnderflowError):
        delete_max(items)
    assert items == before


@given(st.lists(st.integers(), min_size=2, max_size=40))
def test_delete_max_returns_maximum(values):
    items = list(values)
    build_max_heap(items)
    assert delete_max(items) == max(values)
    assert _is_max_heap(items)
    assert len(items) == len(values) - 1


def test_increase_key_source_example():
    items = [9, 8, 7, 6, 5, 4, 3]
    increase_key(items, 4, 50)
    assert items[0] == 50
    assert _is_max_heap(items)
    assert sorted(items) == sorted([9, 8, 7, 6, 50, 4, 3])


@pytest.mark.parametrize("index", [7, -1, 100])
def test_increase_key_bad_index(index):
    with pytest.raises(IndexError):
        increase_key([9, 8, 7, 6, 5, 4, 3], index, 50)


def test_decrease_key_source_example():
    items = [9, 8, 7, 6, 5, 4, 3, 2, 1]
    decrease_key(items, 1, 0)
    assert _is_max_heap(items)
    assert 0 in items and 8 not in items
    assert items[0] == 9


@pytest.mark.parametrize("index", [9, -2])
def test_decrease_key_bad_index(index):
    with pytest.raises(IndexError):
        decrease_key([9, 8, 7, 6, 5, 4, 3, 2, 1], index, 0)


def test_insert_source_example():
    items = [20, 9, 8, 7, 6, 5, 4, 3]
    insert(items, 12)
    assert len(items) == 9
    assert items[0] == 20
    assert 12 in items
    assert _is_max_heap(items)


@given(int_lists, st.integers())
def test_insert_keeps_heap(values, value):
    items = list(values)
    build_max_heap(items)
    insert(items, value)
    assert _is_max_heap(items)
    assert Counter(items) == Counter(values) + Counter([value])


def test_heap_sort_source_example():
    items = [5, 7, 9, 2, 1, 3, 4, 8, 6]
    heap_sort(items)
    assert items == sorted([5, 7, 9, 2, 1, 3, 4, 8, 6])


@given(int_lists)
def test_heap_sort_matches_sorted(values):
    items = list(values)
    heap_sort(items)
    assert items == sorted(values)


def test_bounded_heap_initial_items_heapified():
    heap = BoundedMaxHeap([10, 20])
    assert heap.peek() == 20
    assert len(heap) == 2


def test_bounded_heap_push_pop_order():
    heap = BoundedMaxHeap([10, 20], capacity=7)
    for value in (5, 30, 15):
        heap.push(value)
    popped = [heap.pop() for _ in range(len(heap))]
    assert popped == sorted([10, 20, 5, 30, 15], reverse=True)
    assert len(heap) == 0


def test_bounded_heap_overflow():
    heap = BoundedMaxHeap(capacity=7)
    for value in range(7):
        heap.push(value)
    with pytest.raises(HeapOverflowError):
        heap.push(99)
    assert len(heap) == 7
    assert heap.peek() == 6


def test_bounded_heap_initial_overflow():
    with pytest.raises(HeapOverflowError):
        BoundedMaxHeap([1, 2, 3], capacity=2)


def test_bounded_heap_underflow():
    heap = BoundedMaxHeap()
    with pytest.raises(HeapUnderflowError):
        heap.pop()
    with pytest.raises(HeapUnderflowError):
        heap.peek()


def test_bounded_heap_single_element_pop():
    heap = BoundedMaxHeap([42])
    assert heap.pop() == 42
    assert len(heap) == 0


@given(st.lists(st.integers(), max_size=7))
def test_bounded_heap_iter_is_heap_order(values):
    heap = BoundedMaxHeap(values)
    listed = list(heap)
    assert _is_max_heap(listed)
    assert Counter(listed) == Counter(values)