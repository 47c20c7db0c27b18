"""Array-backed binary max-heap operations and a capacity-bounded heap."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence

DEFAULT_CAPACITY = 7


class HeapOverflowError(Exception):
    """Raised when pushing onto a heap that is already full."""


class HeapUnderflowError(IndexError):
    """Raised when removing from a heap that has nothing to give."""


def _parent(index: int) -> int:
    return (index - 1) // 2


def _check_index(items: MutableSequence[int], index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"heap index {index} out of range for size {len(items)}")


def sift_down(items: MutableSequence[int], index: int, size: int | None = None) -> None:
    """Move ``items[index]`` down until the max-heap property holds.

    Only the first ``size`` elements (all of them by default) are treated as
    part of the heap.
    """
    if size is None:
        size = len(items)
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def sift_up(items: MutableSequence[int], index: int) -> None:
    """Move ``items[index]`` up while it is larger than its parent."""
    while index > 0:
        parent = _parent(index)
        if items[parent] >= items[index]:
            return
        items[parent], items[index] = items[index], items[parent]
        index = parent


def build_max_heap(items: MutableSequence[int]) -> None:
    """Turn ``items`` into a max-heap in place by sifting down internal nodes."""
    size = len(items)
    for index in reversed(range(size // 2)):
        sift_down(items, index, size)


def build_heap_by_insertion(items: MutableSequence[int]) -> None:
    """Turn ``items`` into a max-heap in place by sifting each element up."""
    for index in range(1, len(items)):
        sift_up(items, index)


def delete_max(items: list[int]) -> int:
    """Remove and return the largest element of the max-heap ``items``.

    A heap holding fewer than two elements is treated as underflowing and is
    left untouched.
    """
    if len(items) < 2:
        raise HeapUnderflowError("heap underflow: need at least two elements to delete")
    largest = items[0]
    items[0] = items.pop()
    sift_down(items, 0)
    return largest


def increase_key(items: MutableSequence[int], index: int, value: int) -> None:
    """Set ``items[index]`` to ``value`` and restore the heap by sifting up."""
    _check_index(items, index)
    items[index] = value
    sift_up(items, index)


def decrease_key(items: MutableSequence[int], index: int, value: int) -> None:
    """Set ``items[index]`` to ``value`` and restore the heap by sifting down."""
    _check_index(items, index)
    items[index] = value
    sift_down(items, index)


def insert(items: list[int], value: int) -> None:
    """Append ``value`` to the max-heap ``items`` and sift it into place."""
    items.append(value)
    sift_up(items, len(items) - 1)


def heap_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in ascending order in place using a max-heap."""
    build_max_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(items, 0, end)


class BoundedMaxHeap:
    """A max-heap that holds at most ``capacity`` elements."""

    def __init__(self, items: Iterable[int] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        data = list(items)
        if len(data) > capacity:
            raise HeapOverflowError(
                f"{len(data)} initial items exceed capacity {capacity}"
            )
        build_max_heap(data)
        self._items = data
        self.capacity = capacity

    def push(self, value: int) -> None:
        """Add ``value``; raise HeapOverflowError if the heap is full."""
        if len(self._items) >= self.capacity:
            raise HeapOverflowError(f"heap overflow: capacity {self.capacity} reached")
        insert(self._items, value)

    def pop(self) -> int:
        """Remove and return the largest value; raise HeapUnderflowError if empty."""
        if not self._items:
            raise HeapUnderflowError("heap underflow: heap is empty")
        largest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            sift_down(self._items, 0)
        return largest

    def peek(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise HeapUnderflowError("heap underflow: heap is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the elements in their array (level) order."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self.capacity})"