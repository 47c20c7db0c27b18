"""Heap-based selection problems: stones, k-th largest, top-k, windows."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones together until at most one is left.

    When two stones of weights ``x <= y`` collide, both vanish if they are
    equal, otherwise a stone of weight ``y - x`` remains.  Returns the weight
    of the last stone, or 0 when none is left.
    """
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) >= 2:
        first = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        diff = abs(first - second)
        if diff:
            heapq.heappush(heap, -diff)
    return -heap[0] if heap else 0


def kth_largest(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th largest value, counting duplicates, using a size-``k`` min-heap."""
    if k < 1:
        raise ValueError("k must be at least 1")
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            heapq.heappop(heap)
    if len(heap) < k:
        raise ValueError(f"k={k} exceeds the number of values ({len(heap)})")
    return heap[0]


def top_k_frequent(values: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values.

    The result is ordered from the least to the most frequent of the chosen
    values; ties in frequency are broken by value, the smaller first.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    heap: list[tuple[int, int]] = []
    for value, count in Counter(values).items():
        heapq.heappush(heap, (count, value))
        if len(heap) > k:
            heapq.heappop(heap)
    return [value for _, value in sorted(heap)]


def sort_k_sorted(values: Sequence[int], k: int) -> list[int]:
    """Sort a sequence in which every element is at most ``k`` places from its sorted slot.

    Uses a min-heap of ``k + 1`` elements, so the work is O(n log k).
    """
    if k < 0:
        raise ValueError("k must not be negative")
    window = min(k + 1, len(values))
    heap = list(values[:window])
    heapq.heapify(heap)
    result: list[int] = []
    for value in values[window:]:
        result.append(heapq.heappushpop(heap, value))
    while heap:
        result.append(heapq.heappop(heap))
    return result


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values.

    A window wider than the sequence yields no maxima.
    """
    if k < 1:
        raise ValueError("window size must be at least 1")
    heap: list[tuple[int, int]] = []
    result: list[int] = []
    for index, value in enumerate(values):
        heapq.heappush(heap, (-value, index))
        if index >= k - 1:
            while heap[0][1] <= index - k:
                heapq.heappop(heap)
            result.append(-heap[0][0])
    return result