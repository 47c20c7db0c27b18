# heapkit

Binary max-heap building blocks that work on plain Python lists, plus a
handful of heap-based algorithms: k-th largest, top-k frequent values,
sorting a nearly sorted sequence, sliding-window maxima, merging sorted
linked lists, and a running median.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Max-heap primitives

`heapkit.maxheap` works in place on a list laid out as a binary tree:
the children of index `i` sit at `2*i + 1` and `2*i + 2`.

```python
from heapkit.maxheap import (
    build_max_heap,
    decrease_key,
    delete_max,
    heap_sort,
    increase_key,
    insert,
)

items = [3, 6, 5, 0, 8, 2, 1, 9]
build_max_heap(items)        # items[0] is now the largest value
insert(items, 12)            # append and sift the new value up
largest = delete_max(items)  # remove and return the root (12)
increase_key(items, 4, 50)   # set a value and sift it up
decrease_key(items, 1, 0)    # set a value and sift it down

data = [5, 7, 9, 2, 1, 3, 4, 8, 6]
heap_sort(data)              # builds a max-heap, then sorts ascending
```

The lower-level `sift_down(items, index, size=None)` and
`sift_up(items, index)` are available too; `sift_down` treats only the
first `size` elements as the heap (all of them by default). There is also
`build_heap_by_insertion(items)`, which builds the heap by sifting each
element up in turn instead of sifting internal nodes down.

Errors:

- `delete_max` raises `HeapUnderflowError` when the heap holds fewer than
  two elements, and leaves it untouched.
- `increase_key` and `decrease_key` raise `IndexError` for an index
  outside the list.
- `HeapUnderflowError` is a subclass of `IndexError`; `HeapOverflowError`
  is raised by the bounded heap below.

### A bounded heap

`BoundedMaxHeap` wraps the same operations behind a small object with a
fixed capacity (7 unless given):

```python
from heapkit.maxheap import BoundedMaxHeap

heap = BoundedMaxHeap([10, 20], capacity=7)
heap.push(15)
print(heap.peek())   # 20
print(heap.pop())    # 20
print(len(heap))     # 2
print(list(heap))    # the elements in their array (level) order
```

Pushing onto a full heap, or starting with more items than the capacity,
raises `HeapOverflowError`; a negative capacity raises `ValueError`.
Popping or peeking at an empty heap raises `HeapUnderflowError`.

## Selection with heaps

```python
from heapkit.selection import (
    kth_largest,
    last_stone_weight,
    sliding_window_max,
    sort_k_sorted,
    top_k_frequent,
)

kth_largest([3, 2, 1, 5, 6, 4], 2)           # 5
last_stone_weight([2, 7, 4, 1, 8, 1])        # 1
sliding_window_max([1, 3, -1, -3, 5], 3)     # [3, 3, 5]
sort_k_sorted([6, 5, 3, 2, 8, 10, 9], 3)     # [2, 3, 5, 6, 8, 9, 10]
top_k_frequent([2, 2, 2, 3, 3, 1], 2)        # [3, 2]
```

- `kth_largest` counts duplicates and raises `ValueError` when `k` is
  below 1 or larger than the number of values.
- `last_stone_weight` returns 0 when no stone is left.
- `sliding_window_max` returns an empty list when the window is wider than
  the sequence, and raises `ValueError` for a window size below 1.
- `sort_k_sorted` expects every element to be at most `k` positions away
  from its place in sorted order; a negative `k` raises `ValueError`.
- `top_k_frequent` orders its result from the least to the most frequent
  of the chosen values, breaking ties by the smaller value first; a
  negative `k` raises `ValueError`.

## Merging sorted linked lists

```python
from heapkit.linked import from_iterable, merge_k_lists

a = from_iterable([1, 3, 5, 7])
b = from_iterable([2, 4, 6, 8])
c = from_iterable([0, 9, 10, 11])

merged = merge_k_lists([a, b, c])
print(list(merged))  # [0, 1, 2, ..., 11]
```

`from_iterable` returns the head `Node` of a singly linked list (or
`None` for an empty input), and iterating over a `Node` yields the values
from that node to the end of the list. `merge_k_lists` relinks the
existing nodes rather than copying them, so the input lists are consumed.
`None` heads are skipped; merging nothing but empty lists gives `None`.
Equal values keep the order of the lists they came from.

## Running median

`RunningMedian` keeps a max-heap of the lower half and a min-heap of the
upper half of the values seen so far:

```python
from heapkit.median import RunningMedian

stream = RunningMedian()
for value in (5, 15, 1, 3):
    print(stream.add(value))   # 5.0, 10.0, 5.0, 4.0
print(stream.median(), len(stream))
```

`add` returns the new median; `median()` on an empty stream raises
`ValueError`.

The same thing is available from the command line. `heapkit-median`
reads integers from its arguments, or from standard input when none are
given, and prints `Median So far=<median>` after each one, stopping once
it has read `-1` (which is itself counted). A token that is not an integer
ends the run with exit status 1.

```
printf '5 15 1 3 -1\n' | heapkit-median
heapkit-median 5 15 1 3
```