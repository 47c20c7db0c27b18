"""Singly linked lists and a heap-based merge of sorted lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import count


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    val: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Node | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[int]) -> Node | None:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def merge_k_lists(heads: Iterable[Node | None]) -> Node | None:
    """Merge sorted linked lists into one sorted list by relinking their nodes.

    Empty lists (None heads) are ignored; the result is None when every list
    is empty.  Equal values keep the order of the lists they came from.
    """
    order = count()
    heap = [(head.val, next(order), head) for head in heads if head is not None]
    heapq.heapify(heap)
    dummy = Node(0)
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    tail.next = None
    return dummy.next