"""Binary max-heap primitives and heap-based algorithms.

Modules: maxheap (in-place max-heap operations and a bounded heap),
selection (k-th largest, top-k, windows, stones), linked (merging sorted
linked lists) and median (running median and its command).
"""

__version__ = "0.1.0"

__all__ = ["linked", "maxheap", "median", "selection"]