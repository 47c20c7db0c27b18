"""Running median of a stream of numbers, kept with two heaps."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Iterator

STOP_VALUE = -1


class RunningMedian:
    """Median of all values added so far.

    The lower half lives in a max-heap and the upper half in a min-heap; the
    lower half holds the same number of values or one more.
    """

    def __init__(self) -> None:
        self._low: list[int] = []  # negated values: a max-heap
        self._high: list[int] = []

    def add(self, value: int) -> float:
        """Add ``value`` to the stream and return the new median."""
        if self._low and value > -self._low[0]:
            heapq.heappush(self._high, value)
        else:
            heapq.heappush(self._low, -value)
        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) > len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))
        return self.median()

    def median(self) -> float:
        """Return the median of the values added so far."""
        if not self._low:
            raise ValueError("median of an empty stream")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return (-self._low[0] + self._high[0]) / 2.0

    def __len__(self) -> int:
        return len(self._low) + len(self._high)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read integers and print the running median after each, stopping after -1."""
    parser = argparse.ArgumentParser(
        description="Print the running median of a stream of integers."
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="integers to read instead of standard input",
    )
    args = parser.parse_args(argv)
    print(f"Median of Data Stream Enter {STOP_VALUE} to stop")
    tokens = iter(args.values) if args.values else _tokens(sys.stdin)
    stream = RunningMedian()
    for token in tokens:
        try:
            value = int(token)
        except ValueError:
            print(f"not an integer: {token!r}", file=sys.stderr)
            return 1
        print(f"Median So far={stream.add(value):g}")
        if value == STOP_VALUE:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())