"""Count distinct values in ranges of an array that changes under point updates.

Each position keeps the index of the previous occurrence of its value; a range
holds as many distinct values as it has positions whose previous occurrence lies
before the range.  A Fenwick tree of sorted buckets answers those counts.
"""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left, insort
from collections.abc import Iterable, Sequence

from ojsolutions.bits import low_bit


class DistinctCounter:
    """Array supporting assignment and distinct-value counts over ``[left, right)``."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        size = len(self._values)
        self._occurrences: dict[int, list[int]] = {}
        self._prev = [0] * (size + 1)
        for pos, value in enumerate(self._values, start=1):
            positions = self._occurrences.setdefault(value, [])
            self._prev[pos] = positions[-1] if positions else 0
            positions.append(pos)
        self._tree: list[list[int]] = [[] for _ in range(size + 1)]
        for pos in range(1, size + 1):
            node = pos
            while node <= size:
                self._tree[node].append(self._prev[pos])
                node += low_bit(node)
        for bucket in self._tree:
            bucket.sort()

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> tuple[int, ...]:
        """The current contents of the array."""
        return tuple(self._values)

    def _set_prev(self, pos: int, new_prev: int) -> None:
        old_prev = self._prev[pos]
        if old_prev == new_prev:
            return
        node = pos
        while node <= len(self._values):
            bucket = self._tree[node]
            del bucket[bisect_left(bucket, old_prev)]
            insort(bucket, new_prev)
            node += low_bit(node)
        self._prev[pos] = new_prev

    def _prefix(self, pos: int, bound: int) -> int:
        total = 0
        while pos:
            total += bisect_left(self._tree[pos], bound)
            pos -= low_bit(pos)
        return total

    def update(self, index: int, value: int) -> None:
        """Set the element at 0-based ``index`` to ``value``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range for length {len(self._values)}")
        old = self._values[index]
        if old == value:
            return
        pos = index + 1

        old_positions = self._occurrences[old]
        i = bisect_left(old_positions, pos)
        del old_positions[i]
        if i < len(old_positions):
            self._set_prev(old_positions[i], self._prev[pos])
        if not old_positions:
            del self._occurrences[old]

        new_positions = self._occurrences.setdefault(value, [])
        j = bisect_left(new_positions, pos)
        self._set_prev(pos, new_positions[j - 1] if j else 0)
        if j < len(new_positions):
            self._set_prev(new_positions[j], pos)
        new_positions.insert(j, pos)
        self._values[index] = value

    def count(self, left: int, right: int) -> int:
        """Return the number of distinct values among indices ``left`` to ``right - 1``."""
        if not 0 <= left <= len(self._values) or not 0 <= right <= len(self._values):
            raise IndexError(f"range [{left}, {right}) out of bounds")
        if right < left:
            raise ValueError(f"empty range needs left <= right, got [{left}, {right})")
        bound = left + 1
        return self._prefix(right, bound) - self._prefix(left, bound)


def solve(text: str) -> str:
    """Process ``n q``, ``n`` values, then ``q`` commands ``M i v`` or ``Q l r``."""
    tokens = iter(text.split())
    size = int(next(tokens))
    queries = int(next(tokens))
    counter = DistinctCounter(int(next(tokens)) for _ in range(size))
    lines: list[str] = []
    for _ in range(queries):
        op = next(tokens)[0]
        x = int(next(tokens))
        y = int(next(tokens))
        if op == "M":
            counter.update(x, y)
        else:
            lines.append(f"{counter.count(x, y)}\n")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem from standard input and print the query answers."""
    parser = argparse.ArgumentParser(
        description="Answer distinct-count range queries with point updates."
    )
    parser.parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())