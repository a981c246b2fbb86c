"""Solutions to a set of hihocoder problems, selectable by problem number."""

from __future__ import annotations

import argparse
import math
import operator
import sys
from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator, Sequence

_LAST_DAY = 100
_MAX_RADIUS = 2850
_COMPARISONS: dict[str, Callable[[int, int], bool]] = {
    "=": operator.eq,
    "<=": operator.le,
    ">=": operator.ge,
    "<": operator.lt,
    ">": operator.gt,
}


def _take(tokens: Iterator[str], count: int) -> list[str]:
    values = [value for _, value in zip(range(count), tokens)]
    if len(values) != count:
        raise ValueError(f"expected {count} more values, got {len(values)}")
    return values


def longest_streak(missed_days: Sequence[int], cards: int) -> int:
    """Return the longest run of submission days in 1..100 after using ``cards``
    make-up cards on the sorted ``missed_days``."""
    if cards < 0:
        raise ValueError(f"cards must be non-negative, got {cards}")
    count = len(missed_days)
    if count == 0 or cards >= count:
        return _LAST_DAY
    days = [1, *missed_days, _LAST_DAY]
    inner = 2 if cards == 0 else 1
    best = 1
    for k in range(count + 1 - cards):
        j = k + cards + 1
        span = days[j] - days[k]
        if k != 0 and j != count + 1:
            span -= inner
        best = max(best, span)
    return best


def rank_of(values: Sequence[int], key: int) -> int:
    """Return the 1-based rank of ``key`` among ``values``, or -1 if absent."""
    if key not in values:
        return -1
    return sum(1 for value in values if value < key) + 1


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest of ``values`` (1-based)."""
    if not 1 <= k <= len(values):
        raise IndexError(f"k={k} out of range for {len(values)} values")
    return sorted(values)[k - 1]


def max_satisfied(constraints: Iterable[tuple[str, int]]) -> int:
    """Return the most constraints ``x op c`` one value of ``x`` satisfies.

    ``x`` ranges over the halves from -500 to 1000; the answer is at least 1.
    Unknown operators are never satisfied.
    """
    doubled = [(_COMPARISONS.get(op), 2 * value) for op, value in constraints]
    best = 1
    for x in range(-1000, 2001):
        met = sum(1 for compare, bound in doubled if compare and compare(x, bound))
        best = max(best, met)
    return best


def feeding_radius(points: Sequence[tuple[float, float]], count: int) -> int:
    """Return the smallest integer radius of a circle centred on one of
    ``points`` that holds exactly ``count`` of them strictly inside and none on
    its edge, or -1 if there is none below 2850."""
    best: int | None = None
    for cx, cy in points:
        distances = sorted(
            math.sqrt((cx - px) * (cx - px) + (cy - py) * (cy - py)) for px, py in points
        )
        on_edge = set(distances)
        for radius in range(1, _MAX_RADIUS):
            bound = float(radius)
            if bound in on_edge:
                continue
            inside = bisect_left(distances, bound)
            if inside == count:
                best = radius if best is None else min(best, radius)
                break
            if inside > count:
                break
    return -1 if best is None else best


def _solve_1051(text: str) -> str:
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for _ in range(cases):
        count, cards = map(int, _take(tokens, 2))
        missed = [int(day) for day in _take(tokens, count)]
        lines.append(f"{longest_streak(missed, cards)}\n")
    return "".join(lines)


def _solve_1128(text: str) -> str:
    tokens = iter(text.split())
    count, key = map(int, _take(tokens, 2))
    values = [int(v) for v in _take(tokens, count)]
    return "".join(f"{v} " for v in values) + str(rank_of(values, key))


def _solve_1133(text: str) -> str:
    tokens = iter(text.split())
    count, k = map(int, _take(tokens, 2))
    values = [int(v) for v in _take(tokens, count)]
    try:
        return str(kth_smallest(values, k))
    except IndexError:
        return "-1"


def _solve_1223(text: str) -> str:
    tokens = iter(text.split())
    lines = []
    for count in tokens:
        constraints = []
        for _ in range(int(count)):
            _name, op, value = _take(tokens, 3)
            constraints.append((op, int(value)))
        lines.append(f"{max_satisfied(constraints)}\n")
    return "".join(lines)


def _solve_1227(text: str) -> str:
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for _ in range(cases):
        size, count = map(int, _take(tokens, 2))
        flat = [float(v) for v in _take(tokens, 2 * size)]
        points = list(zip(flat[::2], flat[1::2]))
        lines.append(f"{feeding_radius(points, count)}\n")
    return "".join(lines)


_SOLVERS: dict[str, Callable[[str], str]] = {
    "1051": _solve_1051,
    "1128": _solve_1128,
    "1133": _solve_1133,
    "1223": _solve_1223,
    "1227": _solve_1227,
}


def solve(problem: str, text: str) -> str:
    """Answer the input ``text`` of the hihocoder problem numbered ``problem``."""
    try:
        solver = _SOLVERS[str(problem)]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(description="Solve a hihocoder problem.")
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())