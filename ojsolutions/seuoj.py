"""Solutions to a set of SEUOJ problems, selectable by problem name."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import accumulate

_NUMBER = re.compile(r"\s*([+-]?\d+)")
_COMMON_YEAR = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_LEAP_YEAR = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_AVERAGE = 4


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _take(tokens: Iterator, count: int) -> list:
    values = [value for _, value in zip(range(count), tokens)]
    if len(values) != count:
        raise ValueError(f"expected {count} more numbers, got {len(values)}")
    return values


def line_sums(text: str) -> list[int]:
    """Sum the numbers of each line.

    A sum is closed only when a newline follows a number directly; numbers of a
    line ending otherwise carry over into the next line, and a last line
    without a newline is dropped.
    """
    sums: list[int] = []
    running = 0
    pos = 0
    while match := _NUMBER.match(text, pos):
        running += int(match.group(1))
        end = match.end()
        if text[end:end + 1] == "\n":
            sums.append(running)
            running = 0
        pos = end + 1
    return sums


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def count_primes_between(start: int, end: int) -> int:
    """Count the primes ``p`` with ``start <= p < end``."""
    return sum(1 for n in range(start, end) if is_prime(n))


def row_sums(matrix: Iterable[Iterable[int]]) -> list[int]:
    """Return the sum of each row of ``matrix``."""
    return [sum(row) for row in matrix]


def manhattan_extremes(
    points: Iterable[tuple[float, float, float]], query: tuple[float, float, float]
) -> tuple[float, float]:
    """Return the least and greatest Manhattan distance from ``query`` to ``points``."""
    a, b, c = query
    distances = [abs(a - x) + abs(b - y) + abs(c - z) for x, y, z in points]
    if not distances:
        raise ValueError("at least one point is needed")
    return min(distances), max(distances)


def diamond(radius: int) -> str:
    """Draw a diamond of stars ``2 * radius - 1`` lines high, padded on both sides."""
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    lines = []
    for i in range(radius):
        pad = " " * (radius - i - 1)
        lines.append(pad + "*" * (2 * i + 1) + pad)
    for i in range(radius - 1):
        pad = " " * (i + 1)
        lines.append(pad + "*" * (2 * (radius - i - 2) + 1) + pad)
    return "".join(line + "\n" for line in lines)


def count_primes_upto(n: int) -> int:
    """Count the primes not greater than ``n``."""
    return count_primes_between(2, n + 1)


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based position of the date in its year.

    Raises ValueError for a date that does not exist.
    """
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise ValueError(f"illegal date {year}-{month}-{day}")
    lengths = _LEAP_YEAR if is_leap_year(year) else _COMMON_YEAR
    if day > lengths[month - 1]:
        raise ValueError(f"illegal date {year}-{month}-{day}")
    return sum(lengths[:month - 1]) + day


def card_moves(cards: Iterable[int]) -> int:
    """Count the card moves between neighbours that leave every pile at four."""
    return sum(abs(balance) for balance in accumulate(c - _AVERAGE for c in cards))


def _solve_143(text: str) -> str:
    return "".join(f"{total}\n" for total in line_sums(text))


def _solve_46(text: str) -> str:
    tokens = _ints(text)
    return "".join(
        f"{count_primes_between(start, end)}\n" for start, end in zip(tokens, tokens)
    )


def _solve_54(text: str) -> str:
    values = _take(_ints(text), 12)
    rows = [values[i:i + 4] for i in range(0, 12, 4)]
    return " ".join(map(str, row_sums(rows)))


def _solve_59(text: str) -> str:
    tokens = iter(text.split())
    count, queries = int(next(tokens)), int(next(tokens))
    points = [tuple(map(float, _take(tokens, 3))) for _ in range(count)]
    lines = []
    for _ in range(queries):
        query = tuple(map(float, _take(tokens, 3)))
        low, high = manhattan_extremes(points, query)
        lines.append(f"{low:g} {high:g}\n")
    return "".join(lines)


def _solve_76(text: str) -> str:
    return diamond(int(text.split()[0]))


def _solve_78(text: str) -> str:
    return str(count_primes_upto(int(text.split()[0])))


def _solve_91(text: str) -> str:
    tokens = _ints(text)
    lines = []
    for year, month, day in zip(tokens, tokens, tokens):
        try:
            lines.append(f"{day_of_year(year, month, day)}\n")
        except ValueError:
            lines.append("Illegal\n")
    return "".join(lines)


def _solve_average_card(text: str) -> str:
    tokens = _ints(text)
    if next(tokens, None) is None:
        return ""
    return "".join(f"{card_moves(_take(tokens, count))}\n" for count in tokens)


_SOLVERS: dict[str, Callable[[str], str]] = {
    "143": _solve_143,
    "46": _solve_46,
    "54": _solve_54,
    "59": _solve_59,
    "76": _solve_76,
    "78": _solve_78,
    "91": _solve_91,
    "averagecard": _solve_average_card,
}


def solve(problem: str, text: str) -> str:
    """Answer the input ``text`` of the SEUOJ problem named ``problem``."""
    try:
        solver = _SOLVERS[str(problem)]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(description="Solve an SEUOJ problem.")
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())