"""Solutions to a set of HDOJ problems, selectable by problem number."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import groupby
from math import factorial

_DIGITS = frozenset("0123456789")
_VOWELS = frozenset("aeiou")


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _take(tokens: Iterator[int], count: int) -> list[int]:
    values = [value for _, value in zip(range(count), tokens)]
    if len(values) != count:
        raise ValueError(f"expected {count} more numbers, got {len(values)}")
    return values


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _check_digits(digits: str) -> None:
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"expected a string of decimal digits, got {digits!r}")


def triangular(n: int) -> int:
    """Return ``1 + 2 + ... + n`` as a 32-bit signed integer."""
    return _to_int32((1 + n) * n // 2)


def elevator_time(floors: Iterable[int]) -> int:
    """Seconds to visit ``floors`` in order from floor 0: 6 up, 4 down, 5 per stop."""
    total = 0
    current = 0
    stops = 0
    for floor in floors:
        if floor > current:
            total += 6 * (floor - current)
        else:
            total += 4 * (current - floor)
        current = floor
        stops += 1
    return total + 5 * stops


def e_table() -> str:
    """Return the table of partial sums of ``1/k!`` for ``n`` from 0 to 9."""
    lines = ["n e", "- -----------"]
    for m in range(10):
        e = sum(1 / factorial(j) for j in range(m + 1))
        lines.append(f"{m} {e:.9g}0" if m == 8 else f"{m} {e:.10g}")
    return "\n".join(lines) + "\n"


def digital_root(digits: str) -> int:
    """Return the repeated digit sum of the decimal number written in ``digits``."""
    _check_digits(digits)
    total = sum(int(c) for c in digits)
    while total >= 10:
        total = sum(int(c) for c in str(total))
    return total


def fibonacci_divisible_by_three(n: int) -> bool:
    """Tell whether ``F(n)`` is divisible by 3, where F(0)=7, F(1)=11."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    a, b = 7 % 3, 11 % 3
    for _ in range(n):
        a, b = b, (a + b) % 3
    return a == 0


def candy_game(candies: Iterable[int]) -> tuple[int, int]:
    """Play the candy sharing game; return the rounds played and the final amount.

    Each round every child keeps half of their candies and receives half of the
    next child's, then takes one more from the teacher if the result is odd.
    """
    current = list(candies)
    if not current:
        raise ValueError("at least one child is needed")
    if any(c < 0 for c in current):
        raise ValueError("candy counts must be non-negative")
    rounds = 0
    while any(c != current[0] for c in current):
        shared = [own // 2 + nxt // 2 for own, nxt in zip(current, current[1:] + current[:1])]
        current = [c + 1 if c % 2 else c for c in shared]
        rounds += 1
    return rounds, current[0]


def is_acceptable(password: str) -> bool:
    """Tell whether ``password`` is pronounceable under the three rules."""
    if not any(c in _VOWELS for c in password):
        return False
    if any(len(list(run)) >= 3 for _, run in groupby(password, key=lambda c: c in _VOWELS)):
        return False
    return not any(a == b and a not in "eo" for a, b in zip(password, password[1:]))


def split_on_fives(digits: str) -> list[int]:
    """Split a digit string on every '5' and return the numbers in ascending order."""
    _check_digits(digits)
    return sorted(int(piece) for piece in digits.split("5") if piece)


def sweet_journey(attack: int, bonus: int, segments: Iterable[tuple[int, int]]) -> int:
    """Return the least starting energy to ride past all hard ``segments``.

    Riding a hard stretch costs ``attack`` per unit; easy road gains ``bonus``.
    """
    lowest = 100_000_000
    balance = 0
    position = 0
    for left, right in segments:
        balance += (left - position) * bonus - (right - left) * attack
        position = right
        lowest = min(lowest, balance)
    return 0 if lowest > 0 else -lowest


def _solve_pairs(text: str) -> str:
    tokens = _ints(text)
    return "".join(f"{a + b}\n" for a, b in zip(tokens, tokens))


def _solve_1001(text: str) -> str:
    return "".join(f"{triangular(n)}\n\n" for n in _ints(text))


def _solve_1008(text: str) -> str:
    tokens = _ints(text)
    lines = []
    for count in tokens:
        if count == 0:
            break
        lines.append(f"{elevator_time(_take(tokens, count))}\n")
    return "".join(lines)


def _solve_1012(text: str) -> str:
    return e_table()


def _solve_1013(text: str) -> str:
    lines = []
    for token in text.split():
        if len(token) == 1 and token not in "123456789":
            break
        lines.append(f"{digital_root(token)}\n")
    return "".join(lines)


def _solve_1021(text: str) -> str:
    return "".join(
        "yes\n" if fibonacci_divisible_by_three(n) else "no\n" for n in _ints(text)
    )


def _solve_1034(text: str) -> str:
    tokens = _ints(text)
    lines = []
    for count in tokens:
        if count == 0:
            break
        rounds, amount = candy_game(_take(tokens, count))
        lines.append(f"{rounds} {amount}\n")
    return "".join(lines)


def _solve_1039(text: str) -> str:
    lines = []
    for word in text.split():
        if word == "end":
            break
        verdict = "is acceptable." if is_acceptable(word) else "is not acceptable."
        lines.append(f"<{word}> {verdict}\n")
    return "".join(lines)


def _solve_1040(text: str) -> str:
    tokens = _ints(text)
    cases = next(tokens)
    lines = []
    for _ in range(cases):
        size = next(tokens)
        lines.append(" ".join(map(str, sorted(_take(tokens, size)))) + "\n")
    return "".join(lines)


def _solve_1090(text: str) -> str:
    tokens = _ints(text)
    cases = next(tokens)
    return "".join(f"{sum(_take(tokens, 2))}\n" for _ in range(cases))


def _solve_1092(text: str) -> str:
    lines = []
    for line in text.splitlines():
        tokens = _ints(line)
        count = next(tokens, None)
        if count is None:
            continue
        if count == 0:
            break
        lines.append(f"{sum(_take(tokens, count))}\n")
    return "".join(lines)


def _solve_1106(text: str) -> str:
    return "".join(
        " ".join(map(str, split_on_fives(token))) + "\n" for token in text.split()
    )


def _solve_5477(text: str) -> str:
    tokens = _ints(text)
    cases = next(tokens)
    lines = []
    for case in range(1, cases + 1):
        count, attack, bonus, _length = _take(tokens, 4)
        flat = _take(tokens, 2 * count)
        segments = list(zip(flat[::2], flat[1::2]))
        lines.append(f"Case #{case}: {sweet_journey(attack, bonus, segments)}\n")
    return "".join(lines)


_SOLVERS: dict[str, Callable[[str], str]] = {
    "1000": _solve_pairs,
    "1001": _solve_1001,
    "1008": _solve_1008,
    "1012": _solve_1012,
    "1013": _solve_1013,
    "1021": _solve_1021,
    "1034": _solve_1034,
    "1039": _solve_1039,
    "1040": _solve_1040,
    "1089": _solve_pairs,
    "1090": _solve_1090,
    "1092": _solve_1092,
    "1106": _solve_1106,
    "5477": _solve_5477,
}


def solve(problem: str, text: str) -> str:
    """Answer the input ``text`` of the HDOJ problem numbered ``problem``."""
    try:
        solver = _SOLVERS[str(problem)]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(description="Solve an HDOJ problem.")
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())