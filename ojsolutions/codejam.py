"""Code Jam problems: the barber queue and the mushroom plate."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from math import lcm


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _take(tokens: Iterator[int], count: int) -> list[int]:
    values = [value for _, value in zip(range(count), tokens)]
    if len(values) != count:
        raise ValueError(f"expected {count} more numbers, got {len(values)}")
    return values


def barber_number(rates: Sequence[int], position: int) -> int:
    """Return the 1-based barber who serves the customer at ``position``.

    Barber ``i`` needs ``rates[i]`` minutes per customer.  Whole periods of the
    common cycle are skipped first; if that already covers ``position``, the
    initial answer (barber 2) is returned unchanged.
    """
    if not rates:
        raise ValueError("at least one barber is needed")
    if any(rate <= 0 for rate in rates):
        raise ValueError(f"rates must be positive, got {list(rates)}")
    period = lcm(*rates)
    served_per_period = sum(period // rate for rate in rates)
    served = len(rates) + (position // period) * served_per_period
    barber = 1  # 0-based index reported when the skip already passes the position
    remaining = list(rates)
    while served < position:
        step = min(remaining)
        remaining = [left - step for left in remaining]
        finished = [i for i, left in enumerate(remaining) if left == 0]
        remaining = [rate if left == 0 else left for left, rate in zip(remaining, rates)]
        for index in finished:
            served += 1
            if served == position:
                barber = index
    return barber + 1


def mushrooms_eaten(counts: Sequence[int]) -> tuple[int, int]:
    """Return the mushrooms eaten under the two methods for plate readings ``counts``.

    The first sums every drop between consecutive readings; the second sums all
    readings but the last two, plus the difference between those two.
    """
    if len(counts) < 2:
        raise ValueError("at least two readings are needed")
    any_rate = sum(
        earlier - later for earlier, later in zip(counts, counts[1:]) if earlier > later
    )
    constant_rate = sum(counts[:-2]) + (counts[-2] - counts[-1])
    return any_rate, constant_rate


def solve_haircut(text: str) -> str:
    """Answer every case of the haircut input: ``T``, then ``B N`` and ``B`` rates."""
    tokens = _ints(text)
    cases = next(tokens)
    lines = []
    for case in range(1, cases + 1):
        barbers, position = _take(tokens, 2)
        rates = _take(tokens, barbers)
        lines.append(f"Case #{case}: {barber_number(rates, position)}\n")
    return "".join(lines)


def solve_mushroom(text: str) -> str:
    """Answer every case of the mushroom input: ``T``, then ``N`` and ``N`` readings."""
    tokens = _ints(text)
    cases = next(tokens)
    lines = []
    for case in range(1, cases + 1):
        size = next(tokens)
        first, second = mushrooms_eaten(_take(tokens, size))
        lines.append(f"Case #{case}: {first} {second}\n")
    return "".join(lines)


_SOLVERS = {"haircut": solve_haircut, "mushroom": solve_mushroom}


def main(argv: Sequence[str] | None = None) -> int:
    """Solve one problem, reading and writing the named files."""
    parser = argparse.ArgumentParser(description="Solve a Code Jam problem.")
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    parser.add_argument("--input", default="input.txt")
    parser.add_argument("--output", default="output.txt")
    args = parser.parse_args(argv)
    with open(args.input, encoding="utf-8") as source:
        answer = _SOLVERS[args.problem](source.read())
    with open(args.output, "w", encoding="utf-8") as target:
        target.write(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())