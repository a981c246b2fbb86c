"""POJ 2386: count the ponds in a field, where water touching on any of
eight sides belongs to the same pond."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

_NEIGHBOURS = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy)


def count_lakes(grid: Iterable[Sequence[str]]) -> int:
    """Return the number of 8-connected groups of ``'W'`` cells in ``grid``."""
    rows = [list(row) for row in grid]
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows of the grid must have the same length")
    height = len(rows)
    seen: set[tuple[int, int]] = set()
    lakes = 0
    for x, row in enumerate(rows):
        for y, cell in enumerate(row):
            if cell != "W" or (x, y) in seen:
                continue
            lakes += 1
            seen.add((x, y))
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                for dx, dy in _NEIGHBOURS:
                    nx, ny = cx + dx, cy + dy
                    if (
                        0 <= nx < height
                        and 0 <= ny < width
                        and rows[nx][ny] == "W"
                        and (nx, ny) not in seen
                    ):
                        seen.add((nx, ny))
                        stack.append((nx, ny))
    return lakes


def solve(text: str) -> str:
    """Read ``N M`` and ``N * M`` field characters and return the pond count."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected the field size N M")
    height, width = int(tokens[0]), int(tokens[1])
    cells = "".join(tokens[2:])
    if len(cells) < height * width:
        raise ValueError(f"expected {height * width} cells, got {len(cells)}")
    grid = [cells[row * width:(row + 1) * width] for row in range(height)]
    return f"{count_lakes(grid)}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a field from standard input and print its pond count."""
    parser = argparse.ArgumentParser(description="Count the ponds in a field.")
    parser.parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())