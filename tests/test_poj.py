import pytest

from ojsolutions.poj import count_lakes, solve

SAMPLE = [
    "W........WW.",
    ".WWW.....WWW",
    "....WW...WW.",
    ".........WW.",
    ".........W..",
    "..W......W..",
    ".W.W.....WW.",
    "W.W.W.....W.",
    ".W.W......W.",
    "..W.......W.",
]


def test_sample_field():
    assert count_lakes(SAMPLE) == 3


def test_isolated_cells_are_separate_lakes():
    positions = [(0, 0), (0, 4), (2, 2), (4, 0), (4, 4)]
    grid = [
        "".join("W" if (x, y) in positions else "." for y in range(5)) for x in range(5)
    ]
    assert count_lakes(grid) == len(positions)


def test_diagonal_cells_join():
    assert count_lakes(["W.", ".W"]) == count_lakes(["W"])


def test_row_of_water_is_one_lake():
    assert count_lakes(["WWWW"]) == count_lakes(["W"])


def test_large_field_does_not_overflow_stack():
    grid = ["W" * 100] * 100
    assert count_lakes(grid) == count_lakes(["W"])


def test_dry_field_has_fewer_lakes_than_wet():
    assert count_lakes(["...", "..."]) < count_lakes(["...", ".W."])


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        count_lakes(["WW", "W"])


def test_solve_matches_count():
    text = f"{len(SAMPLE)} {len(SAMPLE[0])}\n" + "\n".join(SAMPLE) + "\n"
    assert solve(text) == f"{count_lakes(SAMPLE)}\n"


def test_solve_ignores_whitespace_between_cells():
    compact = "2 3\nW.W\n.W.\n"
    spaced = "2 3\nW . W\n. W .\n"
    assert solve(compact) == solve(spaced)


def test_solve_rejects_short_field():
    with pytest.raises(ValueError):
        solve("2 3\nW.W\n")