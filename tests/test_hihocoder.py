import pytest

from ojsolutions.hihocoder import (
    feeding_radius,
    kth_smallest,
    longest_streak,
    max_satisfied,
    rank_of,
    solve,
)


def test_streak_without_missed_days():
    assert longest_streak([], 0) == 100


def test_streak_enough_cards():
    assert longest_streak([10, 20, 30], 3) == 100
    assert longest_streak([10, 20, 30], 5) == 100


def test_streak_single_missed_day():
    assert longest_streak([10], 0) == 90


@pytest.mark.parametrize("missed", [[5, 40, 41, 77], [2, 3, 50, 98, 99], [33, 66]])
def test_streak_grows_with_cards(missed):
    streaks = [longest_streak(missed, cards) for cards in range(len(missed) + 1)]
    assert streaks == sorted(streaks)
    assert all(1 <= s <= 100 for s in streaks)


def test_streak_negative_cards():
    with pytest.raises(ValueError):
        longest_streak([10], -1)


def test_rank_of_missing_key():
    assert rank_of([3, 1, 2], 7) == -1


def test_rank_of_distinct_sorted():
    values = [2, 5, 9, 14, 20]
    assert [rank_of(values[::-1], v) for v in values] == [i + 1 for i in range(len(values))]


def test_kth_smallest_ends():
    values = [7, 3, 9, 1, 4]
    assert kth_smallest(values, 1) == min(values)
    assert kth_smallest(values, len(values)) == max(values)


def test_kth_smallest_handles_duplicates():
    values = [5, 5, 1, 5]
    assert kth_smallest(values, 2) == 5


@pytest.mark.parametrize("k", [0, 4, -2])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(IndexError):
        kth_smallest([1, 2, 3], k)


def test_solve_1133_out_of_range():
    assert solve("1133", "3 5\n1 2 3") == "-1"


def test_max_satisfied_at_least_one():
    assert max_satisfied([]) == 1
    assert max_satisfied([("<", 1), (">", 1)]) == 1


def test_max_satisfied_identical():
    constraints = [("=", 3)] * 4
    assert max_satisfied(constraints) == len(constraints)


def test_max_satisfied_half_values():
    constraints = [("<", 1), (">", 0), ("<=", 1), (">=", 0)]
    assert max_satisfied(constraints) == len(constraints)


def test_feeding_radius_impossible():
    points = [(0.0, 0.0), (3.0, 0.0)]
    assert feeding_radius(points, 0) == -1
    assert feeding_radius(points, len(points) + 1) == -1


def test_feeding_radius_skips_edge():
    points = [(0.0, 0.0), (3.0, 0.0)]
    assert feeding_radius(points, 1) == 1
    assert feeding_radius(points, 2) == 4


def test_solve_1128_echoes_values():
    assert solve("1128", "3 2\n3 2 1") == "3 2 1 " + str(rank_of([3, 2, 1], 2))


def test_solve_1227_matches_function():
    points = [(0.0, 0.0), (3.0, 0.0)]
    assert solve("1227", "1\n2 2\n0 0\n3 0\n") == f"{feeding_radius(points, 2)}\n"


def test_solve_1223_cases():
    text = "2\nx < 1\nx > 0\n1\nx = 5\n"
    expected = f"{max_satisfied([('<', 1), ('>', 0)])}\n{max_satisfied([('=', 5)])}\n"
    assert solve("1223", text) == expected


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        solve("42", "")