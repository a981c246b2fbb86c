import io

import pytest

from ojsolutions.hdoj import (
    candy_game,
    digital_root,
    e_table,
    elevator_time,
    fibonacci_divisible_by_three,
    is_acceptable,
    main,
    solve,
    split_on_fives,
    sweet_journey,
    triangular,
)


@pytest.mark.parametrize("n", [0, 1, 2, 10, 57])
def test_triangular_matches_sum(n):
    assert triangular(n) == sum(range(n + 1))


def test_triangular_wraps_to_32_bits():
    assert -(2**31) <= triangular(100000) < 2**31


def test_solve_1001_format():
    assert solve("1001", "100\n") == f"{triangular(100)}\n\n"


def test_elevator_same_floor_costs_only_stop():
    assert elevator_time([3, 3]) - elevator_time([3]) == 5


def test_solve_1008_sample():
    assert solve("1008", "1 2\n3 2 3 1\n0\n") == "17\n41\n"


def test_e_table_layout():
    lines = e_table().splitlines()
    assert lines[:2] == ["n e", "- -----------"]
    assert len(lines) == 12
    assert lines[2] == "0 1"
    assert lines[-1] == "9 2.718281526"


def test_e_table_row_eight_has_padding_zero():
    row = e_table().splitlines()[10]
    assert row.startswith("8 2.71827877") and row.endswith("0")


def test_solve_1012_ignores_input():
    assert solve("1012", "anything") == e_table()


def test_digital_root_of_nines():
    assert digital_root("9" * 50) == 9


@pytest.mark.parametrize("digits", ["24", "39", "123456789", "987654321987654321"])
def test_digital_root_is_stable(digits):
    root = digital_root(digits)
    assert 1 <= root <= 9
    assert digital_root(digits + "0") == root
    assert digital_root(digits[::-1]) == root
    assert digital_root(str(root)) == root


def test_digital_root_rejects_non_digits():
    with pytest.raises(ValueError):
        digital_root("12a")


def test_solve_1013_stops_at_zero():
    assert solve("1013", "24\n39\n0\n77\n") == "6\n3\n"


@pytest.mark.parametrize("n", range(12))
def test_fibonacci_residues_are_periodic(n):
    assert fibonacci_divisible_by_three(n) == fibonacci_divisible_by_three(n + 8)


def test_solve_1021_first_values():
    assert solve("1021", "0\n1\n2\n") == "no\nno\nyes\n"


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci_divisible_by_three(-1)


def test_candy_game_sample():
    assert candy_game([2, 4, 6, 8]) == (4, 8)


def test_candy_game_equal_start_needs_no_rounds():
    assert candy_game([6, 6, 6]) == (0, 6)


def test_candy_game_rejects_empty():
    with pytest.raises(ValueError):
        candy_game([])


def test_solve_1034_matches_function():
    rounds, amount = candy_game([2, 4, 6, 8])
    assert solve("1034", "4\n2 4 6 8\n0\n") == f"{rounds} {amount}\n"


@pytest.mark.parametrize(
    "word, expected",
    [("a", True), ("tv", False), ("ptoui", False), ("eep", True), ("wiinq", False)],
)
def test_is_acceptable(word, expected):
    assert is_acceptable(word) is expected


def test_solve_1039_format():
    text = "a\ntv\nend\neep\n"
    assert solve("1039", text) == "<a> is acceptable.\n<tv> is not acceptable.\n"


def test_solve_1040_sorts_each_case():
    assert solve("1040", "2\n3\n2 1 3\n1\n9\n") == "1 2 3\n9\n"


def test_split_on_fives_sample():
    assert split_on_fives("0051231232050775") == [0, 77, 12312320]


def test_split_on_fives_result_sorted_and_five_free():
    numbers = split_on_fives("98155550123455")
    assert numbers == sorted(numbers)
    assert all("5" not in str(n) for n in numbers)


def test_split_on_fives_rejects_letters():
    with pytest.raises(ValueError):
        split_on_fives("12x5")


def test_sweet_journey_without_hills():
    assert sweet_journey(3, 1, []) == 0


def test_sweet_journey_grows_with_attack():
    segments = [(1, 4), (5, 9), (10, 12)]
    assert sweet_journey(3, 1, segments) <= sweet_journey(4, 1, segments)


def test_solve_5477_sample():
    text = "2\n2 2 2 5\n1 2\n3 4\n1 2 1 3\n1 2\n"
    assert solve("5477", text) == "Case #1: 0\nCase #2: 1\n"


def test_pair_problems_agree():
    pairs = "1 5\n10 20\n-3 3\n"
    assert solve("1000", pairs) == solve("1089", pairs)
    assert solve("1090", "3\n" + pairs) == solve("1000", pairs)


def test_solve_1092_matches_pairs():
    assert solve("1092", "2 1 5\n2 10 20\n0\n4 1 1 1 1\n") == solve("1000", "1 5\n10 20\n")


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        solve("9999", "")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("24\n0\n"))
    assert main(["1013"]) == 0
    assert capsys.readouterr().out == solve("1013", "24\n0\n")