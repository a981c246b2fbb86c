# ojsolutions

A collection of solutions to well-known online-judge problems (HDOJ, POJ,
SEUOJ, hihocoder, Code Jam). Each solution is a plain Python function that
you can call and test. Small commands read judge-style input and write
judge-style output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `ojsolutions.bits`: bit tricks: `low_bit`, `high_bit`, `cover_bit`,
  `reverse_bits`, `low_idx`, `high_idx`, `clz`, `ctz`, `parity`,
  `count_bits`, `lg2`, `ceil_div`.
- `ojsolutions.distinct`: `DistinctCounter` counts the distinct values in a
  half-open range `[left, right)` of an array that supports point updates
  (`update(index, value)`, `count(left, right)`, `values`, `len()`). It is
  built on a Fenwick tree of sorted buckets, one entry per position that
  records where that position's value last occurred before it.
- `ojsolutions.codejam`: `barber_number` (Haircut), `mushrooms_eaten`
  (Mushroom Monster), and `solve_haircut` / `solve_mushroom` for whole
  inputs.
- `ojsolutions.hdoj`: `triangular`, `elevator_time`, `e_table`,
  `digital_root`, `fibonacci_divisible_by_three`, `candy_game`,
  `is_acceptable`, `split_on_fives`, `sweet_journey`.
- `ojsolutions.poj`: `count_lakes` (Lake Counting).
- `ojsolutions.seuoj`: `line_sums`, `is_prime`, `count_primes_between`,
  `row_sums`, `manhattan_extremes`, `diamond`, `count_primes_upto`,
  `is_leap_year`, `day_of_year`, `card_moves`.
- `ojsolutions.hihocoder`: `longest_streak`, `rank_of`, `kth_smallest`,
  `max_satisfied`, `feeding_radius`.

`distinct` and `poj` have a `solve(text)` function that takes the raw input
text and returns the full output text. `hdoj`, `seuoj` and `hihocoder` each
have `solve(problem, text)`, where `problem` is the problem identifier. An
unknown identifier raises `ValueError`.

## Using the functions

```python
from ojsolutions.distinct import DistinctCounter
from ojsolutions.hdoj import is_acceptable
from ojsolutions.poj import count_lakes
from ojsolutions.seuoj import day_of_year

counter = DistinctCounter([1, 2, 1, 3])
counter.count(0, 3)       # 2: distinct values at positions 0, 1 and 2
counter.update(2, 5)
counter.count(0, 3)       # 3

is_acceptable("tv")       # False: it has no vowel

count_lakes(["W..", ".W.", "..W"])   # 1: diagonal cells are connected

day_of_year(2000, 3, 1)   # 61
day_of_year(2001, 2, 29)  # raises ValueError
```

## Using the commands

`oj-distinct` and `oj-poj` read judge input from standard input and write
the answer to standard output:

```
oj-distinct < queries.txt
oj-poj < field.txt
```

`oj-hdoj`, `oj-seuoj` and `oj-hihocoder` cover several problems each. Give
the problem identifier as the first argument:

```
oj-hdoj 1008 < elevator.txt
oj-seuoj 91 < dates.txt
oj-seuoj averagecard < cards.txt
oj-hihocoder 1223 < inequalities.txt
```

The identifiers are:

- `oj-hdoj`: 1000, 1001, 1008, 1012, 1013, 1021, 1034, 1039, 1040, 1089,
  1090, 1092, 1106, 5477.
- `oj-seuoj`: 143, 46, 54, 59, 76, 78, 91, averagecard.
- `oj-hihocoder`: 1051, 1128, 1133, 1223, 1227.

`oj-codejam` takes `haircut` or `mushroom`. It does not use standard input
or output. It reads from a file and writes to a file, by default
`input.txt` and `output.txt`:

```
oj-codejam haircut
oj-codejam mushroom --input small.in --output small.out
```