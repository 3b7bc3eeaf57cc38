# judgeproblems

Solutions to a set of classic online-judge exercises: number sequences,
matrix patterns, text puzzles and small record-keeping tasks. Each problem
takes its whole input as text and returns its whole output as text, the way
a judge feeds and compares them.

## Installation

```
pip install .
```

## Command line

Pick a problem by its number and pipe its input on standard input, or name
an input file after the number:

```
printf '5 2\n6 3\n-5 0\n' | judgeproblems 1101
judgeproblems 1176 input.txt
```

The problems available are 1023, 1026, 1068, 1091, 1101, 1113, 1158, 1159,
1160, 1164, 1168, 1176, 1178, 1179, 1181, 1184, 1190, 1253, 1263, 1383,
1435, 1478, 1551, 1557, 1827, 1837, 2028, 2174, 2310 and 2760. An unknown
number, or input that ends too early, prints an error on standard error and
exits with status 1.

The package also has a coin-toss simulation. Each round tosses a coin until
two heads appear or five tosses are made. For every batch of rounds the
command prints the correlation between the number of tosses and the number
of heads (`nan` when either never varies):

```
judgeproblems-coin
judgeproblems-coin --batches 10 --rounds 500 --seed 42
```

By default it runs 100 batches of 1000 rounds with an unseeded generator.

## Library use

Every problem has a `problem_<number>(text)` function that takes the whole
input and returns the whole output. The helpers behind them can also be
called directly:

```python
from judgeproblems.sequences import fibonacci, is_perfect, euclidean_divmod
from judgeproblems.matrices import concentric_square, is_valid_sudoku
from judgeproblems.text import led_count, shift_decode, classify_sentence
from judgeproblems.records import quadrant, Household, consumption_groups
from judgeproblems.cli import solve

fibonacci(10)               # 55
is_perfect(28)              # True
euclidean_divmod(-7, 2)     # (-4, 1)
led_count("115380")         # 27
quadrant(8, 9, 2, 1)        # "NE"
print(solve("1101", "5 2\n6 3\n-5 0\n"))
# 2 3 4 5 Sum=14
# 3 4 5 6 Sum=18
```

The modules are:

- `judgeproblems.sequences`: range sums, odd and even runs, population
  growth (`years_to_overtake`), perfect numbers, Fibonacci up to index 60,
  repeated halving, Euclidean division, the 0 1 2 2 3 3 3 sequence and
  unsigned 32-bit exclusive-or.
- `judgeproblems.matrices`: sums and means over regions of a 12×12 matrix,
  Sudoku checking (`is_valid_sudoku`) and the printed squares
  `concentric_square`, `distance_square`, `power_square` and
  `square_pattern`.
- `judgeproblems.text`: LED segment counts, a shift cipher decoder,
  alliteration counting, pangram classification (`distinct_letters`,
  `distinct_alpha`, `classify_sentence`), the missing-pomekon count and
  string rotations.
- `judgeproblems.records`: per-capita water consumption (`Household`,
  `consumption_groups`), parity batches of five, volleyball success
  percentages and quadrant classification.
- `judgeproblems.coin`: the coin-toss simulation (`Round`, `randint`,
  `play_round`, `correlation`, `simulate`, `main`). Pass a
  `random.Random` to get repeatable results.
- `judgeproblems.cli`: `solve(problem, text)` and the `judgeproblems`
  command.

## Tests

```
pip install .[test]
pytest
```