import pytest

from judgeproblems.matrices import (
    concentric_square,
    distance_square,
    is_valid_sudoku,
    power_square,
    problem_1181,
    problem_1184,
    problem_1190,
    problem_1383,
    problem_1435,
    problem_1478,
    problem_1557,
    problem_1827,
    square_pattern,
)


def _matrix_text(rows):
    return "\n".join(" ".join(str(v) for v in row) for row in rows) + "\n"


def _constant(value):
    return [[value] * 12 for _ in range(12)]


def _valid_grid():
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


def _grid_text(grid):
    return "\n".join(" ".join(str(v) for v in row) for row in grid) + "\n"


def test_problem_1181_mean_of_constant_row():
    rows = [[2.5 if r == 4 else 9.0 for _ in range(12)] for r in range(12)]
    assert problem_1181("4\nM\n" + _matrix_text(rows)) == "2.5\n"


def test_problem_1181_sum_of_row():
    rows = [list(range(12)) if r == 3 else [100] * 12 for r in range(12)]
    out = problem_1181("3\nS\n" + _matrix_text(rows))
    assert float(out) == float(sum(range(12)))


def test_problem_1181_short_input():
    with pytest.raises(ValueError):
        problem_1181("0 S 1 2 3")


def test_problem_1184_constant_matrix():
    assert problem_1184("M\n" + _matrix_text(_constant(1))) == "1.0\n"
    assert problem_1184("S\n" + _matrix_text(_constant(1))) == "66.0\n"


def test_problem_1184_region():
    base = _constant(1)
    above = [row[:] for row in base]
    above[0][11] = 500
    below = [row[:] for row in base]
    below[11][0] = 500
    reference = problem_1184("S\n" + _matrix_text(base))
    assert problem_1184("S\n" + _matrix_text(above)) == reference
    assert problem_1184("S\n" + _matrix_text(below)) != reference


def test_problem_1190_mean_and_sum():
    mean = float(problem_1190("M\n" + _matrix_text(_constant(3))))
    total = float(problem_1190("S\n" + _matrix_text(_constant(3))))
    assert mean == 3.0
    assert total == 30 * mean


def test_problem_1190_region():
    base = _constant(1)
    outside = [row[:] for row in base]
    outside[0][0] = 500
    inside = [row[:] for row in base]
    inside[6][11] = 500
    reference = problem_1190("S\n" + _matrix_text(base))
    assert problem_1190("S\n" + _matrix_text(outside)) == reference
    assert problem_1190("S\n" + _matrix_text(inside)) != reference


def test_valid_sudoku():
    assert is_valid_sudoku(_valid_grid()) is True


def test_sudoku_with_swapped_cells_is_invalid():
    grid = _valid_grid()
    grid[0][0], grid[1][0] = grid[1][0], grid[0][0]
    assert is_valid_sudoku(grid) is False


def test_sudoku_out_of_range_value_is_invalid():
    grid = _valid_grid()
    grid[4][4] = 10
    assert is_valid_sudoku(grid) is False


def test_sudoku_bad_shape():
    with pytest.raises(ValueError):
        is_valid_sudoku([[1, 2, 3]])


def test_problem_1383_verdicts():
    bad = _valid_grid()
    bad[0][0], bad[0][1] = bad[0][1], bad[0][0]
    out = problem_1383("2\n" + _grid_text(_valid_grid()) + _grid_text(bad))
    assert out == "Instancia 1\nSIM\n\nInstancia 2\nNAO\n\n"


@pytest.mark.parametrize("n", range(1, 9))
def test_concentric_square_symmetry(n):
    square = concentric_square(n)
    assert square == [list(col) for col in zip(*square)]
    assert square == square[::-1]
    assert all(v == 1 for v in square[0] + square[-1])
    assert max(max(row) for row in square) == (n + 1) // 2


def test_problem_1435_output_matches_square():
    out = problem_1435("3\n0\n")
    block, rest = out.split("\n\n", 1)
    lines = block.split("\n")
    assert [[int(x) for x in line.split()] for line in lines] == concentric_square(3)
    assert all(len(line) == 4 * 3 - 1 for line in lines)
    assert rest == ""


@pytest.mark.parametrize("n", range(1, 8))
def test_distance_square_properties(n):
    square = distance_square(n)
    assert all(square[i][i] == 1 for i in range(n))
    assert square == [list(col) for col in zip(*square)]
    assert square[0][n - 1] == n


def test_problem_1478_stops_at_zero():
    out = problem_1478("2\n0\n5\n")
    assert out.count("\n\n") == 1
    lines = out.rstrip("\n").split("\n")
    assert [[int(x) for x in line.split()] for line in lines] == distance_square(2)


@pytest.mark.parametrize("n", range(1, 7))
def test_power_square_doubles(n):
    square = power_square(n)
    assert square[0][0] == 1
    assert all(row[j + 1] == 2 * row[j] for row in square for j in range(n - 1))
    assert square == [list(col) for col in zip(*square)]


def test_problem_1557_fixed_width():
    out = problem_1557("4\n0\n")
    lines = out.rstrip("\n").split("\n")
    width = len(str(power_square(4)[-1][-1]))
    assert all(len(line) == 4 * width + 3 for line in lines)
    assert [[int(x) for x in line.split()] for line in lines] == power_square(4)


def test_square_pattern_single():
    assert square_pattern(1) == [[4]]


def test_problem_1827_reads_until_end():
    out = problem_1827("3\n5\n")
    expected = "".join(
        "".join("".join(map(str, row)) + "\n" for row in square_pattern(n)) + "\n"
        for n in (3, 5)
    )
    assert out == expected