"""Matrix region sums, Sudoku checking and printed square patterns."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Optional, TypeVar

LINE = 12
SUDOKU_SIZE = 9
_DIGITS = list(range(1, SUDOKU_SIZE + 1))

_T = TypeVar("_T")


class _Tokens:
    """Whitespace-separated tokens consumed one at a time."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def next(self, kind: Callable[[str], _T] = int) -> _T:
        token = next(self._items, None)
        if token is None:
            raise ValueError("unexpected end of input")
        return kind(token)

    def next_or_none(self, kind: Callable[[str], _T] = int) -> Optional[_T]:
        token = next(self._items, None)
        return None if token is None else kind(token)


def _region_result(
    tokens: _Tokens, op: str, keep: Callable[[int, int], bool], divisor: float
) -> str:
    values = [tokens.next(float) for _ in range(LINE * LINE)]
    total = 0.0
    for index, value in enumerate(values):
        row, col = divmod(index, LINE)
        if keep(row, col):
            total += value
    result = total if op == "S" else total / divisor
    return f"{result:.1f}\n"


def problem_1181(text: str) -> str:
    """Sum or mean of one row of a 12x12 matrix."""
    tokens = _Tokens(text)
    line = tokens.next()
    op = tokens.next(str)[0]
    return _region_result(tokens, op, lambda row, col: row == line, 12.0)


def problem_1184(text: str) -> str:
    """Sum or mean of the cells below the main diagonal."""
    tokens = _Tokens(text)
    op = tokens.next(str)[0]
    return _region_result(tokens, op, lambda row, col: col < row, 66.0)


def problem_1190(text: str) -> str:
    """Sum or mean of the right-hand triangle between both diagonals."""
    tokens = _Tokens(text)
    op = tokens.next(str)[0]
    return _region_result(
        tokens, op, lambda row, col: col >= LINE - row and col > row, 30.0
    )


def is_valid_sudoku(grid: Sequence[Sequence[int]]) -> bool:
    """Whether every row, column and 3x3 block holds 1..9 exactly once."""
    rows = [list(row) for row in grid]
    if len(rows) != SUDOKU_SIZE or any(len(row) != SUDOKU_SIZE for row in rows):
        raise ValueError("a Sudoku grid must be 9x9")
    columns = [list(column) for column in zip(*rows)]
    blocks = [
        [rows[r][c] for r in range(top, top + 3) for c in range(left, left + 3)]
        for top in (0, 3, 6)
        for left in (0, 3, 6)
    ]
    return all(sorted(group) == _DIGITS for group in (*rows, *columns, *blocks))


def problem_1383(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.next()
    blocks = []
    for case in range(1, cases + 1):
        grid = [[tokens.next() for _ in range(SUDOKU_SIZE)] for _ in range(SUDOKU_SIZE)]
        verdict = "SIM" if is_valid_sudoku(grid) else "NAO"
        blocks.append(f"Instancia {case}\n{verdict}\n\n")
    return "".join(blocks)


def concentric_square(n: int) -> list[list[int]]:
    """Square whose cells hold their ring number counted from the border."""
    return [
        [min(i, n + 1 - i, j, n + 1 - j) for j in range(1, n + 1)]
        for i in range(1, n + 1)
    ]


def distance_square(n: int) -> list[list[int]]:
    """Square whose cells hold one plus their distance from the main diagonal."""
    return [[abs(i - j) + 1 for j in range(n)] for i in range(n)]


def power_square(n: int) -> list[list[int]]:
    """Square whose cell (i, j) holds 2 ** (i + j)."""
    return [[2 ** (i + j) for j in range(n)] for i in range(n)]


def square_pattern(n: int) -> list[list[int]]:
    """Square with diagonals 2 and 3, a central block of 1 and a 4 in the middle."""
    half = n // 2
    third = n / 3.0
    low = math.floor(third)

    def cell(i: int, j: int) -> int:
        if i == half and j == half:
            return 4
        if low <= i < third * 2 and low <= j < third * 2:
            return 1
        if i == j:
            return 2
        if i == n - j - 1:
            return 3
        return 0

    return [[cell(i, j) for j in range(n)] for i in range(n)]


def _format_rows(rows: Iterable[Sequence[int]], width: int, separator: str = " ") -> str:
    return "".join(
        separator.join(f"{value:{width}d}" for value in row) + "\n" for row in rows
    )


def _until_nonpositive(text: str, render: Callable[[int], str]) -> str:
    tokens = _Tokens(text)
    n = tokens.next()
    blocks = []
    while n is not None and n > 0:
        blocks.append(render(n) + "\n")
        n = tokens.next_or_none()
    return "".join(blocks)


def problem_1435(text: str) -> str:
    return _until_nonpositive(text, lambda n: _format_rows(concentric_square(n), 3))


def problem_1478(text: str) -> str:
    return _until_nonpositive(text, lambda n: _format_rows(distance_square(n), 3))


def problem_1557(text: str) -> str:
    def render(n: int) -> str:
        width = len(str(2 ** (2 * n - 2)))
        return _format_rows(power_square(n), width)

    return _until_nonpositive(text, render)


def problem_1827(text: str) -> str:
    tokens = _Tokens(text)
    blocks = []
    n = tokens.next_or_none()
    while n is not None:
        rows = square_pattern(n)
        blocks.append("".join("".join(map(str, row)) + "\n" for row in rows) + "\n")
        n = tokens.next_or_none()
    return "".join(blocks)