"""Number sequence and integer arithmetic problems."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from typing import Optional, TypeVar

FIB_LIMIT = 60
CENTURY = 100
HALVING_STEPS = 100
ODD_WINDOW = 12
_UINT32_MASK = 0xFFFFFFFF

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

    def pair(self, kind: Callable[[str], _T] = int) -> Optional[tuple[_T, _T]]:
        first = self.next_or_none(kind)
        if first is None:
            return None
        second = self.next_or_none(kind)
        if second is None:
            return None
        return first, second


def _lines(lines) -> str:
    return "".join(f"{line}\n" for line in lines)


def _range_line(m: int, n: int) -> str:
    low, high = sorted((m, n))
    numbers = range(low, high + 1)
    return "".join(f"{i} " for i in numbers) + f"Sum={sum(numbers)}"


def problem_1101(text: str) -> str:
    """List each range with its sum until a pair holds a non-positive value."""
    tokens = _Tokens(text)
    m, n = tokens.next(), tokens.next()
    lines = []
    while True:
        lines.append(_range_line(m, n))
        pair = tokens.pair()
        if pair is None or min(pair) <= 0:
            break
        m, n = pair
    return _lines(lines)


def problem_1113(text: str) -> str:
    """Classify pairs as increasing or decreasing until both values are equal."""
    tokens = _Tokens(text)
    x, y = tokens.next(), tokens.next()
    lines = []
    while True:
        lines.append("Decrescente" if x > y else "Crescente")
        pair = tokens.pair()
        if pair is None or pair[0] == pair[1]:
            break
        x, y = pair
    return _lines(lines)


def consecutive_odd_sum(x: int, y: int) -> int:
    """Sum of ``y`` consecutive odd numbers starting at ``x`` (or the next odd)."""
    start = x + 1 if x % 2 == 0 else x
    return sum(start + 2 * i for i in range(y))


def problem_1158(text: str) -> str:
    tokens = _Tokens(text)
    count = tokens.next()
    results = []
    for _ in range(count):
        x, y = tokens.next(), tokens.next()
        results.append(consecutive_odd_sum(x, y))
    return _lines(results)


def five_even_sum(n: int) -> int:
    """Sum of the five consecutive even numbers starting at ``n`` (or the next even)."""
    start = n if n % 2 == 0 else n + 1
    return sum(start + 2 * i for i in range(5))


def problem_1159(text: str) -> str:
    tokens = _Tokens(text)
    n = tokens.next()
    results = []
    while n is not None and n != 0:
        results.append(five_even_sum(n))
        n = tokens.next_or_none()
    return _lines(results)


def years_to_overtake(p1: int, p2: int, c1: float, c2: float) -> int:
    """Years until population ``p1`` exceeds ``p2``; 0 if not within a century."""
    for year in range(1, CENTURY + 1):
        p1 += math.floor(p1 * (c1 / 100.0))
        p2 += math.floor(p2 * (c2 / 100.0))
        if p1 > p2:
            return year
    return 0


def problem_1160(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.next()
    lines = []
    for _ in range(cases):
        p1, p2 = tokens.next(), tokens.next()
        c1, c2 = tokens.next(float), tokens.next(float)
        lines.append(f"{years_to_overtake(p1, p2, c1, c2)} anos.")
    return _lines(lines)


def is_perfect(n: int) -> bool:
    """Whether ``n`` equals the sum of its divisors below it."""
    return sum(i for i in range(1, n) if n % i == 0) == n


def problem_1164(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.next()
    lines = []
    for _ in range(cases):
        n = tokens.next()
        lines.append(f"{n} {'' if is_perfect(n) else 'nao '}eh perfeito")
    return _lines(lines)


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, for ``0 <= n <= 60``."""
    if not 0 <= n <= FIB_LIMIT:
        raise ValueError(f"index out of range 0..{FIB_LIMIT}: {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def problem_1176(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.next()
    lines = []
    for _ in range(cases):
        n = tokens.next()
        lines.append(f"Fib({n}) = {fibonacci(n)}")
    return _lines(lines)


def halvings(value: float) -> Iterator[float]:
    """Yield ``value`` and its successive halves, one hundred numbers in all."""
    for _ in range(HALVING_STEPS):
        yield value
        value /= 2.0


def problem_1178(text: str) -> str:
    value = _Tokens(text).next(float)
    return _lines(f"N[{i}] = {v:.4f}" for i, v in enumerate(halvings(value)))


def euclidean_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient and remainder with ``0 <= r < |b|`` and ``a == q * b + r``."""
    remainder = a % abs(b)
    return (a - remainder) // b, remainder


def problem_1837(text: str) -> str:
    tokens = _Tokens(text)
    a, b = tokens.next(), tokens.next()
    q, r = euclidean_divmod(a, b)
    return f"{q} {r}\n"


def sequence_count(n: int) -> int:
    """Length of the sequence 0, 1, 2, 2, 3, 3, 3, ... up to ``n`` repeated ``n`` times."""
    if n < 0:
        raise ValueError(f"negative length: {n}")
    return 1 + n * (n + 1) // 2


def problem_2028(text: str) -> str:
    tokens = _Tokens(text)
    blocks = []
    case = 1
    n = tokens.next_or_none()
    while n is not None:
        count = sequence_count(n)
        plural = "s" if n > 0 else ""
        body = "0" + "".join(f" {j}" * j for j in range(1, n + 1))
        blocks.append(f"Caso {case}: {count} numero{plural}\n{body}\n\n")
        case += 1
        n = tokens.next_or_none()
    return "".join(blocks)


def odd_numbers_from(n: int) -> list[int]:
    """Odd numbers among the twelve consecutive integers starting at ``n``."""
    return [i for i in range(n, n + ODD_WINDOW) if i % 2 != 0]


def problem_1068(text: str) -> str:
    return _lines(odd_numbers_from(_Tokens(text).next()))


def problem_1026(text: str) -> str:
    """Exclusive-or of unsigned 32-bit pairs until input runs out."""
    tokens = _Tokens(text)
    results = []
    while True:
        try:
            pair = tokens.pair()
        except ValueError:
            break
        if pair is None:
            break
        a, b = (value & _UINT32_MASK for value in pair)
        results.append(a ^ b)
    return _lines(results)