"""Problems over records: water consumption, parity batches, scores and quadrants."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .sequences import _Tokens

BATCH_SIZE = 5
PARITY_INPUT = 15


def _lines(lines: Iterable[object]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _truncated_division(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Household:
    """A household: number of residents and total water consumption."""

    residents: int
    consumption: int

    @property
    def per_capita(self) -> int:
        """Consumption per resident, truncated toward zero."""
        return _truncated_division(self.consumption, self.residents)


def consumption_groups(households: Iterable[Household]) -> list[tuple[int, int]]:
    """Pairs of (residents, per-capita consumption), ordered by consumption, stable."""
    ordered = sorted(households, key=lambda household: household.per_capita)
    return [(household.residents, household.per_capita) for household in ordered]


def _city_report(city: int, households: Sequence[Household]) -> str:
    groups = " ".join(f"{m}-{c}" for m, c in consumption_groups(households))
    total = float(sum(h.consumption for h in households))
    people = sum(h.residents for h in households)
    return _lines(
        [f"Cidade# {city}:", groups, f"Consumo medio: {total / people:.2f} m3."]
    )


def problem_1023(text: str) -> str:
    tokens = _Tokens(text)
    reports = []
    city = 1
    count = tokens.next_or_none()
    while count is not None and count != 0:
        if count < 0:
            raise ValueError(f"negative household count: {count}")
        households = [Household(tokens.next(), tokens.next()) for _ in range(count)]
        reports.append(_city_report(city, households))
        city += 1
        count = tokens.next_or_none()
    return "\n".join(reports)


def parity_batches(numbers: Iterable[int]) -> list[tuple[str, list[int]]]:
    """Batches of up to five even ("par") or odd ("impar") numbers, in flush order.

    A full buffer is flushed when another number of its parity arrives; at the
    end the odd buffer is flushed, then the even one.
    """
    buffers: dict[str, list[int]] = {"par": [], "impar": []}
    batches = []
    for number in numbers:
        name = "par" if number % 2 == 0 else "impar"
        bucket = buffers[name]
        if len(bucket) == BATCH_SIZE:
            batches.append((name, list(bucket)))
            bucket.clear()
        bucket.append(number)
    batches.append(("impar", list(buffers["impar"])))
    batches.append(("par", list(buffers["par"])))
    return batches


def problem_1179(text: str) -> str:
    tokens = _Tokens(text)
    numbers = [tokens.next() for _ in range(PARITY_INPUT)]
    return _lines(
        f"{name}[{index}] = {value}"
        for name, values in parity_batches(numbers)
        for index, value in enumerate(values)
        if value != 0
    )


def volleyball_percentages(rows: Iterable[Sequence[int]]) -> tuple[float, float, float]:
    """Success percentages of serves, blocks and attacks over all players.

    Each row holds attempts (serve, block, attack) then successes in that order.
    """
    totals = [0] * 6
    for row in rows:
        if len(row) != 6:
            raise ValueError("each row needs six values")
        totals = [total + value for total, value in zip(totals, row)]
    attempts, successes = totals[:3], totals[3:]
    serve, block, attack = (
        hit * 100.0 / tried for hit, tried in zip(successes, attempts)
    )
    return serve, block, attack


def problem_2310(text: str) -> str:
    tokens = _Tokens(text)
    count = tokens.next()
    rows = []
    for _ in range(count):
        tokens.next(str)
        rows.append(tuple(tokens.next() for _ in range(6)))
    serve, block, attack = volleyball_percentages(rows)
    return (
        f"Pontos de Saque: {serve:.2f} %.\n"
        f"Pontos de Bloqueio: {block:.2f} %.\n"
        f"Pontos de Ataque: {attack:.2f} %.\n"
    )


def quadrant(x: int, y: int, n: int, m: int) -> str:
    """Quadrant of (x, y) relative to the dividing point (n, m)."""
    if x > n and y > m:
        return "NE"
    if x < n and y > m:
        return "NO"
    if x < n and y < m:
        return "SO"
    if x > n and y < m:
        return "SE"
    return "divisa"


def problem_1091(text: str) -> str:
    tokens = _Tokens(text)
    results = []
    count = tokens.next_or_none()
    while count is not None and count != 0:
        n, m = tokens.next(), tokens.next()
        for _ in range(count):
            x, y = tokens.next(), tokens.next()
            results.append(quadrant(x, y, n, m))
        count = tokens.next_or_none()
    return _lines(results)