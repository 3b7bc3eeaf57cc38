"""Coin-tossing simulation: correlation between attempts and heads."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

RAND_MAX = 2**31 - 1
MAX_ATTEMPTS = 5
HEADS_WANTED = 2
DEFAULT_BATCHES = 100
DEFAULT_ROUNDS = 1000


@dataclass(frozen=True)
class Round:
    """Outcome of one round: tosses made and heads seen."""

    attempts: int
    heads: int


def randint(n: int, rng: random.Random) -> int:
    """Uniform integer in ``range(n)``, rejecting draws that would bias the modulo."""
    if n <= 0:
        raise ValueError(f"n must be positive: {n}")
    end = (RAND_MAX // n) * n
    while True:
        draw = rng.randint(0, RAND_MAX)
        if draw < end:
            return draw % n


def play_round(rng: random.Random) -> Round:
    """Toss until two heads or five tosses, whichever comes first."""
    heads = attempts = 0
    while heads < HEADS_WANTED and attempts < MAX_ATTEMPTS:
        if randint(2, rng) == 0:
            heads += 1
        attempts += 1
    return Round(attempts, heads)


def correlation(rounds: Iterable[Round]) -> float:
    """Pearson correlation of attempts and heads; NaN when either is constant."""
    rounds = list(rounds)
    if not rounds:
        raise ValueError("at least one round is required")
    n = float(len(rounds))
    sx = sum(r.attempts for r in rounds)
    sy = sum(r.heads for r in rounds)
    sxx = sum(r.attempts**2 for r in rounds)
    syy = sum(r.heads**2 for r in rounds)
    sxy = sum(r.attempts * r.heads for r in rounds)
    covariance = sxy - sx * sy / n
    spread = (sxx - sx**2 / n) * (syy - sy**2 / n)
    if spread <= 0:
        return math.nan
    return covariance / math.sqrt(spread)


def simulate(
    batches: int = DEFAULT_BATCHES,
    rounds: int = DEFAULT_ROUNDS,
    rng: Optional[random.Random] = None,
) -> Iterator[float]:
    """Yield the correlation of each batch of rounds."""
    rng = rng if rng is not None else random.Random()
    for _ in range(batches):
        yield correlation(play_round(rng) for _ in range(rounds))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the attempts/heads correlation of simulated coin rounds."
    )
    parser.add_argument("--batches", type=int, default=DEFAULT_BATCHES)
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    for value in simulate(args.batches, args.rounds, rng):
        print(f"{value:f}")
    return 0