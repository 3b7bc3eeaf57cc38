"""Command line entry point: solve a numbered problem from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from . import matrices, records, sequences
from . import text as text_problems

_PROBLEMS: dict[str, Callable[[str], str]] = {
    "1023": records.problem_1023,
    "1026": sequences.problem_1026,
    "1068": sequences.problem_1068,
    "1091": records.problem_1091,
    "1101": sequences.problem_1101,
    "1113": sequences.problem_1113,
    "1158": sequences.problem_1158,
    "1159": sequences.problem_1159,
    "1160": sequences.problem_1160,
    "1164": sequences.problem_1164,
    "1168": text_problems.problem_1168,
    "1176": sequences.problem_1176,
    "1178": sequences.problem_1178,
    "1179": records.problem_1179,
    "1181": matrices.problem_1181,
    "1184": matrices.problem_1184,
    "1190": matrices.problem_1190,
    "1253": text_problems.problem_1253,
    "1263": text_problems.problem_1263,
    "1383": matrices.problem_1383,
    "1435": matrices.problem_1435,
    "1478": matrices.problem_1478,
    "1551": text_problems.problem_1551,
    "1557": matrices.problem_1557,
    "1827": matrices.problem_1827,
    "1837": sequences.problem_1837,
    "2028": sequences.problem_2028,
    "2174": text_problems.problem_2174,
    "2310": records.problem_2310,
    "2760": text_problems.problem_2760,
}


def solve(problem, text: str) -> str:
    """Run the solver for ``problem`` (a number or its string) on ``text``."""
    key = str(problem).strip()
    try:
        handler = _PROBLEMS[key]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return handler(text)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="judgeproblems", description="Solve a numbered judge problem."
    )
    parser.add_argument("problem", help="problem number, one of: " + ", ".join(_PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file (standard input if omitted)")
    args = parser.parse_args(argv)
    data = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        output = solve(args.problem, data)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0