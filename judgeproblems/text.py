"""Character counting, ciphers and sentence classification problems."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable, Sequence

from .sequences import _Tokens

LED_SEGMENTS = {
    "0": 6,
    "1": 2,
    "2": 5,
    "3": 5,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 3,
    "8": 7,
    "9": 6,
}
ALPHABET_SIZE = 26
POMEKON_TOTAL = 151
PREFIX_LENGTH = 10
_FIRST_UPPER = ord("A")
_WORD = re.compile(r"\S+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _lines(lines: Iterable[object]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _leading_int(text: str) -> tuple[int, str]:
    """Parse the integer at the start of ``text`` and return it with the rest."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("expected an integer")
    return int(match.group(1)), text[match.end():]


def led_count(digits: str) -> int:
    """Number of LED segments needed to show the digits; other characters are free."""
    return sum(LED_SEGMENTS.get(char, 0) for char in digits)


def problem_1168(text: str) -> str:
    count, rest = _leading_int(text)
    # One character (the line break after the count) is discarded.
    chars = iter(rest[1:])
    results = []
    for _ in range(count):
        digits = []
        char = next(chars, None)
        while True:
            if char is not None:
                digits.append(char)
            char = next(chars, None)
            if char is None or char == "\n":
                break
        results.append(f"{led_count(''.join(digits))} leds")
    return _lines(results)


def shift_decode(word: str, shift: int) -> str:
    """Shift each letter back by ``shift``, wrapping below 'A' by 26."""
    decoded = []
    for char in word:
        code = ord(char) - shift
        if code < _FIRST_UPPER:
            code += ALPHABET_SIZE
        decoded.append(chr(code))
    return "".join(decoded)


def problem_1253(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.next()
    results = []
    for _ in range(cases):
        word = tokens.next(str)
        shift = tokens.next()
        results.append(shift_decode(word, shift))
    return _lines(results)


class _AlliterationCounter:
    """Counts runs of words sharing an initial, ignoring case."""

    def __init__(self) -> None:
        self._previous: str | None = None
        self._current: str | None = None
        self.count = 0

    def feed(self, word: str) -> None:
        if not word:
            raise ValueError("words must not be empty")
        initial = word[0].lower()
        if initial == self._previous:
            if initial != self._current:
                self._current = initial
                self.count += 1
        else:
            self._current = None
        self._previous = initial

    def take(self) -> int:
        count, self.count = self.count, 0
        return count


def alliteration_count(words: Iterable[str]) -> int:
    """Number of runs of two or more consecutive words with the same initial."""
    counter = _AlliterationCounter()
    for word in words:
        counter.feed(word)
    return counter.count


def problem_1263(text: str) -> str:
    """Alliteration counts, one per line; the previous word carries across lines."""
    counter = _AlliterationCounter()
    results = []
    for match in _WORD.finditer(text):
        counter.feed(match.group())
        follower = text[match.end():match.end() + 1]
        if follower in ("", "\n"):
            results.append(counter.take())
    return _lines(results)


def distinct_letters(sentence: str) -> int:
    """Number of distinct lower-case letters a-z in ``sentence``."""
    return len(set(sentence) & set(string.ascii_lowercase))


def distinct_alpha(sentence: str) -> int:
    """Number of distinct ASCII letters, upper and lower case counted apart."""
    return len({char for char in sentence if char in string.ascii_letters})


def classify_sentence(count: int) -> str:
    """Verdict for a sentence using ``count`` distinct letters."""
    if count == ALPHABET_SIZE:
        return "frase completa"
    if count >= ALPHABET_SIZE // 2:
        return "frase quase completa"
    return "frase mal elaborada"


def problem_1551(text: str) -> str:
    count, rest = _leading_int(text)
    sentences = rest.lstrip().split("\n")
    results = []
    for index in range(count):
        sentence = sentences[index] if index < len(sentences) else ""
        results.append(classify_sentence(distinct_letters(sentence)))
    return _lines(results)


def missing_pomekons(names: Iterable[str]) -> int:
    """How many of the 151 pomekons are still missing after catching ``names``."""
    return POMEKON_TOTAL - len(set(names))


def problem_2174(text: str) -> str:
    tokens = _Tokens(text)
    count = tokens.next()
    names = [tokens.next(str) for _ in range(count)]
    return f"Falta(m) {missing_pomekons(names)} pomekon(s).\n"


def rotations(a: str, b: str, c: str) -> tuple[str, str, str, str]:
    """The three rotations of the concatenation and the joined ten-character prefixes."""
    return (
        a + b + c,
        b + c + a,
        c + a + b,
        a[:PREFIX_LENGTH] + b[:PREFIX_LENGTH] + c[:PREFIX_LENGTH],
    )


def problem_2760(text: str) -> str:
    lines: Sequence[str] = text.split("\n")
    if lines and lines[-1] == "":
        lines = lines[:-1]
    if len(lines) < 3:
        raise ValueError("three lines of input are required")
    a, b, c = lines[:3]
    return _lines(rotations(a, b, c))