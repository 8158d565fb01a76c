"""Puzzles over letters, lines and check digits."""

from __future__ import annotations

from collections import Counter
from itertools import takewhile
from string import ascii_lowercase, ascii_uppercase, digits
from typing import Iterable

# Multiplicative inverse of 3 modulo 10, indexed by residue.
_INVERSE_OF_THREE = (0, 7, 4, 1, 8, 5, 2, 9, 6, 3)
_ISBN_LENGTH = 13


def first_occurrences(word: str) -> list[int]:
    """Return, for each letter a..z, the first index where it occurs in *word*, or -1."""
    positions: dict[str, int] = {}
    for index, char in enumerate(word):
        if char not in ascii_lowercase:
            raise ValueError(f"expected a lowercase letter, got {char!r}")
        positions.setdefault(char, index)
    return [positions.get(letter, -1) for letter in ascii_lowercase]


def most_frequent_letter(word: str) -> str:
    """Return the most used letter in upper case, ignoring case, or '?' on a tie."""
    counts: Counter[str] = Counter()
    for char in word:
        upper = char.upper()
        if upper not in ascii_uppercase:
            raise ValueError(f"expected a letter, got {char!r}")
        counts[upper] += 1
    if not counts:
        return "?"
    top = max(counts.values())
    winners = [letter for letter, count in counts.items() if count == top]
    return winners[0] if len(winners) == 1 else "?"


def echo_lines(lines: Iterable[str]) -> list[str]:
    """Return the lines up to, but not including, the first empty one."""
    stripped = (line.rstrip("\r\n") for line in lines)
    return list(takewhile(bool, stripped))


def repeat_characters(text: str, times: int) -> str:
    """Repeat every character of *text* *times* times in place."""
    if times < 0:
        raise ValueError("times must not be negative")
    return "".join(char * times for char in text)


def missing_isbn_digit(code: str) -> int:
    """Return the digit hidden behind the single '*' of a 13-digit ISBN."""
    if len(code) != _ISBN_LENGTH:
        raise ValueError(f"an ISBN has {_ISBN_LENGTH} characters, got {len(code)}")
    if code.count("*") != 1:
        raise ValueError("exactly one digit must be hidden by '*'")

    total = 0
    missing = code.index("*")
    for index, char in enumerate(code):
        if index == missing:
            continue
        if char not in digits:
            raise ValueError(f"expected a digit, got {char!r}")
        total += int(char) * (1 if index % 2 == 0 else 3)

    needed = -total % 10
    return needed if missing % 2 == 0 else _INVERSE_OF_THREE[needed]