"""Puzzles over integer sequences and personality types."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Sequence

_MBTI_AXES = ("EI", "SN", "TF", "JP")
# Three people of the same type already give distance 0, so more copies never help.
_USEFUL_COPIES = 3


def next_greater_frequency(values: Sequence[int]) -> list[int]:
    """For each element, the nearest later value that occurs more often, or -1."""
    counts = Counter(values)
    answers = [-1] * len(values)
    stack: list[int] = []
    for index in reversed(range(len(values))):
        frequency = counts[values[index]]
        while stack and counts[stack[-1]] <= frequency:
            stack.pop()
        if stack:
            answers[index] = stack[-1]
        stack.append(values[index])
    return answers


def compress_coordinates(values: Sequence[int]) -> list[int]:
    """Replace each value by the number of distinct values smaller than it."""
    ranks = {value: rank for rank, value in enumerate(sorted(set(values)))}
    return [ranks[value] for value in values]


def _validate_type(mbti: str) -> str:
    if len(mbti) != len(_MBTI_AXES) or any(
        letter not in axis for letter, axis in zip(mbti, _MBTI_AXES)
    ):
        raise ValueError(f"not a personality type: {mbti!r}")
    return mbti


def _distance(first: str, second: str) -> int:
    return sum(a != b for a, b in zip(first, second))


def min_mbti_distance(types: Sequence[str]) -> int:
    """Smallest total pairwise distance among any three of the given people."""
    if len(types) < 3:
        raise ValueError("at least three people are needed")
    counts = Counter(_validate_type(mbti) for mbti in types)
    pool = [mbti for mbti, count in counts.items() for _ in range(min(count, _USEFUL_COPIES))]
    return min(
        _distance(a, b) + _distance(a, c) + _distance(b, c)
        for a, b, c in combinations(pool, 3)
    )