"""Counting, searching and optimisation puzzles over integers."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from typing import Iterable, Sequence

_STAIRCASE_MODULUS = 1_000_000_000
_ALL_DIGITS = (1 << 10) - 1
_MAX_OPINION = 30
_MAX_HEIGHT = 256
_SHIRT_SIZES = 6


def count_bridges(west: int, east: int) -> int:
    """Number of ways to build non-crossing bridges between two shores."""
    if west < 0 or east < 0:
        raise ValueError("site counts must not be negative")
    return math.comb(max(west, east), min(west, east))


def min_product_sum(a: Sequence[int], b: Sequence[int]) -> int:
    """Smallest sum of pairwise products obtainable by pairing *a* with *b*."""
    if len(a) != len(b):
        raise ValueError("both sequences must have the same length")
    return sum(x * y for x, y in zip(sorted(a), sorted(b, reverse=True)))


def tshirt_and_pen_orders(
    participants: int, sizes: Sequence[int], shirt_bundle: int, pen_bundle: int
) -> tuple[int, int, int]:
    """Return (shirt bundles, pen bundles, single pens) to order."""
    if len(sizes) != _SHIRT_SIZES:
        raise ValueError(f"expected {_SHIRT_SIZES} size counts, got {len(sizes)}")
    if shirt_bundle <= 0 or pen_bundle <= 0:
        raise ValueError("bundle sizes must be positive")
    shirts = sum(-(-wanted // shirt_bundle) for wanted in sizes)
    pens, singles = divmod(participants, pen_bundle)
    return shirts, pens, singles


def number_vs_string_arithmetic(a: int, b: int, c: int) -> tuple[int, int]:
    """Return A+B-C computed on numbers, and with A and B joined as strings."""
    base = 10 ** len(str(abs(b))) if b else 1
    return a + b - c, a * base + b - c


def max_wire_length(wires: Sequence[int], needed: int) -> int:
    """Longest length that still cuts at least *needed* pieces; 1 if none does."""
    if not wires:
        raise ValueError("at least one wire is required")
    low, high = 1, max(wires)
    best = 1
    while low <= high:
        mid = (low + high) // 2
        if sum(wire // mid for wire in wires) < needed:
            high = mid - 1
        else:
            best = max(best, mid)
            low = mid + 1
    return best


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def trimmed_average(opinions: Iterable[int]) -> int:
    """Average of difficulty opinions with 15% cut from each end, rounded."""
    values = sorted(opinions)
    for value in values:
        if not 0 <= value <= _MAX_OPINION:
            raise ValueError(f"opinion {value} is outside 0..{_MAX_OPINION}")
    if not values:
        return 0
    cut = _round_half_up(0.15 * len(values))
    kept = values[cut:len(values) - cut]
    total, count = sum(kept), len(kept)
    return (2 * total + count) // (2 * count)


def flatten_ground(heights: Iterable[int], inventory: int) -> tuple[int, int]:
    """Return (time, level) of the fastest levelling, preferring the highest level."""
    counts = Counter(heights)
    for height in counts:
        if not 0 <= height <= _MAX_HEIGHT:
            raise ValueError(f"height {height} is outside 0..{_MAX_HEIGHT}")

    best_time = math.inf
    best_level = -1
    for level in range(_MAX_HEIGHT + 1):
        blocks = inventory
        time = 0
        for height, count in counts.items():
            moved = abs(height - level) * count
            if height >= level:
                blocks += moved
                time += 2 * moved
            else:
                blocks -= moved
                time += moved
        if blocks >= 0 and time <= best_time:
            best_time, best_level = time, level
    return int(best_time), best_level


def count_all_digit_staircase_numbers(length: int) -> int:
    """Count staircase numbers of *length* digits using every digit, mod 10^9."""
    if length < 1:
        raise ValueError("length must be at least 1")
    counts: dict[tuple[int, int], int] = {(d, 1 << d): 1 for d in range(1, 10)}
    for _ in range(length - 1):
        following: defaultdict[tuple[int, int], int] = defaultdict(int)
        for (digit, used), count in counts.items():
            for step in (digit - 1, digit + 1):
                if 0 <= step <= 9:
                    key = (step, used | (1 << step))
                    following[key] = (following[key] + count) % _STAIRCASE_MODULUS
        counts = following
    return sum(c for (_, used), c in counts.items() if used == _ALL_DIGITS) % _STAIRCASE_MODULUS