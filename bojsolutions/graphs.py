"""Graph puzzles: travelling salesman, topological ordering and tree traversal."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from functools import cache
from itertools import pairwise
from typing import Iterable, Sequence

_START = 0


def shortest_tour(weights: Sequence[Sequence[int]]) -> int | None:
    """Cost of the cheapest round trip through every city, or None if none exists.

    ``weights[i][j]`` is the cost from city i to city j; 0 means no road.
    """
    count = len(weights)
    if count == 0 or any(len(row) != count for row in weights):
        raise ValueError("weights must be a non-empty square matrix")
    if count == 1:
        return weights[_START][_START] or None

    @cache
    def cheapest(city: int, visited: int) -> float:
        # Cheapest path from the start through every city in *visited*, ending at *city*.
        if visited == 1 << city:
            return weights[_START][city] or math.inf
        rest = visited ^ (1 << city)
        return min(
            (
                cheapest(previous, rest) + weights[previous][city]
                for previous in range(count)
                if rest >> previous & 1 and weights[previous][city]
            ),
            default=math.inf,
        )

    everyone = ((1 << count) - 1) ^ (1 << _START)
    total = min(
        (
            cheapest(last, everyone) + weights[last][_START]
            for last in range(count)
            if last != _START and weights[last][_START]
        ),
        default=math.inf,
    )
    return None if total == math.inf else int(total)


def schedule_singers(count: int, orders: Iterable[Sequence[int]]) -> list[int] | None:
    """An order of singers 1..count respecting every partial order, or None if impossible."""
    if count < 0:
        raise ValueError("count must not be negative")
    pending = dict.fromkeys(range(1, count + 1), 0)
    followers: defaultdict[int, list[int]] = defaultdict(list)
    for order in orders:
        for singer in order:
            if singer not in pending:
                raise ValueError(f"singer {singer} is outside 1..{count}")
        for before, after in pairwise(order):
            followers[before].append(after)
            pending[after] += 1

    queue = deque(singer for singer, waiting in pending.items() if waiting == 0)
    schedule: list[int] = []
    while queue:
        singer = queue.popleft()
        schedule.append(singer)
        for follower in followers[singer]:
            pending[follower] -= 1
            if pending[follower] == 0:
                queue.append(follower)
    return schedule if len(schedule) == count else None


def postorder_from_preorder(values: Sequence[int]) -> list[int]:
    """Post-order of the binary search tree whose pre-order is *values*."""
    reversed_order: list[int] = []
    ranges = [(0, len(values) - 1)]
    while ranges:
        left, right = ranges.pop()
        if left > right:
            continue
        root = values[left]
        reversed_order.append(root)
        lower = next((i for i in range(right, left, -1) if values[i] < root), None)
        upper = next((i for i in range(left + 1, right + 1) if values[i] > root), None)
        if lower is not None:
            ranges.append((left + 1, lower))
        if upper is not None:
            ranges.append((upper, right))
    reversed_order.reverse()
    return reversed_order