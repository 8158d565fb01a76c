"""Breadth-first searches over rectangular character and number grids."""

from __future__ import annotations

from collections import defaultdict, deque
from string import ascii_lowercase, ascii_uppercase
from typing import Iterator, Sequence

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))

_WALL = 0
_OPEN = 1
_TARGET = 2


def _dimensions(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    height = len(grid)
    width = len(grid[0]) if height else 0
    if any(len(row) != width for row in grid):
        raise ValueError("all rows of the grid must have the same length")
    return height, width


def _neighbours(row: int, col: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < height and 0 <= c < width:
            yield r, c


def _locate(grid: Sequence[Sequence[object]], wanted: object) -> tuple[int, int]:
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == wanted:
                return r, c
    raise ValueError(f"the grid holds no {wanted!r} cell")


def distance_map(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance of every cell from the target cell (2).

    Walls (0) and the target get 0; open cells (1) that cannot be reached get -1.
    """
    height, width = _dimensions(grid)
    for row in grid:
        for cell in row:
            if cell not in (_WALL, _OPEN, _TARGET):
                raise ValueError(f"unexpected cell value {cell!r}")
    start = _locate(grid, _TARGET)

    distances = [[-1 if cell == _OPEN else 0 for cell in row] for row in grid]
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(row, col, height, width):
            if grid[r][c] == _OPEN and distances[r][c] == -1:
                distances[r][c] = distances[row][col] + 1
                queue.append((r, c))
    return distances


def count_reachable_people(grid: Sequence[str]) -> int:
    """Number of 'P' cells reachable from 'I' without crossing 'X'.

    The puzzle prints 0 as "TT".
    """
    height, width = _dimensions(grid)
    start = _locate(grid, "I")

    seen = {start}
    queue = deque([start])
    people = 0
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(row, col, height, width):
            if (r, c) in seen or grid[r][c] == "X":
                continue
            seen.add((r, c))
            queue.append((r, c))
            if grid[r][c] == "P":
                people += 1
    return people


def steal_documents(grid: Sequence[str], keys: str) -> int:
    """Number of '$' documents reachable by entering the building from its edge.

    '*' is a wall, uppercase letters are doors opened by the matching lowercase
    key, lowercase letters are keys picked up on the way. *keys* lists the keys
    held at the start; "0" or "" means none.
    """
    if keys == "0":
        keys = ""
    owned: set[str] = set()
    for key in keys:
        if key not in ascii_lowercase:
            raise ValueError(f"keys must be lowercase letters, got {key!r}")
        owned.add(key)

    height, width = _dimensions(grid)
    border = [
        (r, c)
        for r in range(height)
        for c in range(width)
        if (r in (0, height - 1) or c in (0, width - 1)) and grid[r][c] != "*"
    ]

    queue = deque(border)
    visited: set[tuple[int, int]] = set()
    locked: defaultdict[str, list[tuple[int, int]]] = defaultdict(list)
    documents = 0
    while queue:
        position = queue.popleft()
        if position in visited:
            continue
        row, col = position
        cell = grid[row][col]
        if cell in ascii_uppercase and cell.lower() not in owned:
            locked[cell.lower()].append(position)
            continue
        visited.add(position)
        if cell in ascii_lowercase:
            if cell not in owned:
                owned.add(cell)
                queue.extend(locked.pop(cell, []))
        elif cell == "$":
            documents += 1
        for r, c in _neighbours(row, col, height, width):
            if grid[r][c] != "*" and (r, c) not in visited:
                queue.append((r, c))
    return documents