"""Flood fills and breadth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from itertools import product
from typing import NamedTuple

_MOVES = ((0, 1), (0, -1), (1, 0), (-1, 0))


class MeltResult(NamedTuple):
    """Hours until all cheese is gone, and how much melted in the last hour."""

    hours: int
    remaining: int


def _dimensions(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def _neighbours(y: int, x: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dy, dx in _MOVES:
        ny, nx = y + dy, x + dx
        if 0 <= ny < rows and 0 <= nx < cols:
            yield ny, nx


def _cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    return product(range(rows), range(cols))


def count_regions(painting: Sequence[Sequence[str]]) -> int:
    """Count 4-connected areas of equal colour."""
    rows, cols = _dimensions(painting)
    seen: set[tuple[int, int]] = set()
    regions = 0
    for start in _cells(rows, cols):
        if start in seen:
            continue
        regions += 1
        seen.add(start)
        stack = [start]
        while stack:
            y, x = stack.pop()
            colour = painting[y][x]
            for cell in _neighbours(y, x, rows, cols):
                if cell not in seen and painting[cell[0]][cell[1]] == colour:
                    seen.add(cell)
                    stack.append(cell)
    return regions


def count_color_regions(painting: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Count regions as seen normally and by a viewer who cannot tell G from R."""
    rows = ["".join(row) for row in painting]
    colour_blind = [row.replace("G", "R") for row in rows]
    return count_regions(rows), count_regions(colour_blind)


def longest_distinct_path(board: Sequence[Sequence[str]]) -> int:
    """Length of the longest walk from the top-left cell that never repeats a letter."""
    rows, cols = _dimensions(board)
    if not rows or not cols:
        raise ValueError("board is empty")
    used: set[str] = set()

    def walk(y: int, x: int) -> int:
        letter = board[y][x]
        used.add(letter)
        best = max(
            (
                walk(ny, nx)
                for ny, nx in _neighbours(y, x, rows, cols)
                if board[ny][nx] not in used
            ),
            default=0,
        )
        used.discard(letter)
        return best + 1

    return walk(0, 0)


def shortest_path_breaking_wall(grid: Sequence[Sequence[str | int]]) -> int:
    """Cells on the shortest path corner to corner, breaking at most one wall.

    Walls are cells holding 1. The start and end cells both count.
    Returns -1 when the far corner cannot be reached.
    """
    rows, cols = _dimensions(grid)
    if not rows or not cols:
        raise ValueError("grid is empty")
    walls = [[int(cell) == 1 for cell in row] for row in grid]
    target = (rows - 1, cols - 1)

    start = (0, 0, False)
    distance = {start: 1}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        y, x, broken = state
        if (y, x) == target:
            return distance[state]
        for ny, nx in _neighbours(y, x, rows, cols):
            if walls[ny][nx]:
                if broken:
                    continue
                following = (ny, nx, True)
            else:
                following = (ny, nx, broken)
            if following in distance:
                continue
            distance[following] = distance[state] + 1
            queue.append(following)
    return -1


def _melt_exposed(cheese: list[list[bool]], rows: int, cols: int) -> int:
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    melted = 0
    while queue:
        y, x = queue.popleft()
        for ny, nx in _neighbours(y, x, rows, cols):
            if (ny, nx) in seen:
                continue
            seen.add((ny, nx))
            if cheese[ny][nx]:
                cheese[ny][nx] = False
                melted += 1
            else:
                queue.append((ny, nx))
    return melted


def melt_cheese(board: Sequence[Sequence[str | int]]) -> MeltResult:
    """Melt cheese touching outside air hour by hour, starting from the top-left air."""
    rows, cols = _dimensions(board)
    if not rows or not cols:
        raise ValueError("board is empty")
    cheese = [[int(cell) != 0 for cell in row] for row in board]
    hours = remaining = 0
    while melted := _melt_exposed(cheese, rows, cols):
        hours += 1
        remaining = melted
    return MeltResult(hours, remaining)


def days_to_ripen(tomatoes: Sequence[Sequence[int]]) -> int:
    """Days until every tomato is ripe, or -1 if some can never ripen.

    Cells hold 1 (ripe), 0 (unripe) or -1 (empty).
    """
    rows, cols = _dimensions(tomatoes)
    day = [list(row) for row in tomatoes]
    if any(cell not in (-1, 0, 1) for row in day for cell in row):
        raise ValueError("cells must be 1, 0 or -1")

    queue = deque((y, x) for y, x in _cells(rows, cols) if day[y][x] == 1)
    unripe = sum(row.count(0) for row in day)
    longest = 0
    while queue:
        y, x = queue.popleft()
        for ny, nx in _neighbours(y, x, rows, cols):
            if day[ny][nx] == 0:
                day[ny][nx] = day[y][x] + 1
                unripe -= 1
                longest = max(longest, day[ny][nx] - 1)
                queue.append((ny, nx))
    return longest if unripe == 0 else -1