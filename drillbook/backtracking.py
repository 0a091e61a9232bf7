"""Exhaustive searches: sequences, sudoku and n queens."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence


def _check_sizes(n: int, m: int) -> range:
    if n < 0 or m < 0:
        raise ValueError("n and m must not be negative")
    return range(1, n + 1)


def permutations_of(n: int, m: int) -> Iterator[tuple[int, ...]]:
    """All sequences of m distinct numbers from 1..n, in lexicographic order."""
    return itertools.permutations(_check_sizes(n, m), m)


def combinations_of(n: int, m: int) -> Iterator[tuple[int, ...]]:
    """All increasing sequences of m numbers from 1..n, in lexicographic order."""
    return itertools.combinations(_check_sizes(n, m), m)


def sequences_with_repetition(n: int, m: int) -> Iterator[tuple[int, ...]]:
    """All sequences of m numbers from 1..n, repeats allowed, in lexicographic order."""
    return itertools.product(_check_sizes(n, m), repeat=m)


def solve_sudoku(board: Sequence[Sequence[int]]) -> list[list[int]]:
    """Fill the zeros of a 9x9 sudoku and return the completed board.

    Empty cells are tried in row-major order with digits 1 to 9, so the first
    solution in that order is returned. Raises ValueError if there is none.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku board must be 9x9")
    if any(value not in range(10) for row in grid for value in row):
        raise ValueError("sudoku cells must hold 0 to 9")

    def box(y: int, x: int) -> int:
        return (y // 3) * 3 + x // 3

    rows = [set(row) - {0} for row in grid]
    cols = [{row[x] for row in grid} - {0} for x in range(9)]
    boxes: list[set[int]] = [set() for _ in range(9)]
    empties = []
    for y, row in enumerate(grid):
        for x, value in enumerate(row):
            if value:
                boxes[box(y, x)].add(value)
            else:
                empties.append((y, x))

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        y, x = empties[position]
        b = box(y, x)
        for digit in range(1, 10):
            if digit in rows[y] or digit in cols[x] or digit in boxes[b]:
                continue
            grid[y][x] = digit
            rows[y].add(digit)
            cols[x].add(digit)
            boxes[b].add(digit)
            if fill(position + 1):
                return True
            rows[y].discard(digit)
            cols[x].discard(digit)
            boxes[b].discard(digit)
        grid[y][x] = 0
        return False

    if not fill(0):
        raise ValueError("sudoku has no solution")
    return grid


def count_n_queens(n: int) -> int:
    """Number of ways to place n non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError("board size must not be negative")

    def place(row: int, cols: frozenset, diagonals: frozenset, anti: frozenset) -> int:
        if row == n:
            return 1
        return sum(
            place(row + 1, cols | {c}, diagonals | {row - c}, anti | {row + c})
            for c in range(n)
            if c not in cols and row - c not in diagonals and row + c not in anti
        )

    return place(0, frozenset(), frozenset(), frozenset())