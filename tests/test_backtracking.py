import math

import pytest

from drillbook.backtracking import (
    combinations_of,
    count_n_queens,
    permutations_of,
    sequences_with_repetition,
    solve_sudoku,
)


@pytest.mark.parametrize("n, m", [(4, 2), (5, 3), (3, 3), (3, 0), (2, 4)])
def test_permutations(n, m):
    result = list(permutations_of(n, m))
    assert len(result) == math.perm(n, m)
    assert result == sorted(result)
    assert all(len(set(seq)) == m for seq in result)
    assert all(1 <= v <= n for seq in result for v in seq)


@pytest.mark.parametrize("n, m", [(4, 2), (6, 3), (3, 0), (2, 3)])
def test_combinations(n, m):
    result = list(combinations_of(n, m))
    assert len(result) == math.comb(n, m)
    assert result == sorted(result)
    assert all(list(seq) == sorted(set(seq)) for seq in result)


@pytest.mark.parametrize("n, m", [(3, 2), (4, 3), (2, 0)])
def test_sequences_with_repetition(n, m):
    result = list(sequences_with_repetition(n, m))
    assert len(result) == n**m
    assert result == sorted(result)
    assert len(set(result)) == len(result)
    assert all(1 <= v <= n for seq in result for v in seq)


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        permutations_of(3, -1)
    with pytest.raises(ValueError):
        combinations_of(-1, 2)
    with pytest.raises(ValueError):
        sequences_with_repetition(-2, 1)


def _valid(board):
    digits = set(range(1, 10))
    rows = all(set(row) == digits for row in board)
    cols = all({row[x] for row in board} == digits for x in range(9))
    boxes = all(
        {board[y][x] for y in range(by, by + 3) for x in range(bx, bx + 3)} == digits
        for by in range(0, 9, 3)
        for bx in range(0, 9, 3)
    )
    return rows and cols and boxes


def _full_grid():
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


def test_sudoku_restores_removed_diagonal():
    solved = _full_grid()
    puzzle = [row[:] for row in solved]
    for i in range(9):
        puzzle[i][i] = 0
    assert solve_sudoku(puzzle) == solved


def test_sudoku_classic_puzzle():
    text = [
        "530070000",
        "600195000",
        "098000060",
        "800060003",
        "400803001",
        "700020006",
        "060000280",
        "000419005",
        "000080079",
    ]
    puzzle = [[int(c) for c in row] for row in text]
    result = solve_sudoku(puzzle)
    assert _valid(result)
    assert all(
        result[y][x] == puzzle[y][x]
        for y in range(9)
        for x in range(9)
        if puzzle[y][x]
    )


def test_sudoku_does_not_modify_input():
    puzzle = _full_grid()
    puzzle[0][0] = 0
    snapshot = [row[:] for row in puzzle]
    solve_sudoku(puzzle)
    assert puzzle == snapshot


def test_sudoku_without_solution():
    puzzle = [[0] * 9 for _ in range(9)]
    puzzle[0][:8] = list(range(1, 9))
    puzzle[5][8] = 9
    with pytest.raises(ValueError):
        solve_sudoku(puzzle)


def test_sudoku_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9] * 8)


def test_sudoku_bad_value():
    puzzle = [[0] * 9 for _ in range(9)]
    puzzle[4][4] = 10
    with pytest.raises(ValueError):
        solve_sudoku(puzzle)


def test_eight_queens():
    assert count_n_queens(8) == 92


def test_four_queens():
    assert count_n_queens(4) == 2


@pytest.mark.parametrize("n", [2, 3])
def test_small_boards_without_placement(n):
    assert count_n_queens(n) == 0


def test_queens_negative_rejected():
    with pytest.raises(ValueError):
        count_n_queens(-1)