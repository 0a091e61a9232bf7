"""Command-line runner that feeds whitespace-separated stdin to an exercise."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from drillbook.backtracking import permutations_of, solve_sudoku
from drillbook.basics import count_strokes, grid_cost
from drillbook.grids import count_color_regions
from drillbook.hashing import count_occurrences
from drillbook.segment_trees import MinMaxSegmentTree, range_sum_queries


class _Tokens:
    """Reads words and integers from a block of text."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _regions(tokens: _Tokens) -> Iterator[str]:
    size = tokens.number()
    rows = [tokens.word() for _ in range(size)]
    normal, colour_blind = count_color_regions(rows)
    yield f"{normal} {colour_blind}"


def _range_sum(tokens: _Tokens) -> Iterator[str]:
    size, count = tokens.numbers(2)
    values = tokens.numbers(size)
    queries = [tuple(tokens.numbers(4)) for _ in range(count)]
    yield from map(str, range_sum_queries(values, queries))


def _min_max(tokens: _Tokens) -> Iterator[str]:
    size, count = tokens.numbers(2)
    tree = MinMaxSegmentTree(tokens.numbers(size))
    for _ in range(count):
        a, b = tokens.numbers(2)
        low, high = tree.query(a - 1, b - 1)
        yield f"{low} {high}"


def _permutations(tokens: _Tokens) -> Iterator[str]:
    n, m = tokens.numbers(2)
    for sequence in permutations_of(n, m):
        yield " ".join(map(str, sequence))


def _sudoku(tokens: _Tokens) -> Iterator[str]:
    cells = tokens.numbers(81)
    board = [cells[start:start + 9] for start in range(0, 81, 9)]
    for row in solve_sudoku(board):
        yield " ".join(map(str, row))


def _strokes(tokens: _Tokens) -> Iterator[str]:
    cases = tokens.number()
    for case in range(1, cases + 1):
        tokens.number()
        yield f"Case #{case}: {count_strokes(tokens.word())}"


def _grids(tokens: _Tokens) -> Iterator[str]:
    grids = tokens.number()
    for grid in range(1, grids + 1):
        d, n = tokens.numbers(2)
        cost = grid_cost(d, n)
        yield f"Grid #{grid}: {'impossible' if cost is None else cost}"
        yield ""


def _occurrences(tokens: _Tokens) -> Iterator[str]:
    n, m = tokens.numbers(2)
    values = tokens.numbers(n)
    queries = tokens.numbers(m)
    yield " ".join(map(str, count_occurrences(values, queries)))


_EXERCISES: dict[str, Callable[[_Tokens], Iterator[str]]] = {
    "regions": _regions,
    "range-sum": _range_sum,
    "min-max": _min_max,
    "permutations": _permutations,
    "sudoku": _sudoku,
    "strokes": _strokes,
    "grids": _grids,
    "occurrences": _occurrences,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named exercise on standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="drillbook",
        description="Solve an exercise whose input is read from standard input.",
    )
    parser.add_argument("exercise", choices=sorted(_EXERCISES))
    args = parser.parse_args(argv)

    tokens = _Tokens(sys.stdin.read())
    try:
        lines = list(_EXERCISES[args.exercise](tokens))
    except (ValueError, IndexError) as error:
        parser.exit(1, f"drillbook: error: {error}\n")
    if lines:
        sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())