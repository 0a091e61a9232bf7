"""Segment trees for range sums and range minimum/maximum queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _check_range(left: int, right: int, size: int) -> None:
    if left > right:
        raise ValueError(f"range start {left} is after its end {right}")
    if left < 0 or right >= size:
        raise IndexError(f"range {left}..{right} is outside 0..{size - 1}")


class SumSegmentTree:
    """Range sums over a fixed-length sequence with point assignment.

    Indices are zero-based and query ranges include both ends.
    """

    def __init__(self, values: Iterable[int]) -> None:
        leaves = list(values)
        if not leaves:
            raise ValueError("segment tree needs at least one value")
        self._size = len(leaves)
        self._tree = [0] * self._size + leaves
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def __len__(self) -> int:
        return self._size

    def query(self, left: int, right: int) -> int:
        """Sum of the values from left to right, both included."""
        _check_range(left, right, self._size)
        total = 0
        lo, hi = left + self._size, right + self._size + 1
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo //= 2
            hi //= 2
        return total

    def update(self, index: int, value: int) -> None:
        """Replace the value at index."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is outside 0..{self._size - 1}")
        node = index + self._size
        self._tree[node] = value
        node //= 2
        while node:
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]
            node //= 2


class MinMaxSegmentTree:
    """Smallest and largest value over ranges of a fixed sequence.

    Indices are zero-based and query ranges include both ends.
    """

    def __init__(self, values: Iterable[int]) -> None:
        leaves = [(value, value) for value in values]
        if not leaves:
            raise ValueError("segment tree needs at least one value")
        self._size = len(leaves)
        self._tree: list[tuple[int, int]] = [(0, 0)] * self._size + leaves
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    @staticmethod
    def _combine(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
        return min(a[0], b[0]), max(a[1], b[1])

    def __len__(self) -> int:
        return self._size

    def query(self, left: int, right: int) -> tuple[int, int]:
        """(minimum, maximum) of the values from left to right, both included."""
        _check_range(left, right, self._size)
        lo, hi = left + self._size, right + self._size + 1
        result = self._tree[lo]
        while lo < hi:
            if lo & 1:
                result = self._combine(result, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                result = self._combine(result, self._tree[hi])
            lo //= 2
            hi //= 2
        return result


def range_sum_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Answer (x, y, a, b) queries: sum positions x..y, then set position a to b.

    Positions are one-based and x may come after y.
    """
    tree = SumSegmentTree(values)
    answers = []
    for x, y, a, b in queries:
        low, high = sorted((x, y))
        answers.append(tree.query(low - 1, high - 1))
        tree.update(a - 1, b)
    return answers


def count_swaps(values: Sequence[int]) -> int:
    """Number of swaps bubble sort makes, i.e. the number of inversions."""
    size = len(values)
    if not size:
        return 0
    order = sorted(range(size), key=lambda i: (values[i], i))
    placed = SumSegmentTree([0] * size)
    swaps = 0
    for index in order:
        swaps += placed.query(index, size - 1)
        placed.update(index, 1)
    return swaps