from itertools import combinations

import pytest

from drillbook.segment_trees import (
    MinMaxSegmentTree,
    SumSegmentTree,
    count_swaps,
    range_sum_queries,
)

VALUES = [7, -3, 12, 0, 5, 5, -8, 21, 4]


def _ranges(size):
    return [(lo, hi) for lo in range(size) for hi in range(lo, size)]


def test_sum_query_matches_slices():
    tree = SumSegmentTree(VALUES)
    for lo, hi in _ranges(len(VALUES)):
        assert tree.query(lo, hi) == sum(VALUES[lo : hi + 1])


def test_sum_update_changes_queries():
    tree = SumSegmentTree(VALUES)
    current = list(VALUES)
    for index, value in [(0, 100), (4, -50), (8, 9), (4, 1)]:
        tree.update(index, value)
        current[index] = value
        for lo, hi in _ranges(len(current)):
            assert tree.query(lo, hi) == sum(current[lo : hi + 1])


def test_sum_single_value():
    tree = SumSegmentTree([42])
    assert tree.query(0, 0) == 42
    assert len(tree) == 1


def test_sum_empty_rejected():
    with pytest.raises(ValueError):
        SumSegmentTree([])


@pytest.mark.parametrize("left, right", [(-1, 2), (0, 9), (3, 20)])
def test_sum_out_of_range(left, right):
    with pytest.raises(IndexError):
        SumSegmentTree(VALUES).query(left, right)


def test_sum_reversed_range_rejected():
    with pytest.raises(ValueError):
        SumSegmentTree(VALUES).query(5, 2)


def test_sum_update_out_of_range():
    with pytest.raises(IndexError):
        SumSegmentTree(VALUES).update(len(VALUES), 1)


def test_min_max_matches_slices():
    tree = MinMaxSegmentTree(VALUES)
    for lo, hi in _ranges(len(VALUES)):
        part = VALUES[lo : hi + 1]
        assert tree.query(lo, hi) == (min(part), max(part))


def test_min_max_empty_rejected():
    with pytest.raises(ValueError):
        MinMaxSegmentTree([])


def test_min_max_out_of_range():
    with pytest.raises(IndexError):
        MinMaxSegmentTree(VALUES).query(0, len(VALUES))


def test_range_sum_queries_worked_example():
    assert range_sum_queries([1, 2, 3, 4, 5], [(2, 3, 3, 1), (3, 5, 4, 1)]) == [5, 10]


def test_range_sum_queries_accepts_reversed_bounds():
    forward = range_sum_queries(VALUES, [(2, 6, 1, 0), (1, 9, 9, 3)])
    backward = range_sum_queries(VALUES, [(6, 2, 1, 0), (9, 1, 9, 3)])
    assert forward == backward
    assert forward[0] == sum(VALUES[1:6])


def test_range_sum_queries_applies_update_after_query():
    answers = range_sum_queries(VALUES, [(1, 1, 1, 99), (1, 1, 1, 0)])
    assert answers == [VALUES[0], 99]


def _inversions(values):
    return sum(1 for a, b in combinations(values, 2) if a > b)


@pytest.mark.parametrize(
    "values",
    [[3, 2, 1], [1, 5, 2, 5, 0, 3], [4, 4, 4], [9, -1, 7, -1, 2, 8, 0], [1]],
)
def test_count_swaps_matches_inversions(values):
    assert count_swaps(values) == _inversions(values)


def test_count_swaps_sorted_is_zero():
    assert count_swaps(sorted(VALUES)) == count_swaps([])


def test_count_swaps_reversed_distinct():
    size = 30
    assert count_swaps(list(range(size, 0, -1))) == size * (size - 1) // 2