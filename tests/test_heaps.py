from itertools import permutations

import pytest

from drillbook.heaps import (
    AbsoluteHeap,
    max_lecture_profit,
    min_merge_cost,
    run_absolute_heap,
    run_deque,
    top_k_frequent,
)


def test_absolute_heap_order():
    values = [5, -2, 2, -7, 1, -1, 3, 0, -3]
    heap = AbsoluteHeap()
    for value in values:
        heap.push(value)
    assert len(heap) == len(values)
    popped = [heap.pop() for _ in values]
    assert popped == sorted(values, key=lambda v: (abs(v), v))
    assert len(heap) == 0


def test_absolute_heap_empty_pop():
    with pytest.raises(IndexError):
        AbsoluteHeap().pop()


def test_run_absolute_heap_worked_example():
    commands = [1, -1, 0, 0, 0, 1, 1, -1, -1, 2, -2, 0, 0, 0, 0, 0, 0, 0]
    assert run_absolute_heap(commands) == [-1, 1, 0, -1, -1, 1, 1, -2, 2, 0]


def test_run_absolute_heap_empty_gives_zero():
    assert run_absolute_heap([0, 0]) == [0, 0]


def test_min_merge_cost_worked_example():
    assert min_merge_cost([10, 20, 40]) == 100


def test_min_merge_cost_single_deck():
    assert min_merge_cost([37]) == 0


def test_min_merge_cost_order_independent():
    decks = [8, 3, 15, 1]
    costs = {min_merge_cost(order) for order in permutations(decks)}
    assert len(costs) == 1


def test_min_merge_cost_two_decks():
    assert min_merge_cost([6, 9]) == 6 + 9


def test_max_lecture_profit_worked_example():
    lectures = [(20, 1), (2, 1), (10, 3), (100, 2), (8, 2), (5, 20), (50, 10)]
    assert max_lecture_profit(lectures) == 185


def test_max_lecture_profit_all_fit():
    lectures = [(4, 10), (9, 10), (1, 10)]
    assert max_lecture_profit(lectures) == 4 + 9 + 1


def test_max_lecture_profit_single_day():
    lectures = [(4, 1), (9, 1), (1, 1)]
    assert max_lecture_profit(lectures) == 9


def test_max_lecture_profit_empty():
    assert max_lecture_profit([]) == max_lecture_profit([(0, 1)])


def test_top_k_frequent_by_count():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [1, 2]


def test_top_k_frequent_ties_prefer_larger():
    assert top_k_frequent([5, 3, 5, 3, 9], 3) == [5, 3, 9]


def test_top_k_frequent_too_many():
    with pytest.raises(ValueError):
        top_k_frequent([1, 2], 3)


def test_run_deque_orders():
    commands = ["push_back 1", "push_front 2", ("push_back", 3), "pop_front", "pop_back", "pop_back"]
    assert run_deque(commands) == [2, 3, 1]


def test_run_deque_empty_pop():
    with pytest.raises(IndexError):
        run_deque(["pop_front"])


def test_run_deque_unknown_command():
    with pytest.raises(ValueError):
        run_deque(["size"])


def test_run_deque_missing_argument():
    with pytest.raises(ValueError):
        run_deque(["push_back"])