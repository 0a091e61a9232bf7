"""Priority-queue exercises and a command-driven double-ended queue."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Sequence


class AbsoluteHeap:
    """Heap that pops the value of smallest magnitude, the smaller on ties."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        heapq.heappush(self._heap, (abs(value), value))

    def pop(self) -> int:
        if not self._heap:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._heap)[1]

    def __len__(self) -> int:
        return len(self._heap)


def run_absolute_heap(commands: Iterable[int]) -> list[int]:
    """Push each non-zero value; on 0, emit the popped value or 0 if empty."""
    heap = AbsoluteHeap()
    output = []
    for value in commands:
        if value:
            heap.push(value)
        else:
            output.append(heap.pop() if heap else 0)
    return output


def min_merge_cost(decks: Iterable[int]) -> int:
    """Fewest comparisons needed to merge card decks two at a time."""
    heap = list(decks)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def max_lecture_profit(lectures: Iterable[tuple[int, int]]) -> int:
    """Largest total fee from (profit, deadline) lectures, one per day."""
    chosen: list[int] = []
    for profit, deadline in sorted(lectures, key=lambda lecture: lecture[1]):
        heapq.heappush(chosen, profit)
        if deadline < len(chosen):
            heapq.heappop(chosen)
    return sum(chosen)


def top_k_frequent(values: Iterable[int], k: int) -> list[int]:
    """The k most frequent values; among equal counts the larger value first."""
    counts = Counter(values)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}")
    ranked = heapq.nlargest(k, counts.items(), key=lambda item: (item[1], item[0]))
    return [value for value, _ in ranked]


def _parse(command: str | Sequence[object]) -> tuple[str, list[int]]:
    if isinstance(command, str):
        name, *args = command.split()
    else:
        name, *args = command
    return str(name), [int(arg) for arg in args]


def run_deque(commands: Iterable[str | Sequence[object]]) -> list[int]:
    """Run push_front/push_back/pop_front/pop_back commands; return popped values."""
    queue: deque[int] = deque()
    popped = []
    for command in commands:
        name, args = _parse(command)
        expected = 1 if name in ("push_front", "push_back") else 0
        if name not in ("push_front", "push_back", "pop_front", "pop_back"):
            raise ValueError(f"unknown command {name!r}")
        if len(args) != expected:
            raise ValueError(f"{name} takes {expected} argument(s)")
        if name == "push_front":
            queue.appendleft(args[0])
        elif name == "push_back":
            queue.append(args[0])
        elif not queue:
            raise IndexError(f"{name} from an empty deque")
        elif name == "pop_front":
            popped.append(queue.popleft())
        else:
            popped.append(queue.pop())
    return popped