"""Reachability questions on small undirected graphs and trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _check_node(node: int, n: int) -> int:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")
    return node - 1


def ant_final_rooms(
    energies: Sequence[int], tunnels: Sequence[tuple[int, int, int]]
) -> list[int]:
    """Room each ant ends in when climbing toward room 1 while its energy lasts.

    Rooms are numbered from 1 and the tunnels, given as (a, b, cost), form a tree.
    """
    n = len(energies)
    if len(tunnels) != max(n - 1, 0):
        raise ValueError("a tree of n rooms needs exactly n - 1 tunnels")
    if not n:
        return []

    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, cost in tunnels:
        a, b = _check_node(a, n), _check_node(b, n)
        adjacency[a].append((b, cost))
        adjacency[b].append((a, cost))

    parent: list[tuple[int, int] | None] = [None] * n
    seen = {0}
    queue = deque([0])
    while queue:
        room = queue.popleft()
        for other, cost in adjacency[room]:
            if other not in seen:
                seen.add(other)
                parent[other] = (room, cost)
                queue.append(other)
    if len(seen) != n:
        raise ValueError("tunnels do not connect every room")

    finals = []
    for room, energy in enumerate(energies):
        while (link := parent[room]) is not None and energy >= link[1]:
            room, cost = link
            energy -= cost
        finals.append(room + 1)
    return finals


def count_infected(n: int, connections: Iterable[tuple[int, int]]) -> int:
    """Number of computers reachable from computer 1, not counting itself."""
    if n < 1:
        raise ValueError("network needs at least one computer")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in connections:
        a, b = _check_node(a, n), _check_node(b, n)
        adjacency[a].append(b)
        adjacency[b].append(a)

    seen = {0}
    stack = [0]
    while stack:
        for other in adjacency[stack.pop()]:
            if other not in seen:
                seen.add(other)
                stack.append(other)
    return len(seen) - 1