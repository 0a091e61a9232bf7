"""Counting and lookup exercises built on dictionaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Number of index pairs i < j whose values add up to target."""
    counts = Counter(values)
    pairs = 0
    for value, count in counts.items():
        complement = target - value
        if value == complement:
            pairs += count * (count - 1) // 2
        elif value > complement and complement in counts:
            pairs += count * counts[complement]
    return pairs


def _parse(command: str | Sequence[object]) -> tuple[str, list[int]]:
    if isinstance(command, str):
        name, *args = command.split()
    else:
        name, *args = command
    return str(name), [int(arg) for arg in args]


def run_map_commands(commands: Iterable[str | Sequence[object]]) -> list[int | None]:
    """Run add/remove/find commands; return what each find saw, None if absent."""
    arity = {"add": 2, "remove": 1, "find": 1}
    mapping: dict[int, int] = {}
    found: list[int | None] = []
    for command in commands:
        name, args = _parse(command)
        if name not in arity:
            raise ValueError(f"unknown command {name!r}")
        if len(args) != arity[name]:
            raise ValueError(f"{name} takes {arity[name]} argument(s)")
        if name == "add":
            mapping[args[0]] = args[1]
        elif name == "remove":
            mapping.pop(args[0], None)
        else:
            found.append(mapping.get(args[0]))
    return found


def count_occurrences(values: Iterable[int], queries: Iterable[int]) -> list[int]:
    """How many times each query appears among values."""
    counts = Counter(values)
    return [counts[query] for query in queries]


def max_frequency(words: Iterable[str]) -> int:
    """Highest number of times any one word occurs; 0 for no words."""
    return max(Counter(words).values(), default=0)


def build_lookup(names: Iterable[str]) -> dict[str, str]:
    """Map each name to its one-based position and each position back to its name."""
    lookup: dict[str, str] = {}
    for position, name in enumerate(names, start=1):
        lookup[name] = str(position)
        lookup[str(position)] = name
    return lookup


def count_triples_with_sum(values: Iterable[int], target: int) -> int:
    """Number of index triples i < j < k whose values add up to target."""
    seen: list[int] = []
    pair_sums: Counter[int] = Counter()
    triples = 0
    for value in values:
        triples += pair_sums[target - value]
        pair_sums.update(earlier + value for earlier in seen)
        seen.append(value)
    return triples