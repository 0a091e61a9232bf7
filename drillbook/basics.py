"""Small arithmetic, string and simulation exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise
from typing import NamedTuple

_STAT_LIMIT = 4000
_GEAR_COUNT = 4
_GEAR_TEETH = 8

_PAINT_BITS = {"R": 1, "Y": 2, "O": 3, "B": 4, "P": 5, "G": 6, "A": 7}

_GRADE_POINTS = {
    "A+": 4.5,
    "A0": 4.0,
    "B+": 3.5,
    "B0": 3.0,
    "C+": 2.5,
    "C0": 2.0,
    "D+": 1.5,
    "D0": 1.0,
    "F": 0.0,
}

_CROATIAN_LETTERS = ("dz=", "c=", "c-", "d-", "lj", "nj", "s=", "z=")


class Statistics(NamedTuple):
    """Rounded mean, median, mode and range of a list of integers."""

    mean: int
    median: int
    mode: int
    spread: int


def number_from_divisors(divisors: Iterable[int]) -> int:
    """Recover a number from all of its divisors other than 1 and itself."""
    ordered = sorted(divisors)
    if not ordered:
        raise ValueError("at least one divisor is needed")
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle] * ordered[middle]
    return ordered[middle - 1] * ordered[middle]


def _is_group_word(word: str) -> bool:
    runs = [letter for letter, _ in groupby(word)]
    return len(runs) == len(set(runs))


def count_group_words(words: Iterable[str]) -> int:
    """Count words in which every letter appears in a single unbroken run."""
    return sum(1 for word in words if _is_group_word(word))


def compare(a: int, b: int) -> str:
    """Return '>', '<' or '==' for the relation between a and b."""
    if a > b:
        return ">"
    if a < b:
        return "<"
    return "=="


def gear_score(gears: Sequence[str], rotations: Iterable[tuple[int, int]]) -> int:
    """Score of four toothed gears after a series of rotations.

    Each gear is eight '0'/'1' teeth listed clockwise from 12 o'clock.
    Rotations are (gear number 1-4, 1 for clockwise or -1 for counter-clockwise).
    Touching gears with different poles turn in opposite directions.
    """
    gears = list(gears)
    if len(gears) != _GEAR_COUNT:
        raise ValueError("exactly four gears are needed")
    if any(len(gear) != _GEAR_TEETH or set(gear) - {"0", "1"} for gear in gears):
        raise ValueError("each gear needs eight teeth of '0' or '1'")

    tops = [0] * _GEAR_COUNT

    def tooth(gear: int, offset: int) -> str:
        return gears[gear][(tops[gear] + offset) % _GEAR_TEETH]

    for number, direction in rotations:
        if not 1 <= number <= _GEAR_COUNT:
            raise ValueError(f"gear number {number} is outside 1..4")
        if direction not in (1, -1):
            raise ValueError("direction must be 1 or -1")
        start = number - 1
        turns = [0] * _GEAR_COUNT
        turns[start] = -direction
        for gear in range(start, 0, -1):
            if tooth(gear, -2) == tooth(gear - 1, 2):
                break
            turns[gear - 1] = -turns[gear]
        for gear in range(start, _GEAR_COUNT - 1):
            if tooth(gear, 2) == tooth(gear + 1, -2):
                break
            turns[gear + 1] = -turns[gear]
        tops = [(top + turn) % _GEAR_TEETH for top, turn in zip(tops, turns)]

    return sum(int(tooth(gear, 0)) << gear for gear in range(_GEAR_COUNT))


def statistics(numbers: Iterable[int]) -> Statistics:
    """Mean (rounded), median, mode and range of integers within -4000..4000.

    When several values share the highest frequency, the second smallest of
    them is the mode.
    """
    ordered = sorted(numbers)
    if not ordered:
        raise ValueError("at least one number is needed")
    if ordered[0] < -_STAT_LIMIT or ordered[-1] > _STAT_LIMIT:
        raise ValueError(f"numbers must lie within -{_STAT_LIMIT}..{_STAT_LIMIT}")

    counts = Counter(ordered)
    highest = max(counts.values())
    modes = sorted(value for value, count in counts.items() if count == highest)
    mode = modes[1] if len(modes) > 1 else modes[0]
    mean = round(sum(ordered) / len(ordered))
    return Statistics(
        mean=mean,
        median=ordered[len(ordered) // 2],
        mode=mode,
        spread=ordered[-1] - ordered[0],
    )


def max_rope_weight(ropes: Iterable[int]) -> int:
    """Heaviest weight liftable by sharing it evenly over a chosen set of ropes."""
    strongest_first = sorted(ropes, reverse=True)
    return max(
        (rope * used for used, rope in enumerate(strongest_first, start=1)),
        default=0,
    )


def count_strokes(painting: str) -> int:
    """Fewest primary-colour strokes needed to paint a strip of colours.

    Letters R, Y, B are primaries, O, P, G mix two of them and A mixes all
    three; any other letter is left unpainted.
    """
    colours = [_PAINT_BITS.get(letter, 0) for letter in painting]
    return sum(
        bin(previous & ~current).count("1")
        for previous, current in pairwise([0, *colours, 0])
    )


def grade_point_average(courses: Iterable[tuple[str, float, str]]) -> float:
    """Credit-weighted grade average of (name, credit, grade); 'P' courses are skipped."""
    points = credits = 0.0
    for _name, credit, grade in courses:
        if grade == "P":
            continue
        if grade not in _GRADE_POINTS:
            raise ValueError(f"unknown grade {grade!r}")
        points += credit * _GRADE_POINTS[grade]
        credits += credit
    if not credits:
        raise ValueError("no graded credits")
    return points / credits


def grid_cost(d: int, n: int) -> int | None:
    """Cost of the grid puzzle for d and n, or None when it is impossible."""
    if (n - 1) * (n - 1) >= d - 1:
        return (n - 1) * 2 * d
    return None


def count_croatian_letters(word: str) -> int:
    """Number of letters in a word where digraphs such as 'lj' and 'dz=' count once."""
    count = position = 0
    while position < len(word):
        position += next(
            (
                len(letter)
                for letter in _CROATIAN_LETTERS
                if word.startswith(letter, position)
            ),
            1,
        )
        count += 1
    return count


def letter_grade(score: int) -> str:
    """Letter grade A-F for an exam score."""
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def shell_game(swaps: Iterable[tuple[int, int, int]]) -> int:
    """Best score over the three possible starting shells in the shell game.

    Each step is (a, b, guess): shells a and b swap, then the guess is checked.
    """
    found = [0, 0, 0]
    for a, b, guess in swaps:
        if not {a, b, guess} <= {1, 2, 3}:
            raise ValueError("shells are numbered 1 to 3")
        found[a - 1], found[b - 1] = found[b - 1], found[a - 1]
        found[guess - 1] += 1
    return max(found)