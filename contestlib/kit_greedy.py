"""Search and greedy problems: reaching 23, colour spells, grade thresholds."""

from __future__ import annotations

from itertools import permutations
from typing import Callable, Iterable, Sequence

TARGET = 23


def _reaches(value: int, rest: Sequence[int]) -> bool:
    if not rest:
        return value == TARGET
    head, tail = rest[0], rest[1:]
    return any(
        _reaches(candidate, tail)
        for candidate in (value + head, value - head, value * head)
    )


def can_make_23(numbers: Iterable[int]) -> bool:
    """Whether some order of ``numbers`` combined left to right with +, -, * gives 23."""
    numbers = tuple(numbers)
    if not numbers:
        raise ValueError("at least one number is needed")
    return any(
        _reaches(order[0], order[1:]) for order in sorted(set(permutations(numbers)))
    )


def cast_spells(colors: str) -> list[int] | None:
    """Spell positions (1-based) that make every cell one colour, or None.

    ``colors`` holds 'B' for black and anything else for white; a spell at
    position p flips cells p and p+1.
    """
    if not colors:
        raise ValueError("colors must not be empty")
    white = [color != "B" for color in colors]
    spells = []
    for i in range(len(white) - 1):
        if not white[i]:
            spells.append(i)
            white[i] = True
            white[i + 1] = not white[i + 1]
    if not white[-1]:
        if len(white) % 2 == 0:
            return None
        spells.extend(range(0, len(white) - 1, 2))
    return [spell + 1 for spell in spells]


def smallest_passing_grade(
    n: int, points_needed: int, ask: Callable[[int], int]
) -> int:
    """Smallest grade in 1..n whose points ``ask(grade)`` reach ``points_needed``.

    Falls back to ``n`` when no grade reaches it.
    """
    smallest = n
    left, right = 1, n
    while left <= right:
        mid = (left + right) // 2
        if ask(mid) < points_needed:
            left = mid + 1
        else:
            right = mid - 1
            smallest = mid
    return smallest