"""Introductory contest problems: greedy, counting and small interactive tasks."""

from __future__ import annotations

import heapq
import math
import re
from bisect import bisect_left, bisect_right
from collections import Counter
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Callable, Iterable

_WORD = re.compile(r"\s*(\S+)")


def chocolate_breaks(width: int, height: int) -> int:
    """Breaks needed to split a width x height bar into single pieces."""
    return width * height - 1


def cheapest_event(
    participants: int,
    budget: int,
    hotels: Iterable[tuple[int, Iterable[int]]],
) -> int | None:
    """Cheapest stay for everyone, or None when no hotel fits within ``budget``.

    ``hotels`` yields ``(price_per_person, free_beds_per_weekend)`` pairs.
    """
    best = min(
        (
            price * participants
            for price, beds in hotels
            if any(free >= participants for free in beds)
        ),
        default=None,
    )
    if best is None or best > budget:
        return None
    return best


def greeting(name: str) -> str:
    """Greet ``name``."""
    return f"Hello {name}!"


def max_pie_slices(horses: Iterable[int], pies: int) -> int:
    """Largest slice count per pie after sharing ``pies`` among households.

    Each household receives at least one pie; each remaining pie goes to the
    household currently worst off.
    """
    heap = [(-Fraction(count), 1, count) for count in horses]
    if not heap:
        raise ValueError("at least one household is needed")
    heapq.heapify(heap)
    for _ in range(pies - len(heap)):
        _, cakes, count = heapq.heappop(heap)
        cakes += 1
        heapq.heappush(heap, (-Fraction(count, cakes), cakes, count))
    _, cakes, count = heap[0]
    return -(-count // cakes)


def collection_queries(
    difficulties: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[tuple[int, int, int]]:
    """For each ``(low, high)``: problems in range, distinct difficulties, hardest (-1 if none)."""
    ordered = sorted(difficulties)
    unique = sorted(set(ordered))
    answers = []
    for low, high in queries:
        start = bisect_left(ordered, low)
        stop = bisect_right(ordered, high)
        distinct = bisect_right(unique, high) - bisect_left(unique, low)
        hardest = ordered[stop - 1] if start < stop else -1
        answers.append((stop - start, distinct, hardest))
    return answers


def odd_count_values(values: Iterable[int]) -> list[int]:
    """Values occurring an odd number of times, ascending."""
    return sorted(value for value, count in Counter(values).items() if count % 2)


def extract_message(line: str) -> str:
    """Drop the announced number of decoy words and return the rest of the line.

    The line starts with a word count ``k``, then ``k`` words, then one
    separator, then the message.
    """
    match = _WORD.match(line)
    if match is None:
        raise ValueError("missing word count")
    count = int(match.group(1))
    pos = match.end()
    for _ in range(count):
        match = _WORD.match(line, pos)
        if match is None:
            raise ValueError("fewer words than announced")
        pos = match.end()
    return line[pos + 1:].split("\n", 1)[0]


def house_side(area: int) -> int:
    """Side of the largest square whose area does not exceed ``area``."""
    return math.isqrt(area)


@dataclass(frozen=True)
class _Candidate:
    ident: int
    lighter: Callable[[int, int], bool] = field(compare=False, repr=False)

    def __lt__(self, other: "_Candidate") -> bool:
        return self.lighter(other.ident, self.ident)


def find_median(n: int, lighter: Callable[[int, int], bool]) -> int:
    """Identify the median object among ``1..n`` by weighing.

    ``lighter(first, second)`` answers whether ``second`` is lighter than
    ``first``.
    """
    if n < 1:
        raise ValueError("n must be positive")
    ordered = sorted(_Candidate(ident, lighter) for ident in range(1, n + 1))
    return ordered[n // 2].ident


def count_free_squares(grid: Iterable[str]) -> int:
    """Count all squares made entirely of '.' cells."""
    total = 0
    previous: list[int] = []
    for i, row in enumerate(grid):
        current: list[int] = []
        for j, cell in enumerate(row):
            if cell != ".":
                size = 0
            elif i == 0 or j == 0:
                size = 1
            else:
                size = min(previous[j - 1], previous[j], current[j - 1]) + 1
            current.append(size)
            total += size
        previous = current
    return total