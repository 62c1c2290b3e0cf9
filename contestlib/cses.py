"""Introductory, sorting/searching and dynamic-programming problems."""

from __future__ import annotations

import bisect
from functools import reduce
from itertools import accumulate, groupby
from operator import xor
from typing import Callable, Iterable

MOD = 1_000_000_007
HIDDEN_MAX = 1_000_000_000


def dice_combinations(n: int) -> int:
    """Count ordered ways to reach sum ``n`` with dice throws 1..6, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1]
    for i in range(1, n + 1):
        ways.append(sum(ways[max(0, i - 6):i]) % MOD)
    return ways[n]


def find_hidden_number(ask: Callable[[int], bool]) -> int:
    """Find a number in 1..1e9; ``ask(x)`` tells whether the number exceeds ``x``."""
    low, high = 1, HIDDEN_MAX
    while low <= high:
        mid = (low + high) // 2
        if ask(mid):
            low = mid + 1
        else:
            high = mid - 1
    return low


def weird_algorithm(n: int) -> list[int]:
    """Return the Collatz sequence starting at ``n`` and ending at 1."""
    if n < 1:
        raise ValueError("n must be positive")
    sequence = []
    while n != 1:
        sequence.append(n)
        n = 3 * n + 1 if n % 2 else n // 2
    sequence.append(1)
    return sequence


def longest_repetition(s: str) -> int:
    """Length of the longest run of one repeated character (at least 1)."""
    return max((sum(1 for _ in run) for _, run in groupby(s)), default=1)


def beautiful_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n with no neighbours differing by 1, or None."""
    if n == 1:
        return [1]
    if n > 3:
        return list(range(n - 1, 0, -2)) + list(range(n, 0, -2))
    return None


def number_spiral(y: int, x: int) -> int:
    """Value at row ``y``, column ``x`` of the number spiral."""
    big = max(y, x)
    amount = big * big
    if y == big:
        if y % 2:
            return amount - (y - 1) * 2 + x - 1
        return amount - x + 1
    if x % 2:
        return amount - y + 1
    return amount - x + 1 - (x - y)


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """The number from 1..n that is absent from ``numbers``."""
    return reduce(xor, range(1, n + 1), 0) ^ reduce(xor, numbers, 0)


def increasing_array(values: Iterable[int]) -> int:
    """Minimum total increments that make ``values`` non-decreasing."""
    values = list(values)
    return sum(top - value for top, value in zip(accumulate(values, max), values))


def assign_apartments(
    applicants: Iterable[int], apartments: Iterable[int], k: int
) -> int:
    """Maximum applicants matched to an apartment within ``k`` of their wish."""
    wishes = sorted(applicants)
    sizes = sorted(apartments)
    i = j = count = 0
    while i < len(wishes) and j < len(sizes):
        if abs(wishes[i] - sizes[j]) <= k:
            i += 1
            j += 1
            count += 1
        elif wishes[i] > sizes[j] + k:
            j += 1
        else:
            i += 1
    return count


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Minimum gondolas, each carrying one or two children within ``limit``."""
    ordered = sorted(weights)
    i, j = 0, len(ordered) - 1
    count = 0
    while i <= j:
        if ordered[i] + ordered[j] <= limit:
            i += 1
        j -= 1
        count += 1
    return count


def concert_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int]:
    """For each offer, sell the dearest ticket not above it; -1 when none is left."""
    available = sorted(prices)
    sold = []
    for offer in offers:
        pos = bisect.bisect_right(available, offer)
        sold.append(available.pop(pos - 1) if pos else -1)
    return sold


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Maximum number of customers present at the same time."""
    events = sorted(
        event
        for arrival, leaving in intervals
        for event in ((arrival, True), (leaving, False))
    )
    current = best = 0
    for _, arriving in events:
        current += 1 if arriving else -1
        best = max(best, current)
    return best


def distinct_numbers(values: Iterable[int]) -> int:
    """Count of distinct values."""
    return len(set(values))


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Maximum number of non-overlapping (start, end) movies one can watch."""
    free_from = 0
    watched = 0
    for start, end in sorted(movies, key=lambda movie: (movie[1], movie[0])):
        if start >= free_from:
            free_from = end
            watched += 1
    return watched