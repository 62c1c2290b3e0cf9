"""Round problems: sums, rearrangements, residues, grumpy merges and an interactive path."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from typing import Callable, Iterable, Sequence


def sum_with_zero_bonus(values: Iterable[int]) -> int:
    """Sum of the values, with every zero counting as one."""
    return sum(value + (value == 0) for value in values)


def rearrange_to_avoid(values: Sequence[int], s: int) -> list[int] | None:
    """Order 0/1/2 values so no path sums to ``s``, or None when that is impossible.

    If ``s`` is below the total the values are returned unchanged; if it is
    exactly one more, zeros come first, then twos, then ones.
    """
    values = list(values)
    total = sum(values)
    if s < total:
        return values
    if s - total == 1:
        counts = Counter(values)
        return [0] * counts[0] + [2] * counts[2] + [1] * counts[1]
    return None


def min_operations(a: Iterable[int], b: Iterable[int]) -> int:
    """One plus the total amount by which ``a`` exceeds ``b`` position by position."""
    return sum(max(0, x - y) for x, y in zip(a, b, strict=True)) + 1


def build_sequence(n: int) -> list[int]:
    """Alternating -1/3 sequence of length ``n``, ending in 2 when ``n`` is even."""
    if n < 2:
        return []
    sequence = [-1]
    for _ in range(0, n - 2, 2):
        sequence.extend((3, -1))
    if n % 2 == 0:
        sequence.append(2)
    return sequence


def same_residue_multiset(s: Iterable[int], t: Iterable[int], k: int) -> bool:
    """Whether ``s`` and ``t`` agree as multisets of residues mod ``k`` up to negation."""
    if k <= 0:
        raise ValueError("k must be positive")

    def bucket(value: int) -> int:
        residue = value % k
        return min(residue, k - residue) if residue else 0

    return Counter(map(bucket, s)) == Counter(map(bucket, t))


def has_duplicate(values: Iterable[int]) -> bool:
    """Whether any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def total_emeralds(values: Iterable[int]) -> int:
    """Emeralds earned by repeatedly fighting the two grumpiest and keeping the calmer leftover."""
    heap = [-value for value in values]
    heapq.heapify(heap)
    emeralds = 0
    while len(heap) > 1:
        first = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        emeralds += max(first, second)
        low = min(first, second)
        heapq.heappush(heap, -min(first - low, second - low))
    return emeralds


def longest_path(n: int, ask: Callable[[int, list[int]], int]) -> list[int]:
    """Recover a longest path among vertices ``1..n`` by asking the judge.

    ``ask(start, vertices)`` returns the number of vertices on the longest path
    that begins at ``start`` and uses only ``vertices``; -1 means the judge
    rejected the query.
    """

    def query(start: int, vertices: list[int]) -> int:
        answer = ask(start, vertices)
        if answer == -1:
            raise RuntimeError("the judge rejected the query")
        return answer

    everyone = list(range(1, n + 1))
    lengths = {vertex: query(vertex, everyone) for vertex in everyone}
    start = max(everyone, key=lambda vertex: (lengths[vertex], -vertex))
    target = lengths[start]

    groups: defaultdict[int, list[int]] = defaultdict(list)
    for vertex in everyone:
        groups[lengths[vertex]].append(vertex)

    path = [start]
    current = start
    for level in range(target, 1, -1):
        if len(path) >= target:
            break
        for neighbour in groups[level - 1]:
            if neighbour != current and query(current, [current, neighbour]) == 2:
                path.append(neighbour)
                current = neighbour
                break
    return path