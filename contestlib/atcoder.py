"""Beginner and regular contest problems: bags, grids, votes and switch mazes."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections import deque
from itertools import accumulate
from operator import xor
from typing import Iterable, Optional, Sequence

GRID_MAX = 1_000_000_000
GRID_MIN = 1

_COLOR_CODES = {"red": "SSS", "green": "MMM", "blue": "FFF"}
_STEPS = ((0, -1), (0, 1), (1, 0), (-1, 0))


def color_code(color: str) -> str:
    """Code for a colour name, or "Unknown"."""
    return _COLOR_CODES.get(color, "Unknown")


def process_bag(queries: Iterable[Sequence[int]]) -> list[int]:
    """Run bag queries: ``(1, x)`` adds ``x``; anything else removes the smallest non-negative value.

    Returns the removed values in order.
    """
    bag: list[int] = []
    removed = []
    for kind, *args in queries:
        if kind == 1:
            insort(bag, args[0])
            continue
        pos = bisect_left(bag, 0)
        if pos == len(bag):
            raise ValueError("no non-negative value left in the bag")
        removed.append(bag.pop(pos))
    return removed


def min_meeting_time(points: Iterable[tuple[int, int]]) -> int:
    """Time for king-moving pieces at ``points`` to gather in one cell."""
    points = list(points)
    if not points:
        raise ValueError("at least one point is needed")
    rows = [row for row, _ in points]
    cols = [col for _, col in points]
    row_span = max(GRID_MIN, max(rows)) - min(GRID_MAX, min(rows))
    col_span = max(GRID_MIN, max(cols)) - min(GRID_MAX, min(cols))
    return max((row_span + 1) // 2, (col_span + 1) // 2)


def flip_segments(s: str, t: str, intervals: Iterable[tuple[int, int]]) -> str:
    """Swap characters of ``s`` and ``t`` over each 1-based inclusive interval; return the first string."""
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    flips = [0] * (len(s) + 1)
    for left, right in intervals:
        if not 1 <= left <= right <= len(s):
            raise ValueError(f"interval ({left}, {right}) is out of range")
        flips[left - 1] ^= 1
        flips[right] ^= 1
    parities = accumulate(flips[:-1], xor)
    return "".join(
        second if parity else first for first, second, parity in zip(s, t, parities)
    )


def clock_hour(x: int, y: int) -> int:
    """Hour shown ``y`` hours after ``x`` o'clock on a 12-hour clock."""
    hour = (x + y % 12) % 12
    return hour or 12


def vote_winners(votes: Sequence[str]) -> list[int]:
    """1-based indices of the players scoring most in the minority-vote game.

    Each string holds one player's '0'/'1' choices per round; a round scores
    for those in the minority, or for everyone when the vote is unanimous.
    """
    if not votes:
        return []
    width = len(votes[0])
    if any(len(row) != width for row in votes):
        raise ValueError("all players must vote in every round")
    table = [[int(choice) for choice in row] for row in votes]
    points = [0] * len(table)
    for column in zip(*table):
        zeros = column.count(0)
        ones = len(column) - zeros
        if zeros == 0 or ones == 0:
            winner = None
        elif zeros < ones:
            winner = 0
        else:
            winner = 1
        for player, choice in enumerate(column):
            if winner is None or choice == winner:
                points[player] += 1
    best = max(points)
    return [player + 1 for player, score in enumerate(points) if score == best]


def min_sum_queries(
    a: Iterable[int], b: Iterable[int], queries: Iterable[tuple[str, int, int]]
) -> list[int]:
    """Apply ``(which, x, y)`` updates (set A[x] or B[x] to y) and report sum of min(A[i], B[i]) after each."""
    first = list(a)
    second = list(b)
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    total = sum(map(min, first, second))
    sums = []
    for which, x, y in queries:
        if not 1 <= x <= len(first):
            raise IndexError(f"position {x} is out of range")
        i = x - 1
        total -= min(first[i], second[i])
        (first if which == "A" else second)[i] = y
        total += min(first[i], second[i])
        sums.append(total)
    return sums


def _passable(cell: str, parity: int) -> bool:
    if cell == "#":
        return False
    if cell == "o":
        return parity == 0
    if cell == "x":
        return parity == 1
    return True


def shortest_switch_path(grid: Sequence[str]) -> Optional[int]:
    """Fewest moves from 'S' to 'G'; '?' toggles which of 'o'/'x' doors are open.

    'o' doors start open, 'x' doors start closed, '#' is a wall. Returns None
    when the goal cannot be reached.
    """
    if not grid:
        raise ValueError("grid must not be empty")
    height = len(grid)
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same width")
    start = goal = (0, 0)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "S":
                start = (i, j)
            elif cell == "G":
                goal = (i, j)
    first = (start[0], start[1], 0)
    distance = {first: 0}
    queue = deque([first])
    while queue:
        state = queue.popleft()
        i, j, parity = state
        steps = distance[state]
        if (i, j) == goal:
            return steps
        for di, dj in _STEPS:
            ni, nj = i + di, j + dj
            if not (0 <= ni < height and 0 <= nj < width):
                continue
            cell = grid[ni][nj]
            if not _passable(cell, parity):
                continue
            next_parity = parity ^ 1 if cell == "?" else parity
            following = (ni, nj, next_parity)
            if following not in distance:
                distance[following] = steps + 1
                queue.append(following)
    return None


def arc203_count(n: int, m: int) -> int:
    """Answer ``n * (m // 2) + m % 2`` for the regular contest counting task."""
    return n * (m // 2) + m % 2