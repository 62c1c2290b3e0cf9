"""Dynamic programming, maximum flow, convex hulls and shortest travel distances."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

MOD = 1_000_000_007
XOR_BASE = 1 << 19
REACH = 10.0
PROBES = (15, 10, 10, 30, 20)

Point = tuple[int, int]


def max_non_adjacent_sum(values: Iterable[int]) -> int:
    """Largest sum of values of which no two are neighbours."""
    values = list(values)
    if not values:
        return 0
    before, best = 0, values[0]
    for value in values[1:]:
        before, best = best, max(best, before + value)
    return best


def count_level_paths(grid: Iterable[str]) -> int:
    """Count right/down paths over '.' cells from top-left to bottom-right, modulo 1e9+7."""
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    above = [0] * width
    for i, row in enumerate(rows):
        if len(row) < width:
            raise ValueError("grid rows must all have the same width")
        current: list[int] = []
        for j, cell in enumerate(row[:width]):
            if cell != ".":
                ways = 0
            elif i == 0 and j == 0:
                ways = 1
            else:
                ways = (above[j] + (current[j - 1] if j else 0)) % MOD
            current.append(ways)
        above = current
    return above[-1] % MOD


def xor_gate_values(n: int) -> list[int]:
    """``n`` consecutive values starting at 2**19."""
    return [XOR_BASE + i for i in range(n)]


@dataclass(eq=False)
class _Arc:
    start: int
    end: int
    capacity: int
    flow: int = 0
    twin: Optional["_Arc"] = None

    @property
    def residual(self) -> int:
        return self.capacity - self.flow


def max_flow(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    source: int = 1,
    sink: int = 2,
) -> int:
    """Maximum flow between two of the vertices ``1..n`` over undirected edges."""
    if source == sink:
        raise ValueError("source and sink must differ")
    for vertex in (source, sink):
        if not 1 <= vertex <= n:
            raise ValueError(f"vertex {vertex} is outside 1..{n}")
    adjacency: list[list[_Arc]] = [[] for _ in range(n + 1)]

    def connect(u: int, v: int, capacity: int) -> None:
        forward = _Arc(u, v, capacity)
        backward = _Arc(v, u, 0)
        forward.twin = backward
        backward.twin = forward
        adjacency[u].append(forward)
        adjacency[v].append(backward)

    for a, b, capacity in edges:
        for vertex in (a, b):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} is outside 1..{n}")
        connect(a, b, capacity)
        connect(b, a, capacity)

    total = 0
    while True:
        incoming: dict[int, _Arc] = {}
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for arc in adjacency[vertex]:
                if arc.end not in incoming and arc.residual > 0:
                    incoming[arc.end] = arc
                    queue.append(arc.end)
        if sink not in incoming:
            return total
        path = []
        vertex = sink
        while vertex != source:
            arc = incoming[vertex]
            path.append(arc)
            vertex = arc.start
        augment = min(arc.residual for arc in path)
        for arc in path:
            arc.flow += augment
            arc.twin.flow -= augment
        total += augment


def _ccw(a: Point, b: Point, c: Point) -> int:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _half_hull(points: Iterable[Point]) -> list[Point]:
    chain: list[Point] = []
    for point in points:
        while len(chain) >= 2 and _ccw(chain[-2], chain[-1], point) < 0:
            chain.pop()
        chain.append(point)
    return chain


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Convex hull by monotone chain; collinear boundary points are kept."""
    ordered = sorted((x, y) for x, y in points)
    lower = _half_hull(ordered)
    if len(lower) <= 1:
        return lower
    upper = _half_hull(reversed(ordered))
    return lower + upper[1:-1]


def count_hull_layers(points: Iterable[Point]) -> int:
    """Number of times the convex hull can be peeled off until no point is left."""
    remaining = [(x, y) for x, y in points]
    layers = 0
    while remaining:
        ring = set(convex_hull(remaining))
        remaining = [point for point in remaining if point not in ring]
        layers += 1
    return layers


def guess_structure(ask: Callable[[str], Optional[int]]) -> Optional[str]:
    """Tell a queue, stack, set or priority queue apart by probing it.

    ``ask`` receives "insert <value>" or "remove" and returns the removed value
    for removals. Returns "queue", "stack", "set", "pq", or None if undecided.
    """
    for value in PROBES:
        ask(f"insert {value}")
    first = ask("remove")
    if first == 15:
        return "queue"
    if first == 20:
        return "stack"
    second = ask("remove")
    if first == 10 and second == 15:
        return "set"
    if first == 10 and second == 10:
        return "pq"
    return None


def worst_travel_distance(towns: Iterable[Point]) -> Optional[float]:
    """Longest shortest route between towns, hopping at most 10 units at a time.

    Returns None when some pair of towns cannot reach each other.
    """
    places = [(x, y) for x, y in towns]
    count = len(places)
    dist = [[math.inf] * count for _ in range(count)]
    for i, (xi, yi) in enumerate(places):
        dist[i][i] = 0.0
        for j in range(i + 1, count):
            xj, yj = places[j]
            hop = math.sqrt((xi - xj) ** 2 + (yi - yj) ** 2)
            if hop <= REACH:
                dist[i][j] = dist[j][i] = hop
    for k, through in enumerate(dist):
        for row in dist:
            via = row[k]
            row[:] = [min(current, via + rest) for current, rest in zip(row, through)]
    worst = 0.0
    for i, row in enumerate(dist):
        for distance in row[i + 1:]:
            if math.isinf(distance):
                return None
            worst = max(worst, distance)
    return worst