"""Shortest paths, connectivity and best-probability paths on graphs."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def network_delay_time(times: Sequence[Sequence[int]], n: int, k: int) -> int:
    """Time for a signal from node ``k`` to reach all nodes 1..n, or -1 if some never hear it."""
    adjacency: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for source, target, weight in times:
        if source != target:
            adjacency[source].append((target, weight))

    dist: dict[int, int] = {k: 0}
    visited: set[int] = set()
    heap = [(0, k)]
    while heap:
        d, node = heapq.heappop(heap)
        if node in visited:
            continue
        visited.add(node)
        for target, weight in adjacency[node]:
            candidate = d + weight
            if candidate < dist.get(target, candidate + 1):
                dist[target] = candidate
                heapq.heappush(heap, (candidate, target))

    if len(dist) < n:
        return -1
    return max(dist.values())


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Fewest cable moves to connect all ``n`` computers, or -1 if there are too few cables."""
    if len(connections) + 1 < n:
        return -1
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for a, b in connections:
        neighbours[a].append(b)
        neighbours[b].append(a)

    seen = [False] * n
    components = 0
    for start in range(n):
        if seen[start]:
            continue
        components += 1
        seen[start] = True
        stack = [start]
        while stack:
            for nxt in neighbours[stack.pop()]:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append(nxt)
    return components - 1


def max_probability(
    n: int,
    edges: Sequence[Sequence[int]],
    succ_prob: Sequence[float],
    start: int,
    end: int,
) -> float:
    """Highest product of edge probabilities on a path from ``start`` to ``end``; 0 if none."""
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for (a, b), prob in zip(edges, succ_prob):
        adjacency[a].append((b, prob))
        adjacency[b].append((a, prob))

    best = [0.0] * n
    best[start] = 1.0
    visited = [False] * n
    heap = [(-1.0, start)]
    while heap:
        neg, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        if node == end:
            break
        for target, prob in adjacency[node]:
            candidate = -neg * prob
            if candidate > best[target]:
                best[target] = candidate
                heapq.heappush(heap, (-candidate, target))

    return best[end] if visited[end] else 0.0