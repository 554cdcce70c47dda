"""Shortest paths and negative-cycle detection."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

WeightedEdge = tuple[int, int, int]


def _check_vertices(n: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    if n < 0:
        raise ValueError("vertex count must be non-negative")
    checked = list(edges)
    for u, v, _ in checked:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex out of range")
    return checked


def dijkstra_path(n: int, edges: Iterable[WeightedEdge]) -> list[int] | None:
    """Shortest path from vertex 0 to vertex ``n - 1`` in an undirected graph.

    Weights must be non-negative. Returns ``None`` when the target is unreachable.
    """
    if n <= 0:
        raise ValueError("graph must have at least one vertex")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in _check_vertices(n, edges):
        graph[u].append((v, w))
        graph[v].append((u, w))
    dist: list[float] = [math.inf] * n
    parent = [-1] * n
    dist[0] = 0
    heap: list[tuple[float, int]] = [(0, 0)]
    while heap:
        d, v = heapq.heappop(heap)
        if d > dist[v]:
            continue
        for to, length in graph[v]:
            if d + length < dist[to]:
                dist[to] = d + length
                parent[to] = v
                heapq.heappush(heap, (dist[to], to))
    if dist[n - 1] == math.inf:
        return None
    path = []
    t = n - 1
    while t != -1:
        path.append(t)
        t = parent[t]
    path.reverse()
    return path


def floyd_warshall(n: int, edges: Iterable[WeightedEdge]) -> list[list[float]]:
    """All-pairs shortest distances in an undirected graph; ``math.inf`` if unreachable."""
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for u, v, w in _check_vertices(n, edges):
        if w < dist[u][v]:
            dist[u][v] = dist[v][u] = w
    for i in range(n):
        dist[i][i] = 0
    for k in range(n):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, rest in enumerate(through):
                if to_k + rest < row[j]:
                    row[j] = to_k + rest
    return dist


def find_negative_cycle(
    n: int, edges: Sequence[WeightedEdge], source: int = 0
) -> list[int] | None:
    """A negative cycle reachable from ``source`` in a directed graph.

    The cycle is returned as vertices in walking order, starting and ending at
    the same vertex, or ``None`` if there is none.
    """
    edges = _check_vertices(n, edges)
    if not 0 <= source < n:
        raise ValueError(f"source {source} out of range")
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    parent = [-1] * n
    last = -1
    for _ in range(n):
        last = -1
        for a, b, cost in edges:
            if dist[a] < math.inf and dist[b] > dist[a] + cost:
                dist[b] = dist[a] + cost
                parent[b] = a
                last = b
    if last == -1:
        return None
    y = last
    for _ in range(n):
        y = parent[y]
    cycle = [y]
    cur = parent[y]
    while True:
        cycle.append(cur)
        if cur == y:
            break
        cur = parent[cur]
    cycle.reverse()
    return cycle


def spfa_has_negative_cycle(
    n: int, edges: Iterable[WeightedEdge], source: int = 0
) -> bool:
    """Whether a negative cycle is reachable from ``source`` in a directed graph."""
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in _check_vertices(n, edges):
        graph[u].append((v, w))
    if not 0 <= source < n:
        raise ValueError(f"source {source} out of range")
    dist: list[float] = [math.inf] * n
    count = [0] * n
    queued = [False] * n
    dist[source] = 0
    queue = deque([source])
    queued[source] = True
    while queue:
        v = queue.popleft()
        queued[v] = False
        for to, length in graph[v]:
            if dist[v] + length < dist[to]:
                dist[to] = dist[v] + length
                if not queued[to]:
                    queue.append(to)
                    queued[to] = True
                    count[to] += 1
                    if count[to] > n:
                        return True
    return False