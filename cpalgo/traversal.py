"""Breadth-first distances, cycle detection, topological order, Euler circuits and tours."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Sequence

from cpalgo.structures import SegmentTree

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge], directed: bool) -> list[list[int]]:
    if n < 0:
        raise ValueError("vertex count must be non-negative")
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex out of range")
        graph[u].append(v)
        if not directed:
            graph[v].append(u)
    return graph


def bfs_distances(n: int, edges: Iterable[Edge]) -> list[int]:
    """Edge counts from vertex 0 in an undirected graph.

    Vertices that cannot be reached keep distance 0.
    """
    graph = _adjacency(n, edges, directed=False)
    dist = [0] * n
    if n == 0:
        return dist
    seen = [False] * n
    seen[0] = True
    queue = deque([0])
    while queue:
        cur = queue.popleft()
        for nxt in graph[cur]:
            if not seen[nxt]:
                seen[nxt] = True
                dist[nxt] = dist[cur] + 1
                queue.append(nxt)
    return dist


def has_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Whether a directed graph contains a cycle."""
    graph = _adjacency(n, edges, directed=True)
    colour = [0] * n
    for start in range(n):
        if colour[start]:
            continue
        colour[start] = 1
        stack = [(start, iter(graph[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if colour[v] == 1:
                    return True
                if colour[v] == 0:
                    colour[v] = 1
                    stack.append((v, iter(graph[v])))
                    break
            else:
                colour[u] = 2
                stack.pop()
    return False


def topological_sort(n: int, edges: Iterable[Edge]) -> list[int]:
    """Vertices of a directed acyclic graph ordered so every edge points forward."""
    graph = _adjacency(n, edges, directed=True)
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(graph[v])))
                    break
            else:
                finished.append(u)
                stack.pop()
    finished.reverse()
    return finished


def eulerian_circuit(n: int, edges: Sequence[Edge]) -> list[int]:
    """A closed walk from vertex 0 using every undirected edge exactly once.

    Always follows the smallest unused neighbour. Raises ``ValueError`` when
    no such walk exists.
    """
    if n <= 0:
        raise ValueError("graph must have at least one vertex")
    heaps: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex out of range")
        heapq.heappush(heaps[u], v)
        heapq.heappush(heaps[v], u)
    if any(len(h) % 2 for h in heaps):
        raise ValueError("a vertex has odd degree")
    used: list[Counter[int]] = [Counter() for _ in range(n)]

    def next_neighbour(u: int) -> int | None:
        heap = heaps[u]
        while heap:
            v = heapq.heappop(heap)
            if used[u][v]:
                used[u][v] -= 1
                continue
            return v
        return None

    stack = [0]
    circuit: list[int] = []
    while stack:
        u = stack[-1]
        v = next_neighbour(u)
        if v is None:
            circuit.append(stack.pop())
        else:
            used[v][u] += 1
            stack.append(v)
    if len(circuit) != len(edges) + 1:
        raise ValueError("edges are not all reachable from vertex 0")
    return circuit


def euler_tour(
    adjacency: Sequence[Sequence[int]], root: int = 0
) -> tuple[list[int], list[int]]:
    """Entry and exit times of a tree walk from ``root``.

    Each subtree occupies the positions ``tin[v]`` to ``tout[v]`` inclusive.
    """
    n = len(adjacency)
    if not 0 <= root < n:
        raise ValueError(f"root {root} out of range")
    tin = [0] * n
    tout = [0] * n
    timer = 1
    stack = [(root, -1, iter(adjacency[root]))]
    while stack:
        u, parent, neighbours = stack[-1]
        for x in neighbours:
            if x == parent:
                continue
            tin[x] = timer
            timer += 1
            stack.append((x, u, iter(adjacency[x])))
            break
        else:
            tout[u] = timer - 1
            stack.pop()
    return tin, tout


class SubtreeSums:
    """Node values of a tree rooted at 0, with updates and subtree-sum queries."""

    def __init__(self, values: Sequence[int], edges: Iterable[Edge]) -> None:
        n = len(values)
        if n == 0:
            raise ValueError("tree must have at least one node")
        graph = _adjacency(n, edges, directed=False)
        self._tin, self._tout = euler_tour(graph, 0)
        ordered = [0] * n
        for node, value in enumerate(values):
            ordered[self._tin[node]] = value
        self._tree = SegmentTree(n, ordered)

    def update(self, node: int, value: int) -> None:
        """Set the value held by ``node``."""
        self._tree.modify(self._tin[node], value)

    def subtree_sum(self, node: int) -> int:
        """Sum of the values in the subtree rooted at ``node``."""
        return self._tree.get(self._tin[node], self._tout[node])