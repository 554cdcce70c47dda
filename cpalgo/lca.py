"""Lowest common ancestor queries by binary lifting."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class BinaryLiftingLCA:
    """Tree rooted at 0 where ``parents[i - 1]`` is the parent of vertex ``i``."""

    def __init__(self, parents: Sequence[int]) -> None:
        n = len(parents) + 1
        children: list[list[int]] = [[] for _ in range(n)]
        for child, parent in enumerate(parents, start=1):
            if not 0 <= parent < n:
                raise ValueError(f"parent {parent} of vertex {child} out of range")
            children[parent].append(child)
        log = 1
        while (1 << log) <= n:
            log += 1
        self._log = log
        self._n = n
        self._depth = [0] * n
        self._up = [[0] * log for _ in range(n)]
        queue = deque([0])
        visited = 1
        while queue:
            u = queue.popleft()
            for v in children[u]:
                self._depth[v] = self._depth[u] + 1
                row = self._up[v]
                row[0] = u
                for i in range(1, log):
                    row[i] = self._up[row[i - 1]][i - 1]
                queue.append(v)
                visited += 1
        if visited != n:
            raise ValueError("parents do not form a tree rooted at 0")

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def lca(self, a: int, b: int) -> int:
        """Deepest vertex that is an ancestor of both ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        depth, up = self._depth, self._up
        if depth[a] < depth[b]:
            a, b = b, a
        diff = depth[a] - depth[b]
        for i in reversed(range(self._log)):
            if diff & (1 << i):
                a = up[a][i]
        if a == b:
            return a
        for i in reversed(range(self._log)):
            if up[a][i] != up[b][i]:
                a = up[a][i]
                b = up[b][i]
        return up[a][0]