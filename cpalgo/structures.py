"""Disjoint-set union and a sum segment tree."""

from __future__ import annotations

from collections.abc import Iterable


class DisjointSet:
    """Union-find over the vertices ``0 .. n-1`` with union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._parent):
            raise IndexError(f"vertex {v} out of range")

    def find(self, v: int) -> int:
        """Representative of the set holding ``v``, compressing the path to it."""
        self._check(v)
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were apart."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


class SegmentTree:
    """Point assignment and inclusive range sums over ``n`` positions."""

    def __init__(self, n: int, values: Iterable[int] | None = None) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        size = 1
        while size < n:
            size <<= 1
        self._size = size
        self._tree = [0] * (2 * size)
        if values is not None:
            self.build(values)

    def __len__(self) -> int:
        return self.n

    def _check(self, index: int) -> None:
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} out of range")

    def build(self, values: Iterable[int]) -> None:
        """Replace every position with ``values`` at once."""
        items = list(values)
        if len(items) != self.n:
            raise ValueError(f"expected {self.n} values, got {len(items)}")
        size = self._size
        tree = [0] * (2 * size)
        tree[size : size + self.n] = items
        for i in range(size - 1, 0, -1):
            tree[i] = tree[2 * i] + tree[2 * i + 1]
        self._tree = tree

    def modify(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value``."""
        self._check(index)
        tree = self._tree
        i = self._size + index
        tree[i] = value
        i //= 2
        while i:
            tree[i] = tree[2 * i] + tree[2 * i + 1]
            i //= 2

    def get(self, l: int, r: int) -> int:
        """Sum of positions ``l`` through ``r`` inclusive; 0 when ``l > r``."""
        if l > r:
            return 0
        self._check(l)
        self._check(r)
        tree = self._tree
        total = 0
        lo = l + self._size
        hi = r + self._size + 1
        while lo < hi:
            if lo & 1:
                total += tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += tree[hi]
            lo //= 2
            hi //= 2
        return total