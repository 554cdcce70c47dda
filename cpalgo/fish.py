"""Subtask solutions for placing piers to catch the heaviest fish."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import accumulate, product

_PIER_LIMIT = 8


def _window_gain(a: int, b: int, c: int, prev2, prev1, cur) -> int:
    if a >= b >= c:
        return prev1[a] - prev1[b] + cur[b] - cur[c]
    if a >= max(b, c) and b <= c:
        return prev1[a] - prev1[b]
    if b >= max(a, c):
        return prev2[b] + cur[b]
    if c >= max(a, b) and b >= a:
        return prev1[c] - prev1[b] + prev2[b] - prev2[a]
    if c >= max(a, b) and b <= a:
        return prev1[c] - prev1[b]
    return 0


def max_weights(
    n: int, m: int, xs: Sequence[int], ys: Sequence[int], ws: Sequence[int]
) -> int:
    """Total weight of fish caught by the best pier placement on an n-by-n pond."""
    if n <= 0:
        raise ValueError("pond size must be positive")
    if min(len(xs), len(ys), len(ws)) < m:
        raise ValueError("fewer fish coordinates than the fish count")
    fish = list(zip(xs[:m], ys[:m], ws[:m]))
    for x, y, _ in fish:
        if not (0 <= x < n and 0 <= y < n):
            raise ValueError(f"fish at ({x}, {y}) lies outside the pond")

    if all(x % 2 == 0 for x, _, _ in fish):
        return sum(w for _, _, w in fish)

    if all(x <= 1 for x, _, _ in fish):
        first = [0] * n
        second = [0] * n
        for x, y, w in fish:
            (first if x == 0 else second)[y] = w
        first = list(accumulate(first))
        second = list(accumulate(second))
        best = max(first[-1], second[-1])
        if n > 2:
            best = max(best, max(second[-1] + f - s for f, s in zip(first, second)))
        return best

    if all(y < 1 for _, y, _ in fish):
        column = [0] * n
        for x, _, w in fish:
            column[x] = w
        best = [0] * n
        if n > 1:
            best[1] = max(column[0], column[1])
        if n > 2:
            best[2] = max(best[0], best[1], column[0] + column[2])
        for i in range(3, n):
            best[i] = max(
                best[i - 1],
                best[i - 2],
                best[i - 2] + max(column[i], column[i - 1]),
                best[i - 3] + column[i] + column[i - 2],
            )
        return best[-1]

    k = _PIER_LIMIT
    if any(y >= k for _, y, _ in fish):
        raise ValueError(f"fish rows must be below {k} for this pond layout")
    rows = [[0] * (k + 1) for _ in range(n)]
    for x, y, w in fish:
        rows[x][y + 1] = w
    prefix = [list(accumulate(row)) for row in rows]
    best = [0] * n
    if n > 1:
        best[1] = max(prefix[0][k], prefix[1][k])
    for i in range(2, n):
        prev2, prev1, cur = prefix[i - 2], prefix[i - 1], prefix[i]
        value = max(
            best[i - 1],
            best[i - 2],
            best[i - 2] + max(prev1[k], cur[k]),
        )
        base = best[i - 3] if i >= 3 else 0
        for a, b, c in product(range(k + 1), repeat=3):
            value = max(value, base + _window_gain(a, b, c, prev2, prev1, cur))
        best[i] = value
    return best[-1]


def main(argv: list[str] | None = None) -> int:
    """Read ``N M`` and M lines of ``X Y W`` from standard input; print the answer."""
    tokens = iter(sys.stdin.read().split())
    try:
        n = int(next(tokens))
        m = int(next(tokens))
        triples = [(int(next(tokens)), int(next(tokens)), int(next(tokens))) for _ in range(m)]
    except StopIteration:
        raise ValueError("input ended early") from None
    xs = [t[0] for t in triples]
    ys = [t[1] for t in triples]
    ws = [t[2] for t in triples]
    print(max_weights(n, m, xs, ys, ws))
    return 0