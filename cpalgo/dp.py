"""Classic dynamic programming problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate


def max_grid_path(grid: Iterable[Iterable[int]]) -> int:
    """Largest sum along a path from the top-left to the bottom-right cell.

    The path moves only right or down.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must be non-empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must have equal length")
    best = list(accumulate(rows[0]))
    for row in rows[1:]:
        current: list[int] = []
        for above, value in zip(best, row):
            reach = above if not current else max(above, current[-1])
            current.append(reach + value)
        best = current
    return best[-1]


def _check_steps(nums: Sequence[int], n: int) -> None:
    if n < 0:
        raise ValueError("target must be non-negative")
    if any(x <= 0 for x in nums):
        raise ValueError("values must be positive")


def count_ordered_sums(nums: Sequence[int], n: int) -> list[int]:
    """For each total up to ``n``, count ordered ways to write it as a sum of ``nums``."""
    _check_steps(nums, n)
    counts = [1] + [0] * n
    for total in range(1, n + 1):
        counts[total] = sum(counts[total - x] for x in nums if x <= total)
    return counts


def min_coins(nums: Sequence[int], n: int) -> int:
    """Fewest values from ``nums`` (with repetition) summing to ``n``."""
    _check_steps(nums, n)
    fewest: list[float] = [0] + [math.inf] * n
    for total in range(1, n + 1):
        fewest[total] = min(
            (fewest[total - x] + 1 for x in nums if x <= total), default=math.inf
        )
    if fewest[n] == math.inf:
        raise ValueError(f"{n} cannot be formed from the given values")
    return int(fewest[n])


def best_wine_profit(prices: Sequence[int]) -> int:
    """Maximum profit selling wines one per year from either end of the row.

    A wine sold in year ``y`` earns ``y`` times its price.
    """
    n = len(prices)
    if n == 0:
        return 0
    best = [[0] * n for _ in range(n)]
    for i, price in enumerate(prices):
        best[i][i] = price * n
    for length in range(2, n + 1):
        year = n - length + 1
        for left in range(n - length + 1):
            right = left + length - 1
            best[left][right] = max(
                year * prices[left] + best[left + 1][right],
                year * prices[right] + best[left][right - 1],
            )
    return best[0][n - 1]