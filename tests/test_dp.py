import pytest

from cpalgo.dp import best_wine_profit, count_ordered_sums, max_grid_path, min_coins
from cpalgo.numbers import fibonacci


def test_grid_single_cell():
    assert max_grid_path([[7]]) == 7


def test_grid_all_ones_counts_cells_on_path():
    for n, m in [(1, 5), (4, 1), (3, 6)]:
        assert max_grid_path([[1] * m for _ in range(n)]) == n + m - 1


def test_grid_path_at_least_border_paths():
    grid = [[1, 3, 1], [1, 5, 1], [4, 2, 1]]
    result = max_grid_path(grid)
    along_top = sum(grid[0]) + sum(row[-1] for row in grid[1:])
    along_left = sum(row[0] for row in grid) + sum(grid[-1][1:])
    assert result >= max(along_top, along_left)
    assert result <= sum(map(sum, grid))


def test_grid_invalid():
    with pytest.raises(ValueError):
        max_grid_path([])
    with pytest.raises(ValueError):
        max_grid_path([[1, 2], [3]])


def test_ordered_sums_with_ones_and_twos_are_fibonacci():
    counts = count_ordered_sums([1, 2], 30)
    assert counts == [fibonacci(i + 1) for i in range(31)]


def test_ordered_sums_with_only_ones():
    assert count_ordered_sums([1], 5) == [1] * 6


def test_ordered_sums_recurrence():
    counts = count_ordered_sums([1, 2, 3], 12)
    assert counts[0] == 1
    for i in range(3, 13):
        assert counts[i] == counts[i - 1] + counts[i - 2] + counts[i - 3]


def test_ordered_sums_rejects_non_positive():
    with pytest.raises(ValueError):
        count_ordered_sums([0, 1], 3)


def test_min_coins_only_ones():
    assert min_coins([1], 9) == 9


def test_min_coins_uses_large_value():
    assert min_coins([1, 10], 10) == 1
    assert min_coins([1, 10], 0) == 0


def test_min_coins_unreachable():
    with pytest.raises(ValueError):
        min_coins([2], 3)


def test_wine_single_and_empty():
    assert best_wine_profit([]) == 0
    assert best_wine_profit([5]) == 5


def test_wine_increasing_prices_sold_left_to_right():
    prices = [1, 2, 4, 7, 9]
    assert best_wine_profit(prices) == sum(p * (i + 1) for i, p in enumerate(prices))


def test_wine_symmetric_under_reversal():
    prices = [2, 4, 6, 2, 5]
    assert best_wine_profit(prices) == best_wine_profit(prices[::-1])
    assert best_wine_profit(prices) >= sum(p * (i + 1) for i, p in enumerate(prices))