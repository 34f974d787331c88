"""Dynamic-programming solutions to counting and path problems."""

from __future__ import annotations

import math
from itertools import accumulate
from typing import List, Sequence


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def pascal_triangle(num_rows: int) -> List[List[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: List[List[int]] = []
    for _ in range(num_rows):
        if rows:
            previous = rows[-1]
            rows.append([1] + [a + b for a, b in zip(previous, previous[1:])] + [1])
        else:
            rows.append([1])
    return rows


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the cheapest top-to-bottom path sum through a triangle."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    below = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        below = [value + min(below[j], below[j + 1]) for j, value in enumerate(row)]
    return below[0]


def _check_coins(coins: Sequence[int]) -> None:
    if not coins:
        raise ValueError("at least one coin is needed")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins making up ``amount``, or -1 if it cannot be made."""
    _check_coins(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    best = [0] + [math.inf] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return -1 if best[amount] == math.inf else int(best[amount])


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two subsets of equal sum."""
    if len(nums) < 2:
        return False
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    reachable = {0}
    for value in nums:
        reachable |= {r + value for r in reachable if r + value <= target}
    return target in reachable


def count_change(amount: int, coins: Sequence[int]) -> int:
    """Return the number of coin combinations that make up ``amount``."""
    _check_coins(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of right/down paths avoiding cells marked 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    row = [0] * len(grid[0])
    row[0] = 1
    for cells in grid:
        for j, cell in enumerate(cells):
            if cell:
                row[j] = 0
            elif j:
                row[j] += row[j - 1]
    return row[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the cheapest right/down path sum from top-left to bottom-right."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    costs = list(accumulate(grid[0]))
    for cells in grid[1:]:
        current: List[int] = []
        for j, cell in enumerate(cells):
            best = costs[j] if j == 0 else min(costs[j], current[-1])
            current.append(best + cell)
        costs = current
    return costs[-1]


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the cheapest falling path, moving down, down-left or down-right."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    previous = list(matrix[0])
    for cells in matrix[1:]:
        previous = [
            cell + min(previous[max(j - 1, 0) : j + 2]) for j, cell in enumerate(cells)
        ]
    return min(previous)