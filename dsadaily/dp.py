"""Dynamic-programming problems: counting ways, grid paths and trading states."""

from __future__ import annotations

from typing import Sequence


def dice_throw_ways(faces: int, dice: int, total: int) -> int:
    """Count the ways `dice` dice with `faces` faces each can sum to `total`."""
    if total < 0:
        return 0
    ways = [1] + [0] * total
    for _ in range(dice):
        following = [0] * (total + 1)
        for reached, count in enumerate(ways):
            if not count:
                continue
            for face in range(1, faces + 1):
                if reached + face > total:
                    break
                following[reached + face] += count
        ways = following
    return ways[total]


def max_chocolates(grid: Sequence[Sequence[int]]) -> int:
    """Return the most two robots can collect from the top corners moving down."""
    if not grid or not grid[0]:
        raise ValueError("max_chocolates() needs a non-empty grid")
    width = len(grid[0])
    below = [[0] * width for _ in range(width)]
    for row in reversed(grid):
        current = [[0] * width for _ in range(width)]
        for j1 in range(width):
            for j2 in range(width):
                gain = row[j1] if j1 == j2 else row[j1] + row[j2]
                best_next = max(
                    below[a][b]
                    for a in range(max(j1 - 1, 0), min(j1 + 2, width))
                    for b in range(max(j2 - 1, 0), min(j2 + 2, width))
                )
                current[j1][j2] = max(0, gain + best_next)
        below = current
    return below[0][width - 1]


def _count_subsets_with_sum(arr: Sequence[int], target: int) -> int:
    ways = [1] + [0] * target
    for num in arr:
        for s in range(target, num - 1, -1):
            ways[s] += ways[s - num]
    return ways[target]


def count_partitions(arr: Sequence[int], diff: int) -> int:
    """Count splits of arr into two subsets whose sums differ by diff."""
    total = sum(arr) + diff
    if total < 0 or total % 2:
        return 0
    return _count_subsets_with_sum(arr, total // 2)


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Return the best profit from unlimited trades, each sale costing fee."""
    if not prices:
        raise ValueError("max_profit_with_fee() needs at least one price")
    holding = -prices[0]
    free = 0
    for price in prices[1:]:
        holding, free = max(holding, free - price), max(free, holding + price - fee)
    return free


def count_binary_strings(n: int) -> int:
    """Count binary strings of length n with no two consecutive 1s."""
    if n < 1:
        raise ValueError("length must be at least 1")
    ending_zero = ending_one = 1
    for _ in range(2, n + 1):
        ending_zero, ending_one = ending_zero + ending_one, ending_zero
    return ending_zero + ending_one


def paint_fence_ways(n: int, k: int) -> int:
    """Count colourings of n posts with k colours, never three equal in a row."""
    if n < 1:
        raise ValueError("fence must have at least one post")
    if n == 1:
        return k
    same, diff = k, k * (k - 1)
    for _ in range(3, n + 1):
        same, diff = diff, (same + diff) * (k - 1)
    return same + diff


def target_sum_ways(arr: Sequence[int], target: int) -> int:
    """Count sign assignments to arr whose signed sum equals target."""
    total = sum(arr) + target
    if total % 2:
        return 0
    goal = total // 2
    if goal < 0:
        return 0
    return _count_subsets_with_sum(arr, goal)