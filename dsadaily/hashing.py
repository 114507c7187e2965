"""Problems solved with hash maps and sets: prefix sums, mappings and diagonals."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Sequence


def count_subarrays_with_xor(arr: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose XOR equals k."""
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in arr:
        prefix ^= value
        count += seen[prefix ^ k]
        seen[prefix] += 1
    return count


def union(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the distinct values of both arrays, ascending."""
    return sorted(set(a) | set(b))


def longest_equal_sum_span(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the longest span over which two equal-length arrays have equal sums."""
    first_seen = {0: -1}
    best = 0
    diff = 0
    for i, (x, y) in enumerate(zip(a, b, strict=True)):
        diff += y - x
        if diff in first_seen:
            best = max(best, i - first_seen[diff])
        else:
            first_seen[diff] = i
    return best


def are_isomorphic(s: str, t: str) -> bool:
    """Tell whether the characters of s map one-to-one onto those of t."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def count_submatrices_with_sum(mat: Sequence[Sequence[int]], x: int) -> int:
    """Count rectangular submatrices whose elements sum to x."""
    count = 0
    for top in range(len(mat)):
        columns = [0] * len(mat[top])
        for row in mat[top:]:
            columns = [c + v for c, v in zip(columns, row)]
            seen: Counter[int] = Counter({0: 1})
            running = 0
            for value in columns:
                running += value
                count += seen[running - x]
                seen[running] += 1
    return count


def has_pythagorean_triplet(arr: Sequence[int]) -> bool:
    """Tell whether a*a + b*b == c*c for some a, b at different positions and c in arr."""
    squares = {v * v for v in arr}
    for i, a in enumerate(arr):
        for b in arr[i + 1:]:
            if a * a + b * b in squares:
                return True
    return False


def diagonal_view(mat: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements anti-diagonal by anti-diagonal, each from top to bottom."""
    groups: defaultdict[int, list[int]] = defaultdict(list)
    for i, row in enumerate(mat):
        for j, value in enumerate(row):
            groups[i + j].append(value)
    return [value for key in sorted(groups) for value in groups[key]]


def is_toeplitz(mat: Sequence[Sequence[int]]) -> bool:
    """Tell whether every top-left to bottom-right diagonal holds a single value."""
    diagonals: dict[int, int] = {}
    for i, row in enumerate(mat):
        for j, value in enumerate(row):
            if diagonals.setdefault(i - j, value) != value:
                return False
    return True