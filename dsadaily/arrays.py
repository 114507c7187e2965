"""Array problems: intervals, sorting tricks, two pointers and digit arithmetic."""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Sequence


def max_overlapping_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Return the largest number of closed intervals that share a common point."""
    events = []
    for start, end in intervals:
        events.append((start, 0))  # starts sort before ends at the same point
        events.append((end, 1))
    events.sort()
    current = maximum = 0
    for _, kind in events:
        if kind == 0:
            current += 1
            maximum = max(maximum, current)
        else:
            current -= 1
    return maximum


def inversion_count(arr: Sequence[int]) -> int:
    """Count pairs (i, j) with i < j and arr[i] > arr[j]."""

    def sort_and_count(items: list[int]) -> tuple[list[int], int]:
        if len(items) <= 1:
            return items, 0
        mid = (len(items) + 1) // 2
        left, left_count = sort_and_count(items[:mid])
        right, right_count = sort_and_count(items[mid:])
        merged: list[int] = []
        count = left_count + right_count
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
                count += len(left) - i
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged, count

    return sort_and_count(list(arr))[1]


def missing_in_range(arr: Sequence[int], low: int, high: int) -> list[int]:
    """Return the numbers of [low, high] that do not occur in arr, ascending."""
    present = set(arr)
    return [value for value in range(low, high + 1) if value not in present]


def largest_number(arr: Sequence[int]) -> str:
    """Arrange non-negative integers so that their concatenation is largest."""
    if not arr:
        raise ValueError("largest_number() needs at least one number")

    def compare(a: str, b: str) -> int:
        if a + b > b + a:
            return -1
        if a + b < b + a:
            return 1
        return 0

    parts = sorted((str(x) for x in arr), key=cmp_to_key(compare))
    if parts[0] == "0":
        return "0"
    return "".join(parts)


def h_index(citations: Sequence[int]) -> int:
    """Return the largest h such that h papers have at least h citations each."""
    result = 0
    for rank, cited in enumerate(sorted(citations, reverse=True), start=1):
        if cited >= rank:
            result = rank
    return result


def closest_pair(arr1: Sequence[int], arr2: Sequence[int], x: int) -> tuple[int, int]:
    """Return (a, b), a from sorted arr1 and b from sorted arr2, with a + b closest to x."""
    if not arr1 or not arr2:
        raise ValueError("closest_pair() needs two non-empty arrays")
    i, j = 0, len(arr2) - 1
    best = math.inf
    pair = (arr1[0], arr2[-1])
    while i < len(arr1) and j >= 0:
        total = arr1[i] + arr2[j]
        if abs(total - x) < best:
            best = abs(total - x)
            pair = (arr1[i], arr2[j])
        if total < x:
            i += 1
        else:
            j -= 1
    return pair


def push_zeros_to_end(arr: Sequence[int]) -> list[int]:
    """Return arr with every zero moved to the end, other values keeping their order."""
    non_zero = [value for value in arr if value != 0]
    return non_zero + [0] * (len(arr) - len(non_zero))


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map traps."""
    total = left_max = right_max = 0
    i, j = 0, len(heights) - 1
    while i < j:
        left_max = max(left_max, heights[i])
        right_max = max(right_max, heights[j])
        if heights[i] <= heights[j]:
            total += left_max - heights[i]
            i += 1
        else:
            total += right_max - heights[j]
            j -= 1
    return total


def segregate_zeros_ones(arr: Sequence[int]) -> list[int]:
    """Return a binary array with all zeros first and all ones after."""
    invalid = set(arr) - {0, 1}
    if invalid:
        raise ValueError(f"array may hold only 0 and 1, found {sorted(invalid)}")
    zeros = sum(1 for value in arr if value == 0)
    return [0] * zeros + [1] * (len(arr) - zeros)


def intersection(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the distinct values common to both arrays, in nums2's order."""
    remaining = set(nums1)
    result = []
    for value in nums2:
        if value in remaining:
            result.append(value)
            remaining.discard(value)
    return result


def increasing_triplet(arr: Sequence[int]) -> list[int]:
    """Return a strictly increasing subsequence of length three, or [] if none exists."""
    if len(arr) < 3:
        return []
    first = second = potential_first = math.inf
    for value in arr:
        if value <= potential_first:
            potential_first = value
        elif value <= second:
            first = potential_first
            second = value
        else:
            return [first, second, value]
    return []


def next_palindrome(digits: Sequence[int]) -> list[int]:
    """Return the digits of the smallest palindrome strictly greater than the number."""
    n = len(digits)
    if n == 0:
        raise ValueError("next_palindrome() needs at least one digit")
    if all(d == 9 for d in digits):
        return [1] + [0] * (n - 1) + [1]

    ans = list(digits)
    mid = n // 2
    i = mid - 1
    j = mid + 1 if n % 2 else mid

    while i >= 0 and ans[i] == ans[j]:
        i -= 1
        j += 1
    left_smaller = i < 0 or ans[i] < ans[j]

    while i >= 0:
        ans[j] = ans[i]
        i -= 1
        j += 1

    if left_smaller:
        carry = 1
        i = mid - 1
        if n % 2:
            ans[mid] += carry
            carry, ans[mid] = divmod(ans[mid], 10)
            j = mid + 1
        else:
            j = mid
        while i >= 0:
            ans[i] += carry
            carry, ans[i] = divmod(ans[i], 10)
            ans[j] = ans[i]
            i -= 1
            j += 1
    return ans