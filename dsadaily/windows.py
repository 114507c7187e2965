"""Sliding windows, prefix sums and monotonic stacks over sequences."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

MOD = 1_000_000_007


def longest_majority_subarray(arr: Sequence[int], k: int) -> int:
    """Return the longest subarray where elements greater than k outnumber the rest."""
    first_seen = {0: -1}
    prefix = best = 0
    for i, value in enumerate(arr):
        prefix += 1 if value > k else -1
        if prefix > 0:
            best = i + 1
        if prefix - 1 in first_seen:
            best = max(best, i - first_seen[prefix - 1])
        first_seen.setdefault(prefix, i)
    return best


def longest_two_distinct(arr: Sequence[int]) -> int:
    """Return the length of the longest subarray holding at most two distinct values."""
    counts: Counter[int] = Counter()
    start = best = 0
    for end, value in enumerate(arr):
        counts[value] += 1
        while len(counts) > 2:
            leaving = arr[start]
            counts[leaving] -= 1
            if not counts[leaving]:
                del counts[leaving]
            start += 1
        best = max(best, end - start + 1)
    return best


def max_subarray_xor(arr: Sequence[int], k: int) -> int:
    """Return the largest XOR of any k consecutive elements (at least 0)."""
    if not 1 <= k <= len(arr):
        raise ValueError(f"window size {k} does not fit an array of {len(arr)}")
    window = 0
    for value in arr[: k - 1]:
        window ^= value
    best = 0
    for incoming, outgoing in zip(arr[k - 1:], arr):
        window ^= incoming
        best = max(best, window)
        window ^= outgoing
    return best


def longest_k_unique_substring(s: str, k: int) -> int:
    """Return the longest substring with exactly k distinct characters, or -1."""
    counts: Counter[str] = Counter()
    start = 0
    best = -1
    for end, ch in enumerate(s):
        counts[ch] += 1
        while len(counts) > k:
            leaving = s[start]
            counts[leaving] -= 1
            if not counts[leaving]:
                del counts[leaving]
            start += 1
        if len(counts) == k:
            best = max(best, end - start + 1)
    return best


def min_window(s: str, p: str) -> str:
    """Return the shortest substring of s holding every character of p, or ""."""
    if not p or len(p) > len(s):
        return ""
    need = Counter(p)
    have: Counter[str] = Counter()
    satisfied = 0
    left = 0
    best_start, best_len = -1, len(s) + 1
    for right, ch in enumerate(s):
        have[ch] += 1
        if have[ch] == need[ch]:
            satisfied += 1
        if satisfied == len(need):
            while have[s[left]] > need[s[left]]:
                have[s[left]] -= 1
                left += 1
            if right - left + 1 < best_len:
                best_start, best_len = left, right - left + 1
    if best_start == -1:
        return ""
    return s[best_start:best_start + best_len]


def count_first_min_subarrays(arr: Sequence[int]) -> int:
    """Count subarrays whose first element is their minimum."""
    stack: list[int] = []
    total = 0
    n = len(arr)
    for i in reversed(range(n)):
        while stack and arr[stack[-1]] >= arr[i]:
            stack.pop()
        total += (stack[-1] if stack else n) - i
        stack.append(i)
    return total


def sum_subarray_minimums(arr: Sequence[int]) -> int:
    """Return the sum of the minimum of every subarray, modulo 10**9 + 7."""
    n = len(arr)
    previous_smaller = [-1] * n
    stack: list[int] = []
    for i, value in enumerate(arr):
        while stack and arr[stack[-1]] > value:
            stack.pop()
        if stack:
            previous_smaller[i] = stack[-1]
        stack.append(i)

    stack = []
    total = 0
    for i in reversed(range(n)):
        while stack and arr[stack[-1]] >= arr[i]:
            stack.pop()
        next_smaller = stack[-1] if stack else n
        total = (total + (i - previous_smaller[i]) * (next_smaller - i) * arr[i]) % MOD
        stack.append(i)
    return total


def min_k_bit_flips(arr: Sequence[int], k: int) -> int:
    """Return the fewest flips of k consecutive bits that make every bit 1, or -1."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    n = len(arr)
    toggles = [0] * (n + 1)
    parity = 0
    flips = 0
    for i, bit in enumerate(arr):
        parity ^= toggles[i]
        if bit ^ parity == 0:
            if i + k > n:
                return -1
            parity ^= 1
            toggles[i + k] ^= 1
            flips += 1
    return flips