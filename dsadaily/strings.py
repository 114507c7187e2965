"""String problems: digit swaps, IP addresses, Gray codes and character counts."""

from __future__ import annotations

from collections import Counter
from itertools import product

_DIGITS = frozenset("0123456789")


def largest_swap(s: str) -> str:
    """Return the largest number reachable from digit string s with at most one swap."""
    chars = list(s)
    if len(chars) < 2:
        return s
    best = len(chars) - 1
    left = right = None
    for i in range(len(chars) - 2, -1, -1):
        if chars[i] > chars[best]:
            best = i
        elif chars[i] < chars[best]:
            left, right = i, best
    if left is not None:
        chars[left], chars[right] = chars[right], chars[left]
    return "".join(chars)


def _valid_octet(part: str) -> bool:
    if len(part) > 1 and part[0] == "0":
        return False
    return int(part) <= 255


def generate_ips(s: str) -> list[str]:
    """Return every valid IPv4 address made by inserting three dots into s."""
    n = len(s)
    if not 4 <= n <= 12:
        return []
    if not set(s) <= _DIGITS:
        raise ValueError(f"not a digit string: {s!r}")
    addresses = []
    for l1, l2, l3 in product(range(1, 4), repeat=3):
        l4 = n - (l1 + l2 + l3)
        if not 1 <= l4 <= 3:
            continue
        a, b, c = l1, l1 + l2, l1 + l2 + l3
        parts = (s[:a], s[a:b], s[b:c], s[c:])
        if all(_valid_octet(part) for part in parts):
            addresses.append(".".join(parts))
    return addresses


def gray_code(n: int) -> list[str]:
    """Return the n-bit reflected Gray code sequence as binary strings."""
    if n < 1:
        raise ValueError("gray_code() needs at least one bit")
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def remove_spaces(s: str) -> str:
    """Return s with every space removed."""
    return s.replace(" ", "")


def urlify(s: str) -> str:
    """Return s with every space replaced by %20."""
    return s.replace(" ", "%20")


def can_form_palindrome(s: str) -> bool:
    """Tell whether the characters of s can be rearranged into a palindrome."""
    odd = sum(1 for count in Counter(s).values() if count % 2)
    return odd <= 1