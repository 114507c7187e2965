"""Greedy constructions: Huffman codes and stable matching."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass
from typing import Sequence


@dataclass(eq=False)
class _HuffmanNode:
    weight: int
    index: int
    left: _HuffmanNode | None = None
    right: _HuffmanNode | None = None


def huffman_codes(s: str, freqs: Sequence[int]) -> list[str]:
    """Return the Huffman codes of the leaves in pre-order, left edges as 0.

    Ties between equal weights go to the node whose earliest character comes first.
    """
    if not freqs:
        raise ValueError("huffman_codes() needs at least one frequency")
    heap = [(weight, i, _HuffmanNode(weight, i)) for i, weight in enumerate(freqs)]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = _HuffmanNode(
            left.weight + right.weight, min(left.index, right.index), left, right
        )
        heapq.heappush(heap, (merged.weight, merged.index, merged))
    root = heap[0][2]

    codes: list[str] = []
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.left is None and node.right is None:
            codes.append(code or "0")
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


def stable_marriage(
    men: Sequence[Sequence[int]], women: Sequence[Sequence[int]]
) -> list[int]:
    """Return the man-optimal stable matching as the partner of each man."""
    n = len(men)
    if len(women) != n:
        raise ValueError("men and women must be equally many")
    rank = [{man: position for position, man in enumerate(prefs)} for prefs in women]
    wife = [-1] * n
    husband = [-1] * n
    next_choice = [0] * n
    free = deque(range(n))
    while free:
        man = free.popleft()
        woman = men[man][next_choice[man]]
        next_choice[man] += 1
        current = husband[woman]
        if current == -1:
            husband[woman] = man
            wife[man] = woman
        elif rank[woman][man] < rank[woman][current]:
            husband[woman] = man
            wife[man] = woman
            wife[current] = -1
            free.append(current)
        else:
            free.append(man)
    return wife