"""Binary tree problems: views, path sums, burning, candies and BST queries."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

MOD = 1_000_000_007

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, None marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, _END)
            if value is _END:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def _level_order_with_offsets(root: TreeNode | None) -> Iterator[tuple[TreeNode, int]]:
    if root is None:
        return
    queue = deque([(root, 0)])
    while queue:
        node, offset = queue.popleft()
        yield node, offset
        if node.left:
            queue.append((node.left, offset - 1))
        if node.right:
            queue.append((node.right, offset + 1))


def top_view(root: TreeNode | None) -> list[int]:
    """Return the nodes seen from above, from the leftmost column to the rightmost."""
    first_in_column: dict[int, int] = {}
    for node, offset in _level_order_with_offsets(root):
        first_in_column.setdefault(offset, node.data)
    return [first_in_column[column] for column in sorted(first_in_column)]


def vertical_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values column by column, each column in level order."""
    columns: defaultdict[int, list[int]] = defaultdict(list)
    for node, offset in _level_order_with_offsets(root):
        columns[offset].append(node.data)
    return [columns[column] for column in sorted(columns)]


def count_k_sum_paths(root: TreeNode | None, k: int) -> int:
    """Count downward paths whose node values sum to k."""
    prefix_counts: Counter[int] = Counter({0: 1})

    def visit(node: TreeNode | None, running: int) -> int:
        if node is None:
            return 0
        running += node.data
        found = prefix_counts[running - k]
        prefix_counts[running] += 1
        found += visit(node.left, running) + visit(node.right, running)
        prefix_counts[running] -= 1
        return found

    return visit(root, 0)


def min_burn_time(root: TreeNode | None, target: int) -> int:
    """Return the time for fire starting at the node holding target to burn the tree."""
    parent: dict[TreeNode, TreeNode] = {}
    start: TreeNode | None = None
    queue = deque([root] if root else [])
    while queue:
        node = queue.popleft()
        if node.data == target:
            start = node
        for child in (node.left, node.right):
            if child is not None:
                parent[child] = node
                queue.append(child)
    if start is None:
        raise ValueError(f"no node holds {target}")

    burnt = {start}
    frontier = [start]
    elapsed = 0
    while frontier:
        spreading = []
        for node in frontier:
            for neighbour in (node.left, node.right, parent.get(node)):
                if neighbour is not None and neighbour not in burnt:
                    burnt.add(neighbour)
                    spreading.append(neighbour)
        if spreading:
            elapsed += 1
        frontier = spreading
    return elapsed


def distribute_candies(root: TreeNode | None) -> int:
    """Return the moves needed to leave exactly one candy on every node."""
    moves = 0

    def excess(node: TreeNode | None) -> int:
        nonlocal moves
        if node is None:
            return 0
        left = excess(node.left)
        right = excess(node.right)
        moves += abs(left) + abs(right)
        return left + right + node.data - 1

    excess(root)
    return moves


def largest_bst(root: TreeNode | None) -> int:
    """Return the size of the largest subtree that is a binary search tree."""
    best = 0

    def inspect(node: TreeNode | None) -> tuple[bool, int, float, float]:
        nonlocal best
        if node is None:
            return True, 0, float("inf"), float("-inf")
        left_ok, left_size, left_min, left_max = inspect(node.left)
        right_ok, right_size, right_min, right_max = inspect(node.right)
        if not (left_ok and right_ok) or not left_max < node.data < right_min:
            return False, 0, 0, 0
        size = left_size + right_size + 1
        best = max(best, size)
        return True, size, min(left_min, node.data), max(right_max, node.data)

    inspect(root)
    return best


def find_pre_suc(
    root: TreeNode | None, key: int
) -> tuple[TreeNode | None, TreeNode | None]:
    """Return the in-order predecessor and successor of key in a BST."""
    predecessor: TreeNode | None = None
    successor: TreeNode | None = None
    current = root
    while current is not None:
        if current.data == key:
            if current.left is not None:
                predecessor = current.left
                while predecessor.right is not None:
                    predecessor = predecessor.right
            if current.right is not None:
                successor = current.right
                while successor.left is not None:
                    successor = successor.left
            break
        if current.data > key:
            successor = current
            current = current.left
        else:
            predecessor = current
            current = current.right
    return predecessor, successor


def _catalan_numbers(limit: int) -> list[int]:
    numbers = [1]
    for i in range(limit):
        numbers.append(numbers[-1] * 2 * (2 * i + 1) // (i + 2))
    return numbers


def count_bsts(arr: Sequence[int]) -> list[int]:
    """For each element, count the BSTs of all elements rooted at it, modulo 10**9 + 7."""
    n = len(arr)
    catalan = _catalan_numbers(n)
    last_index = {value: i for i, value in enumerate(arr)}
    result = [0] * n
    for rank, value in enumerate(sorted(arr)):
        result[last_index[value]] = catalan[rank] * catalan[n - rank - 1] % MOD
    return result