"""Graph problems: grid spreading, cycles, tree centres, shortest paths and cut vertices."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Sequence


def oranges_rot_time(grid: Sequence[Sequence[int]]) -> int:
    """Return the time for every fresh orange (1) to rot from rotten ones (2), or -1.

    Cells holding 0 are empty and block the spread.
    """
    if not grid:
        return -1
    rows, cols = len(grid), len(grid[0])
    time = [[math.inf] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == 2:
                time[i][j] = 0
                queue.append((i, j))
    while queue:
        i, j = queue.popleft()
        for ni, nj in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)):
            if (
                0 <= ni < rows
                and 0 <= nj < cols
                and grid[ni][nj] != 0
                and time[ni][nj] > time[i][j] + 1
            ):
                time[ni][nj] = time[i][j] + 1
                queue.append((ni, nj))
    required = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == 1:
                if time[i][j] == math.inf:
                    return -1
                required = max(required, time[i][j])
    return int(required)


def longest_cycle(v: int, edges: Sequence[Sequence[int]]) -> int:
    """Return the longest cycle length in a graph whose nodes have one out-edge at most, or -1."""
    successor = [-1] * v
    for source, target in edges:
        successor[source] = target
    visited = [False] * v
    best = -1
    for start in range(v):
        if visited[start]:
            continue
        position: dict[int, int] = {}
        node = start
        step = 1
        while True:
            visited[node] = True
            position[node] = step
            following = successor[node]
            if following == -1:
                break
            if visited[following]:
                if following in position:
                    best = max(best, position[node] - position[following] + 1)
                break
            node = following
            step += 1
    return best


def can_finish(n: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Tell whether all n courses can be taken, i.e. the prerequisite graph has no cycle."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for course, required in prerequisites:
        adjacency[course].append(required)
    unvisited, active, done = 0, 1, 2
    state = [unvisited] * n
    for root in range(n):
        if state[root] != unvisited:
            continue
        state[root] = active
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] == active:
                    return False
                if state[neighbour] == unvisited:
                    state[neighbour] = active
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                state[node] = done
                stack.pop()
    return True


def min_height_roots(v: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the roots that give a tree of v nodes its minimum height."""
    if v == 1:
        return [0]
    adjacency: list[list[int]] = [[] for _ in range(v)]
    degree = [0] * v
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
        degree[a] += 1
        degree[b] += 1
    leaves = deque(node for node in range(v) if degree[node] == 1)
    remaining = v
    while remaining > 2:
        if not leaves:
            raise ValueError("edges do not form a tree")
        remaining -= len(leaves)
        for _ in range(len(leaves)):
            node = leaves.popleft()
            for neighbour in adjacency[node]:
                degree[neighbour] -= 1
                if degree[neighbour] == 1:
                    leaves.append(neighbour)
    return list(leaves)


def count_shortest_paths(v: int, edges: Sequence[Sequence[int]]) -> int:
    """Count the shortest paths from node 0 to node v - 1 in a weighted undirected graph."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(v)]
    for a, b, weight in edges:
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))
    dist = [math.inf] * v
    ways = [0] * v
    dist[0] = 0
    ways[0] = 1
    heap = [(0, 0)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for w, weight in adjacency[u]:
            candidate = d + weight
            if candidate < dist[w]:
                dist[w] = candidate
                ways[w] = ways[u]
                heapq.heappush(heap, (candidate, w))
            elif candidate == dist[w]:
                ways[w] += ways[u]
    return ways[v - 1]


def articulation_points(v: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the cut vertices of an undirected graph in ascending order, or [-1]."""
    adjacency: list[list[int]] = [[] for _ in range(v)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    disc = [-1] * v
    low = [0] * v
    is_cut = [False] * v
    timer = 0
    for root in range(v):
        if disc[root] != -1:
            continue
        timer += 1
        disc[root] = low[root] = timer
        children = 0
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for w in neighbours:
                if disc[w] == -1:
                    if u == root:
                        children += 1
                    timer += 1
                    disc[w] = low[w] = timer
                    stack.append((w, u, iter(adjacency[w])))
                    break
                if w != parent:
                    low[u] = min(low[u], disc[w])
            else:
                stack.pop()
                if stack:
                    p, grandparent, _ = stack[-1]
                    low[p] = min(low[p], low[u])
                    if grandparent != -1 and low[u] >= disc[p]:
                        is_cut[p] = True
        if children > 1:
            is_cut[root] = True
    points = [node for node in range(v) if is_cut[node]]
    return points or [-1]


def min_connect_cost(houses: Sequence[Sequence[int]]) -> int:
    """Return the least total Manhattan length of links that connect every house."""
    n = len(houses)
    best = [math.inf] * n
    visited = [False] * n
    total = 0
    if n:
        best[0] = 0
    for _ in range(n):
        u = min((j for j in range(n) if not visited[j]), key=lambda j: best[j])
        visited[u] = True
        total += best[u]
        ux, uy = houses[u][0], houses[u][1]
        for w in range(n):
            if not visited[w]:
                cost = abs(ux - houses[w][0]) + abs(uy - houses[w][1])
                best[w] = min(best[w], cost)
    return int(total)