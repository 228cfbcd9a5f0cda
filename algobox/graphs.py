"""Graph routines: shortest paths, orderings, colourings and cycle checks."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from collections import defaultdict, deque
from typing import Sequence


def find_cheapest_price(
    n: int, flights: Sequence[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    graph: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for origin, target, price in flights:
        graph[origin].append((target, price))

    fewest_steps = [math.inf] * n
    heap = [(0, src, 0)]
    while heap:
        cost, node, steps = heapq.heappop(heap)
        if steps > fewest_steps[node] or steps > k + 1:
            continue
        fewest_steps[node] = steps
        if node == dst:
            return cost
        for target, price in graph[node]:
            heapq.heappush(heap, (cost + price, target, steps + 1))
    return -1


def check_if_prerequisite(
    n: int,
    prerequisites: Sequence[Sequence[int]],
    queries: Sequence[Sequence[int]],
) -> list[bool]:
    """Answer, for each ``(a, b)`` query, whether course ``a`` is a prerequisite of ``b``."""
    graph: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for before, after in prerequisites:
        graph[before].append(after)
        indegree[after] += 1

    required: dict[int, set[int]] = defaultdict(set)
    queue = deque(node for node in range(n) if indegree[node] == 0)
    while queue:
        node = queue.popleft()
        for nbr in graph[node]:
            indegree[nbr] -= 1
            required[nbr].add(node)
            required[nbr] |= required[node]
            if indegree[nbr] == 0:
                queue.append(nbr)

    return [before in required[after] for before, after in queries]


def magnificent_sets(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Return the most groups nodes ``1..n`` can be split into, or -1 if impossible."""
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)

    color = [0] * (n + 1)

    def bipartite_component(start: int) -> list[int] | None:
        queue = deque([start])
        color[start] = 1
        component = []
        while queue:
            u = queue.popleft()
            component.append(u)
            for v in graph[u]:
                if not color[v]:
                    color[v] = -color[u]
                    queue.append(v)
                elif color[v] == color[u]:
                    return None
        return component

    def depth_from(root: int) -> int:
        dist = {root: 0}
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v in graph[u]:
                if v not in dist:
                    dist[v] = dist[u] + 1
                    queue.append(v)
        return max(dist.values())

    total = 0
    for node in range(1, n + 1):
        if color[node]:
            continue
        component = bipartite_component(node)
        if component is None:
            return -1
        total += max(depth_from(root) + 1 for root in component)
    return total


def longest_special_path(
    edges: Sequence[Sequence[int]], nums: Sequence[int]
) -> list[int]:
    """Return ``[length, nodes]`` of the longest downward path from node 0 with distinct values.

    Among paths of equal length the one with fewer nodes wins.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    graph: list[list[tuple[int, int]]] = [[] for _ in nums]
    for u, v, weight in edges:
        graph[u].append((v, weight))
        graph[v].append((u, weight))

    last_level: dict[int, int] = {}
    prefix = [0]
    best = (0, -1)
    stack = []

    def enter(node: int, parent: int, left: int, level: int) -> None:
        nonlocal best
        previous = last_level.get(nums[node], 0)
        last_level[nums[node]] = level
        left = max(left, previous)
        best = max(best, (prefix[-1] - prefix[left], left - level))
        stack.append((node, parent, left, level, previous, iter(graph[node])))

    enter(0, -1, 0, 1)
    while stack:
        node, parent, left, level, previous, children = stack[-1]
        for nbr, weight in children:
            if nbr != parent:
                prefix.append(prefix[-1] + weight)
                enter(nbr, node, left, level + 1)
                break
        else:
            stack.pop()
            last_level[nums[node]] = previous
            if stack:
                prefix.pop()

    return [best[0], -best[1]]


def min_max_weight(n: int, edges: Sequence[Sequence[int]], threshold: int) -> int:
    """Return the least edge-weight cap under which every node reaches node 0, or -1.

    ``threshold`` is accepted for interface compatibility and does not change the result.
    """
    reverse: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    heaviest = 0
    for u, v, weight in edges:
        reverse[v].append((u, weight))
        heaviest = max(heaviest, weight)

    def all_reach_zero(cap: int) -> bool:
        visited = {0}
        queue = deque([0])
        while queue:
            node = queue.popleft()
            for nbr, weight in reverse[node]:
                if nbr not in visited and weight <= cap:
                    visited.add(nbr)
                    queue.append(nbr)
        return len(visited) == n

    caps = range(heaviest + 1)
    index = bisect_left(caps, True, key=all_reach_zero)
    return caps[index] if index < len(caps) else -1


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the first edge that closes a cycle, or an empty list."""
    graph: dict[int, list[int]] = defaultdict(list)

    def connected(start: int, goal: int) -> bool:
        seen = {start}
        stack = [start]
        while stack:
            node = stack.pop()
            if node == goal:
                return True
            for nbr in graph[node]:
                if nbr not in seen:
                    seen.add(nbr)
                    stack.append(nbr)
        return False

    for u, v in edges:
        if connected(u, v):
            return [u, v]
        graph[u].append(v)
        graph[v].append(u)
    return []


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the nodes from which every path ends at a terminal node."""
    n = len(graph)
    visited = [False] * n
    on_path = [False] * n

    for start in range(n):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            node, nbrs = stack[-1]
            for nbr in nbrs:
                if not visited[nbr]:
                    visited[nbr] = on_path[nbr] = True
                    stack.append((nbr, iter(graph[nbr])))
                    break
                if on_path[nbr]:
                    stack.clear()
                    break
            else:
                on_path[node] = False
                stack.pop()

    return [node for node in range(n) if not on_path[node]]