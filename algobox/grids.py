"""Routines over rectangular integer grids."""

from __future__ import annotations

import heapq
import math
from collections import deque
from itertools import accumulate
from typing import Iterator, Sequence

Grid = Sequence[Sequence[int]]

# Offsets in the order the arrow signs 1..4 name them: right, left, down, up.
_ARROWS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _shape(grid: Grid) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    return len(grid), len(grid[0])


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _NEIGHBOURS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def count_servers(grid: Grid) -> int:
    """Return how many servers share a row or a column with another server."""
    row_sums = [sum(row) for row in grid]
    col_sums = [sum(col) for col in zip(*grid)]
    return sum(
        1
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == 1 and (row_sums[i] > 1 or col_sums[j] > 1)
    )


def min_cost_valid_path(grid: Grid) -> int:
    """Return the fewest arrow changes needed to walk from the top-left to the bottom-right.

    Cells hold 1 (right), 2 (left), 3 (down) or 4 (up).
    """
    rows, cols = _shape(grid)
    dist = [[math.inf] * cols for _ in range(rows)]
    dist[0][0] = 0
    heap = [(0, 0, 0)]
    while heap:
        cost, x, y = heapq.heappop(heap)
        if cost > dist[x][y]:
            continue
        for sign, (dx, dy) in enumerate(_ARROWS, start=1):
            nx, ny = x + dx, y + dy
            if not (0 <= nx < rows and 0 <= ny < cols):
                continue
            new_cost = cost + (0 if grid[x][y] == sign else 1)
            if new_cost < dist[nx][ny]:
                dist[nx][ny] = new_cost
                heapq.heappush(heap, (new_cost, nx, ny))
    return int(dist[-1][-1])


def highest_peak(is_water: Grid) -> list[list[int]]:
    """Return heights where water is 0 and neighbouring cells differ by at most one."""
    rows, cols = _shape(is_water)
    heights = [[-1] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for i, row in enumerate(is_water):
        for j, cell in enumerate(row):
            if cell:
                heights[i][j] = 0
                queue.append((i, j))
    while queue:
        i, j = queue.popleft()
        for r, c in _neighbours(i, j, rows, cols):
            if heights[r][c] == -1:
                heights[r][c] = heights[i][j] + 1
                queue.append((r, c))
    return heights


def grid_game(grid: Grid) -> int:
    """Return the points the second robot collects when the first plays to minimise them."""
    top, bottom = grid[0], grid[1]
    if not top:
        raise ValueError("grid must not be empty")
    upper = sum(top[1:])
    lower = 0
    best = upper
    for i in range(1, len(top)):
        upper -= top[i]
        lower += bottom[i - 1]
        best = min(best, max(upper, lower))
    return best


def first_complete_index(arr: Sequence[int], mat: Grid) -> int:
    """Return the first index of ``arr`` at which a whole row or column of ``mat`` is painted, or -1."""
    rows, cols = _shape(mat)
    position = {value: (i, j) for i, row in enumerate(mat) for j, value in enumerate(row)}
    painted_rows = [0] * rows
    painted_cols = [0] * cols
    for index, value in enumerate(arr):
        i, j = position[value]
        painted_rows[i] += 1
        painted_cols[j] += 1
        if painted_rows[i] == cols or painted_cols[j] == rows:
            return index
    return -1


def find_max_fish(grid: Grid) -> int:
    """Return the largest total of fish in one connected group of water cells."""
    rows, cols = _shape(grid)
    visited: set[tuple[int, int]] = set()
    best = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == 0 or (i, j) in visited:
                continue
            visited.add((i, j))
            queue = deque([(i, j)])
            total = 0
            while queue:
                x, y = queue.popleft()
                total += grid[x][y]
                for r, c in _neighbours(x, y, rows, cols):
                    if (r, c) not in visited and grid[r][c] != 0:
                        visited.add((r, c))
                        queue.append((r, c))
            best = max(best, total)
    return best


def zigzag_traversal(grid: Grid) -> list[int]:
    """Walk rows alternately left-to-right and right-to-left, keeping every other cell."""
    _shape(grid)
    walk = [
        value
        for i, row in enumerate(grid)
        for value in (row if i % 2 == 0 else reversed(row))
    ]
    return walk[::2]


def trap_rain_water(height_map: Grid) -> int:
    """Return the volume of water the elevation map holds after rain."""
    rows, cols = _shape(height_map)
    if rows <= 2 or cols <= 2:
        return 0
    visited = [[False] * cols for _ in range(rows)]
    heap = []
    for i, row in enumerate(height_map):
        for j, height in enumerate(row):
            if i in (0, rows - 1) or j in (0, cols - 1):
                heap.append((height, i, j))
                visited[i][j] = True
    heapq.heapify(heap)

    volume = 0
    while heap:
        level, i, j = heapq.heappop(heap)
        for r, c in _neighbours(i, j, rows, cols):
            if visited[r][c]:
                continue
            visited[r][c] = True
            height = height_map[r][c]
            volume += max(level - height, 0)
            heapq.heappush(heap, (max(level, height), r, c))
    return volume


def largest_island(grid: Grid) -> int:
    """Return the largest island size reachable by turning at most one 0 into a 1."""
    rows, cols = _shape(grid)
    labels = [[0] * cols for _ in range(rows)]
    sizes: dict[int, int] = {}
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if not cell or labels[i][j]:
                continue
            label = len(sizes) + 1
            labels[i][j] = label
            queue = deque([(i, j)])
            size = 0
            while queue:
                x, y = queue.popleft()
                size += 1
                for r, c in _neighbours(x, y, rows, cols):
                    if grid[r][c] and not labels[r][c]:
                        labels[r][c] = label
                        queue.append((r, c))
            sizes[label] = size

    best = max(sizes.values(), default=0)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell:
                continue
            touching = {labels[r][c] for r, c in _neighbours(i, j, rows, cols)} - {0}
            best = max(best, 1 + sum(sizes[label] for label in touching))
    return best


def _prefix_sums(values: Sequence[int]) -> list[int]:
    return list(accumulate(values, initial=0))