"""Dynamic-programming routines over intervals, grids and colourings."""

from __future__ import annotations

import math
from bisect import bisect_right
from itertools import permutations, product
from typing import Sequence

_MAX_CHOSEN = 4
_COLORS = 3
_NO_COLOR = 3


def maximum_weight(intervals: Sequence[Sequence[int]]) -> list[int]:
    """Return the sorted indices of up to four disjoint intervals of greatest total weight.

    Among equal weights the lexicographically smallest index list is chosen.
    """
    arr = sorted((left, right, weight, i) for i, (left, right, weight) in enumerate(intervals))
    n = len(arr)
    starts = [item[0] for item in arr]
    following = [bisect_right(starts, item[1]) for item in arr]

    empty: tuple[int, tuple[int, ...]] = (0, ())
    upper = [empty] * (n + 1)
    for _ in range(_MAX_CHOSEN):
        current = [empty] * (n + 1)
        for idx in reversed(range(n)):
            _, _, weight, original = arr[idx]
            sub_weight, sub_chosen = upper[following[idx]]
            take = (sub_weight + weight, tuple(sorted(sub_chosen + (original,))))
            skip = current[idx + 1]
            if take[0] > skip[0] or (take[0] == skip[0] and take[1] < skip[1]):
                current[idx] = take
            else:
                current[idx] = skip
        upper = current
    return list(upper[0][1])


def maximum_amount(grid: Sequence[Sequence[int]]) -> int:
    """Return the most coins collected moving right/down, neutralising up to two robbers."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    n, m = len(grid), len(grid[0])
    unreachable = -math.inf

    below = [[unreachable] * 3 for _ in range(m + 1)]
    for i in reversed(range(n)):
        row = [[unreachable] * 3 for _ in range(m + 1)]
        for j in reversed(range(m)):
            value = grid[i][j]
            for used in range(3):
                if i == n - 1 and j == m - 1:
                    row[j][used] = 0 if value < 0 and used < 2 else value
                    continue
                best = max(below[j][used], row[j + 1][used]) + value
                if used < 2 and value < 0:
                    best = max(best, below[j][used + 1], row[j + 1][used + 1])
                row[j][used] = best
        below = row
    return int(below[0][0])


def paint_house_min_cost(n: int, cost: Sequence[Sequence[int]]) -> int:
    """Return the least cost to paint ``n`` houses in three colours.

    Adjacent houses differ, and houses equally far from either end differ.
    """
    states = list(product(range(_COLORS + 1), repeat=2))
    pairs = list(permutations(range(_COLORS), 2))
    after = {state: 0 for state in states}
    for idx in reversed(range(n // 2)):
        left, right = cost[idx], cost[n - idx - 1]
        after = {
            (first, second): min(
                (
                    left[c1] + right[c2] + after[(c1, c2)]
                    for c1, c2 in pairs
                    if c1 != first and c2 != second
                ),
                default=math.inf,
            )
            for first, second in states
        }
    return after[(_NO_COLOR, _NO_COLOR)]