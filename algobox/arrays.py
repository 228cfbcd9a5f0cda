"""Routines over integer sequences."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from itertools import accumulate, pairwise
from typing import Sequence

MOD = 1_000_000_007

_SPEED_LIMIT = 10**10
_UNREACHABLE_HOURS = 10**18


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the least eating speed that finishes ``piles`` within ``h`` hours, or -1."""

    def finishes(speed: int) -> bool:
        if speed == 0:
            hours = _UNREACHABLE_HOURS * len(piles)
        else:
            hours = sum((pile + speed - 1) // speed for pile in piles)
        return hours <= h

    speeds = range(_SPEED_LIMIT + 1)
    index = bisect_left(speeds, True, key=finishes)
    return speeds[index] if index < len(speeds) else -1


def least_unique_after_removals(arr: Sequence[int], k: int) -> int:
    """Return the fewest distinct values left after removing exactly ``k`` elements."""
    remaining = 0
    for count in sorted(Counter(arr).values()):
        taken = min(count, k)
        k -= taken
        if count - taken:
            remaining += 1
    return remaining


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Return the furthest building index reachable with the given bricks and ladders."""
    climbs: list[int] = []
    for i, (here, there) in enumerate(pairwise(heights)):
        diff = there - here
        if diff > 0:
            heapq.heappush(climbs, diff)
            if len(climbs) > ladders:
                bricks -= heapq.heappop(climbs)
            if bricks < 0:
                return i
    return len(heights) - 1


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a rotation of a non-decreasing sequence."""
    drops = 0
    for prev, cur in pairwise(nums):
        if cur < prev:
            if nums[0] < nums[-1] or drops:
                return False
            drops += 1
    return True


def max_ascending_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a strictly ascending contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for prev, cur in pairwise(nums):
        current = current + cur if cur > prev else cur
        best = max(best, current)
    return best


def prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return, for each prefix length, how many values appear in both prefixes."""
    seen: Counter[int] = Counter()
    common = 0
    result = []
    for x, y in zip(a, b):
        seen[x] += 1
        seen[y] += 1
        if x == y:
            common += 1
        else:
            common += (seen[x] == 2) + (seen[y] == 2)
        result.append(common)
    return result


def longest_monotonic_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing or decreasing run."""

    def longest_rising(values: Sequence[int]) -> int:
        best = run = 1
        for prev, cur in pairwise(values):
            run = run + 1 if cur > prev else 1
            best = max(best, run)
        return best

    return max(longest_rising(nums), longest_rising(nums[::-1]))


def is_array_special(nums: Sequence[int]) -> bool:
    """Tell whether every adjacent pair in ``nums`` differs in parity."""
    return all(a % 2 != b % 2 for a, b in pairwise(nums))


def max_free_time(
    event_time: int, start_times: Sequence[int], end_times: Sequence[int]
) -> int:
    """Return the longest free stretch after moving at most one meeting."""
    meetings = sorted(zip(start_times, end_times))
    if not meetings:
        raise ValueError("at least one meeting is required")

    gaps = [meetings[0][0]]
    gaps.extend(
        start - prev_end
        for (_, prev_end), (start, _) in pairwise(meetings)
        if start >= prev_end
    )
    gaps.append(event_time - meetings[-1][1])

    best_before = list(accumulate(gaps, max))
    best_after = list(accumulate(reversed(gaps), max))[::-1]

    best = 0
    for i, (start, end) in enumerate(meetings):
        free = gaps[i] + (gaps[i + 1] if i + 1 < len(gaps) else 0)
        length = end - start
        fits_before = i >= 1 and best_before[i - 1] >= length
        fits_after = i + 2 < len(gaps) and best_after[i + 2] >= length
        if fits_before or fits_after:
            free += length
        best = max(best, free)
    return best


def min_max_sums(nums: Sequence[int], k: int) -> int:
    """Return the sum of min plus max over all subsequences of size at most ``k``, modulo 1e9+7."""
    values = sorted(nums)
    n = len(values)

    fact = [1] * (n + 1)
    for i in range(1, n + 1):
        fact[i] = fact[i - 1] * i % MOD
    inv_fact = [1] * (n + 1)
    inv_fact[n] = pow(fact[n], MOD - 2, MOD)
    for i in range(n, 0, -1):
        inv_fact[i - 1] = inv_fact[i] * i % MOD

    def comb(total: int, chosen: int) -> int:
        if total < 0 or chosen < 0 or chosen > total:
            return 0
        return fact[total] * inv_fact[chosen] % MOD * inv_fact[total - chosen] % MOD

    result = 0
    for i, value in enumerate(values):
        ways = sum(comb(i, size) + comb(n - i - 1, size) for size in range(k))
        result = (result + value % MOD * (ways % MOD)) % MOD
    return result