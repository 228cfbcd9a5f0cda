"""Bit-manipulation routines over non-negative integers."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Sequence

_WORD_BITS = 32


def _popcount(value: int) -> int:
    return bin(value).count("1")


def range_bitwise_and(left: int, right: int) -> int:
    """Return the bitwise AND of every integer in ``[left, right]``."""
    while right > left:
        right &= right - 1
    return right


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def minimize_xor(num1: int, num2: int) -> int:
    """Return the value with as many set bits as ``num2`` whose XOR with ``num1`` is least."""
    bits1 = _popcount(num1)
    bits2 = _popcount(num2)

    if bits1 <= bits2:
        extra = bits2 - bits1
        result = num1
        for bit in (1 << i for i in range(_WORD_BITS)):
            if not extra:
                break
            if not num1 & bit:
                result |= bit
                extra -= 1
        return result

    result = 0
    for bit in (1 << i for i in reversed(range(_WORD_BITS))):
        if not bits2:
            break
        if num1 & bit:
            result |= bit
            bits2 -= 1
    return result


def xor_all_pairings(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the XOR of ``a ^ b`` over every pair ``a`` from ``nums1`` and ``b`` from ``nums2``."""
    result = 0
    if len(nums2) % 2:
        result ^= reduce(xor, nums1, 0)
    if len(nums1) % 2:
        result ^= reduce(xor, nums2, 0)
    return result


def valid_array_exists(derived: Sequence[int]) -> bool:
    """Tell whether some binary array has ``derived`` as its cyclic neighbour XOR."""
    if not derived:
        raise ValueError("derived must not be empty")
    if len(derived) == 1:
        return derived[0] == 0
    flips = sum(1 for value in derived if value == 1)
    return flips % 2 == 0


def gray_code(n: int) -> list[int]:
    """Return an ``n``-bit Gray code sequence starting at zero."""
    sequence = [0]
    seen = {0}
    mask = 0
    while mask != 1 << n:
        for i in range(n):
            candidate = mask ^ (1 << i)
            if candidate not in seen:
                seen.add(candidate)
                sequence.append(candidate)
                mask = candidate
                break
        else:
            break
    return sequence