import random
from functools import reduce
from itertools import product
from operator import and_, xor

import pytest

from algobox.bits import (
    gray_code,
    minimize_xor,
    missing_number,
    range_bitwise_and,
    valid_array_exists,
    xor_all_pairings,
)


def test_range_bitwise_and_example():
    assert range_bitwise_and(5, 7) == 4


@pytest.mark.parametrize("value", [0, 1, 6, 1023, 2**20 + 5])
def test_range_bitwise_and_single_value(value):
    assert range_bitwise_and(value, value) == value


@pytest.mark.parametrize("left,right", [(3, 9), (12, 15), (100, 130), (1, 2**16)])
def test_range_bitwise_and_matches_fold(left, right):
    assert range_bitwise_and(left, right) == reduce(and_, range(left, right + 1))


def test_range_bitwise_and_from_zero():
    assert range_bitwise_and(0, 1000) == range_bitwise_and(0, 0)


@pytest.mark.parametrize("n", [1, 2, 9, 50])
def test_missing_number_finds_each_gap(n):
    rng = random.Random(n)
    for gone in range(n + 1):
        nums = [x for x in range(n + 1) if x != gone]
        rng.shuffle(nums)
        assert missing_number(nums) == gone


def test_minimize_xor_examples():
    assert minimize_xor(3, 5) == 3
    assert minimize_xor(1, 12) == 3


@pytest.mark.parametrize("num1,num2", [(7, 1), (25, 72), (10, 255), (64, 3), (0, 6)])
def test_minimize_xor_is_optimal(num1, num2):
    result = minimize_xor(num1, num2)
    wanted = bin(num2).count("1")
    assert bin(result).count("1") == wanted
    for candidate in range(512):
        if bin(candidate).count("1") == wanted:
            assert result ^ num1 <= candidate ^ num1


@pytest.mark.parametrize(
    "nums1,nums2",
    [([2, 1, 3], [10, 2, 5, 0]), ([1, 2], [3, 4]), ([7], [9]), ([4, 4, 8], [1, 6, 6])],
)
def test_xor_all_pairings_matches_all_pairs(nums1, nums2):
    expected = reduce(xor, (a ^ b for a, b in product(nums1, nums2)), 0)
    assert xor_all_pairings(nums1, nums2) == expected


@pytest.mark.parametrize("original", [[0, 1, 0], [1, 1], [0], [1, 0, 1, 1, 0, 0]])
def test_valid_array_exists_for_real_arrays(original):
    n = len(original)
    derived = [original[i] ^ original[(i + 1) % n] for i in range(n)]
    assert valid_array_exists(derived)


@pytest.mark.parametrize("derived", [[1, 0], [1], [1, 1, 1], [0, 0, 1, 0]])
def test_valid_array_exists_rejects_odd_flips(derived):
    assert not valid_array_exists(derived)


def test_valid_array_exists_rejects_empty():
    with pytest.raises(ValueError):
        valid_array_exists([])


def test_gray_code_two_bits():
    assert gray_code(2) == [0, 1, 3, 2]


def test_gray_code_zero_bits():
    assert gray_code(0) == [0]


@pytest.mark.parametrize("n", [1, 3, 5, 8])
def test_gray_code_properties(n):
    codes = gray_code(n)
    assert len(codes) == 2**n
    assert len(set(codes)) == len(codes)
    assert codes[0] == 0
    assert all(0 <= c < 2**n for c in codes)
    for a, b in zip(codes, codes[1:] + codes[:1]):
        assert bin(a ^ b).count("1") == 1