# algobox

Plain-Python implementations of well-known algorithmic problems, grouped by
the kind of data they work on. The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algobox.bits`: `range_bitwise_and`, `missing_number`, `minimize_xor`,
  `xor_all_pairings`, `valid_array_exists` and `gray_code`.
- `algobox.strings`: `can_construct_palindromes`, `can_be_valid`, `prefix_count`,
  `minimum_length`, `word_subsets`, and the `PrefixTrie` class. A `PrefixTrie`
  can be built from an iterable of words; `insert(word)` adds one more and
  `count(prefix)` returns how many inserted words start with the prefix
  (0 for the empty prefix).
- `algobox.arrays`: `min_eating_speed`, `least_unique_after_removals`,
  `furthest_building`, `is_sorted_and_rotated`, `max_ascending_sum`,
  `prefix_common_array`, `longest_monotonic_subarray`, `is_array_special`,
  `max_free_time` and `min_max_sums` (the result is taken modulo 1 000 000 007,
  available as `algobox.arrays.MOD`).
- `algobox.graphs`: `find_cheapest_price`, `check_if_prerequisite`,
  `magnificent_sets`, `longest_special_path`, `min_max_weight`,
  `find_redundant_connection` and `eventual_safe_nodes`. The `threshold`
  argument of `min_max_weight` is accepted but does not change the result.
- `algobox.dp`: `maximum_weight`, `maximum_amount` and `paint_house_min_cost`.
- `algobox.grids`: `count_servers`, `min_cost_valid_path`, `highest_peak`,
  `grid_game`, `first_complete_index`, `find_max_fish`, `zigzag_traversal`,
  `trap_rain_water` and `largest_island`.

## Examples

```python
from algobox.bits import gray_code, range_bitwise_and
from algobox.strings import PrefixTrie
from algobox.graphs import find_cheapest_price
from algobox.grids import trap_rain_water

gray_code(2)               # [0, 1, 3, 2]
range_bitwise_and(5, 7)    # 4

trie = PrefixTrie(["pay", "attention", "practice"])
trie.insert("attend")
trie.count("at")           # 2

flights = [[0, 1, 100], [1, 2, 100], [0, 2, 500]]
find_cheapest_price(3, flights, 0, 2, 1)   # 200

trap_rain_water([[1, 4, 3, 1, 3, 2], [3, 2, 1, 3, 2, 4], [2, 3, 3, 2, 3, 1]])  # 4
```

## Results and errors

A function that finds no answer returns the value its docstring names, for
example `-1` from `find_cheapest_price` when no route fits within the allowed
stops, or an empty list from `find_redundant_connection` when no edge closes a
cycle. Several functions raise `ValueError` for empty input they cannot work
on (for instance an empty grid, an empty `derived` list, or no meetings given
to `max_free_time`).

## What it does not do

`algobox` is a library only: it has no command-line program, reads no files
and keeps no state between calls apart from what a `PrefixTrie` holds.