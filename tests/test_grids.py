import random

import pytest

from algobox.grids import (
    count_servers,
    find_max_fish,
    first_complete_index,
    grid_game,
    highest_peak,
    largest_island,
    min_cost_valid_path,
    trap_rain_water,
    zigzag_traversal,
)


def _transpose(grid):
    return [list(col) for col in zip(*grid)]


def _random_grid(rng, rows, cols, low, high):
    return [[rng.randint(low, high) for _ in range(cols)] for _ in range(rows)]


# count_servers


def test_count_servers_all_connected():
    grid = [[1, 1, 1], [1, 1, 1]]
    assert count_servers(grid) == len(grid) * len(grid[0])


def test_count_servers_isolated_servers_do_not_count():
    grid = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert count_servers(grid) == count_servers([[0] * 3 for _ in range(3)])
    assert count_servers([[1, 0], [0, 0]]) == count_servers([[0, 0], [0, 0]])


def test_count_servers_transpose_invariant():
    rng = random.Random(7)
    for _ in range(20):
        grid = _random_grid(rng, 4, 5, 0, 1)
        result = count_servers(grid)
        assert result == count_servers(_transpose(grid))
        assert result <= sum(map(sum, grid))


# min_cost_valid_path


def test_min_cost_valid_path_worked_example():
    grid = [[1, 1, 1, 1], [2, 2, 2, 2], [1, 1, 1, 1], [2, 2, 2, 2]]
    assert min_cost_valid_path(grid) == 3


def test_min_cost_valid_path_following_arrows_is_free():
    assert min_cost_valid_path([[1, 1, 3], [4, 4, 3], [2, 2, 1]]) == min_cost_valid_path([[4]])


def test_min_cost_valid_path_bounded_by_manhattan_distance():
    rng = random.Random(11)
    for _ in range(20):
        grid = _random_grid(rng, 4, 6, 1, 4)
        cost = min_cost_valid_path(grid)
        assert 0 <= cost <= len(grid) + len(grid[0]) - 2


def test_min_cost_valid_path_rejects_empty_grid():
    with pytest.raises(ValueError):
        min_cost_valid_path([])


# highest_peak


def _check_peak(is_water, heights):
    rows, cols = len(is_water), len(is_water[0])
    for i in range(rows):
        for j in range(cols):
            nbrs = [
                heights[r][c]
                for r, c in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1))
                if 0 <= r < rows and 0 <= c < cols
            ]
            for h in nbrs:
                assert abs(h - heights[i][j]) <= 1
            if is_water[i][j]:
                assert heights[i][j] == 0
            else:
                assert min(nbrs) == heights[i][j] - 1


def test_highest_peak_row_rises_from_water():
    is_water = [[1, 0, 0, 0, 0]]
    heights = highest_peak(is_water)
    assert heights == [list(range(len(is_water[0])))]


def test_highest_peak_invariants():
    rng = random.Random(3)
    for _ in range(15):
        is_water = _random_grid(rng, 5, 6, 0, 1)
        is_water[rng.randrange(5)][rng.randrange(6)] = 1
        _check_peak(is_water, highest_peak(is_water))


# grid_game


def test_grid_game_two_columns():
    top, bottom = [1, 7], [5, 1]
    assert grid_game([top, bottom]) == min(top[1], bottom[0])


def test_grid_game_single_column_leaves_nothing():
    assert grid_game([[9], [4]]) == grid_game([[0], [0]])


def test_grid_game_bounds():
    rng = random.Random(5)
    for _ in range(20):
        grid = _random_grid(rng, 2, 6, 0, 20)
        result = grid_game(grid)
        assert 0 <= result <= sum(grid[0][1:])
        assert result <= sum(grid[0]) + sum(grid[1])


# first_complete_index


def test_first_complete_index_first_row():
    mat = [[1, 2, 3], [4, 5, 6]]
    arr = [1, 2, 3, 4, 5, 6]
    assert first_complete_index(arr, mat) == len(mat[0]) - 1


def test_first_complete_index_first_column():
    mat = [[1, 2, 3], [4, 5, 6]]
    arr = [1, 4, 2, 5, 3, 6]
    assert first_complete_index(arr, mat) == len(mat) - 1


def test_first_complete_index_never_completes():
    assert first_complete_index([1, 5], [[1, 2], [3, 4], [5, 6]]) == -1


def _line_complete(mat, painted):
    return any(all(v in painted for v in row) for row in mat) or any(
        all(v in painted for v in col) for col in zip(*mat)
    )


def test_first_complete_index_is_first_completion():
    rng = random.Random(13)
    mat = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    shortest_line = min(len(mat), len(mat[0]))
    for _ in range(20):
        arr = list(range(1, 13))
        rng.shuffle(arr)
        idx = first_complete_index(arr, mat)
        assert shortest_line - 1 <= idx < len(arr)
        assert _line_complete(mat, set(arr[: idx + 1])) is True
        assert _line_complete(mat, set(arr[:idx])) is False


# find_max_fish


def test_find_max_fish_single_component_is_total():
    grid = [[2, 3], [0, 4]]
    assert find_max_fish(grid) == sum(map(sum, grid))


def test_find_max_fish_picks_best_component():
    grid = [[3, 0, 4], [0, 0, 0], [5, 0, 0]]
    assert find_max_fish(grid) == max(3, 4, 5)


def test_find_max_fish_diagonals_not_connected():
    grid = [[2, 0], [0, 3]]
    assert find_max_fish(grid) == max(2, 3)


def test_find_max_fish_no_water():
    assert find_max_fish([[0, 0], [0, 0]]) == 0


# zigzag_traversal


def test_zigzag_single_row():
    row = [1, 2, 3, 4, 5]
    assert zigzag_traversal([row]) == row[::2]


def test_zigzag_turns_on_second_row():
    assert zigzag_traversal([[1, 2], [3, 4]]) == [1, 4]
    assert zigzag_traversal([[1, 2, 3], [4, 5, 6]]) == [1, 3, 5]


def test_zigzag_length():
    rng = random.Random(17)
    for rows, cols in [(2, 3), (3, 3), (4, 5), (1, 1)]:
        grid = _random_grid(rng, rows, cols, 0, 9)
        assert len(zigzag_traversal(grid)) == (rows * cols + 1) // 2


# trap_rain_water


def test_trap_rain_water_worked_example():
    height_map = [[1, 4, 3, 1, 3, 2], [3, 2, 1, 3, 2, 4], [2, 3, 3, 2, 3, 1]]
    assert trap_rain_water(height_map) == 4


def test_trap_rain_water_bowl():
    rim, floor = 3, 1
    assert trap_rain_water([[rim] * 3, [rim, floor, rim], [rim] * 3]) == rim - floor


def test_trap_rain_water_leaky_bowl_holds_nothing():
    assert trap_rain_water([[3, 3, 3], [3, 1, 0], [3, 3, 3]]) == 0


def test_trap_rain_water_thin_maps_hold_nothing():
    assert trap_rain_water([[5, 0, 5], [5, 0, 5]]) == 0


def test_trap_rain_water_transpose_invariant():
    rng = random.Random(19)
    for _ in range(15):
        grid = _random_grid(rng, 5, 4, 0, 9)
        assert trap_rain_water(grid) == trap_rain_water(_transpose(grid))


# largest_island


def test_largest_island_worked_example():
    assert largest_island([[1, 0], [0, 1]]) == 3


def test_largest_island_all_land():
    grid = [[1, 1], [1, 1]]
    assert largest_island(grid) == len(grid) * len(grid)


def test_largest_island_all_water():
    assert largest_island([[0, 0], [0, 0]]) == 1


def test_largest_island_bounds():
    rng = random.Random(23)
    for _ in range(20):
        grid = _random_grid(rng, 4, 4, 0, 1)
        result = largest_island(grid)
        land = sum(map(sum, grid))
        assert result <= min(land + 1, len(grid) ** 2)
        assert result >= find_max_fish(grid) or land == 0