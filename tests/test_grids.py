import copy

import pytest

from algobox.grids import flood_fill, minimum_obstacles, minimum_time, open_lock, robot_sim


def _wheel_distance(code):
    return sum(min(int(d), 10 - int(d)) for d in code)


def test_flood_fill_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    assert flood_fill(image, 1, 1, 2) == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]


def test_flood_fill_same_colour_leaves_image():
    image = [[0, 0, 0], [0, 0, 0]]
    before = copy.deepcopy(image)
    assert flood_fill(image, 0, 0, 0) == before


def test_flood_fill_uniform_grid_fills_all():
    image = [[3] * 4 for _ in range(3)]
    result = flood_fill(image, 2, 1, 8)
    assert result == [[8] * 4 for _ in range(3)]
    assert result is image


def test_flood_fill_does_not_cross_diagonals():
    image = [[1, 0], [0, 1]]
    result = flood_fill(image, 0, 0, 5)
    assert result[0][0] == 5
    assert result[1][1] == 1
    assert result[0][1] == 0 and result[1][0] == 0


def test_flood_fill_keeps_other_colours():
    image = [[1, 2, 1], [1, 2, 1], [1, 1, 3]]
    before = copy.deepcopy(image)
    result = flood_fill(image, 0, 0, 9)
    for row in range(3):
        for col in range(3):
            if before[row][col] != 1:
                assert result[row][col] == before[row][col]


@pytest.mark.parametrize("target", ["0000", "0009", "0202", "5555", "1234"])
def test_open_lock_without_deadends_is_wheel_distance(target):
    assert open_lock([], target) == _wheel_distance(target)


def test_open_lock_start_is_dead():
    assert open_lock(["0000"], "8888") == -1


def test_open_lock_target_surrounded():
    deadends = ["8887", "8889", "8878", "8898", "8788", "8988", "7888", "9888"]
    assert open_lock(deadends, "8888") == -1


def test_open_lock_deadends_only_lengthen():
    deadends = ["0201", "0101", "0102", "1212", "2002"]
    moves = open_lock(deadends, "0202")
    assert moves >= _wheel_distance("0202")
    assert moves % 2 == _wheel_distance("0202") % 2


def test_robot_sim_example():
    assert robot_sim([4, -1, 3], []) == 25


@pytest.mark.parametrize("steps", [1, 3, 7])
def test_robot_sim_straight_north(steps):
    assert robot_sim([steps], []) == steps * steps


def test_robot_sim_stops_before_obstacle():
    assert robot_sim([5], [[0, 3]]) == (3 - 1) ** 2


def test_robot_sim_full_turn_is_no_turn():
    assert robot_sim([-2, -2, -2, -2, 3], []) == robot_sim([3], [])
    assert robot_sim([-1, -2, 6], []) == robot_sim([6], [])


def test_robot_sim_west_walk():
    assert robot_sim([-2, 4], []) == 4 ** 2


def test_minimum_obstacles_transpose_invariant():
    grid = [[0, 1, 1], [1, 1, 0], [1, 1, 0]]
    transposed = [list(column) for column in zip(*grid)]
    result = minimum_obstacles(grid)
    assert result == minimum_obstacles(transposed)
    assert result <= sum(map(sum, grid))


def test_minimum_obstacles_clear_corridor():
    grid = [[0, 1, 0, 0, 0], [0, 1, 0, 1, 0], [0, 0, 0, 1, 0]]
    empty = [[0] * 5 for _ in range(3)]
    assert minimum_obstacles(grid) == minimum_obstacles(empty)


def test_minimum_obstacles_all_blocked():
    rows, cols = 3, 4
    grid = [[1] * cols for _ in range(rows)]
    grid[0][0] = 0
    assert minimum_obstacles(grid) == rows + cols - 2


def test_minimum_time_cannot_leave():
    assert minimum_time([[0, 2, 4], [3, 2, 1], [1, 0, 4]]) == -1


def test_minimum_time_open_grid():
    rows, cols = 3, 5
    assert minimum_time([[0] * cols for _ in range(rows)]) == rows + cols - 2


def test_minimum_time_parity_and_bound():
    grid = [[0, 1, 3, 2], [5, 1, 2, 5], [4, 3, 8, 6]]
    result = minimum_time(grid)
    assert result >= grid[-1][-1]
    assert result % 2 == (len(grid) + len(grid[0]) - 2) % 2