import copy
from itertools import combinations, permutations

import pytest

from algobox.backtracking import (
    KEYPAD,
    exist,
    letter_combinations,
    next_permutation,
    permute,
    permute_unique,
    solve_n_queens,
    subsets,
)


def _queens_are_safe(board):
    n = len(board)
    positions = [(row, line.index("Q")) for row, line in enumerate(board)]
    if any(line.count("Q") != 1 or len(line) != n for line in board):
        return False
    cols = {c for _, c in positions}
    diag = {r - c for r, c in positions}
    anti = {r + c for r, c in positions}
    return len(cols) == len(diag) == len(anti) == n


def test_letter_combinations_example():
    assert letter_combinations("23") == ["ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf"]


def test_letter_combinations_single_digit_spells_its_keys():
    assert letter_combinations("7") == list(KEYPAD["7"])


@pytest.mark.parametrize("digits", ["79", "234", "9"])
def test_letter_combinations_count_and_order(digits):
    result = letter_combinations(digits)
    expected_count = 1
    for digit in digits:
        expected_count *= len(KEYPAD[digit])
    assert len(result) == expected_count
    assert result == sorted(result)
    assert all(len(word) == len(digits) for word in result)


def test_letter_combinations_empty_input():
    assert letter_combinations("") == []


@pytest.mark.parametrize("nums", [[1, 2, 3], [0, 1], [5], [4, 2, 7, 1]])
def test_permute_gives_every_ordering_once(nums):
    result = permute(nums)
    assert sorted(result) == sorted(list(p) for p in permutations(nums))
    assert result[0] == nums


def test_permute_with_repeated_values_gives_nothing():
    assert permute([1, 1, 2]) == []


@pytest.mark.parametrize("nums", [[1, 1, 2], [1, 2, 3], [2, 2, 1, 1], [3, 3, 3]])
def test_permute_unique_matches_distinct_orderings(nums):
    result = permute_unique(nums)
    assert sorted(result) == sorted(set(permutations(nums)), key=list) or sorted(
        result
    ) == sorted(list(p) for p in set(permutations(nums)))
    assert len({tuple(p) for p in result}) == len(result)


def test_solve_four_queens():
    assert solve_n_queens(4) == [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]


@pytest.mark.parametrize("n", [1, 5, 6])
def test_queen_boards_are_safe_and_distinct(n):
    boards = solve_n_queens(n)
    assert boards
    assert all(_queens_are_safe(board) for board in boards)
    assert len({tuple(board) for board in boards}) == len(boards)


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_queen_sizes(n):
    assert solve_n_queens(n) == []


@pytest.mark.parametrize("nums", [[1, 2, 3], [0], [], [4, 5, 6, 7]])
def test_subsets_cover_every_combination(nums):
    result = subsets(nums)
    expected = {
        combo for size in range(len(nums) + 1) for combo in combinations(nums, size)
    }
    assert {tuple(s) for s in result} == expected
    assert len(result) == 2 ** len(nums)
    assert result[0] == nums
    assert result[-1] == []


@pytest.mark.parametrize("start", [[1, 2, 3], [1, 1, 2], [0, 1, 2, 3]])
def test_next_permutation_walks_lexicographic_order(start):
    nums = list(start)
    ordered = sorted(set(permutations(start)))
    for expected in ordered:
        assert nums == list(expected)
        assert next_permutation(nums) is None
    assert nums == sorted(start)


def test_next_permutation_wraps_from_last():
    nums = [3, 2, 1]
    next_permutation(nums)
    assert nums == sorted([3, 2, 1])


BOARD = [
    ["A", "B", "C", "E"],
    ["S", "F", "C", "S"],
    ["A", "D", "E", "E"],
]


def test_exist_finds_paths():
    assert exist(BOARD, "ABCCED")
    assert exist(BOARD, "SEE")


def test_exist_does_not_reuse_cells():
    assert not exist(BOARD, "ABCB")


def test_exist_leaves_board_untouched():
    board = copy.deepcopy(BOARD)
    exist(board, "ABCCED")
    exist(board, "ABCB")
    assert board == BOARD


def test_exist_empty_word_or_board():
    assert not exist(BOARD, "")
    assert not exist([], "A")