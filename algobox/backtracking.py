"""Backtracking searches: combinations, permutations, queens and word paths."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import product

KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad could spell from ``digits``."""
    if not digits:
        return []
    letters = (KEYPAD.get(digit, "") for digit in digits)
    return ["".join(chars) for chars in product(*letters)]


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of ``nums``.

    Values are tracked by identity of value, so input with repeated values
    yields no orderings at all.
    """
    values = list(nums)
    results: list[list[int]] = []
    used: set[int] = set()
    current: list[int] = []

    def extend() -> None:
        if len(current) == len(values):
            results.append(current.copy())
            return
        for value in values:
            if value in used:
                continue
            used.add(value)
            current.append(value)
            extend()
            current.pop()
            used.discard(value)

    extend()
    return results


def permute_unique(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ordering of ``nums``, which may hold repeats."""
    remaining = Counter(nums)
    total = sum(remaining.values())
    results: list[list[int]] = []
    current: list[int] = []

    def extend() -> None:
        if len(current) == total:
            results.append(current.copy())
            return
        for value in list(remaining):
            if remaining[value] == 0:
                continue
            remaining[value] -= 1
            current.append(value)
            extend()
            current.pop()
            remaining[value] += 1

    extend()
    return results


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens as rows of ``.`` and ``Q``."""
    results: list[list[str]] = []
    columns: list[int] = []
    taken_cols: set[int] = set()
    taken_diag: set[int] = set()
    taken_anti: set[int] = set()

    def place(row: int) -> None:
        if row >= n:
            results.append(["." * col + "Q" + "." * (n - col - 1) for col in columns])
            return
        for col in range(n):
            if col in taken_cols or row - col in taken_diag or row + col in taken_anti:
                continue
            columns.append(col)
            taken_cols.add(col)
            taken_diag.add(row - col)
            taken_anti.add(row + col)
            place(row + 1)
            columns.pop()
            taken_cols.discard(col)
            taken_diag.discard(row - col)
            taken_anti.discard(row + col)

    place(0)
    return results


def subsets(nums: Iterable[int]) -> list[list[int]]:
    """Return every subset of ``nums``, those holding earlier items coming first."""
    values = list(nums)
    results: list[list[int]] = []

    def walk(index: int, current: list[int]) -> None:
        if index == len(values):
            results.append(current)
            return
        walk(index + 1, current + [values[index]])
        walk(index + 1, current)

    walk(0, [])
    return results


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into the next ordering, wrapping to sorted order."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        -1,
    )
    if pivot >= 0:
        swapper = next(j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot])
        nums[pivot], nums[swapper] = nums[swapper], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return whether ``word`` runs along adjacent cells of ``board`` without reuse."""
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def search(index: int, row: int, col: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        if (row, col) in visited or board[row][col] != word[index]:
            return False
        visited.add((row, col))
        found = any(search(index + 1, row + dr, col + dc) for dr, dc in _DIRECTIONS)
        visited.discard((row, col))
        return found

    return any(
        board[row][col] == word[0] and search(0, row, col)
        for row in range(rows)
        for col in range(cols)
    )