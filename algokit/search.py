"""Graph and grid search: breadth- and depth-first walks and backtracking."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import compress, product

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")

_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Whether every room is reachable from room 0 using the keys found inside."""
    if not rooms:
        return False
    visited = {0}
    keys = [0]
    while keys:
        for key in rooms[keys.pop()]:
            if key not in visited:
                visited.add(key)
                keys.append(key)
    return len(visited) == len(rooms)


def letter_combinations(digits: str) -> list[str]:
    """Every string the digits could spell on a telephone keypad."""
    if not digits:
        return []
    if not all(digit in "0123456789" for digit in digits):
        raise ValueError(f"only digits are allowed: {digits!r}")
    letters = [_KEYPAD[int(digit)] for digit in digits]
    return ["".join(combination) for combination in product(*letters)]


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Steps to the closest open border cell other than the entrance, or -1."""
    rows = len(maze)
    columns = len(maze[0]) if rows else 0
    start = (entrance[0], entrance[1])
    if not (0 <= start[0] < rows and 0 <= start[1] < columns):
        raise ValueError("entrance lies outside the maze")
    visited = {start}
    queue: deque[tuple[int, int, int]] = deque([(start[0], start[1], 0)])
    while queue:
        row, column, depth = queue.popleft()
        on_border = row in (0, rows - 1) or column in (0, columns - 1)
        if on_border and (row, column) != start:
            return depth
        for d_row, d_column in _STEPS:
            r, c = row + d_row, column + d_column
            if 0 <= r < rows and 0 <= c < columns and maze[r][c] == "." and (r, c) not in visited:
                visited.add((r, c))
                queue.append((r, c, depth + 1))
    return -1


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """All subsets, each choice taking an element before leaving it out."""
    return [
        list(compress(nums, chosen))
        for chosen in product((True, False), repeat=len(nums))
    ]


def word_search(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through adjacent cells, using each cell once."""
    grid = [list(row) for row in board]
    if not grid or not grid[0]:
        return False
    rows, columns = len(grid), len(grid[0])

    def trace(row: int, column: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= row < rows and 0 <= column < columns):
            return False
        if grid[row][column] != word[index]:
            return False
        grid[row][column] = "*"
        found = any(
            trace(row + d_row, column + d_column, index + 1)
            for d_row, d_column in _STEPS
        )
        grid[row][column] = word[index]
        return found

    return any(
        trace(row, column, 0) for row in range(rows) for column in range(columns)
    )