"""Dynamic-programming algorithms over sequences, grids and strings."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate

MOD = 1_000_000_007

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _popcount(mask: int) -> int:
    return bin(mask).count("1")


def number_of_arithmetic_slices(nums: Sequence[int]) -> int:
    """Count arithmetic subsequences of length three or more.

    For each element the table keeps, per common difference, how many new
    subsequences extending it would create; a later pair with the same
    difference replaces the entry rather than adding to it.
    """
    tables: list[dict[int, int]] = []
    result = 0
    for idx, value in enumerate(nums):
        table: dict[int, int] = {}
        for previous, previous_table in zip(nums[:idx], tables):
            difference = value - previous
            extensions = previous_table.get(difference, 0)
            table[difference] = extensions + 1
            result += extensions
        tables.append(table)
    return result


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    before, current = 1, 1
    for _ in range(n - 1):
        before, current = current, before + current
    return current


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values with no two adjacent ones taken."""
    if not nums:
        raise ValueError("at least one house is required")
    skipped, taken = 0, nums[0]
    for value in nums[1:]:
        skipped, taken = taken, max(skipped + value, taken)
    return taken


def k_inverse_pairs(n: int, k: int) -> int:
    """Permutations of ``1..n`` with exactly ``k`` inverse pairs, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if k < 0:
        return 0
    row = [1] + [0] * k
    for size in range(1, n + 1):
        prefix = list(accumulate(row, initial=0))
        row = [
            (prefix[j + 1] - prefix[max(0, j - size + 1)]) % MOD
            for j in range(k + 1)
        ]
    return row[k] % MOD


def longest_common_subsequence(a: str, b: str) -> int:
    """Length of the longest subsequence common to ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for char_a in a:
        current = [0]
        for jdx, char_b in enumerate(b):
            if char_a == char_b:
                current.append(previous[jdx] + 1)
            else:
                current.append(max(current[jdx], previous[jdx + 1]))
        previous = current
    return previous[-1]


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    if not nums:
        raise ValueError("at least one number is required")
    lengths: list[int] = []
    for idx, value in enumerate(nums):
        best = 1
        for previous, length in zip(nums[:idx], lengths):
            if previous < value:
                best = max(best, length + 1)
        lengths.append(best)
    return max(lengths)


def max_length(arr: Sequence[str]) -> int:
    """Longest concatenation of words from ``arr`` with all characters distinct."""
    masks: list[int] = []
    for word in arr:
        mask = 0
        for character in word:
            mask |= 1 << ord(character)
        if word and _popcount(mask) == len(word):
            masks.append(mask)

    combinations = [0]
    best = 0
    for mask in masks:
        for combination in list(combinations):
            if mask & combination:
                continue
            joined = mask | combination
            combinations.append(joined)
            best = max(best, _popcount(joined))
    return best


def job_scheduling(
    start_time: Sequence[int], end_time: Sequence[int], profit: Sequence[int]
) -> int:
    """Maximum profit from jobs whose time ranges do not overlap."""
    if not len(start_time) == len(end_time) == len(profit):
        raise ValueError("start_time, end_time and profit must have equal lengths")
    jobs = sorted(zip(end_time, start_time, profit))
    ends = [end for end, _, _ in jobs]
    best = [0]
    for idx, (_, start, gain) in enumerate(jobs):
        compatible = bisect_right(ends, start, 0, idx)
        best.append(max(best[idx], best[compatible] + gain))
    return best[-1]


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a top-to-bottom path moving at most one column per row."""
    if not matrix:
        raise ValueError("matrix must not be empty")
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    sums = list(matrix[0])
    for row in matrix[1:]:
        sums = [
            value + min(sums[max(column - 1, 0):column + 2])
            for column, value in enumerate(row)
        ]
    return min(sums)


def find_paths(m: int, n: int, max_move: int, start_row: int, start_column: int) -> int:
    """Paths that leave an ``m`` by ``n`` grid within ``max_move`` moves, modulo 10**9 + 7."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    if not (0 <= start_row < m and 0 <= start_column < n):
        raise ValueError("start position lies outside the grid")
    ways = [[0] * n for _ in range(m)]
    ways[start_row][start_column] = 1
    count = 0
    for _ in range(max_move):
        following = [[0] * n for _ in range(m)]
        for row, cells in enumerate(ways):
            for column, paths in enumerate(cells):
                if not paths:
                    continue
                for d_row, d_column in _STEPS:
                    r, c = row + d_row, column + d_column
                    if 0 <= r < m and 0 <= c < n:
                        following[r][c] = (following[r][c] + paths) % MOD
                    else:
                        count = (count + paths) % MOD
        ways = following
    return count


def num_decodings(s: str) -> int:
    """Ways to decode a digit string where ``1``..``26`` map to letters."""
    if not s:
        return 0
    after_next, after = 0, 1
    for idx in reversed(range(len(s))):
        if s[idx] == "0":
            current = 0
        else:
            current = after
            if idx < len(s) - 1 and (
                s[idx] == "1" or (s[idx] == "2" and s[idx + 1] < "7")
            ):
                current += after_next
        after_next, after = after, current
    return after


def tribonacci(n: int) -> int:
    """The ``n``-th Tribonacci number, starting 0, 1, 1."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a