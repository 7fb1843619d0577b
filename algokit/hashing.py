"""Counting- and lookup-based algorithms built on sets and dictionaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def find_difference(nums1: Iterable[int], nums2: Iterable[int]) -> list[list[int]]:
    """Distinct values found only in ``nums1`` and those found only in ``nums2``."""
    first = dict.fromkeys(nums1)
    second = dict.fromkeys(nums2)
    return [
        [number for number in first if number not in second],
        [number for number in second if number not in first],
    ]


def unique_occurrences(arr: Iterable[int]) -> bool:
    """Whether every distinct value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(counts) == len(set(counts))


def find_matrix(nums: Iterable[int]) -> list[list[int]]:
    """Spread the numbers over as few rows as possible, each row without repeats.

    Numbers appear in every row in the order of their first appearance.
    """
    counts = Counter(nums)
    rows = max(counts.values(), default=0)
    return [
        [number for number, count in counts.items() if count > row]
        for row in range(rows)
    ]


def height_checker(heights: Sequence[int]) -> int:
    """Positions whose height differs from the non-decreasing arrangement."""
    return sum(
        actual != expected for actual, expected in zip(heights, sorted(heights))
    )


def min_operations(nums: Iterable[int]) -> int:
    """Fewest removals of two or three equal elements that empty the array.

    Returns -1 when some value occurs exactly once and so cannot be removed.
    """
    counts = Counter(nums).values()
    if any(count == 1 for count in counts):
        return -1
    return sum(-(-count // 3) for count in counts)


def find_winners(matches: Iterable[Sequence[int]]) -> list[list[int]]:
    """Players who never lost and players who lost exactly once, each sorted."""
    losses: dict[int, int] = {}
    for winner, loser in matches:
        losses.setdefault(winner, 0)
        losses[loser] = losses.get(loser, 0) + 1
    return [
        sorted(player for player, lost in losses.items() if lost == 0),
        sorted(player for player, lost in losses.items() if lost == 1),
    ]


def relative_sort_array(arr1: Iterable[int], arr2: Iterable[int]) -> list[int]:
    """Order ``arr1`` by the order of ``arr2``; the rest follow in ascending order."""
    counts = Counter(arr1)
    result: list[int] = []
    for number in arr2:
        result.extend([number] * counts.pop(number, 0))
    for number in sorted(counts):
        result.extend([number] * counts[number])
    return result


def find_error_nums(nums: Sequence[int]) -> list[int]:
    """In a copy of ``1..n`` with one value duplicated over another, return [duplicate, missing]."""
    size = len(nums)
    counts = Counter(nums)
    if any(not 1 <= number <= size for number in counts):
        raise ValueError(f"values must lie between 1 and {size}")
    duplicate = missing = 0
    for number in range(1, size + 1):
        if counts[number] == 0:
            missing = number
        elif counts[number] == 2:
            duplicate = number
        if duplicate and missing:
            break
    return [duplicate, missing]


def check_subarray_sum(nums: Iterable[int], k: int) -> bool:
    """Whether a run of at least two elements sums to a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    first_seen = {0: -1}
    remainder = 0
    for idx, number in enumerate(nums):
        remainder = (remainder + number) % k
        if remainder in first_seen:
            if idx - first_seen[remainder] > 1:
                return True
        else:
            first_seen[remainder] = idx
    return False


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Whether any value occurs more than once."""
    seen: set[int] = set()
    for number in nums:
        if number in seen:
            return True
        seen.add(number)
    return False


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair of elements that add up to ``target``."""
    seen: dict[int, int] = {}
    for idx, number in enumerate(nums):
        partner = seen.get(target - number)
        if partner is not None:
            return [partner, idx]
        seen[number] = idx
    raise ValueError(f"no two elements add up to {target}")