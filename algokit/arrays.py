"""Array algorithms: two pointers, sliding windows, greedy choices and in-place rearrangement."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence, Sequence
from itertools import accumulate, pairwise

_DIGITS = "123456789"


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Whether ``n`` flowers fit into empty plots with no two flowers adjacent.

    The given flowerbed is left unchanged.
    """
    if n <= 0:
        return True
    bed = list(flowerbed)
    last = len(bed) - 1
    for idx, plot in enumerate(bed):
        if (
            plot == 0
            and (idx == 0 or bed[idx - 1] == 0)
            and (idx == last or bed[idx + 1] == 0)
        ):
            bed[idx] = 1
            n -= 1
            if n == 0:
                return True
    return False


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the vertical lines."""
    start, end = 0, len(height) - 1
    best = 0
    while start < end:
        best = max(best, min(height[start], height[end]) * (end - start))
        if height[start] < height[end]:
            start += 1
        else:
            end -= 1
    return best


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether the extra candies would give them the most."""
    threshold = max(candies, default=0)
    threshold = max(threshold, 0) - extra_candies
    return [count >= threshold for count in candies]


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """The ``k``-th largest element (1-based) of ``nums``."""
    if k < 1 or k > len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average of any contiguous window of length ``k``."""
    if k < 1 or k > len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the others."""
    zeros = 0
    for idx, value in enumerate(nums):
        if value == 0:
            zeros += 1
        elif zeros:
            nums[idx - zeros] = value
            nums[idx] = 0


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other elements."""
    prefix = list(accumulate(nums[:-1], lambda a, b: a * b, initial=1))
    result: list[int] = []
    suffix = 1
    for before, value in zip(reversed(prefix), reversed(nums)):
        result.append(before * suffix)
        suffix *= value
    result.reverse()
    return result


def find_content_children(children: Sequence[int], cookies: Sequence[int]) -> int:
    """Most children whose greed can be met, one cookie each."""
    greeds = sorted(children)
    content = 0
    for cookie in sorted(cookies):
        if content == len(greeds):
            break
        if cookie >= greeds[content]:
            content += 1
    return content


def divide_array(nums: Sequence[int], k: int) -> list[list[int]]:
    """Split the sorted numbers into triples whose spread is at most ``k``.

    Returns an empty list when some triple spreads further than ``k``.
    Elements beyond the last full triple are left out.
    """
    ordered = sorted(nums)
    groups: list[list[int]] = []
    for first in range(0, len(ordered) - 2, 3):
        triple = ordered[first:first + 3]
        if triple[-1] - triple[0] > k:
            return []
        groups.append(triple)
    return groups


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    start, mid, end = 0, 0, len(nums) - 1
    while mid <= end:
        value = nums[mid]
        if value == 0:
            nums[start], nums[mid] = nums[mid], nums[start]
            start += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[end], nums[mid] = nums[mid], nums[end]
            end -= 1


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of an ascending sequence, themselves in ascending order."""
    left, right = 0, len(nums) - 1
    result: list[int] = []
    while left <= right:
        if abs(nums[left]) >= abs(nums[right]):
            result.append(nums[left] ** 2)
            left += 1
        else:
            result.append(nums[right] ** 2)
            right -= 1
    result.reverse()
    return result


def sequential_digits(low: int, high: int) -> list[int]:
    """Ascending numbers of two or more consecutive increasing digits in ``[low, high]``."""
    return [
        number
        for length in range(2, len(_DIGITS) + 1)
        for start in range(len(_DIGITS) - length + 1)
        if low <= (number := int(_DIGITS[start:start + length])) <= high
    ]


def number_of_beams(bank: Sequence[str]) -> int:
    """Beams between devices ('1') on consecutive non-empty rows."""
    counts = [row.count("1") for row in bank]
    occupied = [count for count in counts if count]
    return sum(a * b for a, b in pairwise(occupied))


def reverse_string(s: MutableSequence[str]) -> None:
    """Reverse a mutable sequence of characters in place."""
    size = len(s)
    for idx in range(size // 2):
        s[idx], s[size - idx - 1] = s[size - idx - 1], s[idx]


def find_max_k(nums: Sequence[int]) -> int:
    """Largest ``k`` such that both ``k`` and ``-k`` occur, or -1 if none does."""
    seen: set[int] = set()
    best = -1
    for number in nums:
        if -number in seen:
            best = max(best, abs(number))
        else:
            seen.add(number)
    return best