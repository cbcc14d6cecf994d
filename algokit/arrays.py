"""Array algorithms: two pointers, searching, intervals and products."""

from __future__ import annotations

from collections import deque
from itertools import accumulate, groupby
from operator import mul
from typing import Iterable, Optional, Sequence


def sorted_squared_array(values: Sequence[int]) -> list[int]:
    """Return the squares of a sorted sequence, in ascending order."""
    remaining = deque(values)
    descending = []
    while remaining:
        if abs(remaining[0]) >= abs(remaining[-1]):
            value = remaining.popleft()
        else:
            value = remaining.pop()
        descending.append(value * value)
    descending.reverse()
    return descending


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return indices (i, j), i < j, with nums[i] + nums[j] == target, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        other = seen.get(target - value)
        if other is not None:
            return other, index
        seen[value] = index
    return None


def two_sum_sorted(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """On a sorted sequence, return 1-based positions of two values summing to target."""
    left, right = 0, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            return left + 1, right + 1
        if total < target:
            left += 1
        else:
            right -= 1
    return None


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in place and return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def max_area(heights: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def find_all_duplicates(values: Sequence[int]) -> list[int]:
    """Report values seen an even number of times, at each even occurrence.

    Every value must lie between 1 and len(values); ValueError otherwise.
    """
    size = len(values)
    marked: set[int] = set()
    found = []
    for value in values:
        if not 1 <= value <= size:
            raise ValueError(f"value {value} outside 1..{size}")
        if value in marked:
            found.append(value)
            marked.remove(value)
        else:
            marked.add(value)
    return found


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of target in a sorted sequence, or (-1, -1)."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = left + (right - left) // 2
        if nums[middle] == target:
            first = last = middle
            while first > 0 and nums[first - 1] == target:
                first -= 1
            while last < len(nums) - 1 and nums[last + 1] == target:
                last += 1
            return first, last
        if nums[middle] < target:
            left = middle + 1
        else:
            right = middle - 1
    return -1, -1


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other values, without division."""
    nums = list(nums)
    prefix = list(accumulate(nums, mul, initial=1))[:-1]
    suffix = list(accumulate(reversed(nums), mul, initial=1))[:-1]
    suffix.reverse()
    return [before * after for before, after in zip(prefix, suffix)]


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching [start, end] intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return [(start, end) for start, end in merged]


def find_rotation_pivot(nums: Sequence[int]) -> int:
    """Return the index of the smallest value in a rotated sorted sequence."""
    if not nums:
        raise ValueError("empty sequence has no pivot")
    left, right = 0, len(nums) - 1
    while left < right:
        middle = left + (right - left) // 2
        if nums[middle] > nums[right]:
            left = middle + 1
        else:
            right = middle
    return left


def binary_search(
    nums: Sequence[int], target: int, left: int = 0, right: Optional[int] = None
) -> int:
    """Find target in sorted nums[left..right] (inclusive); return its index or -1."""
    if right is None:
        right = len(nums) - 1
    while left <= right:
        middle = left + (right - left) // 2
        if nums[middle] == target:
            return middle
        if target < nums[middle]:
            right = middle - 1
        else:
            left = middle + 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find target in a rotated sorted sequence of distinct values; -1 if absent."""
    if not nums:
        return -1
    pivot = find_rotation_pivot(nums)
    if target <= nums[-1]:
        return binary_search(nums, target, pivot, len(nums) - 1)
    return binary_search(nums, target, 0, pivot - 1)