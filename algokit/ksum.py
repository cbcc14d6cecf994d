"""k-sum problems: tuples of values that add up to a target."""

from __future__ import annotations

from typing import Iterable


def _pair_sums(nums: list[int], target: int, start: int) -> list[tuple[int, ...]]:
    """Distinct pairs from sorted nums[start:] that add up to target."""
    pairs: list[tuple[int, ...]] = []
    left, right = start, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            pairs.append((nums[left], nums[right]))
            left += 1
            right -= 1
            while left < right and nums[left - 1] == nums[left]:
                left += 1
            while left < right and nums[right] == nums[right + 1]:
                right -= 1
        elif total < target:
            left += 1
        else:
            right -= 1
    return pairs


def _k_sum_from(
    nums: list[int], target: int, start: int, k: int
) -> list[tuple[int, ...]]:
    """Distinct k-tuples from sorted nums[start:] that add up to target."""
    if start == len(nums):
        return []
    # The average of the k values must lie between the smallest and largest.
    if target < nums[start] * k or nums[-1] * k < target:
        return []
    if k == 2:
        return _pair_sums(nums, target, start)

    found: list[tuple[int, ...]] = []
    for index, value in enumerate(nums[start:], start):
        if index != start and nums[index - 1] == value:
            continue
        for rest in _k_sum_from(nums, target - value, index + 1, k - 1):
            found.append((value, *rest))
    return found


def k_sum(nums: Iterable[int], target: int, k: int) -> list[tuple[int, ...]]:
    """Return every distinct sorted k-tuple of values from nums summing to target.

    The tuples come in ascending lexicographic order. ``k`` must be at least 2.
    """
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")
    return _k_sum_from(sorted(nums), target, 0, k)


def three_sum(nums: Iterable[int]) -> list[tuple[int, ...]]:
    """Return every distinct sorted triple of values from nums that sums to zero."""
    return k_sum(nums, 0, 3)


def four_sum(nums: Iterable[int], target: int) -> list[tuple[int, ...]]:
    """Return every distinct sorted quadruple of values from nums summing to target."""
    return k_sum(nums, target, 4)


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Return the sum of three values from nums that lies closest to target.

    On ties the first sum met wins. ValueError when nums has fewer than three values.
    """
    values = sorted(nums)
    if len(values) < 3:
        raise ValueError("need at least three values")

    closest: int | None = None
    for index, first in enumerate(values[:-2]):
        left, right = index + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == target:
                return target
            if closest is None or abs(target - total) < abs(target - closest):
                closest = total
            if total > target:
                right -= 1
            else:
                left += 1
    assert closest is not None
    return closest