"""Searches in sorted, rotated and step sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def first_and_last(arr: Sequence[int], x: int) -> tuple[int, int] | None:
    """First and last index of ``x`` in a sorted sequence, or ``None`` if absent."""
    first = bisect_left(arr, x)
    if first == len(arr) or arr[first] != x:
        return None
    return first, bisect_right(arr, x) - 1


def search_rotated(nums: Sequence[int], target: int) -> int | None:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or ``None``."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[low]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def largest_in_rotated(arr: Sequence[int]) -> int:
    """Largest value of a rotated sorted sequence, found by locating the pivot."""
    n = len(arr)
    if n == 0:
        raise ValueError("sequence must not be empty")
    if n == 1 or arr[0] < arr[-1]:
        return arr[-1]
    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) // 2
        if mid > 0 and arr[mid - 1] > arr[mid]:
            return arr[mid - 1]
        if mid < n - 1 and arr[mid] > arr[mid + 1]:
            return arr[mid]
        if arr[mid] > arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    # No descent anywhere: every value is equal.
    return max(arr)


def find_step_key_index(arr: Sequence[int], k: int, x: int) -> int | None:
    """Index of the first ``x`` in a sequence whose neighbours differ by at most ``k``."""
    return next((i for i, value in enumerate(arr) if value == x), None)


def values_equal_to_index(arr: Sequence[int]) -> list[int]:
    """Values that equal their own 1-based position."""
    return [value for position, value in enumerate(arr, start=1) if value == position]