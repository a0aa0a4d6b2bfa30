"""Contiguous-subarray, window and counting problems over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def max_subarray_sum(arr: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    if not arr:
        raise ValueError("sequence must not be empty")
    best = current = arr[0]
    for value in arr[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_product(arr: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray."""
    if not arr:
        raise ValueError("sequence must not be empty")
    low = high = best = arr[0]
    for value in arr[1:]:
        candidates = (value, low * value, high * value)
        low, high = min(candidates), max(candidates)
        best = max(best, high)
    return best


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest subarray whose sum is at least ``target``, or 0."""
    best: int | None = None
    total = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while left <= right and total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    return best or 0


def has_zero_sum_subarray(arr: Iterable[int]) -> bool:
    """Whether some non-empty contiguous subarray sums to zero."""
    seen: set[int] = set()
    for prefix in accumulate(arr):
        if prefix == 0 or prefix in seen:
            return True
        seen.add(prefix)
    return False


def count_zero_sum_subarrays(arr: Iterable[int]) -> int:
    """Number of non-empty contiguous subarrays that sum to zero."""
    seen: Counter[int] = Counter({0: 1})
    count = 0
    for prefix in accumulate(arr):
        count += seen[prefix]
        seen[prefix] += 1
    return count


def trapped_water(arr: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    if len(arr) < 3:
        return 0
    left = list(accumulate(arr[:-1], max, initial=-1))
    right = list(accumulate(reversed(arr[1:]), max, initial=-1))[::-1]
    return sum(
        max(0, min(lmax, rmax) - height)
        for lmax, rmax, height in zip(left[1:-1], right[1:-1], arr[1:-1])
    )


def longest_consecutive(arr: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present in the input."""
    values = set(arr)
    best = 0
    for start in values:
        if start - 1 not in values:
            length = 1
            while start + length in values:
                length += 1
            best = max(best, length)
    return best


def min_swaps_to_group(arr: Sequence[int], k: int) -> int:
    """Swaps needed to bring all elements ``<= k`` together."""
    size = sum(1 for value in arr if value <= k)
    window = sum(1 for value in arr[:size] if value > k)
    best = window
    for outgoing, incoming in zip(arr, arr[size:]):
        window += (incoming > k) - (outgoing > k)
        best = min(best, window)
    return best


def find_min_diff(arr: Iterable[int], m: int) -> int:
    """Smallest max-min spread when picking ``m`` packets for ``m`` students."""
    ordered = sorted(arr)
    if not 1 <= m <= len(ordered):
        raise ValueError(f"cannot choose {m} packets from {len(ordered)}")
    return min(high - low for low, high in zip(ordered, ordered[m - 1:]))


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_inv = _sort_and_count(items[:mid])
    right, right_inv = _sort_and_count(items[mid:])
    merged: list[int] = []
    inversions = left_inv + right_inv
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] >= left[i]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def inversion_count(arr: Iterable[int]) -> int:
    """Number of pairs ``i < j`` with ``arr[i] > arr[j]``."""
    return _sort_and_count(list(arr))[1]


def max_non_adjacent_sum(arr: Sequence[int]) -> int:
    """Largest sum of elements of which no two are adjacent."""
    if not arr:
        raise ValueError("sequence must not be empty")
    if len(arr) == 1:
        return arr[0]
    second_last, last = 0, arr[0]
    result = 0
    for value in arr[1:]:
        result = max(second_last + value, last)
        second_last, last = last, result
    return result