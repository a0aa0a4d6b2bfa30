"""Order statistics, majorities and medians of integer sequences."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate


def kth_small_large(nums: Iterable[int], k: int) -> tuple[int, int]:
    """Return the ``k``-th smallest and the ``k``-th largest values."""
    ordered = sorted(nums)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k={k} out of range for {len(ordered)} values")
    return ordered[k - 1], ordered[-k]


def sum_of_max_min(arr: Sequence[int]) -> int:
    """Sum of the largest and the smallest value."""
    if not arr:
        raise ValueError("sequence must not be empty")
    return max(arr) + min(arr)


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Values occurring more than ``len(nums) // 3`` times (extended Boyer-Moore vote)."""
    candidate1, candidate2 = 0, 1
    count1 = count2 = 0
    for num in nums:
        if num == candidate1:
            count1 += 1
        elif num == candidate2:
            count2 += 1
        elif count1 == 0:
            candidate1, count1 = num, 1
        elif count2 == 0:
            candidate2, count2 = num, 1
        else:
            count1 -= 1
            count2 -= 1
    threshold = len(nums) // 3
    return [
        candidate
        for candidate in (candidate1, candidate2)
        if sum(1 for num in nums if num == candidate) > threshold
    ]


def majority_element(arr: Sequence[int]) -> int | None:
    """The value occurring more than half the time, or ``None`` (Moore voting)."""
    votes = 0
    candidate: int | None = None
    for value in arr:
        if votes == 0:
            candidate, votes = value, 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    if candidate is not None and sum(1 for v in arr if v == candidate) > len(arr) // 2:
        return candidate
    return None


def _bounds(seq: Sequence[int], cut: int) -> tuple[float, float]:
    left = seq[cut - 1] if cut > 0 else -math.inf
    right = seq[cut] if cut < len(seq) else math.inf
    return left, right


def median_of_equal_sorted(a: Sequence[int], b: Sequence[int]) -> float:
    """Median of two sorted sequences of the same, non-zero length."""
    n = len(a)
    if n != len(b):
        raise ValueError("sequences must have the same length")
    if n == 0:
        raise ValueError("sequences must not be empty")
    low, high = 0, n
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = n - cut1
        l1, r1 = _bounds(a, cut1)
        l2, r2 = _bounds(b, cut2)
        if l1 <= r2 and l2 <= r1:
            return (max(l1, l2) + min(r1, r2)) / 2
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("sequences are not sorted")


def median_of_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences of any lengths."""
    shorter, longer = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    total = len(shorter) + len(longer)
    if total == 0:
        raise ValueError("sequences must not both be empty")
    half = (total + 1) // 2
    low, high = 0, len(shorter)
    while low <= high:
        i = (low + high) // 2
        j = half - i
        a_left, a_right = _bounds(shorter, i)
        b_left, b_right = _bounds(longer, j)
        if a_left <= b_right and b_left <= a_right:
            if total % 2:
                return float(max(a_left, b_left))
            return (max(a_left, b_left) + min(a_right, b_right)) / 2
        if a_left > b_right:
            high = i - 1
        else:
            low = i + 1
    raise ValueError("sequences are not sorted")


def min_max(arr: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest value."""
    items = list(arr)
    if not items:
        raise ValueError("sequence must not be empty")
    return min(items), max(items)


def kth_element(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """The ``k``-th smallest value (1-based) of the union of two sorted sequences."""
    if len(a) > len(b):
        a, b = b, a
    n, m = len(a), len(b)
    if not 1 <= k <= n + m:
        raise ValueError(f"k={k} out of range for {n + m} values")
    left, right = max(0, k - m), min(k, n)
    while left <= right:
        cut1 = (left + right) // 2
        cut2 = k - cut1
        a_left, a_right = _bounds(a, cut1)
        b_left, b_right = _bounds(b, cut2)
        if a_left <= b_right and b_left <= a_right:
            return int(max(a_left, b_left))
        if a_left > b_right:
            right = cut1 - 1
        else:
            left = cut1 + 1
    raise ValueError("sequences are not sorted")


def kth_smallest_in_ranges(
    ranges: Iterable[Sequence[int]], queries: Iterable[int]
) -> list[int | None]:
    """Answer each query ``k`` with the ``k``-th smallest integer covered by the ranges.

    Overlapping closed ranges count each integer once; ``None`` answers a query
    outside the covered count.
    """
    merged: list[list[int]] = []
    for start, end in sorted(tuple(r) for r in ranges):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    if not merged:
        raise ValueError("at least one range is required")
    prefix = list(accumulate(end - start + 1 for start, end in merged))
    answers: list[int | None] = []
    for k in queries:
        i = bisect_left(prefix, k)
        if k < 1 or i == len(prefix):
            answers.append(None)
            continue
        before = prefix[i - 1] if i else 0
        answers.append(merged[i][0] + k - before - 1)
    return answers