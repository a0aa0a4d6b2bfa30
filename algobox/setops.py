"""Set-like queries and k-sum searches over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def common_elements(
    arr1: Sequence[int], arr2: Sequence[int], arr3: Sequence[int]
) -> list[int]:
    """Distinct values present in all three sorted sequences, in ascending order."""
    i = j = k = 0
    result: list[int] = []
    while i < len(arr1) and j < len(arr2) and k < len(arr3):
        x, y, z = arr1[i], arr2[j], arr3[k]
        if x == y == z:
            while i < len(arr1) and arr1[i] == x:
                i += 1
            while j < len(arr2) and arr2[j] == x:
                j += 1
            while k < len(arr3) and arr3[k] == x:
                k += 1
            result.append(x)
            continue
        smallest = min(x, y, z)
        if x == smallest:
            i += 1
        elif y == smallest:
            j += 1
        else:
            k += 1
    return result


def is_subset(a: Iterable[int], b: Iterable[int]) -> bool:
    """Whether ``b`` is a sub-multiset of ``a``."""
    return not (Counter(b) - Counter(a))


def find_union(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Distinct values from either input, in ascending order."""
    return sorted(set(a) | set(b))


def zero_sum_pairs(arr: Iterable[int]) -> list[tuple[int, int]]:
    """Distinct pairs ``(x, y)`` with ``x + y == 0``, ``x`` taken from the lower end."""
    items = sorted(arr)
    left, right = 0, len(items) - 1
    pairs: list[tuple[int, int]] = []
    while left < right:
        total = items[left] + items[right]
        if total == 0:
            pairs.append((items[left], items[right]))
            value = items[left]
            while left < right and items[left] == value:
                left += 1
        elif total < 0:
            left += 1
        else:
            right -= 1
    return pairs


def _has_pair_sum(items: Sequence[int], target: int, left: int, right: int) -> bool:
    while left < right:
        total = items[left] + items[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False


def has_triplet_sum(arr: Iterable[int], target: int) -> bool:
    """Whether three elements at distinct positions sum to ``target``."""
    items = sorted(arr)
    last = len(items) - 1
    return any(
        _has_pair_sum(items, target - value, i + 1, last)
        for i, value in enumerate(items)
    )


def four_sum(arr: Iterable[int], target: int) -> list[tuple[int, int, int, int]]:
    """Distinct ascending quadruples of elements that sum to ``target``."""
    items = sorted(arr)
    n = len(items)
    result: list[tuple[int, int, int, int]] = []
    for i in range(n):
        if i > 0 and items[i] == items[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and items[j] == items[j - 1]:
                continue
            k, m = j + 1, n - 1
            while k < m:
                total = items[i] + items[j] + items[k] + items[m]
                if total == target:
                    result.append((items[i], items[j], items[k], items[m]))
                    k += 1
                    m -= 1
                    while k < m and items[k] == items[k - 1]:
                        k += 1
                    while m < n - 1 and items[m] == items[m + 1]:
                        m -= 1
                elif total < target:
                    k += 1
                else:
                    m -= 1
    return result


def has_pair_with_difference(arr: Iterable[int], x: int) -> bool:
    """Whether two elements at distinct positions differ by exactly ``x``."""
    seen: set[int] = set()
    for value in arr:
        if value + x in seen or value - x in seen:
            return True
        seen.add(value)
    return False


def count_triplets_below(arr: Iterable[int], total: int) -> int:
    """Number of index triplets whose elements sum to less than ``total``."""
    items = sorted(arr)
    n = len(items)
    count = 0
    for i, first in enumerate(items):
        left, right = i + 1, n - 1
        while left < right:
            if first + items[left] + items[right] < total:
                count += right - left
                left += 1
            else:
                right -= 1
    return count


def find_duplicate(arr: Sequence[int]) -> int:
    """The repeated value in a sequence holding ``1..n`` plus one duplicate."""
    n = len(arr) - 1
    return sum(arr) - n * (n + 1) // 2


def missing_and_repeating(arr: Sequence[int]) -> tuple[int, int]:
    """Return ``(repeating, missing)`` for a sequence meant to hold ``1..n`` once each."""
    n = len(arr)
    seen: set[int] = set()
    repeating: int | None = None
    for value in arr:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} outside 1..{n}")
        if value in seen:
            repeating = value
        else:
            seen.add(value)
    missing = [value for value in range(1, n + 1) if value not in seen]
    if repeating is None or not missing:
        raise ValueError("sequence has no repeated and missing value")
    return repeating, missing[-1]