"""Reordering, partitioning and merging of integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def segregate_elements(arr: Iterable[int]) -> list[int]:
    """Move negative numbers to the end, keeping the relative order of both groups."""
    items = list(arr)
    return [n for n in items if n >= 0] + [n for n in items if n < 0]


def rearrange_alternating(arr: Iterable[int]) -> list[int]:
    """Alternate non-negative and negative numbers, starting with a non-negative one.

    Leftovers of the longer group are appended in their original order.
    """
    items = list(arr)
    positives = [n for n in items if n >= 0]
    negatives = [n for n in items if n < 0]
    result: list[int] = []
    for pos, neg in zip(positives, negatives):
        result.extend((pos, neg))
    paired = min(len(positives), len(negatives))
    result.extend(positives[paired:])
    result.extend(negatives[paired:])
    return result


def reverse_after(arr: Sequence[int], m: int) -> list[int]:
    """Reverse the part of the sequence that follows index ``m``."""
    items = list(arr)
    start = m + 1
    return items[:start] + items[start:][::-1]


def rotate_array(arr: Sequence[int], k: int) -> list[int]:
    """Rotate the sequence left by ``k`` positions."""
    items = list(arr)
    if not 0 <= k <= len(items):
        raise ValueError(f"rotation {k} out of range for length {len(items)}")
    return items[k:] + items[:k]


def sort012(arr: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s by counting; any other value counts as a 2."""
    items = list(arr)
    zeros = items.count(0)
    ones = items.count(1)
    twos = len(items) - zeros - ones
    return [0] * zeros + [1] * ones + [2] * twos


def three_way_partition(arr: Iterable[int], a: int, b: int) -> list[int]:
    """Partition into values below ``a``, values in ``[a, b]`` and values above ``b``."""
    result = list(arr)
    k = 0
    predicates = (
        lambda v: v < a,
        lambda v: a <= v <= b,
        lambda v: v > b,
    )
    for belongs in predicates:
        for i, value in enumerate(result):
            if belongs(value):
                result[i], result[k] = result[k], value
                k += 1
    return result


def next_permutation(nums: Sequence[int]) -> list[int]:
    """Return the lexicographically next permutation, wrapping to the smallest."""
    result = list(nums)
    i = len(result) - 1
    while i > 0 and result[i] <= result[i - 1]:
        i -= 1
    if i > 0:
        j = len(result) - 1
        while j > i and result[j] <= result[i - 1]:
            j -= 1
        result[i - 1], result[j] = result[j], result[i - 1]
    result[i:] = result[i:][::-1]
    return result


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping (or touching) closed intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(list(iv) for iv in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def merge_gap(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    """Merge two sorted sequences with the shrinking-gap method.

    Returns the first ``len(a)`` smallest values and the rest, both sorted.
    """
    combined = [*a, *b]
    total = len(combined)
    gap = (total + 1) // 2
    while gap > 0:
        for left in range(total - gap):
            right = left + gap
            if combined[left] > combined[right]:
                combined[left], combined[right] = combined[right], combined[left]
        if gap == 1:
            break
        gap = (gap + 1) // 2
    return combined[: len(a)], combined[len(a):]


def merge_swap(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    """Merge two sorted sequences by swapping across the boundary, then sorting each."""
    first, second = list(a), list(b)
    for i, j in zip(range(len(first) - 1, -1, -1), range(len(second))):
        if first[i] <= second[j]:
            break
        first[i], second[j] = second[j], first[i]
    return sorted(first), sorted(second)


def _set_bits(n: int) -> int:
    return bin(n & 0xFFFFFFFF).count("1")


def sort_by_set_bits(arr: Iterable[int]) -> list[int]:
    """Stable sort by decreasing number of set bits (32-bit two's complement)."""
    return sorted(arr, key=lambda n: -_set_bits(n))


def min_swaps_to_sort(arr: Sequence[int]) -> int:
    """Count the swaps needed to sort the sequence by placing each value directly."""
    items = list(arr)
    target = sorted(items)
    position = {value: i for i, value in enumerate(items)}
    swaps = 0
    for i, wanted in enumerate(target):
        if items[i] != wanted:
            swaps += 1
            j = position[wanted]
            items[i], items[j] = items[j], items[i]
            position[items[i]] = i
            position[items[j]] = j
    return swaps