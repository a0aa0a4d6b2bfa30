import itertools

import pytest

from algobox.rearranging import (
    merge_gap,
    merge_intervals,
    merge_swap,
    min_swaps_to_sort,
    next_permutation,
    rearrange_alternating,
    reverse_after,
    rotate_array,
    segregate_elements,
    sort012,
    sort_by_set_bits,
    three_way_partition,
)


def _set_bits(n):
    return bin(n & 0xFFFFFFFF).count("1")


def test_segregate_elements_keeps_groups_in_order():
    arr = [1, -1, 3, 2, -7, -5, 11, 6]
    result = segregate_elements(arr)
    assert sorted(result) == sorted(arr)
    split = sum(1 for n in arr if n >= 0)
    assert all(n >= 0 for n in result[:split])
    assert all(n < 0 for n in result[split:])
    assert [n for n in result if n >= 0] == [n for n in arr if n >= 0]
    assert [n for n in result if n < 0] == [n for n in arr if n < 0]


def test_segregate_elements_does_not_mutate():
    arr = [-1, 2]
    segregate_elements(arr)
    assert arr == [-1, 2]


def test_rearrange_alternating_source_example():
    arr = [9, 4, -2, -1, 5, 0, -5, -3, 2]
    assert rearrange_alternating(arr) == [9, -2, 4, -1, 5, -5, 0, -3, 2]


def test_rearrange_alternating_invariants():
    arr = [-1, -2, -3, 4, 5, -6, -7]
    result = rearrange_alternating(arr)
    assert sorted(result) == sorted(arr)
    assert result[0] >= 0 and result[1] < 0
    assert result[2] >= 0 and result[3] < 0
    assert all(n < 0 for n in result[4:])


def test_reverse_after_twice_is_identity():
    arr = [1, 2, 3, 4, 5, 6]
    once = reverse_after(arr, 3)
    assert once[:4] == arr[:4]
    assert once[4:][::-1] == arr[4:]
    assert reverse_after(once, 3) == arr


def test_rotate_array_round_trip():
    arr = [1, 2, 3, 4, 5]
    rotated = rotate_array(arr, 2)
    assert rotated[0] == arr[2]
    assert rotate_array(rotated, len(arr) - 2) == arr
    assert rotate_array(arr, 0) == arr
    assert rotate_array(arr, len(arr)) == arr


def test_rotate_array_rejects_out_of_range():
    with pytest.raises(ValueError):
        rotate_array([1, 2, 3], 4)


def test_sort012_matches_sorted():
    arr = [0, 2, 1, 2, 0, 0, 1, 2, 1]
    assert sort012(arr) == sorted(arr)


def test_three_way_partition_sections():
    arr = [1, 4, 3, 6, 2, 1]
    a, b = 1, 3
    result = three_way_partition(arr, a, b)
    assert sorted(result) == sorted(arr)
    low = sum(1 for v in arr if v < a)
    mid = sum(1 for v in arr if a <= v <= b)
    assert all(v < a for v in result[:low])
    assert all(a <= v <= b for v in result[low:low + mid])
    assert all(v > b for v in result[low + mid:])


def test_next_permutation_walks_lexicographic_order():
    perms = [list(p) for p in itertools.permutations([1, 2, 3, 4])]
    current = perms[0]
    for expected in perms[1:]:
        current = next_permutation(current)
        assert current == expected


def test_next_permutation_wraps_around():
    arr = [5, 4, 3, 2, 1]
    assert next_permutation(arr) == sorted(arr)


def test_next_permutation_with_duplicates():
    distinct = sorted(set(itertools.permutations([1, 1, 2, 2])))
    current = list(distinct[0])
    for expected in distinct[1:]:
        current = next_permutation(current)
        assert current == list(expected)


def test_merge_intervals_source_example():
    intervals = [[1, 4], [3, 5], [6, 8], [8, 9], [10, 12]]
    assert merge_intervals(intervals) == [[1, 5], [6, 9], [10, 12]]


def test_merge_intervals_invariants():
    intervals = [[7, 9], [1, 3], [2, 4], [15, 20], [10, 11], [9, 10]]
    merged = merge_intervals(intervals)
    for first, second in zip(merged, merged[1:]):
        assert first[1] < second[0]
    for start, end in intervals:
        assert any(m[0] <= start and end <= m[1] for m in merged)


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


@pytest.mark.parametrize("merge", [merge_gap, merge_swap])
def test_merge_two_sorted(merge):
    a = [1, 5, 9, 10, 15, 20]
    b = [2, 3, 8, 13]
    first, second = merge(a, b)
    assert len(first) == len(a) and len(second) == len(b)
    assert first + second == sorted(a + b)


@pytest.mark.parametrize("merge", [merge_gap, merge_swap])
def test_merge_with_empty_side(merge):
    first, second = merge([], [1, 2, 3])
    assert first == []
    assert second == [1, 2, 3]


def test_sort_by_set_bits_source_example():
    arr = [5, 2, 3, 9, 4, 6, 7, 15, 32]
    assert sort_by_set_bits(arr) == [15, 7, 5, 3, 9, 6, 2, 4, 32]


def test_sort_by_set_bits_is_stable_and_ordered():
    arr = [8, 3, 1, 12, 2, 5, 16, 10]
    result = sort_by_set_bits(arr)
    assert sorted(result) == sorted(arr)
    counts = [_set_bits(n) for n in result]
    assert counts == sorted(counts, reverse=True)
    for bits in set(counts):
        assert [n for n in result if _set_bits(n) == bits] == [
            n for n in arr if _set_bits(n) == bits
        ]


def test_min_swaps_to_sort_sorted_input():
    assert min_swaps_to_sort(list(range(10))) == 0


def test_min_swaps_to_sort_bounds_and_no_mutation():
    arr = [10, 19, 6, 3, 5]
    swaps = min_swaps_to_sort(arr)
    assert 0 < swaps < len(arr)
    assert arr == [10, 19, 6, 3, 5]


def test_min_swaps_to_sort_single_transposition():
    assert min_swaps_to_sort([2, 1]) == 1