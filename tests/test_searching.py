import pytest

from algobox.searching import (
    find_step_key_index,
    first_and_last,
    largest_in_rotated,
    search_rotated,
    values_equal_to_index,
)


def test_first_and_last_example():
    assert first_and_last([1, 3, 5, 5, 5, 5, 67, 123, 125], 5) == (2, 5)


def test_first_and_last_spans_every_copy():
    arr = [1, 1, 2, 4, 4, 4, 7, 9, 9]
    for x in set(arr):
        first, last = first_and_last(arr, x)
        assert arr[first] == x == arr[last]
        assert last - first + 1 == arr.count(x)


def test_first_and_last_absent():
    assert first_and_last([1, 3, 5], 4) is None
    assert first_and_last([], 4) is None


def test_search_rotated_finds_every_value():
    nums = [4, 5, 6, 7, 0, 1, 2]
    for value in nums:
        assert nums[search_rotated(nums, value)] == value


@pytest.mark.parametrize("shift", range(8))
def test_search_rotated_all_rotations(shift):
    base = list(range(8))
    nums = base[shift:] + base[:shift]
    for value in base:
        assert nums[search_rotated(nums, value)] == value


def test_search_rotated_absent():
    assert search_rotated([4, 5, 6, 7, 0, 1, 2], 3) is None


@pytest.mark.parametrize("shift", range(6))
def test_largest_in_rotated_all_rotations(shift):
    base = [2, 5, 8, 11, 13, 20]
    arr = base[shift:] + base[:shift]
    assert largest_in_rotated(arr) == 20


def test_largest_in_rotated_single_and_equal():
    assert largest_in_rotated([9]) == 9
    assert largest_in_rotated([4, 4, 4]) == 4


def test_largest_in_rotated_empty():
    with pytest.raises(ValueError):
        largest_in_rotated([])


def test_find_step_key_index_first_occurrence():
    arr = [4, 5, 6, 7, 6]
    index = find_step_key_index(arr, 1, 6)
    assert arr[index] == 6
    assert 6 not in arr[:index]


def test_find_step_key_index_absent():
    assert find_step_key_index([4, 5, 6], 1, 9) is None


def test_values_equal_to_index():
    assert values_equal_to_index([15, 2, 45, 4, 7]) == [2, 4]


def test_values_equal_to_index_none_match():
    assert values_equal_to_index([5, 5, 5]) == []