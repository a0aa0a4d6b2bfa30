# algobox

A small library of classic algorithms over lists, matrices and strings.
It is written in plain Python and has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Conventions

- Functions do not change their arguments. Functions that reorder data
  return new lists. For example, `rotate_clockwise` returns a new matrix, and
  `merge_gap` and `merge_swap` return a pair of lists.
- When a search finds nothing, the result is `None` and not a sentinel
  index. This applies to `first_and_last`, `search_rotated`,
  `find_step_key_index`, `majority_element`, `row_with_max_ones`,
  `second_most_repeated` and `rearrange_string`. `kth_smallest_in_ranges`
  gives `None` for each query that falls outside the covered count.
- Input that cannot be answered raises `ValueError`. Examples are empty
  sequences where a value is required, a `k` out of range, and strings of
  the wrong alphabet or odd length where balance is impossible.

## Modules

- `algobox.rearranging`: reordering lists.
  - `segregate_elements`, `rearrange_alternating`, `reverse_after`,
    `rotate_array`, `sort012`, `three_way_partition`
  - `next_permutation`, `merge_intervals`, `merge_gap`, `merge_swap`
  - `sort_by_set_bits`, `min_swaps_to_sort`
- `algobox.subarrays`: contiguous ranges and windows.
  - `max_subarray_sum`, `max_product`, `min_subarray_len`
  - `has_zero_sum_subarray`, `count_zero_sum_subarrays`, `trapped_water`
  - `longest_consecutive`, `min_swaps_to_group`, `find_min_diff`
  - `inversion_count`, `max_non_adjacent_sum`
- `algobox.optimization`: greedy and dynamic-programming answers.
  - `max_profit`, `max_profit_two_transactions`, `min_jumps`
  - `min_height_difference`, `max_job_profit`, `maximise_path_sum`
- `algobox.setops`: membership and k-sum problems.
  - `common_elements`, `is_subset`, `find_union`, `zero_sum_pairs`
  - `has_triplet_sum`, `four_sum`, `has_pair_with_difference`
  - `count_triplets_below`, `find_duplicate`, `missing_and_repeating`
- `algobox.numbers`: `factorial_digits`, `min_number_with_trailing_zeros`,
  `count_squares` and `product_except_self`.
- `algobox.selection`: order statistics.
  - `kth_small_large`, `sum_of_max_min`, `majority_elements`,
    `majority_element`
  - `median_of_equal_sorted`, `median_of_sorted`, `min_max`
  - `kth_element`, `kth_smallest_in_ranges`
- `algobox.searching`: `first_and_last`, `search_rotated`,
  `largest_in_rotated`, `find_step_key_index` and `values_equal_to_index`.
- `algobox.allocation`: binary or ternary search over the answer.
  - `soldiers_defeated`, `find_pages`, `min_cook_time`
  - `max_marker`, `chess_tournament`, `optimum_distance`
- `algobox.matrix`: matrix searches, rotations and areas.
  - `search_matrix`, `common_in_rows`, `kth_smallest`, `rotate_clockwise`
  - `max_value_difference`, `largest_histogram_area`, `max_rectangle_area`
  - `matrix_median`, `row_with_max_ones`, `sorted_matrix`, `spiral_order`
- `algobox.text_search`: substring search and windows.
  - `pattern_search` (prefix function), `rabin_karp_search` (double rolling
    hash)
  - `lps_length`, `min_chars_for_palindrome`, `are_rotations`
  - `smallest_window`, `smallest_distinct_window`
- `algobox.string_dp`: dynamic programming on strings.
  - `edit_distance`, `longest_common_subsequence`,
    `longest_repeating_subsequence`
  - `count_palindromic_subsequences`, `is_interleave`, `wildcard_match`
  - `word_break`, `longest_palindrome`, `word_wrap`
- `algobox.generation`: enumeration.
  - `string_permutations`, `subsequences`, `sentences`, `generate_ips`
  - `count_and_say`, `count_occurrences` (paths in a letter grid)
- `algobox.brackets`: `is_balanced`, `min_bracket_swaps`, `min_reversals`,
  `max_balanced_substrings` and `min_flips`.
- `algobox.text`: everyday string tasks.
  - `is_palindrome`, `are_isomorphic`, `keypad_sequence`, `roman_to_decimal`
  - `remove_consecutive`, `reverse_chars`, `second_most_repeated`,
    `duplicate_chars`
  - `group_anagrams`, `longest_common_prefix`, `rearrange_string`
  - `transform_cost`, `unoccupied_computers`, `min_moves_to_palindrome`

## Examples

```python
from algobox.subarrays import max_subarray_sum
from algobox.matrix import spiral_order
from algobox.text import roman_to_decimal
from algobox.searching import first_and_last
from algobox.rearranging import merge_intervals

max_subarray_sum([2, 3, -8, 7, -1, 2, 3])             # 11
spiral_order([[1, 2], [3, 4]])                       # [1, 2, 4, 3]
roman_to_decimal("MCMIV")                            # 1904
first_and_last([1, 3, 5, 5, 5, 5, 67, 123, 125], 5)  # (2, 5)
merge_intervals([[1, 4], [3, 5], [6, 8], [8, 9], [10, 12]])
# [[1, 5], [6, 9], [10, 12]]
```

## What it does not do

algobox is a library only. It has no command-line program, and nothing
reads input from the terminal. Call the functions from your own code.