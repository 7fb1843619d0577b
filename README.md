# algokit

Compact solutions to classic algorithm and data-structure problems, grouped
by technique. Pure Python, no runtime dependencies, Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.arrays`

Two pointers, sliding windows, greedy choices and in-place rearrangement:
`can_place_flowers`, `max_area`, `kids_with_candies`, `find_kth_largest`,
`find_max_average`, `move_zeroes`, `product_except_self`,
`find_content_children`, `divide_array`, `sort_colors`, `sorted_squares`,
`sequential_digits`, `number_of_beams`, `reverse_string` and `find_max_k`.

`move_zeroes`, `sort_colors` and `reverse_string` change the list they are
given and return `None`. `can_place_flowers` works on a copy.
`find_kth_largest` and `find_max_average` raise `ValueError` when `k` is out
of range.

### `algokit.text`

String processing: `gcd_of_strings`, `is_subsequence`, `max_vowels`,
`reverse_vowels`, `merge_alternately`, `reverse_words`, `append_characters`,
`maximum_odd_binary_number`, `reverse_prefix` and `score_of_string`.
Vowels are the lowercase letters `a e i o u`.

### `algokit.anagrams`

Character counting: `close_strings`, `group_anagrams`, `min_steps`,
`is_anagram`, `common_chars`, `first_uniq_char` and
`max_length_between_equal_characters`. `first_uniq_char` returns the index
of the alphabetically smallest character that occurs exactly once, or -1.

### `algokit.hashing`

Lookups with sets and dictionaries: `find_difference`, `unique_occurrences`,
`find_matrix`, `height_checker`, `min_operations`, `find_winners`,
`relative_sort_array`, `find_error_nums`, `check_subarray_sum`,
`contains_duplicate` and `two_sum`. `two_sum` raises `ValueError` when no
pair adds up to the target; `check_subarray_sum` rejects `k == 0`.

### `algokit.stacks`

Stack-based algorithms and small containers:

- `RecentCounter.ping(t)` returns how many pings fall within `[t - 3000, t]`.
- `TwoStackQueue` offers `push`, `pop`, `peek`, `empty` and `len()`;
  `pop` and `peek` raise `IndexError` on an empty queue.
- `RandomizedSet` offers `insert`, `remove`, `get_random`, `in` and `len()`;
  it takes an optional `random.Random` for repeatable choices.
- `asteroid_collision`, `remove_stars`, `daily_temperatures`, `eval_rpn`
  (integer `+ - * /`, division truncating toward zero) and
  `sum_subarray_mins` (modulo 10**9 + 7).

### `algokit.linked_lists`

`ListNode` (iterable over its values) with `build_list` and `list_values`,
plus `reverse_list`, `delete_middle`, `odd_even_list` and
`remove_nth_from_end`.

### `algokit.trees`

`TreeNode` (iterating yields the subtree's nodes in pre-order) with
`build_tree`, which takes level-order values where `None` marks a missing
child. Also `right_side_view`, `max_depth`, `amount_of_time`,
`leaf_similar`, `max_ancestor_diff`, `pseudo_palindromic_paths`,
`range_sum_bst`, `search_bst` and `sum_numbers`.

### `algokit.search`

Graph and grid search: `can_visit_all_rooms`, `letter_combinations`,
`nearest_exit`, `subsets` and `word_search`.

### `algokit.dynamic`

Dynamic programming: `number_of_arithmetic_slices`, `climb_stairs`, `rob`,
`k_inverse_pairs`, `longest_common_subsequence`, `length_of_lis`,
`max_length`, `job_scheduling`, `min_falling_path_sum`, `find_paths`,
`num_decodings` and `tribonacci`.

## Examples

```python
from algokit.stacks import asteroid_collision, TwoStackQueue
from algokit.trees import build_tree, right_side_view
from algokit.dynamic import longest_common_subsequence

asteroid_collision([5, 10, -5])                  # [5, 10]
right_side_view(build_tree([1, 2, 3, None, 5]))  # [1, 3, 5]
longest_common_subsequence("abcde", "ace")       # 3

queue = TwoStackQueue()
queue.push(1)
queue.push(2)
queue.pop()                                      # 1
```

## What it does not do

algokit is a library only: it has no command-line program and reads no
input files. Call its functions from your own code.