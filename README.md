# algokit

A collection of classic algorithm solutions written as plain Python functions
and small classes. It has no runtime dependencies and needs Python 3.10 or
later.

## Installation

```
pip install .
```

## Modules

- `algokit.arrays`: `sorted_squared_array`, `two_sum`, `two_sum_sorted`,
  `remove_duplicates`, `max_area`, `find_all_duplicates`, `search_range`,
  `product_except_self`, `merge_intervals`, `find_rotation_pivot`,
  `binary_search`, `search_rotated`
- `algokit.integers`: `is_palindrome`, `reverse_int`, `int_to_roman`,
  `roman_to_int`, `my_atoi`
- `algokit.strings`: `is_isomorphic`, `is_valid_parentheses`,
  `zigzag_convert`, `longest_common_prefix`, `longest_palindrome_length`,
  `length_of_longest_substring`, `longest_word`, `generate_parentheses`,
  `letter_combinations`, `reduce_string`, `collapse_runs`
- `algokit.ksum`: `three_sum`, `three_sum_closest`, `k_sum`, `four_sum`
- `algokit.linked_lists`: `ListNode`, `from_iterable`, `to_list`,
  `merge_two_lists`, `merge_k_lists`, `add_two_numbers`, `remove_nth_from_end`
- `algokit.trees`: `TreeNode`, `tree_from_level_order`, `sum_of_left_leaves`
- `algokit.dynamic`: `min_coins`, `coin_table`, `coin_choices`,
  `longest_increasing_subsequence`, `max_path_sum`, `MinStack`

## Behaviour worth knowing

- `two_sum` and `two_sum_sorted` return a tuple of positions, or `None` when
  no pair adds up to the target. `two_sum_sorted` uses 1-based positions.
- `merge_intervals` returns a list of `(start, end)` tuples.
- `remove_duplicates` changes the list in place and returns its new length.
- `reverse_int` returns 0 when the result does not fit in 32 bits;
  `my_atoi` clamps to the 32-bit range.
- `roman_to_int`, `letter_combinations`, `zigzag_convert`, `k_sum`,
  `three_sum_closest`, `find_all_duplicates`, `find_rotation_pivot`,
  `remove_nth_from_end`, `min_coins` and `coin_choices` raise `ValueError`
  on input they cannot handle.
- `coin_table` holds `None` for amounts that cannot be made.
- `MinStack.pop`, `top` and `minimum` raise `IndexError` on an empty stack.

## Examples

```python
from algokit.arrays import two_sum, merge_intervals
from algokit.integers import int_to_roman, roman_to_int
from algokit.linked_lists import from_iterable, merge_two_lists, to_list
from algokit.ksum import three_sum
from algokit.dynamic import MinStack, coin_choices

two_sum([2, 7, 11, 15], 9)                        # (0, 1)
merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
# [(1, 6), (8, 10), (15, 18)]
int_to_roman(1234)                                # "MCCXXXIV"
roman_to_int("MCCXXXIV")                          # 1234
three_sum([-1, 0, 1, 2, -1, -4])                  # [(-1, -1, 2), (-1, 0, 1)]

merged = merge_two_lists(from_iterable([1, 2, 4]), from_iterable([1, 3, 4]))
to_list(merged)                                   # [1, 1, 2, 3, 4, 4]

stack = MinStack()
for value in (10, 20, 4):
    stack.push(value)
stack.minimum()                                   # 4

coin_choices([1, 3, 4], 10)                       # [3, 3, 4]
```

## What it does not do

This is a library only: it has no command-line program and reads no input
files. Each function works on the Python values passed to it.

## Running the tests

```
pip install ".[test]"
pytest
```