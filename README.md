# drills

Small implementations of classic algorithm exercises, grouped by technique.
They have no dependencies outside the standard library. Every function takes
plain Python values (lists, strings, nested lists) and returns plain values.
Three functions change the list they are given in place and return `None`.
They are `rotate`, `move_zeroes` and `sort_colors`.

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

### `drills.arrays`

`two_sum`, `max_profit`, `replace_elements`, `can_complete_circuit`,
`single_number`, `find_lucky`, `max_product`, `running_sum`,
`num_identical_pairs`, `num_water_bottles`, `majority_element`,
`majority_elements`, `rotate`, `interchangeable_rectangles`,
`maximum_difference`, `missing_number`, `move_zeroes`, `trap`,
`max_sub_array`, `sort_colors`

Some of these raise errors or return sentinel values:

- `two_sum` returns every (earlier, later) index pair found in one pass, as
  one flat list. The list is empty when no pair exists.
- `max_profit`, `max_product`, `majority_element` and `max_sub_array` raise
  `ValueError` when the input is empty.
- `num_water_bottles` raises `ValueError` when the exchange rate is below 2.
- `can_complete_circuit`, `find_lucky` and `maximum_difference` return `-1`
  when there is no answer.

### `drills.strings`

`is_anagram`, `is_subsequence`, `group_anagrams`, `rotate_string`

- `group_anagrams` returns the groups in the order in which each group was
  first seen.
- `rotate_string` treats two empty strings as not being rotations of each
  other.

### `drills.searching`

`find_min`, `find_peak_element`, `search_rotated`, `binary_search`,
`is_perfect_square`, `search_matrix`, `search_sorted_rows_and_columns`,
`min_eating_speed`

- The search functions return an index, or `-1` when the target is absent.
- `search_matrix` expects a matrix that ascends when read row by row.
- `search_sorted_rows_and_columns` expects a matrix whose rows and columns
  each ascend.
- `find_min`, `find_peak_element` and `min_eating_speed` raise `ValueError`
  when the input is empty.

### `drills.dynamic`

`fib`, `longest_common_subsequence`, `longest_palindrome_subseq`, `rob`,
`rob_circular`, `unique_paths`, `unique_paths_with_obstacles`,
`min_path_sum`, `climb_stairs`, `min_distance`, `min_cost_climbing_stairs`

- Grid functions raise `ValueError` for an empty grid.
- `unique_paths` raises `ValueError` for dimensions that are not positive.
- `fib` and `climb_stairs` raise `ValueError` for a negative `n`.

### `drills.stacks`

`is_valid_parentheses`, `next_greater_element`, `next_greater_elements`,
`daily_temperatures`

- `next_greater_element` raises `KeyError` when a value of the first list
  does not occur in the second.
- `next_greater_elements` wraps around the end of the list.

## Example

```python
from drills.arrays import two_sum, trap
from drills.searching import binary_search
from drills.dynamic import min_distance
from drills.stacks import daily_temperatures

two_sum([2, 7, 11, 15], 9)                 # [0, 1]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
binary_search([-1, 0, 3, 5, 9, 12], 9)      # 4
min_distance("horse", "ros")               # 3
daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73])
# [1, 1, 4, 2, 1, 1, 0, 0]
```

## What it does not do

This is a library of functions only. It installs no command and reads no
input files.