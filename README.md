# algobox

Small, pure-Python implementations of classic algorithms and data
structures. There are no runtime dependencies.

## Installation

```
pip install algobox
```

## Modules

- `algobox.arrays`: `two_sum`, `max_area`, `max_profit`, `single_number`,
  `three_sum`, `max_product`, `two_sum_sorted`, `majority_element`,
  `majority_elements`, `is_sorted_and_rotated`, `rotate`,
  `sliding_window_max`, `remove_duplicates`, `move_zeroes`, `divide_array`,
  `find_content_children`, `subarray_bitwise_ors`, `sort_colors`
- `algobox.searching`: `binary_search`, `search_rotated`, `contains_rotated`,
  `search_range`, `single_non_duplicate`, `peak_index`
- `algobox.bits`: `hamming_weight`, `is_power_of_two`, `min_bit_flips`
- `algobox.strings`: `make_fancy_string`, `word_break`, `maximum_gain`,
  `is_isomorphic`, `is_anagram`, `length_of_longest_substring`, `atoi`
- `algobox.dynamic`: `fib`, `pascal_triangle`, `minimum_total`,
  `coin_change`, `count_change`, `can_partition`, `unique_paths`,
  `unique_paths_with_obstacles`, `min_path_sum`, `min_falling_path_sum`
- `algobox.stacks`: `MinStack`, `QueueStack`, `StackQueue`,
  `next_greater_element`, `next_greater_elements`, `daily_temperatures`
- `algobox.linked_lists`: `ListNode`, `build_list`, `list_values`,
  `reverse_list`, `reorder_list`, `delete_middle`, `is_palindrome`,
  `swap_pairs`, `reverse_between`
- `algobox.trees`: `TreeNode`, `build_tree`, `inorder`, `preorder`,
  `level_order_bottom`, `kth_smallest`, `search_bst`, `is_valid_bst`

## Behaviour worth knowing

- `rotate`, `remove_duplicates`, `move_zeroes` and `sort_colors` change the
  list you pass in. `remove_duplicates` returns the number of unique values,
  which now fill the front of the list.
- `two_sum` and `two_sum_sorted` raise `ValueError` when no pair adds up to
  the target. `two_sum_sorted` returns 1-based indices.
- `search_range` returns a tuple `(first, last)`, or `(-1, -1)` when the
  target is absent. `binary_search` and `search_rotated` return `-1` when the
  target is absent.
- `coin_change` returns `-1` when the amount cannot be made. `coin_change`
  and `count_change` raise `ValueError` for an empty coin list, a coin that
  is not positive, or a negative amount.
- `hamming_weight` counts bits in the 32-bit two's-complement form, so
  negative numbers are accepted.
- `atoi` clamps its result to the signed 32-bit range.
- `MinStack`, `QueueStack` and `StackQueue` raise `IndexError` when read or
  popped while empty. All three support `len()`.
- Linked lists are built with `build_list` and read back with
  `list_values`. A `ListNode` also iterates over its values. Trees are built
  from level-order values with `build_tree`, where `None` marks a missing
  child.

## Examples

```python
from algobox.searching import binary_search, search_range
from algobox.dynamic import coin_change
from algobox.stacks import MinStack
from algobox.linked_lists import build_list, list_values, reverse_list
from algobox.trees import build_tree, inorder

binary_search([-1, 0, 3, 5, 9, 12], 9)   # 4
search_range([5, 7, 7, 8, 8, 10], 8)     # (3, 4)
coin_change([1, 2, 5], 11)               # 3

stack = MinStack()
stack.push(3)
stack.push(1)
stack.minimum()                          # 1

list_values(reverse_list(build_list([1, 2, 3])))  # [3, 2, 1]
inorder(build_tree([2, 1, 3]))                     # [1, 2, 3]
```

## What it does not do

This is a library only. It has no command-line tool and reads no files or
input of its own. You call its functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```