# algobox

A library of compact, well-known algorithms and small data structures,
using nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

The package itself exports nothing; import the module you need.

| Module | Contents |
| --- | --- |
| `algobox.nodes` | `ListNode` and `TreeNode`, with `build_list`, `list_values`, `build_tree` and `tree_values` to convert to and from plain lists (trees in level order, `None` for a missing child) |
| `algobox.linked_lists` | `merge_two_lists`, `rotate_right`, `reverse_between`, `reverse_list`, `split_list_to_parts`, `middle_node`, `spiral_matrix`, `insert_greatest_common_divisors`, `modified_list` |
| `algobox.trees` | `is_symmetric`, `invert_tree`, `is_sub_path`, `reverse_odd_levels` |
| `algobox.parentheses` | `is_valid`, `generate_parenthesis`, `min_add_to_make_valid`, `min_swaps`, `diff_ways_to_compute` |
| `algobox.patterns` | `is_match` (`.` and `*` wildcards), `str_str`, `shortest_palindrome`, `repeated_substring_pattern`, `longest_prefix`, `check_inclusion`, `length_of_longest_substring`, `find_the_longest_substring` |
| `algobox.backtracking` | `letter_combinations`, `permute`, `permute_unique`, `solve_n_queens`, `subsets`, `next_permutation`, `exist` |
| `algobox.strings` | `is_palindrome`, `uncommon_from_sentences`, `is_prefix_of_word`, `count_consistent_strings`, `are_sentences_similar`, `get_lucky`, `add_spaces`, `repeat_limited_string`, `can_change`, `min_extra_char`, `min_length`, `can_make_subsequence`, `maximum_length`, `largest_number` |
| `algobox.trie` | `PrefixTrie` (with `insert` and `score`) and `sum_prefix_scores` |
| `algobox.digits` | `lexical_order`, `find_kth_number`, `min_bit_flips`, `longest_common_prefix` |
| `algobox.design` | `AllOne`, `MyCalendar`, `MyCalendarTwo`, `CircularDeque`, `CustomStack` |
| `algobox.scheduling` | `smallest_chair`, `max_two_events`, `most_booked`, `min_groups`, `find_min_difference`, `smallest_range` |
| `algobox.grids` | `flood_fill`, `open_lock`, `robot_sim`, `minimum_obstacles` (0-1 breadth-first search), `minimum_time` (heap-ordered search) |
| `algobox.graphs` | `max_target_nodes`, `valid_arrangement` (Eulerian path over directed pairs) |
| `algobox.search` | `search`, `min_eating_speed`, `minimum_size` |
| `algobox.heaps` | `max_kelements`, `pick_gifts`, `find_score` |
| `algobox.arrays` | `two_sum`, `max_profit`, `move_zeroes`, `wiggle_sort`, `find_disappeared_numbers`, `max_chunks_to_sorted`, `max_width_ramp`, `array_rank_transform`, `xor_queries`, `check_if_exist`, `final_prices`, `get_final_state`, `find_maximum_score` |
| `algobox.subarrays` | `can_arrange`, `min_subarray`, `missing_rolls`, `longest_subarray`, `divide_players`, `max_count`, `continuous_subarrays`, `maximum_beauty`, `is_array_special`, `max_subarray_sum` |

## Examples

```python
from algobox.nodes import build_list, list_values
from algobox.linked_lists import reverse_list, rotate_right

head = build_list([1, 2, 3, 4, 5])
print(list_values(rotate_right(head, 2)))  # [4, 5, 1, 2, 3]
print(list_values(reverse_list(build_list([1, 2, 3]))))  # [3, 2, 1]
```

```python
from algobox.patterns import is_match, shortest_palindrome

is_match("aab", "c*a*b")        # True
shortest_palindrome("abcd")     # "dcbabcd"
```

```python
from algobox.design import MyCalendar, CustomStack

calendar = MyCalendar()
calendar.book(10, 20)   # True
calendar.book(15, 25)   # False

stack = CustomStack(3)
stack.push(1)
stack.push(2)
stack.increment(2, 100)
stack.pop()             # 102
```

```python
from algobox.backtracking import solve_n_queens, subsets

len(solve_n_queens(4))  # 2
subsets([1, 2])         # [[1, 2], [1], [2], []]
```

## Conventions

- Where a routine has no answer, it returns the value its docstring names,
  usually `-1`, an empty list or an empty string.
- Input that cannot be worked on raises `ValueError`, for example a negative
  `k` in `rotate_right`, a `k` outside `1..n` in `find_kth_number`, or an
  empty list where at least one value is needed.
- Functions that rearrange a list in place (`next_permutation`,
  `move_zeroes` and `wiggle_sort`) change the list they are given and return
  `None`, like `list.sort`. `flood_fill` recolours the image in place and
  returns the same object. Several linked-list and tree routines relink or
  change the nodes they are given; `rotate_right` and `modified_list` build
  new lists instead.

## What it does not do

This is a library only: it has no command-line program, and it reads and
writes no files.