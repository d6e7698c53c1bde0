# algosolve

Small, self-contained solutions to well-known algorithm exercises, grouped
by theme. The functions take plain Python values (ints, strings, lists, and
the node classes for linked lists and trees) and return a result. The package
has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algosolve.arithmetic` | `minimum_sum`, `tribonacci`, `find_complement`, `is_palindrome_number`, `check_perfect_number`, `is_power_of_three`, `is_prime`, `prime_palindrome`, `compute_area`, `reverse_bits`, `is_ugly`, `num_trees`, `unique_paths` |
| `algosolve.linkedlists` | `ListNode` (with `values()`), `from_values`, `is_palindrome_list`, `reverse_list`, `reverse_between` |
| `algosolve.trees` | `TreeNode` (with `inorder()`), `NaryNode`, `level_order`, `recover_tree`, `is_symmetric`, `is_valid_bst` |
| `algosolve.graphs` | `network_delay_time`, `make_connected`, `max_probability` |
| `algosolve.text` | `number_of_beams`, `partition_labels`, `large_group_positions`, `equal_frequency`, `repeated_string_match`, `reverse_vowels`, `reverse_words`, `roman_to_int`, `slowest_key`, `seconds_to_remove_occurrences` |
| `algosolve.searching` | `search_matrix`, `search_rotated`, `search_insert`, `two_sum`, `suggested_products`, `top_k_frequent` |
| `algosolve.checks` | `is_valid_parentheses`, `is_valid_sudoku`, `is_alien_sorted` |
| `algosolve.arrays` | `most_visited`, `next_permutation`, `zero_filled_subarrays`, `num_pairs_divisible_by_60`, `plus_one`, `remove_duplicates`, `remove_element`, `maximum_wealth`, `spiral_order`, `subsets` |
| `algosolve.ordering` | `reconstruct_queue`, `get_order`, `sort_colors`, `sort_by_bits`, `sort_people` |

## Examples

```python
from algosolve.text import roman_to_int
from algosolve.graphs import network_delay_time
from algosolve.linkedlists import from_values, reverse_list
from algosolve.trees import TreeNode, is_valid_bst

roman_to_int("MCMXCIV")                                      # 1994
network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2)  # 2
reverse_list(from_values([1, 2, 3])).values()                # [3, 2, 1]
is_valid_bst(TreeNode(2, TreeNode(1), TreeNode(3)))          # True
```

## In-place functions

Some functions change the list or nodes you pass and return `None` or a
count rather than a new value:

- `next_permutation`, `sort_colors` and `recover_tree` rearrange in place and
  return `None`.
- `remove_duplicates` and `remove_element` compact the list in place and
  return how many items at the front are kept.
- `reverse_list` and `reverse_between` relink the nodes and return the new
  head.

`plus_one` returns a new list and leaves its argument untouched.

## Errors

Inputs outside what an exercise allows raise an exception instead of
returning a sentinel:

- `ValueError` from `minimum_sum` (not a positive four-digit number),
  `tribonacci` and `num_trees` (negative `n`), `unique_paths` (non-positive
  grid size), `slowest_key` (no key presses), `top_k_frequent` (negative `k`),
  `is_valid_sudoku` (board not 9 by 9, or a cell that is neither a digit nor
  `"."`), `most_visited` (no sectors, or a sector out of range), `plus_one`
  (no digits), `maximum_wealth` (no customers) and `sort_people` (names and
  heights of different lengths, or repeated heights).
- `IndexError` from `reverse_between` when the positions do not fit the list.

Where an exercise itself defines a "no answer" value, that value is kept:
`network_delay_time`, `make_connected` and `repeated_string_match` return
`-1`, `max_probability` returns `0.0`, and `two_sum` returns an empty list.

## What it does not do

This is a library only. It has no command-line program, reads no input
files and keeps no stored state; call the functions from your own code.