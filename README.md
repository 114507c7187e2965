# dsadaily

A library of well-known algorithm solutions, grouped by topic and written as
plain Python functions over lists, strings and simple binary trees. It has no
dependencies beyond the standard library.

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

- `dsadaily.arrays` – `max_overlapping_intervals`, `inversion_count`,
  `missing_in_range`, `largest_number`, `h_index`, `closest_pair`,
  `push_zeros_to_end`, `trapped_water`, `segregate_zeros_ones`, `intersection`,
  `increasing_triplet`, `next_palindrome`.
- `dsadaily.hashing` – `count_subarrays_with_xor`, `union`,
  `longest_equal_sum_span`, `are_isomorphic`, `count_submatrices_with_sum`,
  `has_pythagorean_triplet`, `diagonal_view`, `is_toeplitz`.
- `dsadaily.windows` – sliding-window and monotonic-stack problems:
  `longest_majority_subarray`, `longest_two_distinct`, `max_subarray_xor`,
  `longest_k_unique_substring`, `min_window`, `count_first_min_subarrays`,
  `sum_subarray_minimums` (modulo 10**9 + 7), `min_k_bit_flips`.
- `dsadaily.strings` – `largest_swap`, `generate_ips`, `gray_code`,
  `remove_spaces`, `urlify`, `can_form_palindrome`.
- `dsadaily.dp` – `dice_throw_ways`, `max_chocolates`, `count_partitions`,
  `max_profit_with_fee`, `count_binary_strings`, `paint_fence_ways`,
  `target_sum_ways`.
- `dsadaily.trees` – the `TreeNode` dataclass (`data`, `left`, `right`),
  `build_tree` from level-order values with `None` for missing children, and
  `top_view`, `vertical_order`, `count_k_sum_paths`, `min_burn_time`,
  `distribute_candies`, `largest_bst`, `find_pre_suc`, `count_bsts`.
- `dsadaily.greedy` – `huffman_codes` and `stable_marriage`.
- `dsadaily.graphs` – `oranges_rot_time`, `longest_cycle`, `can_finish`,
  `min_height_roots`, `count_shortest_paths`, `articulation_points`,
  `min_connect_cost`.

## Example

```python
from dsadaily.arrays import trapped_water, largest_number
from dsadaily.strings import generate_ips
from dsadaily.trees import build_tree, top_view

trapped_water([3, 0, 1, 0, 4, 0, 2])   # 10
largest_number([3, 30, 34, 5, 9])      # "9534330"
generate_ips("255678166")              # ["25.56.78.166", "255.6.78.166", "255.67.8.166", "255.67.81.66"]

root = build_tree([1, 2, 3, None, 4, None, 5])
top_view(root)                          # [2, 1, 3, 5]
```

## Behaviour notes

- Every function returns a new value and leaves its arguments unchanged;
  `push_zeros_to_end` and `segregate_zeros_ones`, for instance, return new
  lists.
- Problems with no answer return the conventional value rather than raising:
  `-1` from `oranges_rot_time`, `longest_cycle`, `longest_k_unique_substring`
  and `min_k_bit_flips`, `[-1]` from `articulation_points`, `[]` from
  `increasing_triplet`, and `""` from `min_window`.
- Inputs that cannot be handled raise `ValueError`: for example an empty list
  passed to `largest_number`, `next_palindrome` or `max_profit_with_fee`, a
  window size that does not fit in `max_subarray_xor`, a non-digit string of
  valid length in `generate_ips`, or a target value that is absent from the
  tree in `min_burn_time`.

## What it does not do

The package is a library only. It has no command-line program, reads no
input files and keeps no state between calls.