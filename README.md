# solvekit

Algorithm and data-structure routines in plain Python, using only the
standard library. Every routine is an ordinary function or class that takes
Python values (lists, strings, integers) and returns Python values.

## Installation

```
pip install .
```

## Modules

### `solvekit.linked_list`

- `ListNode(val=0, next=None)`: a dataclass node; iterating over a node yields
  the values from that node to the end of the list.
- `from_values(values)` builds a list (`None` for no values);
  `to_values(head)` returns its values as a Python list.
- `add_two_numbers(l1, l2)` adds two numbers stored as little-endian digit lists.
- `remove_values(nums, head)` returns a new list without the nodes whose value
  is in `nums`.

### `solvekit.binary_tree`

- `TreeNode(val=0, left=None, right=None)`: a dataclass node.
- `delete_nodes(root, to_delete)` prunes the tree in place and returns the roots
  of the remaining forest.
- `get_directions(root, start_value, dest_value)` returns the path between two
  nodes as a string of `U`, `L` and `R`; raises `ValueError` if a value is not
  in the tree.
- `create_binary_tree(descriptions)` builds a tree from `[parent, child, is_left]`
  triples; raises `ValueError` when no root can be found.

### `solvekit.fenwick`

- `FenwickTree(size)`: prefix sums with point updates. Methods: `build`,
  `update`, `query(count)` (sum of `[0, count)`), `query_range(start, stop)`,
  `query_suffix(start)`, `get`, `set` (returns whether the value changed) and
  `find_last_prefix(total)`. Out-of-range indices raise `IndexError`.
- `count_teams(rating)` counts strictly increasing or decreasing index triples.

### `solvekit.hashing`

- `PolyHash(values)`: prefix hashes of a string or integer sequence modulo
  2^61 − 1, with `get_hash(left, right)` for an inclusive slice. The base is
  chosen at random when the module is imported, so hash values differ between
  runs but are consistent within one.
- `mod_mul(a, b)`, `count_distinct_subarrays(nums, k, p)` and
  `minimum_cost_to_build(target, words, costs)` (−1 when impossible).

### `solvekit.prefix_sum`

- `CumulativeSum2D(width, height)` with `add`, `build` and
  `query(sx, sy, gx, gy)` over half-open ranges.
- `count_balanced_submatrices(grid)` counts top-left-anchored submatrices with
  at least one `X` and as many `X` as `Y`.

### `solvekit.graphs`

`find_the_city`, `max_probability`, `minimum_conversion_cost` (−1 when a letter
cannot be converted) and `min_days_to_disconnect`.

### `solvekit.dynamic`

`min_height_shelves`, `stone_game_ii`, `minimum_cut_cost`, `max_points`,
`combination_sum_unique` and `min_steps`.

### `solvekit.text`

`reverse_parentheses`, `minimum_deletions`, `maximum_gain`, `remove_digit`,
`appeal_sum`, `length_of_longest_substring`, `minimum_pushes`,
`encrypted_string`, `valid_strings`, `smallest_string`, `count_of_atoms` and
`count_seniors`. Malformed input to `reverse_parentheses`, `count_of_atoms` and
`appeal_sum` raises `ValueError`.

### `solvekit.arrays`

`can_complete_circuit`, `candy`, `range_sum`, `min_swaps`, `sort_jumbled`,
`minimum_card_pickup`, `survived_robots_healths`, `minimum_cut_cost_greedy`,
`results_array`, `maximum_value_sum`, `smallest_distance_pair`,
`num_magic_squares_inside`, `lemonade_change` and `counting_sort`.

### `solvekit.design`

- `RandomizedSet(rng=None)`: `insert`, `remove` and `get_random` in constant
  time, plus `len()` and `in`. Pass a `random.Random` for reproducible picks;
  `get_random` on an empty set raises `IndexError`.
- `KthLargest(k, nums)`: `add(val)` returns the k-th largest value seen so far
  (the smallest one while fewer than `k` have been seen).

## Examples

```python
from solvekit.fenwick import FenwickTree
from solvekit.linked_list import add_two_numbers, from_values, to_values
from solvekit.text import count_of_atoms

tree = FenwickTree(8)
tree.update(3, 5)
tree.query(4)             # 5

to_values(add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4])))
# [7, 0, 8]

count_of_atoms("Mg(OH)2")  # "H2MgO2"
```

```python
import random
from solvekit.design import KthLargest, RandomizedSet

stream = KthLargest(3, [4, 5, 8, 2])
stream.add(3)   # 4

items = RandomizedSet(random.Random(0))
items.insert(1)
items.get_random()  # 1
```

## What it does not do

solvekit is a library only: it has no command-line program, reads no input
files and writes no output. Callers pass in Python values and use what is
returned.

## Running the tests

```
pip install .[test]
pytest
```