# dsapractice

Classic data-structure and algorithm routines written as plain Python
functions and small classes. There are no third-party dependencies.

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

| Module | Contents |
| --- | --- |
| `dsapractice.binary_tree` | `Node`, `build_tree`, `height`, `is_balanced`, `leaves_at_same_level`, `left_view`, `reverse_level_order`, `zigzag_traversal` |
| `dsapractice.tree_paths` | `count_k_sum_paths`, `min_distance` |
| `dsapractice.bst` | `insert`, `from_values`, `is_bst`, `has_dead_end`, `count_pairs_with_sum`, `balance` |
| `dsapractice.linked_list` | `ListNode`, `DoublyNode`, `from_values`, `to_list`, `make_loop`, `has_loop`, `remove_loop`, `intersection`, `kth_from_end`, `middle`, `reverse`, `doubly_from_values`, `reverse_doubly` |
| `dsapractice.containers` | `ArrayStack`, `TwoStacks`, `ArrayQueue`, `StackOverflowError`, `insert_at_bottom`, `reverse_first_k` |
| `dsapractice.graphs` | `is_tree`, `GraphNode`, `clone_graph`, `EulerKind`, `euler_classification`, `shortest_safe_route` |
| `dsapractice.trie` | `Trie` with `insert`, `search` and `in` |
| `dsapractice.strings` | `longest_common_prefix`, `remove_duplicates`, `are_rotations`, `are_isomorphic`, `reverse_word`, `roman_to_int`, `search_pattern`, `wildcard_match`, `min_value_after_removals` |
| `dsapractice.dynamic_programming` | `count_boolean_parenthesizations`, `find_coin_game_winner`, `max_gold`, `unbounded_knapsack`, `lcs_of_three`, `longest_adjacent_difference_subsequence`, `max_sum_increasing_subsequence`, `keypad_count`, `optimal_game_amount`, `min_palindromic_cuts`, `max_subarray_sum`, `max_product_subarray` |
| `dsapractice.greedy` | `Item`, `fractional_knapsack`, `min_jumps`, `min_platforms`, `maximize_sum_after_negations`, `min_height_difference`, `min_subset_greater_sum` |
| `dsapractice.arrays` | `three_way_partition`, `alternate_signs`, `rotate_by_one`, `merge_max_heaps`, `is_palindromic_array`, `product_except_self`, `search_adjacent_within_k`, `smallest_subarray_with_sum`, `sort_by_set_bits`, `has_gcd_one`, `largest_zero_sum_submatrix` |
| `dsapractice.counting` | `is_subset`, `common_elements`, `count_frequent`, `count_pairs_with_sum`, `has_pair_with_difference` |

## Conventions

- Bad input raises an exception. Malformed input raises `ValueError`. An
  out-of-range position raises `IndexError`, as in `kth_from_end` or in
  `pop` on an empty container. `ArrayStack.push`, `TwoStacks.push1` and
  `TwoStacks.push2` raise `StackOverflowError` when there is no room left.
- A search that finds nothing returns `None`. This holds for `min_jumps`,
  `shortest_safe_route`, `search_adjacent_within_k` and
  `smallest_subarray_with_sum`.
- Functions that take sequences accept any iterable and return new lists.
  Some functions work in place on linked structures: `make_loop`,
  `remove_loop`, `reverse`, `reverse_doubly` and `balance` relink the nodes
  they are given.

## Examples

Binary trees are built from a level-order description in which `N` marks a
missing child:

```python
from dsapractice.binary_tree import build_tree, height, zigzag_traversal

root = build_tree("1 2 3 4 5 N 6")
height(root)            # 3
zigzag_traversal(root)  # [1, 3, 2, 4, 5, 6]
```

Binary search trees are built by insertion:

```python
from dsapractice.bst import from_values, is_bst, balance

root = from_values([10, 5, 20, 1])
is_bst(root)      # True
root = balance(root)
```

Linked lists:

```python
from dsapractice.linked_list import from_values, make_loop, has_loop, remove_loop, to_list

head = from_values([1, 3, 4])
make_loop(head, 2)   # the tail now links back to the second node
has_loop(head)       # True
remove_loop(head)
to_list(head)        # [1, 3, 4]
```

Strings:

```python
from dsapractice.strings import roman_to_int, search_pattern

roman_to_int("MCMXCIV")        # 1994
search_pattern("ab", "abcab")  # [1, 4]  (1-based positions)
```

Graphs:

```python
from dsapractice.graphs import is_tree, euler_classification, EulerKind

is_tree(3, [(0, 1), (1, 2)])                        # True
euler_classification([[1], [0]]) is EulerKind.PATH  # True
```

Dynamic programming:

```python
from dsapractice.dynamic_programming import keypad_count, max_subarray_sum

keypad_count(2)                     # 36
max_subarray_sum([1, 2, 3, -2, 5])  # 9
```

Containers:

```python
from dsapractice.containers import ArrayStack

stack = ArrayStack()
stack.push(2)
stack.push(3)
stack.pop()   # 3
```

## Notes on particular routines

- `three_way_partition` returns the values fully sorted. A sorted list
  satisfies the three-part partition.
- `longest_common_prefix` returns an empty string when the words share no
  prefix.
- `wildcard_match` treats `?` as exactly one character and `*` as one or
  more characters.
- `count_boolean_parenthesizations` counts modulo 1003.
- `min_height_difference` only considers adjustments that do not take a
  height below zero.

## What this package does not do

This is a library only. It installs no command-line program and does not
read test cases from standard input. You call the functions from your own
code.