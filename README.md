# algokit

A small collection of well-known algorithms over lists, strings, linked lists,
binary trees, stacks and queues, written as plain Python functions. It has no
runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.sequences`: `climb_stairs`, `third_max`, `three_sum_closest`,
  `four_sum`, `kids_with_candies`, `can_place_flowers`, `increasing_triplet`,
  `plus_one`, `product_except_self`, `remove_duplicates`, `search_insert`,
  `single_number`, `two_sum`
- `algokit.text`: `is_vowel`, `reverse_vowels`, `reverse_words`, `compress`,
  `str_str`, `length_of_last_word`, `longest_common_prefix`
- `algokit.two_pointer`: `is_subsequence`, `max_operations`, `max_area`,
  `move_zeroes`
- `algokit.hashing`: `find_difference`, `close_strings`, `unique_occurrences`
- `algokit.trees`: `TreeNode` (a dataclass with `val`, `left`, `right`,
  built with `TreeNode.from_level_order`; iterating a node yields its values
  in order), `sorted_array_to_bst`, `leaf_similar`, `max_depth`
- `algokit.linked_list`: `ListNode` (a dataclass with `val` and `next`,
  built with `ListNode.from_values` and read back with `to_list`),
  `delete_middle`, `pair_sum`, `odd_even_list`, `reverse_list`
- `algokit.stacks`: `asteroid_collision`, `decode_string`, `remove_stars`,
  `is_valid`
- `algokit.queues`: `RecentCounter`, `predict_party_victory`

## Examples

```python
from algokit.sequences import two_sum, climb_stairs
from algokit.stacks import decode_string
from algokit.linked_list import ListNode, reverse_list
from algokit.trees import TreeNode, max_depth
from algokit.queues import RecentCounter

two_sum([2, 7, 11, 15], 9)          # [0, 1]
climb_stairs(5)                     # 8
decode_string("3[a2[c]]")           # "accaccacc"

reverse_list(ListNode.from_values([1, 2, 3])).to_list()   # [3, 2, 1]
max_depth(TreeNode.from_level_order([3, 9, 20, None, None, 15, 7]))  # 3

counter = RecentCounter()
counter.ping(1)      # 1
counter.ping(100)    # 2
counter.ping(3001)   # 3
counter.ping(3002)   # 3
```

## Notes

- `move_zeroes`, `remove_duplicates` and `compress` change the list they are
  given. `remove_duplicates` and `compress` return how many leading items of
  the list hold the result. `can_place_flowers` leaves its input untouched.
- `reverse_list`, `odd_even_list` and `delete_middle` relink the nodes of the
  list they are given rather than copying it.
- Inputs that leave no answer raise `ValueError`: a negative count for
  `climb_stairs`, an empty list for `third_max`, `kids_with_candies`,
  `single_number` and `longest_common_prefix`, fewer than three numbers for
  `three_sum_closest`, a string without words for `reverse_words`, and a `*`
  with nothing to its left for `remove_stars`.
- `two_sum` returns an empty list and `str_str` returns `-1` when there is no
  match.

The package is a library only: it has no command-line tool.