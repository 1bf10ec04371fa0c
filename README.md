# algokit

A small collection of classic algorithms in plain Python, with no
dependencies outside the standard library.

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

### `algokit.linked_list`

`ListNode` is a singly linked node with `val` and `next`. Nodes compare by
identity. `ListNode.from_values(values)` builds a list (an empty input gives
`None`), and `node.values()` reads it back as a Python list.

Functions working on chains of nodes:

- `has_cycle(head)`: whether following `next` ever loops back
- `detect_cycle(head)`: the node where a cycle begins, or `None`
- `intersection_node(head_a, head_b)`: the first node both lists share, or `None`
- `remove_nth_from_end(head, n)`: unlinks the `n`-th node from the end;
  raises `ValueError` unless `1 <= n <= len(list)`
- `reverse_list(head)`: reverses in place, returns the new head
- `merge_two_lists(list1, list2)`: splices two sorted lists into one; on
  equal values the node from `list2` comes first
- `delete_middle(head)`: unlinks the node at index `len // 2`; a one-node
  list becomes `None`
- `middle_node(head)`: the middle node, the second of the two for an even length
- `is_palindrome(head)`
- `delete_node(node)`: removes a node without the head by copying its
  successor into it; raises `ValueError` for the last node
- `odd_even_list(head)`: nodes at even indices first, then those at odd ones
- `rotate_right(head, k)`: rotates `k` places to the right

```python
from algokit.linked_list import ListNode, reverse_list, rotate_right

head = ListNode.from_values([1, 2, 3, 4, 5])
print(reverse_list(head).values())          # [5, 4, 3, 2, 1]

head = ListNode.from_values([1, 2, 3, 4, 5])
print(rotate_right(head, 2).values())       # [4, 5, 1, 2, 3]
```

### `algokit.tree`

`TreeNode` is a binary tree node with `val`, `left` and `right`.
`lca_deepest_leaves(root)` returns the root of the smallest subtree that
holds every deepest leaf.

### `algokit.arrays`

- `two_sum(nums, target)`: indices `(i, j)` with `i < j` of two values adding
  up to `target`, the first such pair in order, or `None`
- `max_profit(prices)`: best gain from one buy and a later sell, or 0;
  raises `ValueError` for an empty list
- `majority_element(nums)`: the value filling more than half the list, or -1
- `remove_duplicates(nums)`: compacts a sorted list in place so its distinct
  values lead it, and returns their count
- `missing_number(nums)`: the one value of `0..len(nums)` that is absent
- `move_zeroes(nums)`: moves zeros to the end in place, keeping order
- `rotate_matrix(matrix)`: rotates a square matrix a quarter turn clockwise,
  in place; raises `ValueError` if it is not square
- `sort_colors(nums)`: sorts a list of 0s, 1s and 2s in place by counting

### `algokit.search`

- `find_min(nums)`: smallest value of a rotated sorted array of distinct values
- `find_peak_element(nums)`: index of a value larger than its neighbours
- `search_rotated(nums, target)`: membership in a rotated sorted array that
  may hold duplicates
- `can_finish(piles, h, speed)`: whether eating `speed` per hour clears all
  piles within `h` hours; raises `ValueError` if `speed < 1`
- `min_eating_speed(piles, h)`: the lowest such speed, capped at the largest
  pile

`find_min`, `find_peak_element` and `min_eating_speed` raise `ValueError`
for empty input.

```python
from algokit.search import find_min, min_eating_speed

print(find_min([4, 5, 6, 7, 0, 1, 2]))      # 0
print(min_eating_speed([3, 6, 7, 11], 8))   # 4
```

## What it does not do

algokit is a library only: it has no command-line tool, and its functions
take and return plain Python objects without reading or writing files.