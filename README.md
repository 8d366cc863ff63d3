# dsakit

Classic data structures, algorithms, interview-style problems and text
patterns in plain Python, with no third-party dependencies.

## Modules

- `dsakit.linked_lists`: the `ListNode` dataclass (`val`, `next`), the helpers
  `from_values` and `to_values`, and `has_cycle`, `detect_cycle`,
  `reverse_list`, `reverse_list_recursive`, `merge_two_lists`,
  `is_palindrome_list` (leaves the list as it found it), `swap_pairs`,
  `reverse_k_group` (raises `ValueError` for `k < 1`), `delete_duplicates` and
  `middle_node` (the second middle for even lengths). Functions that rearrange
  nodes work in place and return the new head.
- `dsakit.special_lists`: `RandomNode` with `copy_random_list`, a deep copy of a
  list with random pointers; `MultilevelNode` with `flatten`, which flattens a
  multilevel doubly linked list in place, depth first.
- `dsakit.containers`: `SinglyLinkedList` (`push_front`, `push_back`,
  `pop_front`, `pop_back`, `insert`, `search`), `DoublyLinkedList`
  (`push_front`, `push_back`, `pop_front`, `pop_back`), `CircularLinkedList`
  (`insert_at_head`, `insert_at_tail`, `delete_at_head`, `delete_at_tail`),
  and the stacks `Stack` and `LinkedStack` (`push`, `pop`, `top`, `len()`).
  The lists are iterable and print as text such as `1-> 2-> NULL`. Popping from
  an empty list or stack raises `IndexError`; deleting from an empty circular
  list does nothing.
- `dsakit.heap`: `MaxHeap` (`insert`, `delete_root`, iteration in array order,
  `len()`), and the in-place list functions `heapify`, `build_max_heap` and
  `heap_sort`.
- `dsakit.kqueue`: `KQueues(capacity, count)`, several FIFO queues numbered
  from 1 that share one fixed-size array. `enqueue` raises `OverflowError` when
  full, `dequeue` raises `IndexError` on an empty queue.
- `dsakit.trees`: `TreeNode`, `build_preorder` and `build_level_order` (with
  `-1` marking a missing child), `level_order`, `inorder`, `preorder`,
  `postorder`, and the binary search tree functions `bst_insert`,
  `bst_from_values`, `bst_min`, `bst_max` and `bst_delete`.
- `dsakit.array_problems`: `two_sum`, `is_valid_parentheses`,
  `next_greater_elements`, `largest_rectangle_area`, `sum_window_min_max`.
- `dsakit.backtracking`: `is_palindrome`, `partition_palindromes`,
  `combination_sum`, `check_valid_grid` (knight's tour check),
  `equal_half_binary_sequences` and `all_subsets`.
- `dsakit.searching`: `binary_search`, `binary_search_recursive` and
  `linear_search`, each returning an index or `-1`.
- `dsakit.sorting`: in-place `bubble_sort`, `insertion_sort`,
  `selection_sort`, `merge_sort` and `quick_sort`, plus the building blocks
  `merge` and `partition`.
- `dsakit.numbers`: `gcd`, `gcd_brute`, `gcd_euclid`, `gcd_recursive`, `lcm`,
  `is_armstrong`, `decimal_to_binary`, `binary_to_decimal`, `is_power_of_two`,
  `is_power_of_two_bitwise`, `is_prime`, `fibonacci`, `is_even`,
  `reverse_digits`, `count_set_bits`, `sum_of_digits` and `dispense_notes`
  (greedy split into 100, 50, 20 and 1 notes).
- `dsakit.basics`: `array_sum`, `diagonal_sum`, `diagonal_sum_naive`,
  `min_value`, `max_value`, `max_row_sum`, `max_column_sum`,
  `max_subarray_sum`, `swap_alternate` and `counting_sequence`.
- `dsakit.patterns`: square, triangle, pyramid, diamond and butterfly patterns
  of numbers, letters and stars, each returned as one newline-joined string
  with trailing blanks stripped from every row (for example `number_square`,
  `floyd_triangle`, `number_pyramid`, `hollow_diamond`, `butterfly`,
  `letter_butterfly`, `swastik`).

## Examples

```python
from dsakit.linked_lists import from_values, reverse_list, to_values
from dsakit.sorting import merge_sort
from dsakit.array_problems import two_sum
from dsakit.patterns import number_pyramid

print(to_values(reverse_list(from_values([1, 2, 3]))))  # [3, 2, 1]

values = [12, 4, 556, 23, 5]
merge_sort(values)  # sorts in place
print(values)  # [4, 5, 12, 23, 556]

print(two_sum([2, 7, 11, 15], 9))  # [0, 1]

print(number_pyramid(3))
#     1
#   1 2 1
# 1 2 3 2 1
```

## What it does not do

This is a library only. It has no command-line program and reads nothing from
standard input: every structure and function takes its data as Python
arguments and returns its result.

## Running the tests

```
pip install -e .[test]
pytest
```