# dsakit

A small collection of classic data-structure and algorithm routines written in
plain Python, with no third-party dependencies.

## Install

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsakit.arrays`: `sort_array_by_parity`, `contains_duplicates`,
  `number_of_good_pairs`, `move_zeroes`, `shuffle_array`, `running_sum`.
- `dsakit.search`: `binary_search`, `linear_search`,
  `index_of_all_occurrences`, `min_and_max`, `peak_in_mountain_array`,
  `search_rotated_sorted`.
- `dsakit.sorting`: `bubble_sort`, `insertion_sort`, `merge_sort`,
  `quick_sort`, `selection_sort`, `frequency_sort`, `sort_colors`.
- `dsakit.stack`: the `Stack` and `Queue` classes, plus
  `next_greater_element`, `next_greater_element_mapped`, `reverse_stack`,
  `stock_span`, `is_valid_brackets`.
- `dsakit.linked_list`: the `Node`, `LinkedList` (singly linked),
  `DoublyList` and `ListNode` classes, plus `has_cycle`, `middle_node`,
  `reverse_list`.
- `dsakit.text`: `remove_occurrences`, `is_anagram`, `defang_ip_address`,
  `num_jewels_in_stones`, `restore_string`, `reverse_chars`, `reverse_words`,
  `run_length_encode`, `to_lower_case`, `array_strings_are_equal`,
  `is_palindrome`.

Most list routines work in place and also return the list they were given:
`sort_array_by_parity`, `move_zeroes`, `bubble_sort`, `insertion_sort`,
`selection_sort` and `reverse_chars`. `sort_colors` and `quick_sort` sort in
place and return nothing; `quick_sort(arr, start=0, end=None)` sorts the
inclusive range `arr[start..end]`, the whole list by default. `merge_sort`
returns a new sorted list.

## Examples

```python
from dsakit.search import binary_search, min_and_max
from dsakit.sorting import merge_sort
from dsakit.stack import Stack, Queue, is_valid_brackets
from dsakit.linked_list import LinkedList, ListNode, reverse_list
from dsakit.text import run_length_encode

binary_search([5, 6, 7, 8, 9, 10, 11, 12, 13], 13)   # 8
min_and_max([90, 1, 40])                              # (1, 90)
merge_sort([64, 25, 11, 22, 12])                      # [11, 12, 22, 25, 64]
is_valid_brackets("{[]}")                             # True
run_length_encode("aaabbccccd")                       # "a3b2c4d1"

stack = Stack()
stack.push(5)
stack.push("hello")
stack.pop()                                           # "hello"

queue = Queue([2, 3])
queue.dequeue()                                       # 2

linked = LinkedList()
linked.push_back(1)
linked.push_back(2)
str(linked)                                           # "1->2->"

head = reverse_list(ListNode.from_values([1, 2, 3]))
list(head)                                            # [3, 2, 1]
```

## Errors

- `min_and_max` raises `ValueError` on an empty sequence.
- `shuffle_array(n, nums)` raises `ValueError` when `nums` holds fewer than
  `2 * n` numbers or `n` is negative.
- `remove_occurrences` raises `ValueError` when `part` is empty.
- `Stack.pop`, `Stack.peek`, `Queue.dequeue`, `Queue.front`, and `pop_front`
  and `pop_back` of `LinkedList` and `DoublyList` raise `IndexError` when
  there is nothing to take.

## Command line

The `dsakit` command runs a binary search over the sample sorted list
`[5, 6, 7, 8, 9, 10, 11, 12, 13]` and prints the index it found, or `-1`.
The target is an optional argument and defaults to 13:

```
dsakit
dsakit 9
```