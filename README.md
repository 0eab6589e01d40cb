# algokit

A small collection of classic algorithms on integer arrays, strings,
singly linked lists and answer-space binary search. It is plain Python with
no runtime dependencies. It is a library only: it has no command-line tool.

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

### `algokit.arrays`

- `two_sum(nums, target)`: indices `[i, j]` of two numbers adding up to `target`, or `[]`.
- `three_sum(nums)`: every distinct triple summing to zero, each sorted, the whole list in sorted order.
- `three_sum_closest(nums, target)`: the sum of three numbers closest to `target`; raises `ValueError` for fewer than three numbers.
- `trap(height)`: units of rain water trapped between bars (`0` for an empty map).
- `max_sub_array(nums)`: largest sum of a non-empty contiguous subarray; raises `ValueError` on an empty array.
- `find_kth_positive(arr, k)`: the k-th positive integer missing from a sorted array.
- `row_and_maximum_ones(mat)`: a tuple `(row, count)` for the first row with the most ones; raises `ValueError` on an empty matrix.
- `find_peaks(mountain)`: indices of elements strictly greater than both neighbours.
- `max_removal(nums, queries)`: how many range queries `[l, r]` can be dropped while the rest still bring `nums` to zero, or `-1` if even all of them cannot.

### `algokit.strings`

- `my_atoi(s)`: parse a leading signed decimal integer after leading spaces, clamped to the 32-bit range; `0` when there are no digits.
- `roman_value(symbol)`: the value of one Roman numeral symbol, or `0` for anything else.
- `roman_to_int(s)`: convert a Roman numeral to an integer.

### `algokit.linked_list`

- `ListNode(val=0, next=None)`: a node of a singly linked list; nodes compare by identity.
- `build_list(values)` and `to_values(head)`: convert between Python iterables and lists of nodes.
- `reverse_list(head)`: reverse in place and return the new head.
- `reverse_k_group(head, k)`: reverse in groups of `k`, leaving a short final group as is; raises `ValueError` if `k < 1`.
- `middle_node(head)`: the middle node, the second of the two for an even length.
- `has_cycle(head)`, `detect_cycle(head)`: cycle detection with two pointers; `detect_cycle` returns the node where the cycle begins, or `None`.
- `get_intersection_node(head_a, head_b)`: the first node shared by both lists, or `None`.
- `delete_node(node)`: remove a node's value given only that node; raises `ValueError` for the tail node.

### `algokit.binary_search`

- `find_min(nums)`: minimum of a rotated ascending array of distinct values.
- `find_peak_element(nums)`: the index of some element greater than its neighbours.
- `single_non_duplicate(nums)`: the single value in a sorted array of pairs.
- `split_array(nums, k)`: the smallest possible largest part sum when split into `k` consecutive parts.
- `min_eating_speed(piles, h)`: the slowest speed that finishes all piles within `h` hours.
- `ship_within_days(weights, days)`: the least ship capacity that ships everything in order within `days`.
- `smallest_divisor(nums, threshold)`: the smallest divisor keeping the sum of rounded-up quotients within `threshold`.
- `min_days(bloom_day, m, k)`: the first day `m` bouquets of `k` adjacent flowers can be made, or `-1`.

These functions raise `ValueError` for empty input or parameters with no valid answer (for example fewer hours than piles), except `min_days`, which returns `-1`.

## Example

```python
from algokit.arrays import two_sum, trap
from algokit.strings import roman_to_int
from algokit.linked_list import build_list, reverse_k_group, to_values

two_sum([2, 7, 11, 15], 9)                      # [0, 1]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])      # 6
roman_to_int("MCMXCIV")                         # 1994
to_values(reverse_k_group(build_list([1, 2, 3, 4, 5]), 2))  # [2, 1, 4, 3, 5]
```