# algokit

A collection of classic algorithms and data structures written in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.caches` | `LRUCache`, `LFUCache` |
| `algokit.streams` | `MinStack`, `MedianFinder`, `KthLargest`, `StockSpanner`, `Twitter` |
| `algokit.linked_lists` | `ListNode`, `RandomNode`, `from_values`, `to_values`, `copy_random_list`, `merge_k_lists`, `reverse_k_group`, `rotate_right` |
| `algokit.monotonic` | `next_greater_element`, `next_greater_elements`, `asteroid_collision`, `is_valid_parentheses`, `largest_rectangle_area`, `maximal_rectangle`, `sum_subarray_mins`, `sub_array_ranges`, `trap` |
| `algokit.windows` | `subarrays_with_k_distinct`, `longest_ones`, `number_of_substrings`, `max_score`, `max_sliding_window`, `length_of_longest_substring`, `character_replacement`, `min_window`, `total_fruit`, `num_subarrays_with_sum` |
| `algokit.backtracking` | `solve_sudoku`, `exist`, `word_break`, `add_operators`, `combination_sum3` |
| `algokit.numeric` | `find_median_sorted_arrays`, `split_array`, `new21_game`, `maximum69_number`, `find_kth_positive`, `is_power_of_four`, `top_k_frequent`, `is_n_straight_hand` |

### Notes on behaviour

- `LRUCache.get` and `LFUCache.get` return `-1` (`algokit.caches.MISSING`) for
  an absent key. `LRUCache` needs a capacity of at least 1; an `LFUCache` of
  capacity 0 accepts no entries. Ties in `LFUCache` go to the least recently
  used key.
- `MinStack.pop`, `top` and `get_min` raise `IndexError` on an empty stack;
  `MedianFinder.find_median` raises `ValueError` before any number is added.
- `Twitter.get_news_feed` returns at most ten tweet ids, newest first.
- `solve_sudoku` fills the board in place and returns whether it succeeded.
- `sum_subarray_mins` returns its result modulo `1_000_000_007`
  (`algokit.monotonic.MODULUS`).
- Invalid arguments, such as a non-positive window size or a split count larger
  than the input, raise `ValueError`.

## Examples

```python
from algokit.caches import LRUCache
from algokit.linked_lists import from_values, to_values, rotate_right
from algokit.windows import max_sliding_window
from algokit.monotonic import trap

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)          # 1
cache.put(3, 3)       # evicts key 2
cache.get(2)          # -1

to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 2))   # [4, 5, 1, 2, 3]

max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3)           # [3, 3, 5, 5, 6, 7]

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])                  # 6
```

## What it does not do

algokit is a library only: it has no command-line interface, and nothing in it
stores data beyond the lifetime of the objects you create.

## Running the tests

```
pip install .[test]
pytest
```