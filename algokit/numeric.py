"""Counting, searching and arithmetic puzzles over integers."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences."""
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        raise ValueError("both sequences are empty")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2.0


def _parts_needed(nums: Sequence[int], limit: int) -> int:
    parts = 1
    running = 0
    for value in nums:
        if running + value <= limit:
            running += value
        else:
            parts += 1
            running = value
    return parts


def split_array(nums: Sequence[int], k: int) -> int:
    """Smallest possible largest sum when ``nums`` is split into ``k``
    contiguous parts."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if k > len(nums):
        raise ValueError("k must not exceed the number of values")
    low, high = max(nums), sum(nums)
    while low <= high:
        mid = (low + high) // 2
        if _parts_needed(nums, mid) > k:
            low = mid + 1
        else:
            high = mid - 1
    return low


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Probability of ending with at most ``n`` points when drawing uniform
    values 1..``max_pts`` until the total reaches ``k``."""
    if k == 0 or n >= k - 1 + max_pts:
        return 1.0
    if max_pts < 1:
        raise ValueError("max_pts must be at least 1")
    probs = [1.0] + [0.0] * n
    window = 1.0
    result = 0.0
    for points in range(1, n + 1):
        probs[points] = window / max_pts
        if points < k:
            window += probs[points]
        else:
            result += probs[points]
        if points >= max_pts:
            window -= probs[points - max_pts]
    return result


def maximum69_number(num: int) -> int:
    """Largest number reachable by turning at most one 6 into a 9."""
    return int(str(num).replace("6", "9", 1))


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer missing from the sorted sequence ``arr``."""
    position = bisect_left(range(len(arr)), k, key=lambda i: arr[i] - i - 1)
    return position + k


def is_power_of_four(n: int) -> bool:
    """Whether ``n`` is an integer power of four."""
    return n > 0 and n & (n - 1) == 0 and n.bit_length() % 2 == 1


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The ``k`` most frequent values, least frequent of them first.

    Ties in frequency favour the larger value.
    """
    counts = Counter(nums)
    best = heapq.nlargest(k, ((freq, value) for value, freq in counts.items()))
    return [value for _, value in reversed(best)]


def is_n_straight_hand(hand: Sequence[int], group_size: int) -> bool:
    """Whether ``hand`` splits into runs of ``group_size`` consecutive cards."""
    if group_size < 1:
        raise ValueError("group_size must be at least 1")
    if len(hand) % group_size:
        return False
    counts = Counter(hand)
    for card in sorted(counts):
        needed = counts[card]
        if needed == 0:
            continue
        for offset in range(group_size):
            if counts[card + offset] < needed:
                return False
            counts[card + offset] -= needed
    return True