"""Sliding-window scans over sequences and strings."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Sequence


def _at_most_k_distinct(nums: Sequence[int], k: int) -> int:
    if k <= 0:
        return 0
    counts: Counter[int] = Counter()
    left = 0
    total = 0
    for right, value in enumerate(nums):
        counts[value] += 1
        while len(counts) > k:
            counts[nums[left]] -= 1
            if counts[nums[left]] == 0:
                del counts[nums[left]]
            left += 1
        total += right - left + 1
    return total


def subarrays_with_k_distinct(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays holding exactly ``k`` distinct values."""
    return _at_most_k_distinct(nums, k) - _at_most_k_distinct(nums, k - 1)


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones possible after flipping at most ``k`` zeros."""
    zeros = 0
    left = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        if zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        if zeros <= k:
            best = max(best, right - left + 1)
    return best


def number_of_substrings(s: str) -> int:
    """Number of substrings containing each of ``a``, ``b`` and ``c`` at least once."""
    counts: Counter[str] = Counter()
    left = 0
    total = 0
    for right, char in enumerate(s):
        counts[char] += 1
        while counts["a"] and counts["b"] and counts["c"]:
            total += len(s) - right
            counts[s[left]] -= 1
            left += 1
    return total


def max_score(cards: Sequence[int], k: int) -> int:
    """Best total of ``k`` cards taken from either end of the row."""
    if not 0 <= k <= len(cards):
        raise ValueError("k must be between 0 and the number of cards")
    left_sum = sum(cards[:k])
    right_sum = 0
    best = left_sum
    for dropped, taken in zip(reversed(cards[:k]), reversed(cards[len(cards) - k:])):
        left_sum -= dropped
        right_sum += taken
        best = max(best, left_sum + right_sum)
    return best


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("k must be at least 1")
    window: deque[int] = deque()
    result = []
    for i, value in enumerate(nums):
        if window and window[0] == i - k:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(s):
        seen = last_seen.get(char, -1)
        if seen >= left:
            left = seen + 1
        best = max(best, right - left + 1)
        last_seen[char] = right
    return best


def character_replacement(s: str, k: int) -> int:
    """Longest run of one repeated character after at most ``k`` replacements."""
    counts: Counter[str] = Counter()
    left = 0
    best = 0
    max_freq = 0
    for right, char in enumerate(s):
        counts[char] += 1
        max_freq = max(max_freq, counts[char])
        if (right - left + 1) - max_freq > k:
            counts[s[left]] -= 1
            max_freq = 0
            left += 1
        if (right - left + 1) - max_freq <= k:
            best = max(best, right - left + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` containing every character of ``t``.

    Returns an empty string when there is none, or when ``t`` is empty.
    """
    if not t or len(t) > len(s):
        return ""
    needed: defaultdict[str, int] = defaultdict(int, Counter(t))
    matched = 0
    left = 0
    best_len = len(s) + 1
    best_start = -1
    for right, char in enumerate(s):
        if needed[char] > 0:
            matched += 1
        needed[char] -= 1
        while matched == len(t):
            if right - left + 1 < best_len:
                best_len = right - left + 1
                best_start = left
            needed[s[left]] += 1
            if needed[s[left]] > 0:
                matched -= 1
            left += 1
    return "" if best_start == -1 else s[best_start:best_start + best_len]


def total_fruit(fruits: Sequence[int]) -> int:
    """Longest contiguous stretch holding at most two kinds of fruit."""
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, fruit in enumerate(fruits):
        counts[fruit] += 1
        while len(counts) > 2:
            counts[fruits[left]] -= 1
            if counts[fruits[left]] == 0:
                del counts[fruits[left]]
            left += 1
        best = max(best, right - left + 1)
    return best


def _at_most_sum(nums: Sequence[int], goal: int) -> int:
    if goal < 0:
        return 0
    left = 0
    total = 0
    window = 0
    for right, value in enumerate(nums):
        window += value
        while window > goal:
            window -= nums[left]
            left += 1
        total += right - left + 1
    return total


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Number of contiguous subarrays of a binary sequence summing to ``goal``."""
    return _at_most_sum(nums, goal) - _at_most_sum(nums, goal - 1)