"""Stack-based scans for nearest greater or smaller neighbours."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate

MODULUS = 1_000_000_007
"""Modulus applied to the result of :func:`sum_subarray_mins`."""

_Pop = Callable[[int, int], bool]

_BRACKETS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_BRACKETS.values())


def _previous_indices(values: Sequence[int], pop: _Pop) -> list[int]:
    """For each position, the index of the nearest earlier value that survives
    ``pop(earlier, current)``, or -1."""
    stack: list[int] = []
    result = []
    for i, value in enumerate(values):
        while stack and pop(values[stack[-1]], value):
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def _next_indices(values: Sequence[int], pop: _Pop) -> list[int]:
    """For each position, the index of the nearest later value that survives
    ``pop(later, current)``, or ``len(values)``."""
    size = len(values)
    stack: list[int] = []
    result = [size] * size
    for i in reversed(range(size)):
        value = values[i]
        while stack and pop(values[stack[-1]], value):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def next_greater_element(nums1: Iterable[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the first greater value after it in ``nums2``.

    Values without a greater successor map to -1. Every value of ``nums1``
    must occur in ``nums2``.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]!r} does not occur in nums2") from None


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Next greater value of each element, treating ``nums`` as circular."""
    size = len(nums)
    result = [-1] * size
    stack: list[int] = []
    for i in reversed(range(2 * size)):
        value = nums[i % size]
        while stack and nums[stack[-1]] <= value:
            stack.pop()
        result[i % size] = nums[stack[-1]] if stack else -1
        stack.append(i % size)
    return result


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """State of a row of asteroids after all collisions.

    Positive values move right, negative values move left; the smaller of two
    colliding asteroids explodes and equal ones both do.
    """
    stack: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            stack.append(asteroid)
            continue
        while stack and 0 < stack[-1] < -asteroid:
            stack.pop()
        if stack and stack[-1] == -asteroid:
            stack.pop()
        elif not stack or stack[-1] < 0:
            stack.append(asteroid)
    return stack


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closing one.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
            continue
        if not stack:
            return False
        if _BRACKETS.get(char) != stack.pop():
            return False
    return not stack


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under a histogram."""
    following = _next_indices(heights, operator.gt)
    preceding = _previous_indices(heights, operator.ge)
    return max(
        (h * (nxt - prev - 1) for h, nxt, prev in zip(heights, following, preceding)),
        default=0,
    )


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest rectangle of ``'1'`` cells in a grid of ``'0'``/``'1'``."""
    if not matrix or not matrix[0]:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Sum of the minimum of every contiguous subarray, modulo :data:`MODULUS`."""
    following = _next_indices(arr, operator.ge)
    preceding = _previous_indices(arr, operator.gt)
    total = sum(
        (i - prev) * (nxt - i) * value
        for i, (value, nxt, prev) in enumerate(zip(arr, following, preceding))
    )
    return total % MODULUS


def _contribution(values: Sequence[int], following: list[int], preceding: list[int]) -> int:
    return sum(
        (i - prev) * (nxt - i) * value
        for i, (value, nxt, prev) in enumerate(zip(values, following, preceding))
    )


def sub_array_ranges(nums: Sequence[int]) -> int:
    """Sum over all contiguous subarrays of (largest - smallest)."""
    largest = _contribution(
        nums, _next_indices(nums, operator.lt), _previous_indices(nums, operator.le)
    )
    smallest = _contribution(
        nums, _next_indices(nums, operator.gt), _previous_indices(nums, operator.ge)
    )
    return largest - smallest


def trap(heights: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    left = list(accumulate(heights, max))
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(lo, hi) - h
        for h, lo, hi in zip(heights, left, right)
        if h < lo and h < hi
    )