"""Data structures fed one value at a time."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterable
from itertools import chain, count

FEED_SIZE = 10


class MinStack:
    """Stack that reports its minimum in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def _peek(self) -> tuple[int, int]:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        current_min = min(self._items[-1][1], val) if self._items else val
        self._items.append((val, current_min))

    def pop(self) -> None:
        """Remove the top value."""
        self._peek()
        self._items.pop()

    def top(self) -> int:
        """Return the top value."""
        return self._peek()[0]

    def get_min(self) -> int:
        """Return the smallest value on the stack."""
        return self._peek()[1]


class MedianFinder:
    """Running median of a stream of numbers."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap, stored negated
        self._high: list[int] = []  # min-heap

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        heapq.heappush(self._low, -num)
        if self._high and -self._low[0] > self._high[0]:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) > len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Return the median of all numbers added so far."""
        if not self._low:
            raise ValueError("no numbers have been added")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return (-self._low[0] + self._high[0]) / 2.0


class KthLargest:
    """Tracks the k-th largest value of a growing collection."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap: list[int] = []
        for num in nums:
            self._push(num)

    def _push(self, val: int) -> None:
        heapq.heappush(self._heap, val)
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)

    def add(self, val: int) -> int:
        """Add ``val`` and return the current k-th largest value."""
        self._push(val)
        return self._heap[0]


class StockSpanner:
    """Computes the span of each daily stock price."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []
        self._day = -1

    def next(self, price: int) -> int:
        """Return how many consecutive days up to today had price <= ``price``."""
        self._day += 1
        while self._stack and self._stack[-1][0] <= price:
            self._stack.pop()
        previous = self._stack[-1][1] if self._stack else -1
        self._stack.append((price, self._day))
        return self._day - previous


class Twitter:
    """Minimal social feed: posting, following and a news feed."""

    def __init__(self) -> None:
        self._clock = count()
        self._following: defaultdict[int, set[int]] = defaultdict(set)
        self._tweets: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)

    def post_tweet(self, user_id: int, tweet_id: int) -> None:
        """Record a new tweet by ``user_id``."""
        self._tweets[user_id].append((next(self._clock), tweet_id))

    def get_news_feed(self, user_id: int) -> list[int]:
        """Return up to ten most recent tweet ids from the user and followees."""
        sources = chain(
            self._tweets.get(user_id, ()),
            *(self._tweets.get(f, ()) for f in self._following.get(user_id, ())),
        )
        return [tweet_id for _, tweet_id in heapq.nlargest(FEED_SIZE, sources)]

    def follow(self, follower_id: int, followee_id: int) -> None:
        """Make ``follower_id`` follow ``followee_id``."""
        if follower_id == followee_id:
            return
        self._following[follower_id].add(followee_id)

    def unfollow(self, follower_id: int, followee_id: int) -> None:
        """Stop ``follower_id`` following ``followee_id``."""
        if follower_id in self._following:
            self._following[follower_id].discard(followee_id)