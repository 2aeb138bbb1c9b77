"""Fixed-capacity key/value caches with LRU and LFU eviction."""

from __future__ import annotations

from collections import OrderedDict

MISSING = -1
"""Value returned by ``get`` for a key that is not in the cache."""


class LRUCache:
    """Cache that evicts the least recently used entry when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it as most recently used."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value


class LFUCache:
    """Cache that evicts the least frequently used entry when full.

    Ties between equally frequent keys go to the least recently used one.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._min_freq = 0
        self._values: dict[int, int] = {}
        self._freqs: dict[int, int] = {}
        self._buckets: dict[int, OrderedDict[int, None]] = {}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def _touch(self, key: int) -> None:
        freq = self._freqs[key]
        bucket = self._buckets[freq]
        del bucket[key]
        if not bucket:
            del self._buckets[freq]
            if self._min_freq == freq:
                self._min_freq += 1
        self._freqs[key] = freq + 1
        self._buckets.setdefault(freq + 1, OrderedDict())[key] = None

    def get(self, key: int) -> int:
        """Return the value for ``key`` and count the access."""
        if self.capacity == 0 or key not in self._values:
            return MISSING
        self._touch(key)
        return self._values[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting if the cache is full."""
        if self.capacity == 0:
            return
        if key in self._values:
            self._values[key] = value
            self._touch(key)
            return
        if len(self._values) == self.capacity:
            bucket = self._buckets[self._min_freq]
            victim, _ = bucket.popitem(last=False)
            if not bucket:
                del self._buckets[self._min_freq]
            del self._values[victim]
            del self._freqs[victim]
        self._values[key] = value
        self._freqs[key] = 1
        self._buckets.setdefault(1, OrderedDict())[key] = None
        self._min_freq = 1