import pytest

from algokit.caches import MISSING, LFUCache, LRUCache


def test_lru_worked_example():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == MISSING
    cache.put(4, 4)
    assert cache.get(1) == MISSING
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lru_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    cache.put(3, 30)
    assert cache.get(2) == MISSING
    assert cache.get(1) == 11
    assert cache.get(3) == 30


def test_lru_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key * 2)
        assert len(cache) <= 3
    assert [key in cache for key in (7, 8, 9)] == [True, True, True]
    assert 6 not in cache


def test_lru_miss_on_empty():
    assert LRUCache(1).get(5) == MISSING


@pytest.mark.parametrize("capacity", [0, -1])
def test_lru_rejects_bad_capacity(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)


def test_lfu_worked_example():
    cache = LFUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == MISSING
    assert cache.get(3) == 3
    cache.put(4, 4)
    assert cache.get(1) == MISSING
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lfu_evicts_least_frequent():
    cache = LFUCache(2)
    cache.put(1, 100)
    cache.put(2, 200)
    cache.get(1)
    cache.get(1)
    cache.get(2)
    cache.put(3, 300)
    assert cache.get(2) == MISSING
    assert cache.get(1) == 100
    assert cache.get(3) == 300


def test_lfu_update_keeps_single_entry():
    cache = LFUCache(1)
    cache.put(7, 70)
    cache.put(7, 71)
    assert len(cache) == 1
    assert cache.get(7) == 71


def test_lfu_zero_capacity_stores_nothing():
    cache = LFUCache(0)
    cache.put(1, 1)
    assert cache.get(1) == MISSING
    assert len(cache) == 0


def test_lfu_rejects_negative_capacity():
    with pytest.raises(ValueError):
        LFUCache(-1)