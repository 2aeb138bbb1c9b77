import random
import statistics

import pytest

from algokit.streams import (
    KthLargest,
    MedianFinder,
    MinStack,
    StockSpanner,
    Twitter,
)


def test_min_stack_example():
    stack = MinStack()
    stack.push(-2)
    stack.push(0)
    stack.push(-3)
    assert stack.get_min() == -3
    stack.pop()
    assert stack.top() == 0
    assert stack.get_min() == -2


def test_min_stack_matches_builtin_min():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(40)]
    stack = MinStack()
    for i, value in enumerate(values):
        stack.push(value)
        assert stack.get_min() == min(values[: i + 1])
    for i in range(len(values) - 1, 0, -1):
        stack.pop()
        assert stack.get_min() == min(values[:i])
        assert stack.top() == values[i - 1]


@pytest.mark.parametrize("method", ["pop", "top", "get_min"])
def test_min_stack_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(MinStack(), method)()


def test_median_finder_example():
    finder = MedianFinder()
    finder.add_num(1)
    finder.add_num(2)
    assert finder.find_median() == 1.5
    finder.add_num(3)
    assert finder.find_median() == 2


def test_median_finder_agrees_with_statistics():
    rng = random.Random(11)
    seen = []
    finder = MedianFinder()
    for _ in range(60):
        value = rng.randint(-100, 100)
        seen.append(value)
        finder.add_num(value)
        assert finder.find_median() == statistics.median(seen)


def test_median_finder_empty_raises():
    with pytest.raises(ValueError):
        MedianFinder().find_median()


def test_kth_largest_example():
    tracker = KthLargest(3, [4, 5, 8, 2])
    assert [tracker.add(v) for v in (3, 5, 10, 9, 4)] == [4, 5, 5, 8, 8]


def test_kth_largest_agrees_with_sorting():
    rng = random.Random(5)
    initial = [rng.randint(0, 100) for _ in range(5)]
    tracker = KthLargest(4, initial)
    seen = list(initial)
    for _ in range(30):
        value = rng.randint(0, 100)
        seen.append(value)
        assert tracker.add(value) == sorted(seen, reverse=True)[3]


def test_kth_largest_rejects_zero_k():
    with pytest.raises(ValueError):
        KthLargest(0, [1])


def test_stock_spanner_example():
    spanner = StockSpanner()
    prices = [100, 80, 60, 70, 60, 75, 85]
    assert [spanner.next(p) for p in prices] == [1, 1, 1, 2, 1, 4, 6]


def test_stock_spanner_rising_prices_span_everything():
    spanner = StockSpanner()
    spans = [spanner.next(p) for p in range(1, 9)]
    assert spans == list(range(1, 9))


def test_twitter_follow_and_unfollow():
    twitter = Twitter()
    twitter.post_tweet(1, 5)
    assert twitter.get_news_feed(1) == [5]
    twitter.follow(1, 2)
    twitter.post_tweet(2, 6)
    assert twitter.get_news_feed(1) == [6, 5]
    twitter.unfollow(1, 2)
    assert twitter.get_news_feed(1) == [5]


def test_twitter_feed_limited_to_most_recent_ten():
    twitter = Twitter()
    ids = list(range(100, 115))
    for tweet_id in ids:
        twitter.post_tweet(7, tweet_id)
    assert twitter.get_news_feed(7) == ids[::-1][:10]


def test_twitter_self_follow_does_not_duplicate():
    twitter = Twitter()
    twitter.post_tweet(3, 42)
    twitter.follow(3, 3)
    assert twitter.get_news_feed(3) == [42]
    assert twitter.get_news_feed(4) == []