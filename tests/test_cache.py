"""Tests for the bounded FIFO caches."""

import threading

import pytest

from xlit.src.services.cache import BoundedCache, CacheTier


class TestBoundedCache:
    """FIFO order by first insertion, bulk eviction when full."""

    def test_never_exceeds_maxsize(self):
        cache = BoundedCache(10, evict_fraction=0.2)
        for i in range(100):
            cache[f"k{i}"] = i
            assert len(cache) <= 10

    def test_evicts_oldest_share_in_one_pass(self):
        cache = BoundedCache(10, evict_fraction=0.2)
        for i in range(10):
            cache[i] = i
        cache[10] = 10
        # Two oldest dropped, room made for the new one
        assert 0 not in cache
        assert 1 not in cache
        assert 2 in cache
        assert 10 in cache
        assert len(cache) == 9

    def test_update_keeps_position(self):
        cache = BoundedCache(3, evict_fraction=0.1)
        cache["a"] = 1
        cache["b"] = 2
        cache["c"] = 3
        cache["a"] = 10
        cache["d"] = 4
        assert "a" not in cache
        assert list(cache) == ["b", "c", "d"]

    def test_evicts_at_least_one(self):
        cache = BoundedCache(2, evict_fraction=0.01)
        assert cache.evict_count == 1

    def test_popitem_on_empty_raises(self):
        with pytest.raises(KeyError):
            BoundedCache(5).popitem()


class TestCacheTier:
    """Named caches with counters."""

    def test_default_sizes(self):
        stats = CacheTier().stats()
        assert stats["transliteration"]["maxsize"] == 10000
        assert stats["preview"]["maxsize"] == 2000
        assert stats["messages"]["maxsize"] == 1000

    def test_get_or_compute_counts_hits_and_misses(self):
        tier = CacheTier({"detection": 10})
        calls = []

        def compute():
            calls.append(1)
            return "value"

        assert tier.get_or_compute("detection", "k", compute) == "value"
        assert tier.get_or_compute("detection", "k", compute) == "value"
        assert len(calls) == 1
        assert tier.stats()["detection"] == {"size": 1, "maxsize": 10, "hits": 1, "misses": 1}

    def test_get_default(self):
        tier = CacheTier({"messages": 10})
        assert tier.get("messages", "missing") is None
        assert tier.get("messages", "missing", "x") == "x"

    def test_clear_one(self):
        tier = CacheTier({"a": 10, "b": 10})
        tier.set("a", "k", 1)
        tier.set("b", "k", 2)
        tier.clear("a")
        assert tier.get("a", "k") is None
        assert tier.get("b", "k") == 2

    def test_clear_all(self):
        tier = CacheTier({"a": 10, "b": 10})
        tier.set("a", "k", 1)
        tier.set("b", "k", 2)
        tier.clear()
        assert all(s["size"] == 0 for s in tier.stats().values())

    def test_clear_keeps_named_caches(self):
        tier = CacheTier({"messages": 10, "translation": 10})
        tier.set("messages", "m", 1)
        tier.set("translation", "t", 2)
        tier.clear(keep=("messages",))
        assert tier.get("messages", "m") == 1
        assert tier.get("translation", "t") is None

    def test_unknown_cache_name_raises(self):
        with pytest.raises(KeyError):
            CacheTier({"a": 10}).get("nope", "k")

    def test_concurrent_writers_stay_bounded(self):
        tier = CacheTier({"translation": 50})

        def writer(offset):
            for i in range(500):
                tier.set("translation", f"{offset}-{i}", i)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert tier.stats()["translation"]["size"] <= 50
