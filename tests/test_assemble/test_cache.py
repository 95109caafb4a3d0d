"""Tests for the sharded resolution cache."""

import threading

from zephyr.assemble import ResolutionCache
from zephyr.model import Declaration, UtilityResolution

RESULT = UtilityResolution(properties=(Declaration("padding", "1rem"),))


class _Counter:
    def __init__(self, result=RESULT):
        self.calls = 0
        self.result = result

    def __call__(self):
        self.calls += 1
        return self.result


class TestResolutionCache:
    def test_hit_after_miss(self):
        cache = ResolutionCache(size=8, shards=2)
        resolve = _Counter()
        assert cache.get_or_resolve("p-4", resolve) is RESULT
        assert cache.get_or_resolve("p-4", resolve) is RESULT
        assert resolve.calls == 1
        assert (cache.hits, cache.misses) == (1, 1)
        assert "p-4" in cache

    def test_misses_are_cached(self):
        cache = ResolutionCache(size=8)
        resolve = _Counter(result=None)
        assert cache.get_or_resolve("nope", resolve) is None
        assert cache.get_or_resolve("nope", resolve) is None
        assert resolve.calls == 1

    def test_lru_eviction(self):
        cache = ResolutionCache(size=2, shards=1)
        cache.get_or_resolve("a", _Counter())
        cache.get_or_resolve("b", _Counter())
        cache.get_or_resolve("a", _Counter())
        cache.get_or_resolve("c", _Counter())
        assert "a" in cache
        assert "b" not in cache
        assert len(cache) == 2

    def test_disabled(self):
        cache = ResolutionCache(size=0)
        resolve = _Counter()
        cache.get_or_resolve("p-4", resolve)
        cache.get_or_resolve("p-4", resolve)
        assert resolve.calls == 2
        assert not cache.enabled
        assert "p-4" not in cache

    def test_clear(self):
        cache = ResolutionCache(size=4)
        cache.get_or_resolve("p-4", _Counter())
        cache.clear()
        assert len(cache) == 0
        assert cache.hits == 0

    def test_concurrent_access(self):
        cache = ResolutionCache(size=1024, shards=4)
        keys = [f"p-{i}" for i in range(32)]

        def worker():
            for key in keys:
                assert cache.get_or_resolve(key, _Counter()) is RESULT

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(cache) == 32
