from datetime import timedelta

import pytest

from weapp.cache import Cache, MemoryCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_set_and_get():
    cache = MemoryCache()
    cache.set("k", "v", 60)
    assert cache.get("k") == "v"


def test_missing_key():
    assert MemoryCache().get("nope") is None


def test_expiry():
    clock = FakeClock()
    cache = MemoryCache(clock)
    cache.set("k", "v", 10)
    clock.now = 9.9
    assert cache.get("k") == "v"
    clock.now = 10.0
    assert cache.get("k") is None


def test_timedelta_timeout():
    clock = FakeClock()
    cache = MemoryCache(clock)
    cache.set("k", 1, timedelta(minutes=1))
    clock.now = 59
    assert cache.get("k") == 1
    clock.now = 61
    assert cache.get("k") is None


def test_overwrite_renews_expiry():
    clock = FakeClock()
    cache = MemoryCache(clock)
    cache.set("k", "old", 5)
    clock.now = 4
    cache.set("k", "new", 5)
    clock.now = 8
    assert cache.get("k") == "new"


def test_delete():
    cache = MemoryCache()
    cache.set("k", "v", 60)
    cache.delete("k")
    cache.delete("absent")
    assert cache.get("k") is None


def test_cache_is_abstract():
    with pytest.raises(TypeError):
        Cache()