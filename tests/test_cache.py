from steam_compat.clients.cache import TTLCache, make_key


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_make_key_ignores_dict_order():
    assert make_key({"a": 1, "b": [1, 2]}) == make_key({"b": [1, 2], "a": 1})
    assert make_key({"a": 1}) != make_key({"a": 2})
    assert len(make_key("x")) == 16


def test_hit_and_miss_counters():
    cache = TTLCache(60)

    assert cache.get("k") is None
    cache.set("k", {"v": 1})
    assert cache.get("k") == {"v": 1}

    stats = cache.stats()
    assert stats == {"size": 1, "hits": 1, "misses": 1, "hit_rate": 50.0}


def test_entries_expire():
    clock = FakeClock()
    cache = TTLCache(10, clock=clock)
    cache.set("k", "v")

    clock.now = 9.9
    assert cache.get("k") == "v"
    clock.now = 10
    assert cache.get("k") is None
    assert cache.stats()["size"] == 0


def test_set_drops_expired_entries():
    clock = FakeClock()
    cache = TTLCache(10, clock=clock)
    cache.set("old-1", 1)
    cache.set("old-2", 2)

    clock.now = 5
    cache.set("fresh", 3)
    clock.now = 12
    cache.set("new", 4)

    assert cache.stats()["size"] == 2
    assert cache.get("fresh") == 3
    assert cache.get("new") == 4


def test_clear_resets_everything():
    cache = TTLCache(10)
    cache.set("k", "v")
    cache.get("k")
    cache.clear()
    assert cache.stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}
