import pytest

from perceptra.lru_cache import LRUCache


def make_creator():
    calls = []

    def creator(key):
        calls.append(key)
        return f"value-{key}"

    return creator, calls


def test_read_creates_value_once():
    cache = LRUCache(2)
    creator, calls = make_creator()
    assert cache.read("a", creator) == "value-a"
    assert cache.read("a", creator) == "value-a"
    assert calls == ["a"]
    assert len(cache) == 1


def test_least_recently_used_is_evicted():
    cache = LRUCache(2)
    creator, calls = make_creator()
    dropped = []
    drop = lambda key, value: dropped.append((key, value))
    cache.read("a", creator, drop)
    cache.read("b", creator, drop)
    cache.read("a", creator, drop)
    cache.read("c", creator, drop)
    assert dropped == [("b", "value-b")]
    assert len(cache) == 2
    cache.read("a", creator, drop)
    assert calls == ["a", "b", "c"]


def test_iteration_from_most_to_least_recent():
    cache = LRUCache(3)
    creator, _ = make_creator()
    for key in ["a", "b", "c"]:
        cache.read(key, creator)
    cache.read("a", creator)
    assert [key for key, _ in cache] == ["a", "c", "b"]
    assert dict(cache) == {k: f"value-{k}" for k in "abc"}


def test_reversed_iteration():
    cache = LRUCache(3)
    creator, _ = make_creator()
    for key in ["a", "b", "c"]:
        cache.read(key, creator)
    assert list(reversed(cache)) == list(cache)[::-1]


def test_zero_capacity_behaves_as_one():
    cache = LRUCache(0)
    creator, _ = make_creator()
    cache.read("a", creator)
    cache.read("b", creator)
    assert len(cache) == 1
    assert [key for key, _ in cache] == ["b"]


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        LRUCache(-1)


def test_eviction_without_drop_callback():
    cache = LRUCache(1)
    creator, calls = make_creator()
    assert cache.read("a", creator) == "value-a"
    assert cache.read("b", creator) == "value-b"
    assert cache.read("a", creator) == "value-a"
    assert calls == ["a", "b", "a"]
    assert len(cache) == 1
    assert list(cache) == [("a", "value-a")]


def test_clear_drops_every_entry():
    cache = LRUCache(3)
    creator, _ = make_creator()
    for key in ["a", "b"]:
        cache.read(key, creator)
    dropped = []
    cache.clear(lambda key, value: dropped.append((key, value)))
    assert sorted(dropped) == [("a", "value-a"), ("b", "value-b")]
    assert len(cache) == 0
    assert list(cache) == []


def test_clear_without_callback_empties_cache():
    cache = LRUCache(2)
    creator, calls = make_creator()
    cache.read("a", creator)
    cache.clear()
    assert len(cache) == 0
    cache.read("a", creator)
    assert calls == ["a", "a"]