import pytest

from codekata.lru_cache import Cache, LRUCache, run_commands


def test_get_missing_key_returns_minus_one():
    assert LRUCache(2).get(7) == -1


def test_set_then_get():
    cache = LRUCache(2)
    cache.set(1, 10)
    cache.set(2, 20)
    assert cache.get(1) == 10
    assert cache.get(2) == 20


def test_oldest_entry_is_evicted():
    cache = LRUCache(2)
    cache.set(1, 10)
    cache.set(2, 20)
    cache.set(3, 30)
    assert cache.get(1) == -1
    assert cache.get(2) == 20
    assert cache.get(3) == 30


def test_setting_existing_key_refreshes_and_updates():
    cache = LRUCache(2)
    cache.set(1, 10)
    cache.set(2, 20)
    cache.set(1, 11)
    cache.set(3, 30)
    assert cache.get(1) == 11
    assert cache.get(2) == -1
    assert cache.get(3) == 30


def test_run_commands_collects_gets():
    lines = ["set 1 2", "get 1", "get 2"]
    assert run_commands(lines, 1) == [2, -1]


def test_run_commands_with_eviction():
    lines = ["set 4 40", "set 5 50", "get 4", "get 5"]
    assert run_commands(lines, 1) == [-1, 50]


def test_run_commands_rejects_malformed_line():
    with pytest.raises(ValueError):
        run_commands(["put 1 2"], 2)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        LRUCache(0)


def test_cache_is_abstract():
    with pytest.raises(TypeError):
        Cache(1)