import threading
import time
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType

import pytest

from infrastructure.storage import TaxonomyCache


def test_store_then_get() -> None:
    cache = TaxonomyCache()
    items = MappingProxyType({"a": 1})

    assert not cache.has("letters")
    cache.store("letters", items)

    assert cache.has("letters")
    assert cache.get("letters") is items
    assert cache.keys() == ["letters"]


def test_get_unknown_key_raises_key_error() -> None:
    with pytest.raises(KeyError):
        TaxonomyCache().get("missing")


def test_store_is_one_shot() -> None:
    cache = TaxonomyCache()
    first = MappingProxyType({"a": 1})
    cache.store("letters", first)

    with pytest.raises(RuntimeError):
        cache.store("letters", MappingProxyType({"b": 2}))
    assert cache.get("letters") is first


def test_get_or_load_loads_once() -> None:
    cache = TaxonomyCache()
    calls: list[str] = []

    def load(key: str):
        calls.append(key)
        return MappingProxyType({"x": key})

    first = cache.get_or_load("k", load)
    second = cache.get_or_load("k", load)

    assert first is second
    assert calls == ["k"]


def test_failed_load_is_not_cached() -> None:
    cache = TaxonomyCache()
    attempts = {"n": 0}

    def load(key: str):
        attempts["n"] += 1
        if attempts["n"] == 1:
            raise OSError("disk hiccup")
        return MappingProxyType({"ok": True})

    with pytest.raises(OSError):
        cache.get_or_load("k", load)
    assert not cache.has("k")

    assert cache.get_or_load("k", load) == {"ok": True}
    assert attempts["n"] == 2


def test_key_locks_are_released_after_success_and_failure() -> None:
    cache = TaxonomyCache()

    def fail(key: str):
        raise FileNotFoundError(key)

    for key in ("a", "b", "c"):
        with pytest.raises(FileNotFoundError):
            cache.get_or_load(key, fail)
    cache.get_or_load("d", lambda key: MappingProxyType({}))

    assert cache.pending_locks() == 0
    assert cache.keys() == ["d"]


def test_key_lock_released_after_concurrent_load() -> None:
    cache = TaxonomyCache()
    calls: list[str] = []
    barrier = threading.Barrier(10)

    def load(key: str):
        calls.append(key)
        time.sleep(0.05)
        return MappingProxyType({"x": 1})

    def worker(_: int):
        barrier.wait()
        return cache.get_or_load("k", load)

    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(worker, range(10)))

    assert calls == ["k"]
    assert all(r is results[0] for r in results)
    assert cache.pending_locks() == 0
