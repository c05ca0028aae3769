"""Process-lifetime taxonomy cache guarded by a per-key lock table."""

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

TaxonomyItems = Mapping[str, Any]


class TaxonomyCache:
    """
    Holds loaded taxonomies: key -> item mapping.

    A key moves Unloaded -> Loaded exactly once and is never replaced,
    refreshed or evicted afterwards.

    Thread safety:
    - `_table_lock` guards the lock table itself (short critical sections only).
    - Each key has its own lock around check-load-store, so concurrent first
      callers for one key trigger a single load, and distinct keys load in parallel.
    - A key lock is dropped from the table once no caller holds or waits on it.
    """

    def __init__(self) -> None:
        self._items: dict[str, TaxonomyItems] = {}
        self._locks: dict[str, _KeyLock] = {}
        self._table_lock = threading.Lock()

    def has(self, key: str) -> bool:
        return key in self._items

    def get(self, key: str) -> TaxonomyItems:
        """Return a loaded taxonomy. Raises KeyError if `key` was never stored."""
        return self._items[key]

    def keys(self) -> list[str]:
        return sorted(self._items)

    def store(self, key: str, items: TaxonomyItems) -> None:
        """Commit a fully loaded taxonomy. A key can only be stored once.

        Raises:
            RuntimeError: If `key` is already loaded
        """
        with self._table_lock:
            if key in self._items:
                raise RuntimeError(f"Taxonomy '{key}' is already loaded; cached taxonomies are never replaced.")
            self._items[key] = items

    def _acquire_entry(self, key: str) -> "_KeyLock":
        with self._table_lock:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _KeyLock()
            entry.users += 1
            return entry

    def _release_entry(self, key: str, entry: "_KeyLock") -> None:
        with self._table_lock:
            entry.users -= 1
            if entry.users == 0:
                del self._locks[key]

    def pending_locks(self) -> int:
        """Number of keys with a caller currently loading or waiting."""
        with self._table_lock:
            return len(self._locks)

    def get_or_load(self, key: str, load: Callable[[str], TaxonomyItems]) -> TaxonomyItems:
        """
        Return the cached taxonomy, loading it first if needed.

        `load` runs at most once per successfully loaded key. If it raises, nothing
        is stored and the error propagates; the next call retries.
        """
        if self.has(key):
            return self._items[key]

        entry = self._acquire_entry(key)
        try:
            with entry.lock:
                if self.has(key):
                    return self._items[key]
                logger.debug("Cache miss for taxonomy '%s'", key)
                items = load(key)
                self.store(key, items)
                return items
        finally:
            self._release_entry(key, entry)


class _KeyLock:
    """Per-key load lock plus the number of callers holding or waiting on it."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0
