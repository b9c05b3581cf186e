"""Fixed-capacity least-recently-used cache."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Generic, Hashable, List, TypeVar

LOGGER = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Key/value store holding at most ``capacity`` items.

    Both ``get`` and ``set`` mark the key as most recently used. Inserting a new
    key into a full cache evicts exactly one key, the least recently used one.
    The ordered map keeps the oldest key first, so every operation is O(1).
    A lock guards the combined lookup/evict/insert sequence so the cache can be
    shared between threads as well as coroutines.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._items: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        # Membership does not touch recency.
        return key in self._items

    def get(self, key: K) -> V | None:
        with self._lock:
            try:
                self._items.move_to_end(key)
            except KeyError:
                return None
            return self._items[key]

    def set(self, key: K, value: V) -> None:
        with self._lock:
            if key in self._items:
                self._items.move_to_end(key)
            self._items[key] = value
            if len(self._items) > self._capacity:
                evicted, _ = self._items.popitem(last=False)
                LOGGER.debug("Evicted %s from cache", evicted)

    def keys(self) -> List[K]:
        """Keys ordered from least to most recently used."""
        with self._lock:
            return list(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
