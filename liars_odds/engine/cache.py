"""
Liar's Odds - Bounded Result Cache

Small insertion-ordered cache for probability results. Once the
capacity is reached the oldest entries are dropped to make room.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Hashable

logger = logging.getLogger(__name__)


class BoundedCache:
    """Thread-safe mapping of small integer tuples to probabilities.

    No TTL; entries leave only through eviction or clear().
    """

    def __init__(self, capacity: int, name: str = "cache") -> None:
        if capacity < 1:
            raise ValueError(f"Cache capacity must be positive, got {capacity}.")
        self._capacity = capacity
        self._name = name
        self._entries: OrderedDict[Hashable, float] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable) -> float | None:
        """Return the cached value for key, or None on a miss."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: Hashable, value: float) -> None:
        """Store value under key, evicting the oldest entries if full."""
        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                return
            evicted = 0
            while len(self._entries) >= self._capacity:
                self._entries.popitem(last=False)
                evicted += 1
            if evicted:
                logger.debug("%s evicted %d entries", self._name, evicted)
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[Hashable]:
        """Snapshot of the keys, oldest first."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
