"""In-memory cache for routing query results.

A loaded graph never changes, so one (source, destination) answer stays
valid for the whole process. Worker threads started by
``RoutingService.submit`` share the cache, hence the lock.

Entries are kept in least-recently-used order: a hit moves the entry to
the back and a full cache drops the entry at the front.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, NamedTuple, Optional, TypeVar

T = TypeVar("T")

NEVER = float("inf")


class _Entry(NamedTuple):
    value: object
    expires_at: float


@dataclass
class InMemoryCache(Generic[T]):
    """LRU cache of query results with an optional lifetime per entry.

    Attributes:
        name: Label used in the logger name
        max_size: Entries kept before the least recently used one is dropped
        default_ttl_seconds: Lifetime of an entry, None to keep it forever
    """

    name: str = "routes"
    max_size: Optional[int] = 256
    default_ttl_seconds: Optional[float] = None

    _entries: "OrderedDict[str, _Entry]" = field(
        default_factory=OrderedDict, repr=False
    )
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _counters: Dict[str, int] = field(
        default_factory=lambda: {"hits": 0, "misses": 0, "evictions": 0},
        repr=False,
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.expires_at < time.monotonic():
                del self._entries[key]
                self._logger.debug("Expired query result dropped", extra={"key": key})
                entry = None

            if entry is None:
                self._counters["misses"] += 1
                return None

            self._entries.move_to_end(key)
            self._counters["hits"] += 1
            return entry.value  # type: ignore[return-value]

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        lifetime = self.default_ttl_seconds if ttl is None else ttl
        expires_at = NEVER if lifetime is None else time.monotonic() + lifetime

        with self._lock:
            self._entries[key] = _Entry(value, expires_at)
            self._entries.move_to_end(key)
            while self.max_size is not None and len(self._entries) > self.max_size:
                dropped, _ = self._entries.popitem(last=False)
                self._counters["evictions"] += 1
                self._logger.debug("Query result evicted", extra={"key": dropped})

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the stored result for ``key`` or compute and store it.

        ``compute_fn`` runs without holding the lock; two threads asking
        for the same new pair may both compute it.
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        value = compute_fn()
        self.set(key, value)
        return value

    def clear(self) -> int:
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
            for counter in self._counters:
                self._counters[counter] = 0
        self._logger.info("Query results cleared", extra={"entries_cleared": dropped})
        return dropped

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> Dict[str, float]:
        with self._lock:
            lookups = self._counters["hits"] + self._counters["misses"]
            hit_rate = 100.0 * self._counters["hits"] / lookups if lookups else 0.0
            return {
                "size": len(self._entries),
                **self._counters,
                "hit_rate_percent": round(hit_rate, 1),
            }
