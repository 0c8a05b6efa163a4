"""Cache port - Injectable caching of routing query results.

The landmark graph never changes after loading, so the answer to a
(source, destination) query can be reused for the rest of the process.
Services depend on this protocol rather than on a concrete cache so
tests can swap in a cache that always misses.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


def route_key(source: str, destination: str) -> str:
    """Cache key for a routing query, insensitive to landmark name case."""
    return f"{source.strip().casefold()}|{destination.strip().casefold()}"


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if not found or expired."""
        ...

    def set(self, key: str, value: T) -> None:
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss."""
        ...

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        ...

    def size(self) -> int:
        ...
