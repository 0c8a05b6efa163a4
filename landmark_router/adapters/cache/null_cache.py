"""Null cache that never stores anything.

Used when ``routing.cache_results`` is off and in tests that need every
query to reach the algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache - always misses, every get_or_compute recomputes."""

    name: str = "null"

    def get(self, key: str) -> Optional[T]:
        return None

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        pass

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, float]:
        return {"size": 0, "hits": 0, "misses": 0, "evictions": 0, "hit_rate_percent": 0.0}
