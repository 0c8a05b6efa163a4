"""Stable merge sort used to rank routes and landmark names.

A hand-written top-down merge sort is used instead of ``sorted`` so the
tie-break rule is part of this module's contract: when two items have
equal keys the one that came first in the input stays first. Ranked
route lists are therefore reproducible run after run.

Time O(n log n), auxiliary space O(n). Inputs are never mutated.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, TypeVar

from ..domain.models import Route

T = TypeVar("T")


def merge_sort(items: Iterable[T], key: Callable[[T], float]) -> List[T]:
    """Return a new list with ``items`` ordered by ``key`` ascending."""
    values = list(items)
    if len(values) < 2:
        return values
    keys = [key(value) for value in values]
    order = _sort_indices(keys, 0, len(values))
    return [values[i] for i in order]


def _sort_indices(keys: Sequence[float], low: int, high: int) -> List[int]:
    if high - low < 2:
        return list(range(low, high))
    mid = (low + high) // 2
    left = _sort_indices(keys, low, mid)
    right = _sort_indices(keys, mid, high)
    return _merge(keys, left, right)


def _merge(keys: Sequence[float], left: List[int], right: List[int]) -> List[int]:
    merged: List[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # <= keeps the left (earlier) element first on ties
        if keys[left[i]] <= keys[right[j]]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def sort_routes_by_distance(routes: Iterable[Route]) -> List[Route]:
    return merge_sort(routes, key=lambda route: route.distance)


def sort_strings_by_length(strings: Iterable[str]) -> List[str]:
    return merge_sort(strings, key=len)
