"""Graph model and routing algorithms.

This subpackage contains the in-memory landmark graph together with
the shortest-path search, the simple-path enumeration and the stable
merge sort used to rank the enumerated routes.
"""

from .dijkstra import DijkstraState, ShortestPathResult, dijkstra, shortest_path_or_raise
from .graph import Graph
from .paths import all_simple_paths, iter_simple_paths
from .sorting import (
    merge_sort,
    sort_routes_by_distance,
    sort_strings_by_length,
)

__all__ = [
    "Graph",
    "DijkstraState",
    "ShortestPathResult",
    "dijkstra",
    "shortest_path_or_raise",
    "iter_simple_paths",
    "all_simple_paths",
    "merge_sort",
    "sort_routes_by_distance",
    "sort_strings_by_length",
]
