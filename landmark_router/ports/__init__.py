"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the routing core and the adapters
that load data, run the algorithms and cache results. They enable
dependency injection and make the services testable.
"""

from .cache import CachePort, route_key
from .graph import GraphRepositoryPort, PathFinderPort, RouteSolverPort

__all__ = [
    # Graph
    "GraphRepositoryPort",
    "RouteSolverPort",
    "PathFinderPort",
    # Cache
    "CachePort",
    "route_key",
]
