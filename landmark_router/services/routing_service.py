"""Routing service - Main orchestrator.

This service answers the questions the terminal menu and the web form
ask: the optimal route between two landmarks and the ranked list of
alternatives, with error handling, caching and background execution.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from ..domain.errors import (
    EnumerationLimitError,
    GraphError,
    NodeNotFoundError,
    UnreachableError,
)
from ..domain.models import Route, RouteQueryResult
from ..graph.sorting import sort_strings_by_length
from ..ports.cache import CachePort, route_key
from ..ports.graph import GraphRepositoryPort, PathFinderPort, RouteSolverPort


@dataclass
class RoutingService:
    """Main service for routing queries.

    The service orchestrates:
    1. Graph loading (once, read-only afterwards)
    2. Landmark name resolution
    3. Optimal route computation
    4. Alternative route enumeration and ranking

    Attributes:
        graph_repository: Loads the landmark graph
        route_solver: Computes the shortest route
        path_finder: Enumerates ranked alternative routes
        cache: Optional cache of query results per landmark pair
        alternatives_limit: Default number of alternatives to display
        query_workers: Threads used by ``submit``
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    path_finder: PathFinderPort
    cache: Optional[CachePort[RouteQueryResult]] = None
    alternatives_limit: Optional[int] = 10
    query_workers: int = 2

    _logger: logging.Logger = field(init=False, repr=False)
    _executor: Optional[ThreadPoolExecutor] = field(default=None, init=False, repr=False)
    _executor_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_routes(self, source: str, destination: str) -> RouteQueryResult:
        """Compute the optimal route and every ranked alternative.

        Args:
            source: Source landmark name (case-insensitive).
            destination: Destination landmark name (case-insensitive).

        Returns:
            RouteQueryResult with the optimal route and the alternatives.

        Raises:
            GraphError: If the graph cannot be loaded.
            NodeNotFoundError: If a name is unknown; nothing is computed.
            UnreachableError: If no path exists.
            EnumerationLimitError: If the graph is too large to enumerate.
        """
        if self.cache is None:
            return self._compute(source, destination)
        return self.cache.get_or_compute(
            route_key(source, destination),
            lambda: self._compute(source, destination),
        )

    def _compute(self, source: str, destination: str) -> RouteQueryResult:
        self._logger.info(
            "Starting route query",
            extra={"source": source, "destination": destination},
        )

        graph = self.graph_repository.load()
        start = graph.require_node(source)
        end = graph.require_node(destination)

        optimal = self.route_solver.solve(graph, start.name, end.name)
        alternatives = self.path_finder.find_all(graph, start.name, end.name)

        self._logger.info(
            "Route query answered",
            extra={
                "source": start.name,
                "destination": end.name,
                "distance_m": optimal.distance_m,
                "alternatives": len(alternatives),
            },
        )
        return RouteQueryResult(
            source=start,
            destination=end,
            optimal=optimal,
            alternatives=tuple(alternatives),
        )

    def shortest_route(self, source: str, destination: str) -> Route:
        """Compute only the optimal route (no enumeration)."""
        graph = self.graph_repository.load()
        return self.route_solver.solve(graph, source, destination)

    def alternative_routes(
        self, source: str, destination: str, limit: Optional[int] = None
    ) -> Sequence[Route]:
        """Ranked alternatives, trimmed to ``limit`` (default: configured limit)."""
        result = self.find_routes(source, destination)
        return result.top_alternatives(
            limit if limit is not None else self.alternatives_limit
        )

    def landmark_names(self, sort_by_length: bool = True) -> List[str]:
        """Landmark names for menus, shortest name first by default."""
        names = self.graph_repository.load().node_names()
        if sort_by_length:
            return sort_strings_by_length(names)
        return names

    def resolve_safe(
        self, source: str, destination: str
    ) -> tuple[Optional[RouteQueryResult], Optional[str]]:
        """Run ``find_routes``, returning an error message instead of raising.

        Returns:
            Tuple of (RouteQueryResult or None, error message or None).
        """
        try:
            return self.find_routes(source, destination), None
        except NodeNotFoundError as e:
            return None, f"Unknown landmark: {e.name}"
        except UnreachableError as e:
            return None, f"No path found between {e.source} and {e.destination}"
        except EnumerationLimitError as e:
            return None, f"Error: {e.message}"
        except GraphError as e:
            self._logger.error("Graph unavailable", extra={"error": str(e)})
            return None, f"Error: {e}"

    def format_result(self, result: RouteQueryResult, limit: Optional[int] = None) -> str:
        """Format a query result as human-readable text."""
        optimal = result.optimal
        lines = [
            "OPTIMAL ROUTE",
            f"Shortest Path: {optimal.as_text()}",
            f"Distance: {optimal.distance_m:.2f}m",
            f"Time: {optimal.time_min:.2f} min(s)",
        ]

        alternatives = result.top_alternatives(
            limit if limit is not None else self.alternatives_limit
        )
        if alternatives:
            lines.append("")
            lines.append(f"FIRST {len(alternatives)} ROUTES")
            for route in alternatives:
                lines.append(
                    f"{route.as_text()},\t{route.distance_m:.2f}m\t{route.time_min:.2f} min(s)"
                )
        return "\n".join(lines)

    def submit(self, source: str, destination: str) -> Future[RouteQueryResult]:
        """Run ``find_routes`` on a worker thread.

        The graph is read-only, so concurrent queries need no locking.
        Callers poll or attach callbacks to the returned future and may
        simply drop the result of a superseded query.
        """
        return self._get_executor().submit(self.find_routes, source, destination)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.query_workers,
                    thread_name_prefix="route-query",
                )
            return self._executor

    def shutdown(self, wait: bool = True) -> None:
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=wait)
                self._executor = None

    def cache_stats(self) -> dict[str, Any]:
        stats = getattr(self.cache, "stats", None)
        return stats() if callable(stats) else {}
