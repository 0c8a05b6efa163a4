"""Dijkstra Route Solver adapter.

This adapter wraps the Dijkstra implementation and adds:
- Landmark name resolution (case-insensitive)
- Domain model output (Route with meters and minutes)
- Typed errors for unknown names and unreachable destinations
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import UnreachableError
from ...domain.models import Route, UnitConversion
from ...graph.dijkstra import shortest_path_or_raise
from ...graph.graph import Graph
from ...monitoring import log_duration


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.

    Attributes:
        units: Conversion from graph distance to meters and minutes
    """

    units: UnitConversion = field(default_factory=UnitConversion)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, source: str, destination: str) -> Route:
        """Find the shortest route between two landmarks.

        Args:
            graph: The landmark graph.
            source: Source landmark name.
            destination: Destination landmark name.

        Returns:
            Route with path, distance and walking time.

        Raises:
            NodeNotFoundError: If either name is not in the graph.
            UnreachableError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        # Resolve both names before running anything
        start = graph.require_node(source)
        end = graph.require_node(destination)

        try:
            with log_duration("dijkstra", source=start.name, destination=end.name):
                result = shortest_path_or_raise(graph, start, end)
        except UnreachableError:
            self._logger.warning(
                "No route found",
                extra={"source": start.name, "destination": end.name},
            )
            raise

        route = Route.build(result.path, result.distance, self.units)
        self._logger.info(
            "Route found",
            extra={
                "source": start.name,
                "destination": end.name,
                "stops": route.num_stops,
                "distance_m": route.distance_m,
            },
        )
        return route
