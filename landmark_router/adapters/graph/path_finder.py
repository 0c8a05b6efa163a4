"""Exhaustive path finder adapter.

Enumerates every simple route between two landmarks, converts each one
to a Route and ranks them with the stable merge sort, so routes with
equal distance keep their exploration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.errors import UnreachableError
from ...domain.models import Route, UnitConversion
from ...graph.graph import Graph
from ...graph.paths import iter_simple_paths
from ...graph.sorting import sort_routes_by_distance
from ...monitoring import log_duration


@dataclass
class ExhaustivePathFinder:
    """Path finder implementing PathFinderPort.

    Attributes:
        units: Conversion from graph distance to meters and minutes
        max_nodes: Refuse graphs with more landmarks than this (None = no limit)
        strict_distance: Raise on missing path segments instead of counting 0
    """

    units: UnitConversion = field(default_factory=UnitConversion)
    max_nodes: Optional[int] = 40
    strict_distance: bool = False
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_all(
        self,
        graph: Graph,
        source: str,
        destination: str,
        limit: Optional[int] = None,
    ) -> List[Route]:
        """Enumerate and rank every simple route.

        Raises:
            NodeNotFoundError: If either name is not in the graph.
            EnumerationLimitError: If the graph exceeds ``max_nodes``.
            UnreachableError: If no route exists at all.
        """
        start = graph.require_node(source)
        end = graph.require_node(destination)

        with log_duration("enumerate_paths", source=start.name, destination=end.name):
            routes = [
                Route.build(
                    path,
                    graph.path_distance(path, strict=self.strict_distance),
                    self.units,
                )
                for path in iter_simple_paths(graph, start, end, self.max_nodes)
            ]

        if not routes:
            raise UnreachableError(
                f"No path from {start.name} to {end.name}",
                source=start.name,
                destination=end.name,
            )

        ranked = sort_routes_by_distance(routes)
        self._logger.info(
            "Alternative routes ranked",
            extra={
                "source": start.name,
                "destination": end.name,
                "routes": len(ranked),
            },
        )
        if limit is not None:
            return ranked[:limit]
        return ranked
