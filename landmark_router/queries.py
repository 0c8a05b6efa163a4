"""Functional query interface over a loaded landmark graph.

These helpers are the smallest way to ask the two routing questions
without wiring the service layer:

    graph = CSVGraphRepository().load()
    best = shortest_path(graph, "Library", "Gym")
    ranked = all_paths(graph, "Library", "Gym")

Unit conversion defaults to the configured walking speed and distance
unit; pass ``units`` to override it.
"""

from __future__ import annotations

from typing import List, Optional

from .adapters.graph.dijkstra_solver import DijkstraRouteSolver
from .adapters.graph.path_finder import ExhaustivePathFinder
from .config import RoutingConfig, get_config
from .domain.models import Route, UnitConversion
from .graph.graph import Graph


def units_from_config(routing: Optional[RoutingConfig] = None) -> UnitConversion:
    routing = routing or get_config().routing
    return UnitConversion(
        distance_unit_meters=routing.distance_unit_meters,
        walking_speed_m_per_min=routing.walking_speed_m_per_min,
    )


def shortest_path(
    graph: Graph,
    source_name: str,
    dest_name: str,
    units: Optional[UnitConversion] = None,
) -> Route:
    """Return the shortest route between two landmark names.

    Raises:
        NodeNotFoundError: If a name does not resolve; Dijkstra is not run.
        UnreachableError: If the destination cannot be reached.
    """
    solver = DijkstraRouteSolver(units=units or units_from_config())
    return solver.solve(graph, source_name, dest_name)


def all_paths(
    graph: Graph,
    source_name: str,
    dest_name: str,
    units: Optional[UnitConversion] = None,
    max_nodes: Optional[int] = None,
    strict: bool = False,
) -> List[Route]:
    """Return every simple route, ranked by distance ascending.

    Raises:
        NodeNotFoundError: If a name does not resolve.
        EnumerationLimitError: If the graph has more than ``max_nodes`` nodes.
        UnreachableError: If no route exists.
    """
    finder = ExhaustivePathFinder(
        units=units or units_from_config(),
        max_nodes=max_nodes,
        strict_distance=strict,
    )
    return finder.find_all(graph, source_name, dest_name)
