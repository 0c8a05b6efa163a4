"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for loading the landmark graph,
computing the optimal route and enumerating alternative routes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Route
    from ..graph.graph import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository loads the landmark graph once from persistent
    storage and hands out the same read-only instance afterwards.
    """

    def load(self) -> Graph:
        """Load the landmark graph.

        Returns:
            The populated, frozen graph.
        """
        ...

    def landmark_names(self) -> Sequence[str]:
        """List the landmark names in graph order."""
        ...


class RouteSolverPort(Protocol):
    """Port for optimal route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, source: str, destination: str) -> Route:
        """Find the shortest route between two landmarks.

        Args:
            graph: The landmark graph.
            source: Source landmark name (case-insensitive).
            destination: Destination landmark name (case-insensitive).

        Returns:
            Route with path, distance and walking time.
        """
        ...


class PathFinderPort(Protocol):
    """Port for alternative route enumeration.

    Implementation: adapters/graph/path_finder.py
    """

    def find_all(
        self,
        graph: Graph,
        source: str,
        destination: str,
        limit: Optional[int] = None,
    ) -> Sequence[Route]:
        """Enumerate every simple route, ranked by distance ascending.

        Args:
            graph: The landmark graph.
            source: Source landmark name.
            destination: Destination landmark name.
            limit: Keep only the first ``limit`` ranked routes.
        """
        ...
