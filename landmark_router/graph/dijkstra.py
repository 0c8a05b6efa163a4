"""Shortest-path computation using Dijkstra's algorithm.

This module computes the minimum-distance path between two landmarks.
Minimum selection is a linear scan over the unvisited nodes, so a query
costs O(V^2); at the target scale (tens of landmarks) this is cheaper
than maintaining a heap and keeps ties deterministic: among equally
distant candidates the one inserted first in the graph wins.

All working state lives in a ``DijkstraState`` created per call, so
repeated and concurrent queries never observe each other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..domain.errors import NodeNotFoundError, UnreachableError
from ..domain.models import Node
from .graph import Graph


@dataclass
class DijkstraState:
    """Working state of a single Dijkstra run."""

    distances: Dict[Node, float] = field(default_factory=dict)
    previous: Dict[Node, Optional[Node]] = field(default_factory=dict)
    unvisited: List[Node] = field(default_factory=list)

    @classmethod
    def start(cls, graph: Graph, source: Node) -> DijkstraState:
        state = cls()
        for node in graph:
            state.distances[node] = math.inf
            state.previous[node] = None
            state.unvisited.append(node)
        state.distances[source] = 0.0
        return state

    def closest_unvisited(self) -> Optional[Node]:
        """Return the unvisited node with the smallest finite distance."""
        closest: Optional[Node] = None
        best = math.inf
        for node in self.unvisited:
            distance = self.distances[node]
            if distance < best:
                best = distance
                closest = node
        return closest


@dataclass(frozen=True)
class ShortestPathResult:
    """Outcome of a Dijkstra query.

    Attributes:
        source: Start node
        destination: Target node
        path: Nodes from source to destination, empty if unreachable
        distance: Total distance, ``inf`` if unreachable
        state: The call-scoped distances and predecessors
    """

    source: Node
    destination: Node
    path: Tuple[Node, ...]
    distance: float
    state: DijkstraState = field(repr=False, compare=False)

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    def distance_to(self, node: Node) -> float:
        """Distance from the source to any node settled during this run."""
        return self.state.distances.get(node, math.inf)


def dijkstra(graph: Graph, source: Node, destination: Node) -> ShortestPathResult:
    """Compute the shortest path between two landmarks.

    Parameters
    ----------
    graph:
        Landmark graph, treated as read-only.
    source:
        Departure landmark.
    destination:
        Arrival landmark.

    Returns
    -------
    ShortestPathResult
        The path from ``source`` to ``destination`` (inclusive) and its
        total distance. If no path exists the path is empty, the distance
        is ``inf`` and ``reachable`` is False.

    Raises
    ------
    NodeNotFoundError
        If either endpoint is not part of ``graph``.
    """
    for endpoint in (source, destination):
        if endpoint not in graph:
            raise NodeNotFoundError(
                f"Landmark not in graph: {endpoint.name}", name=endpoint.name
            )

    state = DijkstraState.start(graph, source)

    if source == destination:
        return ShortestPathResult(source, destination, (source,), 0.0, state)

    # Runs until the frontier is exhausted, not only until destination is
    # settled, so the state holds distances to every reachable node.
    while True:
        current = state.closest_unvisited()
        if current is None:
            break
        state.unvisited.remove(current)
        for edge in graph.outgoing_edges(current):
            neighbour = edge.destination
            if neighbour not in state.unvisited:
                continue
            candidate = state.distances[current] + edge.distance
            if candidate < state.distances[neighbour]:
                state.distances[neighbour] = candidate
                state.previous[neighbour] = current

    path = _reconstruct(state, source, destination)
    distance = state.distances[destination] if path else math.inf
    return ShortestPathResult(source, destination, path, distance, state)


def _reconstruct(state: DijkstraState, source: Node, destination: Node) -> Tuple[Node, ...]:
    """Follow predecessor links back from ``destination`` to ``source``."""
    if math.isinf(state.distances[destination]):
        return ()

    path: List[Node] = []
    current: Optional[Node] = destination
    while current is not None:
        path.append(current)
        if current == source:
            break
        current = state.previous[current]

    if path[-1] != source:
        return ()
    path.reverse()
    return tuple(path)


def shortest_path_or_raise(
    graph: Graph, source: Node, destination: Node
) -> ShortestPathResult:
    """Like ``dijkstra`` but raises UnreachableError instead of an empty path."""
    result = dijkstra(graph, source, destination)
    if not result.reachable:
        raise UnreachableError(
            f"No path from {source.name} to {destination.name}",
            source=source.name,
            destination=destination.name,
        )
    return result
