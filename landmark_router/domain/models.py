"""Immutable domain models for the landmark router.

All models are frozen dataclasses with slots. Nodes are identified by
their name alone, so two ``Node("Library")`` values are the same node
and can be used interchangeably as dictionary keys.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .errors import InvalidInputError

NO_TIME = -1.0


@dataclass(frozen=True, slots=True)
class Node:
    """A named landmark.

    Equality and hashing use ``name`` only (case-sensitive). Lookups by
    name through ``Graph.node_by_name`` are case-insensitive.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Edge:
    """A directed, weighted arc between two landmarks.

    Undirected connections are stored as two independent Edge values,
    see ``reversed``. Edges order by ``distance`` only; equality stays
    identity-based so ordering never conflates two different arcs.

    Attributes:
        source: Starting node
        destination: Ending node
        distance: Finite, non-negative distance in graph units
        time: Walking time in minutes, or ``NO_TIME`` when not derived
        label: Optional free-text description of the way
    """

    source: Node
    destination: Node
    distance: float
    time: float = NO_TIME
    label: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.distance) or self.distance < 0:
            raise InvalidInputError(
                f"Invalid distance between {self.source} and {self.destination}: "
                f"{self.distance}"
            )

    @property
    def endpoints(self) -> tuple[Node, Node]:
        return (self.source, self.destination)

    def reversed(self) -> Edge:
        """Return the mirror arc with swapped endpoints."""
        return Edge(
            source=self.destination,
            destination=self.source,
            distance=self.distance,
            time=self.time,
            label=self.label,
        )

    def __lt__(self, other: Edge) -> bool:
        return self.distance < other.distance

    def __le__(self, other: Edge) -> bool:
        return self.distance <= other.distance

    def __gt__(self, other: Edge) -> bool:
        return self.distance > other.distance

    def __ge__(self, other: Edge) -> bool:
        return self.distance >= other.distance

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination} Distance: {self.distance}"


@dataclass(frozen=True, slots=True)
class UnitConversion:
    """Converts graph distances to meters and walking minutes.

    Attributes:
        distance_unit_meters: Meters represented by one graph distance unit
        walking_speed_m_per_min: Walking speed used for time estimates
    """

    distance_unit_meters: float = 100.0
    walking_speed_m_per_min: float = 70.0

    def __post_init__(self) -> None:
        if self.distance_unit_meters <= 0 or self.walking_speed_m_per_min <= 0:
            raise ValueError("Unit conversion factors must be strictly positive")

    def meters(self, distance: float) -> float:
        return distance * self.distance_unit_meters

    def minutes(self, distance: float) -> float:
        return self.meters(distance) / self.walking_speed_m_per_min


@dataclass(frozen=True, slots=True)
class Route:
    """A path through the graph with its cost.

    Attributes:
        nodes: Ordered nodes from source to destination (inclusive)
        distance: Total distance in graph units
        distance_m: Total distance in meters
        time_min: Approximate walking time in minutes
    """

    nodes: tuple[Node, ...]
    distance: float
    distance_m: float = 0.0
    time_min: float = 0.0

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(node.name for node in self.nodes)

    @property
    def is_empty(self) -> bool:
        """Check if the route holds no node at all."""
        return len(self.nodes) == 0

    @property
    def num_stops(self) -> int:
        return len(self.nodes)

    def as_text(self, separator: str = " -> ") -> str:
        return separator.join(self.names)

    @classmethod
    def build(
        cls, nodes: tuple[Node, ...], distance: float, units: UnitConversion
    ) -> Route:
        return cls(
            nodes=nodes,
            distance=distance,
            distance_m=units.meters(distance),
            time_min=units.minutes(distance),
        )


@dataclass(frozen=True, slots=True)
class RouteQueryResult:
    """Answer to a routing query.

    Attributes:
        source: Resolved source landmark
        destination: Resolved destination landmark
        optimal: Shortest route found by Dijkstra
        alternatives: Every simple route, ranked by distance ascending
    """

    source: Node
    destination: Node
    optimal: Route
    alternatives: tuple[Route, ...] = field(default_factory=tuple)

    def top_alternatives(self, limit: int | None) -> tuple[Route, ...]:
        if limit is None:
            return self.alternatives
        return self.alternatives[:limit]
