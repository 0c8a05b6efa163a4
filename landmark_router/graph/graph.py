"""In-memory undirected landmark graph.

The graph stores every logical connection as two directed ``Edge``
values (the edge and its mirror) and keeps a symmetric adjacency index.
It is populated once by a loader, frozen, and then only read.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..domain.errors import GraphError, InvalidInputError, NodeNotFoundError
from ..domain.models import NO_TIME, Edge, Node

logger = logging.getLogger(__name__)


class Graph:
    """Undirected weighted graph of named landmarks.

    Nodes keep their insertion order so listings and tie-breaks in the
    algorithms are deterministic.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[Node, List[Node]] = {}
        self._edges: List[Edge] = []
        # (source, destination) -> first inserted edge for that ordered pair
        self._edge_index: Dict[Tuple[Node, Node], Edge] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, node: Node) -> None:
        """Insert ``node`` with an empty adjacency entry if absent."""
        self._check_mutable()
        if node not in self._adjacency:
            self._adjacency[node] = []

    def add_edge(self, edge: Edge) -> bool:
        """Insert ``edge`` and its mirror.

        Returns:
            True if the connection was inserted, False if an edge with the
            same ordered (source, destination) pair already existed.

        Raises:
            InvalidInputError: If the edge joins a landmark to itself.
        """
        self._check_mutable()
        if edge.source == edge.destination:
            raise InvalidInputError(f"Self-loop on {edge.source} is not allowed")
        self.add_node(edge.source)
        self.add_node(edge.destination)

        if edge.endpoints in self._edge_index:
            logger.debug(
                "Duplicate edge ignored",
                extra={
                    "source": edge.source.name,
                    "destination": edge.destination.name,
                },
            )
            return False

        mirror = edge.reversed()
        for arc in (edge, mirror):
            self._edges.append(arc)
            self._edge_index.setdefault(arc.endpoints, arc)

        self._adjacency[edge.source].append(edge.destination)
        self._adjacency[edge.destination].append(edge.source)
        return True

    def connect(
        self,
        source_name: str,
        destination_name: str,
        distance: float,
        time: float = NO_TIME,
        label: str = "",
    ) -> bool:
        """Shortcut for ``add_edge`` that builds the nodes from names."""
        return self.add_edge(
            Edge(Node(source_name), Node(destination_name), distance, time, label)
        )

    def freeze(self) -> Graph:
        """Mark the graph read-only. Returns the graph for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphError("Graph is read-only once loaded")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, node: Node) -> List[Node]:
        """Return the adjacent nodes of ``node`` in insertion order.

        Raises:
            NodeNotFoundError: If ``node`` is not part of the graph.
        """
        try:
            return list(self._adjacency[node])
        except KeyError:
            raise NodeNotFoundError(
                f"Landmark not in graph: {node.name}", name=node.name
            ) from None

    def edge_between(self, source: Node, destination: Node) -> Optional[Edge]:
        """Return the first directed edge from ``source`` to ``destination``."""
        return self._edge_index.get((source, destination))

    def outgoing_edges(self, node: Node) -> List[Edge]:
        return [edge for edge in self._edges if edge.source == node]

    def path_distance(self, path: Sequence[Node], strict: bool = False) -> float:
        """Sum the edge distances along ``path``.

        A consecutive pair without an edge contributes 0 unless ``strict``
        is set, in which case it raises InvalidInputError.
        """
        total = 0.0
        for current, following in zip(path, path[1:]):
            edge = self.edge_between(current, following)
            if edge is None:
                if strict:
                    raise InvalidInputError(
                        f"No edge between {current.name} and {following.name}"
                    )
                logger.warning(
                    "Missing path segment counted as zero",
                    extra={"source": current.name, "destination": following.name},
                )
                continue
            total += edge.distance
        return total

    def node_by_name(self, name: str) -> Optional[Node]:
        """Case-insensitive lookup. Returns the first match or None."""
        wanted = name.strip().casefold()
        for node in self._adjacency:
            if node.name.casefold() == wanted:
                return node
        return None

    def require_node(self, name: str) -> Node:
        node = self.node_by_name(name)
        if node is None:
            raise NodeNotFoundError(f"Landmark not found: {name}", name=name)
        return node

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._adjacency)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def edge_count(self) -> int:
        """Number of directed arcs (twice the number of connections)."""
        return len(self._edges)

    def node_names(self) -> List[str]:
        return [node.name for node in self._adjacency]

    def adjacency_lines(self, arrow: str = " -> ") -> Iterator[str]:
        """Yield one ``name -> [neighbours]`` line per node."""
        for node, neighbours in self._adjacency.items():
            joined = ", ".join(n.name for n in neighbours)
            yield f"{node.name}{arrow}[{joined}]"

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, item: Union[Node, str]) -> bool:
        if isinstance(item, str):
            return self.node_by_name(item) is not None
        return item in self._adjacency

    def __iter__(self) -> Iterator[Node]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.edge_count})"

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[str, str, float]]) -> Graph:
        """Build a graph from ``(source, destination, distance)`` triples."""
        graph = cls()
        for source, destination, distance in edges:
            graph.connect(source, destination, distance)
        return graph
