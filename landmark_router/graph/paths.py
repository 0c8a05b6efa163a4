"""Enumeration of every simple path between two landmarks.

The search is an iterative depth-first traversal. Each stack frame
carries its own path so far, and a neighbour is only followed when it
is not already on that path; branches never share a visited set.

Every frame extends its path by exactly one node and a path can hold at
most ``len(graph)`` nodes, so the search always terminates. The number
of simple paths still grows exponentially with graph density, which is
why callers pass ``max_nodes`` to refuse graphs above a practical size.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..domain.errors import EnumerationLimitError, NodeNotFoundError
from ..domain.models import Node
from .graph import Graph

Path = Tuple[Node, ...]


def iter_simple_paths(
    graph: Graph,
    source: Node,
    destination: Node,
    max_nodes: Optional[int] = None,
) -> Iterator[Path]:
    """Yield each simple path from ``source`` to ``destination``.

    Paths come out in exploration order, not sorted.

    Raises:
        NodeNotFoundError: If either endpoint is not in the graph.
        EnumerationLimitError: If the graph has more than ``max_nodes`` nodes.
    """
    for endpoint in (source, destination):
        if endpoint not in graph:
            raise NodeNotFoundError(
                f"Landmark not in graph: {endpoint.name}", name=endpoint.name
            )
    if max_nodes is not None and len(graph) > max_nodes:
        raise EnumerationLimitError(
            f"Graph has {len(graph)} landmarks, path enumeration is limited to {max_nodes}",
            node_count=len(graph),
            max_nodes=max_nodes,
        )
    return _explore(graph, source, destination)


def _explore(graph: Graph, source: Node, destination: Node) -> Iterator[Path]:
    stack: List[Tuple[Node, Path]] = [(source, ())]
    while stack:
        current, path_so_far = stack.pop()
        if current == destination:
            yield path_so_far + (current,)
            continue

        extended = path_so_far + (current,)
        for neighbour in graph.neighbors(current):
            if neighbour not in extended:
                stack.append((neighbour, extended))


def all_simple_paths(
    graph: Graph,
    source: Node,
    destination: Node,
    max_nodes: Optional[int] = None,
) -> List[Path]:
    return list(iter_simple_paths(graph, source, destination, max_nodes))
