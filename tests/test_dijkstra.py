"""Tests for the Dijkstra shortest-path search."""

import math
import threading

import pytest

from landmark_router.domain.errors import NodeNotFoundError, UnreachableError
from landmark_router.domain.models import Node
from landmark_router.graph.dijkstra import dijkstra, shortest_path_or_raise
from landmark_router.graph.graph import Graph

A, B, C, D = Node("A"), Node("B"), Node("C"), Node("D")


def test_triangle_shortcut_beats_direct_edge():
    graph = Graph.from_edges([("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0)])

    result = dijkstra(graph, A, C)

    assert result.path == (A, B, C)
    assert result.distance == 2.0
    assert result.reachable


def test_source_equals_destination():
    graph = Graph.from_edges([("A", "B", 1.0)])

    for node in graph:
        result = dijkstra(graph, node, node)
        assert result.path == (node,)
        assert result.distance == 0.0


def test_direct_edge():
    graph = Graph.from_edges([("A", "B", 10.0)])

    result = dijkstra(graph, A, B)

    assert result.path == (A, B)
    assert result.distance == 10.0


def test_unreachable_destination_is_explicit():
    graph = Graph.from_edges([("A", "B", 1.0), ("C", "D", 1.0)])

    result = dijkstra(graph, A, D)

    assert not result.reachable
    assert result.path == ()
    assert math.isinf(result.distance)


def test_shortest_path_or_raise_signals_unreachable():
    graph = Graph.from_edges([("A", "B", 1.0), ("C", "D", 1.0)])

    with pytest.raises(UnreachableError) as exc_info:
        shortest_path_or_raise(graph, A, D)
    assert exc_info.value.source == "A"
    assert exc_info.value.destination == "D"


def test_unknown_endpoint_raises():
    graph = Graph.from_edges([("A", "B", 1.0)])

    with pytest.raises(NodeNotFoundError):
        dijkstra(graph, A, Node("Z"))


def test_ties_follow_insertion_order():
    # Two equal routes A-B-D and A-C-D; B was inserted before C
    graph = Graph.from_edges(
        [("A", "B", 1.0), ("B", "D", 1.0), ("A", "C", 1.0), ("C", "D", 1.0)]
    )

    result = dijkstra(graph, A, D)

    assert result.path == (A, B, D)
    assert result.distance == 2.0


def test_distances_to_every_reachable_node_are_kept():
    graph = Graph.from_edges([("A", "B", 1.0), ("B", "C", 2.0), ("C", "D", 3.0)])

    result = dijkstra(graph, A, B)

    # The run does not stop at B, all reachable nodes are settled
    assert result.distance_to(B) == 1.0
    assert result.distance_to(C) == 3.0
    assert result.distance_to(D) == 6.0


def test_state_is_scoped_to_each_call():
    graph = Graph.from_edges([("A", "B", 1.0), ("B", "C", 1.0), ("C", "D", 1.0)])

    first = dijkstra(graph, A, D)
    second = dijkstra(graph, D, A)

    assert first.state is not second.state
    assert first.distance_to(A) == 0.0
    assert second.distance_to(A) == 3.0
    assert first.path == (A, B, C, D)
    assert second.path == (D, C, B, A)


def test_concurrent_queries_do_not_interfere():
    graph = Graph.from_edges(
        [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0), ("C", "D", 2.0)]
    ).freeze()
    results = {}

    def run(key, source, destination):
        results[key] = dijkstra(graph, source, destination)

    threads = [
        threading.Thread(target=run, args=(i, A if i % 2 else D, D if i % 2 else A))
        for i in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for key, result in results.items():
        assert result.distance == 4.0
        expected = (A, B, C, D) if key % 2 else (D, C, B, A)
        assert result.path == expected
