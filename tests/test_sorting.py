"""Tests for the stable merge sort used to rank routes."""

from landmark_router.domain.models import Node, Route
from landmark_router.graph.graph import Graph
from landmark_router.graph.paths import all_simple_paths
from landmark_router.graph.sorting import (
    merge_sort,
    sort_routes_by_distance,
    sort_strings_by_length,
)


def route(name: str, distance: float) -> Route:
    return Route(nodes=(Node(name),), distance=distance)


def test_ranked_paths_are_non_decreasing():
    graph = Graph.from_edges(
        [
            ("A", "B", 3.0),
            ("A", "C", 1.0),
            ("B", "C", 1.0),
            ("B", "D", 2.0),
            ("C", "D", 5.0),
        ]
    )
    routes = [
        Route(nodes=path, distance=graph.path_distance(path))
        for path in all_simple_paths(graph, Node("A"), Node("D"))
    ]

    ranked = sort_routes_by_distance(routes)

    distances = [r.distance for r in ranked]
    assert distances == sorted(distances)
    assert len(ranked) == len(routes)


def test_sorting_sorted_input_is_a_fixed_point():
    ranked = sort_routes_by_distance([route("c", 3.0), route("a", 1.0), route("b", 2.0)])

    assert sort_routes_by_distance(ranked) == ranked


def test_equal_distances_keep_their_order():
    first = route("first", 2.0)
    second = route("second", 2.0)
    shorter = route("shorter", 1.0)

    ranked = sort_routes_by_distance([first, second, shorter])

    assert ranked == [shorter, first, second]
    assert sort_routes_by_distance([second, first]) == [second, first]


def test_input_is_not_mutated():
    items = [3, 1, 2]

    assert merge_sort(items, key=lambda x: x) == [1, 2, 3]
    assert items == [3, 1, 2]


def test_empty_and_single_inputs():
    assert merge_sort([], key=lambda x: x) == []
    assert merge_sort(["only"], key=len) == ["only"]


def test_strings_by_length_is_stable():
    names = ["Library", "Gym", "Chapel", "Cafe", "Hall", "Great Hall"]

    assert sort_strings_by_length(names) == [
        "Gym",
        "Cafe",
        "Hall",
        "Chapel",
        "Library",
        "Great Hall",
    ]
