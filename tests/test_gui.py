"""Tests for the Gradio search handler."""

from dataclasses import dataclass

import gradio as gr
import pytest

from landmark_router.adapters.graph import DijkstraRouteSolver, ExhaustivePathFinder
from landmark_router.graph.graph import Graph
from landmark_router.gui import TABLE_HEADERS, build_app, search_routes, table_row
from landmark_router.services import RoutingService


@dataclass
class StaticRepository:
    graph: Graph

    def load(self) -> Graph:
        return self.graph

    def landmark_names(self):
        return self.graph.node_names()


@pytest.fixture
def service():
    graph = Graph.from_edges(
        [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0), ("D", "E", 1.0)]
    ).freeze()
    return RoutingService(
        graph_repository=StaticRepository(graph),
        route_solver=DijkstraRouteSolver(),
        path_finder=ExhaustivePathFinder(),
    )


@pytest.mark.parametrize(
    "source,destination,expected",
    [
        (None, "A", "❌ Please select both your current location and a destination"),
        ("A", "", "❌ Please select both your current location and a destination"),
        ("A", " a ", "❌ Destination and current location cannot be the same"),
        ("A", "E", "❌ No path found between A and E"),
        ("A", "Z", "❌ Unknown landmark: Z"),
    ],
)
def test_search_routes_errors(service, source, destination, expected):
    text, rows = search_routes(service, source, destination)

    assert text == expected
    assert rows == []


def test_search_routes_success(service):
    text, rows = search_routes(service, "A", "C")

    assert text.splitlines() == [
        "Optimal Route: A ➔ B ➔ C",
        "Distance: 200.00m",
        "Approximate Time: 2.86 min(s)",
    ]
    assert rows == [
        ["A ➔ B ➔ C", "200.00m", "2.86 min(s)"],
        ["A ➔ C", "500.00m", "7.14 min(s)"],
    ]


def test_table_row_matches_headers(service):
    route = service.shortest_route("A", "B")

    assert len(table_row(route)) == len(TABLE_HEADERS)


def test_build_app_returns_blocks(service):
    app = build_app(service)

    assert isinstance(app, gr.Blocks)
