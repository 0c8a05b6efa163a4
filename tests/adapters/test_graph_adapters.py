"""Tests for the Dijkstra solver and exhaustive path finder adapters."""

import pytest

from landmark_router.adapters.graph import DijkstraRouteSolver, ExhaustivePathFinder
from landmark_router.domain.errors import (
    EnumerationLimitError,
    InvalidInputError,
    NodeNotFoundError,
    UnreachableError,
)
from landmark_router.domain.models import Route, UnitConversion
from landmark_router.graph.graph import Graph


@pytest.fixture
def triangle():
    return Graph.from_edges(
        [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0)]
    ).freeze()


@pytest.fixture
def split_graph():
    return Graph.from_edges([("A", "B", 1.0), ("C", "D", 1.0)]).freeze()


class TestDijkstraRouteSolver:
    """Test suite for DijkstraRouteSolver."""

    def test_solve_returns_route_with_units(self, triangle):
        solver = DijkstraRouteSolver(units=UnitConversion(100.0, 70.0))

        route = solver.solve(triangle, "a", "C")

        assert route.names == ("A", "B", "C")
        assert route.distance == 2.0
        assert route.distance_m == pytest.approx(200.0)
        assert route.time_min == pytest.approx(200.0 / 70.0)

    def test_solve_same_landmark(self, triangle):
        route = DijkstraRouteSolver().solve(triangle, "B", "b")

        assert route.names == ("B",)
        assert route.distance == 0.0

    def test_unknown_name_raises(self, triangle):
        with pytest.raises(NodeNotFoundError) as exc_info:
            DijkstraRouteSolver().solve(triangle, "does-not-exist", "A")
        assert exc_info.value.name == "does-not-exist"

    def test_unknown_name_never_runs_dijkstra(self, triangle, monkeypatch):
        import landmark_router.adapters.graph.dijkstra_solver as module

        def boom(*_args, **_kwargs):
            raise AssertionError("dijkstra should not run")

        monkeypatch.setattr(module, "shortest_path_or_raise", boom)

        with pytest.raises(NodeNotFoundError):
            DijkstraRouteSolver().solve(triangle, "A", "nowhere")

    def test_unreachable_raises(self, split_graph):
        with pytest.raises(UnreachableError) as exc_info:
            DijkstraRouteSolver().solve(split_graph, "A", "D")
        assert exc_info.value.source == "A"
        assert exc_info.value.destination == "D"


class TestExhaustivePathFinder:
    """Test suite for ExhaustivePathFinder."""

    def test_routes_are_ranked_by_distance(self, triangle):
        routes = ExhaustivePathFinder().find_all(triangle, "A", "C")

        assert [r.names for r in routes] == [("A", "B", "C"), ("A", "C")]
        assert [r.distance for r in routes] == [2.0, 5.0]
        assert all(isinstance(r, Route) for r in routes)

    def test_limit_keeps_best_routes(self, triangle):
        routes = ExhaustivePathFinder().find_all(triangle, "A", "C", limit=1)

        assert [r.names for r in routes] == [("A", "B", "C")]

    def test_enumeration_limit(self, triangle):
        with pytest.raises(EnumerationLimitError):
            ExhaustivePathFinder(max_nodes=2).find_all(triangle, "A", "C")

    def test_unreachable_raises(self, split_graph):
        with pytest.raises(UnreachableError):
            ExhaustivePathFinder().find_all(split_graph, "A", "C")

    def test_unknown_name_raises(self, triangle):
        with pytest.raises(NodeNotFoundError):
            ExhaustivePathFinder().find_all(triangle, "X", "A")

    def test_strict_mode_is_passed_to_distance(self, triangle, monkeypatch):
        calls = []
        original = Graph.path_distance

        def spy(self, path, strict=False):
            calls.append(strict)
            return original(self, path, strict=strict)

        monkeypatch.setattr(Graph, "path_distance", spy)

        ExhaustivePathFinder(strict_distance=True).find_all(triangle, "A", "C")

        assert calls and all(calls)

    def test_strict_distance_error_propagates(self, triangle, monkeypatch):
        def broken(self, path, strict=False):
            raise InvalidInputError("No edge")

        monkeypatch.setattr(Graph, "path_distance", broken)

        with pytest.raises(InvalidInputError):
            ExhaustivePathFinder(strict_distance=True).find_all(triangle, "A", "C")
