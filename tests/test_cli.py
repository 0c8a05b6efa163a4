"""Tests for the terminal menu."""

from dataclasses import dataclass

from landmark_router import cli
from landmark_router.adapters.graph import DijkstraRouteSolver, ExhaustivePathFinder
from landmark_router.graph.graph import Graph
from landmark_router.services import RoutingService


@dataclass
class StaticRepository:
    graph: Graph

    def load(self) -> Graph:
        return self.graph

    def landmark_names(self):
        return self.graph.node_names()


def make_service(graph: Graph) -> RoutingService:
    return RoutingService(
        graph_repository=StaticRepository(graph.freeze()),
        route_solver=DijkstraRouteSolver(),
        path_finder=ExhaustivePathFinder(),
    )


def scripted(answers):
    answers = iter(answers)
    return lambda _prompt: next(answers)


def test_read_index_reprompts_until_valid():
    out = []

    index = cli.read_index("? ", 3, scripted(["abc", "0", "4", "2"]), out.append)

    assert index == 1
    assert out == [
        "Sorry, invalid input. Please try again.",
        "Please enter a number between 1 and 3",
        "Please enter a number between 1 and 3",
    ]


def test_select_landmarks_rejects_identical_choice():
    out = []

    source, destination = cli.select_landmarks(
        ["A", "B", "C"], scripted(["1", "1", "3"]), out.append
    )

    assert (source, destination) == ("A", "C")
    assert "   1. A" in out


def test_run_cli_prints_optimal_and_alternatives():
    graph = Graph.from_edges([("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0)])
    out = []

    code = cli.run_cli(make_service(graph), scripted(["1", "3"]), out.append)

    text = "\n".join(out)
    assert code == 0
    assert "Shortest Path: A -> B -> C" in text
    assert "Distance: 200.00m" in text
    assert "A -> C,\t500.00m" in text


def test_run_cli_reports_unreachable():
    graph = Graph.from_edges([("A", "B", 1.0), ("C", "D", 1.0)])
    out = []

    code = cli.run_cli(make_service(graph), scripted(["1", "4"]), out.append)

    assert code == 1
    assert out[-1] == "❌ No path found between A and D"


def test_run_cli_needs_two_landmarks():
    graph = Graph()
    out = []

    code = cli.run_cli(make_service(graph), scripted([]), out.append)

    assert code == 1


def test_print_graph_lists_adjacency():
    graph = Graph.from_edges([("A", "B", 1.0)])
    out = []

    cli.print_graph(make_service(graph), out.append)

    assert out[1:] == ["A -> [B]", "B -> [A]"]
