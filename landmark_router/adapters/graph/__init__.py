"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the graph from an adjacency matrix CSV file
- DijkstraRouteSolver: Finds the shortest route using Dijkstra's algorithm
- ExhaustivePathFinder: Enumerates and ranks every simple route
"""

from .csv_repository import CSVGraphRepository, build_graph_from_rows
from .dijkstra_solver import DijkstraRouteSolver
from .path_finder import ExhaustivePathFinder

__all__ = [
    "CSVGraphRepository",
    "DijkstraRouteSolver",
    "ExhaustivePathFinder",
    "build_graph_from_rows",
]
