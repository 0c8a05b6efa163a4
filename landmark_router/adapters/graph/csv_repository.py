"""CSV Graph Repository adapter.

Loads the landmark graph from an adjacency matrix stored as CSV:

    ,Library,Gym,Cafeteria
    Library,0,4.5,2
    Gym,4.5,0,
    Cafeteria,2,,0

The first header cell is ignored. Each data row starts with a landmark
name followed by one distance per header column; empty and zero cells
mean "no direct way", and the diagonal must be one of those. Every
other cell must be a finite positive number and becomes an undirected
edge. Landmark names are unique ignoring case, as a header and as a
row label.

Population is all-or-nothing: any malformed cell aborts the load and
no graph is cached, so queries never see a partially built graph.
"""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set

from ...config import GraphConfig, RoutingConfig, get_config
from ...domain.errors import GraphError, InvalidInputError
from ...domain.models import Edge, Node, UnitConversion
from ...graph.graph import Graph


def parse_distance(cell: str, row: int, column: str) -> Optional[float]:
    """Parse one matrix cell. Returns None for "no edge" cells."""
    text = cell.strip()
    if not text:
        return None
    try:
        distance = float(text)
    except ValueError:
        raise InvalidInputError(
            f"Invalid distance {text!r} at row {row}, column {column!r}",
            row=row,
            column=column,
        ) from None
    if not math.isfinite(distance):
        raise InvalidInputError(
            f"Distance must be finite, got {text!r} at row {row}, column {column!r}",
            row=row,
            column=column,
        )
    if distance < 0:
        raise InvalidInputError(
            f"Negative distance {distance} at row {row}, column {column!r}",
            row=row,
            column=column,
        )
    if distance == 0:
        return None
    return distance


def build_graph_from_rows(
    rows: Iterable[Sequence[str]],
    units: Optional[UnitConversion] = None,
    source: Optional[str] = None,
) -> Graph:
    """Build and freeze a graph from the rows of an adjacency matrix.

    Args:
        rows: Matrix rows, header first.
        units: Conversion used to derive each edge's walking time.
        source: Origin of the rows (file path), attached to errors.

    Raises:
        InvalidInputError: On any malformed header, row or cell.
    """
    units = units or UnitConversion()
    iterator = iter(rows)
    try:
        header = [cell.strip() for cell in next(iterator)]
    except StopIteration:
        raise InvalidInputError("Adjacency matrix is empty", file_path=source) from None

    names = header[1:]
    if not names or any(not name for name in names):
        raise InvalidInputError(
            "Header must list at least one non-empty landmark name", file_path=source
        )
    # Lookups by name ignore case, so headers must be unique ignoring case too
    if len({name.casefold() for name in names}) != len(names):
        raise InvalidInputError("Duplicate landmark name in header", file_path=source)

    graph = Graph()
    nodes = {name: Node(name) for name in names}
    for node in nodes.values():
        graph.add_node(node)

    seen_rows: Set[str] = set()
    for row_number, values in enumerate(iterator, start=1):
        if not any(value.strip() for value in values):
            continue

        from_name = values[0].strip()
        if from_name not in nodes:
            raise InvalidInputError(
                f"Row {row_number} names unknown landmark {from_name!r}",
                file_path=source,
                row=row_number,
            )
        if from_name in seen_rows:
            raise InvalidInputError(
                f"Row {row_number} repeats landmark {from_name!r}",
                file_path=source,
                row=row_number,
            )
        seen_rows.add(from_name)
        if len(values) > len(header):
            raise InvalidInputError(
                f"Row {row_number} has {len(values)} cells, header has {len(header)}",
                file_path=source,
                row=row_number,
            )

        for to_name, cell in zip(names, values[1:]):
            distance = parse_distance(cell, row_number, to_name)
            if distance is None:
                continue
            if to_name == from_name:
                raise InvalidInputError(
                    f"Landmark {from_name!r} has a non-zero distance to itself "
                    f"at row {row_number}",
                    file_path=source,
                    row=row_number,
                    column=to_name,
                )
            graph.add_edge(
                Edge(
                    nodes[from_name],
                    nodes[to_name],
                    distance,
                    time=units.minutes(distance),
                )
            )

    return graph.freeze()


@dataclass
class CSVGraphRepository:
    """Graph repository that loads an adjacency matrix CSV file.

    This adapter implements GraphRepositoryPort. The graph is built on
    the first call to ``load`` and the same frozen instance is returned
    afterwards.

    Attributes:
        config: Graph configuration (paths, file names)
        routing: Routing configuration (unit conversion)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    routing: RoutingConfig = field(default_factory=lambda: get_config().routing)
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def units(self) -> UnitConversion:
        return UnitConversion(
            distance_unit_meters=self.routing.distance_unit_meters,
            walking_speed_m_per_min=self.routing.walking_speed_m_per_min,
        )

    def load(self) -> Graph:
        """Load the landmark graph from the configured CSV file.

        Raises:
            InvalidInputError: If the matrix is malformed.
            GraphError: If the file cannot be read or decoded.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.matrix_path
        self._logger.debug("Loading graph", extra={"matrix_path": str(path)})

        graph = self.load_from_path(path)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "edges": graph.edge_count},
        )
        return graph

    def load_from_path(self, path: Path) -> Graph:
        try:
            with path.open(newline="", encoding="utf-8-sig") as f:
                return build_graph_from_rows(
                    csv.reader(f), units=self.units, source=str(path)
                )
        except InvalidInputError as e:
            if e.file_path is None:
                e.file_path = str(path)
            raise
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphError(
                f"Failed to load graph: {e}",
                file_path=str(path),
                cause=e,
            ) from e

    def landmark_names(self) -> List[str]:
        return self.load().node_names()

    def clear_cache(self) -> None:
        """Forget the loaded graph so the next ``load`` reads the file again."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
