"""Typed domain errors for the landmark router.

Low-level graph helpers signal expected absences with ``None`` or an
explicit ``reachable`` flag; the adapter and service layers turn those
signals into the errors below so callers can handle each case on its own.

All errors inherit from RouterError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouterError(Exception):
    """Base error for the routing domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(RouterError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class InvalidInputError(GraphError):
    """Malformed graph-construction data.

    Raised for non-numeric or negative distances, unknown row labels,
    duplicate headers and broken path segments in strict mode.

    Attributes:
        row: 1-based data row of the offending cell, if known
        column: Header name of the offending cell, if known
    """

    row: Optional[int] = None
    column: Optional[str] = None


@dataclass
class NodeNotFoundError(RouterError):
    """Landmark name does not resolve to a node of the graph.

    Attributes:
        name: The name that was looked up
    """

    name: str = ""


@dataclass
class UnreachableError(RouterError):
    """No path exists between the requested landmarks.

    Attributes:
        source: Source landmark name
        destination: Destination landmark name
    """

    source: str = ""
    destination: str = ""


@dataclass
class EnumerationLimitError(RouterError):
    """Graph is too large for exhaustive simple-path enumeration.

    Attributes:
        node_count: Number of nodes in the graph
        max_nodes: Configured ceiling
    """

    node_count: int = 0
    max_nodes: int = 0


@dataclass
class ConfigurationError(RouterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
