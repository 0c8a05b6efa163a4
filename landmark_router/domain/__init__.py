"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EnumerationLimitError,
    GraphError,
    InvalidInputError,
    NodeNotFoundError,
    RouterError,
    UnreachableError,
)
from .models import NO_TIME, Edge, Node, Route, RouteQueryResult, UnitConversion

__all__ = [
    # Models
    "Node",
    "Edge",
    "Route",
    "RouteQueryResult",
    "UnitConversion",
    "NO_TIME",
    # Errors
    "RouterError",
    "GraphError",
    "InvalidInputError",
    "NodeNotFoundError",
    "UnreachableError",
    "EnumerationLimitError",
    "ConfigurationError",
]
