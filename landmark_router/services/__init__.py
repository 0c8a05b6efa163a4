"""Services layer - Application orchestration.

This module contains the application services that orchestrate the
flow of data through adapters to answer routing queries.

Available services:
- RoutingService: Optimal and alternative routes between landmarks
"""

from .routing_service import RoutingService

__all__ = ["RoutingService"]
