"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage (adjacency matrix CSV files)
- Routing algorithms (Dijkstra, exhaustive path enumeration)
- Caching systems (in-memory, null)
"""
