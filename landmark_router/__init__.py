"""Top-level package for the Landmark Router project.

This package loads a small graph of named landmarks and the walking
distances between them, and answers point-to-point routing queries:
the shortest route and every alternative route ranked by distance.
"""

__version__ = "0.1.0"
