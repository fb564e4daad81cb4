"""Immutable result models for the City Infrastructure Analyzer.

All models are frozen dataclasses with slots. They carry query results
out of the graph layer and into reporting; none of them hold references
to live network or tree objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

INFINITY = float("inf")


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Shortest route between two cities.

    Attributes:
        path: Ordered tuple of city names from start to end (inclusive)
        total_distance: Total length of the route, INFINITY if none
    """

    path: tuple[str, ...]
    total_distance: float = INFINITY

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of cities on the route."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class DistrictAnalysis:
    """Uppercase districts found by both traversal orders."""

    dfs_order: tuple[str, ...] = field(default_factory=tuple)
    bfs_order: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class NetworkAnalysis:
    """Reachability and shortest distances from one start city.

    Attributes:
        start: Name of the start city as requested
        reachable: City names in breadth-first discovery order
        distances: City name -> shortest distance, reachable cities only
    """

    start: str
    reachable: tuple[str, ...] = field(default_factory=tuple)
    distances: Dict[str, int] = field(default_factory=dict)

    @property
    def start_found(self) -> bool:
        """Check if the start city exists in the network."""
        return len(self.reachable) > 0
