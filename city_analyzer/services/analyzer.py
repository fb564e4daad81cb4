"""Infrastructure analyzer service - Main orchestrator.

Loads the district tree and road network through their ports and runs
every analysis on them, returning immutable result models for the
reporting layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.models import DistrictAnalysis, NetworkAnalysis, RouteResult
from ..ports.graph import DistrictRepositoryPort, NetworkRepositoryPort


@dataclass
class InfrastructureAnalyzerService:
    """Main service for analyzing a city's districts and roads.

    Attributes:
        network_repository: Loads the city road network
        district_repository: Loads the district hierarchy
    """

    network_repository: NetworkRepositoryPort
    district_repository: DistrictRepositoryPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def analyze_districts(self) -> DistrictAnalysis:
        """Collect uppercase districts in DFS and BFS order."""
        tree = self.district_repository.load_districts()
        analysis = DistrictAnalysis(
            dfs_order=tuple(tree.find_uppercase_dfs()),
            bfs_order=tuple(tree.find_uppercase_bfs()),
        )
        self._logger.info(
            "Districts analyzed",
            extra={"uppercase_districts": len(analysis.dfs_order)},
        )
        return analysis

    def analyze_network(self, start: str) -> NetworkAnalysis:
        """Reachability and shortest distances from ``start``.

        An unknown start city gives an analysis with no reachable cities
        and no distances; it is logged but not raised.
        """
        network = self.network_repository.load()

        reachable = network.find_reachable_cities(start)
        distances = network.calculate_shortest_paths(start)

        if not reachable:
            self._logger.warning("Start city not in network", extra={"start": start})
        else:
            self._logger.info(
                "Network analyzed",
                extra={"start": start, "reachable": len(reachable)},
            )

        return NetworkAnalysis(
            start=start,
            reachable=tuple(reachable),
            distances=distances,
        )

    def route(self, start: str, end: str) -> RouteResult:
        """Shortest route between two cities (empty if there is none)."""
        network = self.network_repository.load()
        result = network.shortest_route(start, end)
        if result.is_empty:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
        return result
