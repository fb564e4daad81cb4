"""CSV repository adapter for the road network and district tree.

Reads three tables from the configured data directory:
- cities.csv (name)
- roads.csv (from_city, to_city, length_km)
- districts.csv (symbol, parent)

Rows with empty required cells are skipped with a warning. The loaded
network and tree are cached until clear_cache() is called.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkError
from ...graph.district_tree import DistrictTree
from ...graph.network import CityNetwork


@dataclass
class CSVNetworkRepository:
    """Network and district repository that loads from CSV files.

    This adapter implements NetworkRepositoryPort and DistrictRepositoryPort.

    Attributes:
        config: Network configuration (paths, file names, strictness)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _network: Optional[CityNetwork] = field(default=None, repr=False)
    _districts: Optional[DistrictTree] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> CityNetwork:
        """Load the road network from CSV files.

        Returns:
            The network with every city and road from the data files.

        Raises:
            NetworkError: If a file cannot be read or a length is not an integer.
            InvalidRoadError: If a road has a negative length.
            CityNotFoundError: If strict_roads is set and a road names an
                unknown city.
        """
        if self._network is not None:
            return self._network

        self._logger.debug(
            "Loading network",
            extra={
                "cities_path": str(self.config.cities_path),
                "roads_path": str(self.config.roads_path),
            },
        )

        try:
            network = self._load_network_from_csv()
        except (OSError, KeyError, ValueError) as e:
            raise NetworkError(
                f"Failed to load network: {e}",
                file_path=str(self.config.data_dir),
                cause=e,
            )

        self._network = network
        self._logger.info(
            "Network loaded",
            extra={"cities": len(network), "roads": network.road_count},
        )
        return network

    def _load_network_from_csv(self) -> CityNetwork:
        network = CityNetwork(strict=self.config.strict_roads)

        with self.config.cities_path.open(encoding="utf-8", newline="") as f:
            for row in csv.DictReader(f):
                name = (row.get("name") or "").strip()
                if not name:
                    self._logger.warning("Skipping city row without name")
                    continue
                network.add_city(name)

        with self.config.roads_path.open(encoding="utf-8", newline="") as f:
            for row in csv.DictReader(f):
                from_name = (row.get("from_city") or "").strip()
                to_name = (row.get("to_city") or "").strip()
                length_str = (row.get("length_km") or "").strip()

                if not from_name or not to_name or not length_str:
                    self._logger.warning(
                        "Skipping incomplete road row",
                        extra={"from_city": from_name, "to_city": to_name},
                    )
                    continue

                network.add_road(from_name, to_name, int(length_str))

        return network

    def load_districts(self) -> DistrictTree:
        """Load the district hierarchy from CSV.

        Returns:
            The district tree (empty if the table has no rows).

        Raises:
            NetworkError: If the file cannot be read or decoded.
            DistrictTreeError: If the rows do not form a single rooted tree.
        """
        if self._districts is not None:
            return self._districts

        pairs: List[Tuple[str, Optional[str]]] = []
        try:
            with self.config.districts_path.open(encoding="utf-8", newline="") as f:
                for row in csv.DictReader(f):
                    symbol = (row.get("symbol") or "").strip()
                    parent = (row.get("parent") or "").strip()
                    if not symbol:
                        continue
                    pairs.append((symbol, parent or None))
        except (OSError, ValueError) as e:
            raise NetworkError(
                f"Failed to load districts: {e}",
                file_path=str(self.config.districts_path),
                cause=e,
            )

        self._districts = DistrictTree.from_edges(pairs)
        self._logger.info("Districts loaded", extra={"districts": len(pairs)})
        return self._districts

    def clear_cache(self) -> None:
        """Clear cached network and district data."""
        self._network = None
        self._districts = None
        self._logger.debug("Network cache cleared")
