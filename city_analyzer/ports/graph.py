"""Graph ports - Abstractions for loading the network and district tree.

These protocols define the contracts the analyzer service depends on,
so the data source (CSV files, in-memory fixtures) can be swapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.district_tree import DistrictTree
    from ..graph.network import CityNetwork


class NetworkRepositoryPort(Protocol):
    """Port for loading the city road network.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> CityNetwork:
        """Load the road network.

        Returns:
            A fully built CityNetwork.
        """
        ...


class DistrictRepositoryPort(Protocol):
    """Port for loading the district hierarchy.

    Implementation: adapters/graph/csv_repository.py
    """

    def load_districts(self) -> DistrictTree:
        """Load the district tree.

        Returns:
            The district tree, possibly empty.
        """
        ...
