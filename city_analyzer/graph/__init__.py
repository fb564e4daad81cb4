"""Graph-related structures for the district hierarchy and road network.

This subpackage contains the in-memory district tree, the city road
network and the per-city search bookkeeping shared by the network
queries.
"""

from .district_tree import DistrictNode, DistrictTree, is_uppercase_label
from .network import City, CityNetwork, Road
from .search_state import SearchState, SearchTable

__all__ = [
    "DistrictNode",
    "DistrictTree",
    "is_uppercase_label",
    "City",
    "CityNetwork",
    "Road",
    "SearchState",
    "SearchTable",
]
