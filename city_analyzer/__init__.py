"""Top-level package for the City Infrastructure Analyzer.

The analyzer builds a district hierarchy and a weighted road network in
memory, then answers traversal, reachability and shortest-path queries
on them.
"""

from .graph import CityNetwork, DistrictNode, DistrictTree

__all__ = ["CityNetwork", "DistrictNode", "DistrictTree"]
