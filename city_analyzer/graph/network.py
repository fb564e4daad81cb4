"""City road network: an undirected, weighted adjacency-list graph.

Cities are addressed by a stable integer id (their position in the
network); roads store the destination id. Search bookkeeping lives in a
``SearchTable`` side-table that every query resets before it runs, so
queries are independent and repeatable.

A network is not safe for overlapping queries. Each query runs inside a
guard that makes construction calls and nested queries fail with
``QueryInProgressError`` until it returns.
"""

from __future__ import annotations

import heapq
import logging
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import CityNotFoundError, InvalidRoadError, QueryInProgressError
from ..domain.models import INFINITY, RouteResult
from .search_state import SearchState, SearchTable


@dataclass(frozen=True, slots=True)
class Road:
    """One direction of an undirected road."""

    destination: int
    length: int


@dataclass
class City:
    id: int
    name: str
    roads: List[Road] = field(default_factory=list)


class CityNetwork:
    """Named cities joined by undirected roads of non-negative length.

    Args:
        strict: When True, ``add_road`` raises ``CityNotFoundError`` for an
            unknown endpoint instead of silently skipping the road.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self._cities: List[City] = []
        self._search = SearchTable()
        self._active_query: Optional[str] = None
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_city(self, name: str) -> City:
        """Append a city. Names are not checked for uniqueness."""
        self._ensure_idle("add_city")
        city = City(id=len(self._cities), name=name)
        self._cities.append(city)
        self._search.track(city.id)
        return city

    def add_road(self, from_name: str, to_name: str, length: int) -> bool:
        """Join two cities with a road in both directions.

        Returns:
            True if the road was added, False if an endpoint is unknown
            (non-strict mode only).

        Raises:
            InvalidRoadError: If ``length`` is not an int or is negative.
            CityNotFoundError: If an endpoint is unknown and the network
                is strict.
            QueryInProgressError: If called while a query is running.
        """
        self._ensure_idle("add_road")
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidRoadError(
                f"Road {from_name} - {to_name} length must be an integer, got {length!r}",
                from_city=from_name,
                to_city=to_name,
                length=length,
            )
        if length < 0:
            raise InvalidRoadError(
                f"Road {from_name} - {to_name} has negative length {length}",
                from_city=from_name,
                to_city=to_name,
                length=length,
            )

        source = self.find_city(from_name)
        dest = self.find_city(to_name)

        if source is None or dest is None:
            missing = from_name if source is None else to_name
            if self.strict:
                raise CityNotFoundError(
                    f"Unknown city in road {from_name} - {to_name}: {missing}",
                    city_name=missing,
                )
            self._logger.warning(
                "Road skipped, unknown city",
                extra={"from_city": from_name, "to_city": to_name, "missing": missing},
            )
            return False

        source.roads.append(Road(dest.id, length))
        dest.roads.append(Road(source.id, length))
        return True

    def find_city(self, name: str) -> Optional[City]:
        """Return the first city called ``name``, or None."""
        for city in self._cities:
            if city.name == name:
                return city
        return None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def cities(self) -> Tuple[City, ...]:
        return tuple(self._cities)

    @property
    def road_count(self) -> int:
        """Number of undirected roads."""
        return sum(len(city.roads) for city in self._cities) // 2

    def city_names(self) -> List[str]:
        return [city.name for city in self._cities]

    def roads_of(self, name: str) -> List[Tuple[str, int]]:
        """Neighbors of ``name`` as ``(neighbor_name, length)``, in insertion order."""
        city = self.find_city(name)
        if city is None:
            return []
        return [(self._cities[road.destination].name, road.length) for road in city.roads]

    def search_state(self, name: str) -> Optional[SearchState]:
        """Search bookkeeping left by the last query for ``name``."""
        city = self.find_city(name)
        if city is None:
            return None
        return self._search[city.id]

    def reset_search_data(self) -> None:
        self._search.reset()

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_city(name) is not None

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_reachable_cities(self, start_name: str) -> List[str]:
        """Names of all cities reachable from ``start_name``, in BFS order.

        An unknown start city yields an empty list.
        """
        with self._query("find_reachable_cities"):
            result: List[str] = []
            start = self.find_city(start_name)
            if start is None:
                self._logger.debug("Start city not found", extra={"start": start_name})
                return result

            self._search[start.id].discovered = True
            queue = deque([start])

            while queue:
                current = queue.popleft()
                result.append(current.name)

                for road in current.roads:
                    state = self._search[road.destination]
                    if not state.discovered:
                        state.discovered = True
                        queue.append(self._cities[road.destination])

            self._logger.debug(
                "Reachability computed",
                extra={"start": start_name, "reachable": len(result)},
            )
            return result

    def calculate_shortest_paths(self, start_name: str) -> Dict[str, int]:
        """Shortest distance from ``start_name`` to every reachable city.

        Returns:
            City name -> distance, ordered by name. Unreachable cities are
            left out; an unknown start city yields an empty mapping.
        """
        with self._query("calculate_shortest_paths"):
            start = self.find_city(start_name)
            if start is None:
                self._logger.debug("Start city not found", extra={"start": start_name})
                return {}

            self._dijkstra(start)

            distances: Dict[str, int] = {}
            for city in sorted(self._cities, key=lambda c: c.name):
                state = self._search[city.id]
                if state.is_reachable and city.name not in distances:
                    distances[city.name] = int(state.distance)

            self._logger.debug(
                "Shortest paths computed",
                extra={"start": start_name, "reachable": len(distances)},
            )
            return distances

    def shortest_route(self, start_name: str, end_name: str) -> RouteResult:
        """Shortest route between two cities, rebuilt from predecessor links.

        Returns an empty RouteResult (``total_distance`` INFINITY) when
        either city is unknown or no route exists.
        """
        with self._query("shortest_route"):
            start = self.find_city(start_name)
            end = self.find_city(end_name)
            if start is None or end is None:
                return RouteResult(path=())

            self._dijkstra(start, stop_at=end.id)

            end_state = self._search[end.id]
            if not end_state.is_reachable:
                return RouteResult(path=())

            path: List[str] = []
            current: Optional[int] = end.id
            while current is not None:
                path.append(self._cities[current].name)
                current = self._search[current].previous

            path.reverse()
            return RouteResult(path=tuple(path), total_distance=end_state.distance)

    def _dijkstra(self, start: City, stop_at: Optional[int] = None) -> None:
        """Fill the search table with shortest distances from ``start``.

        Uses lazy deletion: a city may sit in the heap several times with
        different tentative distances; stale entries are skipped once the
        city is finalized.
        """
        self._search[start.id].distance = 0
        heap: List[Tuple[float, int]] = [(0, start.id)]

        while heap:
            _, city_id = heapq.heappop(heap)
            state = self._search[city_id]

            if state.finalized:
                continue
            state.finalized = True

            if city_id == stop_at:
                break

            for road in self._cities[city_id].roads:
                neighbor = self._search[road.destination]
                candidate = state.distance + road.length
                if candidate < neighbor.distance:
                    neighbor.distance = candidate
                    neighbor.previous = city_id
                    heapq.heappush(heap, (candidate, road.destination))

    # ------------------------------------------------------------------
    # Query guard
    # ------------------------------------------------------------------

    @contextmanager
    def _query(self, operation: str) -> Iterator[None]:
        self._ensure_idle(operation)
        self._active_query = operation
        try:
            self._search.reset()
            yield
        finally:
            self._active_query = None

    def _ensure_idle(self, operation: str) -> None:
        if self._active_query is not None:
            raise QueryInProgressError(
                f"{operation} called while {self._active_query} is running",
                operation=operation,
            )
