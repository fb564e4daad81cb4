"""Tests for the city road network: construction, reachability and Dijkstra."""

import heapq
import math
from types import SimpleNamespace

import pytest

import city_analyzer.graph.network as network_module
from city_analyzer.domain.errors import (
    CityNotFoundError,
    InvalidRoadError,
    QueryInProgressError,
)
from city_analyzer.graph.network import CityNetwork


@pytest.fixture
def metro_network():
    network = CityNetwork()
    for name in ["Metropolis", "Gotham", "Star City", "Central City", "Coast City"]:
        network.add_city(name)

    network.add_road("Metropolis", "Gotham", 50)
    network.add_road("Metropolis", "Star City", 120)
    network.add_road("Gotham", "Central City", 80)
    network.add_road("Star City", "Central City", 60)
    network.add_road("Central City", "Coast City", 40)
    return network


# ----------------------------------------------------------------------
# Construction
# ----------------------------------------------------------------------


def test_add_road_is_symmetric():
    network = CityNetwork()
    network.add_city("A")
    network.add_city("B")

    assert network.add_road("A", "B", 7) is True

    assert network.roads_of("A") == [("B", 7)]
    assert network.roads_of("B") == [("A", 7)]
    assert network.road_count == 1


def test_dangling_road_is_silent_noop(metro_network):
    before = metro_network.road_count

    added = metro_network.add_road("Metropolis", "Missing", 10)

    assert added is False
    assert metro_network.road_count == before
    assert ("Missing", 10) not in metro_network.roads_of("Metropolis")


def test_dangling_road_raises_in_strict_mode():
    network = CityNetwork(strict=True)
    network.add_city("Exists")

    with pytest.raises(CityNotFoundError) as exc_info:
        network.add_road("Exists", "Missing", 10)

    assert exc_info.value.city_name == "Missing"
    assert network.road_count == 0


def test_negative_length_is_rejected():
    network = CityNetwork()
    network.add_city("A")
    network.add_city("B")

    with pytest.raises(InvalidRoadError) as exc_info:
        network.add_road("A", "B", -1)

    assert exc_info.value.length == -1
    assert network.road_count == 0


@pytest.mark.parametrize("length", ["5", 2.5, True, None])
def test_non_integer_length_is_rejected(length):
    network = CityNetwork()
    network.add_city("A")
    network.add_city("B")

    with pytest.raises(InvalidRoadError) as exc_info:
        network.add_road("A", "B", length)

    assert exc_info.value.length == length
    assert network.road_count == 0


def test_zero_length_road_is_allowed():
    network = CityNetwork()
    network.add_city("A")
    network.add_city("B")
    network.add_road("A", "B", 0)

    assert network.calculate_shortest_paths("A") == {"A": 0, "B": 0}


def test_find_city_returns_first_duplicate():
    network = CityNetwork()
    first = network.add_city("Twin")
    network.add_city("Twin")

    assert network.find_city("Twin") is first
    assert network.find_city("Nowhere") is None
    assert len(network) == 2


def test_introspection(metro_network):
    assert "Gotham" in metro_network
    assert "Atlantis" not in metro_network
    assert metro_network.city_names()[0] == "Metropolis"
    assert [city.id for city in metro_network] == [0, 1, 2, 3, 4]
    assert metro_network.road_count == 5
    assert metro_network.roads_of("Atlantis") == []


# ----------------------------------------------------------------------
# Reachability
# ----------------------------------------------------------------------


def test_reachable_cities_bfs_order(metro_network):
    assert metro_network.find_reachable_cities("Metropolis") == [
        "Metropolis",
        "Gotham",
        "Star City",
        "Central City",
        "Coast City",
    ]


def test_reachable_cities_stays_in_component(metro_network):
    metro_network.add_city("Atlantis")
    metro_network.add_city("Themyscira")
    metro_network.add_road("Atlantis", "Themyscira", 300)

    reachable = metro_network.find_reachable_cities("Coast City")

    assert reachable[0] == "Coast City"
    assert len(reachable) == len(set(reachable))
    assert set(reachable) == {
        "Metropolis",
        "Gotham",
        "Star City",
        "Central City",
        "Coast City",
    }
    assert metro_network.find_reachable_cities("Themyscira") == ["Themyscira", "Atlantis"]


def test_reachable_from_unknown_city_is_empty(metro_network):
    assert metro_network.find_reachable_cities("unknown") == []


def test_isolated_city_reaches_only_itself():
    network = CityNetwork()
    network.add_city("Solo")
    assert network.find_reachable_cities("Solo") == ["Solo"]


# ----------------------------------------------------------------------
# Shortest paths
# ----------------------------------------------------------------------


def test_shortest_paths_from_metropolis(metro_network):
    distances = metro_network.calculate_shortest_paths("Metropolis")

    assert distances == {
        "Metropolis": 0,
        "Gotham": 50,
        "Star City": 120,
        "Central City": 130,
        "Coast City": 170,
    }


def test_shortest_paths_are_ordered_by_name(metro_network):
    distances = metro_network.calculate_shortest_paths("Metropolis")
    assert list(distances) == sorted(distances)


def test_shortest_paths_skip_unreachable_cities(metro_network):
    metro_network.add_city("Atlantis")

    distances = metro_network.calculate_shortest_paths("Metropolis")

    assert "Atlantis" not in distances
    assert metro_network.calculate_shortest_paths("Atlantis") == {"Atlantis": 0}


def test_shortest_paths_from_unknown_city_is_empty(metro_network):
    assert metro_network.calculate_shortest_paths("unknown") == {}


def test_shortest_paths_records_predecessors(metro_network):
    metro_network.calculate_shortest_paths("Metropolis")

    central = metro_network.search_state("Central City")
    gotham = metro_network.find_city("Gotham")

    assert central.finalized
    assert central.previous == gotham.id
    assert metro_network.search_state("Metropolis").previous is None


def test_node_pushed_twice_finalizes_at_smaller_distance(monkeypatch):
    network = CityNetwork()
    for name in ["A", "B", "C"]:
        network.add_city(name)
    network.add_road("A", "B", 10)
    network.add_road("A", "C", 1)
    network.add_road("C", "B", 1)

    pushes = []

    def counting_push(heap, item):
        pushes.append(item)
        heapq.heappush(heap, item)

    monkeypatch.setattr(
        network_module,
        "heapq",
        SimpleNamespace(heappush=counting_push, heappop=heapq.heappop),
    )

    distances = network.calculate_shortest_paths("A")

    b_id = network.find_city("B").id
    assert [dist for dist, city_id in pushes if city_id == b_id] == [10, 2]
    assert distances["B"] == 2
    assert network.search_state("B").finalized


def test_repeated_queries_are_identical(metro_network):
    first = metro_network.calculate_shortest_paths("Metropolis")
    second = metro_network.calculate_shortest_paths("Metropolis")

    assert first == second


def test_mixed_queries_do_not_contaminate_each_other(metro_network):
    reachable_before = metro_network.find_reachable_cities("Metropolis")
    distances = metro_network.calculate_shortest_paths("Metropolis")
    reachable_after = metro_network.find_reachable_cities("Metropolis")

    assert reachable_before == reachable_after
    assert distances["Coast City"] == 170
    # Reachability leaves distances untouched after its reset
    assert math.isinf(metro_network.search_state("Coast City").distance)


def test_query_from_other_start_resets_state(metro_network):
    metro_network.calculate_shortest_paths("Metropolis")
    distances = metro_network.calculate_shortest_paths("Coast City")

    assert distances["Coast City"] == 0
    assert distances["Metropolis"] == 170


# ----------------------------------------------------------------------
# Route reconstruction
# ----------------------------------------------------------------------


def test_shortest_route_follows_predecessors(metro_network):
    route = metro_network.shortest_route("Metropolis", "Coast City")

    assert route.path == ("Metropolis", "Gotham", "Central City", "Coast City")
    assert route.total_distance == 170
    assert route.num_stops == 4


def test_shortest_route_to_self(metro_network):
    route = metro_network.shortest_route("Gotham", "Gotham")
    assert route.path == ("Gotham",)
    assert route.total_distance == 0


def test_shortest_route_unreachable_is_empty(metro_network):
    metro_network.add_city("Atlantis")

    route = metro_network.shortest_route("Metropolis", "Atlantis")

    assert route.is_empty
    assert math.isinf(route.total_distance)


def test_shortest_route_unknown_city_is_empty(metro_network):
    assert metro_network.shortest_route("Metropolis", "unknown").is_empty
    assert metro_network.shortest_route("unknown", "Metropolis").is_empty


# ----------------------------------------------------------------------
# Query guard
# ----------------------------------------------------------------------


class TestQueryGuard:
    def test_mutation_during_query_is_refused(self, metro_network):
        with metro_network._query("test_query"):
            with pytest.raises(QueryInProgressError) as exc_info:
                metro_network.add_city("Late")
            assert exc_info.value.operation == "add_city"

            with pytest.raises(QueryInProgressError):
                metro_network.add_road("Metropolis", "Gotham", 1)

        assert "Late" not in metro_network

    def test_nested_query_is_refused(self, metro_network):
        with metro_network._query("outer"):
            with pytest.raises(QueryInProgressError):
                metro_network.find_reachable_cities("Metropolis")

    def test_guard_is_released_after_error(self, metro_network):
        with pytest.raises(RuntimeError):
            with metro_network._query("failing"):
                raise RuntimeError("boom")

        metro_network.add_city("After")
        assert "After" in metro_network

    def test_guard_is_released_after_queries(self, metro_network):
        metro_network.find_reachable_cities("Metropolis")
        metro_network.calculate_shortest_paths("Metropolis")
        metro_network.shortest_route("Metropolis", "Gotham")

        metro_network.add_city("Later")
        assert metro_network.add_road("Later", "Gotham", 5)
