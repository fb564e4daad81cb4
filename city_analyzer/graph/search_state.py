"""Per-city scratch state used by the network search algorithms.

The state lives in a side-table keyed by city id rather than on the
cities themselves, so the "reset before every query" contract can be
checked on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from ..domain.models import INFINITY


@dataclass
class SearchState:
    """Transient bookkeeping for one city during a single query."""

    discovered: bool = False
    distance: float = INFINITY
    previous: Optional[int] = None
    finalized: bool = False

    def reset(self) -> None:
        self.discovered = False
        self.distance = INFINITY
        self.previous = None
        self.finalized = False

    @property
    def is_reachable(self) -> bool:
        return self.distance != INFINITY


class SearchTable:
    """Mapping of city id -> SearchState for one network."""

    def __init__(self) -> None:
        self._states: Dict[int, SearchState] = {}

    def track(self, city_id: int) -> SearchState:
        """Register a city and return its fresh state."""
        state = SearchState()
        self._states[city_id] = state
        return state

    def reset(self) -> None:
        """Reset every tracked state to its default values."""
        for state in self._states.values():
            state.reset()

    def __getitem__(self, city_id: int) -> SearchState:
        return self._states[city_id]

    def __contains__(self, city_id: object) -> bool:
        return city_id in self._states

    def __iter__(self) -> Iterator[int]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)
