"""Typed domain errors for the City Infrastructure Analyzer.

Queries never raise for unknown cities; they return empty results.
These errors cover the stricter paths: malformed roads, strict-mode
construction, misuse of a network while a query is running, and
broken input data.

All errors inherit from CityAnalyzerError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CityAnalyzerError(Exception):
    """Base error for the analyzer domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NetworkError(CityAnalyzerError):
    """Network loading or data integrity error.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class CityNotFoundError(CityAnalyzerError):
    """City name not found in the network (strict mode only).

    Attributes:
        city_name: The name that could not be resolved
    """

    city_name: str = ""


@dataclass
class InvalidRoadError(CityAnalyzerError):
    """Road with a negative or non-integer length.

    Attributes:
        from_city: First endpoint name
        to_city: Second endpoint name
        length: The rejected length (not necessarily an int)
    """

    from_city: str = ""
    to_city: str = ""
    length: object = 0


@dataclass
class QueryInProgressError(CityAnalyzerError):
    """Network mutated or re-queried while a query is running.

    Attributes:
        operation: Name of the operation that was refused
    """

    operation: str = ""


@dataclass
class DistrictTreeError(CityAnalyzerError):
    """District table does not describe a single rooted tree.

    Attributes:
        symbol: The offending district symbol, if any
    """

    symbol: Optional[str] = None


@dataclass
class ConfigurationError(CityAnalyzerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
