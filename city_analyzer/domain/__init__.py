"""Domain layer - Result models and errors.

This module contains immutable result models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityAnalyzerError,
    CityNotFoundError,
    ConfigurationError,
    DistrictTreeError,
    InvalidRoadError,
    NetworkError,
    QueryInProgressError,
)
from .models import INFINITY, DistrictAnalysis, NetworkAnalysis, RouteResult

__all__ = [
    # Models
    "INFINITY",
    "RouteResult",
    "DistrictAnalysis",
    "NetworkAnalysis",
    # Errors
    "CityAnalyzerError",
    "NetworkError",
    "CityNotFoundError",
    "InvalidRoadError",
    "QueryInProgressError",
    "DistrictTreeError",
    "ConfigurationError",
]
