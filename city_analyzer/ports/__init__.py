"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the analyzer service and the
adapters that supply its data, which keeps the service testable with
in-memory fakes.
"""

from .graph import DistrictRepositoryPort, NetworkRepositoryPort

__all__ = [
    "NetworkRepositoryPort",
    "DistrictRepositoryPort",
]
