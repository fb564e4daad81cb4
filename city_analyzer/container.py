"""Dependency injection container.

A small explicit container: ports are registered with factories and
resolved on demand, optionally as singletons. Tests register in-memory
fakes in place of the CSV adapters.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        analyzer = container.resolve(InfrastructureAnalyzerService)

        # Testing
        container = Container()
        container.register(NetworkRepositoryPort, lambda: FakeRepository())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons."""
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the CSV adapters and the analyzer service.

        Args:
            config: Optional configuration override.
        """
        from .adapters.graph import CSVNetworkRepository
        from .ports.graph import DistrictRepositoryPort, NetworkRepositoryPort
        from .services import InfrastructureAnalyzerService

        config = config or get_config()
        container = cls(config=config)

        # One repository serves both ports so the CSV files are read once
        repository = CSVNetworkRepository(config.network)
        container.register(NetworkRepositoryPort, lambda: repository)
        container.register(DistrictRepositoryPort, lambda: repository)

        def create_analyzer() -> InfrastructureAnalyzerService:
            return InfrastructureAnalyzerService(
                network_repository=container.resolve(NetworkRepositoryPort),
                district_repository=container.resolve(DistrictRepositoryPort),
            )

        container.register(InfrastructureAnalyzerService, create_analyzer)

        return container
