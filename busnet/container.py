"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It maps a type (usually a Protocol) to a factory and resolves instances,
either fresh on each call or as a cached singleton.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config
from .domain.errors import ConfigurationError


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        graph = container.resolve(StopGraph)

        # Testing
        container = Container()
        container.register(DistanceSolverPort, lambda: FakeSolver())

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
            port_type: The type to register.
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
        """Create a container with default bindings.

        The solver is a singleton chosen by ``config.graph.solver``;
        every StopGraph resolved is a new, empty graph sharing it.

        Raises:
            ConfigurationError: If the configured solver is unknown.
        """
        from .adapters.graph import SOLVERS
        from .graph import StopGraph
        from .ports.graph import DistanceSolverPort

        config = config or get_config()
        container = cls(config=config)

        solver_factory = SOLVERS.get(config.graph.solver)
        if solver_factory is None:
            raise ConfigurationError(
                f"Unknown solver: {config.graph.solver!r}",
                setting_name="graph.solver",
                expected_type=" | ".join(sorted(SOLVERS)),
            )

        container.register(DistanceSolverPort, solver_factory)
        container.register(
            StopGraph,
            lambda: StopGraph(
                config=config.graph,
                solver=container.resolve(DistanceSolverPort),
            ),
            singleton=False,
        )
        return container
