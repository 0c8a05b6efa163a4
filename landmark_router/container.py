"""Wiring of the routing service and its adapters.

``Container.create_default`` binds each port to the adapter chosen by
the configuration: the CSV matrix repository, the Dijkstra solver, the
exhaustive path finder and a result cache (or ``NullCache`` when
``LMR_ROUTING_CACHE_RESULTS`` is off). Bindings are built lazily, the
first time something resolves them.

Tests rebind a port before resolving the service:

    container = Container.create_default(config)
    container.register(GraphRepositoryPort, lambda: StaticRepository(graph))
    service = container.resolve(RoutingService)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, NamedTuple, Optional

from .config import AppConfig, get_config


class _Binding(NamedTuple):
    factory: Callable[[], Any]
    shared: bool


@dataclass
class Container:
    """Port-to-adapter bindings for one configuration.

    Attributes:
        config: Configuration the default bindings were built from
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type, _Binding] = field(default_factory=dict, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self, port_type: type, factory: Callable[[], Any], singleton: bool = True
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        With ``singleton`` the first instance built is reused; otherwise
        every ``resolve`` calls the factory again.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory, singleton)
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type) -> Any:
        with self._lock:
            try:
                binding = self._bindings[port_type]
            except KeyError:
                raise KeyError(f"Nothing bound to {port_type.__name__}") from None

            if not binding.shared:
                return binding.factory()
            if port_type not in self._instances:
                self._instances[port_type] = binding.factory()
            return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        from .adapters.cache import InMemoryCache, NullCache
        from .adapters.graph import (
            CSVGraphRepository,
            DijkstraRouteSolver,
            ExhaustivePathFinder,
        )
        from .ports.cache import CachePort
        from .ports.graph import GraphRepositoryPort, PathFinderPort, RouteSolverPort
        from .queries import units_from_config
        from .services import RoutingService

        container = cls(config=config or get_config())
        routing = container.config.routing
        units = units_from_config(routing)

        container.register(
            CachePort,
            lambda: InMemoryCache(name="routes") if routing.cache_results else NullCache(),
        )
        container.register(
            GraphRepositoryPort,
            lambda: CSVGraphRepository(container.config.graph, routing),
        )
        container.register(RouteSolverPort, lambda: DijkstraRouteSolver(units=units))
        container.register(
            PathFinderPort,
            lambda: ExhaustivePathFinder(
                units=units,
                max_nodes=routing.max_enumeration_nodes,
                strict_distance=routing.strict_path_distance,
            ),
        )
        container.register(
            RoutingService,
            lambda: RoutingService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                path_finder=container.resolve(PathFinderPort),
                cache=container.resolve(CachePort),
                alternatives_limit=routing.alternatives_limit,
                query_workers=routing.query_workers,
            ),
        )
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, building it on first use."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Forget the process-wide container; the next call rebuilds it."""
    global _default_container
    with _container_lock:
        _default_container = None
