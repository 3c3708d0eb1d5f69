"""Undirected weighted graph of bus stops.

A stop is identified by its name and owns a mapping of neighbor name to
route distance. Every route is recorded on both endpoints with the same
weight, so the graph stays undirected and simple through any sequence of
mutations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ..adapters.graph import SOLVERS
from ..config import GraphConfig, get_config
from ..domain.errors import ConfigurationError, InvalidRouteError, StopNotFoundError
from ..domain.models import UNREACHABLE, Distance, Route
from ..ports.graph import Adjacency, DistanceSolverPort


@dataclass
class StopGraph:
    """Bus stops and the routes between them.

    Lookups on unknown names never raise: queries answer ``False`` or
    ``UNREACHABLE`` and removals do nothing. Only malformed routes are
    rejected, with InvalidRouteError.

    Not thread-safe; callers serialize access to an instance.

    Attributes:
        config: Graph configuration (solver name, stop auto-creation)
        solver: Distance solver; built from ``config.solver`` when omitted
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    solver: Optional[DistanceSolverPort] = None

    _stops: Dict[str, Dict[str, int]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.solver is None:
            factory = SOLVERS.get(self.config.solver)
            if factory is None:
                raise ConfigurationError(
                    f"Unknown solver: {self.config.solver!r}",
                    setting_name="solver",
                    expected_type=" | ".join(sorted(SOLVERS)),
                )
            self.solver = factory()

    # -- stops ---------------------------------------------------------

    def stop_count(self) -> int:
        """Return the number of stops."""
        return len(self._stops)

    def contains_stop(self, name: str) -> bool:
        return name in self._stops

    def add_stop(self, name: str) -> bool:
        """Add a stop with no routes.

        Adding a stop that already exists leaves it and its routes
        untouched; use reset_stop() to clear them.

        Returns:
            True if the stop was created.
        """
        if name in self._stops:
            self._logger.debug("Stop already present", extra={"stop": name})
            return False
        self._stops[name] = {}
        self._logger.debug("Stop added", extra={"stop": name})
        return True

    def reset_stop(self, name: str) -> bool:
        """Drop every route touching a stop, creating it if missing.

        Returns:
            True if the stop existed before the call.
        """
        neighbors = self._stops.get(name)
        if neighbors is None:
            self._stops[name] = {}
            return False
        for neighbor in neighbors:
            self._stops[neighbor].pop(name, None)
        neighbors.clear()
        self._logger.debug("Stop reset", extra={"stop": name})
        return True

    def remove_stop(self, name: str) -> bool:
        """Remove a stop and every route touching it.

        Returns:
            True if the stop existed.
        """
        neighbors = self._stops.pop(name, None)
        if neighbors is None:
            return False
        for neighbor in neighbors:
            self._stops[neighbor].pop(name, None)
        self._logger.debug(
            "Stop removed",
            extra={"stop": name, "routes_removed": len(neighbors)},
        )
        return True

    def list_stops(self) -> List[str]:
        """Return all stop names, sorted."""
        return sorted(self._stops)

    def neighbors(self, name: str) -> Dict[str, int]:
        """Return a copy of a stop's neighbor distances (empty if unknown)."""
        return dict(self._stops.get(name, {}))

    # -- routes --------------------------------------------------------

    def route_count(self) -> int:
        """Return the number of routes.

        Each route is stored on both endpoints, hence the halving.
        """
        return sum(len(neighbors) for neighbors in self._stops.values()) // 2

    def contains_route(self, a: str, b: str) -> bool:
        neighbors = self._stops.get(a)
        if neighbors is None:
            return False
        return b in neighbors

    def add_route(self, a: str, b: str, distance: int) -> None:
        """Connect two stops, overwriting any existing distance.

        Unknown endpoints are created unless ``config.auto_create_stops``
        is off, in which case StopNotFoundError is raised.

        Raises:
            InvalidRouteError: If the distance is not a non-negative int,
                or both endpoints are the same stop.
            StopNotFoundError: If an endpoint is missing in strict mode.
        """
        self._validate_route(a, b, distance)

        if not self.config.auto_create_stops:
            for name in (a, b):
                if name not in self._stops:
                    raise StopNotFoundError(
                        f"Bus stop not found: {name}",
                        stop_name=name,
                    )

        self._stops.setdefault(a, {})[b] = distance
        self._stops.setdefault(b, {})[a] = distance
        self._logger.debug(
            "Route added",
            extra={"origin": a, "destination": b, "distance_km": distance},
        )

    def remove_route(self, a: str, b: str) -> bool:
        """Disconnect two stops. Never creates a stop.

        Returns:
            True if a route was removed.
        """
        if not self.contains_route(a, b):
            return False
        del self._stops[a][b]
        del self._stops[b][a]
        self._logger.debug("Route removed", extra={"origin": a, "destination": b})
        return True

    def routes(self) -> List[Route]:
        """Return every route once, sorted by endpoints."""
        found = {
            Route.between(a, b, distance)
            for a, neighbors in self._stops.items()
            for b, distance in neighbors.items()
        }
        return sorted(found, key=lambda r: (r.origin, r.destination))

    def _validate_route(self, a: str, b: str, distance: int) -> None:
        problem = None
        if a == b:
            problem = f"A route cannot start and end at {a}"
        elif isinstance(distance, bool) or not isinstance(distance, int):
            problem = f"Distance must be an integer, got {distance!r}"
        elif distance < 0:
            problem = f"Distance must be non-negative, got {distance}"

        if problem is not None:
            self._logger.warning(
                "Route rejected",
                extra={"origin": a, "destination": b, "distance_km": distance},
            )
            raise InvalidRouteError(problem, origin=a, destination=b, distance=distance)

    # -- paths ---------------------------------------------------------

    def shortest_distance(self, src: str, des: str) -> Distance:
        """Return the minimum total distance from src to des.

        Unknown stops and disconnected pairs yield UNREACHABLE.
        """
        assert self.solver is not None
        distance = self.solver.solve(self.adjacency(), src, des)
        self._logger.debug(
            "Shortest distance computed",
            extra={"source": src, "target": des, "distance_km": distance},
        )
        return distance

    def has_path(self, src: str, des: str) -> bool:
        return self.shortest_distance(src, des) != UNREACHABLE

    def adjacency(self) -> Adjacency:
        """Read-only view of the underlying stop -> neighbors mapping."""
        return self._stops

    # -- container protocol --------------------------------------------

    def __len__(self) -> int:
        return self.stop_count()

    def __contains__(self, name: object) -> bool:
        return name in self._stops

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_stops())
