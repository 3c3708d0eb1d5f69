"""Graph ports - Abstractions for shortest-distance computation.

The stop graph owns its storage and delegates distance queries to a
solver, so the algorithm can be swapped without touching mutation code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol

if TYPE_CHECKING:
    from ..domain.models import Distance

# Maps stop name -> {neighbor name: distance_km}
Adjacency = Mapping[str, Mapping[str, int]]


class DistanceSolverPort(Protocol):
    """Port for single-source shortest-distance computation.

    Implementations: adapters/graph/dijkstra_solver.py

    Solvers only read the adjacency they are given and never mutate it.
    """

    def solve(self, graph: Adjacency, source: str, target: str) -> Distance:
        """Compute the minimum total distance from source to target.

        Args:
            graph: Symmetric adjacency of the stop network.
            source: Name of the departure stop.
            target: Name of the arrival stop.

        Returns:
            The distance in kilometres, or UNREACHABLE when no path exists
            or either stop is unknown.
        """
        ...
