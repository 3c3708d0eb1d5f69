"""Dijkstra distance solvers.

Two renditions of the same algorithm implement DistanceSolverPort:

- HeapDijkstraSolver pops the closest unsettled stop from a binary heap
  and stops as soon as the target is settled.
- ScanDijkstraSolver keeps the classic shape: ``V - 1`` rounds, each
  selecting the unprocessed stop with minimum tentative distance by a
  linear scan. It costs O(V^2) per query and is kept for cross-checking.

Both settle stops with equal tentative distance in lexicographic name
order, so results never depend on dict insertion order. Route weights are
assumed non-negative; the graph rejects anything else on insertion.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set, Tuple

from ...domain.models import UNREACHABLE, Distance
from ...ports.graph import Adjacency, DistanceSolverPort


@dataclass
class HeapDijkstraSolver:
    """Shortest-distance solver using a priority queue.

    Heap entries are ``(distance, stop)`` tuples, so equal distances fall
    back to comparing stop names.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Adjacency, source: str, target: str) -> Distance:
        """Find the shortest distance between two stops.

        Args:
            graph: Symmetric adjacency of the stop network.
            source: Departure stop name.
            target: Arrival stop name.

        Returns:
            The distance in kilometres, or UNREACHABLE.
        """
        if source not in graph or target not in graph:
            self._logger.debug(
                "Unknown stop in query",
                extra={"source": source, "target": target},
            )
            return UNREACHABLE

        distances: Dict[str, Distance] = {stop: UNREACHABLE for stop in graph}
        distances[source] = 0

        heap: List[Tuple[Distance, str]] = [(0, source)]
        settled: Set[str] = set()

        while heap:
            current_distance, u = heapq.heappop(heap)

            if u in settled:
                continue

            settled.add(u)

            if u == target:
                break

            for v, weight in graph[u].items():
                if v in settled:
                    continue
                new_distance = current_distance + weight
                if new_distance < distances.get(v, UNREACHABLE):
                    distances[v] = new_distance
                    heapq.heappush(heap, (new_distance, v))

        self._logger.debug(
            "Heap Dijkstra finished",
            extra={
                "source": source,
                "target": target,
                "settled": len(settled),
                "distance_km": distances[target],
            },
        )
        return distances[target]


@dataclass
class ScanDijkstraSolver:
    """Shortest-distance solver selecting the next stop by linear scan.

    Runs exactly ``len(graph) - 1`` selection rounds whatever the shape of
    the graph. A round may pick a stop whose distance is still infinite
    once every reachable stop is processed; relaxation from it is skipped.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Adjacency, source: str, target: str) -> Distance:
        """Find the shortest distance between two stops.

        An unknown source never gets a zero distance, so every answer is
        UNREACHABLE in that case. The same goes for an unknown target.
        """
        distances: Dict[str, Distance] = {stop: UNREACHABLE for stop in graph}
        if source in distances:
            distances[source] = 0

        processed: Set[str] = set()
        order: List[str] = []

        for _ in range(len(graph) - 1):
            current = self._min_distance_stop(distances, processed)
            if current is None:
                break
            processed.add(current)
            order.append(current)

            current_distance = distances[current]
            if current_distance == UNREACHABLE:
                continue

            for neighbor, weight in graph[current].items():
                if neighbor in processed:
                    continue
                new_distance = current_distance + weight
                if new_distance < distances.get(neighbor, UNREACHABLE):
                    distances[neighbor] = new_distance

        self._logger.debug(
            "Scan Dijkstra finished",
            extra={
                "source": source,
                "target": target,
                "settle_order": order,
            },
        )
        return distances.get(target, UNREACHABLE)

    @staticmethod
    def _min_distance_stop(
        distances: Dict[str, Distance], processed: Set[str]
    ) -> Optional[str]:
        """Return the unprocessed stop with the smallest tentative distance.

        Ties go to the lexicographically smallest name.
        """
        best: Optional[str] = None
        best_distance: Distance = UNREACHABLE
        for stop in sorted(distances):
            if stop in processed:
                continue
            if best is None or distances[stop] < best_distance:
                best = stop
                best_distance = distances[stop]
        return best


# Strategy registry used by the container and the ``solver`` setting.
SOLVERS: Dict[str, Callable[[], DistanceSolverPort]] = {
    "heap": HeapDijkstraSolver,
    "scan": ScanDijkstraSolver,
}
