"""Immutable domain models for the bus network."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union

# Result of a distance query when no finite path connects two stops.
UNREACHABLE: Final[float] = float("inf")

Distance = Union[int, float]


@dataclass(frozen=True, slots=True)
class Route:
    """An undirected route between two stops.

    The graph stores every route on both endpoints; this model is the
    read-only view handed out for display, with ``origin`` sorting before
    ``destination``.

    Attributes:
        origin: Name of the first stop
        destination: Name of the second stop
        distance_km: Length of the route in kilometres
    """

    origin: str
    destination: str
    distance_km: int

    @classmethod
    def between(cls, a: str, b: str, distance_km: int) -> Route:
        """Build a route with its endpoints in canonical order."""
        if b < a:
            a, b = b, a
        return cls(origin=a, destination=b, distance_km=distance_km)

