"""Top-level package for the bus network.

Models a transit network as an undirected weighted graph of named stops
and answers shortest-distance queries over it. ``StopGraph`` is the core;
``busnet.cli`` wraps it in an interactive menu.
"""

from .domain import UNREACHABLE, BusNetworkError, InvalidRouteError, StopNotFoundError
from .graph import StopGraph

__all__ = [
    "StopGraph",
    "UNREACHABLE",
    "BusNetworkError",
    "InvalidRouteError",
    "StopNotFoundError",
]
