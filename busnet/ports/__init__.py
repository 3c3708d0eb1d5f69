"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and the algorithms
plugged into it.
"""

from .graph import Adjacency, DistanceSolverPort

__all__ = [
    "Adjacency",
    "DistanceSolverPort",
]
