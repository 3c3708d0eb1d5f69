"""Graph core - the stop graph container.

Distance algorithms live in ``busnet.adapters.graph`` and are plugged in
through ``busnet.ports.DistanceSolverPort``.
"""

from .stop_graph import StopGraph

__all__ = ["StopGraph"]
