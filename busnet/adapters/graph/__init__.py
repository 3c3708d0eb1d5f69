"""Graph adapters - Implementations of DistanceSolverPort.

Available implementations:
- HeapDijkstraSolver: Dijkstra with a binary heap and early exit (default)
- ScanDijkstraSolver: Dijkstra with a linear minimum scan over V-1 rounds
"""

from .dijkstra_solver import SOLVERS, HeapDijkstraSolver, ScanDijkstraSolver

__all__ = ["HeapDijkstraSolver", "ScanDijkstraSolver", "SOLVERS"]
