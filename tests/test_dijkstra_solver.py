"""Tests for the Dijkstra solver adapters."""

import itertools
import logging

import pytest

from busnet.adapters.graph import SOLVERS, HeapDijkstraSolver, ScanDijkstraSolver
from busnet.domain import UNREACHABLE

SOLVER_LOGGER = "busnet.adapters.graph.dijkstra_solver"


def network():
    # Two components: a small city grid and a detached pair.
    edges = [
        ("Depot", "Market", 4),
        ("Depot", "Library", 1),
        ("Library", "Market", 2),
        ("Market", "Station", 5),
        ("Library", "Station", 9),
        ("Station", "Harbour", 3),
        ("Harbour", "Airport", 12),
        ("Station", "Airport", 20),
        ("Farm", "Mill", 7),
    ]
    graph = {}
    for a, b, w in edges:
        graph.setdefault(a, {})[b] = w
        graph.setdefault(b, {})[a] = w
    graph["Lighthouse"] = {}
    return graph


@pytest.fixture(params=sorted(SOLVERS))
def solver(request):
    return SOLVERS[request.param]()


def test_direct_route(solver):
    graph = {"A": {"B": 10}, "B": {"A": 10}}
    assert solver.solve(graph, "A", "B") == 10


def test_chooses_shortest_path(solver):
    graph = {
        "A": {"B": 3, "C": 10},
        "B": {"A": 3, "C": 4},
        "C": {"A": 10, "B": 4},
    }
    assert solver.solve(graph, "A", "C") == 7


def test_known_distances(solver):
    graph = network()
    assert solver.solve(graph, "Depot", "Market") == 3
    assert solver.solve(graph, "Depot", "Station") == 8
    assert solver.solve(graph, "Depot", "Airport") == 23
    assert solver.solve(graph, "Airport", "Depot") == 23


def test_unreachable_component(solver):
    graph = network()
    assert solver.solve(graph, "Depot", "Farm") == UNREACHABLE
    assert solver.solve(graph, "Lighthouse", "Depot") == UNREACHABLE
    assert solver.solve(graph, "Farm", "Mill") == 7


def test_unknown_stops(solver):
    graph = network()
    assert solver.solve(graph, "Moon", "Depot") == UNREACHABLE
    assert solver.solve(graph, "Depot", "Moon") == UNREACHABLE


def test_single_stop_graph(solver):
    assert solver.solve({"A": {}}, "A", "A") == 0


def test_empty_graph(solver):
    assert solver.solve({}, "A", "B") == UNREACHABLE


def test_solvers_agree_on_every_pair():
    graph = network()
    heap, scan = HeapDijkstraSolver(), ScanDijkstraSolver()
    for a, b in itertools.product(graph, repeat=2):
        assert heap.solve(graph, a, b) == scan.solve(graph, a, b), (a, b)


def test_solver_does_not_mutate_graph(solver):
    graph = network()
    snapshot = {stop: dict(nbrs) for stop, nbrs in graph.items()}
    solver.solve(graph, "Depot", "Airport")
    assert graph == snapshot


def test_scan_breaks_ties_by_name(caplog):
    # B and C are both 1 away from A; insertion order lists C first.
    graph = {
        "A": {"C": 1, "B": 1},
        "C": {"A": 1, "D": 1},
        "B": {"A": 1, "D": 1},
        "D": {"C": 1, "B": 1},
    }
    caplog.set_level(logging.DEBUG, logger=SOLVER_LOGGER)

    assert ScanDijkstraSolver().solve(graph, "A", "D") == 2

    (record,) = [r for r in caplog.records if r.getMessage() == "Scan Dijkstra finished"]
    assert record.settle_order == ["A", "B", "C"]


def test_scan_runs_vertex_count_minus_one_rounds(caplog):
    graph = {"A": {"B": 1}, "B": {"A": 1}, "X": {}, "Y": {}}
    caplog.set_level(logging.DEBUG, logger=SOLVER_LOGGER)

    ScanDijkstraSolver().solve(graph, "A", "B")

    (record,) = [r for r in caplog.records if r.getMessage() == "Scan Dijkstra finished"]
    assert len(record.settle_order) == 3
    assert record.settle_order[:2] == ["A", "B"]


def test_heap_stops_once_target_is_settled(caplog):
    graph = network()
    caplog.set_level(logging.DEBUG, logger=SOLVER_LOGGER)

    assert HeapDijkstraSolver().solve(graph, "Depot", "Library") == 1

    (record,) = [r for r in caplog.records if r.getMessage() == "Heap Dijkstra finished"]
    assert record.settled == 2
