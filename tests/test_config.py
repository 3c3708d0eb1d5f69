import logging

import pytest

from busnet.adapters.graph import HeapDijkstraSolver, ScanDijkstraSolver
from busnet.config import GraphConfig, ObservabilityConfig, get_config, reset_config
from busnet.domain import ConfigurationError, StopNotFoundError
from busnet.graph import StopGraph
from busnet.logging_config import configure_logging


def test_defaults():
    config = get_config()

    assert config.graph.solver == "heap"
    assert config.graph.auto_create_stops is True
    assert config.observability.level == "WARNING"
    assert config.cli.distance_unit == "KM"


def test_get_config_is_cached():
    assert get_config() is get_config()
    first = get_config()
    reset_config()
    assert get_config() is not first


def test_env_selects_scan_solver(monkeypatch):
    monkeypatch.setenv("BUSNET_GRAPH_SOLVER", "scan")

    graph = StopGraph()

    assert isinstance(graph.solver, ScanDijkstraSolver)


def test_env_disables_auto_creation(monkeypatch):
    monkeypatch.setenv("BUSNET_GRAPH_AUTO_CREATE_STOPS", "false")

    graph = StopGraph()

    with pytest.raises(StopNotFoundError):
        graph.add_route("A", "B", 1)


def test_explicit_solver_wins_over_config():
    solver = HeapDijkstraSolver()
    graph = StopGraph(config=GraphConfig(solver="scan"), solver=solver)
    assert graph.solver is solver


def test_unknown_solver_is_a_configuration_error():
    config = GraphConfig.model_construct(solver="astar", auto_create_stops=True)

    with pytest.raises(ConfigurationError) as excinfo:
        StopGraph(config=config)

    assert excinfo.value.setting_name == "solver"
    assert "astar" in str(excinfo.value)


def test_configure_logging_applies_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

    configure_logging(ObservabilityConfig(level="debug"))

    assert calls["level"] == logging.DEBUG


def test_configure_logging_falls_back_on_bad_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

    configure_logging(ObservabilityConfig(level="chatty"))

    assert calls["level"] == logging.WARNING
