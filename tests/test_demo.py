import logging

import pytest

import wgraph.__main__ as demo
from wgraph.core import GraphError, VertexAlreadyExistsError


def test_demo_graph():
    g = demo.build_demo_graph()
    assert g.directed
    assert str(g) == "0 1 2"
    assert [str(e) for e in g.get_edges()] == ["0 to 1"]
    assert g.get_vertex(0).get_degree() == 1
    assert g.get_vertex(1).get_degree() == 0


def test_main_success(caplog):
    with caplog.at_level(logging.INFO, logger="wgraph.demo"):
        assert demo.main() == 0
    assert "0 to 1" in caplog.text


def test_main_fatal_on_setup_error(monkeypatch, caplog):
    def broken():
        raise VertexAlreadyExistsError(0)

    monkeypatch.setattr(demo, "build_demo_graph", broken)
    with caplog.at_level(logging.CRITICAL, logger="wgraph.demo"):
        assert demo.main() == 1
    assert any(r.levelno == logging.CRITICAL for r in caplog.records)
    assert "vertex already exists: 0" in caplog.text


def test_error_hierarchy():
    assert issubclass(VertexAlreadyExistsError, GraphError)
    assert issubclass(VertexAlreadyExistsError, ValueError)
    with pytest.raises(GraphError):
        raise VertexAlreadyExistsError(1)
