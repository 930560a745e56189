"""Shared fixtures and helpers for graph tests."""

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from wgraph.core import Edge, Graph, Vertex  # noqa: E402

# ======================================================================
# HELPERS
# ======================================================================


def make_vertices(n):
    return [Vertex(i) for i in range(n)]


def assert_consistent(g):
    """Check the edge-list / incident-list invariants of a graph."""
    members = g.get_vertices()
    for e in g.get_edges():
        assert e.source.has_edge(e)
        if not g.directed:
            assert e.target.has_edge(e)
        assert any(v is e.source for v in members)
        assert any(v is e.target for v in members)


# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def square_undirected():
    """Undirected 4-cycle 0-1-2-3-0 with weights 1..4."""
    v = make_vertices(4)
    edges = [
        Edge(v[0], v[1], 1),
        Edge(v[1], v[2], 2),
        Edge(v[2], v[3], 3),
        Edge(v[0], v[3], 4),
    ]
    g = Graph(directed=False)
    g.add_vertices(*v)
    g.add_edges(*edges)
    return g, v, edges


@pytest.fixture
def weighted_directed():
    """Directed graph 0->1 (2), 1->2 (1), 2->3 (5), 1->3 (7)."""
    v = make_vertices(4)
    edges = [
        Edge(v[0], v[1], 2),
        Edge(v[1], v[2], 1),
        Edge(v[2], v[3], 5),
        Edge(v[1], v[3], 7),
    ]
    g = Graph(directed=True)
    g.add_edges(*edges)
    return g, v, edges


@pytest.fixture
def consistency():
    """The invariant checker, for tests that build their own graphs."""
    return assert_consistent
