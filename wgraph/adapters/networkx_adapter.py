from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install wgraph[networkx]"
    ) from e

from numbers import Integral
from typing import TYPE_CHECKING

from ..core.edge import Edge
from ..core.vertex import Vertex

if TYPE_CHECKING:
    from ..core.graph import Graph


def to_nx(graph: Graph, weight: str = "weight"):
    """Export Graph → networkx.

    Parameters
    ----------
    graph : Graph
    weight : str
        Edge attribute name that receives the edge weight.

    Returns
    -------
    networkx.DiGraph or networkx.Graph
        Nodes are vertex values, added in vertex index order.

    Notes
    -----
    This is a lossy export: networkx simple graphs hold one edge per vertex
    pair, so distinct edges between the same pair collapse to the last one.

    """
    nxG = nx.DiGraph() if graph.directed else nx.Graph()
    for v in graph.get_vertices():
        nxG.add_node(v.value)
    for e in graph.get_edges():
        nxG.add_edge(e.source.value, e.target.value, **{weight: e.weight})
    return nxG


def from_nx(nxG, weight: str = "weight", default_weight: float = 1.0) -> Graph:
    """Import networkx → Graph.

    Parameters
    ----------
    nxG : networkx.Graph or networkx.DiGraph
        Node labels must be integers.
    weight : str
        Edge attribute holding the weight.
    default_weight : float
        Weight used for edges without the ``weight`` attribute.

    Returns
    -------
    Graph
        Same directedness as ``nxG``; vertices in node order, edges in edge order.

    Raises
    ------
    TypeError
        If a node label is not an integer.

    """
    from ..core.graph import Graph

    g = Graph(directed=nxG.is_directed())

    vertices = {}
    for node in nxG.nodes():
        if isinstance(node, bool) or not isinstance(node, Integral):
            raise TypeError(f"networkx node {node!r} is not an integer vertex value")
        vertices[node] = Vertex(int(node))
    g.add_vertices(*vertices.values())

    edges = [
        Edge(vertices[u], vertices[v], data.get(weight, default_weight))
        for u, v, data in nxG.edges(data=True)
    ]
    g.add_edges(*edges)
    return g
