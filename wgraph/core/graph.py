import logging
from typing import Optional

import numpy as np
import scipy.sparse as sp

from ._CacheManager import CacheManager
from ._History import History
from ._Views import Views
from .edge import Edge
from .exceptions import (
    EdgeAlreadyExistsError,
    EdgeNotExistsError,
    VertexAlreadyExistsError,
    VertexNotExistsError,
)
from .vertex import Vertex

logger = logging.getLogger(__name__)


class Graph(History, Views):
    """Set of vertices and weighted edges between them.

    The graph owns the authoritative, insertion-ordered edge list and keeps every
    vertex's incident-edge list consistent with it: a registered edge is held by
    its source vertex and, in an undirected graph, by its target vertex as well.

    Parameters
    --
    directed : bool, optional
        Fixed at construction. Directed graphs attach an edge to its source only.
    history : bool, optional
        Record mutations in the in-memory history (see ``history()``).

    Notes
    -
    - Vertices are unique by ``value``; edges are unique by identity.
    - Batch mutators (``add_vertices``, ``add_edges``) stop at the first failure
      and keep what was already applied.
    - Vertices and edges are referenced, never copied.

    See Also
    --
    Vertex, Edge, get_adjacency_matrix, reverse

    """

    def __init__(self, directed: bool = True, history: bool = True):
        self._directed = bool(directed)

        # value -> Vertex, insertion ordered
        self._vertices: dict[int, Vertex] = {}
        # Edge -> None, insertion ordered identity set
        self._edges: dict[Edge, None] = {}

        self.cache = CacheManager(self)

        # History and Timeline
        self._init_history(history)

    @classmethod
    def new_directed(cls, **kwargs):
        return cls(directed=True, **kwargs)

    @classmethod
    def new_undirected(cls, **kwargs):
        return cls(directed=False, **kwargs)

    @property
    def directed(self) -> bool:
        return self._directed

    # Vertices

    def add_vertices(self, *vertices: Vertex):
        """Add vertices to the graph.

        Parameters
        --
        *vertices : Vertex
            Added in the given order.

        Raises
        --
        VertexAlreadyExistsError
            On the first vertex whose value is already taken. Vertices before it
            in the same call stay added.

        """
        for v in vertices:
            self._add_vertex(v)

    def _add_vertex(self, v: Vertex):
        if v.value in self._vertices:
            raise VertexAlreadyExistsError(v.value)
        self._vertices[v.value] = v
        logger.debug("vertex %s added", v)

    def has_vertex(self, v: Vertex) -> bool:
        """True if this exact vertex object belongs to the graph."""
        return self._vertices.get(v.value) is v

    def get_vertex(self, value: int) -> Vertex:
        """Vertex registered under ``value``.

        Raises
        --
        VertexNotExistsError
            If no vertex has that value.

        """
        try:
            return self._vertices[value]
        except KeyError:
            raise VertexNotExistsError(value) from None

    def get_vertices(self) -> list[Vertex]:
        """All vertices in insertion order (a copy)."""
        return list(self._vertices.values())

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def _require_vertex(self, v: Vertex):
        if not self.has_vertex(v):
            raise VertexNotExistsError(v)

    def neighbors(self, v: Vertex) -> list[Vertex]:
        """Neighbors of a member vertex (see ``Vertex.get_neighbors``)."""
        self._require_vertex(v)
        return v.get_neighbors()

    def degree(self, v: Vertex) -> int:
        self._require_vertex(v)
        return v.get_degree()

    def vertex_index(self, v: Vertex) -> int:
        """Position of ``v`` in the vertex ordering."""
        self._require_vertex(v)
        for i, w in enumerate(self._vertices.values()):
            if w is v:
                return i
        # unreachable while has_vertex holds
        raise VertexNotExistsError(v)

    def get_vertices_indices(self) -> dict[Vertex, int]:
        """Map each vertex to its index (insertion position).

        Returns
        ---
        dict[Vertex, int]
            Keys are vertex objects (identity), values run from 0 to N-1.

        """
        return {v: i for i, v in enumerate(self._vertices.values())}

    # Edges

    def add_edges(self, *edges: Edge):
        """Register edges, attaching each one to its vertices.

        Unknown endpoints are added to the graph first.

        Raises
        --
        EdgeAlreadyExistsError
            If an edge object is already registered.
        VertexAlreadyExistsError
            If an endpoint is not a member but its value is taken by another vertex.

        Notes
        -
        Processing stops at the first failing edge; earlier edges stay registered.

        """
        for e in edges:
            self._add_edge(e)

    def _add_edge(self, e: Edge):
        if e in self._edges:
            raise EdgeAlreadyExistsError(e)

        # Ensure vertices exist
        if not self.has_vertex(e.source):
            self._add_vertex(e.source)
        if not self.has_vertex(e.target):
            self._add_vertex(e.target)

        self._edges[e] = None
        e.source._attach(e)
        if not self._directed:
            # undirected edges are held by both ends; a self-loop only once
            e.target._attach(e)
        logger.debug("edge %s added (weight=%s)", e, e.weight)

    def delete_edge(self, edge: Edge):
        """Delete a registered edge from the graph and from its vertices.

        Raises
        --
        EdgeNotExistsError
            If the edge is not registered, or if a vertex unexpectedly does not
            hold it. In the latter case the edge list is left unchanged.

        """
        if edge not in self._edges:
            raise EdgeNotExistsError(edge)

        edge.source.delete_edge(edge)
        if not self._directed and not edge.is_self_loop():
            edge.target.delete_edge(edge)
        del self._edges[edge]
        logger.debug("edge %s deleted", edge)

    def has_edge(self, edge: Edge) -> bool:
        return edge in self._edges

    def find_edge(self, start: Vertex, end: Vertex) -> Optional[Edge]:
        """Edge connecting ``start`` to ``end``, looked up in ``start``'s incident list.

        Returns
        ---
        Edge or None
            None when there is no such edge or when ``start`` is not a member.
            Membership of ``end`` is not checked.

        """
        if not self.has_vertex(start):
            return None
        return start.find_edge(end)

    def get_edges(self) -> list[Edge]:
        """All registered edges in insertion order (a copy)."""
        return list(self._edges)

    def number_of_edges(self) -> int:
        return len(self._edges)

    # Whole-graph views and transforms

    def get_weight(self) -> float:
        """Sum of all edge weights, accumulated left to right in edge-list order."""
        weight = 0.0
        for e in self._edges:
            weight += e.weight
        return weight

    def reverse(self):
        """Reverse every edge in place.

        In a directed graph each edge moves from its old source's incident list
        to its old target's, then flips. In an undirected graph both ends already
        hold the edge, so only the direction flips.
        """
        for e in self._edges:
            if self._directed:
                e.source._detach(e)
                e.target._attach(e)
            e.reverse()
        logger.debug("graph reversed (%d edges)", len(self._edges))

    def get_adjacency_matrix(self) -> np.ndarray:
        """Dense adjacency matrix between vertex indices.

        Returns
        ---
        numpy.ndarray
            float64 array of shape (N, N). Cell (i, j) is the weight of the edge
            from vertex i to its neighbor j; cells without a connection hold
            ``NO_CONNECTION`` (the largest finite float64, not infinity).

        Notes
        -
        Undirected graphs yield a symmetric matrix. The result is a fresh copy
        of a cached matrix and may be modified freely.
        The cache follows graph mutators only. Editing a member vertex directly
        (``Vertex.add_edges``, ``Vertex.delete_all_edges``) leaves it stale until
        ``cache.invalidate()`` is called.

        """
        return self.cache.adjacency.copy()

    def get_incidence_matrix(self) -> sp.csr_matrix:
        """Sparse incidence matrix (rows: vertex indices, columns: edge-list order).

        Directed edges store +w on the source and -w on the target; undirected
        edges store +w on both. A self-loop stores +w once.
        """
        return self.cache.incidence.copy()

    def __str__(self):
        # ascending by vertex value
        return " ".join(str(self._vertices[k]) for k in sorted(self._vertices))

    def __repr__(self):
        kind = "directed" if self._directed else "undirected"
        return (
            f"Graph({kind}, vertices={len(self._vertices)}, "
            f"edges={len(self._edges)})"
        )
