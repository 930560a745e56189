from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import scipy.sparse as sp

if TYPE_CHECKING:
    from .graph import Graph

# "No connection" marker for the dense adjacency matrix: the largest finite float64.
NO_CONNECTION = np.finfo(np.float64).max


class CacheManager:
    """Cache manager for materialized matrix views (adjacency, incidence)."""

    def __init__(self, graph: Graph):
        self._G = graph
        self._adjacency = None
        self._incidence = None
        self._adjacency_version = None
        self._incidence_version = None

    # ==================== Matrix Properties ====================

    @property
    def adjacency(self) -> np.ndarray:
        """Dense N×N adjacency matrix of edge weights.
        Builds and caches on first access; rebuilt when the graph version changes.
        """
        if self._adjacency is None or self._adjacency_version != self._G._version:
            self._adjacency = self._build_adjacency()
            self._adjacency_version = self._G._version
        return self._adjacency

    @property
    def incidence(self) -> sp.csr_matrix:
        """Sparse vertex×edge incidence matrix (CSR).
        Builds and caches on first access; rebuilt when the graph version changes.
        """
        if self._incidence is None or self._incidence_version != self._G._version:
            self._incidence = self._build_incidence()
            self._incidence_version = self._G._version
        return self._incidence

    def has_adjacency(self) -> bool:
        """True if adjacency cache exists and matches current graph version."""
        return self._adjacency is not None and self._adjacency_version == self._G._version

    def has_incidence(self) -> bool:
        """True if incidence cache exists and matches current graph version."""
        return self._incidence is not None and self._incidence_version == self._G._version

    # ==================== Builders ====================

    def _build_adjacency(self) -> np.ndarray:
        G = self._G
        vertices = G.get_vertices()
        n = len(vertices)
        A = np.full((n, n), NO_CONNECTION, dtype=np.float64)
        indices = G.get_vertices_indices()
        for i, v in enumerate(vertices):
            for neighbor in v.get_neighbors():
                # neighbors outside the graph have no column
                j = indices.get(neighbor)
                if j is None:
                    continue
                edge = G.find_edge(v, neighbor)
                A[i, j] = edge.weight
        return A

    def _build_incidence(self) -> sp.csr_matrix:
        # +w on source, -w on target (directed); +w on both ends (undirected)
        G = self._G
        indices = G.get_vertices_indices()
        edges = G.get_edges()
        M = sp.dok_matrix((len(indices), len(edges)), dtype=np.float64)
        for col, edge in enumerate(edges):
            s = indices[edge.source]
            t = indices[edge.target]
            M[s, col] = edge.weight
            if edge.is_self_loop():
                continue
            M[t, col] = edge.weight if not G.directed else -edge.weight
        return M.tocsr()

    # ==================== Cache Management ====================

    def invalidate(self, formats=None):
        """Invalidate cached formats.

        Parameters
        --
        formats : list[str], optional
            Formats to invalidate ('adjacency', 'incidence').
            If None, invalidate all.

        """
        if formats is None:
            formats = ["adjacency", "incidence"]

        for fmt in formats:
            if fmt == "adjacency":
                self._adjacency = None
                self._adjacency_version = None
            elif fmt == "incidence":
                self._incidence = None
                self._incidence_version = None
            else:
                raise ValueError(f"Unknown cache format '{fmt}'")

    def build(self, formats=None):
        """Pre-build specified formats (eager caching).

        Parameters
        --
        formats : list[str], optional
            Formats to build ('adjacency', 'incidence').
            If None, build all.

        """
        if formats is None:
            formats = ["adjacency", "incidence"]

        for fmt in formats:
            if fmt == "adjacency":
                _ = self.adjacency
            elif fmt == "incidence":
                _ = self.incidence
            else:
                raise ValueError(f"Unknown cache format '{fmt}'")
