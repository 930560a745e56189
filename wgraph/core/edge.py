from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import VertexNotExistsError

if TYPE_CHECKING:
    from .vertex import Vertex


class Edge:
    """Weighted, directed connection between two vertices.

    Parameters
    --
    source : Vertex
        Start of the edge.
    target : Vertex
        End of the edge. May be ``source`` itself (self-loop).
    weight : float, optional
        Any real value, including zero and negatives. Read-only once the edge
        exists; build a new edge to change it.

    Notes
    -
    - Construction does not touch either vertex; an edge only becomes part of a
      topology once a ``Graph`` registers it.
    - Equality and hashing are by identity: two edges between the same vertices
      with the same weight are still distinct edges.

    """

    def __init__(self, source: Vertex, target: Vertex, weight: float = 1.0):
        self._weight = float(weight)
        self._source = source
        self._target = target

    @property
    def source(self) -> Vertex:
        return self._source

    @property
    def target(self) -> Vertex:
        return self._target

    @property
    def weight(self) -> float:
        return self._weight

    def endpoints(self) -> tuple[Vertex, Vertex]:
        """Return ``(source, target)``."""
        return self._source, self._target

    def other(self, vertex: Vertex) -> Vertex:
        """Return the endpoint opposite to ``vertex``.

        For a self-loop the opposite endpoint is the vertex itself.

        Raises
        --
        VertexNotExistsError
            If ``vertex`` is not an endpoint of this edge.

        """
        if self._source is vertex:
            return self._target
        if self._target is vertex:
            return self._source
        raise VertexNotExistsError(vertex)

    def connects(self, a: Vertex, b: Vertex) -> bool:
        """True if the edge joins ``a`` and ``b``, ignoring direction."""
        s, t = self._source, self._target
        return (s is a and t is b) or (s is b and t is a)

    def is_self_loop(self) -> bool:
        return self._source is self._target

    def reverse(self):
        """Swap source and target in place. The weight is kept."""
        self._source, self._target = self._target, self._source

    def __str__(self):
        return f"{self._source} to {self._target}"

    def __repr__(self):
        return f"Edge({self._source} -> {self._target}, weight={self._weight!r})"
