from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .exceptions import EdgeAlreadyExistsError, EdgeNotExistsError

if TYPE_CHECKING:
    from .edge import Edge


class Vertex:
    """Single point of a graph, identified by an integer value.

    Parameters
    --
    value : int
        Identity key of the vertex. A graph holds at most one vertex per value.

    Notes
    -
    - Incident edges are kept in insertion order in a dict used as an ordered
      identity set (edge -> None), so membership tests and removals are O(1).
    - Vertices compare and hash by identity. Two ``Vertex(3)`` objects are
      different vertices.

    """

    def __init__(self, value: int):
        self.value = int(value)
        self._edges: dict[Edge, None] = {}

    # Incident edges

    def add_edges(self, *edges: Edge):
        """Append edges to the incident list.

        Raises
        --
        EdgeAlreadyExistsError
            On the first edge already held. Edges before it stay appended.

        """
        for edge in edges:
            if edge in self._edges:
                raise EdgeAlreadyExistsError(edge)
            self._edges[edge] = None

    def delete_edge(self, edge: Edge):
        """Remove an incident edge.

        Raises
        --
        EdgeNotExistsError
            If the edge is not incident to this vertex.

        """
        if edge not in self._edges:
            raise EdgeNotExistsError(edge)
        del self._edges[edge]

    def delete_all_edges(self):
        self._edges.clear()

    def _attach(self, edge: Edge):
        # graph-side insert; a no-op when the edge is already held
        self._edges.setdefault(edge, None)

    def _detach(self, edge: Edge):
        self._edges.pop(edge, None)

    # Queries

    def get_edges(self) -> list[Edge]:
        return list(self._edges)

    def get_degree(self) -> int:
        """Number of incident edges held by this vertex."""
        return len(self._edges)

    def get_neighbors(self) -> list[Vertex]:
        """Vertices at the other end of each incident edge, in incident order.

        Works whether this vertex is the source or the target of an edge; a
        self-loop yields the vertex itself.
        """
        neighbors = []
        for edge in self._edges:
            neighbor = edge.source
            if neighbor is self:
                neighbor = edge.target
            neighbors.append(neighbor)
        return neighbors

    def has_edge(self, edge: Edge) -> bool:
        return edge in self._edges

    def has_neighbor(self, vertex: Vertex) -> bool:
        return any(edge.connects(self, vertex) for edge in self._edges)

    def find_edge(self, vertex: Vertex) -> Optional[Edge]:
        """First incident edge connecting to ``vertex`` in either direction, or None."""
        for edge in self._edges:
            if edge.connects(self, vertex):
                return edge
        return None

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Vertex({self.value})"
