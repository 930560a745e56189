"""Error taxonomy for graph, vertex and edge operations.

Every error carries the offending key (vertex value, vertex or edge) for
diagnostics. ``AlreadyExistsError`` is a ``ValueError`` and ``NotExistsError``
is a ``KeyError`` so callers may catch either the specific class or the
builtin one.
"""


class GraphError(Exception):
    """Base class for all wgraph errors."""


class AlreadyExistsError(GraphError, ValueError):
    pass


class NotExistsError(GraphError, KeyError):
    def __str__(self):
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class VertexAlreadyExistsError(AlreadyExistsError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"vertex already exists: {value}")


class VertexNotExistsError(NotExistsError):
    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"vertex does not exist: {vertex}")


class EdgeAlreadyExistsError(AlreadyExistsError):
    def __init__(self, edge):
        self.edge = edge
        super().__init__(f"edge already exists: {edge}")


class EdgeNotExistsError(NotExistsError):
    def __init__(self, edge):
        self.edge = edge
        super().__init__(f"edge does not exist: {edge}")
