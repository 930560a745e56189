from ._CacheManager import NO_CONNECTION
from .edge import Edge
from .exceptions import (
    AlreadyExistsError,
    EdgeAlreadyExistsError,
    EdgeNotExistsError,
    GraphError,
    NotExistsError,
    VertexAlreadyExistsError,
    VertexNotExistsError,
)
from .graph import Graph
from .vertex import Vertex

__all__ = [
    "NO_CONNECTION",
    "Edge",
    "Graph",
    "Vertex",
    "GraphError",
    "AlreadyExistsError",
    "NotExistsError",
    "VertexAlreadyExistsError",
    "VertexNotExistsError",
    "EdgeAlreadyExistsError",
    "EdgeNotExistsError",
]
