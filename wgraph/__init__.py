# wgraph/__init__.py
"""wgraph: weighted directed/undirected graphs, single import."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

from .core import (
    NO_CONNECTION,
    AlreadyExistsError,
    Edge,
    EdgeAlreadyExistsError,
    EdgeNotExistsError,
    Graph,
    GraphError,
    NotExistsError,
    Vertex,
    VertexAlreadyExistsError,
    VertexNotExistsError,
)

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "wgraph.adapters",
    "networkx": "wgraph.adapters.networkx_adapter",
}

# Optional-dependency symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    "to_nx": ("wgraph.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("wgraph.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(
    set(list(_lazy_submodules) + list(_lazy_symbols))
    | {
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
    }
)


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("wgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
