"""Demonstration entry point: build a tiny directed graph.

Run with ``python -m wgraph`` or ``wgraph-demo``. The log level is read from
``WGRAPH_LOG_LEVEL`` (default ``INFO``).
"""

import logging
import os
import sys

from .core import Edge, Graph, GraphError, Vertex

logger = logging.getLogger("wgraph.demo")


def build_demo_graph() -> Graph:
    g = Graph.new_directed()

    v = [Vertex(0), Vertex(1), Vertex(2)]
    g.add_vertices(*v)

    edge = Edge(v[0], v[1], 0)
    g.add_edges(edge)
    return g


def main() -> int:
    logging.basicConfig(
        level=os.environ.get("WGRAPH_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        g = build_demo_graph()
    except GraphError as exc:
        logger.critical("graph setup failed: %s", exc)
        return 1
    logger.info("built %r: vertices %s, edges %s", g, g, ", ".join(map(str, g.get_edges())))
    return 0


if __name__ == "__main__":
    sys.exit(main())
