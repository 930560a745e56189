import polars as pl


class Views:
    # Tabular read-only views, mixed into Graph

    def vertices_view(self):
        """Read-only vertex table.

        Returns
        ---
        polars.DataFrame
            Columns: ``index`` (position in the graph), ``value``, ``degree``.
            Rows follow the vertex index order.

        """
        vertices = self.get_vertices()
        return pl.DataFrame(
            {
                "index": list(range(len(vertices))),
                "value": [v.value for v in vertices],
                "degree": [v.get_degree() for v in vertices],
            },
            schema={"index": pl.Int64, "value": pl.Int64, "degree": pl.Int64},
        )

    def edges_view(self):
        """Read-only edge table.

        Returns
        ---
        polars.DataFrame
            Columns: ``edge_index`` (position in the edge list), ``source`` and
            ``target`` (vertex values), ``weight``.

        Notes
        -
        Two distinct edges between the same vertices appear as two rows.

        """
        edges = self.get_edges()
        return pl.DataFrame(
            {
                "edge_index": list(range(len(edges))),
                "source": [e.source.value for e in edges],
                "target": [e.target.value for e in edges],
                "weight": [e.weight for e in edges],
            },
            schema={
                "edge_index": pl.Int64,
                "source": pl.Int64,
                "target": pl.Int64,
                "weight": pl.Float64,
            },
        )
