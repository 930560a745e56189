import polars as pl

from wgraph.core import Edge, Graph, Vertex


class TestViews:
    def test_vertices_view(self, weighted_directed):
        g, v, _ = weighted_directed
        df = g.vertices_view()
        assert isinstance(df, pl.DataFrame)
        assert df.columns == ["index", "value", "degree"]
        assert df["value"].to_list() == [0, 1, 2, 3]
        assert df["degree"].to_list() == [1, 2, 1, 0]

    def test_edges_view(self, weighted_directed):
        g, _, _ = weighted_directed
        df = g.edges_view()
        assert df.columns == ["edge_index", "source", "target", "weight"]
        assert list(zip(df["source"].to_list(), df["target"].to_list())) == [
            (0, 1),
            (1, 2),
            (2, 3),
            (1, 3),
        ]
        assert df["weight"].sum() == 15.0

    def test_edges_view_follows_reverse(self, weighted_directed):
        g, _, _ = weighted_directed
        g.reverse()
        df = g.edges_view()
        assert df["source"].to_list() == [1, 2, 3, 3]
        assert df["target"].to_list() == [0, 1, 2, 1]

    def test_empty_views(self):
        g = Graph()
        assert g.vertices_view().height == 0
        assert g.edges_view().height == 0
        assert g.edges_view().schema["weight"] == pl.Float64

    def test_views_are_snapshots(self):
        g = Graph(directed=False)
        v0, v1 = Vertex(0), Vertex(1)
        g.add_edges(Edge(v0, v1, 2))
        df = g.edges_view()
        g.add_edges(Edge(v1, Vertex(2), 3))
        assert df.height == 1
        assert g.edges_view().height == 2
