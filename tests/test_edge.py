import pytest

from wgraph.core import Edge, Vertex, VertexNotExistsError


class TestEdge:
    def test_zero_weight_edge(self):
        v0, v1 = Vertex(0), Vertex(1)
        e = Edge(v0, v1, 0)

        assert str(e) == "0 to 1"
        assert e.source is v0
        assert e.target is v1
        assert e.weight == 0.0

    def test_negative_weight_edge(self):
        v0, v1 = Vertex(0), Vertex(1)
        e = Edge(v0, v1, -5)

        assert str(e) == "0 to 1"
        assert e.weight == -5.0

    def test_default_weight(self):
        e = Edge(Vertex(0), Vertex(1))
        assert e.weight == 1.0

    def test_construction_leaves_vertices_untouched(self):
        v0, v1 = Vertex(0), Vertex(1)
        Edge(v0, v1, 3)
        assert v0.get_degree() == 0
        assert v1.get_degree() == 0

    def test_reverse_in_place(self):
        v0, v1 = Vertex(0), Vertex(1)
        e = Edge(v0, v1, 6)
        e.reverse()

        assert str(e) == "1 to 0"
        assert e.source is v1
        assert e.target is v0
        assert e.weight == 6.0

    def test_reverse_twice_restores(self):
        v0, v1 = Vertex(0), Vertex(1)
        e = Edge(v0, v1, 6)
        e.reverse()
        e.reverse()
        assert e.endpoints() == (v0, v1)

    def test_other_endpoint(self):
        v0, v1, v2 = Vertex(0), Vertex(1), Vertex(2)
        e = Edge(v0, v1)
        assert e.other(v0) is v1
        assert e.other(v1) is v0
        with pytest.raises(VertexNotExistsError):
            e.other(v2)

    def test_self_loop(self):
        v0 = Vertex(0)
        e = Edge(v0, v0, 2)
        assert e.is_self_loop()
        assert e.other(v0) is v0
        assert str(e) == "0 to 0"

    def test_connects_ignores_direction(self):
        v0, v1, v2 = Vertex(0), Vertex(1), Vertex(2)
        e = Edge(v0, v1)
        assert e.connects(v0, v1)
        assert e.connects(v1, v0)
        assert not e.connects(v0, v2)

    def test_identity_not_equality(self):
        v0, v1 = Vertex(0), Vertex(1)
        a = Edge(v0, v1, 1)
        b = Edge(v0, v1, 1)
        assert a != b
        assert len({a, b}) == 2

    def test_repr(self):
        assert repr(Edge(Vertex(3), Vertex(4), 2.5)) == "Edge(3 -> 4, weight=2.5)"

    def test_weight_is_read_only(self):
        e = Edge(Vertex(0), Vertex(1), 3)
        with pytest.raises(AttributeError):
            e.weight = 9
        assert e.weight == 3.0
