import pytest

from dslab.mincut.graph import Edge, Graph, format_edges


def test_edges_keep_order():
    g = Graph(3, [(0, 1), (1, 2)])
    assert g.edges == [Edge(0, 1), Edge(1, 2)]
    assert g.vertices == 3


def test_add_edge_returns_edge():
    g = Graph(2)
    assert g.add_edge(1, 0) == Edge(1, 0)
    assert len(g.edges) == 1


@pytest.mark.parametrize("src, dest", [(0, 3), (-1, 0), (3, 3)])
def test_add_edge_out_of_range(src, dest):
    g = Graph(3)
    with pytest.raises(ValueError):
        g.add_edge(src, dest)
    assert g.edges == []


def test_negative_vertices_rejected():
    with pytest.raises(ValueError):
        Graph(-2)


def test_to_dot():
    g = Graph(2, [(0, 1)])
    assert g.to_dot("Graph") == "digraph Graph {\n0 -> 1 [dir=none];\n}\n"


def test_to_dot_has_line_per_edge():
    g = Graph(4, [(0, 1), (1, 2), (2, 3)])
    lines = g.to_dot("G").splitlines()
    assert lines[0] == "digraph G {"
    assert lines[-1] == "}"
    assert len(lines) == 2 + len(g.edges)


def test_format_edges():
    assert format_edges([Edge(0, 1), Edge(2, 3)]) == "0 - 1\n2 - 3"


def test_format_edges_empty():
    assert format_edges([]) == ""