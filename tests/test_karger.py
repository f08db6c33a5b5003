import random

import pytest

from dslab.mincut.graph import Edge, Graph
from dslab.mincut.karger import MinCut, format_mincut, karger, karger_mincut, trial_count


def _two_triangles():
    return Graph(6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)])


def test_single_edge_is_the_cut():
    g = Graph(2, [(0, 1)])
    assert karger_mincut(g, random.Random(0)).edges == (Edge(0, 1),)


def test_parallel_edges_all_cut():
    g = Graph(2, [(0, 1), (0, 1), (1, 0)])
    assert karger(g, random.Random(0)).size == len(g.edges)


def test_triangle_cut_has_two_edges():
    g = Graph(3, [(0, 1), (1, 2), (2, 0)])
    result = karger(g, random.Random(4))
    assert result.size == 2
    assert set(result.edges) <= set(g.edges)


def test_bridge_between_triangles_is_found():
    result = karger(_two_triangles(), random.Random(1))
    assert result.edges == (Edge(2, 3),)


def test_single_run_cut_is_at_least_minimum():
    g = _two_triangles()
    for seed in range(10):
        cut = karger_mincut(g, random.Random(seed))
        assert cut.size >= 1
        assert set(cut.edges) <= set(g.edges)


def test_disconnected_graph_has_empty_cut():
    g = Graph(4, [(0, 1), (2, 3)])
    assert karger(g, random.Random(0)).size == 0


def test_isolated_vertices_do_not_hang():
    g = Graph(5, [(0, 1)])
    assert karger_mincut(g, random.Random(0)) == MinCut(())


def test_trial_count_grows():
    counts = [trial_count(n) for n in range(2, 20)]
    assert counts == sorted(counts)
    assert trial_count(2) == 2


def test_zero_trials_rejected():
    with pytest.raises(ValueError):
        karger(Graph(2, [(0, 1)]), random.Random(0), trials=0)


def test_format_not_connected():
    text = format_mincut(MinCut(()))
    assert text.splitlines() == ["Answer: 0", "Graph is not well-connected"]


def test_format_with_edges():
    text = format_mincut(MinCut((Edge(0, 1),)))
    assert "The list of edges to delete: " in text
    assert text.splitlines()[-1] == "0 - 1"