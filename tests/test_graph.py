import logging
from itertools import combinations

import pytest

from cliquedensity.graph import (
    Graph,
    count_h_cliques,
    forms_h_clique,
    h_minus_one_cliques,
    load_graph,
    pattern_degree,
    read_graph,
)

EDGES = [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3), (0, 3), (3, 4), (4, 5)]


def make_graph(n=6, edges=EDGES):
    graph = Graph(n, len(edges))
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_add_edge_is_symmetric():
    graph = make_graph()
    for u, v in EDGES:
        assert v in graph.adj[u]
        assert u in graph.adj[v]


def test_add_edge_out_of_range():
    graph = Graph(3)
    with pytest.raises(ValueError):
        graph.add_edge(0, 3)
    with pytest.raises(ValueError):
        graph.add_edge(-1, 1)


def test_max_degree_matches_adjacency():
    graph = make_graph()
    assert graph.max_degree() == max(len(a) for a in graph.adj)
    assert Graph(0).max_degree() == 0


def test_read_graph_basic():
    graph = read_graph(["3 2", "0 1", "1 2"])
    assert graph.n == 3
    assert graph.m == 2
    assert graph.adj == [{1}, {0, 2}, {1}]


def test_read_graph_skips_out_of_range(caplog):
    with caplog.at_level(logging.WARNING):
        graph = read_graph(["3 2\n", "0 1\n", "1 5\n"])
    assert graph.adj == [{1}, {0}, set()]
    assert "out of range" in caplog.text


def test_read_graph_truncated():
    with pytest.raises(ValueError):
        read_graph(["3 2", "0 1"])
    with pytest.raises(ValueError):
        read_graph([])


def test_load_graph(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("4 3\n0 1\n1 2\n2 3\n", encoding="utf-8")
    graph = load_graph(path)
    assert graph.n == 4
    assert graph.adj[1] == {0, 2}
    assert graph.adj[3] == {2}


def test_load_graph_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_graph(tmp_path / "absent.txt")


def test_h2_cliques_are_vertices():
    graph = make_graph()
    assert h_minus_one_cliques(graph, 2) == [(v,) for v in range(graph.n)]


def test_h3_cliques_are_edges():
    graph = make_graph()
    result = h_minus_one_cliques(graph, 3)
    assert set(result) == {tuple(sorted(e)) for e in EDGES}
    assert len(result) == len(EDGES)


@pytest.mark.parametrize("h", [4, 5])
def test_higher_cliques_are_sorted_unique_cliques(h):
    graph = make_graph()
    result = h_minus_one_cliques(graph, h)
    assert len(result) == len(set(result))
    for clique in result:
        assert len(clique) == h - 1
        assert list(clique) == sorted(clique)
        for a, b in combinations(clique, 2):
            assert b in graph.adj[a]


def test_h_minus_one_cliques_rejects_small_h():
    with pytest.raises(ValueError):
        h_minus_one_cliques(make_graph(), 1)


def test_forms_h_clique():
    graph = make_graph()
    assert forms_h_clique(graph, (0, 1), 2)
    assert not forms_h_clique(graph, (0, 1), 4)


def test_count_on_exact_clique_is_one():
    graph = make_graph()
    assert count_h_cliques(graph, [0, 1, 2, 3], 4) == 1


def test_count_too_small_subgraph_is_zero():
    graph = make_graph()
    assert count_h_cliques(graph, [0, 1], 3) == 0
    assert count_h_cliques(graph, [], 2) == 0


def test_count_edges_in_whole_graph():
    graph = make_graph()
    assert count_h_cliques(graph, range(graph.n), 2) == len(EDGES)


@pytest.mark.parametrize("h", [2, 3, 4])
def test_pattern_degrees_sum_to_h_times_cliques(h):
    graph = make_graph()
    total = sum(pattern_degree(graph, v, h) for v in range(graph.n))
    assert total == h * count_h_cliques(graph, range(graph.n), h)


def test_pattern_degree_h2_is_degree():
    graph = make_graph()
    for v in range(graph.n):
        assert pattern_degree(graph, v, 2) == len(graph.adj[v])


def test_pattern_degree_isolated_vertex():
    graph = make_graph(n=7)
    assert pattern_degree(graph, 6, 3) == 0