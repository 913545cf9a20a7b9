import io

import pytest

from louvaingraph.graph import (
    Edge,
    Graph,
    display_edge_list,
    display_graph,
    display_graph_characteristics,
    duplicate_graph,
    graph_characteristics,
    write_dimacs_edge_list,
    write_edge_list,
)


@pytest.fixture
def path_graph():
    return Graph.from_edges(3, [(0, 1, 2.5), (1, 2)])


def test_from_edges_stores_both_directions(path_graph):
    assert path_graph.num_edges == 2
    assert path_graph.edge_list_ptrs[-1] == 4
    assert [e.tail for e in path_graph.neighbors(1)] == [0, 2]
    assert path_graph.neighbors(0) == [Edge(0, 1, 2.5)]
    assert path_graph.neighbors(2) == [Edge(2, 1, 1.0)]


def test_degrees_sum_to_stored_edges(path_graph):
    total = sum(path_graph.degree(v) for v in range(path_graph.num_vertices))
    assert total == len(path_graph.edge_list)


def test_self_loop_stored_once():
    graph = Graph.from_edges(2, [(0, 0, 3.0), (0, 1)])
    assert graph.degree(0) == 2
    assert graph.degree(1) == 1
    assert graph.neighbors(0)[0] == Edge(0, 0, 3.0)


def test_from_edges_accepts_edge_objects():
    graph = Graph.from_edges(2, [Edge(1, 0, 4.0)])
    assert graph.neighbors(0) == [Edge(0, 1, 4.0)]
    assert graph.neighbors(1) == [Edge(1, 0, 4.0)]


def test_from_edges_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        Graph.from_edges(2, [(0, 2)])


def test_from_edges_rejects_bad_tuple():
    with pytest.raises(ValueError):
        Graph.from_edges(2, [(0,)])


def test_neighbors_out_of_range(path_graph):
    with pytest.raises(IndexError):
        path_graph.neighbors(3)


def test_bad_pointer_length_rejected():
    with pytest.raises(ValueError):
        Graph(num_vertices=2, num_edges=0, edge_list_ptrs=[0], edge_list=[])


def test_duplicate_is_independent(path_graph):
    copy = duplicate_graph(path_graph)
    assert copy == path_graph
    copy.edge_list[0].weight = 99.0
    copy.edge_list_ptrs[0] = 1
    assert path_graph.edge_list[0].weight == 2.5
    assert path_graph.edge_list_ptrs[0] == 0


def test_display_graph_format(path_graph):
    buf = io.StringIO()
    display_graph(path_graph, buf)
    text = buf.getvalue()
    assert text.startswith("***********************************|V|= 3, |E|= 2 \n")
    assert "\nVtx: 1 [1]: 2 (2.5), " in text
    assert text.endswith("\n***********************************\n")


def test_display_edge_list_lines(path_graph):
    buf = io.StringIO()
    display_edge_list(path_graph, buf)
    lines = buf.getvalue().splitlines()
    assert "1 2 2.5" in lines
    assert "3 2 1" in lines


def test_write_dimacs_edge_list_each_edge_once(path_graph):
    buf = io.StringIO()
    write_dimacs_edge_list(path_graph, buf)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "p sp 3 1 "
    arcs = [line for line in lines if line.startswith("a ")]
    assert arcs == ["a 1 2 2.5", "a 2 3 1"]


def test_write_edge_list_matches_storage(path_graph):
    buf = io.StringIO()
    write_edge_list(path_graph, buf)
    pairs = [tuple(map(int, line.split())) for line in buf.getvalue().splitlines()]
    assert pairs == [(e.head, e.tail) for e in path_graph.edge_list]


def test_characteristics_general(path_graph):
    (stats,) = graph_characteristics(path_graph)
    assert stats.side == "all"
    assert stats.num_vertices == 3
    assert stats.max_degree == 2
    assert stats.isolated == 0
    assert stats.average_degree * 3 == pytest.approx(len(path_graph.edge_list))
    assert stats.std_dev ** 2 == pytest.approx(stats.variance)


def test_characteristics_isolated_vertex():
    graph = Graph.from_edges(3, [(0, 1)])
    (stats,) = graph_characteristics(graph)
    assert stats.isolated == 1
    assert stats.isolated_percent == pytest.approx(100 / 3)


def test_characteristics_bipartite():
    graph = Graph.from_edges(3, [(0, 1), (0, 2)])
    graph.s_vertices = 1
    s_stats, t_stats = graph_characteristics(graph)
    assert (s_stats.side, t_stats.side) == ("S", "T")
    assert s_stats.num_vertices == 1
    assert t_stats.num_vertices == 2
    assert s_stats.max_degree == 2
    assert t_stats.degree_one >= s_stats.degree_one


def test_characteristics_empty_graph_raises():
    graph = Graph.from_edges(0, [])
    with pytest.raises(ValueError):
        graph_characteristics(graph)


def test_display_characteristics_report(path_graph):
    buf = io.StringIO()
    display_graph_characteristics(path_graph, buf)
    text = buf.getvalue()
    assert "General Graph: Characteristics :" in text
    assert "Number of vertices   :  3\n" in text
    assert "Number of edges      :  2\n" in text


def test_display_characteristics_bipartite_report():
    graph = Graph.from_edges(3, [(0, 1), (0, 2)])
    graph.s_vertices = 1
    buf = io.StringIO()
    display_graph_characteristics(graph, buf)
    text = buf.getvalue()
    assert "Bipartite Graph: Characteristics of S:" in text
    assert "Bipartite Graph: Characteristics of T:" in text