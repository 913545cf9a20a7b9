import pytest

from louvaingraph.graph import Edge, Graph
from louvaingraph.similarity import (
    edge_similarity,
    merge_sort_edges,
    sort_neighbor_lists,
)


def test_merge_sort_orders_by_tail():
    edges = [Edge(0, 5, 1.0), Edge(0, 2, 2.0), Edge(0, 9, 3.0), Edge(0, 1, 4.0)]
    result = merge_sort_edges(edges)
    assert [e.tail for e in result] == [1, 2, 5, 9]
    assert [e.weight for e in result] == [4.0, 2.0, 1.0, 3.0]


def test_merge_sort_is_stable():
    edges = [Edge(0, 3, 1.0), Edge(0, 3, 2.0), Edge(0, 1, 3.0), Edge(0, 3, 4.0)]
    result = merge_sort_edges(edges)
    assert [(e.tail, e.weight) for e in result] == [
        (1, 3.0), (3, 1.0), (3, 2.0), (3, 4.0)
    ]


def test_merge_sort_keeps_heads_in_place():
    edges = [Edge(7, 4, 1.0), Edge(8, 2, 2.0)]
    result = merge_sort_edges(edges)
    assert [e.head for e in result] == [7, 8]
    assert [e.tail for e in result] == [2, 4]


def test_merge_sort_does_not_modify_input():
    edges = [Edge(0, 3, 1.0), Edge(0, 1, 2.0)]
    merge_sort_edges(edges)
    assert [e.tail for e in edges] == [3, 1]


def test_sort_neighbor_lists_sorts_each_vertex():
    graph = Graph.from_edges(4, [(0, 3), (0, 1), (0, 2), (2, 1), (3, 1)])
    sort_neighbor_lists(graph)
    for v in range(graph.num_vertices):
        tails = [e.tail for e in graph.neighbors(v)]
        assert tails == sorted(tails)
        assert all(e.head == v for e in graph.neighbors(v))


def test_sort_neighbor_lists_preserves_edge_multiset():
    graph = Graph.from_edges(4, [(0, 3, 2.0), (0, 1, 5.0), (2, 1, 1.5)])
    before = sorted((e.head, e.tail, e.weight) for e in graph.edge_list)
    sort_neighbor_lists(graph)
    after = sorted((e.head, e.tail, e.weight) for e in graph.edge_list)
    assert before == after


def test_similarity_aligned_and_symmetric():
    graph = Graph.from_edges(5, [(0, 1), (0, 2), (1, 2), (2, 3), (3, 4), (1, 4)])
    sort_neighbor_lists(graph)
    scores = edge_similarity(graph)
    assert len(scores) == len(graph.edge_list)
    lookup = {}
    for v in range(graph.num_vertices):
        start = graph.edge_list_ptrs[v]
        for offset, e in enumerate(graph.neighbors(v)):
            lookup[(v, e.tail)] = scores[start + offset]
    for (v, w), score in lookup.items():
        assert lookup[(w, v)] == score
        assert score in (0.0, 1.0)


def test_identical_neighbourhoods_score_one():
    graph = Graph.from_edges(2, [(0, 0), (1, 1), (0, 1)])
    sort_neighbor_lists(graph)
    assert edge_similarity(graph) == [1.0] * len(graph.edge_list)


def test_differing_neighbourhoods_score_zero():
    graph = Graph.from_edges(3, [(0, 1), (1, 2), (0, 2)])
    sort_neighbor_lists(graph)
    assert edge_similarity(graph) == [0.0] * 6