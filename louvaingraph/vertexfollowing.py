"""Vertex following: fold isolated and degree-one vertices into neighbours."""

from __future__ import annotations

from typing import Sequence

from louvaingraph.graph import Edge, Graph


def vertex_following(graph: Graph) -> tuple[int, list[int]]:
    """Assign each vertex a community and count the vertices to remove.

    Every vertex starts in its own community. Isolated vertices get ``-1``.
    A degree-one vertex joins its neighbour when that neighbour has higher
    degree, or when both have degree one and the vertex has the larger id.
    Returns the number of such vertices and the assignment.
    """
    communities = list(range(graph.num_vertices))
    removed = 0
    for vertex in range(graph.num_vertices):
        degree = graph.degree(vertex)
        if degree == 0:
            communities[vertex] = -1
            removed += 1
        elif degree == 1:
            tail = graph.neighbors(vertex)[0].tail
            if graph.degree(tail) > 1 or vertex > tail:
                communities[vertex] = tail
                removed += 1
    return removed, communities


def build_new_graph_vf(
    graph: Graph, communities: Sequence[int], num_clusters: int
) -> Graph:
    """Collapse each community into one vertex.

    Communities must be numbered ``0 .. num_clusters - 1``; vertices with a
    negative community are skipped. Weights are truncated to whole numbers
    and summed. An edge inside a community becomes a self-loop stored once;
    other edges are stored in both directions.
    """
    if len(communities) != graph.num_vertices:
        raise ValueError("one community per vertex is required")

    def check(cluster: int) -> None:
        if not 0 <= cluster < num_clusters:
            raise ValueError(
                f"community {cluster} out of range for {num_clusters} clusters"
            )

    cluster_maps: list[dict[int, int]] = [{} for _ in range(num_clusters)]
    for vertex in range(graph.num_vertices):
        own = communities[vertex]
        if own < 0:
            continue
        check(own)
        for edge in graph.neighbors(vertex):
            other = communities[edge.tail]
            check(other)
            if own >= other:
                links = cluster_maps[own]
                links[other] = links.get(other, 0) + int(edge.weight)

    counts = [0] * (num_clusters + 1)
    self_edges = cross_edges = 0
    for cluster, links in enumerate(cluster_maps):
        for other in links:
            counts[cluster + 1] += 1
            if other == cluster:
                self_edges += 1
            else:
                cross_edges += 1
                counts[other + 1] += 1
    ptrs = [0] * (num_clusters + 1)
    for i in range(num_clusters):
        ptrs[i + 1] = ptrs[i] + counts[i + 1]

    slots: list[Edge | None] = [None] * ptrs[-1]
    cursor = ptrs[:-1]
    for cluster, links in enumerate(cluster_maps):
        for other in sorted(links):
            weight = float(links[other])
            slots[cursor[cluster]] = Edge(cluster, other, weight)
            cursor[cluster] += 1
            if other != cluster:
                slots[cursor[other]] = Edge(other, cluster, weight)
                cursor[other] += 1

    return Graph(
        num_vertices=num_clusters,
        num_edges=cross_edges + self_edges,
        edge_list_ptrs=ptrs,
        edge_list=[edge for edge in slots if edge is not None],
        s_vertices=num_clusters,
    )