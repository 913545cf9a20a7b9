"""Edge-list utilities: symmetrising, de-duplicating, bucketing and reordering."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence

from louvaingraph.graph import Edge, Graph


def convert_directed_to_undirected(graph: Graph) -> Graph:
    """Return an undirected graph built from a directed one.

    Every stored edge ``v -> w`` with ``w >= v`` is added in both
    directions; edges with ``w < v`` are skipped, since they are expected
    to be reached from the other end. A self-loop is therefore stored twice.
    """
    nv = graph.num_vertices
    kept: list[Edge] = [
        edge
        for v in range(nv)
        for edge in graph.neighbors(v)
        if edge.tail >= v
    ]

    counts = [0] * (nv + 1)
    for edge in kept:
        counts[edge.head + 1] += 1
        counts[edge.tail + 1] += 1
    ptrs = list(accumulate(counts))
    if ptrs[-1] != 2 * len(kept):
        raise ValueError(
            f"number of edges added is not correct ({ptrs[-1]}, {2 * len(kept)})"
        )

    slots: list[Edge | None] = [None] * ptrs[-1]
    cursor = ptrs[:-1]
    for edge in kept:
        v, w = edge.head, edge.tail
        slots[cursor[v]] = Edge(v, w, edge.weight)
        cursor[v] += 1
        slots[cursor[w]] = Edge(w, v, edge.weight)
        cursor[w] += 1

    return Graph(
        num_vertices=nv,
        num_edges=len(kept),
        edge_list_ptrs=ptrs,
        edge_list=[edge for edge in slots if edge is not None],
        s_vertices=nv,
    )


def remove_edges(num_vertices: int, edges: Sequence[Edge]) -> list[Edge]:
    """Drop self-loops and repeated ``head -> tail`` pairs.

    Good edges are moved to the front: each bad edge in the front part is
    replaced by the last remaining edge of the list, which fixes the order
    of the result.
    """
    work = [Edge(e.head, e.tail, e.weight) for e in edges]
    seen: list[set[int]] = [set() for _ in range(num_vertices)]
    good = [False] * len(work)
    for index, edge in enumerate(work):
        if not 0 <= edge.head < num_vertices:
            raise ValueError(f"vertex {edge.head} out of range")
        if edge.head == edge.tail:
            continue
        if edge.tail in seen[edge.head]:
            continue
        seen[edge.head].add(edge.tail)
        good[index] = True

    num_good = sum(good)
    end = len(work)
    for i in range(num_good):
        while not good[i]:
            end -= 1
            work[i] = work[end]
            good[i] = good[end]
    return work[:num_good]


def sort_edges_undirected(
    num_vertices: int, edges: Sequence[Edge]
) -> tuple[list[int], list[Edge]]:
    """Bucket each undirected edge in both directions by its head.

    Returns the pointer array (``num_vertices + 1`` entries) and the edge
    list in which the edges of vertex ``v`` occupy ``ptrs[v]:ptrs[v + 1]``,
    in input order.
    """
    counts = [0] * (num_vertices + 1)
    for edge in edges:
        for end in (edge.head, edge.tail):
            if not 0 <= end < num_vertices:
                raise ValueError(f"vertex {end} out of range")
        counts[edge.head + 1] += 1
        counts[edge.tail + 1] += 1
    ptrs = list(accumulate(counts))

    slots: list[Edge | None] = [None] * ptrs[-1]
    cursor = ptrs[:-1]
    for edge in edges:
        slots[cursor[edge.head]] = Edge(edge.head, edge.tail, edge.weight)
        cursor[edge.head] += 1
        slots[cursor[edge.tail]] = Edge(edge.tail, edge.head, edge.weight)
        cursor[edge.tail] += 1
    return ptrs, [edge for edge in slots if edge is not None]


def _merge_by_tail(left: list[Edge], right: list[Edge]) -> list[Edge]:
    merged: list[Edge] = []
    j = k = 0
    while j < len(left) and k < len(right):
        if left[j].tail < right[k].tail:
            merged.append(left[j])
            j += 1
        else:
            merged.append(right[k])
            k += 1
    merged.extend(left[j:])
    merged.extend(right[k:])
    return merged


def _sort_segment(segment: list[Edge]) -> list[Edge]:
    width = 1
    while width < len(segment):
        segment = [
            edge
            for start in range(0, len(segment), 2 * width)
            for edge in _merge_by_tail(
                segment[start:start + width],
                segment[start + width:start + 2 * width],
            )
        ]
        width *= 2
    return segment


def sort_node_edges_by_index(
    num_vertices: int, edges: Sequence[Edge], ptrs: Sequence[int]
) -> list[Edge]:
    """Return the edges with each vertex's neighbours ordered by tail.

    A bottom-up merge sort is used; of two equal tails, the one from the
    right half comes first.
    """
    if len(ptrs) < num_vertices + 1:
        raise ValueError("ptrs must hold num_vertices + 1 entries")
    result = list(edges)
    for v in range(num_vertices):
        start, end = ptrs[v], ptrs[v + 1]
        result[start:end] = _sort_segment(list(result[start:end]))
    return result


def build_old_to_new_map(communities: Sequence[int]) -> list[int]:
    """Group vertices by community and return the vertex ids in that order.

    Communities come in increasing id order; vertices with a negative
    (unassigned) community are placed last. Within a community vertices
    keep their original order.
    """
    if not communities:
        raise ValueError("community assignment is empty")
    largest = max(max(communities), -1)
    has_zero = 0 in communities
    has_negative = any(c < 0 for c in communities)
    num_communities = largest + int(has_zero) + int(has_negative)
    if num_communities <= 0:
        raise ValueError("no vertex is assigned to a community")

    offset = 0 if has_zero else 1
    buckets: list[list[int]] = [[] for _ in range(num_communities)]
    for vertex, community in enumerate(communities):
        slot = num_communities - 1 if community < 0 else community - offset
        buckets[slot].append(vertex)
    return [vertex for bucket in buckets for vertex in bucket]