"""Building blocks of the Louvain local-moving step.

Vertex degrees, the modularity scaling constant, initial community
assignments, per-vertex neighbour-community counters and the choice of
the community that gives the largest modularity gain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, MutableSequence, Sequence

from louvaingraph.graph import Graph


@dataclass
class Community:
    """Number of member vertices and total weighted degree of a community."""

    size: int = 1
    degree: float = 0.0


def sum_vertex_degree(graph: Graph) -> tuple[list[float], list[Community]]:
    """Return the weighted degree of every vertex and one community per vertex.

    Each community starts as the singleton holding its vertex, so its
    degree equals that vertex's degree.
    """
    degrees = [
        sum(edge.weight for edge in graph.neighbors(vertex))
        for vertex in range(graph.num_vertices)
    ]
    communities = [Community(size=1, degree=degree) for degree in degrees]
    return degrees, communities


def constant_for_second_term(vertex_degrees: Sequence[float]) -> float:
    """Return ``1 / (2m)``, the reciprocal of the sum of all vertex degrees."""
    total = sum(vertex_degrees)
    if total == 0:
        raise ValueError("total edge weight is zero")
    return 1.0 / total


def init_community_assignment(num_vertices: int) -> tuple[list[int], list[int]]:
    """Return past and current assignments placing each vertex in its own community."""
    if num_vertices < 0:
        raise ValueError("number of vertices cannot be negative")
    return list(range(num_vertices)), list(range(num_vertices))


def update_community_info(
    communities: MutableSequence[Community],
    assignment: Sequence[int],
    vertex_degrees: Sequence[float],
) -> None:
    """Move every vertex ``i`` from community ``i`` to ``assignment[i]``.

    Assumes each vertex was alone in its own community before the move.
    """
    if len(assignment) != len(vertex_degrees):
        raise ValueError("assignment and degrees must have the same length")
    for vertex, target in enumerate(assignment):
        if target == vertex:
            continue
        degree = vertex_degrees[vertex]
        communities[vertex].degree -= degree
        communities[vertex].size -= 1
        communities[target].degree += degree
        communities[target].size += 1


def _gain(
    eiy: float, eix: float, degree: float, ay: float, ax: float, constant: float
) -> float:
    return 2 * (eiy - eix) - 2 * degree * (ay - ax) * constant


def init_community_assignment_opt(
    graph: Graph,
    communities: MutableSequence[Community],
    constant: float,
    vertex_degrees: Sequence[float],
) -> tuple[list[int], list[int]]:
    """Make a first move for every vertex, assuming singleton communities.

    Every neighbour is treated as its own community and duplicate edges are
    not merged. The best move of each vertex is chosen against the
    community data as it stands before any move; ``communities`` is then
    updated for all moves at once. Returns the past (identity) and current
    assignments.
    """
    nv = graph.num_vertices
    past = list(range(nv))
    current = [0] * nv
    for v in range(nv):
        own_counter = 0.0
        self_loop = 0.0
        candidates: list[tuple[int, float]] = []
        for edge in graph.neighbors(v):
            if edge.tail == v:
                self_loop += int(edge.weight)
                own_counter = edge.weight
                continue
            candidates.append((edge.tail, edge.weight))

        best = v
        max_gain = 0.0
        eix = own_counter - self_loop
        ax = communities[v].degree - vertex_degrees[v]
        for cid, eiy in candidates:
            if cid == v:
                continue
            gain = _gain(
                eiy, eix, vertex_degrees[v], communities[cid].degree, ax, constant
            )
            if gain > max_gain or (gain == max_gain and gain != 0 and cid < best):
                max_gain = gain
                best = cid

        if communities[best].size == 1 and communities[v].size == 1 and best > v:
            best = v
        current[v] = best

    update_community_info(communities, current, vertex_degrees)
    return past, current


def build_local_map_counter(
    graph: Graph, vertex: int, assignment: Sequence[int]
) -> tuple[dict[int, float], float]:
    """Sum the edge weight from ``vertex`` into each neighbouring community.

    The map starts with the vertex's own community at weight zero, so it is
    never empty. Returns the map and the total self-loop weight of the vertex.
    """
    local_map: dict[int, float] = {assignment[vertex]: 0.0}
    self_loop = 0.0
    for edge in graph.neighbors(vertex):
        if edge.tail == vertex:
            self_loop += edge.weight
        cluster = assignment[edge.tail]
        local_map[cluster] = local_map.get(cluster, 0.0) + edge.weight
    return local_map, self_loop


def best_community(
    local_map: Mapping[int, float],
    self_loop: float,
    communities: Sequence[Community],
    degree: float,
    current: int,
    constant: float,
) -> int:
    """Return the community a vertex should join for the largest modularity gain.

    ``local_map`` maps community ids to the edge weight from the vertex into
    them and must contain ``current``. Candidates are examined in increasing
    id order; a positive tie goes to the smaller id. A move between two
    singleton communities is only made towards the smaller id.
    """
    if current not in local_map:
        raise ValueError("local map must contain the current community")
    best = current
    max_gain = 0.0
    eix = local_map[current] - self_loop
    ax = communities[current].degree - degree
    for cid in sorted(local_map):
        if cid == current:
            continue
        gain = _gain(
            local_map[cid], eix, degree, communities[cid].degree, ax, constant
        )
        if gain > max_gain or (gain == max_gain and gain != 0 and cid < best):
            max_gain = gain
            best = cid

    if (
        communities[best].size == 1
        and communities[current].size == 1
        and best > current
    ):
        best = current
    return best