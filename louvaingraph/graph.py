"""Compressed adjacency graph representation and plain-text reporting helpers."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field, replace
from itertools import accumulate
from typing import Iterable, Sequence, TextIO, Union

_STARS = "***********************************"
_REPORT_RULE = "*******************************************"

EdgeLike = Union["Edge", Sequence[float]]


@dataclass(slots=True)
class Edge:
    """A directed half of an edge: ``head -> tail`` with a weight."""

    head: int
    tail: int
    weight: float = 1.0


@dataclass
class Graph:
    """Undirected graph stored as a compressed adjacency list.

    ``edge_list_ptrs[v]:edge_list_ptrs[v + 1]`` delimits the neighbours of
    ``v`` in ``edge_list``. Each edge is stored twice (once per direction),
    self-loops once, while ``num_edges`` counts every edge once. For a
    bipartite graph ``s_vertices`` is the number of vertices on the S side;
    otherwise it equals ``num_vertices`` (or is zero).
    """

    num_vertices: int
    num_edges: int
    edge_list_ptrs: list[int]
    edge_list: list[Edge]
    s_vertices: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.num_vertices < 0:
            raise ValueError("number of vertices cannot be negative")
        if len(self.edge_list_ptrs) != self.num_vertices + 1:
            raise ValueError(
                "edge_list_ptrs must hold num_vertices + 1 entries"
            )
        if self.edge_list_ptrs and self.edge_list_ptrs[-1] > len(self.edge_list):
            raise ValueError("edge_list_ptrs points past the end of edge_list")
        if self.s_vertices < 0:
            self.s_vertices = self.num_vertices

    @classmethod
    def from_edges(cls, num_vertices: int, edges: Iterable[EdgeLike]) -> "Graph":
        """Build a graph from undirected edges given as ``Edge`` or tuples.

        Tuples are ``(head, tail)`` or ``(head, tail, weight)``. Neighbour
        lists keep the order in which edges were given.
        """
        parsed: list[Edge] = []
        for item in edges:
            if isinstance(item, Edge):
                edge = Edge(item.head, item.tail, item.weight)
            elif len(item) == 2:
                edge = Edge(int(item[0]), int(item[1]), 1.0)
            elif len(item) == 3:
                edge = Edge(int(item[0]), int(item[1]), float(item[2]))
            else:
                raise ValueError(f"cannot interpret {item!r} as an edge")
            for end in (edge.head, edge.tail):
                if not 0 <= end < num_vertices:
                    raise ValueError(
                        f"vertex {end} out of range for {num_vertices} vertices"
                    )
            parsed.append(edge)

        counts = [0] * (num_vertices + 1)
        for edge in parsed:
            counts[edge.head + 1] += 1
            if edge.head != edge.tail:
                counts[edge.tail + 1] += 1
        ptrs = list(accumulate(counts))

        slots: list[Edge | None] = [None] * ptrs[-1]
        cursor = ptrs[:-1]
        for edge in parsed:
            slots[cursor[edge.head]] = Edge(edge.head, edge.tail, edge.weight)
            cursor[edge.head] += 1
            if edge.head != edge.tail:
                slots[cursor[edge.tail]] = Edge(edge.tail, edge.head, edge.weight)
                cursor[edge.tail] += 1

        return cls(
            num_vertices=num_vertices,
            num_edges=len(parsed),
            edge_list_ptrs=ptrs,
            edge_list=[edge for edge in slots if edge is not None],
            s_vertices=num_vertices,
        )

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def neighbors(self, vertex: int) -> list[Edge]:
        """Return the stored edges leaving ``vertex``."""
        self._check_vertex(vertex)
        start, end = self.edge_list_ptrs[vertex], self.edge_list_ptrs[vertex + 1]
        return self.edge_list[start:end]

    def degree(self, vertex: int) -> int:
        """Return the number of stored edges leaving ``vertex``."""
        self._check_vertex(vertex)
        return self.edge_list_ptrs[vertex + 1] - self.edge_list_ptrs[vertex]

    @property
    def is_bipartite(self) -> bool:
        return self.s_vertices not in (0, self.num_vertices)


@dataclass(frozen=True)
class GraphCharacteristics:
    """Degree statistics of one vertex set of a graph."""

    title: str
    side: str
    num_vertices: int
    other_vertices: int
    num_edges: int
    max_degree: int
    average_degree: float
    mean_square_degree: float
    variance: float
    std_dev: float
    isolated: int
    degree_one: int
    isolated_percent: float
    degree_one_percent: float
    density_percent: float


def _out(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def display_graph(graph: Graph, out: TextIO | None = None) -> None:
    """Write every vertex with its neighbour list (1-based ids)."""
    stream = _out(out)
    stream.write(_STARS)
    stream.write(f"|V|= {graph.num_vertices}, |E|= {graph.num_edges} \n")
    stream.write(_STARS)
    for vertex in range(graph.num_vertices):
        neighbours = graph.neighbors(vertex)
        stream.write(f"\nVtx: {vertex + 1} [{len(neighbours)}]: ")
        for edge in neighbours:
            stream.write(f"{edge.tail + 1} ({edge.weight:g}), ")
    stream.write(f"\n{_STARS}\n")


def duplicate_graph(graph: Graph) -> Graph:
    """Return an independent copy of ``graph``."""
    return Graph(
        num_vertices=graph.num_vertices,
        num_edges=graph.num_edges,
        edge_list_ptrs=list(graph.edge_list_ptrs),
        edge_list=[replace(edge) for edge in graph.edge_list],
        s_vertices=graph.s_vertices,
    )


def display_edge_list(graph: Graph, out: TextIO | None = None) -> None:
    """Write every stored edge as ``head tail weight`` with 1-based ids."""
    stream = _out(out)
    stream.write(_STARS)
    stream.write(f"|V|= {graph.num_vertices}, |E|= {graph.num_edges} \n")
    for vertex in range(graph.num_vertices):
        for edge in graph.neighbors(vertex):
            stream.write(f"{vertex + 1} {edge.tail + 1} {edge.weight:g}\n")
    stream.write(f"\n{_STARS}\n")


def write_dimacs_edge_list(graph: Graph, out: TextIO) -> None:
    """Write the graph in DIMACS shortest-path form, each edge once."""
    out.write(f"p sp {graph.num_vertices} {graph.num_edges // 2} \n")
    for vertex in range(graph.num_vertices):
        for edge in graph.neighbors(vertex):
            if vertex < edge.tail:
                out.write(f"a {vertex + 1} {edge.tail + 1} {edge.weight:g}\n")


def write_edge_list(graph: Graph, out: TextIO) -> None:
    """Write every stored edge as ``head tail`` with 0-based ids."""
    for vertex in range(graph.num_vertices):
        for edge in graph.neighbors(vertex):
            out.write(f"{vertex} {edge.tail}\n")


def _side_stats(
    graph: Graph,
    vertices: range,
    title: str,
    side: str,
    other_vertices: int,
    degree_one_start: int,
    degree_one_base: int,
) -> GraphCharacteristics:
    degrees = [graph.degree(v) for v in vertices]
    count = len(degrees)
    total = sum(degrees)
    average = total / count
    mean_square = sum(d * d for d in degrees) / count
    variance = mean_square - average * average
    isolated = sum(1 for d in degrees if d == 0)
    degree_one = degree_one_start + sum(1 for d in degrees if d == 1)
    return GraphCharacteristics(
        title=title,
        side=side,
        num_vertices=count,
        other_vertices=other_vertices,
        num_edges=graph.num_edges,
        max_degree=max(degrees, default=0),
        average_degree=average,
        mean_square_degree=mean_square,
        variance=variance,
        std_dev=math.sqrt(max(variance, 0.0)),
        isolated=isolated,
        degree_one=degree_one,
        isolated_percent=isolated / count * 100,
        degree_one_percent=degree_one / degree_one_base * 100,
        density_percent=graph.num_edges / (count * count) * 100,
    )


def graph_characteristics(graph: Graph) -> tuple[GraphCharacteristics, ...]:
    """Compute degree statistics.

    A general graph yields one entry; a bipartite graph yields one for the
    S side and one for the T side. As in the reports, the degree-one count
    of the T side continues from that of the S side, and degree-one
    percentages are taken over all vertices.
    """
    nv = graph.num_vertices
    if nv == 0:
        raise ValueError("graph has no vertices")
    ns = graph.s_vertices
    if not graph.is_bipartite:
        return (
            _side_stats(graph, range(nv), "General Graph", "all", 0, 0, nv),
        )
    if not 0 < ns < nv:
        raise ValueError("S side size must lie between 0 and the vertex count")
    nt = nv - ns
    s_stats = _side_stats(graph, range(ns), "Bipartite Graph", "S", nt, 0, nv)
    t_stats = _side_stats(
        graph, range(ns, nv), "Bipartite Graph", "T", ns, s_stats.degree_one, nv
    )
    return s_stats, t_stats


def _write_common(stream: TextIO, stats: GraphCharacteristics) -> None:
    stream.write(f"Number of edges      :  {stats.num_edges}\n")
    stream.write(f"Maximum out-degree is:  {stats.max_degree}\n")
    stream.write(f"Average out-degree is:  {stats.average_degree:f}\n")
    stream.write(f"Expected value of X^2:  {stats.mean_square_degree:f}\n")
    stream.write(f"Variance is          :  {stats.variance:f}\n")
    stream.write(f"Standard deviation   :  {stats.std_dev:f}\n")


def display_graph_characteristics(graph: Graph, out: TextIO | None = None) -> None:
    """Write a human-readable report of :func:`graph_characteristics`."""
    stream = _out(out)
    stream.write("Within displayGraphCharacteristics()\n")
    report = graph_characteristics(graph)
    if len(report) == 1:
        stats = report[0]
        stream.write(f"{_REPORT_RULE}\n")
        stream.write("General Graph: Characteristics :\n")
        stream.write(f"{_REPORT_RULE}\n")
        stream.write(f"Number of vertices   :  {stats.num_vertices}\n")
        _write_common(stream, stats)
        stream.write(
            f"Isolated vertices    :  {stats.isolated} "
            f"({stats.isolated_percent:3.2f}%)\n"
        )
        stream.write(
            f"Degree-one vertices  :  {stats.degree_one} "
            f"({stats.degree_one_percent:3.2f}%)\n"
        )
        stream.write(f"Density              :  {stats.density_percent:f}%\n")
        stream.write(f"{_REPORT_RULE}\n")
        return

    s_stats, t_stats = report
    stream.write(f"{_REPORT_RULE}\n")
    stream.write("Bipartite Graph: Characteristics of S:\n")
    stream.write(f"{_REPORT_RULE}\n")
    stream.write(f"Number of S vertices :  {s_stats.num_vertices}\n")
    stream.write(f"Number of T vertices :  {s_stats.other_vertices}\n")
    _write_common(stream, s_stats)
    stream.write(
        f"Isolated (S)vertices :  {s_stats.isolated} "
        f"({s_stats.isolated_percent:3.2f}%)\n"
    )
    stream.write(
        f"Degree-one vertices  :  {s_stats.degree_one} "
        f"({s_stats.degree_one_percent:3.2f}%)\n"
    )
    stream.write(f"Density              :  {s_stats.density_percent:f}%\n")
    stream.write(f"{_REPORT_RULE}\n")

    stream.write("Bipartite Graph: Characteristics of T:\n")
    stream.write(f"{_REPORT_RULE}\n")
    stream.write(f"Number of T vertices :  {t_stats.num_vertices}\n")
    stream.write(f"Number of S vertices :  {t_stats.other_vertices}\n")
    _write_common(stream, t_stats)
    stream.write(
        f"Isolated (T)vertices :  {t_stats.isolated} "
        f"({t_stats.isolated_percent:3.2f}%)\n"
    )
    stream.write(
        f"Degree-one vertices  :  {t_stats.degree_one} "
        f"({t_stats.degree_one_percent:3.2f}%)\n"
    )
    stream.write(f"Density              :  {t_stats.density_percent:f}%\n")
    stream.write(f"{_REPORT_RULE}\n")