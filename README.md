# louvaingraph

Building blocks for modularity-based (Louvain-style) community detection on
undirected, weighted graphs stored in compressed sparse row (CSR) form. Pure
Python, no dependencies.

## Installation

```
pip install .
```

## Modules

### `louvaingraph.graph`

- `Edge(head, tail, weight=1.0)`: one stored direction of an edge.
- `Graph`: `num_vertices`, `num_edges`, `edge_list_ptrs`, `edge_list` and
  `s_vertices` (the S side of a bipartite graph; defaults to the vertex
  count). Every edge is stored in both directions, self-loops once, while
  `num_edges` counts each edge once.
  - `Graph.from_edges(num_vertices, edges)` takes `Edge` objects or
    `(head, tail)` / `(head, tail, weight)` tuples and raises `ValueError`
    for out-of-range vertices.
  - `neighbors(vertex)`, `degree(vertex)` and the `is_bipartite` property.
- `duplicate_graph(graph)` returns an independent copy.
- Text output: `display_graph`, `display_edge_list` (to a stream, standard
  output by default), `write_dimacs_edge_list` (`p sp` / `a` lines, each edge
  once) and `write_edge_list` (0-based `head tail` lines).
- `graph_characteristics(graph)` returns one `GraphCharacteristics` for a
  general graph, or one each for the S and T sides of a bipartite graph;
  `display_graph_characteristics` writes them as a report.

### `louvaingraph.edges`

- `convert_directed_to_undirected(graph)`: keeps each `v -> w` with `w >= v`
  and stores it in both directions.
- `remove_edges(num_vertices, edges)`: drops self-loops and repeated
  `head -> tail` pairs, filling gaps with edges from the end of the list.
- `sort_edges_undirected(num_vertices, edges)`: returns `(ptrs, edges)` with
  every edge bucketed under both of its ends.
- `sort_node_edges_by_index(num_vertices, edges, ptrs)`: orders each vertex's
  neighbours by tail with a bottom-up merge sort.
- `build_old_to_new_map(communities)`: the vertex ids grouped by community,
  unassigned (negative) vertices last.

### `louvaingraph.heap`

`MinHeap(maxsize=1024)` is a bounded binary min-heap of `Term(id, weight)`
holding at most `maxsize - 1` terms; `MinHeap.with_capacity(n)` holds `n`.
`add` returns `False` when the heap is full; `peek` and `remove_min` raise
`IndexError` when it is empty.

### `louvaingraph.similarity`

- `merge_sort_edges(edges)` and `sort_neighbor_lists(graph)` sort neighbour
  lists by tail, stably; the latter works in place.
- `edge_similarity(graph)` returns one score per stored edge, for graphs whose
  neighbour lists are already sorted. The score is the shared-neighbour count
  divided by the count of neighbours seen while walking both lists together,
  in whole-number division, so each score is either `1.0` or `0.0`.

### `louvaingraph.vertexfollowing`

- `vertex_following(graph)` returns `(removed, communities)`: isolated
  vertices get `-1` and degree-one vertices join their neighbour.
- `build_new_graph_vf(graph, communities, num_clusters)` collapses each
  community into one vertex, truncating weights to whole numbers and summing
  them; edges inside a community become self-loops.

### `louvaingraph.clustering`

- `Community(size=1, degree=0.0)`.
- `sum_vertex_degree(graph)`: weighted degrees and singleton communities.
- `constant_for_second_term(vertex_degrees)`: `1 / (2m)`; raises
  `ValueError` when the total weight is zero.
- `init_community_assignment(num_vertices)` and
  `init_community_assignment_opt(graph, communities, constant, vertex_degrees)`:
  past and current assignments, the latter with a first best move per vertex.
- `update_community_info(communities, assignment, vertex_degrees)`.
- `build_local_map_counter(graph, vertex, assignment)`: edge weight into each
  neighbouring community, plus the vertex's self-loop weight.
- `best_community(local_map, self_loop, communities, degree, current, constant)`:
  the community with the largest modularity gain.

### `louvaingraph.metrics`

- `compare_communities(truth, output)` returns a `ComparisonResult` with
  pair counts (true positives, false negatives, false positives), precision,
  recall, F-score and the Gini coefficient of each side's community sizes;
  `ComparisonResult.report()` formats it as text. Undefined ratios are NaN.
- `gini_coefficient(sizes)`.
- `merkin_metric(first, second)`: pairs together in `first` but apart in
  `second`, doubled, over the product of the two lengths.

## Example

```python
from louvaingraph.graph import Graph
from louvaingraph.clustering import (
    build_local_map_counter,
    best_community,
    constant_for_second_term,
    init_community_assignment,
    sum_vertex_degree,
)
from louvaingraph.metrics import compare_communities

g = Graph.from_edges(4, [(0, 1, 1.0), (1, 2, 1.0), (2, 3, 1.0)])
degrees, communities = sum_vertex_degree(g)
constant = constant_for_second_term(degrees)
_, assignment = init_community_assignment(g.num_vertices)

local_map, self_loop = build_local_map_counter(g, 0, assignment)
target = best_community(local_map, self_loop, communities, degrees[0],
                        assignment[0], constant)

result = compare_communities([0, 0, 1, 1], [0, 0, 1, 1])
print(result.f_score)  # 1.0
```

## What this package does not do

It provides the pieces of a Louvain-style method, not a complete one: there is
no function that runs the local-moving iterations and phases end to end, no
graph coloring, no readers for graph file formats and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```