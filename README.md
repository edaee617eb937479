# cliquedensity

Find subgraphs that are dense in *h-cliques*. The density of a vertex set is
the number of h-cliques it contains divided by the number of its vertices.

Two approaches are provided:

- an **exact** search (`cliquedensity.exact`) that binary-searches the
  density and decides each guess with a minimum s-t cut in a flow network
  built from the graph's (h-1)-cliques;
- a **core-based** heuristic (`cliquedensity.core`) that peels the graph by
  degree, splits the vertices of core level 1 and above into connected
  components and scores each component for h = 2 to 6.

Cliques are enumerated exhaustively, so both approaches are meant for small
and medium graphs.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

### Exact clique-densest subgraph

```
cliquedensity-exact <graph_file> <h>
```

`h` must be an integer of at least 2; otherwise the command prints an error
and exits with status 1. The graph file starts with the number of vertices
`n` and the number of edges `m`, followed by `m` pairs of vertex ids in
`0..n-1`, separated by any whitespace:

```
4 5
0 1
0 2
1 2
1 3
2 3
```

Edges with an id out of range are skipped and logged as a warning through
the `logging` module. A file with fewer than `m` edges, or that cannot be
opened, ends the command with an error and status 1.

The command prints the search progress (bounds, each trial density, and
whether the cut held vertices), then the vertices of the densest subgraph
found, its number of h-cliques, its density and the elapsed time in
milliseconds.

### Density against h

```
cliquedensity-core [graph_file] [output]
```

`graph_file` defaults to `as733.txt` and `output` to `density_vs_h.txt`, both
in the current directory. The input is a whitespace-separated list of `u v`
pairs; reading stops at the end of the input or at the first token that is
not an integer. The vertex count is the largest id plus one, duplicate edges
are merged, and a negative id is an error.

For each h from 2 to 6 the command prints the number of h-cliques and
(h-1)-cliques, the best component score and the time in seconds, and writes
one `h density` line per value to the output file. A component's score is
the number of h-cliques in the **whole graph** divided by the component's
size; components with fewer than h vertices are not scored, and the score is
0 when none qualifies.

## Library use

```python
from cliquedensity.graph import read_graph, count_h_cliques
from cliquedensity.exact import densest_subgraph

graph = read_graph(["4 5", "0 1", "0 2", "1 2", "1 3", "2 3"])
print(count_h_cliques(graph, [0, 1, 2, 3], 3))  # triangles in the whole graph

result = densest_subgraph(graph, 3)
print(result.vertices, result.clique_count, result.density)
```

`densest_subgraph` and `find_cds_exact` accept an optional `log` callable
(for example `print`) that receives the progress messages; by default they
are discarded.

The modules:

- `cliquedensity.graph` — `Graph` (with `add_edge` and `max_degree`),
  `read_graph`, `load_graph`, `h_minus_one_cliques`, `forms_h_clique`,
  `count_h_cliques`, `pattern_degree`;
- `cliquedensity.flow` — `FlowNetwork` (breadth-first augmenting paths;
  `add_edge`, `max_flow`, `min_cut`, with `math.inf` for unbounded edges) and
  `DinicFlow` (Dinic's algorithm on real capacities; `add_edge`, `max_flow`,
  `reachable`);
- `cliquedensity.exact` — `DensestResult`, `find_cds_exact`,
  `densest_subgraph`, `main`;
- `cliquedensity.core` — `EdgeListGraph` (with `has_edge` and `is_clique`),
  `parse_edge_list`, `load_edge_list`, `enumerate_k_cliques`,
  `clique_degrees`, `core_decomposition`, `connected_components`,
  `best_component_density`, `density_vs_h`, `main`.