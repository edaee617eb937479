"""Exact h-clique densest subgraph search by parametric minimum cuts."""

from __future__ import annotations

import math
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .flow import FlowNetwork
from .graph import (
    Graph,
    count_h_cliques,
    forms_h_clique,
    h_minus_one_cliques,
    load_graph,
    pattern_degree,
)

Logger = Callable[[str], None]


def _quiet(message: str) -> None:
    """Discard a progress message."""


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class DensestResult:
    """The densest subgraph found for a clique size ``h``."""

    h: int
    vertices: tuple[int, ...]
    clique_count: int
    density: float


def _build_network(
    graph: Graph,
    degrees: Sequence[int],
    cliques: Sequence[tuple[int, ...]],
    alpha: float,
) -> tuple[FlowNetwork, int, int]:
    source = 0
    sink = 1 + graph.n + len(cliques)
    network = FlowNetwork(sink + 1)

    sink_capacity = int(alpha * graph.n)
    for v, degree in enumerate(degrees):
        node = v + 1
        network.add_edge(source, node, degree)
        network.add_edge(node, sink, sink_capacity)

    offset = graph.n + 1
    for index, clique in enumerate(cliques):
        clique_node = offset + index
        for v in clique:
            network.add_edge(clique_node, v + 1, math.inf)

    for index, clique in enumerate(cliques):
        clique_node = offset + index
        for v in range(graph.n):
            if forms_h_clique(graph, clique, v):
                network.add_edge(v + 1, clique_node, 1)

    return network, source, sink


def find_cds_exact(graph: Graph, h: int, log: Logger | None = None) -> list[int]:
    """Binary-search the h-clique density with minimum cuts.

    Returns the vertices of the last non-trivial source side found, in
    ascending order; empty if no cut ever held more than the source.
    """
    if h < 2:
        raise ValueError(f"h must be at least 2, got {h}")
    log = log or _quiet

    degrees = [pattern_degree(graph, v, h) for v in range(graph.n)]
    lower = 0.0
    upper = float(max(degrees, default=0))
    log(f"Initial bounds: l={_fmt(lower)}, u={_fmt(upper)}")

    cliques = h_minus_one_cliques(graph, h)
    log(f"Found {len(cliques)} (h-1)-cliques")

    pairs = graph.n * (graph.n - 1)
    epsilon = 1.0 / pairs if pairs else math.inf

    densest: list[int] = []
    while upper - lower >= epsilon:
        alpha = (lower + upper) / 2.0
        log(f"Trying alpha = {_fmt(alpha)}")

        network, source, sink = _build_network(graph, degrees, cliques, alpha)
        network.max_flow(source, sink)
        cut = network.min_cut(source)

        if not any(node in cut for node in range(1, sink)):
            upper = alpha
            log(f"Cut contains only source, decreasing upper bound to {_fmt(upper)}")
        else:
            lower = alpha
            densest = [v for v in range(graph.n) if v + 1 in cut]
            log(
                f"Cut contains {len(densest)} vertices, "
                f"increasing lower bound to {_fmt(lower)}"
            )

    return densest


def densest_subgraph(graph: Graph, h: int, log: Logger | None = None) -> DensestResult:
    """Find the densest subgraph and measure its h-clique density."""
    vertices = find_cds_exact(graph, h, log)
    count = count_h_cliques(graph, vertices, h)
    density = count / len(vertices) if vertices else 0.0
    return DensestResult(h, tuple(sorted(vertices)), count, density)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``<graph_file> <h>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "cliquedensity"
    if len(args) != 2:
        print(f"Usage: {prog} <graph_file> <h>", file=sys.stderr)
        return 1

    filename, h_text = args
    try:
        h = int(h_text)
    except ValueError:
        print(f"Error: invalid h: {h_text}", file=sys.stderr)
        return 1
    if h < 2:
        print("Error: h must be at least 2", file=sys.stderr)
        return 1

    start = time.perf_counter()
    try:
        graph = load_graph(filename)
    except OSError:
        print(f"Error opening file: {filename}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error reading graph: {exc}", file=sys.stderr)
        return 1

    print(f"Reading graph with {graph.n} nodes and {graph.m} edges")
    print(f"Graph loaded: {graph.n} nodes, {graph.m} edges")

    result = densest_subgraph(graph, h, print)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    print(f"Densest subgraph ({h}-clique-density):")
    print(f"Nodes: {len(result.vertices)}")
    print(f"{h}-cliques: {result.clique_count}")
    print(f"Density: {_fmt(result.density)}")
    print("Node IDs in subgraph:")
    print("".join(f"{v} " for v in result.vertices))
    print(f"Execution time: {elapsed_ms} milliseconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())