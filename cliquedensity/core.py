"""Core-decomposition heuristic for h-clique density over an edge-list graph."""

from __future__ import annotations

import argparse
import heapq
import sys
import time
from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path

DEFAULT_INPUT = "as733.txt"
DEFAULT_OUTPUT = "density_vs_h.txt"


@dataclass
class EdgeListGraph:
    """An undirected graph with sorted, duplicate-free neighbour lists.

    ``m`` is the number of edge lines read, duplicates included.
    """

    n: int
    m: int = 0
    adj: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"vertex count must be non-negative, got {self.n}")
        if not self.adj:
            self.adj = [[] for _ in range(self.n)]
        elif len(self.adj) != self.n:
            raise ValueError("adjacency list length does not match vertex count")

    def has_edge(self, u: int, v: int) -> bool:
        """True if ``v`` is a neighbour of ``u``."""
        neighbours = self.adj[u]
        index = bisect_left(neighbours, v)
        return index < len(neighbours) and neighbours[index] == v

    def is_clique(self, vertices: Sequence[int]) -> bool:
        """True if every pair of ``vertices`` is joined by an edge."""
        return all(self.has_edge(a, b) for a, b in combinations(vertices, 2))


def _pairs(lines: Iterable[str]) -> Iterator[tuple[int, int]]:
    tokens = (token for line in lines for token in line.split())
    while True:
        try:
            u = int(next(tokens))
            v = int(next(tokens))
        except (StopIteration, ValueError):
            return
        yield u, v


def parse_edge_list(lines: Iterable[str]) -> EdgeListGraph:
    """Read ``u v`` pairs until the input ends or stops being integers.

    The vertex count is one more than the largest vertex id seen.
    """
    edges = list(_pairs(lines))
    for u, v in edges:
        if u < 0 or v < 0:
            raise ValueError(f"negative vertex id in edge ({u},{v})")
    max_vertex = max((max(u, v) for u, v in edges), default=0)
    n = max_vertex + 1
    neighbours: list[set[int]] = [set() for _ in range(n)]
    for u, v in edges:
        neighbours[u].add(v)
        neighbours[v].add(u)
    return EdgeListGraph(n, len(edges), [sorted(s) for s in neighbours])


def load_edge_list(path: str | Path) -> EdgeListGraph:
    """Read an edge-list file."""
    with open(path, encoding="utf-8") as handle:
        return parse_edge_list(handle)


def enumerate_k_cliques(graph: EdgeListGraph, k: int) -> list[tuple[int, ...]]:
    """All k-cliques as ascending vertex tuples, in lexicographic order."""
    if k < 1:
        raise ValueError(f"clique size must be at least 1, got {k}")
    if k == 1:
        return [(v,) for v in range(graph.n)]
    if k == 2:
        return [(a, b) for a in range(graph.n) for b in graph.adj[a] if b > a]
    result = []
    for clique in enumerate_k_cliques(graph, k - 1):
        for v in range(clique[-1] + 1, graph.n):
            if all(graph.has_edge(u, v) for u in clique):
                result.append(clique + (v,))
    return result


def clique_degrees(graph: EdgeListGraph, cliques: Iterable[Sequence[int]]) -> list[int]:
    """How many of ``cliques`` each vertex belongs to."""
    counts = [0] * graph.n
    for clique in cliques:
        for v in clique:
            counts[v] += 1
    return counts


def core_decomposition(graph: EdgeListGraph) -> list[int]:
    """Peel vertices by smallest current degree and record the running core level.

    Each vertex gets the highest degree seen at removal among the vertices
    removed before it.
    """
    degree = [len(neighbours) for neighbours in graph.adj]
    core = [0] * graph.n
    removed = [False] * graph.n
    heap = [(d, v) for v, d in enumerate(degree)]
    heapq.heapify(heap)
    level = 0
    while heap:
        d, v = heapq.heappop(heap)
        if removed[v]:
            continue
        core[v] = level
        removed[v] = True
        for u in graph.adj[v]:
            if not removed[u]:
                degree[u] -= 1
                heapq.heappush(heap, (degree[u], u))
        level = max(level, d)
    return core


def connected_components(
    graph: EdgeListGraph, vertices: Sequence[int]
) -> list[list[int]]:
    """Components of the subgraph induced by ``vertices``, each in BFS order."""
    members = set(vertices)
    visited: set[int] = set()
    components = []
    for start in vertices:
        if start in visited:
            continue
        visited.add(start)
        component = []
        queue = deque([start])
        while queue:
            u = queue.popleft()
            component.append(u)
            for w in graph.adj[u]:
                if w not in visited and w in members:
                    visited.add(w)
                    queue.append(w)
        components.append(component)
    return components


def _best_component(
    graph: EdgeListGraph, h: int, clique_count: int
) -> tuple[float, list[int]]:
    core = core_decomposition(graph)
    core_vertices = [v for v in range(graph.n) if core[v] >= 1]
    best_density = 0.0
    best: list[int] = []
    for component in connected_components(graph, core_vertices):
        if len(component) < h:
            continue
        density = clique_count / len(component)
        if density > best_density:
            best_density = density
            best = component
    return best_density, best


def best_component_density(
    graph: EdgeListGraph, h: int
) -> tuple[float, list[int]]:
    """Score each component of the 1-core by total h-cliques over its size.

    Returns the best score and its component; ``(0.0, [])`` if none has at
    least ``h`` vertices.
    """
    count = len(enumerate_k_cliques(graph, h))
    return _best_component(graph, h, count)


def density_vs_h(graph: EdgeListGraph, h_values: Iterable[int]) -> dict[int, float]:
    """Best component density for each clique size in ``h_values``."""
    return {h: best_component_density(graph, h)[0] for h in h_values}


def main(argv: Sequence[str] | None = None) -> int:
    """Report the best component density for h = 2 .. 6 and write it to a file."""
    parser = argparse.ArgumentParser(
        prog="cliquedensity-core",
        description="Component density of h-cliques in the 1-core of a graph.",
    )
    parser.add_argument("graph_file", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    print("Loading As733 network...")
    try:
        graph = load_edge_list(args.graph_file)
    except OSError:
        print(f"Error opening file: {args.graph_file}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error reading graph: {exc}", file=sys.stderr)
        return 1
    print(f"Vertices: {graph.n} Edges: {graph.m}")

    with open(args.output, "w", encoding="utf-8") as out:
        for h in range(2, 7):
            print(f"\nProcessing h = {h}")
            start = time.perf_counter()
            h_cliques = enumerate_k_cliques(graph, h)
            smaller = enumerate_k_cliques(graph, h - 1)
            print(f"Found {len(h_cliques)} cliques of size {h}")
            print(f"Found {len(smaller)} cliques of size {h - 1}")
            density, _ = _best_component(graph, h, len(h_cliques))
            elapsed = int(time.perf_counter() - start)
            print(f"h = {h}, Best density = {density:g}, Time: {elapsed} seconds")
            out.write(f"{h} {density:g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())