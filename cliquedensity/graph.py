"""Undirected graphs and h-clique counting helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Graph:
    """An undirected graph on vertices ``0 .. n-1`` with set-based adjacency.

    ``m`` is the edge count declared by the input, kept as given.
    """

    n: int
    m: int = 0
    adj: list[set[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"vertex count must be non-negative, got {self.n}")
        if not self.adj:
            self.adj = [set() for _ in range(self.n)]
        elif len(self.adj) != self.n:
            raise ValueError("adjacency list length does not match vertex count")

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge ``u``-``v``; both ends must be valid vertices."""
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise ValueError(f"edge ({u},{v}) out of range")
        self.adj[u].add(v)
        self.adj[v].add(u)

    def max_degree(self) -> int:
        """Largest number of neighbours of any vertex (0 for an empty graph)."""
        return max((len(neighbours) for neighbours in self.adj), default=0)


def _tokens(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            yield int(token)


def read_graph(lines: Iterable[str]) -> Graph:
    """Parse ``n m`` followed by ``m`` edge pairs.

    Edges with an endpoint outside ``0 .. n-1`` are skipped with a warning.
    """
    tokens = _tokens(lines)
    try:
        n = next(tokens)
        m = next(tokens)
    except StopIteration:
        raise ValueError("missing vertex and edge counts") from None

    graph = Graph(n, m)
    for index in range(m):
        try:
            u = next(tokens)
            v = next(tokens)
        except StopIteration:
            raise ValueError(f"expected {m} edges, found only {index}") from None
        try:
            graph.add_edge(u, v)
        except ValueError:
            logger.warning("Edge (%d,%d) out of range, skipping", u, v)
    return graph


def load_graph(path: str | Path) -> Graph:
    """Read a graph file in the ``n m`` + edge-pairs format."""
    with open(path, encoding="utf-8") as handle:
        return read_graph(handle)


def h_minus_one_cliques(graph: Graph, h: int) -> list[tuple[int, ...]]:
    """All (h-1)-cliques as ascending vertex tuples."""
    if h < 2:
        raise ValueError(f"h must be at least 2, got {h}")
    if h == 2:
        return [(v,) for v in range(graph.n)]
    if h == 3:
        return [
            (v, u)
            for v in range(graph.n)
            for u in sorted(graph.adj[v])
            if u > v
        ]
    result = []
    for clique in h_minus_one_cliques(graph, h - 1):
        for v in range(clique[-1] + 1, graph.n):
            if all(v in graph.adj[u] for u in clique):
                result.append(clique + (v,))
    return result


def forms_h_clique(graph: Graph, clique: Iterable[int], vertex: int) -> bool:
    """True if ``vertex`` is adjacent to every vertex of ``clique``."""
    neighbours = graph.adj[vertex]
    return all(v in neighbours for v in clique)


def _count_cliques(
    graph: Graph, candidates: Sequence[int], current: tuple[int, ...], target: int
) -> int:
    if len(current) == target:
        return 1
    total = 0
    for index, v in enumerate(candidates):
        if all(v in graph.adj[u] for u in current):
            total += _count_cliques(
                graph, candidates[index + 1:], current + (v,), target
            )
    return total


def count_h_cliques(graph: Graph, subgraph: Sequence[int], h: int) -> int:
    """Number of h-cliques whose vertices all lie in ``subgraph``."""
    subgraph = list(subgraph)
    if not subgraph or len(subgraph) < h:
        return 0
    return _count_cliques(graph, subgraph, (), h)


def pattern_degree(graph: Graph, vertex: int, h: int) -> int:
    """Number of h-cliques of the whole graph that contain ``vertex``."""
    candidates = [v for v in range(graph.n) if v != vertex]
    return _count_cliques(graph, candidates, (vertex,), h)