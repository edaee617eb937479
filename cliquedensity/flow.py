"""Maximum-flow solvers: Edmonds-Karp on integer capacities and Dinic on real ones."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass

_EPS = 1e-9
_DINIC_LIMIT = 1e18


class FlowNetwork:
    """A flow network solved by breadth-first augmenting paths.

    Setting an edge again overwrites its capacity. Use ``math.inf`` for an
    unbounded edge.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"node count must be non-negative, got {n}")
        self.n = n
        self._capacity: list[dict[int, float]] = [{} for _ in range(n)]
        self._flow: list[dict[int, float]] = [{} for _ in range(n)]
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def _residual(self, u: int, v: int) -> float:
        return self._capacity[u].get(v, 0) - self._flow[u].get(v, 0)

    def add_edge(self, u: int, v: int, capacity: float) -> None:
        """Set the capacity of the directed edge ``u -> v``."""
        self._capacity[u][v] = capacity
        if v not in self._adj[u]:
            self._adj[u].append(v)
        if u not in self._adj[v]:
            self._adj[v].append(u)

    def _bfs(self, source: int, sink: int) -> list[int] | None:
        parent = [-1] * self.n
        parent[source] = source
        queue = deque([source])
        while queue and parent[sink] == -1:
            u = queue.popleft()
            for v in self._adj[u]:
                if parent[v] == -1 and self._residual(u, v) > 0:
                    parent[v] = u
                    queue.append(v)
        return parent if parent[sink] != -1 else None

    def max_flow(self, source: int, sink: int) -> float:
        """Push as much flow as possible from ``source`` to ``sink``."""
        total = 0
        while (parent := self._bfs(source, sink)) is not None:
            path = []
            v = sink
            while v != source:
                path.append((parent[v], v))
                v = parent[v]
            path_flow = min(self._residual(u, v) for u, v in path)
            if math.isinf(path_flow):
                raise ValueError("flow is unbounded")
            for u, v in path:
                self._flow[u][v] = self._flow[u].get(v, 0) + path_flow
                self._flow[v][u] = self._flow[v].get(u, 0) - path_flow
            total += path_flow
        return total

    def min_cut(self, source: int) -> set[int]:
        """Nodes reachable from ``source`` in the residual network."""
        visited = {source}
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in self._adj[u]:
                if v not in visited and self._residual(u, v) > 0:
                    visited.add(v)
                    queue.append(v)
        return visited


@dataclass
class _Edge:
    to: int
    rev: int
    cap: float


class DinicFlow:
    """A flow network with real capacities solved by Dinic's algorithm."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"node count must be non-negative, got {n}")
        self.adj: list[list[_Edge]] = [[] for _ in range(n)]
        self._level = [-1] * n
        self._ptr = [0] * n

    def add_edge(self, u: int, v: int, capacity: float) -> None:
        """Add a directed edge ``u -> v`` together with its residual twin."""
        self.adj[u].append(_Edge(v, len(self.adj[v]), capacity))
        self.adj[v].append(_Edge(u, len(self.adj[u]) - 1, 0.0))

    def _bfs(self, source: int, sink: int) -> bool:
        self._level = [-1] * len(self.adj)
        self._level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for edge in self.adj[u]:
                if edge.cap > _EPS and self._level[edge.to] == -1:
                    self._level[edge.to] = self._level[u] + 1
                    queue.append(edge.to)
                    if edge.to == sink:
                        return True
        return False

    def _augment(self, source: int, sink: int) -> float:
        path: list[tuple[int, _Edge]] = []
        u = source
        while True:
            if u == sink:
                pushed = min([_DINIC_LIMIT] + [edge.cap for _, edge in path])
                for _, edge in path:
                    edge.cap -= pushed
                    self.adj[edge.to][edge.rev].cap += pushed
                return pushed
            advanced = False
            while self._ptr[u] < len(self.adj[u]):
                edge = self.adj[u][self._ptr[u]]
                if edge.cap > _EPS and self._level[edge.to] == self._level[u] + 1:
                    path.append((u, edge))
                    u = edge.to
                    advanced = True
                    break
                self._ptr[u] += 1
            if not advanced:
                if not path:
                    return 0.0
                u, _ = path.pop()
                self._ptr[u] += 1

    def max_flow(self, source: int, sink: int) -> float:
        """Push as much flow as possible from ``source`` to ``sink``."""
        total = 0.0
        while self._bfs(source, sink):
            self._ptr = [0] * len(self.adj)
            while (pushed := self._augment(source, sink)) > 0:
                total += pushed
        return total

    def reachable(self, source: int) -> set[int]:
        """Nodes reachable from ``source`` through edges with residual capacity."""
        visited = {source}
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for edge in self.adj[u]:
                if edge.cap > _EPS and edge.to not in visited:
                    visited.add(edge.to)
                    queue.append(edge.to)
        return visited