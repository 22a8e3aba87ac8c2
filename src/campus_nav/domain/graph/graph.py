import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from campus_nav.app.protocols import Frontier
from campus_nav.domain.entities.route import PathResult
from campus_nav.domain.graph.frontier import SortedFrontier


@dataclass(frozen=True)
class Edge:
    neighbor: str
    weight: float


class Graph:
    """
    Undirected weighted adjacency list keyed by node id.

    add_edge always appends a symmetric pair; it does not dedupe. Weights must
    be >= 0 for shortest_path to be correct (not checked).
    """

    def __init__(self, frontier_factory: Callable[[], Frontier] = SortedFrontier):
        self._adj: dict[str, list[Edge]] = {}
        self.frontier_factory = frontier_factory

    # ---------------- structure ----------------

    def add_vertex(self, u: str) -> None:
        self._adj.setdefault(u, [])

    def add_edge(self, u: str, v: str, weight: float) -> None:
        self._adj.setdefault(u, []).append(Edge(v, weight))
        self._adj.setdefault(v, []).append(Edge(u, weight))

    @property
    def vertices(self) -> list[str]:
        return list(self._adj)

    def neighbors(self, u: str) -> list[Edge]:
        return list(self._adj.get(u, ()))

    def has_edge(self, u: str, v: str) -> bool:
        return any(e.neighbor == v for e in self._adj.get(u, ()))

    def edge_weight(self, u: str, v: str) -> float:
        """Lightest weight among (possibly duplicated) u-v edges; inf if none."""
        return min((e.weight for e in self._adj.get(u, ()) if e.neighbor == v), default=math.inf)

    def iter_edges(self) -> Iterator[tuple[str, str, float]]:
        """Yield each undirected edge once, as (u, v, weight) in insertion order."""
        seen: dict[tuple[str, str], int] = {}
        for u, edges in self._adj.items():
            for e in edges:
                key = (e.neighbor, u)
                if seen.get(key, 0) > 0:
                    seen[key] -= 1
                    continue
                seen[(u, e.neighbor)] = seen.get((u, e.neighbor), 0) + 1
                yield u, e.neighbor, e.weight

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adj.values()) // 2

    def __contains__(self, u: object) -> bool:
        return u in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    # ---------------- search ----------------

    def shortest_path(self, start: str, end: str) -> PathResult:
        """
        Dijkstra with every vertex pre-seeded in the frontier.

        Improvements push a fresh entry and leave the old one behind; stale
        entries pop later and only re-attempt relaxations that cannot improve.
        """
        if start not in self._adj:
            return PathResult.unreachable()

        dist = {u: math.inf for u in self._adj}
        dist[start] = 0.0
        prev: dict[str, str] = {}

        frontier = self.frontier_factory()
        for u, d in dist.items():
            frontier.enqueue(u, d)

        while not frontier.is_empty():
            current, _ = frontier.dequeue()
            if current == end:
                return self._reconstruct(prev, start, end, dist[end])
            d = dist[current]
            if math.isinf(d):
                continue
            for e in self._adj[current]:
                alt = d + e.weight
                if alt < dist[e.neighbor]:
                    dist[e.neighbor] = alt
                    prev[e.neighbor] = current
                    frontier.enqueue(e.neighbor, alt)

        return PathResult.unreachable()

    @staticmethod
    def _reconstruct(prev: dict[str, str], start: str, end: str, total: float) -> PathResult:
        if math.isinf(total):
            return PathResult.unreachable()
        path = [end]
        node = end
        while node != start:
            node = prev.get(node)
            if node is None:
                return PathResult.unreachable()
            path.append(node)
        path.reverse()
        return PathResult(tuple(path), total)
