# planning/floor_graph.py
from collections import deque
from typing import Dict, Iterable, List, Optional, Tuple

from facility.facility_errors import OutOfRangeError, UnreachableError

Edge = Tuple[int, int]


class FloorGraph:
    """
    Undirected, unweighted graph over slot positions (0-based).

    Node i is the i-th slot of the master ordering. The graph is built once
    and only read afterwards.
    """

    def __init__(self, node_count: int, edges: Iterable[Edge] = ()):
        if node_count < 0:
            raise ValueError("node_count must be non-negative")

        self.node_count = node_count
        self._adj: List[List[int]] = [[] for _ in range(node_count)]

        for u, v in edges:
            self._add_edge(u, v)

    @classmethod
    def linear(cls, node_count: int, extra_edges: Iterable[Edge] = ()) -> "FloorGraph":
        """Chain 0-1-...-(n-1), plus any extra edges."""
        chain = [(i, i + 1) for i in range(node_count - 1)]
        return cls(node_count, chain + list(extra_edges))

    def _add_edge(self, u: int, v: int) -> None:
        if not (self.in_bounds(u) and self.in_bounds(v)):
            raise ValueError(f"Edge ({u},{v}) is outside a floor of {self.node_count} slots")
        if u == v or v in self._adj[u]:
            return
        self._adj[u].append(v)
        self._adj[v].append(u)

    def in_bounds(self, node: int) -> bool:
        return 0 <= node < self.node_count

    def neighbors(self, node: int) -> List[int]:
        self._check_bounds(node)
        return list(self._adj[node])

    def edges(self) -> List[Edge]:
        return [(u, v) for u in range(self.node_count) for v in self._adj[u] if u < v]

    def _check_bounds(self, node: int) -> None:
        if not self.in_bounds(node):
            raise OutOfRangeError(f"Position {node} is outside a floor of {self.node_count} slots")

    # -------- queries --------

    def shortest_hops(self, src: int, dest: int) -> int:
        dist, _ = self._bfs(src, dest)
        return dist

    def shortest_path(self, src: int, dest: int) -> List[int]:
        """Node sequence from src to dest (inclusive)."""
        _, came_from = self._bfs(src, dest)

        path = [dest]
        cur = dest
        while cur in came_from:
            cur = came_from[cur]
            path.append(cur)
        path.reverse()
        return path

    def _bfs(self, src: int, dest: int) -> Tuple[int, Dict[int, int]]:
        self._check_bounds(src)
        self._check_bounds(dest)

        dist: List[Optional[int]] = [None] * self.node_count
        came_from: Dict[int, int] = {}
        dist[src] = 0
        queue = deque([src])

        while queue:
            u = queue.popleft()

            # early exit once the destination is dequeued
            if u == dest:
                return dist[u], came_from

            for v in self._adj[u]:
                if dist[v] is None:
                    dist[v] = dist[u] + 1
                    came_from[v] = u
                    queue.append(v)

        raise UnreachableError(f"No path between positions {src} and {dest}")
