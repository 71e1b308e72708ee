"""
Shortest path algorithms: Dijkstra.

Non-negative weights are guaranteed by Graph construction, so the search
never has to check them.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..config import is_debug_enabled
from ..errors import WeightOverflow
from ..logging import get_logger
from .core import Graph, Weight, check_index, check_vertex
from .utils import reconstruct_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class ShortestPaths:
    """
    Single-source shortest path distances and predecessors.

    ``result[v]`` is ``(distance, predecessor)``. Unreachable vertices have
    distance ``math.inf`` and predecessor None; so does the source's
    predecessor.
    """

    source: int
    distances: Tuple[Weight, ...]
    parents: Tuple[Optional[int], ...]

    def __getitem__(self, v: int) -> Tuple[Weight, Optional[int]]:
        v = check_index(v, len(self.distances))
        return self.distances[v], self.parents[v]

    def __len__(self) -> int:
        return len(self.distances)

    def items(self) -> Iterator[Tuple[int, Tuple[Weight, Optional[int]]]]:
        for v in range(len(self.distances)):
            yield v, self[v]

    def distance(self, v: int) -> Weight:
        return self.distances[check_index(v, len(self.distances))]

    def predecessor(self, v: int) -> Optional[int]:
        return self.parents[check_index(v, len(self.parents))]

    def reachable(self, v: int) -> bool:
        return self.distance(v) != math.inf

    def path_to(self, v: int) -> Optional[List[int]]:
        """
        Reconstruct a shortest path from source to v.

        Returns:
            Vertices from source to v inclusive, or None if v is unreachable.
        """
        v = check_index(v, len(self.distances))
        if not self.reachable(v):
            return None
        return reconstruct_path(self.parents, v)


def dijkstra(graph: Graph, source: int) -> ShortestPaths:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Uses a binary heap without decrease-key: an improved distance pushes a
    new entry, and entries whose distance exceeds the recorded one are
    skipped when popped. Heap entries carry a push counter, so equal
    distances pop in insertion order.

    Distances keep the weights' numeric type: all-int paths give int
    distances, any float weight on the path gives a float.

    Args:
        graph: Graph with non-negative weights.
        source: Source vertex.

    Returns:
        ShortestPaths with per-vertex distances and predecessors.

    Raises:
        VertexOutOfRange: If source is not a vertex.
        WeightOverflow: If a distance is not representable as a float
            (float overflow, or an oversized int combined with a float).

    Complexity: O((V + E) log V).

    Example:
        >>> g = Graph([[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []])
        >>> list(dijkstra(g, 0).distances)
        [0, 3, 1, 4]
    """
    s = check_vertex(graph, source)
    n = graph.vertex_count()
    adjacency = graph.adjacency()
    debug = is_debug_enabled()

    dist: List[Weight] = [math.inf] * n
    parent: List[Optional[int]] = [None] * n
    dist[s] = 0

    counter = itertools.count()
    pq: List[Tuple[Weight, int, int]] = [(0, next(counter), s)]
    stale = 0

    while pq:
        d, _, u = heapq.heappop(pq)

        if d > dist[u]:
            stale += 1
            continue
        if debug:
            logger.debug("dijkstra: settle %d at distance %s", u, d)

        # Relax edges from u
        for v, weight in adjacency[u]:
            try:
                candidate = d + weight
            except OverflowError as exc:
                # int distance too large to combine with a float weight
                raise WeightOverflow(
                    f"Distance to vertex {v} via {u} exceeds the float range"
                ) from exc
            if isinstance(candidate, float) and math.isinf(candidate):
                raise WeightOverflow(
                    f"Distance to vertex {v} via {u} exceeds the float range ({d} + {weight})"
                )
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                heapq.heappush(pq, (candidate, next(counter), v))

    logger.debug(
        "dijkstra from %d: %d reachable of %d vertices, %d stale entries skipped",
        s,
        sum(1 for d in dist if d != math.inf),
        n,
        stale,
    )
    return ShortestPaths(s, tuple(dist), tuple(parent))
