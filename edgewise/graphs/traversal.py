"""
Graph traversal algorithms: BFS and DFS.

Both walk outgoing adjacency entries in stored order, so the visitation
order is fully determined by the graph. DFS uses an explicit stack and is
safe on arbitrarily long chains.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from ..config import is_debug_enabled
from ..logging import get_logger
from .core import Graph, check_index, check_vertex
from .utils import reconstruct_path

logger = get_logger(__name__)

HopDistance = Union[int, float]


@dataclass(frozen=True)
class BFSResult:
    """
    Outcome of a breadth-first search.

    Attributes:
        source: Start vertex.
        order: Reached vertices in visitation order.
        distances: Hop count per vertex, ``math.inf`` if unreached.
        parents: BFS-tree parent per vertex, None for the source and for
            unreached vertices.

    Iterating yields ``(vertex, hop_distance)`` in visitation order.
    """

    source: int
    order: Tuple[int, ...]
    distances: Tuple[HopDistance, ...]
    parents: Tuple[Optional[int], ...]

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for v in self.order:
            yield v, self.distances[v]

    def __len__(self) -> int:
        return len(self.order)

    def distance(self, v: int) -> HopDistance:
        return self.distances[check_index(v, len(self.distances))]

    def reached(self, v: int) -> bool:
        return self.distance(v) != math.inf

    def path_to(self, v: int) -> Optional[List[int]]:
        """Shortest hop path from source to v, or None if v is unreached."""
        v = check_index(v, len(self.distances))
        if not self.reached(v):
            return None
        return reconstruct_path(self.parents, v)


@dataclass(frozen=True)
class DFSResult:
    """
    Outcome of a depth-first search.

    Attributes:
        source: Start vertex.
        preorder: Vertices when first visited.
        postorder: Vertices when their subtree is finished.
        parents: DFS-tree parent per vertex, None for the source and for
            unvisited vertices.

    Iterating yields the pre-order.
    """

    source: int
    preorder: Tuple[int, ...]
    postorder: Tuple[int, ...]
    parents: Tuple[Optional[int], ...]

    def __iter__(self) -> Iterator[int]:
        return iter(self.preorder)

    def __len__(self) -> int:
        return len(self.preorder)

    def visited(self, v: int) -> bool:
        v = check_index(v, len(self.parents))
        return v == self.source or self.parents[v] is not None

    def path_to(self, v: int) -> Optional[List[int]]:
        """Tree path from source to v, or None if v was not visited."""
        v = check_index(v, len(self.parents))
        if not self.visited(v):
            return None
        return reconstruct_path(self.parents, v)


def bfs(graph: Graph, source: int) -> BFSResult:
    """
    Breadth-first search from a source vertex.

    Weights are ignored; distances are hop counts.

    Args:
        graph: Graph to traverse.
        source: Start vertex.

    Returns:
        BFSResult with visitation order, hop distances and parents.

    Raises:
        VertexOutOfRange: If source is not a vertex.

    Complexity: O(V + E).

    Example:
        >>> g = Graph([[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []])
        >>> list(bfs(g, 0).distances)
        [0, 1, 1, 2]
    """
    s = check_vertex(graph, source)
    n = graph.vertex_count()
    adjacency = graph.adjacency()
    debug = is_debug_enabled()

    order: List[int] = []
    distance: List[HopDistance] = [math.inf] * n
    parent: List[Optional[int]] = [None] * n

    distance[s] = 0
    queue = deque([s])

    while queue:
        u = queue.popleft()
        order.append(u)
        if debug:
            logger.debug("bfs: visit %d at depth %d", u, distance[u])

        for v, _ in adjacency[u]:
            if distance[v] == math.inf:
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)

    logger.debug("bfs from %d reached %d of %d vertices", s, len(order), n)
    return BFSResult(s, tuple(order), tuple(distance), tuple(parent))


def dfs(graph: Graph, source: int) -> DFSResult:
    """
    Depth-first search (iterative, explicit stack).

    Neighbors are pushed in reverse stored order so the first neighbor in
    each adjacency list is explored first, matching the recursive
    formulation. Vertices reachable several times (cycles, self-loops,
    parallel edges) are visited once.

    Args:
        graph: Graph to traverse.
        source: Start vertex.

    Returns:
        DFSResult with pre-order, post-order and parents.

    Raises:
        VertexOutOfRange: If source is not a vertex.

    Complexity: O(V + E).

    Example:
        >>> g = Graph([[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []])
        >>> list(dfs(g, 0))
        [0, 1, 3, 2]
    """
    s = check_vertex(graph, source)
    n = graph.vertex_count()
    adjacency = graph.adjacency()
    debug = is_debug_enabled()

    preorder: List[int] = []
    postorder: List[int] = []
    parent: List[Optional[int]] = [None] * n
    visited = [False] * n
    stack: List[Tuple[int, bool]] = [(s, False)]  # (vertex, is_finished)

    while stack:
        u, is_finished = stack.pop()

        if is_finished:
            postorder.append(u)
            continue
        if visited[u]:
            continue

        visited[u] = True
        preorder.append(u)
        if debug:
            logger.debug("dfs: visit %d (stack depth %d)", u, len(stack))

        stack.append((u, True))
        for v, _ in reversed(adjacency[u]):
            if not visited[v]:
                parent[v] = u
                stack.append((v, False))

    logger.debug("dfs from %d visited %d of %d vertices", s, len(preorder), n)
    return DFSResult(s, tuple(preorder), tuple(postorder), tuple(parent))
