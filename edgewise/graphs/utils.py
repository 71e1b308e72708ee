"""
Utility functions for graph algorithms.

Provides path reconstruction from parent tables and dense matrix export.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Union

import numpy as np

from .core import Graph

ParentTable = Union[Sequence[Optional[int]], Mapping[int, Optional[int]]]


def reconstruct_path(parents: ParentTable, target: int) -> Optional[List[int]]:
    """
    Reconstruct path from the search root to target using a parent table.

    ``parents[v]`` is the previous vertex on the path to v, or None for the
    root. The table may be a per-vertex list (as in the search results) or
    a dict. A vertex whose parent is None yields ``[target]``, so callers
    must check reachability first.

    Args:
        parents: Parent table from BFS, DFS or Dijkstra.
        target: Vertex to reconstruct the path to.

    Returns:
        Vertices from root to target inclusive, or None if target is not in
        the table or the parents form a cycle.

    Example:
        >>> reconstruct_path([None, 0, 1], 2)
        [0, 1, 2]
    """
    try:
        parents[target]
    except (IndexError, KeyError):
        return None

    path = []
    current: Optional[int] = target
    visited = set()
    while current is not None:
        if current in visited:
            # Not a tree
            return None
        visited.add(current)
        path.append(current)
        current = parents[current]

    path.reverse()
    return path


def adjacency_matrix(graph: Graph, fill: float = 0.0) -> np.ndarray:
    """
    Dense (n, n) weight matrix of a graph.

    ``M[u, v]`` is the weight of the edge u -> v. Parallel edges keep the
    smallest weight; absent edges get ``fill`` (use ``np.inf`` to keep
    zero-weight edges distinguishable from missing ones).

    Example:
        >>> adjacency_matrix(Graph([[(1, 2)], []]))
        array([[0., 2.],
               [0., 0.]])
    """
    n = graph.vertex_count()
    matrix = np.full((n, n), np.inf, dtype=np.float64)
    for u, v, w in graph.edges():
        if w < matrix[u, v]:
            matrix[u, v] = w
    if fill != np.inf:
        matrix[np.isinf(matrix)] = fill
    return matrix
