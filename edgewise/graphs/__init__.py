"""
Graph algorithms package for edgewise.

This package provides:
- Graph data structure (immutable adjacency lists) and GraphBuilder
- Random graph generation (density and edge-count modes)
- Traversal algorithms (BFS, DFS)
- Shortest paths (Dijkstra)

All algorithms walk adjacency lists in stored order, so results are
deterministic for a given graph.
"""

from .core import UNIT_WEIGHT, Edge, Graph, GraphBuilder, Vertex, Weight
from .generators import candidate_edges, generate, random_graph
from .shortest import ShortestPaths, dijkstra
from .traversal import BFSResult, DFSResult, bfs, dfs
from .utils import adjacency_matrix, reconstruct_path

__all__ = [
    "Graph",
    "GraphBuilder",
    "Vertex",
    "Weight",
    "Edge",
    "UNIT_WEIGHT",
    "random_graph",
    "generate",
    "candidate_edges",
    "bfs",
    "dfs",
    "BFSResult",
    "DFSResult",
    "dijkstra",
    "ShortestPaths",
    "reconstruct_path",
    "adjacency_matrix",
]

# Example usage:
# from edgewise.graphs import Graph, dijkstra
#
# G = Graph([[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []])
# result = dijkstra(G, 0)
# result.distances        # (0, 3, 1, 4)
# result.path_to(3)       # [0, 2, 1, 3]
