"""edgewise - adjacency-list graphs with random generation, BFS, DFS and Dijkstra."""

__version__ = "0.1.0"

from .config import (
    RandomGraphConfig,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .errors import (
    EdgewiseError,
    InvalidDensity,
    InvalidEdge,
    InvalidVertexCount,
    InvalidWeight,
    InvalidWeightRange,
    NegativeWeight,
    VertexOutOfRange,
    WeightOverflow,
)

# Graphs
from .graphs import (
    UNIT_WEIGHT,
    BFSResult,
    DFSResult,
    Graph,
    GraphBuilder,
    ShortestPaths,
    adjacency_matrix,
    bfs,
    dfs,
    dijkstra,
    random_graph,
    reconstruct_path,
)
from .logging import configure_logging, get_log_level, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "Graph",
    "GraphBuilder",
    "UNIT_WEIGHT",
    "random_graph",
    "bfs",
    "dfs",
    "dijkstra",
    "BFSResult",
    "DFSResult",
    "ShortestPaths",
    "reconstruct_path",
    "adjacency_matrix",
    # Configuration
    "RandomGraphConfig",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Errors
    "EdgewiseError",
    "InvalidEdge",
    "InvalidWeight",
    "NegativeWeight",
    "VertexOutOfRange",
    "InvalidVertexCount",
    "InvalidWeightRange",
    "InvalidDensity",
    "WeightOverflow",
    # Logging
    "get_logger",
    "get_log_level",
    "set_log_level",
    "configure_logging",
]
