"""
Core graph data structures.

Provides an immutable adjacency-list Graph over vertices ``0 .. n-1`` and a
GraphBuilder for incremental construction. Every adjacency entry is a
``(target, weight)`` pair; unweighted graphs store the unit weight.

Directionality is a construction-time convention: the Graph stores exactly
the adjacency lists it was given, and undirected edges are nothing more than
symmetric pairs inserted by GraphBuilder or the random generator. The
algorithms only ever walk outgoing entries.

Weights are ``int`` (unbounded) or ``float`` (IEEE-754 double, finite).
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..config import DEFAULT_WEIGHT_RANGE, is_debug_enabled
from ..errors import InvalidEdge, InvalidVertexCount, InvalidWeight, NegativeWeight, VertexOutOfRange
from ..logging import get_logger

logger = get_logger(__name__)

Vertex = int
Weight = Union[int, float]
Edge = Tuple[Vertex, Weight]

UNIT_WEIGHT: Weight = 1


def as_vertex(value: object) -> Optional[int]:
    """Return ``value`` as a Python int index, or None if it is not one."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def check_index(v: object, n: int) -> int:
    """
    Validate a vertex index against a vertex count.

    Negative indices are rejected, never wrapped around.

    Raises:
        VertexOutOfRange: If v is not an integer in [0, n).
    """
    index = as_vertex(v)
    if index is None or not (0 <= index < n):
        raise VertexOutOfRange(f"Vertex {v!r} not in graph with {n} vertices")
    return index


def check_vertex(graph: "Graph", v: object) -> int:
    """Validate a query or source vertex against a graph."""
    return check_index(v, graph.vertex_count())


def _check_target(target: object, u: int, n: int) -> int:
    v = as_vertex(target)
    if v is None or not (0 <= v < n):
        raise InvalidEdge(f"Edge ({u}, {target!r}) targets a vertex outside [0, {n})")
    return v


def _check_weight(weight: object, u: int, v: int) -> Weight:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeight(f"Non-numeric weight {weight!r} on edge ({u}, {v})")
    if isinstance(weight, numbers.Integral):
        w: Weight = int(weight)
    else:
        w = float(weight)
        if math.isnan(w):
            raise InvalidWeight(f"NaN weight on edge ({u}, {v})")
    if w < 0:
        raise NegativeWeight(f"Negative weight {w} on edge ({u}, {v})")
    if isinstance(w, float) and math.isinf(w):
        raise InvalidWeight(f"Infinite weight on edge ({u}, {v})")
    return w


class Graph:
    """
    Immutable adjacency-list graph.

    Vertices are the indices ``0 .. n-1`` of the adjacency sequence. Self
    loops and parallel edges are kept exactly as given, in the given order;
    that order is the tie-break order of every traversal.

    Args:
        adjacency: One sequence of ``(target, weight)`` pairs per vertex.
        weighted: Whether the weights are meaningful. Only affects display
            and equality; the algorithms read weights either way.

    Raises:
        InvalidEdge: If an entry is malformed or targets a vertex outside
            ``[0, n)``.
        NegativeWeight: If a weight is negative.
        InvalidWeight: If a weight is non-numeric, NaN or infinite.

    Complexity:
        - construction: O(V + E)
        - neighbors / out_degree: O(1)
        - edges: O(V + E)

    Example:
        >>> g = Graph([[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []])
        >>> g.vertex_count()
        4
        >>> g.neighbors(0)
        ((1, 4), (2, 1))
    """

    __slots__ = ("_adj", "_weighted")

    def __init__(self, adjacency: Sequence[Sequence[Tuple[int, Weight]]], weighted: bool = True):
        rows = list(adjacency)
        n = len(rows)
        frozen: List[Tuple[Edge, ...]] = []

        for u, row in enumerate(rows):
            entries: List[Edge] = []
            for entry in row:
                try:
                    target, weight = entry
                except (TypeError, ValueError) as exc:
                    raise InvalidEdge(
                        f"Entry {entry!r} in adjacency list of vertex {u} is not a (target, weight) pair"
                    ) from exc
                v = _check_target(target, u, n)
                entries.append((v, _check_weight(weight, u, v)))
            frozen.append(tuple(entries))

        self._adj: Tuple[Tuple[Edge, ...], ...] = tuple(frozen)
        self._weighted = bool(weighted)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Built graph with %d vertices and %d edges", n, self.edge_count())
        if is_debug_enabled():
            for u, row in enumerate(self._adj):
                logger.debug("vertex %d: out-degree %d", u, len(row))

    @classmethod
    def new(cls, adjacency: Sequence[Sequence[Tuple[int, Weight]]]) -> "Graph":
        """Build a weighted graph from explicit ``(target, weight)`` lists."""
        return cls(adjacency, weighted=True)

    @classmethod
    def new_unweighted(cls, adjacency: Sequence[Sequence[int]]) -> "Graph":
        """
        Build an unweighted graph from lists of plain target indices.

        Every edge carries UNIT_WEIGHT.

        Raises:
            InvalidEdge: If a target is outside ``[0, n)``.

        Example:
            >>> print(Graph.new_unweighted([[1], [0]]))
            0->1
            1->0
        """
        rows = list(adjacency)
        n = len(rows)
        return cls(
            [[(_check_target(v, u, n), UNIT_WEIGHT) for v in row] for u, row in enumerate(rows)],
            weighted=False,
        )

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Union[Tuple[int, int], Tuple[int, int, Weight]]],
        directed: bool = True,
        weighted: bool = True,
    ) -> "Graph":
        """
        Create a graph from ``(u, v)`` or ``(u, v, w)`` tuples.

        Undirected graphs receive each edge in both endpoint lists. Pairs
        without a weight get UNIT_WEIGHT.
        """
        builder = GraphBuilder(n, directed=directed, weighted=weighted)
        for edge in edges:
            if len(edge) == 2:
                u, v = edge
                builder.add_edge(u, v)
            else:
                u, v, w = edge
                builder.add_edge(u, v, w)
        return builder.build()

    @classmethod
    def random(
        cls,
        n: int,
        density: Optional[float] = None,
        edge_count: Optional[int] = None,
        directed: bool = True,
        weighted: bool = False,
        weight_range: Tuple[Weight, Weight] = DEFAULT_WEIGHT_RANGE,
        seed=None,
        self_loops: bool = False,
    ) -> "Graph":
        """Generate a random graph; see :func:`edgewise.graphs.random_graph`."""
        from .generators import random_graph

        return random_graph(
            n,
            density=density,
            edge_count=edge_count,
            directed=directed,
            weighted=weighted,
            weight_range=weight_range,
            seed=seed,
            self_loops=self_loops,
        )

    @property
    def is_weighted(self) -> bool:
        """Whether edge weights were supplied explicitly."""
        return self._weighted

    def vertex_count(self) -> int:
        """Return the number of vertices n."""
        return len(self._adj)

    def edge_count(self) -> int:
        """
        Return the number of stored adjacency entries.

        An undirected edge between distinct vertices counts twice.
        """
        return sum(len(row) for row in self._adj)

    def neighbors(self, v: int) -> Tuple[Edge, ...]:
        """
        Return the adjacency list of vertex v as a read-only tuple.

        Raises:
            VertexOutOfRange: If v is not a vertex.
        """
        return self._adj[check_vertex(self, v)]

    def out_degree(self, v: int) -> int:
        """Return the number of outgoing entries of vertex v."""
        return len(self.neighbors(v))

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, Weight]]:
        """Iterate over ``(u, v, w)`` for every adjacency entry, in storage order."""
        for u, row in enumerate(self._adj):
            for v, w in row:
                yield u, v, w

    def adjacency(self) -> Tuple[Tuple[Edge, ...], ...]:
        """Return the full adjacency structure."""
        return self._adj

    def bfs(self, source: int):
        """Breadth-first search from source; see :func:`edgewise.graphs.bfs`."""
        from .traversal import bfs

        return bfs(self, source)

    def dfs(self, source: int):
        """Depth-first search from source; see :func:`edgewise.graphs.dfs`."""
        from .traversal import dfs

        return dfs(self, source)

    def dijkstra(self, source: int):
        """Single-source shortest paths; see :func:`edgewise.graphs.dijkstra`."""
        from .shortest import dijkstra

        return dijkstra(self, source)

    def __len__(self) -> int:
        return len(self._adj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._weighted == other._weighted and self._adj == other._adj

    def __hash__(self) -> int:
        return hash((self._weighted, self._adj))

    def __repr__(self) -> str:
        return (
            f"Graph(n={self.vertex_count()}, edges={self.edge_count()}, "
            f"weighted={self._weighted})"
        )

    def __str__(self) -> str:
        if self._weighted:
            return "\n".join(f"{u}-({w})->{v}" for u, v, w in self.edges())
        return "\n".join(f"{u}->{v}" for u, v, _ in self.edges())


class GraphBuilder:
    """
    Incremental builder for Graph.

    This is where undirected edges become symmetric pairs: add_edge on an
    undirected builder appends ``(v, w)`` to u's list and ``(u, w)`` to v's
    list with the same weight. A self-loop is stored once.

    Args:
        n: Number of vertices (fixed).
        directed: If False, edges are inserted in both directions.
        weighted: If False, every edge gets UNIT_WEIGHT and explicit weights
            are rejected.

    Example:
        >>> b = GraphBuilder(3, directed=False).add_edge(0, 1, 2.5).add_edge(1, 2, 1)
        >>> b.build().neighbors(1)
        ((0, 2.5), (2, 1))
    """

    def __init__(self, n: int, directed: bool = True, weighted: bool = True):
        count = as_vertex(n)
        if count is None or count < 0:
            raise InvalidVertexCount(f"Vertex count must be a non-negative integer, got {n!r}")
        self.n = count
        self.directed = directed
        self.weighted = weighted
        self._rows: List[List[Edge]] = [[] for _ in range(count)]

    def add_edge(self, u: int, v: int, weight: Optional[Weight] = None) -> "GraphBuilder":
        """
        Add an edge from u to v (and from v to u when undirected).

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Non-negative weight; defaults to UNIT_WEIGHT. Must be
                omitted on unweighted builders.

        Returns:
            The builder, for chaining.

        Raises:
            InvalidEdge: If u or v are out of range.
            NegativeWeight: If weight is negative.
            InvalidWeight: If weight is otherwise invalid, or given to an
                unweighted builder.
        """
        src = _check_target(u, u, self.n)
        dst = _check_target(v, src, self.n)

        if weight is None:
            w = UNIT_WEIGHT
        elif not self.weighted:
            raise InvalidWeight(f"Unweighted graph cannot take weight {weight!r} on edge ({src}, {dst})")
        else:
            w = _check_weight(weight, src, dst)

        self._rows[src].append((dst, w))
        if not self.directed and src != dst:
            self._rows[dst].append((src, w))
        return self

    def build(self) -> Graph:
        """Freeze the accumulated adjacency lists into a Graph."""
        return Graph(self._rows, weighted=self.weighted)
