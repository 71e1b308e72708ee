"""Configuration for edgewise: random-graph parameters and debug mode."""

from __future__ import annotations

import logging
import numbers
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from .errors import InvalidDensity, InvalidVertexCount, InvalidWeightRange
from .logging import get_log_level, set_log_level

_DEBUG_ENV_VAR = "EDGEWISE_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY

DEFAULT_WEIGHT_RANGE: Tuple[int, int] = (1, 10)
MAX_INT_WEIGHT = 2**63 - 1


def is_debug_enabled() -> bool:
    """
    Whether the algorithms emit per-vertex trace records.

    With debug mode off, graph construction and each algorithm log one
    summary line at DEBUG level. With it on they also log every vertex
    visit (bfs, dfs), every settled vertex (dijkstra) and every out-degree
    (construction). Initialised from the EDGEWISE_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn per-vertex trace records on or off. The log level is untouched."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch per-vertex tracing on or off.

    Enabling also lowers the edgewise package logger to DEBUG for the
    duration of the block so the trace is actually emitted; the previous
    flag and level are restored on exit.

    Example
    -------
    >>> with debug_context():
    ...     bfs(graph, 0)
    """
    global _debug_enabled
    prev_flag = _debug_enabled
    prev_level = get_log_level()
    _debug_enabled = bool(enabled)
    if enabled:
        set_log_level(logging.DEBUG)
    try:
        yield
    finally:
        _debug_enabled = prev_flag
        set_log_level(prev_level)


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class RandomGraphConfig:
    """
    Parameters for random graph generation.

    Exactly one of ``density`` and ``edge_count`` selects the generation
    mode: density mode includes every candidate edge independently with
    probability ``density``; count mode draws exactly ``edge_count`` distinct
    candidate edges.

    Args:
        n: Number of vertices.
        density: Edge probability in [0, 1] (density mode).
        edge_count: Number of edges to draw (count mode).
        directed: If False, every edge is stored in both endpoint lists.
        weighted: If True, weights are drawn uniformly from weight_range;
            otherwise every edge has unit weight.
        weight_range: Inclusive (lo, hi) bounds with 0 <= lo <= hi. Ignored
            (and not validated) for unweighted graphs.
        self_loops: Whether (u, u) edges are candidates.
    """

    n: int
    density: Optional[float] = None
    edge_count: Optional[int] = None
    directed: bool = True
    weighted: bool = False
    weight_range: Tuple[Union[int, float], Union[int, float]] = DEFAULT_WEIGHT_RANGE
    self_loops: bool = False

    def max_edges(self) -> int:
        """
        Largest number of edges a simple graph with these settings can hold.

        Directed graphs have n(n-1) candidate pairs, undirected graphs
        n(n-1)/2; self-loops add n more in either case.
        """
        n = self.n
        pairs = n * (n - 1) if self.directed else n * (n - 1) // 2
        if self.self_loops:
            pairs += n
        return pairs

    def validate(self) -> None:
        """
        Check the parameters.

        Raises:
            ValueError: If not exactly one of density and edge_count is set.
            InvalidVertexCount: If n or edge_count is negative, or edge_count
                exceeds max_edges().
            InvalidDensity: If density lies outside [0, 1].
            InvalidWeightRange: If weighted and weight_range is not
                0 <= lo <= hi, or a bound cannot be drawn (int bounds above
                MAX_INT_WEIGHT, float bounds that are not finite).
        """
        if (self.density is None) == (self.edge_count is None):
            raise ValueError("Exactly one of density and edge_count must be given")

        if isinstance(self.n, bool) or not isinstance(self.n, numbers.Integral):
            raise InvalidVertexCount(f"Vertex count must be an integer, got {self.n!r}")
        if self.n < 0:
            raise InvalidVertexCount(f"Vertex count must be non-negative, got {self.n}")

        if self.density is not None:
            if not _is_number(self.density) or not (0.0 <= self.density <= 1.0):
                raise InvalidDensity(f"Density must be in [0, 1], got {self.density!r}")
        else:
            if isinstance(self.edge_count, bool) or not isinstance(self.edge_count, numbers.Integral):
                raise InvalidVertexCount(f"Edge count must be an integer, got {self.edge_count!r}")
            if self.edge_count < 0:
                raise InvalidVertexCount(f"Edge count must be non-negative, got {self.edge_count}")
            if self.n == 0 and self.edge_count > 0:
                raise InvalidVertexCount(
                    f"Cannot place {self.edge_count} edge(s) in a graph with no vertices"
                )
            if self.edge_count > self.max_edges():
                raise InvalidVertexCount(
                    f"Requested {self.edge_count} edges but a "
                    f"{'directed' if self.directed else 'undirected'} simple graph on "
                    f"{self.n} vertices holds at most {self.max_edges()}"
                )

        if self.weighted:
            self._validate_weight_range()

    def _validate_weight_range(self) -> None:
        if len(self.weight_range) != 2:
            raise InvalidWeightRange(f"Weight range must be a (lo, hi) pair, got {self.weight_range!r}")
        lo, hi = self.weight_range
        if not (_is_number(lo) and _is_number(hi)):
            raise InvalidWeightRange(f"Weight range bounds must be numbers, got {self.weight_range!r}")
        if not (0 <= lo <= hi):
            raise InvalidWeightRange(f"Weight range must satisfy 0 <= lo <= hi, got ({lo}, {hi})")
        if isinstance(lo, numbers.Integral) and isinstance(hi, numbers.Integral):
            # Integer weights are drawn as numpy int64
            if hi > MAX_INT_WEIGHT:
                raise InvalidWeightRange(f"Integer weight bound {hi} exceeds {MAX_INT_WEIGHT}")
        elif not hi <= sys.float_info.max:
            raise InvalidWeightRange(f"Weight range bounds must be finite floats, got ({lo}, {hi})")
