"""
Random graph generation.

Two modes over the same candidate edge set:

- density mode (Erdos-Renyi G(n, p)): every candidate edge is kept
  independently with probability p;
- count mode (G(n, m)): exactly m distinct candidate edges are drawn
  without replacement.

Candidates are ordered pairs (u, v), u != v, for directed graphs and
unordered pairs u < v for undirected graphs, enumerated in lexicographic
order; (u, u) joins them when self-loops are allowed. Neither mode produces
parallel edges. Randomness comes from numpy.random.Generator so that a seed
fully determines the result.
"""

from __future__ import annotations

import numbers
from typing import List, Optional, Tuple, Union

import numpy as np

from ..config import DEFAULT_WEIGHT_RANGE, RandomGraphConfig
from ..logging import get_logger
from .core import Graph, GraphBuilder, Weight

logger = get_logger(__name__)

SeedLike = Union[None, int, np.random.Generator]


def _rng(seed: SeedLike) -> np.random.Generator:
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def candidate_edges(n: int, directed: bool, self_loops: bool = False) -> List[Tuple[int, int]]:
    """
    Enumerate the candidate edges of a simple graph on n vertices.

    Example:
        >>> candidate_edges(3, directed=False)
        [(0, 1), (0, 2), (1, 2)]
    """
    pairs = []
    for u in range(n):
        start = 0 if directed else u
        for v in range(start, n):
            if u == v and not self_loops:
                continue
            pairs.append((u, v))
    return pairs


def _draw_weights(
    rng: np.random.Generator, count: int, weight_range: Tuple[Weight, Weight]
) -> List[Weight]:
    lo, hi = weight_range
    if isinstance(lo, numbers.Integral) and isinstance(hi, numbers.Integral):
        return rng.integers(int(lo), int(hi), size=count, endpoint=True).tolist()
    return rng.uniform(float(lo), float(hi), size=count).tolist()


def generate(config: RandomGraphConfig, seed: SeedLike = None) -> Graph:
    """
    Generate a random graph from a validated configuration.

    Args:
        config: Generation parameters.
        seed: Integer seed, an existing numpy Generator, or None for fresh
            OS entropy.

    Returns:
        A new Graph satisfying every Graph invariant.

    Raises:
        InvalidVertexCount, InvalidDensity, InvalidWeightRange, ValueError:
            From RandomGraphConfig.validate().
    """
    config.validate()
    rng = _rng(seed)

    candidates = candidate_edges(config.n, config.directed, config.self_loops)

    if config.density is not None:
        keep = rng.random(len(candidates)) < config.density
        chosen = [pair for pair, kept in zip(candidates, keep) if kept]
    elif config.edge_count == 0:
        chosen = []
    else:
        picks = rng.choice(len(candidates), size=config.edge_count, replace=False)
        chosen = [candidates[i] for i in sorted(picks.tolist())]

    weights: Optional[List[Weight]] = None
    if config.weighted:
        weights = _draw_weights(rng, len(chosen), config.weight_range)

    builder = GraphBuilder(config.n, directed=config.directed, weighted=config.weighted)
    for i, (u, v) in enumerate(chosen):
        builder.add_edge(u, v, None if weights is None else weights[i])

    logger.debug(
        "Generated %s %s graph: n=%d, %d of %d candidate edges",
        "directed" if config.directed else "undirected",
        "weighted" if config.weighted else "unweighted",
        config.n,
        len(chosen),
        len(candidates),
    )
    return builder.build()


def random_graph(
    n: int,
    density: Optional[float] = None,
    edge_count: Optional[int] = None,
    directed: bool = True,
    weighted: bool = False,
    weight_range: Tuple[Weight, Weight] = DEFAULT_WEIGHT_RANGE,
    seed: SeedLike = None,
    self_loops: bool = False,
) -> Graph:
    """
    Generate a random graph.

    Exactly one of density and edge_count must be given.

    Args:
        n: Number of vertices.
        density: Probability in [0, 1] of keeping each candidate edge.
        edge_count: Exact number of distinct edges to draw.
        directed: If False, each edge is stored in both endpoint lists with
            the same weight.
        weighted: If True, weights are drawn uniformly from weight_range
            (integers when both bounds are ints); otherwise unit weight.
        weight_range: Inclusive (lo, hi) with 0 <= lo <= hi. Default (1, 10).
            Only checked when weighted.
        seed: Integer seed or numpy Generator; None uses OS entropy.
        self_loops: Allow (u, u) edges.

    Returns:
        The generated Graph.

    Raises:
        InvalidVertexCount: If n < 0, or edge_count is negative, nonzero for
            n == 0, or larger than the simple-graph maximum.
        InvalidDensity: If density is outside [0, 1].
        InvalidWeightRange: If weighted and weight_range is not 0 <= lo <= hi,
            has an int bound above MAX_INT_WEIGHT or a non-finite float bound.
        ValueError: If both or neither of density and edge_count are given.

    Example:
        >>> g = random_graph(5, edge_count=4, directed=False, weighted=True, seed=42)
        >>> g.edge_count()
        8
    """
    config = RandomGraphConfig(
        n=n,
        density=density,
        edge_count=edge_count,
        directed=directed,
        weighted=weighted,
        weight_range=weight_range,
        self_loops=self_loops,
    )
    return generate(config, seed=seed)
