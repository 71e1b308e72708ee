"""Pytest configuration and shared fixtures for edgewise tests.

This module provides:
- A deterministic numpy RNG fixture
- Small reference graphs used across the graph test modules
"""

import os

import numpy as np
import pytest

from edgewise.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def diamond() -> Graph:
    """Four-vertex directed weighted graph where the detour 0->2->1 beats 0->1."""
    return Graph([[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []])


@pytest.fixture
def two_islands() -> Graph:
    """Weighted directed graph with a ten-vertex component and a separate island."""
    return Graph(
        [
            [(1, 4), (2, 1)],  # 0
            [(3, 1), (4, 7)],  # 1
            [(1, 2), (3, 5), (5, 8)],  # 2
            [(6, 3)],  # 3
            [(6, 2), (7, 3)],  # 4
            [(4, 2), (8, 6)],  # 5
            [(9, 4)],  # 6
            [(6, 3), (9, 2)],  # 7
            [(7, 1), (9, 8)],  # 8
            [(5, 1)],  # 9
            # island
            [(11, 3)],  # 10
            [(12, 4)],  # 11
            [(13, 2)],  # 12
            [(10, 10)],  # 13
            [(12, 1)],  # 14
        ]
    )


@pytest.fixture
def unweighted_mixed() -> Graph:
    """Unweighted graph with a cycle, a separate pair, and a pendant edge."""
    return Graph.new_unweighted(
        [
            [1, 2, 5],  # 0
            [0, 5],  # 1
            [0],  # 2
            [4],  # 3
            [3],  # 4
            [0],  # 5
        ]
    )
