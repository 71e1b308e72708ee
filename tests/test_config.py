"""Tests for configuration and debug mode."""

import logging
from io import StringIO

import pytest

from edgewise.config import (
    DEFAULT_WEIGHT_RANGE,
    MAX_INT_WEIGHT,
    RandomGraphConfig,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from edgewise.errors import InvalidDensity, InvalidVertexCount, InvalidWeightRange
from edgewise.graphs import Graph, bfs, dfs
from edgewise.logging import configure_logging, get_log_level


class TestRandomGraphConfig:
    """Tests for RandomGraphConfig."""

    def test_defaults(self):
        config = RandomGraphConfig(n=3, density=0.5)
        assert config.directed is True
        assert config.weighted is False
        assert config.weight_range == DEFAULT_WEIGHT_RANGE == (1, 10)
        assert config.self_loops is False
        config.validate()

    @pytest.mark.parametrize(
        "kwargs, expected",
        [
            (dict(n=5, directed=True), 20),
            (dict(n=5, directed=False), 10),
            (dict(n=5, directed=True, self_loops=True), 25),
            (dict(n=5, directed=False, self_loops=True), 15),
            (dict(n=0, directed=True), 0),
            (dict(n=1, directed=False), 0),
        ],
    )
    def test_max_edges(self, kwargs, expected):
        assert RandomGraphConfig(edge_count=0, **kwargs).max_edges() == expected

    def test_frozen(self):
        config = RandomGraphConfig(n=3, density=0.5)
        with pytest.raises(AttributeError):
            config.n = 4  # type: ignore[misc]

    def test_validate_errors(self):
        with pytest.raises(InvalidVertexCount):
            RandomGraphConfig(n=2.5, density=0.5).validate()  # type: ignore[arg-type]
        with pytest.raises(InvalidVertexCount):
            RandomGraphConfig(n=3, edge_count=1.5).validate()  # type: ignore[arg-type]
        with pytest.raises(InvalidDensity):
            RandomGraphConfig(n=3, density="high").validate()  # type: ignore[arg-type]
        with pytest.raises(InvalidWeightRange):
            RandomGraphConfig(n=3, density=0.5, weighted=True, weight_range=(1, 2, 3)).validate()  # type: ignore[arg-type]

    def test_zero_weight_lower_bound(self):
        RandomGraphConfig(n=3, density=0.5, weighted=True, weight_range=(0, 0)).validate()

    def test_weight_range_ignored_when_unweighted(self):
        """Unweighted graphs never draw weights, so the range is not checked."""
        RandomGraphConfig(n=3, density=0.5, weight_range=(5, 1)).validate()
        RandomGraphConfig(n=3, edge_count=2, weight_range=(-1, float("nan"))).validate()
        with pytest.raises(InvalidWeightRange):
            RandomGraphConfig(n=3, density=0.5, weighted=True, weight_range=(5, 1)).validate()

    @pytest.mark.parametrize(
        "weight_range",
        [
            (0, MAX_INT_WEIGHT + 1),
            (0, 2**64),
            (0.0, float("inf")),
            (0, 10**400),
            (1.5, 10**400),
            (0.0, float("nan")),
        ],
    )
    def test_undrawable_weight_range(self, weight_range):
        with pytest.raises(InvalidWeightRange):
            RandomGraphConfig(n=3, density=0.5, weighted=True, weight_range=weight_range).validate()

    def test_largest_int_weight_range(self):
        RandomGraphConfig(n=3, density=0.5, weighted=True, weight_range=(0, MAX_INT_WEIGHT)).validate()


class TestDebugMode:
    """Tests for debug mode toggling."""

    def test_set_debug_enabled(self):
        prev = is_debug_enabled()
        try:
            set_debug_enabled(True)
            assert is_debug_enabled()
            set_debug_enabled(False)
            assert not is_debug_enabled()
        finally:
            set_debug_enabled(prev)

    def test_debug_context_restores(self):
        prev = is_debug_enabled()
        with debug_context(True):
            assert is_debug_enabled()
            with debug_context(False):
                assert not is_debug_enabled()
            assert is_debug_enabled()
        assert is_debug_enabled() == prev

    def test_debug_mode_logs_traversal_steps(self):
        """Debug mode emits per-vertex records."""
        stream = StringIO()
        try:
            configure_logging(level=logging.DEBUG, stream=stream)
            with debug_context(True):
                bfs(Graph.new_unweighted([[1], []]), 0)
            output = stream.getvalue()
            assert "bfs: visit 0 at depth 0" in output
            assert "bfs: visit 1 at depth 1" in output
        finally:
            configure_logging(level=logging.WARNING)

    def test_debug_context_lowers_log_level(self):
        """Tracing is visible inside the block even when the package logs at WARNING."""
        stream = StringIO()
        try:
            configure_logging(level=logging.WARNING, stream=stream)
            with debug_context():
                assert get_log_level() == logging.DEBUG
                dfs(Graph.new_unweighted([[1], []]), 0)
            assert get_log_level() == logging.WARNING
            assert "dfs: visit 1" in stream.getvalue()

            bfs(Graph.new_unweighted([[1], []]), 0)
            assert "bfs:" not in stream.getvalue()
        finally:
            configure_logging(level=logging.WARNING)

    def test_set_debug_enabled_keeps_log_level(self):
        prev = is_debug_enabled()
        try:
            configure_logging(level=logging.WARNING)
            set_debug_enabled(True)
            assert get_log_level() == logging.WARNING
        finally:
            set_debug_enabled(prev)
