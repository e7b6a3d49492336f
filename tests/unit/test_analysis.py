"""Unit tests for analysis module."""

import math

import numpy as np
import pytest

from lwsim.analysis.statistics import SimulationResult, summarize
from lwsim.analysis.theoretical import (
    UNIT_SQUARE_MEAN_DISTANCE,
    displacement_counts,
    expected_moments,
    closed_form_variance,
    continuum_mean_error,
)
from lwsim.core.accumulator import ErrorAccumulator
from lwsim.core.config import SimulationConfig
from lwsim.core.simulator import run_simulation


class TestSummarize:
    """Tests for summarize()."""

    def test_statistics_from_sums(self, small_config):
        acc = ErrorAccumulator()
        for value in (3.0, 4.0):
            acc.add(value)
        result = summarize(acc, small_config)

        assert result.mean_error_ms == 3.5
        assert result.variance_ms2 == 12.5  # (9 + 16) / 2
        assert result.stdev_error_ms == math.sqrt(12.5)
        assert result.sample_count == 2
        assert result.max_latency_ms == small_config.max_latency_ms

    def test_empty_is_undefined(self, small_config):
        result = summarize(ErrorAccumulator(), small_config)
        assert not result.is_defined
        assert np.isnan(result.mean_error_ms)
        assert np.isnan(result.variance_ms2)


class TestSimulationResult:
    """Tests for derived result properties."""

    def test_mean_plus_stdev(self):
        result = SimulationResult(600.0, 250000.0, 500.0, 10, 1000.0)
        assert result.mean_plus_stdev_ms == 1100.0
        assert result.relative_gap == pytest.approx(0.1)

    def test_frozen(self):
        result = SimulationResult(1.0, 1.0, 1.0, 1, 1.0)
        with pytest.raises(AttributeError):
            result.mean_error_ms = 2.0


class TestDisplacementCounts:
    """Tests for displacement_counts()."""

    @pytest.mark.parametrize("n", [1, 2, 5, 10])
    def test_total_is_ordered_pairs(self, n):
        _, _, counts = displacement_counts(n)
        assert counts.sum() == n * n * (n * n - 1)

    def test_self_displacement_excluded(self):
        dx, dy, counts = displacement_counts(4)
        assert counts[(dx == 0) & (dy == 0)].sum() == 0

    def test_adjacent_count(self):
        # N rows x (N - 1) horizontal neighbours, one direction
        dx, dy, counts = displacement_counts(4)
        assert counts[(dx == 1) & (dy == 0)].sum() == 4 * 3

    def test_symmetric(self):
        _, _, counts = displacement_counts(5)
        assert np.array_equal(counts, counts[::-1, ::-1])


class TestExpectedMoments:
    """Displacement theory matches the all-pairs simulation."""

    @pytest.mark.parametrize("n", [2, 3, 6, 9])
    def test_matches_simulation(self, n):
        cfg = SimulationConfig(n, 1000.0, 10000.0)
        theory = expected_moments(cfg)
        sim = run_simulation(cfg)

        assert theory.sample_count == sim.sample_count
        assert theory.mean_error_ms == pytest.approx(sim.mean_error_ms, rel=1e-9)
        assert theory.variance_ms2 == pytest.approx(sim.variance_ms2, rel=1e-9)

    def test_single_node_undefined(self):
        result = expected_moments(SimulationConfig(1, 1000.0, 10000.0))
        assert not result.is_defined

    def test_default_config(self, default_config):
        result = expected_moments(default_config)
        assert result.sample_count == default_config.expected_sample_count
        assert default_config.max_latency_ms < result.mean_plus_stdev_ms < 1160.0


class TestClosedForms:
    """Tests for analytic reference values."""

    @pytest.mark.parametrize("n", [2, 4, 7, 30])
    def test_variance_is_width_squared_over_three(self, n):
        cfg = SimulationConfig(n, 1000.0, 10000.0)
        assert expected_moments(cfg).variance_ms2 == pytest.approx(closed_form_variance(cfg), rel=1e-9)

    def test_variance_undefined_for_single_node(self):
        assert math.isnan(closed_form_variance(SimulationConfig(1, 1000.0, 10000.0)))

    def test_unit_square_constant(self):
        assert UNIT_SQUARE_MEAN_DISTANCE == pytest.approx(0.5214, abs=1e-4)

    def test_large_grid_approaches_continuum(self):
        cfg = SimulationConfig(128, 1000.0, 10000.0)
        assert expected_moments(cfg).mean_error_ms == pytest.approx(
            continuum_mean_error(cfg), rel=0.02
        )
