"""Unit tests for SimulationConfig."""

import dataclasses

import pytest

from lwsim.core.config import SimulationConfig, InvalidConfiguration, DEFAULT_CONFIG


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_default_config(self):
        assert DEFAULT_CONFIG.grid_size == 100
        assert DEFAULT_CONFIG.max_latency_ms == 1000.0
        assert DEFAULT_CONFIG.send_window_ms == 10000.0

    def test_derived_values(self):
        cfg = SimulationConfig(grid_size=100, max_latency_ms=1000.0, send_window_ms=10000.0)
        assert cfg.total_nodes == 10000
        assert cfg.latency_step_ms == 10.0
        assert cfg.send_step_ms == 1.0
        assert cfg.expected_sample_count == 10000 * 9999

    def test_one_node_has_no_samples(self):
        cfg = SimulationConfig(grid_size=1, max_latency_ms=10.0, send_window_ms=10.0)
        assert cfg.total_nodes == 1
        assert cfg.expected_sample_count == 0

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.grid_size = 10


class TestInvalidConfiguration:
    """Tests for configuration validation."""

    @pytest.mark.parametrize("grid_size", [0, -1, -100])
    def test_non_positive_grid_size(self, grid_size):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(grid_size=grid_size, max_latency_ms=1000.0, send_window_ms=10000.0)

    def test_non_integer_grid_size(self):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(grid_size=2.5, max_latency_ms=1000.0, send_window_ms=10000.0)

    @pytest.mark.parametrize("latency", [0.0, -1.0, float("nan")])
    def test_non_positive_latency(self, latency):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(grid_size=10, max_latency_ms=latency, send_window_ms=10000.0)

    @pytest.mark.parametrize("window", [0.0, -10000.0])
    def test_non_positive_send_window(self, window):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(grid_size=10, max_latency_ms=1000.0, send_window_ms=window)

    def test_is_value_error(self):
        with pytest.raises(ValueError, match="grid_size must be positive"):
            SimulationConfig(grid_size=0, max_latency_ms=1000.0, send_window_ms=10000.0)
