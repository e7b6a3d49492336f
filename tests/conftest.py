"""
Pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def small_config():
    """Configuration for a small 6x6 grid (1260 observations)."""
    from lwsim.core import SimulationConfig
    return SimulationConfig(grid_size=6, max_latency_ms=1000.0, send_window_ms=10000.0)


@pytest.fixture
def two_by_two_config():
    """Smallest grid with observations: 4 nodes, 12 ordered pairs."""
    from lwsim.core import SimulationConfig
    return SimulationConfig(grid_size=2, max_latency_ms=1000.0, send_window_ms=10000.0)


@pytest.fixture
def default_config():
    """The built-in 100x100 configuration."""
    from lwsim.core import DEFAULT_CONFIG
    return DEFAULT_CONFIG
