"""
SimulationConfig: the fixed parameters of one latency-window run.

Three primitives define the whole model:
- grid_size: nodes per row/column of the square world
- max_latency_ms: latency across the grid (the latency width)
- send_window_ms: span over which every node sends its one transaction

Everything else (latency per grid step, spacing between sends, the number
of observations a run will make) is derived from them.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral


class InvalidConfiguration(ValueError):
    """Raised when a configuration would make the simulation degenerate."""


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for a latency-window simulation."""

    grid_size: int  # Nodes per row and per column
    max_latency_ms: float  # Latency between the two furthest nodes
    send_window_ms: float  # Maximum age of every transaction in the pool

    def __post_init__(self):
        if isinstance(self.grid_size, bool) or not isinstance(self.grid_size, Integral):
            raise InvalidConfiguration(
                f"grid_size must be an integer, got {self.grid_size!r}"
            )
        if self.grid_size <= 0:
            raise InvalidConfiguration(
                f"grid_size must be positive, got {self.grid_size}"
            )
        if not self.max_latency_ms > 0:
            raise InvalidConfiguration(
                f"max_latency_ms must be positive, got {self.max_latency_ms}"
            )
        if not self.send_window_ms > 0:
            raise InvalidConfiguration(
                f"send_window_ms must be positive, got {self.send_window_ms}"
            )

    @property
    def total_nodes(self) -> int:
        """Count of all nodes in the world."""
        return self.grid_size * self.grid_size

    @property
    def latency_step_ms(self) -> float:
        """Latency per unit of grid distance (between adjacent nodes)."""
        return self.max_latency_ms / self.grid_size

    @property
    def send_step_ms(self) -> float:
        """Spacing between consecutive transaction sends."""
        return self.send_window_ms / self.total_nodes

    @property
    def expected_sample_count(self) -> int:
        """Every node observes every other node's transaction exactly once."""
        return self.total_nodes * (self.total_nodes - 1)


DEFAULT_CONFIG = SimulationConfig(
    grid_size=100,
    max_latency_ms=1000.0,
    send_window_ms=10000.0,
)
