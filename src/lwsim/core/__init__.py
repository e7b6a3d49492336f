"""
Core simulation primitives.

This layer knows only:
- The fixed configuration (grid size, latency width, send window)
- Node coordinates and the one transaction each node sends
- Distance → latency → arrival time for every ordered pair
- Running sums of the error term

Summary statistics and theory live in the analysis layer.
"""

from lwsim.core.config import SimulationConfig, InvalidConfiguration, DEFAULT_CONFIG
from lwsim.core.grid import NodeGrid, Transaction
from lwsim.core.accumulator import ErrorAccumulator
from lwsim.core.simulator import LatencySimulator, run_simulation

__all__ = [
    "SimulationConfig",
    "InvalidConfiguration",
    "DEFAULT_CONFIG",
    "NodeGrid",
    "Transaction",
    "ErrorAccumulator",
    "LatencySimulator",
    "run_simulation",
]
