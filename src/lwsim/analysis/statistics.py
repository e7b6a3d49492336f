"""
Summary statistics of the error term.

The error term of one observation is (arrival time seen by a node) minus
(true send time). Over a full run we report:
- mean error
- variance, taken as the mean of squared error (as in the reference run)
- standard deviation = sqrt(variance)

and set them beside the configured latency width for comparison.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    from lwsim.core.accumulator import ErrorAccumulator
    from lwsim.core.config import SimulationConfig


@dataclass(frozen=True)
class SimulationResult:
    """Read-only outcome of one simulation run."""

    mean_error_ms: float
    variance_ms2: float
    stdev_error_ms: float
    sample_count: int
    max_latency_ms: float  # Carried through unchanged for comparison

    @property
    def is_defined(self) -> bool:
        """False when there were no samples (a 1x1 grid only has the self-pair)."""
        return self.sample_count > 0

    @property
    def mean_plus_stdev_ms(self) -> float:
        """Window within which true timestamps are unknowable."""
        return self.mean_error_ms + self.stdev_error_ms

    @property
    def relative_gap(self) -> float:
        """|mean + stdev - latency width| as a fraction of the latency width."""
        return abs(self.mean_plus_stdev_ms - self.max_latency_ms) / self.max_latency_ms


def summarize(accumulator: "ErrorAccumulator", config: "SimulationConfig") -> SimulationResult:
    """
    Derive mean, variance and standard deviation from accumulated sums.

    An empty accumulator yields NaN statistics instead of dividing by zero.

    Args:
        accumulator: Sums over every (transaction, observer) pair
        config: Configuration the sums were produced with

    Returns:
        SimulationResult
    """
    if accumulator.is_empty:
        return SimulationResult(
            mean_error_ms=np.nan,
            variance_ms2=np.nan,
            stdev_error_ms=np.nan,
            sample_count=0,
            max_latency_ms=config.max_latency_ms,
        )

    mean = accumulator.sum_error / accumulator.count
    variance = accumulator.sum_squared_error / accumulator.count

    return SimulationResult(
        mean_error_ms=mean,
        variance_ms2=variance,
        stdev_error_ms=math.sqrt(variance),
        sample_count=accumulator.count,
        max_latency_ms=config.max_latency_ms,
    )
