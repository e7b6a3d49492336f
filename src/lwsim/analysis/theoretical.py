"""
Theoretical error moments: the same answer without the all-pairs pass.

Because the error term equals latency, and latency depends only on the
displacement (dx, dy) between two nodes, the O(N⁴) sum collapses onto the
O(N²) displacements. On an N x N grid exactly

    count(dx, dy) = (N - |dx|) · (N - |dy|)

ordered pairs are separated by (dx, dy). Weighting each displacement's
latency by that count gives exact mean and mean-square error, useful for
cross-checking the simulation on large grids.

Two further closed forms:
- Mean-square error is exactly max_latency² / 3 for any N ≥ 2.
- As N → ∞ the mean error tends to the mean distance between two points in
  the unit square, (2 + √2 + 5·ln(1 + √2)) / 15 ≈ 0.5214, times max latency.
"""

from __future__ import annotations
import math

import numpy as np

from lwsim.analysis.statistics import SimulationResult, summarize
from lwsim.core.accumulator import ErrorAccumulator
from lwsim.core.config import SimulationConfig

# Mean distance between two uniform points in the unit square
UNIT_SQUARE_MEAN_DISTANCE = (2.0 + math.sqrt(2.0) + 5.0 * math.log(1.0 + math.sqrt(2.0))) / 15.0


def displacement_counts(grid_size: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Ordered node pairs per displacement on a grid_size x grid_size grid.

    Args:
        grid_size: Nodes per row/column

    Returns:
        (dx, dy, counts) - 2D arrays over dx, dy ∈ [-(N-1), N-1].
        The self displacement (0, 0) has count 0.
    """
    n = grid_size
    offsets = np.arange(-(n - 1), n)
    dx, dy = np.meshgrid(offsets, offsets, indexing="ij")
    counts = (n - np.abs(dx)) * (n - np.abs(dy))
    counts[n - 1, n - 1] = 0  # ignore yourself
    return dx, dy, counts


def expected_moments(config: SimulationConfig) -> SimulationResult:
    """
    Exact simulation statistics from displacement counts.

    Matches LatencySimulator.run() up to floating-point rounding.
    """
    dx, dy, counts = displacement_counts(config.grid_size)
    latency_ms = np.sqrt(dx ** 2 + dy ** 2) * config.latency_step_ms

    accumulator = ErrorAccumulator(
        count=int(counts.sum()),
        sum_error=float(np.sum(counts * latency_ms)),
        sum_squared_error=float(np.sum(counts * latency_ms ** 2)),
    )
    return summarize(accumulator, config)


def closed_form_variance(config: SimulationConfig) -> float:
    """
    Mean-square error in closed form: max_latency² / 3.

    Summing (x2 - x)² over all ordered pairs of a discrete axis gives
    N²(N² - 1)/6; both axes over the N²(N² - 1) off-diagonal pairs leave
    N²/3 grid units², i.e. (N · latency_step)² / 3.

    Returns NaN for a 1x1 grid, which has no pairs.
    """
    if config.grid_size < 2:
        return math.nan
    return config.max_latency_ms ** 2 / 3.0


def continuum_mean_error(config: SimulationConfig) -> float:
    """Mean error in the large-grid limit."""
    return UNIT_SQUARE_MEAN_DISTANCE * config.max_latency_ms
