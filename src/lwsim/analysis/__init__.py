"""
Analysis layer: statistics of the error term and theory to check them against.

- SimulationResult / summarize: mean, variance, stdev from accumulated sums
- expected_moments: exact statistics from displacement counts (O(N²))
- closed_form_variance, continuum_mean_error: analytic reference values
"""

from lwsim.analysis.statistics import SimulationResult, summarize
from lwsim.analysis.theoretical import (
    UNIT_SQUARE_MEAN_DISTANCE,
    displacement_counts,
    expected_moments,
    closed_form_variance,
    continuum_mean_error,
)

__all__ = [
    "SimulationResult",
    "summarize",
    "UNIT_SQUARE_MEAN_DISTANCE",
    "displacement_counts",
    "expected_moments",
    "closed_form_variance",
    "continuum_mean_error",
]
