"""
ErrorAccumulator: running sums of the error term.

Only three numbers are needed to recover mean, variance and standard
deviation at the end of a run: sample count, sum of errors and sum of
squared errors. Partial accumulators (one per chunk of origin nodes) are
combined by addition, which is associative and commutative up to
floating-point rounding.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np


@dataclass
class ErrorAccumulator:
    """Running count / sum / sum-of-squares over (transaction, observer) pairs."""

    count: int = 0
    sum_error: float = 0.0
    sum_squared_error: float = 0.0

    def add(self, error: float):
        """Accumulate a single error sample."""
        self.sum_error += error
        self.count += 1
        self.sum_squared_error += error * error

    def add_many(self, errors: np.ndarray):
        """Accumulate a batch of error samples."""
        errors = np.asarray(errors, dtype=np.float64)
        self.count += int(errors.size)
        self.sum_error += float(errors.sum())
        self.sum_squared_error += float(np.dot(errors.ravel(), errors.ravel()))

    def merge(self, other: ErrorAccumulator) -> ErrorAccumulator:
        """Fold another accumulator's partial sums into this one."""
        self.count += other.count
        self.sum_error += other.sum_error
        self.sum_squared_error += other.sum_squared_error
        return self

    def __add__(self, other: ErrorAccumulator) -> ErrorAccumulator:
        """Combine two accumulators into a new one."""
        result = self.copy()
        return result.merge(other)

    def __iadd__(self, other: ErrorAccumulator) -> ErrorAccumulator:
        return self.merge(other)

    def copy(self) -> ErrorAccumulator:
        return ErrorAccumulator(self.count, self.sum_error, self.sum_squared_error)

    @property
    def is_empty(self) -> bool:
        return self.count == 0
