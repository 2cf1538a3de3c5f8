"""
Quartile Estimation

Interface for computing (Q1, Q2, Q3) from a sample, plus the one pinned
implementation used by default.

Different quantile conventions move Q1 and Q3 by fractions of a gap between
order statistics, which is enough to flip values sitting near a threshold
from one bucket to another. The default estimator is therefore fixed to
linear interpolation between order statistics (Hyndman & Fan type 7,
numpy's "linear" method):

    rank = (n - 1) * p / 100
    lo   = floor(rank)
    q(p) = x[lo] + (x[lo + 1] - x[lo]) * (rank - lo)

For [1, 2, ..., 9, 100] this gives Q1 = 3.25, Q2 = 5.5, Q3 = 7.75.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

import numpy as np

Quartiles = Tuple[float, float, float]


class QuartileEstimator(ABC):
    """
    Contract for quartile estimation.

    Implementations must be pure: same sample, same quartiles, and the
    sample is left untouched.
    """

    #: Name written to logs so runs using different estimators can be told apart
    name: str = "abstract"

    @abstractmethod
    def quartiles(self, sample: Sequence[float]) -> Quartiles:
        """
        Compute the first, second and third quartile of a sample.

        Args:
            sample: Non-empty sequence of finite values, in any order

        Returns:
            (Q1, Q2, Q3) with Q1 <= Q2 <= Q3
        """
        pass

    def __call__(self, sample: Sequence[float]) -> Quartiles:
        return self.quartiles(sample)


class LinearQuartileEstimator(QuartileEstimator):
    """Linear interpolation between order statistics (numpy "linear")."""

    name = "linear"

    def quartiles(self, sample: Sequence[float]) -> Quartiles:
        values = np.asarray(sample, dtype=np.float64)
        if values.size == 0:
            raise ValueError("Cannot compute quartiles of an empty sample")

        # Extreme spreads overflow to inf; callers check finiteness themselves
        with np.errstate(over="ignore", invalid="ignore"):
            q1, q2, q3 = np.percentile(values, [25.0, 50.0, 75.0], method="linear")
        return float(q1), float(q2), float(q3)


DEFAULT_ESTIMATOR = LinearQuartileEstimator()


def quartiles(sample: Sequence[float]) -> Quartiles:
    """Quartiles of a sample using the default linear estimator."""
    return DEFAULT_ESTIMATOR.quartiles(sample)
