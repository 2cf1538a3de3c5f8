"""
Severity Thresholds

Tukey fences derived from the quartiles of a sample:

    IQR           = Q3 - Q1
    low severe    = Q1 - 3.0 * IQR
    low mild      = Q1 - 1.5 * IQR
    high mild     = Q3 + 1.5 * IQR
    high severe   = Q3 + 3.0 * IQR

    LOW SEVERE | LOW MILD |        NORMAL        | HIGH MILD | HIGH SEVERE
    -----------|----------|----|-----------|-----|-----------|------------
               ^          ^    Q1          Q3    ^           ^
            Q1-3IQR    Q1-1.5IQR             Q3+1.5IQR    Q3+3IQR
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Sequence, Tuple

from .quartiles import QuartileEstimator, DEFAULT_ESTIMATOR

MILD_MULTIPLIER = 1.5
SEVERE_MULTIPLIER = 3.0

ThresholdTuple = Tuple[float, float, float, float]


@dataclass(frozen=True, eq=False)
class Thresholds:
    """
    The four classification boundaries of a sample.

    Iterates (and compares through as_tuple) in the persisted order
    (low_severe, low_mild, high_mild, high_severe). The quartiles the
    fences came from are kept for logging; they are not persisted.
    """
    low_severe: float
    low_mild: float
    high_mild: float
    high_severe: float

    q1: float = float("nan")
    q2: float = float("nan")
    q3: float = float("nan")

    @classmethod
    def from_quartiles(cls, q1: float, q2: float, q3: float) -> "Thresholds":
        iqr = q3 - q1
        return cls(
            low_severe=q1 - SEVERE_MULTIPLIER * iqr,
            low_mild=q1 - MILD_MULTIPLIER * iqr,
            high_mild=q3 + MILD_MULTIPLIER * iqr,
            high_severe=q3 + SEVERE_MULTIPLIER * iqr,
            q1=q1,
            q2=q2,
            q3=q3,
        )

    @classmethod
    def from_sample(cls, sample: Sequence[float],
                    estimator: QuartileEstimator = DEFAULT_ESTIMATOR) -> "Thresholds":
        """Compute quartiles with the given estimator and derive the fences."""
        q1, q2, q3 = estimator.quartiles(sample)
        return cls.from_quartiles(q1, q2, q3)

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> "Thresholds":
        """Rebuild from a persisted 4-tuple; quartiles are unknown."""
        low_severe, low_mild, high_mild, high_severe = values
        return cls(low_severe, low_mild, high_mild, high_severe)

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def as_tuple(self) -> ThresholdTuple:
        return (self.low_severe, self.low_mild, self.high_mild, self.high_severe)

    def is_ordered(self) -> bool:
        """True when low_severe <= low_mild <= high_mild <= high_severe."""
        return self.low_severe <= self.low_mild <= self.high_mild <= self.high_severe

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index):
        return self.as_tuple()[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Thresholds):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def to_dict(self) -> Dict[str, float]:
        """Named view for logs and reports."""
        return {
            'q1': self.q1,
            'q2': self.q2,
            'q3': self.q3,
            'iqr': self.iqr,
            'low_severe': self.low_severe,
            'low_mild': self.low_mild,
            'high_mild': self.high_mild,
            'high_severe': self.high_severe,
        }
