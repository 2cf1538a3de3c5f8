"""
Outlier Models

The immutable result of classifying a sample: five ordered buckets and the
thresholds that produced them.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, TextIO, Tuple, Union

from .thresholds import Thresholds


class Severity(Enum):
    """Bucket a measurement falls into. The value is the report label."""
    LOW_SEVERE = "low severe"
    LOW_MILD = "low mild"
    NORMAL = "normal"
    HIGH_MILD = "high mild"
    HIGH_SEVERE = "high severe"

    @property
    def label(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Field name of the bucket on Outliers and in saved documents."""
        return self.name.lower()

    @property
    def is_outlier(self) -> bool:
        return self is not Severity.NORMAL


# Order in which outlier buckets are reported
REPORT_ORDER: Tuple[Severity, ...] = (
    Severity.LOW_SEVERE,
    Severity.LOW_MILD,
    Severity.HIGH_MILD,
    Severity.HIGH_SEVERE,
)


@dataclass(frozen=True)
class Outliers:
    """
    Outlier classification of a sample.

    Each bucket is a tuple holding the measurements of that severity in the
    order they appeared in the sample. Together the buckets contain every
    measurement exactly once.

    Usage:
        outliers = Outliers.classify(sample)
        outliers.high_severe        # (100.0,)
        outliers.thresholds         # Thresholds(low_severe=..., ...)
        outliers.save("outliers.json")
        outliers.report()
    """
    low_severe: Tuple[float, ...]
    low_mild: Tuple[float, ...]
    normal: Tuple[float, ...]
    high_mild: Tuple[float, ...]
    high_severe: Tuple[float, ...]
    thresholds: Thresholds

    def __post_init__(self):
        # Accept any sequence but always hold tuples
        for severity in Severity:
            value = getattr(self, severity.key)
            if not isinstance(value, tuple):
                object.__setattr__(self, severity.key, tuple(value))
        if not isinstance(self.thresholds, Thresholds):
            object.__setattr__(self, 'thresholds', Thresholds.from_tuple(self.thresholds))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def classify(cls, sample: Sequence[float], estimator=None, settings=None) -> "Outliers":
        """Classify a sample with the box plot method. See classifier.classify."""
        from .classifier import classify
        return classify(sample, estimator=estimator, settings=settings)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Outliers":
        from .persistence import decode
        return decode(data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Outliers":
        from .persistence import load
        return load(path)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def bucket(self, severity: Severity) -> Tuple[float, ...]:
        return getattr(self, severity.key)

    def counts(self) -> Dict[Severity, int]:
        return {severity: len(self.bucket(severity)) for severity in Severity}

    @property
    def outlier_count(self) -> int:
        """Number of measurements outside the normal bucket."""
        return sum(len(self.bucket(severity)) for severity in REPORT_ORDER)

    @property
    def sample_size(self) -> int:
        return self.outlier_count + len(self.normal)

    def percent(self, count: int) -> float:
        """Share of the sample, in percent, that `count` measurements make up."""
        return 100.0 * count / self.sample_size

    def outliers(self) -> List[float]:
        """All outlying measurements, grouped in report order."""
        return [value for severity in REPORT_ORDER for value in self.bucket(severity)]

    # -------------------------------------------------------------------------
    # Persistence and reporting
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        from .persistence import encode
        return encode(self)

    def to_json(self, indent: Optional[int] = 2) -> str:
        from .persistence import dumps
        return dumps(self, indent=indent)

    def save(self, path: Union[str, Path], settings=None) -> Path:
        """Write the classification to `path` as JSON, replacing any existing file."""
        from .persistence import save
        return save(self, path, settings=settings)

    def report_lines(self) -> List[str]:
        from .reporting import report_lines
        return report_lines(self)

    def report(self, stream: Optional[TextIO] = None) -> None:
        """Print a summary of the outliers. Prints nothing when there are none."""
        from .reporting import report
        report(self, stream=stream)
