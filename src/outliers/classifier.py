"""
Box Plot Outlier Classification

Partitions a sample of timing measurements into five severity buckets using
the box plot (Tukey) method. See http://en.wikipedia.org/wiki/Boxplot.

Each measurement is tested against the thresholds in a fixed order, first
match wins, every comparison strict:

    1. value < low severe   -> LOW SEVERE
    2. value < low mild     -> LOW MILD
    3. value > high severe  -> HIGH SEVERE
    4. value > high mild    -> HIGH MILD
    5. otherwise            -> NORMAL

Severe is tested before mild on both tails, and a value sitting exactly on a
threshold is never an outlier on that threshold.

Usage:
    from src.outliers import classify

    outliers = classify(sample)
    outliers.report()
    outliers.save(path)
"""

import logging
import math
from numbers import Real
from typing import Iterable, List, Optional, Tuple

from src.config.settings import Settings

from .exceptions import (
    EmptySampleError,
    InsufficientSampleError,
    NonFiniteSampleError,
    SampleError,
    ThresholdOverflowError,
)
from .models import Outliers, Severity
from .quartiles import DEFAULT_ESTIMATOR, QuartileEstimator
from .thresholds import Thresholds


def validate_sample(sample: Iterable[float], min_size: int = 1) -> Tuple[float, ...]:
    """
    Check a sample and return it as a tuple of floats.

    Raises:
        SampleError: an entry is not a real number or overflows float64
        EmptySampleError: the sample is empty
        InsufficientSampleError: fewer than min_size measurements
        NonFiniteSampleError: NaN or an infinity is present
    """
    values: List[float] = []
    for index, value in enumerate(sample):
        # bool is a Real subclass but never a measurement
        if isinstance(value, bool) or not isinstance(value, Real):
            raise SampleError(
                f"Measurement at index {index} is not a real number: {value!r}"
            )
        try:
            value = float(value)
        except OverflowError:
            raise SampleError(
                f"Measurement at index {index} does not fit in a float64: {value!r}"
            ) from None
        if not math.isfinite(value):
            raise NonFiniteSampleError(index, value)
        values.append(value)

    if not values:
        raise EmptySampleError()
    if len(values) < min_size:
        raise InsufficientSampleError(len(values), min_size)

    return tuple(values)


class OutlierClassifier:
    """
    Classifies samples with the box plot method.

    The classifier holds no per-sample state; one instance can classify any
    number of samples.
    """

    def __init__(self,
                 estimator: Optional[QuartileEstimator] = None,
                 settings: Optional[Settings] = None):
        """
        Args:
            estimator: Quartile estimator (default: linear interpolation)
            settings: Classification settings (default: Settings())
        """
        self.estimator = estimator or DEFAULT_ESTIMATOR
        self.settings = settings or Settings()
        self.logger = logging.getLogger(__name__)

    def compute_thresholds(self, sample: Iterable[float]) -> Thresholds:
        values = validate_sample(sample, self.settings.min_sample_size)
        return self._thresholds(values)

    def _thresholds(self, values: Tuple[float, ...]) -> Thresholds:
        thresholds = Thresholds.from_sample(values, self.estimator)
        quartiles = (thresholds.q1, thresholds.q2, thresholds.q3)
        if not all(math.isfinite(v) for v in quartiles + thresholds.as_tuple()) \
                or not thresholds.is_ordered():
            raise ThresholdOverflowError(thresholds)
        return thresholds

    @staticmethod
    def classify_value(value: float, thresholds: Thresholds) -> Severity:
        """Bucket for a single measurement."""
        if value < thresholds.low_severe:
            return Severity.LOW_SEVERE
        elif value < thresholds.low_mild:
            return Severity.LOW_MILD
        elif value > thresholds.high_severe:
            return Severity.HIGH_SEVERE
        elif value > thresholds.high_mild:
            return Severity.HIGH_MILD
        else:
            return Severity.NORMAL

    def classify(self, sample: Iterable[float]) -> Outliers:
        """
        Classify every measurement of a sample.

        Args:
            sample: Measurements in collection order; not modified

        Returns:
            Outliers with each bucket in sample order

        Raises:
            SampleError: the sample is empty, too short, holds a non-finite
                or non-numeric value, or spans too wide a range for float64
        """
        values = validate_sample(sample, self.settings.min_sample_size)
        thresholds = self._thresholds(values)

        self.logger.debug(
            f"Classifying {len(values)} measurements ({self.estimator.name} quartiles): "
            f"Q1={thresholds.q1:.6g}, Q3={thresholds.q3:.6g}, IQR={thresholds.iqr:.6g}, "
            f"thresholds={thresholds.as_tuple()}"
        )

        buckets = {severity: [] for severity in Severity}
        for value in values:
            buckets[self.classify_value(value, thresholds)].append(value)

        outliers = Outliers(
            low_severe=tuple(buckets[Severity.LOW_SEVERE]),
            low_mild=tuple(buckets[Severity.LOW_MILD]),
            normal=tuple(buckets[Severity.NORMAL]),
            high_mild=tuple(buckets[Severity.HIGH_MILD]),
            high_severe=tuple(buckets[Severity.HIGH_SEVERE]),
            thresholds=thresholds,
        )

        if outliers.outlier_count:
            self.logger.info(
                f"Found {outliers.outlier_count} outliers among {len(values)} measurements"
            )

        return outliers


def classify(sample: Iterable[float],
             estimator: Optional[QuartileEstimator] = None,
             settings: Optional[Settings] = None) -> Outliers:
    """
    Convenience function to classify a sample using the box plot method.

    Args:
        sample: Measurements in collection order
        estimator: Quartile estimator (default: linear interpolation)
        settings: Classification settings (default: Settings())

    Returns:
        Outliers
    """
    return OutlierClassifier(estimator=estimator, settings=settings).classify(sample)
