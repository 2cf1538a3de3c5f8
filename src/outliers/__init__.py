"""
Outliers Package

Box plot classification of benchmark timing samples into low severe, low
mild, normal, high mild and high severe measurements, with JSON persistence
and a console summary.

Usage:
    from src.outliers import classify

    outliers = classify(sample)
    outliers.high_severe           # measurements beyond Q3 + 3 * IQR
    outliers.thresholds            # (low_severe, low_mild, high_mild, high_severe)
    outliers.save("outliers.json")
    outliers.report()
"""

from .classifier import OutlierClassifier, classify, validate_sample
from .exceptions import (
    EmptySampleError,
    InsufficientSampleError,
    NonFiniteSampleError,
    OutlierError,
    PersistenceError,
    SampleError,
    SchemaError,
    ThresholdOverflowError,
)
from .models import REPORT_ORDER, Outliers, Severity
from .persistence import decode, encode, load, save
from .quartiles import DEFAULT_ESTIMATOR, LinearQuartileEstimator, QuartileEstimator, quartiles
from .reporting import report, report_lines
from .thresholds import Thresholds

__all__ = [
    # Classification
    "OutlierClassifier",
    "classify",
    "validate_sample",
    # Models
    "Outliers",
    "Severity",
    "Thresholds",
    "REPORT_ORDER",
    # Quartiles
    "QuartileEstimator",
    "LinearQuartileEstimator",
    "DEFAULT_ESTIMATOR",
    "quartiles",
    # Persistence and reporting
    "encode",
    "decode",
    "save",
    "load",
    "report",
    "report_lines",
    # Errors
    "OutlierError",
    "SampleError",
    "EmptySampleError",
    "InsufficientSampleError",
    "NonFiniteSampleError",
    "ThresholdOverflowError",
    "SchemaError",
    "PersistenceError",
]
