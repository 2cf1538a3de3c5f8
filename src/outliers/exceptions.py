"""
Outlier Classification Errors

Every error raised by the outliers package derives from OutlierError, so
callers can catch the whole family at once. Input problems are also
ValueErrors and I/O problems are also OSErrors.
"""

from pathlib import Path
from typing import Optional, Union


class OutlierError(Exception):
    """Base class for outlier classification errors."""


class SampleError(OutlierError, ValueError):
    """The sample cannot be classified."""


class EmptySampleError(SampleError):
    def __init__(self):
        super().__init__("Cannot classify an empty sample")


class InsufficientSampleError(SampleError):
    """Raised when the sample is shorter than the configured minimum."""

    def __init__(self, size: int, minimum: int):
        self.size = size
        self.minimum = minimum
        super().__init__(
            f"Sample has {size} measurement(s), at least {minimum} required"
        )


class NonFiniteSampleError(SampleError):
    """Raised when the sample holds NaN or an infinity."""

    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(f"Non-finite measurement {value!r} at index {index}")


class ThresholdOverflowError(SampleError):
    """
    Raised when the quartiles or thresholds of a finite sample leave the
    float64 range, which happens when measurements span close to its limits.
    """

    def __init__(self, thresholds):
        self.thresholds = thresholds
        super().__init__(
            f"Sample spread overflows float64: quartiles "
            f"{(thresholds.q1, thresholds.q2, thresholds.q3)}, thresholds {thresholds.as_tuple()}"
        )


class SchemaError(OutlierError, ValueError):
    """A persisted outliers document does not match the expected schema."""


class PersistenceError(OutlierError, OSError):
    """
    Reading or writing an outliers document failed.

    The message carries the operation and the path; the underlying
    exception is chained as __cause__.
    """

    def __init__(self, operation: str, path: Union[str, Path],
                 cause: Optional[BaseException] = None):
        self.operation = operation
        self.path = Path(path)
        self.cause = cause
        message = f"`{operation} {self.path}`"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
