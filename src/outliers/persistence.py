"""
Outliers Persistence

Explicit encoder and decoder for the saved outliers document:

    {
      "high_mild":   [number, ...],
      "high_severe": [number, ...],
      "low_mild":    [number, ...],
      "low_severe":  [number, ...],
      "normal":      [number, ...],
      "thresholds":  [low_severe, low_mild, high_mild, high_severe]
    }

Keys are written sorted. Python's json module writes the shortest repr of
each float, so a saved document decodes to exactly the same values.
"""

import json
import logging
import math
from numbers import Real
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from src.config.settings import Settings

from .exceptions import PersistenceError, SchemaError
from .models import Outliers, Severity
from .thresholds import Thresholds

logger = logging.getLogger(__name__)

BUCKET_KEYS = tuple(sorted(severity.key for severity in Severity))
THRESHOLDS_KEY = "thresholds"
DOCUMENT_KEYS = frozenset(BUCKET_KEYS + (THRESHOLDS_KEY,))


def encode(outliers: Outliers) -> Dict[str, Any]:
    """Convert to the saved document layout."""
    document: Dict[str, Any] = {key: list(getattr(outliers, key)) for key in BUCKET_KEYS}
    document[THRESHOLDS_KEY] = list(outliers.thresholds.as_tuple())
    return document


def _numbers(key: str, value: Any) -> Tuple[float, ...]:
    if not isinstance(value, list):
        raise SchemaError(f"'{key}' must be a list, got {type(value).__name__}")
    numbers: List[float] = []
    for index, item in enumerate(value):
        if isinstance(item, bool) or not isinstance(item, Real):
            raise SchemaError(f"'{key}[{index}]' is not a number: {item!r}")
        try:
            number = float(item)
        except OverflowError:
            raise SchemaError(f"'{key}[{index}]' does not fit in a float64: {item!r}") from None
        if not math.isfinite(number):
            raise SchemaError(f"'{key}[{index}]' is not finite: {item!r}")
        numbers.append(number)
    return tuple(numbers)


def decode(document: Dict[str, Any]) -> Outliers:
    """
    Rebuild Outliers from a saved document.

    Raises:
        SchemaError: a key is missing, a value is not a list of finite
            numbers, the buckets hold no measurements, or the thresholds do
            not hold exactly four values
    """
    if not isinstance(document, dict):
        raise SchemaError(f"Outliers document must be an object, got {type(document).__name__}")

    missing = DOCUMENT_KEYS - document.keys()
    if missing:
        raise SchemaError(f"Outliers document is missing {', '.join(sorted(missing))}")

    buckets = {key: _numbers(key, document[key]) for key in BUCKET_KEYS}
    if not any(buckets.values()):
        raise SchemaError("Outliers document holds no measurements")

    thresholds = _numbers(THRESHOLDS_KEY, document[THRESHOLDS_KEY])
    if len(thresholds) != 4:
        raise SchemaError(f"'{THRESHOLDS_KEY}' must hold 4 values, got {len(thresholds)}")

    return Outliers(thresholds=Thresholds.from_tuple(thresholds), **buckets)


def dumps(outliers: Outliers, indent: Optional[int] = 2) -> str:
    """
    Serialize to JSON text.

    Raises:
        SchemaError: a bucket or threshold is NaN or infinite, which JSON
            numbers cannot represent
    """
    try:
        return json.dumps(encode(outliers), indent=indent, sort_keys=True, allow_nan=False)
    except ValueError as e:
        raise SchemaError(f"Outliers are not representable as JSON: {e}") from e


def save(outliers: Outliers, path: Union[str, Path],
         settings: Optional[Settings] = None) -> Path:
    """
    Write outliers to `path` as JSON, overwriting any existing file.

    Nothing is retried and a partially written file is left in place.
    Indentation follows settings.json_indent.

    Returns:
        The path written

    Raises:
        PersistenceError: the file could not be written
        SchemaError: the outliers hold a value JSON cannot represent
    """
    output_path = Path(path)
    settings = settings or Settings()
    content = dumps(outliers, indent=settings.json_indent)

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to save outliers to {output_path}: {e}")
        raise PersistenceError("write", output_path, e) from e

    logger.debug(f"Saved {outliers.sample_size} classified measurements to {output_path}")
    return output_path


def load(path: Union[str, Path]) -> Outliers:
    """
    Read outliers saved with save().

    Raises:
        PersistenceError: the file could not be read
        SchemaError: the file is not a valid outliers document
    """
    input_path = Path(path)

    try:
        with open(input_path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SchemaError(f"{input_path} is not UTF-8 text: {e}") from e
    except OSError as e:
        logger.error(f"Failed to load outliers from {input_path}: {e}")
        raise PersistenceError("read", input_path, e) from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError(f"{input_path} is not valid JSON: {e}") from e

    outliers = decode(document)
    logger.debug(f"Loaded {outliers.sample_size} classified measurements from {input_path}")
    return outliers
