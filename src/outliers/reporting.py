"""
Outliers Console Report

    > Found 3 outliers among 100 measurements (3.00%)
      > 1 (1.00%) low mild
      > 2 (2.00%) high severe

Nothing at all is printed when the sample has no outliers. Buckets without
measurements get no line.
"""

import sys
from typing import List, Optional, TextIO

from .models import REPORT_ORDER, Outliers


def report_lines(outliers: Outliers) -> List[str]:
    """Lines of the report, without trailing newlines. Empty when there are no outliers."""
    total = outliers.outlier_count
    if total == 0:
        return []

    lines = [
        f"> Found {total} outliers among {outliers.sample_size} measurements "
        f"({outliers.percent(total):.2f}%)"
    ]

    for severity in REPORT_ORDER:
        count = len(outliers.bucket(severity))
        if count != 0:
            lines.append(f"  > {count} ({outliers.percent(count):.2f}%) {severity.label}")

    return lines


def report(outliers: Outliers, stream: Optional[TextIO] = None) -> None:
    """Print the report to `stream` (default: standard output)."""
    stream = stream if stream is not None else sys.stdout
    for line in report_lines(outliers):
        print(line, file=stream)
