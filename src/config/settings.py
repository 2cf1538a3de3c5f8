"""
Application Settings

Environment configuration for outlier classification.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _indent_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None:
        return default
    if raw.strip().lower() in ("", "none"):
        return None
    return _int_from_env(name, default)


@dataclass
class Settings:
    """Application settings from environment."""

    # Classification
    min_sample_size: int = 1

    # Persistence
    json_indent: Optional[int] = 2

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.min_sample_size < 1:
            raise ValueError("min_sample_size must be at least 1")
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError("json_indent must be non-negative or None")

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            min_sample_size=_int_from_env("OUTLIERS_MIN_SAMPLE_SIZE", 1),
            json_indent=_indent_from_env("OUTLIERS_JSON_INDENT", 2),
            log_level=os.getenv("OUTLIERS_LOG_LEVEL", "WARNING").upper(),
        )

    def configure_logging(self) -> None:
        """Apply log_level to the root logger for hosts without their own setup."""
        logging.basicConfig(level=self.log_level, format=LOG_FORMAT)
