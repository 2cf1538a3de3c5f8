"""
Configuration Package

Environment settings for the outliers package.
"""

from .settings import Settings

__all__ = [
    "Settings",
]
