"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the outliers package.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "persistence"   # Run only persistence tests
    pytest tests/ --quick            # Skip the randomized property sweeps
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Sample Fixtures
# =============================================================================

@pytest.fixture
def spiked_sample() -> List[float]:
    """Nine steady measurements and one spike. Q1=3.25, Q3=7.75"""
    return [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 100.0]


@pytest.fixture
def flat_sample() -> List[float]:
    """Identical measurements, IQR = 0"""
    return [1.0, 1.0, 1.0, 1.0]


@pytest.fixture
def timing_sample() -> List[float]:
    """Realistic nanosecond timings with a slow tail and two fast flukes"""
    rng = np.random.default_rng(42)
    sample = list(rng.normal(1000.0, 15.0, size=200))
    sample[17] = 2500.0
    sample[58] = 1080.0
    sample[121] = 850.0
    sample[180] = 100.0
    return [float(x) for x in sample]


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def outliers_document() -> Dict[str, Any]:
    """A valid saved outliers document"""
    return {
        "high_mild": [14.6],
        "high_severe": [100.0],
        "low_mild": [],
        "low_severe": [-20.0],
        "normal": [1.0, 2.0, 3.0],
        "thresholds": [-10.25, -3.5, 14.5, 21.25],
    }


@pytest.fixture
def outliers_file(outliers_document, tmp_path) -> Path:
    """Valid outliers document written to a temp file"""
    filepath = tmp_path / "outliers.json"
    with open(filepath, 'w') as f:
        json.dump(outliers_document, f)
    return filepath
