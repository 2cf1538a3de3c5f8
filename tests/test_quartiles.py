"""
Unit Tests for src/outliers quartile estimation and thresholds
"""

import pytest

from src.outliers.quartiles import (
    DEFAULT_ESTIMATOR,
    LinearQuartileEstimator,
    QuartileEstimator,
    quartiles,
)
from src.outliers.thresholds import Thresholds


# =============================================================================
# Quartile Estimation Tests
# =============================================================================

class TestLinearQuartileEstimator:
    """Linear interpolation between order statistics."""

    def test_interpolated_quartiles(self, spiked_sample):
        q1, q2, q3 = quartiles(spiked_sample)
        assert q1 == pytest.approx(3.25)
        assert q2 == pytest.approx(5.5)
        assert q3 == pytest.approx(7.75)

    def test_exact_order_statistics(self):
        # n = 5: ranks 1, 2, 3 fall exactly on elements
        assert quartiles([0.0, 1.0, 2.0, 3.0, 6.0]) == (1.0, 2.0, 3.0)

    def test_order_irrelevant(self, spiked_sample):
        assert quartiles(list(reversed(spiked_sample))) == quartiles(spiked_sample)

    def test_single_measurement(self):
        assert quartiles([42.0]) == (42.0, 42.0, 42.0)

    def test_two_measurements(self):
        q1, q2, q3 = quartiles([10.0, 20.0])
        assert q1 == pytest.approx(12.5)
        assert q2 == pytest.approx(15.0)
        assert q3 == pytest.approx(17.5)

    def test_sample_not_modified(self):
        sample = [5.0, 1.0, 3.0]
        quartiles(sample)
        assert sample == [5.0, 1.0, 3.0]

    def test_returns_python_floats(self):
        assert all(type(q) is float for q in quartiles([1, 2, 3, 4]))

    def test_empty_sample_rejected(self):
        with pytest.raises(ValueError):
            LinearQuartileEstimator().quartiles([])

    def test_default_estimator_is_linear(self):
        assert isinstance(DEFAULT_ESTIMATOR, LinearQuartileEstimator)
        assert DEFAULT_ESTIMATOR.name == "linear"

    def test_callable(self, spiked_sample):
        assert DEFAULT_ESTIMATOR(spiked_sample) == quartiles(spiked_sample)

    def test_interface_is_abstract(self):
        with pytest.raises(TypeError):
            QuartileEstimator()


# =============================================================================
# Threshold Tests
# =============================================================================

class TestThresholds:
    """Tukey fences derived from quartiles."""

    def test_from_quartiles(self):
        thresholds = Thresholds.from_quartiles(3.25, 5.5, 7.75)
        assert thresholds.as_tuple() == (-10.25, -3.5, 14.5, 21.25)
        assert thresholds.iqr == pytest.approx(4.5)

    def test_from_sample(self, spiked_sample):
        thresholds = Thresholds.from_sample(spiked_sample)
        assert thresholds == (-10.25, -3.5, 14.5, 21.25)
        assert thresholds.q2 == pytest.approx(5.5)

    def test_zero_iqr_collapses_thresholds(self, flat_sample):
        thresholds = Thresholds.from_sample(flat_sample)
        assert thresholds.as_tuple() == (1.0, 1.0, 1.0, 1.0)
        assert thresholds.is_ordered()

    def test_tuple_behaviour(self):
        thresholds = Thresholds.from_quartiles(0.0, 1.0, 2.0)
        low_severe, low_mild, high_mild, high_severe = thresholds
        assert (low_severe, low_mild, high_mild, high_severe) == (-6.0, -3.0, 5.0, 8.0)
        assert len(thresholds) == 4
        assert thresholds[-1] == 8.0

    def test_equality_ignores_quartiles(self):
        derived = Thresholds.from_quartiles(3.25, 5.5, 7.75)
        restored = Thresholds.from_tuple([-10.25, -3.5, 14.5, 21.25])
        assert derived == restored
        assert hash(derived) == hash(restored)

    def test_from_tuple_requires_four_values(self):
        with pytest.raises(ValueError):
            Thresholds.from_tuple([1.0, 2.0, 3.0])

    def test_custom_estimator(self):
        class FixedEstimator(QuartileEstimator):
            name = "fixed"

            def quartiles(self, sample):
                return 10.0, 20.0, 30.0

        thresholds = Thresholds.from_sample([1.0], FixedEstimator())
        assert thresholds.as_tuple() == (-50.0, -20.0, 60.0, 90.0)

    def test_to_dict(self):
        data = Thresholds.from_quartiles(1.0, 2.0, 3.0).to_dict()
        assert data['iqr'] == 2.0
        assert data['high_severe'] == 9.0
