"""
Tests for daily aggregation and flow categorization.
"""

from datetime import date, datetime, timedelta
from unittest.mock import Mock

import pytest
import pytz
from src.streamflow_daily.processing.aggregator import DailyAggregator
from src.streamflow_daily.processing.classifier import FlowCategoryClassifier
from src.streamflow_daily.processing.converter import InvalidUnitError


DAY = date(2024, 6, 10)


def bucket(*flows):
    """Hourly bucket for DAY starting at midnight UTC."""
    start = pytz.UTC.localize(datetime(2024, 6, 10))
    return {start + timedelta(hours=i): flow for i, flow in enumerate(flows)}


class TestDailyAggregator:
    """Test cases for DailyAggregator."""

    @pytest.fixture
    def aggregator(self):
        """Create aggregator instance."""
        return DailyAggregator()

    def test_min_max_avg(self, aggregator, reach):
        forecast = aggregator.aggregate_day(DAY, bucket(10.0, 30.0, 20.0), "mean", reach, "CMS")

        assert forecast.date == DAY
        assert forecast.min_flow == 10.0
        assert forecast.max_flow == 30.0
        assert forecast.avg_flow == pytest.approx(20.0)
        assert forecast.data_source == "mean"
        assert forecast.unit == "CMS"
        assert forecast.hourly_data_count == 3

    def test_invariants_hold(self, aggregator, reach):
        forecast = aggregator.aggregate_day(
            DAY, bucket(0.1, 0.7, 0.2, 0.3, 0.3), "member01", reach, "CFS"
        )
        assert 0 <= forecast.min_flow <= forecast.avg_flow <= forecast.max_flow
        assert forecast.is_valid

    def test_single_sample_day(self, aggregator, reach):
        forecast = aggregator.aggregate_day(DAY, bucket(42.0), "mean", reach, "CMS")
        assert forecast.min_flow == forecast.avg_flow == forecast.max_flow == 42.0

    def test_empty_bucket_returns_none(self, aggregator, reach):
        assert aggregator.aggregate_day(DAY, {}, "mean", reach, "CMS") is None

    def test_hourly_data_is_copied(self, aggregator, reach):
        hourly = bucket(1.0, 2.0)
        forecast = aggregator.aggregate_day(DAY, hourly, "mean", reach, "CMS")
        hourly.clear()
        assert forecast.hourly_data_count == 2

    def test_category_uses_daily_maximum(self, aggregator, reach):
        """Average 50 CMS is Normal but the 150 CMS peak makes the day Elevated."""
        forecast = aggregator.aggregate_day(
            DAY, bucket(0.0, 0.0, 150.0), "mean", reach, "CMS"
        )
        assert forecast.avg_flow < 100.0
        assert forecast.flow_category == "Elevated"

    def test_classifier_called_once_with_peak(self, reach):
        classifier = Mock(spec=FlowCategoryClassifier)
        classifier.classify.return_value = "High"
        aggregator = DailyAggregator(classifier=classifier)

        forecast = aggregator.aggregate_day(DAY, bucket(5.0, 9.0, 7.0), "mean", reach, "CFS")

        classifier.classify.assert_called_once_with(9.0, "CFS", reach)
        assert forecast.flow_category == "High"

    def test_negative_flow_raises(self, aggregator, reach):
        """A record with negative flow violates invariants."""
        with pytest.raises(ValueError, match="Invalid daily aggregate"):
            aggregator.aggregate_day(DAY, bucket(-5.0, 10.0), "mean", reach, "CMS")

    def test_no_return_periods_is_unknown(self, aggregator, reach_without_return_periods):
        forecast = aggregator.aggregate_day(
            DAY, bucket(1.0, 1e9), "mean", reach_without_return_periods, "CFS"
        )
        assert forecast.flow_category == "Unknown"


class TestFlowCategoryClassifier:
    """Test cases for FlowCategoryClassifier."""

    @pytest.fixture
    def classifier(self):
        """Create classifier instance."""
        return FlowCategoryClassifier()

    @pytest.mark.parametrize("peak_cms,expected", [
        (0.0, "Normal"),
        (99.9, "Normal"),
        (100.0, "Elevated"),
        (199.9, "Elevated"),
        (200.0, "High"),
        (299.9, "High"),
        (300.0, "Flood Risk"),
        (10000.0, "Flood Risk"),
    ])
    def test_thresholds_in_table_unit(self, classifier, reach, peak_cms, expected):
        assert classifier.classify(peak_cms, "CMS", reach) == expected

    @pytest.mark.parametrize("peak_cms,expected", [
        (50.0, "Normal"),
        (150.0, "Elevated"),
        (250.0, "High"),
        (350.0, "Flood Risk"),
    ])
    def test_peak_converted_to_table_unit(self, classifier, reach, peak_cms, expected):
        """Peaks in CFS are compared against CMS thresholds."""
        assert classifier.classify(peak_cms * 35.3147, "CFS", reach) == expected

    @pytest.mark.parametrize("peak", [0.0, 50.0, 1e12])
    def test_no_return_periods_always_unknown(
        self, classifier, reach_without_return_periods, peak
    ):
        assert classifier.classify(peak, "CFS", reach_without_return_periods) == "Unknown"

    def test_missing_reach_is_unknown(self, classifier):
        assert classifier.classify(10.0, "CFS", None) == "Unknown"

    def test_non_finite_peak_is_unknown(self, classifier, reach):
        assert classifier.classify(float("nan"), "CFS", reach) == "Unknown"

    def test_invalid_table_unit_raises(self, classifier, reach):
        reach.return_period_unit = "GPM"
        with pytest.raises(InvalidUnitError):
            classifier.classify(10.0, "CFS", reach)
