"""
Data aggregation module.

Reduces one local day of forecast samples to a daily summary record.
"""

import logging
import statistics
from datetime import date, datetime
from typing import Dict, Optional

from ..models.daily import DailyFlowForecast
from ..models.reach import ReachData
from .classifier import FlowCategoryClassifier


class DailyAggregator:
    """Calculate daily aggregates from bucketed forecast samples."""

    def __init__(
        self,
        classifier: Optional[FlowCategoryClassifier] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize daily aggregator.

        Args:
            classifier: Flow category classifier
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.classifier = classifier or FlowCategoryClassifier(logger)

    def aggregate_day(
        self,
        day: date,
        hourly_data: Dict[datetime, float],
        data_source: str,
        reach: Optional[ReachData],
        unit: str
    ) -> Optional[DailyFlowForecast]:
        """
        Calculate the daily summary for one bucket.

        Min, max and mean are taken over the bucket values, which are already
        in the target unit. The category is computed once from the day's
        maximum flow.

        Args:
            day: Local calendar date
            hourly_data: Local timestamp -> flow for the day
            data_source: Selected series key
            reach: Reach metadata for categorization
            unit: Unit of the flow values

        Returns:
            DailyFlowForecast, or None for an empty bucket

        Raises:
            ValueError: If the resulting record violates flow invariants
        """
        if not hourly_data:
            return None

        flows = list(hourly_data.values())
        min_flow = min(flows)
        max_flow = max(flows)
        avg_flow = statistics.mean(flows)

        flow_category = self.classifier.classify(max_flow, unit, reach)

        forecast = DailyFlowForecast(
            date=day,
            min_flow=min_flow,
            max_flow=max_flow,
            avg_flow=avg_flow,
            hourly_data=dict(hourly_data),
            flow_category=flow_category,
            data_source=data_source,
            unit=unit,
        )

        if not forecast.is_valid:
            raise ValueError(f"Invalid daily aggregate for {day.isoformat()}: {forecast}")

        self.logger.debug(
            f"{day.isoformat()}: min={min_flow:.2f}, max={max_flow:.2f}, "
            f"avg={avg_flow:.2f} {unit} ({flow_category})"
        )
        return forecast
