"""
Daily forecast processing module.

Reduces ensemble forecast bundles into per-day summaries: selects the
representative series, buckets its samples by local calendar day, converts
flows to the preferred unit, aggregates each day and classifies its peak.
"""

import logging
from collections import Counter
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

import pytz

from .core import constants
from .core.date_utils import DateUtils
from .models.daily import DailyFlowForecast, DailyForecastCollection
from .models.forecast import ForecastBundle, ForecastResponse
from .models.reach import ReachData
from .processing import (
    DailyAggregator,
    DataValidator,
    DayBucketer,
    FlowCategoryClassifier,
    InvalidUnitError,
    SourceSelector,
    UnitContext,
    UnitConverter,
    get_flow_bounds,
)


class DailyForecastProcessor:
    """Process ensemble forecast data into daily summaries."""

    def __init__(
        self,
        timezone: str = constants.DEFAULT_TIMEZONE,
        unit_context: Optional[UnitContext] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize daily forecast processor.

        Args:
            timezone: Local timezone used to determine calendar days
            unit_context: Default unit preference, used when a call passes none
            logger: Logger instance

        Raises:
            ValueError: If the timezone is invalid
        """
        self.logger = logger or logging.getLogger(__name__)
        DateUtils.parse_timezone(timezone)
        self.timezone = timezone
        self.unit_context = unit_context or UnitContext()

        self.converter = UnitConverter(logger)
        self.selector = SourceSelector(logger)
        self.bucketer = DayBucketer(self.converter, logger)
        self.aggregator = DailyAggregator(FlowCategoryClassifier(logger), logger)
        self.validator = DataValidator(logger)

    def process_forecast_data(
        self,
        forecast_data: ForecastBundle,
        reach: Optional[ReachData],
        forecast_type: str,
        unit_context: Optional[UnitContext] = None
    ) -> DailyForecastCollection:
        """
        Process one horizon of ensemble data into daily forecasts.

        Args:
            forecast_data: Series key -> series ('mean', 'member01', ...)
            reach: Reach metadata with return periods for categorization
            forecast_type: Horizon identifier ('medium_range', 'long_range')
            unit_context: Unit preference for this call

        Returns:
            DailyForecastCollection ordered by date; empty when no series has data

        Raises:
            InvalidUnitError: If the preferred, series or return-period unit is unsupported
        """
        # Snapshot the preference once for the whole call
        context = unit_context or self.unit_context
        target_unit = context.current_unit
        created_at = datetime.now(pytz.UTC)

        if not self.validator.check_data_completeness(forecast_data):
            self.logger.info(f"No forecast data available for {forecast_type}")
            return DailyForecastCollection(
                forecasts=(),
                created_at=created_at,
                source_type=forecast_type,
                unit=target_unit,
            )

        selected = self.selector.select(forecast_data)
        if selected is None:
            self.logger.info(f"No valid data source found in {forecast_type}")
            return DailyForecastCollection(
                forecasts=(),
                created_at=created_at,
                source_type=forecast_type,
                unit=target_unit,
            )

        self.logger.info(
            f"Using {selected.key} for {forecast_type} "
            f"({len(selected.series)} points, {selected.series.units} -> {target_unit})"
        )

        daily_groups = self.bucketer.group_by_local_date(
            selected.series, target_unit, self.timezone
        )

        daily_forecasts: List[DailyFlowForecast] = []
        skipped_days = 0

        for day, hourly_data in daily_groups.items():
            if not hourly_data:
                continue

            try:
                forecast = self.aggregator.aggregate_day(
                    day=day,
                    hourly_data=hourly_data,
                    data_source=selected.key,
                    reach=reach,
                    unit=target_unit,
                )
            except InvalidUnitError:
                raise
            except Exception as e:
                skipped_days += 1
                self.logger.warning(
                    f"Skipping {forecast_type} day {day.isoformat()}: {e}"
                )
                continue

            if forecast is not None:
                daily_forecasts.append(forecast)

        daily_forecasts.sort(key=lambda forecast: forecast.date)

        self.logger.info(
            f"Generated {len(daily_forecasts)} daily forecasts from "
            f"{selected.key} ({target_unit})"
        )
        if skipped_days:
            self.logger.warning(
                f"{skipped_days} day(s) skipped while processing {forecast_type}; "
                f"results are incomplete"
            )

        return DailyForecastCollection(
            forecasts=tuple(daily_forecasts),
            created_at=created_at,
            source_type=forecast_type,
            data_source=selected.key,
            unit=target_unit,
            skipped_days=skipped_days,
        )

    def process_medium_range(
        self,
        forecast_response: ForecastResponse,
        unit_context: Optional[UnitContext] = None
    ) -> DailyForecastCollection:
        """Process the medium range ensemble of a forecast response."""
        return self.process_forecast_data(
            forecast_data=forecast_response.medium_range,
            reach=forecast_response.reach,
            forecast_type=constants.MEDIUM_RANGE,
            unit_context=unit_context,
        )

    def process_long_range(
        self,
        forecast_response: ForecastResponse,
        unit_context: Optional[UnitContext] = None
    ) -> DailyForecastCollection:
        """Process the long range ensemble of a forecast response."""
        return self.process_forecast_data(
            forecast_data=forecast_response.long_range,
            reach=forecast_response.reach,
            forecast_type=constants.LONG_RANGE,
            unit_context=unit_context,
        )

    @staticmethod
    def get_flow_bounds(forecasts: Iterable[DailyFlowForecast]) -> Dict[str, float]:
        """Padded flow bounds for chart scaling."""
        return get_flow_bounds(forecasts)

    def get_day_label(
        self,
        day: date,
        is_today: bool = False,
        today: Optional[date] = None
    ) -> str:
        """Day label relative to today in the processor's timezone."""
        return DateUtils.get_day_label(day, is_today=is_today, today=today, timezone_str=self.timezone)

    def is_collection_valid(self, forecasts: Iterable[DailyFlowForecast]) -> bool:
        """Check that every record satisfies the daily forecast invariants."""
        return self.validator.is_collection_valid(forecasts)

    def summarize(self, collection: DailyForecastCollection) -> Dict[str, Any]:
        """
        Log and return a processing summary for a collection.

        Returns:
            Dictionary with date range, day count, data source and category
            counts, and the padded flow range. Empty dict for an empty collection.
        """
        if collection.is_empty:
            self.logger.info(f"No {collection.source_type} forecasts to summarize")
            return {}

        start, end = collection.date_range
        bounds = get_flow_bounds(collection.forecasts)
        summary = {
            "source_type": collection.source_type,
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "total_days": len(collection),
            "skipped_days": collection.skipped_days,
            "data_sources": dict(Counter(f.data_source for f in collection)),
            "flow_categories": dict(Counter(f.flow_category for f in collection)),
            "flow_bounds": bounds,
            "unit": collection.unit,
        }

        self.logger.info(f"Processing summary ({collection.source_type}):")
        self.logger.info(f"  Date range: {summary['start_date']} to {summary['end_date']}")
        self.logger.info(f"  Total days: {summary['total_days']}")
        self.logger.info(f"  Data sources: {summary['data_sources']}")
        self.logger.info(f"  Flow categories: {summary['flow_categories']}")
        self.logger.info(
            f"  Flow range: {bounds['min']:.1f} - {bounds['max']:.1f} {collection.unit}"
        )
        return summary
