"""
Daily forecast data models.

Contains the per-day summary records produced from ensemble forecasts and
the collection type returned by a processing call.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core import constants
from ..core.date_utils import DateUtils


@dataclass(frozen=True)
class DailyFlowForecast:
    """One local calendar day summarized from a single ensemble series."""

    date: date
    min_flow: float
    max_flow: float
    avg_flow: float
    # Local timestamp -> flow, in source order
    hourly_data: Dict[datetime, float] = field(compare=False)
    flow_category: str
    data_source: str
    unit: str = constants.DEFAULT_FLOW_UNIT

    @property
    def has_hourly_data(self) -> bool:
        return bool(self.hourly_data)

    @property
    def hourly_data_count(self) -> int:
        return len(self.hourly_data)

    @property
    def sorted_hourly_data(self) -> List[Tuple[datetime, float]]:
        return sorted(self.hourly_data.items(), key=lambda item: DateUtils.to_utc(item[0]))

    @property
    def is_using_mean_data(self) -> bool:
        return self.data_source == constants.MEAN_SERIES_KEY

    @property
    def data_source_description(self) -> str:
        """User-friendly description of the selected ensemble series."""
        if self.data_source == constants.MEAN_SERIES_KEY:
            return "Ensemble Average"
        if self.data_source.startswith(constants.MEMBER_KEY_PREFIX):
            return f"Member {self.data_source[len(constants.MEMBER_KEY_PREFIX):]}"
        return "Unknown Source"

    @property
    def is_valid(self) -> bool:
        """Check flow ordering, non-negative flows and non-empty labels."""
        return (
            self.min_flow >= 0
            and self.min_flow <= self.avg_flow <= self.max_flow
            and bool(self.hourly_data)
            and bool(self.flow_category)
            and bool(self.data_source)
        )

    def get_flow_at(self, target_time: datetime) -> Optional[float]:
        """
        Get the flow at the sample nearest to target_time.

        An exact timestamp match wins. Otherwise the sample with the smallest
        absolute time difference is used; when two samples are equally close
        the one encountered first in hourly_data wins. Naive times are taken
        as UTC.

        Returns:
            Flow value, or None if there is no hourly data
        """
        if not self.hourly_data:
            return None

        target = DateUtils.to_utc(target_time)

        exact_match = self.hourly_data.get(target)
        if exact_match is not None:
            return exact_match

        closest_flow = None
        min_difference = None
        for data_time, flow in self.hourly_data.items():
            difference = abs(DateUtils.to_utc(data_time) - target)
            if min_difference is None or difference < min_difference:
                min_difference = difference
                closest_flow = flow

        return closest_flow

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for export collaborators."""
        return {
            "date": self.date.isoformat(),
            "min_flow": self.min_flow,
            "max_flow": self.max_flow,
            "avg_flow": self.avg_flow,
            "unit": self.unit,
            "flow_category": self.flow_category,
            "data_source": self.data_source,
            "hourly_data": [
                {"time": ts.isoformat(), "flow": flow}
                for ts, flow in self.sorted_hourly_data
            ],
        }

    def __str__(self) -> str:
        return (
            f"DailyFlowForecast(date={self.date.isoformat()}, "
            f"flows={self.min_flow:.2f}-{self.max_flow:.2f} (avg {self.avg_flow:.2f}) {self.unit}, "
            f"category={self.flow_category}, source={self.data_source}, "
            f"hourly_points={len(self.hourly_data)})"
        )


@dataclass(frozen=True)
class DailyForecastCollection:
    """Daily forecasts for one horizon, ordered by date ascending."""

    forecasts: Tuple[DailyFlowForecast, ...]
    created_at: datetime
    source_type: str
    data_source: Optional[str] = None
    unit: str = constants.DEFAULT_FLOW_UNIT
    # Days dropped because their reduction failed
    skipped_days: int = 0

    def __len__(self) -> int:
        return len(self.forecasts)

    def __iter__(self) -> Iterator[DailyFlowForecast]:
        return iter(self.forecasts)

    @property
    def is_empty(self) -> bool:
        return not self.forecasts

    @property
    def sorted_forecasts(self) -> List[DailyFlowForecast]:
        return sorted(self.forecasts, key=lambda forecast: forecast.date)

    def get_forecast_for_date(self, day: date) -> Optional[DailyFlowForecast]:
        """Get the forecast for a calendar date, or None."""
        if isinstance(day, datetime):
            day = day.date()
        for forecast in self.forecasts:
            if forecast.date == day:
                return forecast
        return None

    @property
    def flow_bounds(self) -> Dict[str, float]:
        """Unpadded flow range across the collection."""
        if not self.forecasts:
            low, high = constants.DEFAULT_FLOW_BOUNDS
            return {"min": low, "max": high}
        return {
            "min": min(forecast.min_flow for forecast in self.forecasts),
            "max": max(forecast.max_flow for forecast in self.forecasts),
        }

    @property
    def date_range(self) -> Optional[Tuple[date, date]]:
        if not self.forecasts:
            return None
        ordered = self.sorted_forecasts
        return ordered[0].date, ordered[-1].date

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for export collaborators."""
        return {
            "source_type": self.source_type,
            "created_at": self.created_at.isoformat(),
            "data_source": self.data_source,
            "unit": self.unit,
            "skipped_days": self.skipped_days,
            "forecasts": [forecast.to_dict() for forecast in self.forecasts],
        }

    def __str__(self) -> str:
        return (
            f"DailyForecastCollection(type={self.source_type}, days={len(self.forecasts)}, "
            f"created={self.created_at.isoformat()})"
        )
