"""
Forecast data models.

Contains DTOs for raw ensemble forecast series as delivered by the
forecast API.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..core import constants
from ..core.date_utils import DateUtils
from .reach import ReachData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastPoint:
    """Single forecast sample: a valid time and a flow value."""

    valid_time: datetime
    flow: float

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ForecastPoint":
        """
        Parse a point from {"validTime": ..., "flow": ...}.

        Raises:
            ValueError: If a field is missing or malformed
        """
        try:
            valid_time = DateUtils.parse_iso_timestamp(data["validTime"])
            flow = float(data["flow"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid forecast point {data!r}: {e}")
        return cls(valid_time=valid_time, flow=flow)


@dataclass
class ForecastSeries:
    """One ensemble member (or the ensemble mean) for one horizon."""

    units: str
    data: List[ForecastPoint] = field(default_factory=list)
    reference_time: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return not self.data

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ForecastSeries":
        """
        Parse a series from {"referenceTime": ..., "units": ..., "data": [...]}.

        Raises:
            ValueError: If the payload or any point is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Forecast series must be an object, got {type(data).__name__}")

        reference_time = None
        if data.get("referenceTime"):
            reference_time = DateUtils.parse_iso_timestamp(data["referenceTime"])

        points = [ForecastPoint.from_json(point) for point in data.get("data") or []]

        return cls(
            units=data.get("units") or "",
            data=points,
            reference_time=reference_time,
        )


# Series key ("mean", "member01", ...) -> series, for a single horizon
ForecastBundle = Dict[str, ForecastSeries]


def parse_ensemble_forecast(section: Any) -> ForecastBundle:
    """
    Parse an ensemble section ({"mean": {...}, "member01": {...}}).

    Entries may hold the series directly or wrapped as {"series": {...}}.
    Malformed members are skipped.
    """
    if not isinstance(section, dict):
        return {}

    bundle: ForecastBundle = {}
    for key, value in section.items():
        if not isinstance(value, dict):
            continue
        payload = value.get("series") if isinstance(value.get("series"), dict) else value
        try:
            bundle[key] = ForecastSeries.from_json(payload)
        except ValueError as e:
            logger.debug(f"Skipping invalid ensemble series {key}: {e}")
    return bundle


@dataclass
class ForecastResponse:
    """Forecast payload for one reach with its ensemble horizons."""

    reach: ReachData
    medium_range: ForecastBundle = field(default_factory=dict)
    long_range: ForecastBundle = field(default_factory=dict)

    def ensemble(self, horizon: str) -> ForecastBundle:
        """
        Get the ensemble bundle for a horizon.

        Raises:
            ValueError: If the horizon is unknown
        """
        if horizon == constants.MEDIUM_RANGE:
            return self.medium_range
        if horizon == constants.LONG_RANGE:
            return self.long_range
        raise ValueError(f"Unknown forecast horizon: {horizon}")

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ForecastResponse":
        """
        Parse a forecast response document.

        Raises:
            ValueError: If the reach metadata is missing or malformed
        """
        if not isinstance(data, dict) or not isinstance(data.get("reach"), dict):
            raise ValueError("Forecast response must contain a 'reach' object")

        return cls(
            reach=ReachData.from_dict(data["reach"]),
            medium_range=parse_ensemble_forecast(data.get("mediumRange")),
            long_range=parse_ensemble_forecast(data.get("longRange")),
        )
