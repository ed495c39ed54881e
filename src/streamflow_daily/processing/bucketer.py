"""
Day bucketing module.

Groups forecast samples by local calendar date and converts their flows to
the target unit.
"""

import logging
from datetime import date, datetime
from typing import Dict, Optional

from ..core import constants
from ..core.date_utils import DateUtils
from ..models.forecast import ForecastSeries
from .converter import UnitConverter


class DayBucketer:
    """Group forecast points into local calendar days."""

    def __init__(
        self,
        converter: Optional[UnitConverter] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize day bucketer.

        Args:
            converter: Unit converter used for flow values
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.converter = converter or UnitConverter(logger)

    def group_by_local_date(
        self,
        series: ForecastSeries,
        target_unit: str,
        timezone_str: str = constants.DEFAULT_TIMEZONE
    ) -> Dict[date, Dict[datetime, float]]:
        """
        Group a series into local calendar days.

        Each point's valid time is converted to local time; its calendar date
        is the bucket key and the exact local timestamp is the key inside the
        bucket. When two points share a local timestamp the later one wins.

        Args:
            series: Forecast series to group
            target_unit: Unit the flows are converted to
            timezone_str: Local timezone name

        Returns:
            Local date -> (local timestamp -> converted flow)

        Raises:
            InvalidUnitError: If the series or target unit is unsupported
            ValueError: If the timezone is invalid
        """
        tz = DateUtils.parse_timezone(timezone_str)
        daily_groups: Dict[date, Dict[datetime, float]] = {}

        for point in series.data:
            local_time = DateUtils.to_local(point.valid_time, tz)
            flow = self.converter.convert(point.flow, series.units, target_unit)
            daily_groups.setdefault(local_time.date(), {})[local_time] = flow

        self.logger.debug(
            f"Grouped {len(series.data)} points into {len(daily_groups)} days ({timezone_str})"
        )
        return daily_groups
