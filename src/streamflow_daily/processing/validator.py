"""
Data validation module.

Validates daily forecast records for integrity.
"""

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from ..models.daily import DailyFlowForecast
from ..models.forecast import ForecastBundle


class DataValidator:
    """Validate daily forecast records."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize data validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_forecast(self, forecast: DailyFlowForecast) -> Tuple[bool, List[str]]:
        """
        Validate a single daily forecast.

        Args:
            forecast: Daily forecast record

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []
        day = forecast.date.isoformat()

        for name in ("min_flow", "max_flow", "avg_flow"):
            value = getattr(forecast, name)
            if not math.isfinite(value):
                errors.append(f"{day}: {name} is not a finite number ({value})")

        if forecast.min_flow < 0:
            errors.append(f"{day}: min_flow cannot be negative ({forecast.min_flow})")

        if not forecast.min_flow <= forecast.avg_flow <= forecast.max_flow:
            errors.append(
                f"{day}: expected min_flow <= avg_flow <= max_flow, got "
                f"{forecast.min_flow} / {forecast.avg_flow} / {forecast.max_flow}"
            )

        if not forecast.hourly_data:
            errors.append(f"{day}: no hourly data")

        if not forecast.flow_category:
            errors.append(f"{day}: missing flow category")

        if not forecast.data_source:
            errors.append(f"{day}: missing data source")

        return len(errors) == 0, errors

    def is_collection_valid(self, forecasts: Iterable[DailyFlowForecast]) -> bool:
        """Check that every record satisfies the daily forecast invariants."""
        return all(self.validate_forecast(forecast)[0] for forecast in forecasts)

    def validate_collection(
        self,
        forecasts: Sequence[DailyFlowForecast]
    ) -> Tuple[bool, List[str]]:
        """
        Validate records plus collection ordering.

        Dates must be unique and ascending.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors: List[str] = []
        for forecast in forecasts:
            errors.extend(self.validate_forecast(forecast)[1])

        for previous, current in zip(forecasts, forecasts[1:]):
            if current.date <= previous.date:
                errors.append(
                    f"Dates not unique and ascending: {previous.date.isoformat()} "
                    f"followed by {current.date.isoformat()}"
                )

        return len(errors) == 0, errors

    def validate_processed_data(self, forecasts: Sequence[DailyFlowForecast]) -> bool:
        """
        Validate processed forecasts and log the outcome.

        Returns:
            True if there is at least one forecast, all are valid and their
            dates are unique and ascending
        """
        if not forecasts:
            self.logger.warning("No forecasts generated")
            return False

        invalid_count = sum(
            1 for forecast in forecasts if not self.validate_forecast(forecast)[0]
        )
        is_valid, errors = self.validate_collection(forecasts)
        for error in errors:
            self.logger.warning(f"Validation error: {error}")

        self.logger.info(
            f"Validation complete - {len(forecasts) - invalid_count} valid, "
            f"{invalid_count} invalid, {len(errors)} error(s)"
        )
        return is_valid

    def check_data_completeness(self, bundle: ForecastBundle) -> bool:
        """
        Check if a bundle has any series with data.

        Args:
            bundle: Series key -> series

        Returns:
            True if at least one series is non-empty, False otherwise
        """
        if not bundle:
            self.logger.info("No ensemble series available")
            return False

        empty = [key for key, series in bundle.items() if series.is_empty]
        if len(empty) == len(bundle):
            self.logger.info(f"All ensemble series are empty: {', '.join(sorted(empty))}")
            return False

        return True
