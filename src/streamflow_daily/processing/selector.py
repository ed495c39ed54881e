"""
Ensemble source selection module.

Chooses the series that represents an ensemble bundle.
"""

import logging
from typing import NamedTuple, Optional

from ..core import constants
from ..models.forecast import ForecastBundle, ForecastSeries


class SelectedSource(NamedTuple):
    """Series chosen to represent a bundle."""

    key: str
    series: ForecastSeries


class SourceSelector:
    """Select the preferred series from ensemble forecast data."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize source selector.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def select(self, bundle: ForecastBundle) -> Optional[SelectedSource]:
        """
        Select the preferred data source.

        Priority: a non-empty 'mean' series, then the non-empty member with
        the lexicographically smallest key (member01 before member02).

        Args:
            bundle: Series key -> series for one horizon

        Returns:
            SelectedSource, or None when every series is empty
        """
        mean_series = bundle.get(constants.MEAN_SERIES_KEY)
        if mean_series is not None and not mean_series.is_empty:
            return SelectedSource(constants.MEAN_SERIES_KEY, mean_series)

        member_keys = sorted(
            key for key in bundle if key.startswith(constants.MEMBER_KEY_PREFIX)
        )

        for member_key in member_keys:
            member_series = bundle[member_key]
            if not member_series.is_empty:
                self.logger.debug(f"Mean series unavailable, falling back to {member_key}")
                return SelectedSource(member_key, member_series)

        return None
