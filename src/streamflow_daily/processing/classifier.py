"""
Flow category classification module.

Maps a day's peak flow to a flow category using the reach's return periods.
"""

import logging
import math
from typing import Optional

from ..core import constants
from ..models.reach import ReachData


class FlowCategoryClassifier:
    """Classify peak flows against return-period thresholds."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize flow category classifier.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, peak_flow: float, unit: str, reach: Optional[ReachData]) -> str:
        """
        Classify a peak flow.

        Args:
            peak_flow: The day's maximum flow
            unit: Unit of peak_flow
            reach: Reach metadata holding return periods

        Returns:
            Flow category label, 'Unknown' when there are no return periods
            or the flow is not a finite number

        Raises:
            InvalidUnitError: If a unit involved is unsupported
        """
        if reach is None or not reach.has_return_periods:
            return constants.CATEGORY_UNKNOWN

        if not math.isfinite(peak_flow):
            self.logger.debug(f"Cannot classify non-finite flow {peak_flow}")
            return constants.CATEGORY_UNKNOWN

        return reach.get_flow_category(peak_flow, unit)
