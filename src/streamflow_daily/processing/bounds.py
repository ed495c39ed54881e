"""
Flow bounds calculation for chart scaling.
"""

from typing import Dict, Iterable

from ..core import constants
from ..models.daily import DailyFlowForecast


def get_flow_bounds(
    forecasts: Iterable[DailyFlowForecast],
    padding_fraction: float = constants.BOUNDS_PADDING_FRACTION
) -> Dict[str, float]:
    """
    Calculate padded flow bounds across daily forecasts.

    Both bounds are pushed outward by padding_fraction of the range and the
    lower bound is clamped at zero.

    Args:
        forecasts: Daily forecasts sharing one unit
        padding_fraction: Fraction of the range added on each side

    Returns:
        {"min": ..., "max": ...}; {"min": 0.0, "max": 100.0} when empty
    """
    forecasts = list(forecasts)
    if not forecasts:
        low, high = constants.DEFAULT_FLOW_BOUNDS
        return {"min": low, "max": high}

    min_flow = min(forecast.min_flow for forecast in forecasts)
    max_flow = max(forecast.max_flow for forecast in forecasts)

    padding = (max_flow - min_flow) * padding_fraction

    return {
        "min": max(min_flow - padding, 0.0),
        "max": max_flow + padding,
    }
