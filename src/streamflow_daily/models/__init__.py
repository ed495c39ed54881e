"""
Data models for the ensemble daily flow aggregation engine.

Contains DTOs for reach metadata, raw forecast series and daily summaries.
"""

from .reach import ReachData
from .forecast import (
    ForecastPoint,
    ForecastSeries,
    ForecastBundle,
    ForecastResponse,
    parse_ensemble_forecast,
)
from .daily import DailyFlowForecast, DailyForecastCollection

__all__ = [
    "ReachData",
    "ForecastPoint",
    "ForecastSeries",
    "ForecastBundle",
    "ForecastResponse",
    "parse_ensemble_forecast",
    "DailyFlowForecast",
    "DailyForecastCollection",
]
