"""
Ensemble Daily Flow Aggregation

This package reduces multi-member ensemble streamflow forecasts into
per-calendar-day summaries with flow categories.
"""

__version__ = "0.1.0"
__description__ = "Daily summaries of ensemble streamflow forecasts"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "DailyForecastApp":
        from .main import DailyForecastApp
        return DailyForecastApp
    if name == "DailyForecastProcessor":
        from .processor import DailyForecastProcessor
        return DailyForecastProcessor
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DailyForecastApp",
    "DailyForecastProcessor",
]
