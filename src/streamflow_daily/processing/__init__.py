"""
Data processing module for the ensemble daily flow aggregation engine.

Provides unit conversion, source selection, day bucketing, daily
aggregation, flow categorization, bounds calculation and validation.
"""

from .converter import InvalidUnitError, UnitContext, UnitConverter
from .selector import SelectedSource, SourceSelector
from .bucketer import DayBucketer
from .classifier import FlowCategoryClassifier
from .aggregator import DailyAggregator
from .bounds import get_flow_bounds
from .validator import DataValidator

__all__ = [
    "InvalidUnitError",
    "UnitContext",
    "UnitConverter",
    "SelectedSource",
    "SourceSelector",
    "DayBucketer",
    "FlowCategoryClassifier",
    "DailyAggregator",
    "get_flow_bounds",
    "DataValidator",
]
