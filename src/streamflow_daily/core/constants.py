"""
Application-wide constants for ensemble daily flow aggregation.

This module defines default values and constants used throughout the application.
"""

# Flow units
UNIT_CFS = "CFS"
UNIT_CMS = "CMS"
SUPPORTED_FLOW_UNITS = (UNIT_CFS, UNIT_CMS)
DEFAULT_FLOW_UNIT = UNIT_CFS

# 1 CMS = 35.3147 CFS
CMS_TO_CFS = 35.3147

# Return period thresholds are always delivered in CMS
RETURN_PERIOD_UNIT = UNIT_CMS

# Ensemble series keys
MEAN_SERIES_KEY = "mean"
MEMBER_KEY_PREFIX = "member"

# Forecast horizons
MEDIUM_RANGE = "medium_range"
LONG_RANGE = "long_range"
KNOWN_HORIZONS = (MEDIUM_RANGE, LONG_RANGE)

# Flow categories, ordered by severity
CATEGORY_NORMAL = "Normal"
CATEGORY_ELEVATED = "Elevated"
CATEGORY_HIGH = "High"
CATEGORY_FLOOD_RISK = "Flood Risk"
CATEGORY_UNKNOWN = "Unknown"
FLOW_CATEGORIES = (
    CATEGORY_NORMAL,
    CATEGORY_ELEVATED,
    CATEGORY_HIGH,
    CATEGORY_FLOOD_RISK,
)

# Recurrence intervals (years) bounding the Normal / Elevated labels
NORMAL_RECURRENCE_YEARS = 2
ELEVATED_MAX_RECURRENCE_YEARS = 5

# Chart scaling
BOUNDS_PADDING_FRACTION = 0.05
DEFAULT_FLOW_BOUNDS = (0.0, 100.0)

# Day labels
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKDAY_LABEL_WINDOW_DAYS = 7

DEFAULT_TIMEZONE = "UTC"
