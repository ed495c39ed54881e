"""
Date and timezone utilities.

Centralizes all date/time operations with proper timezone handling.
"""

from datetime import date, datetime
from typing import Optional
import pytz
from pytz.tzinfo import BaseTzInfo

from . import constants


class DateUtils:
    """Utilities for date and timezone handling."""

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'America/Denver', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def parse_iso_timestamp(value: str) -> datetime:
        """
        Parse an ISO 8601 timestamp as delivered by the forecast API.

        A trailing 'Z' is accepted and naive timestamps are taken as UTC.

        Raises:
            ValueError: If the string is not a valid timestamp
        """
        if not isinstance(value, str) or not value:
            raise ValueError(f"Invalid timestamp: {value!r}")
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return DateUtils.to_utc(datetime.fromisoformat(text))

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @staticmethod
    def to_local(dt: datetime, tz: BaseTzInfo) -> datetime:
        """
        Convert an instant to local time in the given timezone.

        Naive datetimes are taken as UTC.
        """
        return DateUtils.to_utc(dt).astimezone(tz)

    @staticmethod
    def today(timezone_str: str = constants.DEFAULT_TIMEZONE) -> date:
        """Get the current calendar date in the given timezone."""
        tz = DateUtils.parse_timezone(timezone_str)
        return datetime.now(pytz.UTC).astimezone(tz).date()

    @staticmethod
    def get_day_label(
        day: date,
        is_today: bool = False,
        today: Optional[date] = None,
        timezone_str: str = constants.DEFAULT_TIMEZONE
    ) -> str:
        """
        Get a user-friendly day label for display.

        Args:
            day: Calendar date to label (datetimes are reduced to their date)
            is_today: Caller already knows this is today
            today: Reference date. Defaults to the current date in timezone_str
            timezone_str: Timezone used to determine today when not given

        Returns:
            'Today', 'Tomorrow', 'Yesterday', a weekday abbreviation for dates
            within a week of today, otherwise 'month/day'

        Example:
            With today = 2024-06-10, 2024-06-14 -> 'Fri' and 2024-07-01 -> '7/1'
        """
        if is_today:
            return "Today"

        if isinstance(day, datetime):
            day = day.date()
        if today is None:
            today = DateUtils.today(timezone_str)
        elif isinstance(today, datetime):
            today = today.date()

        difference = (day - today).days

        if difference == 1:
            return "Tomorrow"
        if difference == -1:
            return "Yesterday"

        if abs(difference) <= constants.WEEKDAY_LABEL_WINDOW_DAYS:
            return constants.WEEKDAY_ABBREVIATIONS[day.weekday()]

        return f"{day.month}/{day.day}"
