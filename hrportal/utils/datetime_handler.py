"""
DateTime Handler module for consistent date and time handling throughout the application.
"""
from datetime import datetime, date, timedelta, timezone
from typing import Union, Optional
import logging

logger = logging.getLogger(__name__)


class DateTimeHandler:
    """
    Centralized service for handling dates and times consistently throughout the application.
    Provides methods for parsing, formatting, and common date operations.
    """

    # Standard format strings
    DATE_FORMAT = "%Y-%m-%d"
    DISPLAY_DATE_FORMAT = "%m/%d/%Y"

    @classmethod
    def parse_datetime(cls, value: Union[str, date, datetime, None]) -> Optional[datetime]:
        """
        Parse an ISO-8601 string (or date) into a naive UTC datetime.

        Args:
            value: ISO string, date or datetime

        Returns:
            Datetime object or None if parsing fails
        """
        if value is None or value == "":
            return None

        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            return datetime.combine(value, datetime.min.time())
        else:
            try:
                parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                logger.warning(f"Invalid datetime value: {value}")
                return None

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed

    @classmethod
    def format_date(cls, date_obj: Union[date, datetime, str, None], fmt: Optional[str] = None) -> Optional[str]:
        """
        Format a date/datetime object (or ISO string) as a date string.

        Args:
            date_obj: Date, datetime or ISO string
            fmt: strftime format, YYYY-MM-DD by default

        Returns:
            Formatted date string or None
        """
        if isinstance(date_obj, str):
            date_obj = cls.parse_datetime(date_obj)

        if date_obj is None:
            return None

        if isinstance(date_obj, datetime):
            date_obj = date_obj.date()

        return date_obj.strftime(fmt or cls.DATE_FORMAT)

    @classmethod
    def to_iso_string(cls, value: Optional[datetime]) -> Optional[str]:
        """Serialize a datetime as an ISO-8601 string with a trailing Z."""
        value = cls.parse_datetime(value)
        if value is None:
            return None
        return value.replace(microsecond=0).isoformat() + "Z"

    @classmethod
    def get_current_datetime(cls) -> datetime:
        """
        Get the current UTC datetime.

        Returns:
            Current UTC datetime
        """
        return datetime.utcnow()

    @classmethod
    def format_time_ago(cls, timestamp: Union[datetime, str, None], now: Optional[datetime] = None) -> str:
        """
        Describe how long ago a timestamp was, in whole days or hours.

        Args:
            timestamp: Moment to describe
            now: Reference time, defaults to the current UTC time

        Returns:
            "N days ago", "N hours ago" or "Just now"
        """
        moment = cls.parse_datetime(timestamp)
        if moment is None:
            return "Just now"

        reference = now or cls.get_current_datetime()
        elapsed = reference - moment
        hours = int(elapsed / timedelta(hours=1))
        days = hours // 24

        if days > 0:
            return f"{days} day{'s' if days > 1 else ''} ago"
        if hours > 0:
            return f"{hours} hour{'s' if hours > 1 else ''} ago"
        return "Just now"
