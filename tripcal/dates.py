"""Date utilities for tripcal.

Pure functions for date formatting, parsing and month navigation.
"""

from datetime import date, datetime

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from tripcal.domain.models import DateRange


def as_calendar_day(value: date | datetime) -> date:
    """Normalize a date or datetime to its calendar day.

    Args:
        value: Date or datetime (time-of-day is discarded).

    Returns:
        Plain date with the same year, month and day.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def format_date_for_display(value: date | datetime) -> str:
    """Format a date as a short label (e.g., "Mar 15")."""
    return f"{value:%b} {value.day}"


def format_date_range_for_display(date_range: DateRange) -> str:
    """Format a date range for display.

    Args:
        date_range: Range with zero, one or two endpoints.

    Returns:
        "Mar 10 - Mar 20" for a complete range, "Mar 10 - Add end date" when
        only the start is set, "Add dates" otherwise.
    """
    start, end = date_range.start_date, date_range.end_date

    if start and end:
        return f"{format_date_for_display(start)} - {format_date_for_display(end)}"
    if start:
        return f"{format_date_for_display(start)} - Add end date"
    return "Add dates"


def format_date_for_api(value: date | datetime) -> str:
    """Format a date for API exchange (YYYY-MM-DD, no time component)."""
    return as_calendar_day(value).isoformat()


def parse_date_from_api(value: str) -> date | None:
    """Parse a date string from an API payload or form field.

    Accepts bare dates ("2024-03-15") and full ISO-8601 datetimes
    ("2024-03-15T10:30:00", "2024-03-15T10:30:00+02:00"). Offset-aware
    datetimes are converted to local time before taking the calendar day.

    Args:
        value: Date string.

    Returns:
        The calendar day, or None if value is empty or unparseable.
    """
    if not value or not isinstance(value, str):
        return None

    try:
        parsed = isoparse(value.strip())
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
    except (ValueError, OverflowError, OSError):
        return None

    return parsed.date()


def get_next_month(value: date) -> date:
    """Add one calendar month, clamping the day at month end."""
    return value + relativedelta(months=1)


def get_previous_month(value: date) -> date:
    """Subtract one calendar month, clamping the day at month end."""
    return value - relativedelta(months=1)


def get_month_year_display(value: date) -> str:
    """Format month and year for a calendar header (e.g., "March 2024")."""
    return value.strftime("%B %Y")
