"""Pure functions for date range membership and manipulation.

All comparisons are by calendar day: two datetimes on the same day are equal
regardless of time-of-day.
"""

import math
from dataclasses import replace
from datetime import date, datetime

from tripcal.dates import as_calendar_day
from tripcal.domain.models import CalendarDay, DateRange

SECONDS_PER_DAY = 24 * 60 * 60


def is_same_day(a: date, b: date) -> bool:
    return as_calendar_day(a) == as_calendar_day(b)


def create_date_range(start_date: date | None = None, end_date: date | None = None) -> DateRange:
    """Create a date range from optional endpoints."""
    return DateRange(start_date=start_date, end_date=end_date)


def clear_date_range() -> DateRange:
    """Create an empty date range."""
    return DateRange()


def is_date_range_complete(date_range: DateRange) -> bool:
    """Check whether both endpoints are set."""
    return date_range.start_date is not None and date_range.end_date is not None


def is_date_in_range(value: date, date_range: DateRange) -> bool:
    """Check whether a date falls within a complete range (inclusive).

    Args:
        value: Date to check.
        date_range: Range to check against.

    Returns:
        True if start <= value <= end. Always False for partial or empty ranges.
    """
    start, end = date_range.start_date, date_range.end_date
    if start is None or end is None:
        return False

    day = as_calendar_day(value)
    return as_calendar_day(start) <= day <= as_calendar_day(end)


def is_date_range_start(value: date, date_range: DateRange) -> bool:
    """Check whether a date is the range start."""
    return date_range.start_date is not None and is_same_day(value, date_range.start_date)


def is_date_range_end(value: date, date_range: DateRange) -> bool:
    """Check whether a date is the range end."""
    return date_range.end_date is not None and is_same_day(value, date_range.end_date)


def is_date_selected(value: date, date_range: DateRange) -> bool:
    """Check whether a date is either endpoint of the range."""
    return is_date_range_start(value, date_range) or is_date_range_end(value, date_range)


def are_date_ranges_equal(first: DateRange, second: DateRange) -> bool:
    """Check whether two ranges have the same endpoints.

    Args:
        first: First range.
        second: Second range.

    Returns:
        True if each pair of endpoints is either both absent or the same day.
    """

    def endpoints_equal(a: date | None, b: date | None) -> bool:
        if a is None or b is None:
            return a is None and b is None
        return is_same_day(a, b)

    return endpoints_equal(first.start_date, second.start_date) and endpoints_equal(
        first.end_date, second.end_date
    )


def get_date_range_duration(date_range: DateRange) -> int:
    """Calculate the number of days spanned by a range.

    Args:
        date_range: Range to measure.

    Returns:
        Whole days between the endpoints, rounded up and always non-negative.
        0 if either endpoint is missing.
    """
    start, end = date_range.start_date, date_range.end_date
    if start is None or end is None:
        return 0

    if isinstance(start, datetime) and isinstance(end, datetime):
        seconds = abs((end - start).total_seconds())
        return math.ceil(seconds / SECONDS_PER_DAY)

    return abs((as_calendar_day(end) - as_calendar_day(start)).days)


def get_hover_range(start_date: date, hover_date: date) -> DateRange:
    """Build the preview range between a committed start and a hovered date.

    Unlike a committed range, the preview is always ordered: if the hovered
    date precedes the start, the endpoints are swapped.
    """
    if as_calendar_day(hover_date) < as_calendar_day(start_date):
        return create_date_range(hover_date, start_date)
    return create_date_range(start_date, hover_date)


def is_date_in_hover_range(value: date, start_date: date, hover_date: date | None = None) -> bool:
    """Check whether a date falls within the hover preview range."""
    if hover_date is None:
        return False
    return is_date_in_range(value, get_hover_range(start_date, hover_date))


def decorate_day(day: CalendarDay, date_range: DateRange, hover_date: date | None = None) -> CalendarDay:
    """Combine a generated grid cell with the current selection.

    While only the start is selected, an active hover date extends the
    in-range flag across the preview range.

    Args:
        day: Cell from get_calendar_dates.
        date_range: Current selection.
        hover_date: Date under the pointer, if any.

    Returns:
        New CalendarDay with selection flags set.
    """
    in_range = is_date_in_range(day.date, date_range)
    if not in_range and date_range.start_date is not None and date_range.end_date is None:
        in_range = is_date_in_hover_range(day.date, date_range.start_date, hover_date)

    return replace(
        day,
        is_selected=is_date_selected(day.date, date_range),
        is_range_start=is_date_range_start(day.date, date_range),
        is_range_end=is_date_range_end(day.date, date_range),
        is_in_range=in_range,
        is_hovered=hover_date is not None and is_same_day(day.date, hover_date),
    )
