"""Pure functions for calendar grid generation.

This module contains the functional core for month views:
- No I/O operations
- No hidden clock reads beyond a single default for "today"
- Range-agnostic output (safe to cache per month)

Weekdays are numbered from Sunday (0) to Saturday (6).
"""

from datetime import date, timedelta

from tripcal.dates import as_calendar_day
from tripcal.domain.models import DAYS_IN_GRID, CalendarConfig, CalendarDay, check_weekday

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def sunday_weekday(value: date) -> int:
    """Day of week with Sunday as 0 (date.weekday() uses Monday as 0)."""
    return (value.weekday() + 1) % 7


def is_date_selectable(
    value: date,
    min_date: date | None = None,
    max_date: date | None = None,
    disable_past_dates: bool = True,
    today: date | None = None,
) -> bool:
    """Check whether a single date passes the calendar constraints.

    Args:
        value: Date to check.
        min_date: Earliest selectable date, if any.
        max_date: Latest selectable date, if any.
        disable_past_dates: Whether dates before today are rejected.
        today: Reference date (defaults to the system date).

    Returns:
        True if the date may be selected. Today itself is never rejected
        by the past-date rule.
    """
    day = as_calendar_day(value)
    if today is None:
        today = date.today()

    if disable_past_dates and day < as_calendar_day(today):
        return False

    if min_date and day < as_calendar_day(min_date):
        return False

    if max_date and day > as_calendar_day(max_date):
        return False

    return True


def get_calendar_dates(
    month: date,
    config: CalendarConfig | None = None,
    today: date | None = None,
) -> list[CalendarDay]:
    """Generate the 6-week grid for a month.

    The grid starts on the configured first day of the week on or before the
    1st and always holds exactly 42 days, padding with days from the
    following month where the month fits in fewer weeks.

    Args:
        month: Any date within the month to display.
        config: Calendar configuration (defaults apply if None).
        today: Reference date (defaults to the system date).

    Returns:
        List of 42 CalendarDay values in ascending date order.
    """
    if config is None:
        config = CalendarConfig()
    today = as_calendar_day(today) if today is not None else date.today()

    first_day = as_calendar_day(month).replace(day=1)
    last_day = (first_day.replace(day=28) + timedelta(days=4)).replace(day=1) - timedelta(days=1)

    week_start = config.first_day_of_week
    week_end = (week_start + 6) % 7
    grid_start = first_day - timedelta(days=(sunday_weekday(first_day) - week_start) % 7)
    grid_end = last_day + timedelta(days=(week_end - sunday_weekday(last_day)) % 7)

    span = (grid_end - grid_start).days + 1
    length = max(span, DAYS_IN_GRID)
    days = [grid_start + timedelta(days=offset) for offset in range(length)][:DAYS_IN_GRID]

    grid: list[CalendarDay] = []
    for day in days:
        is_current_month = day.year == first_day.year and day.month == first_day.month
        grid.append(
            CalendarDay(
                date=day,
                is_current_month=is_current_month,
                is_today=day == today,
                is_disabled=not is_date_selectable(
                    day,
                    min_date=config.min_date,
                    max_date=config.max_date,
                    disable_past_dates=config.disable_past_dates,
                    today=today,
                ),
                is_hidden=not config.show_adjacent_months and not is_current_month,
            )
        )

    return grid


def get_weekday_headers(first_day_of_week: int = 0) -> list[str]:
    """Get weekday column headers rotated to the first day of the week.

    Args:
        first_day_of_week: 0 (Sunday) through 6 (Saturday).

    Returns:
        Seven three-letter weekday abbreviations.

    Raises:
        ValueError: If first_day_of_week is outside 0-6.
    """
    start = check_weekday(first_day_of_week)
    return WEEKDAY_NAMES[start:] + WEEKDAY_NAMES[:start]
