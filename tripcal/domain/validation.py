"""Pure functions for date range validation.

Validation never raises and never stops at the first failure: every
violated rule contributes its message, so callers can show all problems at
once.
"""

from datetime import date

from tripcal.dates import as_calendar_day
from tripcal.domain.models import DateRange, ValidationResult

START_IN_PAST = "Start date cannot be in the past"
START_BEFORE_MIN = "Start date cannot be before the minimum allowed date"
START_AFTER_MAX = "Start date cannot be after the maximum allowed date"
END_BEFORE_START = "End date cannot be before start date"
SAME_DATES = "Start and end dates cannot be the same"
END_BEFORE_MIN = "End date cannot be before the minimum allowed date"
END_AFTER_MAX = "End date cannot be after the maximum allowed date"


def validate_date_range(
    date_range: DateRange,
    min_date: date | None = None,
    max_date: date | None = None,
    allow_past_dates: bool = False,
    allow_same_date: bool = False,
    today: date | None = None,
) -> ValidationResult:
    """Validate a date range against ordering and business rules.

    Args:
        date_range: Range to validate (may be partial or empty).
        min_date: Earliest allowed date for either endpoint.
        max_date: Latest allowed date for either endpoint.
        allow_past_dates: Allow a start date before today.
        allow_same_date: Allow start and end on the same day.
        today: Reference date (defaults to the system date).

    Returns:
        ValidationResult listing every violated rule in check order.
    """
    errors: list[str] = []
    start = as_calendar_day(date_range.start_date) if date_range.start_date else None
    end = as_calendar_day(date_range.end_date) if date_range.end_date else None
    lower = as_calendar_day(min_date) if min_date else None
    upper = as_calendar_day(max_date) if max_date else None
    if today is None:
        today = date.today()

    if start:
        if not allow_past_dates and start < as_calendar_day(today):
            errors.append(START_IN_PAST)
        if lower and start < lower:
            errors.append(START_BEFORE_MIN)
        if upper and start > upper:
            errors.append(START_AFTER_MAX)

    if start and end:
        if end < start:
            errors.append(END_BEFORE_START)
        if not allow_same_date and start == end:
            errors.append(SAME_DATES)

    if end:
        if lower and end < lower:
            errors.append(END_BEFORE_MIN)
        if upper and end > upper:
            errors.append(END_AFTER_MAX)

    return ValidationResult(errors=errors)
