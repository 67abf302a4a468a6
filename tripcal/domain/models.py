"""Domain type definitions for tripcal.

Value objects shared by the calendar engine:
- Weekday: Day of week where 0 is Sunday and 6 is Saturday
- CalendarDay: One cell of a month grid
- DateRange: Two optional endpoints of a trip or booking window
- CalendarConfig: Grid and selection constraints
- ValidationResult: Outcome of range validation
- SelectionState: Interactive picker state

All values are frozen; updates produce new values via dataclasses.replace.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import NewType

# Weekday numbering starts at Sunday (0) through Saturday (6)
Weekday = NewType("Weekday", int)

DAYS_IN_GRID = 42


def check_weekday(value: int) -> Weekday:
    """Validate a first-day-of-week value.

    Args:
        value: Day of week, 0 (Sunday) through 6 (Saturday).

    Returns:
        The value as a Weekday.

    Raises:
        ValueError: If value is not an integer in 0-6.
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise ValueError(f"first_day_of_week must be 0-6, got {value!r}")
    return Weekday(value)


@dataclass(frozen=True)
class CalendarDay:
    """Immutable calendar grid cell.

    Selection flags are always False when generated; decorate_day fills them.
    """

    date: date
    is_current_month: bool
    is_today: bool
    is_disabled: bool
    is_hidden: bool = False
    is_selected: bool = False
    is_range_start: bool = False
    is_range_end: bool = False
    is_in_range: bool = False
    is_hovered: bool = False


@dataclass(frozen=True)
class DateRange:
    """Immutable date range.

    Ordering is not enforced here: an interactive selection may pass through
    an inverted state. Use validate_date_range to check ordering.
    """

    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class CalendarConfig:
    """Immutable calendar configuration."""

    min_date: date | None = None
    max_date: date | None = None
    disable_past_dates: bool = True
    show_adjacent_months: bool = True
    first_day_of_week: Weekday = Weekday(0)

    def __post_init__(self) -> None:
        check_weekday(self.first_day_of_week)


@dataclass(frozen=True)
class ValidationResult:
    """Immutable range validation result."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class SelectionState:
    """Immutable date picker selection state."""

    selected_range: DateRange = field(default_factory=DateRange)
    hovered_date: date | None = None
    is_selecting: bool = False
