"""Pure state transitions for interactive date range selection.

A picker moves through empty -> partial -> complete ranges as the user
clicks days. Each transition takes the current SelectionState and returns a
new one; nothing is mutated.
"""

from dataclasses import replace
from datetime import date

from tripcal.dates import as_calendar_day
from tripcal.domain.models import SelectionState, ValidationResult
from tripcal.domain.ranges import clear_date_range, create_date_range, is_same_day
from tripcal.domain.validation import validate_date_range


def is_within_bounds(value: date, min_date: date | None, max_date: date | None) -> bool:
    """Check a date against optional min/max bounds (inclusive)."""
    day = as_calendar_day(value)
    if min_date and day < as_calendar_day(min_date):
        return False
    if max_date and day > as_calendar_day(max_date):
        return False
    return True


def start_selection(value: date) -> SelectionState:
    """Begin a new selection with value as the start date."""
    return SelectionState(selected_range=create_date_range(value), is_selecting=True)


def clear_selection() -> SelectionState:
    """Reset to an empty, inactive selection."""
    return SelectionState(selected_range=clear_date_range())


def select_date(
    state: SelectionState,
    value: date,
    min_date: date | None = None,
    max_date: date | None = None,
    today: date | None = None,
) -> SelectionState:
    """Apply a click on a calendar day.

    Args:
        state: Current selection state.
        value: Clicked date.
        min_date: Earliest selectable date.
        max_date: Latest selectable date.
        today: Reference date for validation (defaults to the system date).

    Returns:
        New selection state. Out-of-bounds clicks that would start a new
        selection leave the state unchanged.
    """
    start = state.selected_range.start_date
    end = state.selected_range.end_date

    if start is not None and end is None:
        if is_same_day(value, start):
            return clear_selection()

        if as_calendar_day(value) < as_calendar_day(start):
            return start_selection(value)

        candidate = create_date_range(start, value)
        validation = validate_date_range(candidate, min_date=min_date, max_date=max_date, today=today)
        if validation.is_valid:
            return SelectionState(selected_range=candidate)

        return start_selection(value)

    if not is_within_bounds(value, min_date, max_date):
        return state

    return start_selection(value)


def set_hovered_date(
    state: SelectionState,
    value: date | None,
    min_date: date | None = None,
    max_date: date | None = None,
) -> SelectionState:
    """Update the hover preview date.

    Hovering only has an effect while the user is choosing an end date.
    Out-of-bounds dates and the start date itself clear the hover.

    Args:
        state: Current selection state.
        value: Date under the pointer, or None when the pointer leaves.
        min_date: Earliest selectable date.
        max_date: Latest selectable date.

    Returns:
        New selection state.
    """
    start = state.selected_range.start_date
    choosing_end = state.is_selecting and start is not None and state.selected_range.end_date is None

    if not choosing_end or start is None or value is None:
        return replace(state, hovered_date=None)

    if not is_within_bounds(value, min_date, max_date) or is_same_day(value, start):
        return replace(state, hovered_date=None)

    return replace(state, hovered_date=value)


def selection_validation(
    state: SelectionState,
    min_date: date | None = None,
    max_date: date | None = None,
    today: date | None = None,
) -> ValidationResult:
    """Validate the current selection with the picker's default rules."""
    return validate_date_range(state.selected_range, min_date=min_date, max_date=max_date, today=today)
