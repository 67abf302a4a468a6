"""Domain models and types for tripcal.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- "Today" is injectable for deterministic results
- Calendar logic separated from the CLI shell
"""

from tripcal.domain.models import CalendarConfig, CalendarDay, DateRange, SelectionState, ValidationResult, Weekday

__all__ = ["CalendarConfig", "CalendarDay", "DateRange", "SelectionState", "ValidationResult", "Weekday"]
