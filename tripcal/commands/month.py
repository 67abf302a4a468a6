"""Month command for rendering the calendar grid."""

import sys
from dataclasses import replace
from datetime import date, datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tripcal.commands.range import parse_date_argument
from tripcal.config import load_calendar_config
from tripcal.dates import format_date_range_for_display, get_month_year_display
from tripcal.domain.grid import get_calendar_dates, get_weekday_headers
from tripcal.domain.models import CalendarConfig, CalendarDay, DateRange, check_weekday
from tripcal.domain.ranges import create_date_range, decorate_day

console = Console()


def parse_month(month: str | None, today: date) -> date:
    """Parse a YYYY-MM month option.

    Args:
        month: Month string, or None for the current month.
        today: Reference date used when month is None.

    Returns:
        First day of the month.

    Raises:
        ValueError: If month is not in YYYY-MM format.
    """
    if not month:
        return today.replace(day=1)
    return datetime.strptime(month, "%Y-%m").date()


def format_day_cell(day: CalendarDay) -> str:
    """Format a decorated day as Rich markup for a grid cell.

    Args:
        day: Decorated calendar day.

    Returns:
        Cell markup (empty for hidden adjacent-month days).
    """
    if day.is_hidden:
        return ""

    label = str(day.date.day)

    if day.is_selected:
        return f"[bold black on cyan]{label}[/bold black on cyan]"
    if day.is_in_range:
        return f"[cyan]{label}[/cyan]"
    if day.is_disabled:
        return f"[dim strike]{label}[/dim strike]"
    if day.is_today:
        return f"[bold underline]{label}[/bold underline]"
    if not day.is_current_month:
        return f"[dim]{label}[/dim]"
    return label


def build_month_table(
    month: date,
    config: CalendarConfig,
    date_range: DateRange,
    hover_date: date | None,
    today: date,
) -> Table:
    """Build a Rich table for a month grid with the selection applied."""
    table = Table(title=get_month_year_display(month))

    for header in get_weekday_headers(config.first_day_of_week):
        table.add_column(header, justify="right")

    days = [decorate_day(day, date_range, hover_date) for day in get_calendar_dates(month, config, today)]
    for week in range(0, len(days), 7):
        table.add_row(*(format_day_cell(day) for day in days[week : week + 7]))

    return table


def month_command(
    month: str | None = None,
    first_day: int | None = None,
    start: str | None = None,
    end: str | None = None,
    hover: str | None = None,
) -> None:
    """Render a month calendar with an optional selected range."""
    # Only impure part: the clock is read once here
    today = date.today()

    try:
        config = load_calendar_config()
        if first_day is not None:
            config = replace(config, first_day_of_week=check_weekday(first_day))
        display_month = parse_month(month, today)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    date_range = create_date_range(parse_date_argument(start, "start"), parse_date_argument(end, "end"))
    hover_date = parse_date_argument(hover, "hover")

    console.print(build_month_table(display_month, config, date_range, hover_date, today))

    if date_range.start_date:
        console.print(f"\n[bold cyan]{format_date_range_for_display(date_range)}[/bold cyan]")
