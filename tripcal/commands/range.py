"""Range and parse commands for checking trip dates."""

import sys
from datetime import date

from rich.console import Console
from rich.markup import escape

from tripcal.config import load_calendar_config
from tripcal.dates import format_date_for_api, format_date_range_for_display, parse_date_from_api
from tripcal.domain.models import DateRange
from tripcal.domain.ranges import create_date_range, get_date_range_duration, is_date_range_complete
from tripcal.domain.validation import validate_date_range

console = Console()


def parse_date_argument(value: str | None, name: str) -> date | None:
    """Parse an optional date argument, exiting on bad input.

    Args:
        value: Raw argument value (YYYY-MM-DD or ISO-8601 datetime).
        name: Argument name for the error message.

    Returns:
        Parsed date, or None if value was not given.
    """
    if not value:
        return None

    parsed = parse_date_from_api(value)
    if parsed is None:
        console.print(f"[red]Invalid {name} date: '{escape(value)}'[/red]", style="bold")
        console.print("[dim]Use YYYY-MM-DD, e.g. 2024-03-15[/dim]")
        sys.exit(1)

    return parsed


def render_range_summary(date_range: DateRange) -> None:
    """Print display, API and duration details for a range."""
    console.print(f"[bold cyan]{format_date_range_for_display(date_range)}[/bold cyan]\n")

    start = format_date_for_api(date_range.start_date) if date_range.start_date else "-"
    end = format_date_for_api(date_range.end_date) if date_range.end_date else "-"
    console.print(f"  Start: {start}")
    console.print(f"  End:   {end}")

    if is_date_range_complete(date_range):
        nights = get_date_range_duration(date_range)
        console.print(f"  Duration: {nights} day{'s' if nights != 1 else ''}")


def range_command(
    start: str,
    end: str | None = None,
    min_date: str | None = None,
    max_date: str | None = None,
    allow_past: bool = False,
    allow_same_date: bool = False,
) -> None:
    """Validate and format a trip date range."""
    try:
        config = load_calendar_config()
    except ValueError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    date_range = create_date_range(parse_date_argument(start, "start"), parse_date_argument(end, "end"))
    lower = parse_date_argument(min_date, "minimum") or config.min_date
    upper = parse_date_argument(max_date, "maximum") or config.max_date

    render_range_summary(date_range)

    result = validate_date_range(
        date_range,
        min_date=lower,
        max_date=upper,
        allow_past_dates=allow_past,
        allow_same_date=allow_same_date,
    )

    if result.is_valid:
        console.print("\n[green]✓[/green] Valid range")
        return

    console.print("\n[red]Invalid range:[/red]", style="bold")
    for error in result.errors:
        console.print(f"  [red]✗[/red] {error}")
    sys.exit(1)


def parse_command(value: str) -> None:
    """Normalize a date string to API format."""
    parsed = parse_date_from_api(value)

    if parsed is None:
        console.print("[yellow]No date[/yellow]")
        return

    console.print(format_date_for_api(parsed))
