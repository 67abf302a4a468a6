"""CLI entry point for tripcal."""

import typer

from tripcal.commands.admin import init_command
from tripcal.commands.month import month_command
from tripcal.commands.range import parse_command, range_command

app = typer.Typer(
    name="tripcal",
    help="Trip calendar - month grids and date range checks for bookings",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Trip calendar - month grids and date range checks for bookings."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize tripcal configuration."""
    init_command(force)


@app.command()
def month(
    month: str = typer.Option(None, "--month", "-m", help="Month to show (YYYY-MM, default: current month)"),
    first_day: int = typer.Option(None, "--first-day", help="First day of week, 0 (Sun) to 6 (Sat)"),
    start: str = typer.Option(None, "--start", help="Selected start date (YYYY-MM-DD)"),
    end: str = typer.Option(None, "--end", help="Selected end date (YYYY-MM-DD)"),
    hover: str = typer.Option(None, "--hover", help="Preview an end date (YYYY-MM-DD)"),
) -> None:
    """Show a month calendar with your selected dates."""
    month_command(month, first_day, start, end, hover)


@app.command(name="range")
def date_range(
    start: str,
    end: str = typer.Argument(None, help="End date (YYYY-MM-DD)"),
    min_date: str = typer.Option(None, "--min", help="Earliest allowed date (YYYY-MM-DD)"),
    max_date: str = typer.Option(None, "--max", help="Latest allowed date (YYYY-MM-DD)"),
    allow_past: bool = typer.Option(False, "--allow-past", help="Allow a start date in the past"),
    allow_same_date: bool = typer.Option(False, "--allow-same-date", help="Allow start and end on the same day"),
) -> None:
    """Check and format your trip date range."""
    range_command(start, end, min_date, max_date, allow_past, allow_same_date)


@app.command()
def parse(value: str) -> None:
    """Normalize a date or ISO-8601 datetime to YYYY-MM-DD."""
    parse_command(value)


if __name__ == "__main__":
    app()
