"""
Main CLI application using Typer.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Iterator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import load_config
from ..domain import calendar_utils
from ..domain.exceptions import DateCalcError
from ..domain.models import Period
from ..services.calendar_service import CalendarService

app = typer.Typer(
    name="datecalc",
    help="Calendar calculations: timestamps, weekdays, periods, quarters and work schedules",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

DateArgument = Annotated[
    Optional[str],
    typer.Argument(help="Date and time, e.g. 2024-02-01T15:00:00Z. Defaults to now.")
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Report user-facing errors in red and exit with status 1."""
    try:
        yield
    except (DateCalcError, ValueError, FileNotFoundError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _service(ctx: typer.Context) -> CalendarService:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./datecalc.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Calendar calculation utilities.
    """
    _configure_logging(verbose)
    with _exit_on_error():
        ctx.obj = CalendarService(load_config(config_file))
    logger.debug("Using timezone %s", ctx.obj.config.timezone)


@app.command()
def timestamp(ctx: typer.Context, date: DateArgument = None):
    """
    Milliseconds since 1970-01-01T00:00:00Z.
    """
    with _exit_on_error():
        dt = _service(ctx).parse(date)
        console.print(calendar_utils.date_to_timestamp(dt))


@app.command("time")
def time_of_day(ctx: typer.Context, date: DateArgument = None):
    """
    Time of day as hh:mm:ss.
    """
    with _exit_on_error():
        dt = _service(ctx).parse(date)
        console.print(calendar_utils.get_time(dt))


@app.command()
def day_name(ctx: typer.Context, date: DateArgument = None):
    """
    Name of the weekday.
    """
    with _exit_on_error():
        service = _service(ctx)
        console.print(service.day_name(service.parse(date)))


@app.command()
def next_friday(ctx: typer.Context, date: DateArgument = None):
    """
    The next Friday after the date (a week ahead when it is a Friday).
    """
    with _exit_on_error():
        dt = _service(ctx).parse(date)
        console.print(calendar_utils.get_next_friday(dt).to_iso8601_string())


@app.command()
def days_in_month(
    month: Annotated[int, typer.Argument(help="Month number, 1 for January")],
    year: Annotated[int, typer.Argument(help="Four-digit year")],
):
    """
    Number of days in a month.
    """
    with _exit_on_error():
        console.print(calendar_utils.get_count_days_in_month(month, year))


@app.command()
def days_in_period(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="First day of the period")],
    end: Annotated[str, typer.Argument(help="Last day of the period")],
):
    """
    Number of days in a period, counting both ends.
    """
    with _exit_on_error():
        service = _service(ctx)
        console.print(
            calendar_utils.get_count_days_on_period(service.parse(start), service.parse(end))
        )


@app.command()
def in_period(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date to check")],
    start: Annotated[str, typer.Argument(help="First day of the period")],
    end: Annotated[str, typer.Argument(help="Last day of the period")],
):
    """
    Check if a date lies within a period, both ends included.
    """
    with _exit_on_error():
        service = _service(ctx)
        period = Period(start=service.parse(start), end=service.parse(end))
        inside = calendar_utils.is_date_in_period(service.parse(date), period)
        console.print("[green]yes[/green]" if inside else "[yellow]no[/yellow]")


@app.command("format")
def format_command(ctx: typer.Context, date: DateArgument = None):
    """
    Format as M/D/YYYY, h:mm:ss AM/PM in UTC.
    """
    with _exit_on_error():
        dt = _service(ctx).parse(date)
        console.print(calendar_utils.format_date(dt))


@app.command()
def weekends(
    ctx: typer.Context,
    month: Annotated[int, typer.Argument(help="Month number, 1 for January")],
    year: Annotated[int, typer.Argument(help="Four-digit year")],
):
    """
    Number of weekend days in a month.
    """
    with _exit_on_error():
        console.print(_service(ctx).weekends_in_month(month, year))


@app.command()
def week_number(ctx: typer.Context, date: DateArgument = None):
    """
    Week of the year, counting a new week after every Sunday.
    """
    with _exit_on_error():
        dt = _service(ctx).parse(date)
        console.print(calendar_utils.get_week_number_by_date(dt))


@app.command()
def friday13(ctx: typer.Context, date: DateArgument = None):
    """
    The next Friday the 13th, starting with the month of the date.
    """
    with _exit_on_error():
        dt = _service(ctx).parse(date)
        found = calendar_utils.get_next_friday_the_13th(dt)
        console.print(found.format("dddd, DD.MM.YYYY", locale="en"))


@app.command()
def quarter(ctx: typer.Context, date: DateArgument = None):
    """
    Quarter of the year (1-4).
    """
    with _exit_on_error():
        service = _service(ctx)
        console.print(service.quarter(service.parse(date)))


@app.command()
def schedule(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="First day (DD-MM-YYYY)")],
    end: Annotated[str, typer.Argument(help="Last day (DD-MM-YYYY)")],
    work: Annotated[Optional[int], typer.Option("--work", "-w", help="Consecutive working days")] = None,
    off: Annotated[Optional[int], typer.Option("--off", "-o", help="Consecutive days off")] = None,
):
    """
    Working days of a repeating work/off pattern.

    Examples:

        datecalc schedule 01-01-2024 15-01-2024 --work 1 --off 3
    """
    with _exit_on_error():
        days = _service(ctx).work_schedule(Period(start=start, end=end), work, off)

    if not days:
        console.print(
            "[yellow]⚠ No working days.[/yellow]\n"
            "Check that both dates use DD-MM-YYYY and the start is not after the end."
        )
        return

    table = Table(
        title=f"Work schedule {start} - {end}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Date", style="bold yellow")

    for idx, day in enumerate(days, 1):
        table.add_row(str(idx), day)

    console.print()
    console.print(table)
    console.print()


@app.command()
def leap_year(ctx: typer.Context, date: DateArgument = None):
    """
    Check if the year of the date is a leap year.
    """
    with _exit_on_error():
        dt = _service(ctx).parse(date)
        leap = calendar_utils.is_leap_year(dt)
        console.print(f"{dt.year} is {'a' if leap else 'not a'} leap year")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]datecalc[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
