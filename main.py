"""Entry point: the ``mini-calendar`` command line.

Reads the clock once per invocation and hands the date to the pure grid
calculations in :mod:`calendar_logic`.

Examples
    $ mini-calendar locate
    $ mini-calendar locate --date 2024-02-29
    $ mini-calendar title --offset -1
"""

import logging
from datetime import date, datetime

import click

from calendar_logic import (
    is_last_day_of_month,
    locate,
    month_title,
    next_day_position,
)
from log_setup import configure_logging, verbosity_to_level
from settings import load_settings

logger = logging.getLogger(__name__)

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _resolve_date(value: datetime | None) -> date:
    """Return the requested date, or today read from the clock exactly once."""
    if value is None:
        return date.today()
    return value.date()


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", "verbose_count", count=True, default=0,
              help="Increase the default WARNING verbosity by one level per repetition.")
@click.option("--quiet", "-q", "quiet_count", count=True, default=0,
              help="Decrease the default WARNING verbosity by one level per repetition.")
@click.option("--debug/--no-debug", default=False,
              help="Enable debug logging with source paths.")
@click.pass_context
def cli(ctx: click.Context, verbose_count: int, quiet_count: int, debug: bool) -> None:
    """Locate dates in a Monday-first month calendar grid."""
    level = verbosity_to_level(verbose_count, quiet_count)
    configure_logging(level, debug_mode=debug, color=ctx.color is not False)
    logger.debug("Console log level %s", logging.getLevelName(level))


@cli.command("locate")
@click.option("--date", "when", type=_DATE, default=None,
              help="Date to locate (YYYY-MM-DD). Defaults to today.")
def locate_cmd(when: datetime | None) -> None:
    """Print the grid cell of a date and of the day after it."""
    d = _resolve_date(when)
    position = locate(d)
    following = next_day_position(d)
    rolls_over = is_last_day_of_month(d)
    logger.info("Located %s at %s", d.isoformat(), position)

    click.echo(f"{d.isoformat()}: row {position.row}, column {position.column}")
    click.echo(
        f"next day: row {following.row}, column {following.column}"
        + (" (next month)" if rolls_over else "")
    )


@cli.command("title")
@click.option("--date", "when", type=_DATE, default=None,
              help="Reference date (YYYY-MM-DD). Defaults to today.")
@click.option("--offset", type=int, default=0, show_default=True,
              help="Months to move away from the reference month.")
def title_cmd(when: datetime | None, offset: int) -> None:
    """Print the month name shown after navigating OFFSET months."""
    d = _resolve_date(when)
    month_names = load_settings()["month_names"]
    try:
        name = month_title(month_names, d, offset)
    except IndexError as e:
        raise click.BadParameter(str(e), param_hint="'--offset'") from e
    click.echo(name)


def main() -> None:
    cli()  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
