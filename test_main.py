"""Command-line tests for ``mini-calendar``."""

import logging
from datetime import date

import pytest
from click.testing import CliRunner

import main
from log_setup import ThirdPartyPrefixFilter, config_console_handler, verbosity_to_level
from main import cli

pytestmark = pytest.mark.usefixtures("isolated_settings")


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# ============================================================================
#                               locate
# ============================================================================


def test_locate_given_date(runner):
    result = runner.invoke(cli, ["locate", "--date", "2025-01-07"])
    assert result.exit_code == 0, result.output
    assert "2025-01-07: row 2, column 2" in result.output
    assert "next day: row 2, column 3" in result.output
    assert "(next month)" not in result.output


def test_locate_last_day_of_month(runner):
    result = runner.invoke(cli, ["locate", "--date", "2026-01-31"])
    assert result.exit_code == 0, result.output
    assert "2026-01-31: row 5, column 6" in result.output
    assert "next day: row 1, column 7 (next month)" in result.output


def test_locate_defaults_to_today(runner, freeze_today):
    freeze_today(main, date(2024, 2, 29))
    result = runner.invoke(cli, ["locate"])
    assert result.exit_code == 0, result.output
    assert "2024-02-29: row 5, column 4" in result.output
    assert "next day: row 1, column 5 (next month)" in result.output


def test_locate_rejects_bad_date(runner):
    result = runner.invoke(cli, ["locate", "--date", "2025-02-30"])
    assert result.exit_code == 2


# ============================================================================
#                               title
# ============================================================================


@pytest.mark.parametrize(
    ("offset", "expected"),
    [("0", "January"), ("-1", "December"), ("1", "February"), ("12", "January"), ("-12", "January")],
)
def test_title_offsets(runner, offset, expected):
    result = runner.invoke(cli, ["title", "--date", "2026-01-15", f"--offset={offset}"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_title_rejects_offset_beyond_one_cycle_back(runner):
    result = runner.invoke(cli, ["title", "--date", "2026-01-15", "--offset=-13"])
    assert result.exit_code == 2
    assert "--offset" in result.output


def test_title_uses_configured_month_names(runner, isolated_settings):
    isolated_settings.write_text(
        '{"month_names": ["Jan", "Feb", "Mar", "Apr", "May", "Jun",'
        ' "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]}',
        encoding="utf-8",
    )
    result = runner.invoke(cli, ["title", "--date", "2025-12-01", "--offset", "1"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Jan"


# ============================================================================
#                               logging helpers
# ============================================================================


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 9, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_verbosity_to_level(verbose, quiet, expected):
    assert verbosity_to_level(verbose, quiet) == expected


def test_debug_mode_forces_debug_level():
    handler = config_console_handler(level=logging.ERROR, debug_mode=True, color=False)
    assert handler.level == logging.DEBUG


def test_third_party_records_get_prefix():
    prefix_filter = ThirdPartyPrefixFilter()
    ours = logging.LogRecord("date_picker", logging.INFO, __file__, 1, "msg", None, None)
    theirs = logging.LogRecord("urllib3.pool", logging.INFO, __file__, 1, "msg", None, None)
    assert prefix_filter.filter(ours) and ours.prefix == ""
    assert prefix_filter.filter(theirs) and theirs.prefix == "[urllib3]"
