"""Pure calendar calculations — no UI dependencies."""

import calendar
from collections.abc import Sequence
from datetime import date
from typing import NamedTuple, TypeVar

T = TypeVar("T")

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_NAMES = list(calendar.month_name)[1:]


class GridPosition(NamedTuple):
    """A cell in the rendered month grid (row 1..6, column Mon=1 … Sun=7)."""

    row: int
    column: int


def to_iso_weekday(raw_weekday: int) -> int:
    """Map a Sunday=0 weekday number onto grid columns (Monday=1 … Sunday=7)."""
    return 7 if raw_weekday == 0 else raw_weekday


def weekday_column(d: date) -> int:
    """Return the grid column of ``d``."""
    return to_iso_weekday(int(d.strftime("%w")))


def locate(d: date) -> GridPosition:
    """Return where ``d`` sits in its month's grid.

    Row 1 is the first week holding any day of the month; the index counts
    cells from the top-left cell of row 1.
    """
    first_column = weekday_column(d.replace(day=1))
    zero_based_index = d.day + (first_column - 1) - 1
    return GridPosition(zero_based_index // 7 + 1, weekday_column(d))


def days_in_month(year: int, month: int) -> int:
    """Return the Gregorian length of ``month`` (1–12) in ``year``."""
    return calendar.monthrange(year, month)[1]


def is_last_day_of_month(d: date) -> bool:
    """Return True when ``d`` is the final day of its month."""
    return d.day == days_in_month(d.year, d.month)


def next_position(current: GridPosition, rolled_over_to_new_month: bool) -> GridPosition:
    """Return the grid position of the day after ``current``.

    The column always advances cyclically. On a month rollover the new month
    starts at row 1; otherwise the row advances only when leaving a Sunday.
    """
    column = current.column % 7 + 1
    if rolled_over_to_new_month:
        return GridPosition(1, column)
    if current.column == 7:
        return GridPosition(current.row + 1, column)
    return GridPosition(current.row, column)


def next_day_position(d: date) -> GridPosition:
    """Return the grid position of the day after ``d``."""
    return next_position(locate(d), is_last_day_of_month(d))


def today_position(today: date | None = None) -> GridPosition:
    """Locate ``today``, reading the clock once when no date is injected."""
    if today is None:
        today = date.today()
    return locate(today)


def overflow_index(sequence: Sequence[T], index: int) -> T:
    """Index ``sequence`` with wraparound for out-of-range indices.

    Overshoot past the end wraps any number of times; negative indices wrap
    back from the end by at most one full cycle.
    """
    length = len(sequence)
    if length == 0:
        raise IndexError("overflow_index on an empty sequence")
    if index < -length:
        raise IndexError(f"index {index} wraps more than one cycle back")
    if index < 0:
        return sequence[length + index]
    if index >= length:
        return sequence[index % length]
    return sequence[index]


def month_title(month_names: Sequence[str], d: date, offset: int = 0) -> str:
    """Return the month name shown ``offset`` months away from ``d``'s month."""
    return overflow_index(month_names, d.month - 1 + offset)


def month_grid(year: int, month: int) -> list[list[int | None]]:
    """Return a 6×7 grid for the given month.

    Each cell is a day number (1–31) or None for empty slots.
    Weeks start on Monday (ISO convention).
    Always 6 rows so the calendar height stays constant.
    """
    cal = calendar.Calendar(firstweekday=0)  # Monday
    days = cal.itermonthdays(year, month)

    grid: list[list[int | None]] = []
    row: list[int | None] = []
    for d in days:
        row.append(d if d != 0 else None)
        if len(row) == 7:
            grid.append(row)
            row = []
    # Pad to exactly 6 rows
    while len(grid) < 6:
        grid.append([None] * 7)
    return grid


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
