"""Headless date picker page: month title, weekday header, 6×7 day grid."""

import logging
from datetime import date
from typing import NamedTuple

from calendar_logic import (
    GridPosition,
    is_last_day_of_month,
    locate,
    month_grid,
    next_day_position,
    next_month,
    prev_month,
)
from settings import load_settings

logger = logging.getLogger(__name__)


class Cell(NamedTuple):
    """One grid cell as the page exposes it.

    ``selected`` mirrors the selection attribute: None while the day has
    never been selected, "true" while selected, "false" once deselected.
    Days before today are ``disabled`` and never carry the attribute.
    """

    day: int | None
    selected: str | None
    disabled: bool = False


class DatePicker:
    """Single-month date picker with previous/next navigation and selection."""

    def __init__(self, today: date | None = None, settings: dict | None = None) -> None:
        if settings is None:
            settings = load_settings()
        self.page_title: str = settings["page_title"]
        self.month_names: list[str] = settings["month_names"]
        self.day_headers: list[str] = list(settings["day_abbr"])
        self.attribute_name: str = settings["selected_attribute"]

        self.today = today if today is not None else date.today()
        self.year = self.today.year
        self.month = self.today.month

        # Selection state; "false" markers only live while their month is shown
        self.selected: date | None = None
        self._deselected: set[date] = set()

        self._grid = month_grid(self.year, self.month)

    # ------------------------------------------------------------------
    # Page content
    # ------------------------------------------------------------------
    @property
    def title(self) -> str:
        return f"{self.month_names[self.month - 1]} {self.year}"

    def _date_at(self, row: int, column: int) -> date | None:
        if not (1 <= row <= 6 and 1 <= column <= 7):
            raise IndexError(f"no grid cell at row {row}, column {column}")
        day = self._grid[row - 1][column - 1]
        return None if day is None else date(self.year, self.month, day)

    def is_disabled(self, d: date) -> bool:
        """Return True for days before today, which cannot be selected."""
        return d < self.today

    def cell(self, row: int, column: int) -> Cell:
        """Return the cell at 1-based ``(row, column)``."""
        d = self._date_at(row, column)
        if d is None:
            return Cell(None, None)
        if self.is_disabled(d):
            return Cell(d.day, None, disabled=True)
        if d == self.selected:
            return Cell(d.day, "true")
        if d in self._deselected:
            return Cell(d.day, "false")
        return Cell(d.day, None)

    def cell_at(self, position: GridPosition) -> Cell:
        return self.cell(position.row, position.column)

    def attr(self, row: int, column: int, name: str) -> str | None:
        """Return attribute ``name`` of the cell, None when it is not set."""
        if name != self.attribute_name:
            return None
        return self.cell(row, column).selected

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------
    def click(self, row: int, column: int) -> Cell:
        """Select the day at ``(row, column)``; empty and disabled cells ignore the click."""
        d = self._date_at(row, column)
        if d is None:
            logger.debug("Ignoring click on empty cell (%d, %d) of %s", row, column, self.title)
            return self.cell(row, column)
        if self.is_disabled(d):
            logger.debug("Ignoring click on disabled day %s", d.isoformat())
            return self.cell(row, column)
        if self.selected is not None and self.selected != d:
            self._deselected.add(self.selected)
        self._deselected.discard(d)
        self.selected = d
        logger.debug("Selected %s", d.isoformat())
        return self.cell(row, column)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _show(self, year: int, month: int) -> None:
        self.year, self.month = year, month
        self._grid = month_grid(year, month)
        # Redrawn cells start without a "false" marker
        self._deselected.clear()
        logger.debug("Showing %s", self.title)

    def previous_month(self) -> None:
        self._show(*prev_month(self.year, self.month))

    def next_month(self) -> None:
        self._show(*next_month(self.year, self.month))

    def go_today(self) -> None:
        self._show(self.today.year, self.today.month)


def todays_cell(picker: DatePicker, today: date) -> tuple[GridPosition, Cell]:
    """Return today's grid position and the picker's cell there."""
    position = locate(today)
    return position, picker.cell_at(position)


def next_day_cell(picker: DatePicker, today: date) -> tuple[GridPosition, Cell]:
    """Return the position and cell of the day after ``today``.

    When ``today`` closes its month the picker is moved to the next month
    first, since tomorrow is drawn there.
    """
    position = next_day_position(today)
    if is_last_day_of_month(today):
        picker.next_month()
    return position, picker.cell_at(position)
