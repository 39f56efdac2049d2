"""Pure calendar calculations — no UI dependencies.

Months are zero-based throughout (0 = January … 11 = December), matching
the panel position the date picker keeps.
"""

import calendar
from datetime import MAXYEAR, MINYEAR, date
from enum import Enum
from typing import NamedTuple

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

GRID_ROWS = 6
GRID_COLS = 7
GRID_CELLS = GRID_ROWS * GRID_COLS


class CalendarDate(NamedTuple):
    """A local calendar day. Orders by (year, month, day)."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month - 1, d.day)

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(date.today())

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)


class CellType(Enum):
    PREV = "prev"
    CURRENT = "current"
    NEXT = "next"


class DateCell(NamedTuple):
    year: int
    month: int
    day: int
    type: CellType

    @property
    def date(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.day)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the zero-based *month* of *year*.

    This is the day before the first of the following month; leap years
    (century rules included) come from calendar.isleap.
    """
    if month == 1 and calendar.isleap(year):
        return 29
    return calendar.mdays[month + 1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st, Monday = 0 … Sunday = 6."""
    return calendar.weekday(year, month + 1, 1)


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 0:
        return year - 1, 11
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 11:
        return year + 1, 0
    return year, month + 1


# ------------------------------------------------------------------
# Grid pieces
# ------------------------------------------------------------------
def previous_month_days(year: int, month: int) -> list[DateCell]:
    """Trailing days of the previous month that fill the first week."""
    count = first_weekday(year, month)
    cell_year, cell_month = prev_month(year, month)
    last = days_in_month(cell_year, cell_month)
    return [
        DateCell(cell_year, cell_month, last - i, CellType.PREV)
        for i in range(count - 1, -1, -1)
    ]


def current_month_days(year: int, month: int) -> list[DateCell]:
    return [
        DateCell(year, month, d, CellType.CURRENT)
        for d in range(1, days_in_month(year, month) + 1)
    ]


def next_month_days(year: int, month: int) -> list[DateCell]:
    """Leading days of the next month that pad the grid to 42 cells."""
    count = GRID_CELLS - days_in_month(year, month) - first_weekday(year, month)
    cell_year, cell_month = next_month(year, month)
    return [
        DateCell(cell_year, cell_month, d, CellType.NEXT)
        for d in range(1, count + 1)
    ]


def month_grid(year: int, month: int) -> list[DateCell]:
    """Return the 42 cells (6 weeks × 7 days) shown for the given month.

    Weeks start on Monday (ISO convention). Always 6 rows so the popup
    height stays constant.
    """
    return (previous_month_days(year, month)
            + current_month_days(year, month)
            + next_month_days(year, month))


def grid_weeks(cells: list[DateCell]) -> list[list[DateCell]]:
    """Split a flat grid into rows of 7."""
    return [cells[i:i + GRID_COLS] for i in range(0, len(cells), GRID_COLS)]


def iso_week_numbers(cells: list[DateCell]) -> list[str]:
    """Return the ISO week number for each row of the grid.

    Rows whose Monday lies outside the datetime year range get "".
    """
    weeks: list[str] = []
    for row in grid_weeks(cells):
        monday = row[0]
        if MINYEAR <= monday.year <= MAXYEAR:
            weeks.append(str(monday.date.to_date().isocalendar()[1]))
        else:
            weeks.append("")
    return weeks
