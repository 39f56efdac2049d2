"""Presentation flags for grid cells, derived on demand."""

from typing import NamedTuple

from calendar_logic import CalendarDate, CellType, DateCell
from date_range import is_in_range


class CellFlags(NamedTuple):
    today: bool
    selected: bool
    in_range: bool
    current: bool


def _same_day(cell: DateCell, other: CalendarDate) -> bool:
    return (cell.year, cell.month, cell.day) == (other.year, other.month, other.day)


def is_today(cell: DateCell, today: CalendarDate) -> bool:
    return _same_day(cell, today)


def is_selected(cell: DateCell, selected: CalendarDate | None) -> bool:
    """Match on the date alone; the cell's prev/next tag is ignored."""
    return selected is not None and _same_day(cell, selected)


def cell_in_range(cell: DateCell,
                  min_date: CalendarDate | None = None,
                  max_date: CalendarDate | None = None) -> bool:
    return is_in_range(cell.date, min_date, max_date)


def classify_cell(cell: DateCell, today: CalendarDate,
                  selected: CalendarDate | None = None,
                  min_date: CalendarDate | None = None,
                  max_date: CalendarDate | None = None) -> CellFlags:
    return CellFlags(
        today=is_today(cell, today),
        selected=is_selected(cell, selected),
        in_range=cell_in_range(cell, min_date, max_date),
        current=cell.type is CellType.CURRENT,
    )


def classify_grid(cells: list[DateCell], today: CalendarDate,
                  selected: CalendarDate | None = None,
                  min_date: CalendarDate | None = None,
                  max_date: CalendarDate | None = None,
                  ) -> list[tuple[DateCell, CellFlags]]:
    """Pair every cell with its flags, in grid order."""
    return [
        (cell, classify_cell(cell, today, selected, min_date, max_date))
        for cell in cells
    ]
