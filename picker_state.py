"""Interaction state of the date picker, independent of any UI toolkit.

The tkinter view forwards user actions here and re-renders from the
properties; tests drive it directly.
"""

import logging
from typing import Callable

from calendar_logic import MONTH_ABBR, CalendarDate, DateCell, month_grid, next_month, prev_month
from cell_classifier import CellFlags, classify_grid
from date_codec import format_date, parse_date
from date_range import is_in_range

logger = logging.getLogger(__name__)


class PickerController:
    """Selected value, editable text, popup visibility and panel month."""

    def __init__(
        self,
        value: CalendarDate,
        min_date: CalendarDate | None = None,
        max_date: CalendarDate | None = None,
        on_change: Callable[[CalendarDate], None] | None = None,
        clock: Callable[[], CalendarDate] = CalendarDate.today,
    ) -> None:
        self.value = value
        self.min_date = min_date
        self.max_date = max_date
        self.on_change = on_change
        self._clock = clock

        self.input_text: str = format_date(value)
        self.popup_open = False
        self.panel_year = value.year
        self.panel_month = value.month
        self.today = clock()

    # ------------------------------------------------------------------
    # Value / bounds
    # ------------------------------------------------------------------
    def set_value(self, value: CalendarDate) -> None:
        """Replace the selected value and re-format the input text."""
        self.value = value
        self.input_text = format_date(value)

    def set_bounds(self, min_date: CalendarDate | None,
                   max_date: CalendarDate | None) -> None:
        self.min_date = min_date
        self.max_date = max_date

    def _change(self, value: CalendarDate) -> None:
        logger.debug("Date changed to %s", format_date(value))
        self.set_value(value)
        if self.on_change is not None:
            self.on_change(value)

    # ------------------------------------------------------------------
    # Text input
    # ------------------------------------------------------------------
    def set_input_text(self, text: str) -> None:
        """Store typed text; a valid in-range date moves the panel to it."""
        self.input_text = text.strip()
        typed = self.input_date
        if typed is not None and self.is_in_range(typed):
            self.panel_year, self.panel_month = typed.year, typed.month

    @property
    def input_date(self) -> CalendarDate | None:
        return parse_date(self.input_text)

    @property
    def input_is_valid(self) -> bool:
        """False when the text is unparsable or outside the bounds."""
        typed = self.input_date
        return typed is not None and self.is_in_range(typed)

    def is_in_range(self, value: CalendarDate) -> bool:
        return is_in_range(value, self.min_date, self.max_date)

    def commit(self) -> bool:
        """Apply the typed text (Enter or a click outside the picker).

        Closes the popup. Unparsable text is reset to the current value;
        a parsable but out-of-range date is left in the input untouched.
        Returns True if the typed date was applied.
        """
        self.popup_open = False
        typed = self.input_date
        if typed is None:
            self.input_text = format_date(self.value)
            return False
        if not self.is_in_range(typed):
            return False
        self._change(typed)
        return True

    # ------------------------------------------------------------------
    # Popup
    # ------------------------------------------------------------------
    def open_popup(self) -> None:
        if self.popup_open:
            return
        self.popup_open = True
        self.today = self._clock()
        target = self.value
        typed = self.input_date
        if typed is not None and self.is_in_range(typed):
            target = typed
        self.panel_year, self.panel_month = target.year, target.month

    def close_popup(self) -> None:
        self.popup_open = False

    def select_cell(self, cell: DateCell) -> bool:
        """Pick a grid cell; cells outside the bounds are ignored."""
        if not self.is_in_range(cell.date):
            return False
        self._change(cell.date)
        self.popup_open = False
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def prev_month(self) -> None:
        self.panel_year, self.panel_month = prev_month(self.panel_year, self.panel_month)

    def next_month(self) -> None:
        self.panel_year, self.panel_month = next_month(self.panel_year, self.panel_month)

    def prev_year(self) -> None:
        self.panel_year -= 1

    def next_year(self) -> None:
        self.panel_year += 1

    def go_today(self) -> None:
        self.today = self._clock()
        self.panel_year, self.panel_month = self.today.year, self.today.month

    # ------------------------------------------------------------------
    # Rendering data
    # ------------------------------------------------------------------
    @property
    def panel_title(self) -> str:
        return f"{MONTH_ABBR[self.panel_month]} {self.panel_year}"

    def cells(self) -> list[tuple[DateCell, CellFlags]]:
        return classify_grid(
            month_grid(self.panel_year, self.panel_month),
            self.today, self.value, self.min_date, self.max_date,
        )
