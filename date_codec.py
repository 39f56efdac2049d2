"""Conversion between CalendarDate and the DD-MM-YYYY input text."""

import re

from calendar_logic import CalendarDate, days_in_month

_VALID_VALUE = re.compile(r"\d{2}-\d{2}-\d{4}", re.ASCII)


def format_date(value: CalendarDate) -> str:
    """Return *value* as DD-MM-YYYY (month printed 1-based)."""
    return f"{value.day:02d}-{value.month + 1:02d}-{value.year}"


def parse_date(text: str) -> CalendarDate | None:
    """Parse DD-MM-YYYY text, or return None if it names no real day.

    Never raises and never clamps: 31-04-2022 is rejected, not moved to
    the 30th.
    """
    if not _VALID_VALUE.fullmatch(text):
        return None
    day, month, year = (int(part) for part in text.split("-"))
    if month < 1 or month > 12 or day < 1:
        return None
    if day > days_in_month(year, month - 1):
        return None
    return CalendarDate(year, month - 1, day)


def is_valid_date_string(text: str) -> bool:
    return parse_date(text) is not None
