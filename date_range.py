"""Inclusive min/max bound checks at day granularity."""

from calendar_logic import CalendarDate


def is_in_range(value: CalendarDate,
                min_date: CalendarDate | None = None,
                max_date: CalendarDate | None = None) -> bool:
    """Return True if min_date <= value <= max_date.

    Either bound may be None (unbounded on that side). Dates compare as
    (year, month, day) triples.
    """
    key = tuple(value[:3])
    if min_date is not None and key < tuple(min_date[:3]):
        return False
    if max_date is not None and key > tuple(max_date[:3]):
        return False
    return True
