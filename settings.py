"""JSON-based settings persistence for the mini date picker."""

import json
import logging
import os

from calendar_logic import CalendarDate
from date_codec import format_date, parse_date

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-date-picker-settings.json")

_DEFAULTS = {
    "min_date": None,
    "max_date": None,
    "last_value": None,
    "show_week_numbers": True,
    "window_x": None,
    "window_y": None,
}

_DATE_KEYS = ("min_date", "max_date", "last_value")


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or bad keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file: %s", exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file without a JSON object")
        return settings

    for key in _DATE_KEYS:
        value = stored.get(key)
        if isinstance(value, str) and parse_date(value) is not None:
            settings[key] = value
        elif value is not None:
            logger.warning("Ignoring invalid %s setting: %r", key, value)
    if "show_week_numbers" in stored and isinstance(stored["show_week_numbers"], bool):
        settings["show_week_numbers"] = stored["show_week_numbers"]
    for key in ("window_x", "window_y"):
        # bool is an int subclass; a stray true/false is not a position
        if isinstance(stored.get(key), int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


# ------------------------------------------------------------------
# Date-valued keys
# ------------------------------------------------------------------
def _decode(value: str | None) -> CalendarDate | None:
    return parse_date(value) if value else None


def bounds_from_settings(settings: dict) -> tuple[CalendarDate | None, CalendarDate | None]:
    """Return the (min, max) range; a reversed pair is dropped."""
    lo = _decode(settings.get("min_date"))
    hi = _decode(settings.get("max_date"))
    if lo is not None and hi is not None and lo > hi:
        logger.warning("min_date is after max_date; ignoring both bounds")
        return None, None
    return lo, hi


def value_from_settings(settings: dict, default: CalendarDate) -> CalendarDate:
    return _decode(settings.get("last_value")) or default


def store_date(settings: dict, key: str, value: CalendarDate | None) -> None:
    settings[key] = format_date(value) if value is not None else None
