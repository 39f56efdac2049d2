import tkinter as tk

import pytest

from calendar_logic import CalendarDate
from date_picker import DatePicker


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()


def test_typed_text_is_trimmed_in_entry(root):
    picker = DatePicker(root, CalendarDate(2022, 7, 1))
    picker.entry.delete(0, "end")
    picker.entry.insert(0, " 05-08-2022 ")
    root.update_idletasks()
    assert picker.entry.get() == "05-08-2022"
    assert picker.controller.input_date == CalendarDate(2022, 7, 5)


def test_destroy_removes_only_its_click_binding(root):
    other = root.bind("<Button-1>", lambda _e: None, add="+")
    picker = DatePicker(root, CalendarDate(2022, 7, 1))
    bind_id = picker._click_bind_id
    assert bind_id in root.bind("<Button-1>")

    picker.destroy()
    script = root.bind("<Button-1>")
    assert bind_id not in script
    assert other in script


def test_week_column_renders_at_last_datetime_year(root):
    picker = DatePicker(root, CalendarDate(9999, 11, 15))
    picker.controller.open_popup()
    picker._ensure_panel()
    picker._render_panel()
    assert picker._panel.title.cget("text") == "Dec 9999"
