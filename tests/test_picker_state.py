import pytest

from calendar_logic import CalendarDate, CellType, iso_week_numbers
from picker_state import PickerController

INITIAL = CalendarDate(2022, 7, 1)
TODAY = CalendarDate(2022, 7, 2)


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)


@pytest.fixture
def changes():
    return Recorder()


def make(changes, **kwargs):
    return PickerController(INITIAL, on_change=changes, clock=lambda: TODAY, **kwargs)


def test_shows_formatted_value(changes):
    c = make(changes)
    assert c.input_text == "01-08-2022"
    assert c.input_is_valid
    assert not c.popup_open


def test_popup_opens_and_closes_on_commit(changes):
    c = make(changes)
    c.open_popup()
    assert c.popup_open
    c.commit()
    assert not c.popup_open


def test_highlights_today_and_selected(changes):
    c = make(changes)
    c.open_popup()
    pairs = c.cells()
    assert len(pairs) == 42
    assert [cell.day for cell, flags in pairs if flags.today] == [2]
    assert [cell.day for cell, flags in pairs if flags.selected] == [1]


def test_select_cell(changes):
    c = make(changes)
    c.open_popup()
    cells = [cell for cell, _flags in c.cells() if cell.day == 15]
    assert len(cells) == 1

    assert c.select_cell(cells[0])
    assert not c.popup_open
    assert changes.calls == [CalendarDate(2022, 7, 15)]
    assert c.input_text == "15-08-2022"
    assert c.value == CalendarDate(2022, 7, 15)


def test_commit_applies_typed_date(changes):
    c = make(changes)
    c.set_input_text("31-08-2022")
    assert c.commit()
    assert changes.calls == [CalendarDate(2022, 7, 31)]


def test_commit_resets_invalid_text(changes):
    c = make(changes)
    c.set_input_text("32-08-2022")
    assert not c.input_is_valid
    assert not c.commit()
    assert changes.calls == []
    assert c.input_text == "01-08-2022"


def test_input_is_trimmed(changes):
    c = make(changes)
    c.set_input_text("  05-08-2022 ")
    assert c.input_text == "05-08-2022"
    assert c.input_date == CalendarDate(2022, 7, 5)


def test_panel_title_and_month_navigation(changes):
    c = make(changes)
    c.open_popup()
    assert c.panel_title == "Aug 2022"
    c.next_month()
    assert c.panel_title == "Sep 2022"
    c.next_month()
    assert c.panel_title == "Oct 2022"
    c.prev_month()
    c.prev_month()
    c.prev_month()
    assert c.panel_title == "Jul 2022"
    c.prev_month()
    assert c.panel_title == "Jun 2022"


def test_month_navigation_wraps_year(changes):
    c = PickerController(CalendarDate(2022, 11, 5), on_change=changes, clock=lambda: TODAY)
    c.next_month()
    assert c.panel_title == "Jan 2023"
    c.prev_month()
    c.prev_month()
    assert c.panel_title == "Nov 2022"


def test_year_navigation(changes):
    c = make(changes)
    c.next_year()
    assert c.panel_title == "Aug 2023"
    c.next_year()
    assert c.panel_title == "Aug 2024"
    c.prev_year()
    c.prev_year()
    c.prev_year()
    assert c.panel_title == "Aug 2021"


def test_go_today(changes):
    c = PickerController(CalendarDate(2010, 2, 3), on_change=changes, clock=lambda: TODAY)
    c.go_today()
    assert c.panel_title == "Aug 2022"
    assert changes.calls == []


def test_panel_follows_typed_date(changes):
    c = make(changes)
    c.open_popup()
    c.set_input_text("01-01-2022")
    assert c.panel_title == "Jan 2022"
    c.set_input_text("15-10-2002")
    assert c.panel_title == "Oct 2002"
    c.set_input_text("15-10-20")
    assert c.panel_title == "Oct 2002"


def test_reopening_resets_panel_to_value(changes):
    c = make(changes)
    c.open_popup()
    c.next_year()
    c.close_popup()
    c.open_popup()
    assert c.panel_title == "Aug 2022"


class TestBounds:
    MIN = CalendarDate(2022, 1, 1)
    MAX = CalendarDate(2022, 11, 31)

    def test_out_of_range_input_is_flagged(self, changes):
        c = make(changes, min_date=self.MIN, max_date=self.MAX)
        c.set_input_text("07-07-2023")
        assert not c.input_is_valid
        c.set_input_text("07-07-2021")
        assert not c.input_is_valid
        c.set_input_text("07-07-2022")
        assert c.input_is_valid

    def test_out_of_range_commit_keeps_text(self, changes):
        c = make(changes, min_date=self.MIN, max_date=self.MAX)
        c.set_input_text("07-07-2023")
        assert not c.commit()
        assert changes.calls == []
        assert c.input_text == "07-07-2023"
        assert c.value == INITIAL

    def test_out_of_range_text_does_not_move_panel(self, changes):
        c = make(changes, min_date=self.MIN, max_date=self.MAX)
        c.open_popup()
        c.set_input_text("07-07-2023")
        assert c.panel_title == "Aug 2022"

    def test_cells_out_of_range_are_disabled(self, changes):
        c = make(changes, min_date=self.MIN, max_date=self.MAX)
        c.open_popup()

        c.prev_year()
        pairs = c.cells()
        assert not any(flags.in_range for _cell, flags in pairs)
        for cell, _flags in pairs:
            assert not c.select_cell(cell)

        c.next_year()
        c.next_year()
        pairs = c.cells()
        assert not any(flags.in_range for _cell, flags in pairs)
        for cell, _flags in pairs:
            assert not c.select_cell(cell)

        assert changes.calls == []
        assert c.popup_open

    def test_adjacent_month_cell_can_be_selected(self, changes):
        c = make(changes, min_date=self.MIN, max_date=self.MAX)
        c.open_popup()
        cell = [cell for cell, _f in c.cells() if cell.type is CellType.NEXT][0]
        assert c.select_cell(cell)
        assert c.value == CalendarDate(2022, 8, 1)

    def test_set_bounds(self, changes):
        c = make(changes)
        c.set_bounds(self.MIN, CalendarDate(2022, 6, 31))
        assert not c.input_is_valid
        c.set_bounds(None, None)
        assert c.input_is_valid


def test_week_numbers_for_panel_at_last_datetime_year(changes):
    c = make(changes)
    c.open_popup()
    c.set_input_text("15-12-9999")
    assert c.panel_title == "Dec 9999"
    weeks = iso_week_numbers([cell for cell, _flags in c.cells()])
    assert len(weeks) == 6
    c.set_input_text("15-06-0000")
    assert c.panel_title == "Jun 0"
    assert iso_week_numbers([cell for cell, _flags in c.cells()]) == [""] * 6
