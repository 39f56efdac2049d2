from calendar_logic import CalendarDate
from icon_gen import ICON_SIZE, create_icon_image


def test_icon_size_and_header():
    img = create_icon_image(CalendarDate(2022, 7, 15))
    assert img.size == (ICON_SIZE, ICON_SIZE)
    assert img.mode == "RGBA"
    assert img.getpixel((5, 5)) == (0, 120, 212, 255)


def test_icon_draws_day_number():
    img = create_icon_image(CalendarDate(2022, 7, 15))
    body = img.convert("L").crop((2, 18, ICON_SIZE - 2, ICON_SIZE - 2))
    darkest, _lightest = body.getextrema()
    assert darkest < 128
