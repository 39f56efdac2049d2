"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import CalendarDate

ICON_SIZE = 64
_HEADER_H = 16
_HEADER_BG = "#0078D4"


def _fit_font(draw: ImageDraw.ImageDraw, text: str, max_w: int, max_h: int):
    """Largest bold font for *text* inside the box, or Pillow's default."""
    font_size = 80
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= max_w and bbox[3] - bbox[1] <= max_h:
            return font
        font_size -= 1
    return font


def create_icon_image(today: CalendarDate | None = None) -> Image.Image:
    """Return a 64×64 RGBA tear-off calendar page showing the day of month."""
    today = today or CalendarDate.today()
    size = ICON_SIZE
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, _HEADER_H - 1), fill=_HEADER_BG)
    draw.rectangle((0, 0, size - 1, size - 1), outline=_HEADER_BG)

    text = str(today.day)
    body_h = size - _HEADER_H
    font = _fit_font(draw, text, size - 8, body_h - 6)

    # Centre the visible pixels below the header (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = _HEADER_H + (body_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
