"""Small always-on-top window hosting the date picker."""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calendar_logic import CalendarDate
from date_codec import format_date, parse_date
from date_picker import GRID_BG, INVALID_BG, DatePicker
from settings import bounds_from_settings, load_settings, save_settings, store_date, value_from_settings

logger = logging.getLogger(__name__)


class PickerWindow:
    """Date picker window toggled from the tray icon."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title("Mini Date Picker")
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        settings = load_settings()
        min_date, max_date = bounds_from_settings(settings)
        value = value_from_settings(settings, CalendarDate.today())
        self._saved_x: int | None = settings["window_x"]
        self._saved_y: int | None = settings["window_y"]

        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=10, pady=8)

        tk.Label(outer, text="Date:", font=self.font_bold, bg=GRID_BG).pack(
            side="left", padx=(0, 6),
        )
        self.picker = DatePicker(
            outer, value, min_date, max_date,
            show_week_numbers=settings["show_week_numbers"], bg=GRID_BG,
        )
        self.picker.pack(side="left")
        self.picker.bind("<<DateSelected>>", self._on_date_selected)

        self._footer_label = tk.Label(
            self.root, text=self._footer_text(), font=self.font_footer,
            bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(pady=(0, 6))

        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    def _footer_text(self) -> str:
        text = f"Today: {format_date(CalendarDate.today())}"
        c = self.picker.controller
        if c.min_date or c.max_date:
            lo = format_date(c.min_date) if c.min_date else "…"
            hi = format_date(c.max_date) if c.max_date else "…"
            text += f"     Range: {lo} → {hi}"
        return text

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def _on_date_selected(self, _event: tk.Event) -> None:
        logger.info("Selected %s", format_date(self.picker.get_date()))
        self._persist()

    def copy_date(self) -> None:
        """Put the selected date on the clipboard as DD-MM-YYYY."""
        self.root.clipboard_clear()
        self.root.clipboard_append(format_date(self.picker.get_date()))

    def _on_escape(self, _event: tk.Event) -> None:
        self.hide()

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        c = self.picker.controller
        entries: dict[str, tk.Entry] = {}
        for row, (key, label, current) in enumerate((
            ("min_date", "Earliest date:", c.min_date),
            ("max_date", "Latest date:", c.max_date),
        )):
            tk.Label(frame, text=label, font=self.font_normal).grid(
                row=row, column=0, sticky="w", pady=4,
            )
            entry = tk.Entry(frame, width=12, font=self.font_normal)
            entry.insert(0, format_date(current) if current else "")
            entry.grid(row=row, column=1, padx=(8, 0), pady=4)
            entries[key] = entry

        tk.Label(frame, text="DD-MM-YYYY, empty for no limit", font=self.font_normal,
                 fg="#888888").grid(row=2, column=0, columnspan=2, sticky="w")

        weeks_var = tk.BooleanVar(value=self.picker.show_week_numbers)
        tk.Checkbutton(
            frame, text="Show week numbers", variable=weeks_var,
            font=self.font_normal,
        ).grid(row=3, column=0, columnspan=2, sticky="w", pady=4)

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=4, column=0, columnspan=2, pady=(8, 0))

        def on_ok() -> None:
            bounds: dict[str, CalendarDate | None] = {}
            for key, entry in entries.items():
                text = entry.get().strip()
                if not text:
                    bounds[key] = None
                    continue
                parsed = parse_date(text)
                if parsed is None:
                    entry.configure(bg=INVALID_BG)
                    return
                bounds[key] = parsed
            lo, hi = bounds["min_date"], bounds["max_date"]
            if lo is not None and hi is not None and lo > hi:
                entries["max_date"].configure(bg=INVALID_BG)
                return

            self.picker.set_bounds(lo, hi)
            self.picker.set_show_week_numbers(weeks_var.get())
            logger.info("Bounds set to %s .. %s",
                        format_date(lo) if lo else None, format_date(hi) if hi else None)
            self._persist()
            self._footer_label.configure(text=self._footer_text())
            dlg.destroy()

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    # ------------------------------------------------------------------
    # Persist state
    # ------------------------------------------------------------------
    def _persist(self) -> None:
        c = self.picker.controller
        settings = load_settings()
        store_date(settings, "min_date", c.min_date)
        store_date(settings, "max_date", c.max_date)
        store_date(settings, "last_value", c.value)
        settings["show_week_numbers"] = self.picker.show_week_numbers
        settings["window_x"] = self._saved_x
        settings["window_y"] = self._saved_y
        try:
            save_settings(settings)
        except OSError as exc:
            logger.warning("Could not save settings: %s", exc)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self._footer_label.configure(text=self._footer_text())
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.picker.close_popup()
        if self.root.winfo_viewable():
            self._saved_x = self.root.winfo_x()
            self._saved_y = self.root.winfo_y()
        self._persist()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right unless a position was saved
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        if self._saved_x is not None and self._saved_y is not None:
            self.root.geometry(f"+{self._saved_x}+{self._saved_y}")
            return
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"+{x}+{y}")
