"""Entry + popup calendar (tkinter) driven by PickerController."""

import tkinter as tk
from tkinter import font as tkfont
from typing import Callable

from calendar_logic import DAY_ABBR, GRID_COLS, GRID_ROWS, CalendarDate, DateCell, grid_weeks, iso_week_numbers
from cell_classifier import CellFlags
from date_codec import format_date
from picker_state import PickerController

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
WN_FG = "#888888"
MUTED_FG = "#AAAAAA"
DISABLED_BG = "#F0F0F0"
INVALID_BG = "#FFD6D6"


def _is_within(widget, parent: tk.Misc) -> bool:
    path, root = str(widget), str(parent)
    return path == root or path.startswith(root + ".")


class _PopupPanel:
    """Pre-allocated widget pool for the popup (header + 6 weeks)."""

    __slots__ = ("top", "title", "wk_header", "week_nums", "day_cells")

    def __init__(self, parent: tk.Misc, fonts: dict,
                 nav: dict[str, Callable[[], None]],
                 on_cell_click) -> None:
        self.top = tk.Toplevel(parent)
        self.top.wm_overrideredirect(True)
        self.top.wm_attributes("-topmost", True)
        self.top.withdraw()

        frame = tk.Frame(self.top, bg=GRID_BG, relief="solid", borderwidth=1,
                         padx=4, pady=4)
        frame.pack()

        # Navigation row: ◀◀  ◀  Aug 2022  Today  ▶  ▶▶
        header = tk.Frame(frame, bg=HEADER_BG)
        header.grid(row=0, column=0, columnspan=GRID_COLS + 1, sticky="we", pady=(0, 2))
        for text, key, side in (("◀◀", "prev_year", "left"),
                                ("◀", "prev_month", "left"),
                                ("▶▶", "next_year", "right"),
                                ("▶", "next_month", "right")):
            btn = tk.Label(header, text=text, font=fonts["nav"], bg=HEADER_BG,
                           cursor="hand2")
            btn.pack(side=side, padx=4)
            btn.bind("<Button-1>", lambda _e, cmd=nav[key]: cmd())

        self.title = tk.Label(header, font=fonts["header"], bg=HEADER_BG, fg="#333333")
        self.title.pack(side="left", expand=True)
        today_btn = tk.Label(header, text="Today", font=fonts["bold"], bg=HEADER_BG,
                             fg=ACCENT, cursor="hand2")
        today_btn.pack(side="left", padx=4)
        today_btn.bind("<Button-1>", lambda _e: nav["today"]())

        self.wk_header = tk.Label(frame, text="Wk", font=fonts["bold"], bg=GRID_BG,
                                  fg=WN_FG, width=3)
        self.wk_header.grid(row=1, column=0)
        for col, abbr in enumerate(DAY_ABBR):
            fg = "#CC0000" if col >= 5 else "#333333"
            tk.Label(frame, text=abbr, font=fonts["bold"], bg=GRID_BG, fg=fg,
                     width=3).grid(row=1, column=col + 1)

        self.week_nums: list[tk.Label] = []
        self.day_cells: list[tk.Label] = []
        for r in range(GRID_ROWS):
            wn = tk.Label(frame, font=fonts["wn"], bg=GRID_BG, fg=WN_FG, width=3)
            wn.grid(row=r + 2, column=0)
            self.week_nums.append(wn)
            for c in range(GRID_COLS):
                cell = tk.Label(frame, font=fonts["normal"], bg=GRID_BG, width=3)
                cell.grid(row=r + 2, column=c + 1, padx=1, pady=1)
                cell.bind("<Button-1>", on_cell_click)
                self.day_cells.append(cell)

    def contains(self, widget) -> bool:
        return _is_within(widget, self.top)


class DatePicker(tk.Frame):
    """Text entry (DD-MM-YYYY) with a popup month grid.

    Generates <<DateSelected>> whenever a new date is applied, from the
    grid or from the typed text.
    """

    def __init__(self, master, value: CalendarDate,
                 min_date: CalendarDate | None = None,
                 max_date: CalendarDate | None = None,
                 show_week_numbers: bool = True,
                 width: int = 12, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.controller = PickerController(value, min_date, max_date,
                                           on_change=self._on_change)
        self.show_week_numbers = show_week_numbers
        self._setup_fonts()

        self._syncing = False
        self._var = tk.StringVar(value=self.controller.input_text)
        self._var.trace_add("write", self._on_text)
        self.entry = tk.Entry(self, textvariable=self._var, width=width,
                              font=self.font_normal, relief="solid", borderwidth=1)
        self.entry.pack(side="left")
        self._entry_bg = self.entry.cget("bg")

        self.entry.bind("<Button-1>", self._on_entry_click)
        self.entry.bind("<Return>", self._on_return)
        self.entry.bind("<Escape>", self._on_escape)
        self._click_bind_id = self.winfo_toplevel().bind(
            "<Button-1>", self._on_outside_click, add="+")

        self._panel: _PopupPanel | None = None
        self._widget_cells: dict[int, DateCell] = {}

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_struck = tkfont.Font(family=base, size=9, overstrike=True)
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=11, weight="bold")
        self.font_wn = tkfont.Font(family=base, size=8)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_date(self) -> CalendarDate:
        return self.controller.value

    def set_date(self, value: CalendarDate) -> None:
        self.controller.set_value(value)
        self._sync()

    def set_bounds(self, min_date: CalendarDate | None,
                   max_date: CalendarDate | None) -> None:
        self.controller.set_bounds(min_date, max_date)
        self._sync()

    def set_show_week_numbers(self, show: bool) -> None:
        self.show_week_numbers = show
        self._sync()

    def close_popup(self) -> None:
        self.controller.close_popup()
        self._sync()

    def destroy(self) -> None:
        # Misc.unbind(seq, funcid) clears the whole sequence before 3.13, so
        # only our line is removed and other "+" bindings on the toplevel stay.
        top = self.winfo_toplevel()
        script = top.bind("<Button-1>")
        kept = [line for line in script.split("\n")
                if line and self._click_bind_id not in line]
        top.bind("<Button-1>", "\n".join(kept))
        top.deletecommand(self._click_bind_id)
        super().destroy()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_text(self, *_args) -> None:
        if self._syncing:
            return
        self.controller.set_input_text(self._var.get())
        self._sync()

    def _on_entry_click(self, _event: tk.Event) -> None:
        self.controller.open_popup()
        self._sync()

    def _on_return(self, _event: tk.Event) -> str:
        self.controller.commit()
        self._sync()
        return "break"

    def _on_escape(self, _event: tk.Event) -> str | None:
        if not self.controller.popup_open:
            return None
        self.close_popup()
        return "break"

    def _on_outside_click(self, event: tk.Event) -> None:
        widget = event.widget
        if _is_within(widget, self):
            return
        if self._panel is not None and self._panel.contains(widget):
            return
        c = self.controller
        if c.popup_open or self._var.get().strip() != self._formatted_value():
            c.commit()
            self._sync()

    def _on_cell_click(self, event: tk.Event) -> None:
        cell = self._widget_cells.get(id(event.widget))
        if cell is not None and self.controller.select_cell(cell):
            self._sync()

    def _on_change(self, _value: CalendarDate) -> None:
        self.event_generate("<<DateSelected>>")

    def _navigate(self, action: Callable[[], None]) -> Callable[[], None]:
        def run() -> None:
            action()
            self._render_panel()
        return run

    def _formatted_value(self) -> str:
        return format_date(self.controller.value)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _sync(self) -> None:
        c = self.controller
        if self._var.get() != c.input_text:
            self._syncing = True
            try:
                self._var.set(c.input_text)
            finally:
                self._syncing = False
        self.entry.configure(bg=self._entry_bg if c.input_is_valid else INVALID_BG)

        if c.popup_open:
            self._show_panel()
        elif self._panel is not None:
            self._panel.top.withdraw()

    def _ensure_panel(self) -> _PopupPanel:
        if self._panel is None:
            c = self.controller
            nav = {
                "prev_year": self._navigate(c.prev_year),
                "prev_month": self._navigate(c.prev_month),
                "next_month": self._navigate(c.next_month),
                "next_year": self._navigate(c.next_year),
                "today": self._navigate(c.go_today),
            }
            fonts = {
                "normal": self.font_normal, "bold": self.font_bold,
                "header": self.font_header, "nav": self.font_nav,
                "wn": self.font_wn,
            }
            self._panel = _PopupPanel(self, fonts, nav, self._on_cell_click)
        return self._panel

    def _show_panel(self) -> None:
        panel = self._ensure_panel()
        self._render_panel()
        self.update_idletasks()
        x = self.entry.winfo_rootx()
        y = self.entry.winfo_rooty() + self.entry.winfo_height() + 2
        panel.top.geometry(f"+{x}+{y}")
        panel.top.deiconify()
        panel.top.lift()

    def _render_panel(self) -> None:
        panel = self._panel
        if panel is None:
            return
        c = self.controller
        panel.title.configure(text=c.panel_title)
        self._widget_cells.clear()

        pairs = c.cells()
        weeks = iso_week_numbers([cell for cell, _flags in pairs])
        if self.show_week_numbers:
            panel.wk_header.grid()
        else:
            panel.wk_header.grid_remove()
        for r, row in enumerate(grid_weeks(pairs)):
            wn = panel.week_nums[r]
            if self.show_week_numbers:
                wn.configure(text=weeks[r])
                wn.grid()
            else:
                wn.grid_remove()
            for col, (cell, flags) in enumerate(row):
                label = panel.day_cells[r * GRID_COLS + col]
                bg, fg = self._cell_colors(flags, col >= 5)
                if not flags.in_range:
                    font = self.font_struck
                elif flags.today:
                    font = self.font_bold
                else:
                    font = self.font_normal
                label.configure(text=str(cell.day), bg=bg, fg=fg, font=font,
                                cursor="hand2" if flags.in_range else "")
                self._widget_cells[id(label)] = cell

    # ------------------------------------------------------------------
    # Day colour logic
    # ------------------------------------------------------------------
    @staticmethod
    def _cell_colors(flags: CellFlags, is_weekend: bool) -> tuple[str, str]:
        if not flags.in_range:
            return DISABLED_BG, MUTED_FG
        if flags.selected:
            return SEL_BG, "black"
        if flags.today:
            return ACCENT, "white"
        if not flags.current:
            return GRID_BG, MUTED_FG
        if is_weekend:
            return GRID_BG, "#CC0000"
        return GRID_BG, "black"
