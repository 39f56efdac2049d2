"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import logging
import threading

from app_window import PickerWindow
from icon_gen import create_icon_image
from log_utils import route_module_loggers, setup_file_logger
from tray_icon import create_tray


def main() -> None:
    logger = setup_file_logger()
    route_module_loggers(["app_window", "picker_state", "settings"])
    logger.info("Starting mini date picker")

    win = PickerWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        win.root.after(0, win.toggle)

    def on_copy() -> None:
        win.root.after(0, win.copy_date)

    def on_settings() -> None:
        win.root.after(0, win.open_settings)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            win.hide()
            win.root.destroy()
        win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit,
                       on_copy=on_copy, on_settings=on_settings)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    win.show()
    win.root.mainloop()
    logger.info("Exiting")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    main()
