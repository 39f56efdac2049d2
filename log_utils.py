import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

APP_LOGGER = "mini_date_picker"


def _logs_dir() -> Path:
    """Return ~/.mini-date-picker/logs, creating it if needed."""
    root = Path.home() / ".mini-date-picker" / "logs"
    root.mkdir(parents=True, exist_ok=True)
    return root


def log_path(name: str = APP_LOGGER) -> Path:
    safe = name.strip() or APP_LOGGER
    return _logs_dir() / f"{safe}.log"


def setup_file_logger(
    name: str = APP_LOGGER,
    level: int = logging.INFO,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Attach a rotating file handler writing to log_path(name).

    Calling this more than once returns the same logger without adding
    duplicate handlers.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = RotatingFileHandler(
        log_path(name),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def route_module_loggers(modules: list[str], name: str = APP_LOGGER) -> None:
    """Send the named modules' loggers to the app logger's handlers."""
    app_logger = setup_file_logger(name=name)
    for module in modules:
        child = logging.getLogger(module)
        child.setLevel(app_logger.level)
        for handler in app_logger.handlers:
            if handler not in child.handlers:
                child.addHandler(handler)
        child.propagate = False
