import logging

import log_utils


def test_setup_file_logger_is_idempotent(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    name = "mini_date_picker_test"
    logger = log_utils.setup_file_logger(name=name)
    try:
        assert log_utils.setup_file_logger(name=name) is logger
        assert len(logger.handlers) == 1
        logger.info("hello")
        logger.handlers[0].flush()
        path = log_utils.log_path(name)
        assert path.parent == tmp_path / ".mini-date-picker" / "logs"
        assert "hello" in path.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_route_module_loggers(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    name = "mini_date_picker_route_test"
    log_utils.route_module_loggers(["picker_state_route_test"], name=name)
    app_logger = logging.getLogger(name)
    child = logging.getLogger("picker_state_route_test")
    try:
        assert child.handlers == app_logger.handlers
        assert child.propagate is False
    finally:
        for lg in (app_logger, child):
            for handler in list(lg.handlers):
                handler.close()
                lg.removeHandler(handler)
