import logging

import pytest

from utils.logger import ColoredFormatter, app_logger, set_log_level, setup_logger


@pytest.fixture(autouse=True)
def restore_level():
    original = app_logger.level
    app_logger.setLevel(logging.INFO)
    yield
    app_logger.setLevel(original)


def test_set_log_level_applies_known_level():
    set_log_level("debug")

    assert app_logger.level == logging.DEBUG


def test_set_log_level_keeps_level_for_unknown_name(caplog):
    set_log_level("chatty")

    assert app_logger.level == logging.INFO
    assert "Unknown LOG_LEVEL 'chatty'" in caplog.text


def test_setup_logger_is_idempotent():
    """Given an already configured logger, setup_logger should not add a second handler."""
    assert setup_logger("dinx") is app_logger
    assert len(app_logger.handlers) == 1
    assert isinstance(app_logger.handlers[0].formatter, ColoredFormatter)


def test_colored_formatter_leaves_record_levelname_untouched():
    formatter = ColoredFormatter('%(levelname)s - %(message)s')
    record = logging.LogRecord("dinx", logging.ERROR, __file__, 1, "boom", None, None)

    line = formatter.format(record)

    assert line == "\033[31mERROR\033[0m - boom"
    assert record.levelname == "ERROR"
