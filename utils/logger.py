"""
Logging configuration for the application.
"""
import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        color = self.COLORS.get(levelname, self.RESET)
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # other handlers see the same record
            record.levelname = levelname


def setup_logger(name: str) -> logging.Logger:
    """
    Set up an INFO-level logger writing colored lines to stdout.
    The level is adjusted later by set_log_level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)

    formatter = ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger


def set_log_level(level_name: str) -> None:
    """Apply a level name such as "DEBUG" to the application logger."""
    level = logging.getLevelName(level_name.upper())
    if isinstance(level, int):
        app_logger.setLevel(level)
    else:
        app_logger.warning(f"Unknown LOG_LEVEL '{level_name}', keeping {logging.getLevelName(app_logger.level)}")


app_logger = setup_logger("dinx")
