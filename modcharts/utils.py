"""Utility functions for the chart helpers."""
import logging
from datetime import datetime

from modcharts.config import LOG_DIR, LOG_FORMAT, LOG_LEVEL


def _log_level() -> int:
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str = __name__) -> logging.Logger:
    """
    Return a logger writing to the console and to a dated file in LOG_DIR.

    Handlers are attached once per logger name, so repeated calls are safe.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = _log_level()
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)
    log_file = LOG_DIR / f"modcharts_{datetime.now().strftime('%Y%m%d')}.log"
    for handler in (logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler()):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
