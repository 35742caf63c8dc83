import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from roundrobin import config

# the logger format used
LOG_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s | %(message)s"
PACKAGE_LOGGER = "roundrobin"


def _configure_package_logger() -> logging.Logger:
    """Attach the stdout and optional rotating file handlers to the package logger.

    Module loggers carry no handlers of their own and propagate here, so each
    record is written once.
    """
    lgr = logging.getLogger(PACKAGE_LOGGER)
    if lgr.handlers:
        return lgr

    lgr.setLevel(config.LOG_LEVEL.upper())
    lgr.propagate = False
    log_formatter = logging.Formatter(LOG_FMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    lgr.addHandler(console_handler)

    if config.LOG_FILE:
        folder = os.path.dirname(config.LOG_FILE)
        if folder:
            os.makedirs(folder, exist_ok=True)
        # Rotate to prevent unbounded log growth
        file_handler = RotatingFileHandler(
            config.LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(log_formatter)
        lgr.addHandler(file_handler)

    lgr.debug("logger %s initialized", PACKAGE_LOGGER)
    return lgr


def setup_logger(logger_name: str) -> logging.Logger:
    """Return the logger for a module, configuring the package logger on first use."""
    _configure_package_logger()
    return logging.getLogger(name=logger_name)
