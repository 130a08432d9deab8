"""Console and file logging for the gramstep command line."""

from typing import Optional
import logging
import sys

LOGGER_NAME = "gramstep"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Send package log records to stdout and, optionally, a file.

    Calling it again replaces the handlers from the previous call, so the
    CLI can be run repeatedly in one process without duplicated lines.
    The file, if given, is truncated.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file is not None:
        _attach(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)

    logger.debug("logging to stdout%s", f" and {log_file}" if log_file else "")
    return logger
